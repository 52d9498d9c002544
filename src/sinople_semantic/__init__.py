"""
Semantic graph engine for the Sinople ontology.

Loads Turtle documents into an in-memory triple store and answers the
domain queries used by theme templates and the graph viewer.
"""

__version__ = "1.0.0"

from .config import ProcessorConfig, load_config
from .exceptions import ConfigError, ParseError, SemanticError, SerializationError
from .models import (
    Character,
    Construct,
    Entanglement,
    GraphEdge,
    GraphNode,
    Gloss,
    NetworkGraph,
)
from .processor import SemanticProcessor
from .query import QueryEngine
from .rdf import Triple, TurtleWriter, Vocabulary, parse_turtle
from .store import TripleStore
from .validation import ValidationResult, validate_store, validate_turtle

__all__ = [
    # Engine
    "SemanticProcessor",
    "QueryEngine",
    "TripleStore",
    "ProcessorConfig",
    "load_config",
    # RDF
    "Triple",
    "Vocabulary",
    "parse_turtle",
    "TurtleWriter",
    # Records
    "Construct",
    "Entanglement",
    "Character",
    "Gloss",
    "GraphNode",
    "GraphEdge",
    "NetworkGraph",
    # Validation
    "ValidationResult",
    "validate_store",
    "validate_turtle",
    # Errors
    "SemanticError",
    "ParseError",
    "SerializationError",
    "ConfigError",
]
