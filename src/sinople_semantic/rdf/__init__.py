"""
RDF support: terms, the Turtle parser and the Turtle writer.

Usage:
    from sinople_semantic.rdf import parse_turtle, TurtleWriter

    triples = parse_turtle(ttl_text)
    print(TurtleWriter().serialize(triples))
"""

from .terms import Triple, Vocabulary, local_name, term_text
from .parser import RecordingStore, parse_turtle
from .writer import DEFAULT_PREFIXES, TurtleWriter
from .memory import MemoryManager

__all__ = [
    "Triple",
    "Vocabulary",
    "local_name",
    "term_text",
    "RecordingStore",
    "parse_turtle",
    "DEFAULT_PREFIXES",
    "TurtleWriter",
    "MemoryManager",
]
