"""
Semantic Processor

Owns one triple store and exposes loading, the domain queries and export.
Each instance is independent: hosts create one per page, request or test
and pass it around explicitly.

Usage:
    processor = SemanticProcessor()
    processor.load_turtle(ontology_ttl)
    constructs = processor.query_constructs()
    graph = processor.generate_network_graph()
"""

import logging
from typing import List, Optional, Union

from rdflib import Graph, URIRef

from .config import ProcessorConfig
from .exceptions import ParseError
from .models import Character, Construct, Entanglement, NetworkGraph
from .query import QueryEngine
from .rdf.memory import MemoryManager
from .rdf.parser import parse_turtle
from .rdf.terms import Vocabulary
from .rdf.writer import TurtleWriter
from .store import TripleStore
from .validation import ValidationResult, validate_store

logger = logging.getLogger(__name__)


class SemanticProcessor:
    """
    In-memory semantic graph engine.

    Loading is all-or-nothing: the whole document is parsed before any
    triple reaches the store, so a ParseError leaves earlier data untouched.
    Queries never modify the store.

    Args:
        config: Processor settings; defaults to ``ProcessorConfig()``.
    """

    def __init__(self, config: Optional[ProcessorConfig] = None):
        self.config = config or ProcessorConfig()
        self.vocabulary = Vocabulary(self.config.ontology_namespace)
        self.store = TripleStore()
        self.engine = QueryEngine(
            self.store,
            self.vocabulary,
            default_language=self.config.default_language,
            default_relationship_type=self.config.default_relationship_type,
        )
        self._documents_loaded = 0

    def load_turtle(self, text: Union[str, bytes], base_iri: Optional[str] = None) -> int:
        """
        Parse a Turtle document and append its triples to the store.

        Args:
            text: Turtle source.
            base_iri: Base IRI for relative IRIs in the document.

        Returns:
            Number of triples added.

        Raises:
            ParseError: If the text is not valid Turtle, or is not text at all.
                The store is unchanged.
            MemoryError: If the document is too large to load safely.
        """
        if not isinstance(text, (str, bytes)):
            raise ParseError(f"Turtle input must be str or bytes, got {type(text).__name__}")
        raw_size = len(text) if isinstance(text, bytes) else len(text.encode("utf-8"))
        content_size_mb = raw_size / (1024 * 1024)

        can_proceed, memory_message = MemoryManager.check_memory_available(
            content_size_mb,
            force=self.config.force_large_content,
            max_content_mb=self.config.max_content_mb,
        )
        if not can_proceed:
            logger.error(f"Memory check failed: {memory_message}")
            raise MemoryError(memory_message)
        if memory_message.startswith("WARNING"):
            logger.warning(memory_message)
        else:
            logger.debug(f"Memory check: {memory_message}")

        # A fresh scope keeps blank node labels of separate documents apart
        self._documents_loaded += 1
        scope = f"d{self._documents_loaded}"
        try:
            triples = parse_turtle(text, base_iri=base_iri, bnode_scope=scope)
        except ParseError as e:
            logger.error(f"Failed to load Turtle: {e}")
            raise

        added = self.store.load(triples)
        if added == 0:
            logger.warning("Turtle document contained no triples")
        logger.info(f"Loaded {added} triples ({self.store.triple_count()} total)")
        MemoryManager.log_memory_status("After load")
        return added

    def query_constructs(self) -> List[Construct]:
        return self.engine.query_constructs()

    def query_entanglements(self) -> List[Entanglement]:
        return self.engine.query_entanglements()

    def find_relationships(self, construct_id: str) -> List[str]:
        return self.engine.find_relationships(construct_id)

    def query_characters(self) -> List[Character]:
        return self.engine.query_characters()

    def generate_network_graph(self) -> NetworkGraph:
        return self.engine.generate_network_graph()

    def triple_count(self) -> int:
        return self.store.triple_count()

    def clear(self) -> None:
        """Remove all loaded data."""
        self.store.clear()
        logger.info("Cleared triple store")

    # ------------------------------------------------------------------
    # Export and diagnostics
    # ------------------------------------------------------------------

    def _writer(self) -> TurtleWriter:
        prefixes = {"sn": self.config.ontology_namespace}
        prefixes.update(self.config.prefixes)
        return TurtleWriter(prefixes)

    def export_turtle(self) -> str:
        """Serialize the whole store as Turtle, keeping duplicate triples."""
        return self._writer().serialize(self.store)

    def construct_to_turtle(self, construct_id: str) -> str:
        """
        Serialize the triples describing one construct.

        Returns an empty string when no triple has ``construct_id`` as subject.
        """
        triples = list(self.store.triples(URIRef(construct_id), None, None))
        if not triples:
            return ""
        return self._writer().serialize(triples)

    def to_graph(self) -> Graph:
        """Copy the store into an rdflib Graph with the configured prefixes bound."""
        graph = self.store.to_graph()
        graph.bind("sn", self.config.ontology_namespace)
        for prefix, namespace in self.config.prefixes.items():
            graph.bind(prefix, namespace)
        return graph

    def validate(self, source_path: Optional[str] = None) -> ValidationResult:
        return validate_store(self.store, self.vocabulary, source_path=source_path)
