"""
Domain queries over the triple store.

Every query is a read-only projection of the current triples. Malformed
domain data (an Entanglement without a target, a link to a Construct that
does not exist) is left out of the results rather than reported as an
error, because the Turtle comes from externally authored content.
"""

import logging
from typing import Iterable, List, Optional

from rdflib import Literal, URIRef

from .models import Character, Construct, Entanglement, GraphEdge, GraphNode, Gloss, NetworkGraph
from .rdf.terms import Subject, Vocabulary, local_name, term_text
from .store import TripleStore

logger = logging.getLogger(__name__)


def _distinct(values: Iterable[str]) -> List[str]:
    seen = set()
    result = []
    for value in values:
        if value not in seen:
            seen.add(value)
            result.append(value)
    return result


class QueryEngine:
    """
    Answers the fixed set of domain queries.

    Args:
        store: Store to read from. The engine never writes to it.
        vocabulary: IRIs of the ontology terms.
        default_language: Language reported for glosses without a tag.
        default_relationship_type: Used when an Entanglement has no
            ``sn:relationshipType``.
    """

    def __init__(
        self,
        store: TripleStore,
        vocabulary: Optional[Vocabulary] = None,
        default_language: str = "en",
        default_relationship_type: str = "related",
    ):
        self.store = store
        self.vocab = vocabulary or Vocabulary()
        self.default_language = default_language
        self.default_relationship_type = default_relationship_type

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _instances(self, rdf_class: URIRef) -> List[URIRef]:
        """IRI subjects typed ``rdf_class``, once each, in discovery order."""
        return [s for s in self.store.subjects(self.vocab.type, rdf_class) if isinstance(s, URIRef)]

    def _is_instance(self, subject: Subject, rdf_class: URIRef) -> bool:
        return next(self.store.triples(subject, self.vocab.type, rdf_class), None) is not None

    def _text(self, subject: Subject, predicate: URIRef) -> Optional[str]:
        value = self.store.value(subject, predicate)
        return None if value is None else term_text(value)

    def _first_iri(self, subject: Subject, predicate: URIRef) -> Optional[URIRef]:
        for obj in self.store.objects(subject, predicate):
            if isinstance(obj, URIRef):
                return obj
        return None

    def _direct_relationships(self, subject: Subject) -> List[str]:
        """IRI objects of the subject's non-descriptive triples."""
        return _distinct(
            str(t.object)
            for t in self.store.triples(subject, None, None)
            if t.predicate not in self.vocab.descriptive_predicates and isinstance(t.object, URIRef)
        )

    def _glosses(self, construct: URIRef) -> List[Gloss]:
        glosses = []
        for index, obj in enumerate(self.store.objects(construct, self.vocab.has_gloss), 1):
            language = obj.language if isinstance(obj, Literal) and obj.language else self.default_language
            glosses.append(Gloss(
                id=f"{construct}#gloss-{index}",
                text=term_text(obj),
                language=language,
            ))
        return glosses

    def _entanglement(self, subject: URIRef) -> Optional[Entanglement]:
        """Build an Entanglement, or None when either end does not resolve to a Construct."""
        source = self._first_iri(subject, self.vocab.has_source)
        target = self._first_iri(subject, self.vocab.has_target)
        if source is None or target is None:
            logger.debug(f"Skipping entanglement {subject}: missing source or target")
            return None
        if not (self._is_instance(source, self.vocab.construct)
                and self._is_instance(target, self.vocab.construct)):
            logger.debug(f"Skipping entanglement {subject}: dangling reference")
            return None
        return Entanglement(
            id=str(subject),
            label=self._text(subject, self.vocab.label) or "",
            source=str(source),
            target=str(target),
            relationship_type=self._text(subject, self.vocab.relationship_type)
            or self.default_relationship_type,
            description=self._text(subject, self.vocab.comment),
        )

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def query_constructs(self) -> List[Construct]:
        """Every ``sn:Construct`` with its label, description, glosses and related IRIs."""
        constructs = [
            Construct(
                id=str(subject),
                label=self._text(subject, self.vocab.label) or "",
                description=self._text(subject, self.vocab.comment),
                glosses=self._glosses(subject),
                relationships=self._direct_relationships(subject),
            )
            for subject in self._instances(self.vocab.construct)
        ]
        logger.debug(f"Found {len(constructs)} constructs")
        return constructs

    def query_entanglements(self) -> List[Entanglement]:
        """Every resolvable ``sn:Entanglement``."""
        entanglements = []
        for subject in self._instances(self.vocab.entanglement):
            entanglement = self._entanglement(subject)
            if entanglement is not None:
                entanglements.append(entanglement)
        logger.debug(f"Found {len(entanglements)} entanglements")
        return entanglements

    def find_relationships(self, construct_id: str) -> List[str]:
        """
        IRIs connected to ``construct_id``.

        Covers the far end of every resolvable Entanglement in which the
        construct is the source or the target, then the IRI objects of the
        construct's own non-descriptive triples. An unknown id gives an
        empty list.
        """
        construct = URIRef(construct_id)
        if not self.store.has_subject(construct):
            return []

        related = []
        for predicate, far_end in (
            (self.vocab.has_source, "target"),
            (self.vocab.has_target, "source"),
        ):
            for link in self.store.subjects(predicate, construct):
                if not isinstance(link, URIRef) or not self._is_instance(link, self.vocab.entanglement):
                    continue
                entanglement = self._entanglement(link)
                if entanglement is None:
                    continue
                # Only count links where this construct is the resolved end
                near = entanglement.source if far_end == "target" else entanglement.target
                if near == construct_id:
                    related.append(getattr(entanglement, far_end))

        related.extend(self._direct_relationships(construct))
        return _distinct(related)

    def query_characters(self) -> List[Character]:
        """Every ``sn:Character`` with the Constructs it is linked to."""
        characters = [
            Character(
                id=str(subject),
                name=self._text(subject, self.vocab.label) or "",
                description=self._text(subject, self.vocab.comment),
                constructs=_distinct(
                    str(obj)
                    for obj in self.store.objects(subject, self.vocab.has_construct)
                    if isinstance(obj, URIRef)
                ),
            )
            for subject in self._instances(self.vocab.character)
        ]
        logger.debug(f"Found {len(characters)} characters")
        return characters

    def generate_network_graph(self) -> NetworkGraph:
        """
        Project constructs, characters and entanglements into nodes and edges.

        Unlabelled nodes fall back to the local name of their IRI.
        """
        nodes = [
            GraphNode(id=c.id, label=c.label or local_name(c.id), node_type="construct")
            for c in self.query_constructs()
        ]
        seen = {node.id for node in nodes}
        for character in self.query_characters():
            if character.id in seen:
                continue
            seen.add(character.id)
            nodes.append(GraphNode(
                id=character.id,
                label=character.name or local_name(character.id),
                node_type="character",
            ))

        edges = [
            GraphEdge(source=e.source, target=e.target, label=e.relationship_type)
            for e in self.query_entanglements()
        ]
        return NetworkGraph(nodes=nodes, edges=edges)
