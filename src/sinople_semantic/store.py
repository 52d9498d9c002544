"""
In-memory triple store.

Triples are kept in load order in a single list (a multiset: duplicates are
retained). Three indices map each subject, predicate and object to the
positions of the triples that use it, so lookups only touch the triples
that can match.
"""

import logging
from collections import defaultdict
from typing import Dict, Iterable, Iterator, List, Optional

from rdflib import Graph

from .rdf.terms import Object, Subject, Triple

logger = logging.getLogger(__name__)


class TripleStore:
    """
    Multiset of triples with subject, predicate and object indices.

    Example:
        >>> store = TripleStore()
        >>> store.load(parse_turtle(ttl))
        >>> list(store.objects(subject, RDFS.label))
    """

    def __init__(self) -> None:
        self._triples: List[Triple] = []
        self._by_subject: Dict[Subject, List[int]] = defaultdict(list)
        self._by_predicate: Dict[object, List[int]] = defaultdict(list)
        self._by_object: Dict[Object, List[int]] = defaultdict(list)

    def load(self, triples: Iterable[Triple]) -> int:
        """
        Append triples to the store.

        Args:
            triples: Triples to add, in order.

        Returns:
            Number of triples added.
        """
        batch = [t if isinstance(t, Triple) else Triple(*t) for t in triples]
        start = len(self._triples)
        self._triples.extend(batch)
        for position, triple in enumerate(batch, start):
            self._by_subject[triple.subject].append(position)
            self._by_predicate[triple.predicate].append(position)
            self._by_object[triple.object].append(position)
        logger.debug(f"Loaded {len(batch)} triples (store now holds {len(self._triples)})")
        return len(batch)

    def clear(self) -> None:
        """Remove every triple and reset the indices."""
        self._triples = []
        self._by_subject = defaultdict(list)
        self._by_predicate = defaultdict(list)
        self._by_object = defaultdict(list)

    def triple_count(self) -> int:
        return len(self._triples)

    def __len__(self) -> int:
        return len(self._triples)

    def __iter__(self) -> Iterator[Triple]:
        return iter(list(self._triples))

    def __contains__(self, triple: object) -> bool:
        if not isinstance(triple, tuple) or len(triple) != 3:
            return False
        return next(self.triples(*triple), None) is not None

    def has_subject(self, subject: Subject) -> bool:
        return subject in self._by_subject

    def triples(
        self,
        subject: Optional[Subject] = None,
        predicate: Optional[object] = None,
        obj: Optional[Object] = None,
    ) -> Iterator[Triple]:
        """
        Yield triples matching a pattern, in load order.

        ``None`` acts as a wildcard. The shortest index among the bound
        positions drives the scan; the other bound terms filter it.
        """
        candidates = []
        if subject is not None:
            candidates.append(self._by_subject.get(subject, []))
        if predicate is not None:
            candidates.append(self._by_predicate.get(predicate, []))
        if obj is not None:
            candidates.append(self._by_object.get(obj, []))

        if not candidates:
            yield from list(self._triples)
            return

        positions = min(candidates, key=len)
        for position in list(positions):
            triple = self._triples[position]
            if subject is not None and triple.subject != subject:
                continue
            if predicate is not None and triple.predicate != predicate:
                continue
            if obj is not None and triple.object != obj:
                continue
            yield triple

    def objects(self, subject: Subject, predicate: object) -> Iterator[Object]:
        for triple in self.triples(subject, predicate, None):
            yield triple.object

    def value(self, subject: Subject, predicate: object) -> Optional[Object]:
        """First object for ``(subject, predicate)`` in load order, or None."""
        return next(self.objects(subject, predicate), None)

    def subjects(self, predicate: object, obj: Object) -> List[Subject]:
        """Distinct subjects having ``(predicate, obj)``, in discovery order."""
        seen = set()
        result = []
        for triple in self.triples(None, predicate, obj):
            if triple.subject not in seen:
                seen.add(triple.subject)
                result.append(triple.subject)
        return result

    def to_graph(self) -> Graph:
        """
        Copy the store into an rdflib Graph.

        The Graph has set semantics, so duplicate triples collapse into one.
        """
        graph = Graph()
        for triple in self._triples:
            graph.add(triple)
        return graph
