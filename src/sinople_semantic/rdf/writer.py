"""
Turtle output.

Terms are rendered by rdflib (``term.n3()``) against a namespace manager
bound to the configured prefixes, so literal and IRI escaping follow
rdflib's Turtle rules. The writer only adds subject grouping and keeps
duplicate triples, which rdflib's own serializer would drop.
"""

from collections import OrderedDict
from typing import Dict, Iterable, List, Optional

from rdflib import Graph, RDF, RDFS, URIRef, XSD
from rdflib.namespace import NamespaceManager

from ..exceptions import SerializationError
from .terms import Object, Triple

DEFAULT_PREFIXES = {
    "rdf": str(RDF),
    "rdfs": str(RDFS),
    "xsd": str(XSD),
}


class TurtleWriter:
    """
    Renders triples as Turtle, grouped by subject.

    Duplicate triples are written once per occurrence so that loading the
    output again reproduces the same triple count.

    Raises:
        SerializationError: From ``format_term``/``serialize`` when a term
            has no Turtle form, such as an IRI containing spaces.
    """

    def __init__(self, prefixes: Optional[Dict[str, str]] = None):
        self.prefixes: Dict[str, str] = dict(DEFAULT_PREFIXES)
        if prefixes:
            self.prefixes.update(prefixes)
        self.namespace_manager = NamespaceManager(Graph(), bind_namespaces="none")
        for prefix, namespace in self.prefixes.items():
            self.namespace_manager.bind(prefix, URIRef(namespace), override=True, replace=True)

    def format_term(self, term: Object) -> str:
        try:
            return term.n3(self.namespace_manager)
        except Exception as e:
            raise SerializationError(f"Cannot write {term!r} as Turtle: {e}")

    def _format_predicate(self, predicate: URIRef) -> str:
        if predicate == RDF.type:
            return "a"
        return self.format_term(predicate)

    def _prefix_lines(self) -> List[str]:
        lines = []
        for prefix, namespace in sorted(self.prefixes.items()):
            try:
                iri = URIRef(namespace).n3()
            except Exception as e:
                raise SerializationError(f"Cannot write prefix '{prefix}': {e}")
            lines.append(f"@prefix {prefix}: {iri} .")
        return lines

    def serialize(self, triples: Iterable[Triple]) -> str:
        grouped: "OrderedDict[object, List[Triple]]" = OrderedDict()
        for triple in triples:
            grouped.setdefault(triple.subject, []).append(triple)

        lines = self._prefix_lines()
        for subject, statements in grouped.items():
            lines.append("")
            parts = [
                f"{self._format_predicate(t.predicate)} {self.format_term(t.object)}"
                for t in statements
            ]
            lines.append(f"{self.format_term(subject)} " + " ;\n    ".join(parts) + " .")
        return "\n".join(lines) + "\n"
