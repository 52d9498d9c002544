"""
RDF term and vocabulary definitions.

Terms are rdflib's own classes: ``URIRef`` for IRIs, ``BNode`` for blank
nodes and ``Literal`` for literal values (rdflib refuses a literal carrying
both a language tag and a datatype).
"""

from typing import NamedTuple, Union

from rdflib import BNode, Literal, Namespace, RDF, RDFS, URIRef

from ..config import DEFAULT_ONTOLOGY_NAMESPACE

Subject = Union[URIRef, BNode]
Object = Union[URIRef, BNode, Literal]


class Triple(NamedTuple):
    """A single subject/predicate/object statement."""
    subject: Subject
    predicate: URIRef
    object: Object


class Vocabulary:
    """
    IRIs used by the domain queries.

    The ``sn:`` terms live in a configurable namespace so that documents
    published under ``http://`` and ``https://`` variants of the ontology
    can both be served.
    """

    def __init__(self, namespace: str = DEFAULT_ONTOLOGY_NAMESPACE):
        self.namespace = Namespace(namespace)
        sn = self.namespace

        self.type = RDF.type
        self.label = RDFS.label
        self.comment = RDFS.comment

        self.construct = sn.Construct
        self.entanglement = sn.Entanglement
        self.character = sn.Character
        self.has_gloss = sn.hasGloss
        self.has_source = sn.hasSource
        self.has_target = sn.hasTarget
        self.relationship_type = sn.relationshipType
        self.has_construct = sn.hasConstruct

        self.descriptive_predicates = frozenset(
            [self.type, self.label, self.comment, self.has_gloss]
        )

    def __repr__(self) -> str:
        return f"Vocabulary({str(self.namespace)!r})"


def local_name(iri: str) -> str:
    """Return the fragment of an IRI, or its last path segment."""
    iri = str(iri)
    if "#" in iri:
        name = iri.rsplit("#", 1)[-1]
        if name:
            return name
    stripped = iri.rstrip("/")
    if "/" in stripped:
        return stripped.rsplit("/", 1)[-1]
    return iri


def term_text(term: Object) -> str:
    """Plain string value of a term: the IRI, the lexical form, or ``_:id``."""
    if isinstance(term, BNode):
        return f"_:{term}"
    return str(term)
