"""
Turtle Parser Module

Parses Turtle with rdflib's Turtle parser. Parsing goes through a recording
store instead of an rdflib ``Graph``'s default store, so the triple sequence
keeps document order and duplicate statements that a set-based store would
collapse.

Blank node identifiers are renamed after parsing to ``<scope>b<n>`` in
order of first appearance, so the same text and scope always give the same
triples and separate loads can be kept apart by scope.
"""

import logging
from typing import Dict, List, Optional, Union

from rdflib import BNode, Graph
from rdflib.store import Store

from ..exceptions import ParseError
from .terms import Object, Triple

logger = logging.getLogger(__name__)


class RecordingStore(Store):
    """
    rdflib store that records every added triple in order.

    Nothing is deduplicated and nothing can be queried back; the store only
    exists to receive the parser's output.
    """

    def __init__(self) -> None:
        super().__init__()
        self.triples: List[Triple] = []

    def add(self, triple, context=None, quoted=False) -> None:
        self.triples.append(Triple(*triple))


def _scope_blank_nodes(triples: List[Triple], scope: str) -> List[Triple]:
    renamed: Dict[BNode, BNode] = {}

    def rename(term: Object) -> Object:
        if not isinstance(term, BNode):
            return term
        node = renamed.get(term)
        if node is None:
            node = BNode(f"{scope}b{len(renamed) + 1}")
            renamed[term] = node
        return node

    return [Triple(rename(s), p, rename(o)) for s, p, o in triples]


def parse_turtle(
    text: Union[str, bytes],
    base_iri: Optional[str] = None,
    bnode_scope: str = "",
) -> List[Triple]:
    """
    Parse Turtle text into an ordered list of triples.

    Args:
        text: Turtle document, as ``str`` or UTF-8 encoded ``bytes``.
        base_iri: Base IRI for resolving relative IRIs.
        bnode_scope: Prefix for blank node identifiers.

    Returns:
        Triples in document order, duplicates included. Empty input yields
        an empty list.

    Raises:
        ParseError: If the text is not valid Turtle.
    """
    if isinstance(text, bytes):
        try:
            text = text.decode("utf-8")
        except UnicodeDecodeError as e:
            raise ParseError(f"input is not valid UTF-8: {e}")
    if text.startswith("\ufeff"):
        text = text[1:]

    store = RecordingStore()
    try:
        Graph(store=store).parse(data=text, format="turtle", publicID=base_iri)
    except RecursionError:
        raise ParseError("document is nested too deeply to parse")
    except Exception as e:
        # rdflib reports syntax errors as BadSyntax, and some as AssertionError
        lines = getattr(e, "lines", None)
        line = lines + 1 if isinstance(lines, int) else None
        raise ParseError(str(e).strip() or type(e).__name__, line=line)

    triples = _scope_blank_nodes(store.triples, bnode_scope)
    logger.debug(f"Parsed {len(triples)} triples from {len(text)} characters of Turtle")
    return triples
