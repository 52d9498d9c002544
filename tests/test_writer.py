"""
Tests for Turtle output.
"""

import pytest
from rdflib import BNode, Literal, RDF, URIRef, XSD

from conftest import EX, SN
from sinople_semantic.exceptions import SerializationError
from sinople_semantic.rdf import Triple, TurtleWriter, parse_turtle


@pytest.mark.unit
class TestFormatTerm:

    def test_prefixed_names(self):
        writer = TurtleWriter({"sn": SN})
        assert writer.format_term(URIRef(SN + "Construct")) == "sn:Construct"
        assert writer.format_term(URIRef("http://other.org/x")) == "<http://other.org/x>"

    def test_longest_namespace_wins(self):
        writer = TurtleWriter({"ex": EX, "exa": EX + "a/"})
        assert writer.format_term(URIRef(EX + "a/b")) == "exa:b"

    def test_blank_node(self):
        assert TurtleWriter().format_term(BNode("x1")) == "_:x1"

    def test_language_literal(self):
        assert TurtleWriter().format_term(Literal("hola", lang="es")) == '"hola"@es'

    def test_typed_literal_uses_xsd_prefix(self):
        assert TurtleWriter().format_term(Literal("5", datatype=XSD.integer)) == '"5"^^xsd:integer'

    def test_iri_without_turtle_form(self):
        with pytest.raises(SerializationError):
            TurtleWriter().format_term(URIRef(EX + "x> . <evil"))


@pytest.mark.unit
class TestSerialize:

    def test_rdf_type_is_a_only_as_predicate(self):
        writer = TurtleWriter({"ex": EX})
        output = writer.serialize([
            Triple(URIRef(EX + "s"), RDF.type, URIRef(EX + "C")),
            Triple(URIRef(EX + "s"), URIRef(EX + "p"), RDF.type),
        ])
        assert "ex:s a ex:C ;" in output
        assert "ex:p rdf:type ." in output

    def test_groups_by_subject(self):
        writer = TurtleWriter({"ex": EX})
        output = writer.serialize([
            Triple(URIRef(EX + "a"), URIRef(EX + "p"), Literal("1")),
            Triple(URIRef(EX + "b"), URIRef(EX + "p"), Literal("2")),
            Triple(URIRef(EX + "a"), URIRef(EX + "q"), Literal("3")),
        ])
        assert output.count("ex:a ") == 1
        assert output.count("ex:b ") == 1

    def test_duplicates_are_written_per_occurrence(self):
        triple = Triple(URIRef(EX + "a"), URIRef(EX + "p"), URIRef(EX + "b"))
        assert parse_turtle(TurtleWriter().serialize([triple, triple])) == [triple, triple]

    def test_hostile_literal_survives_round_trip(self):
        text = 'quote " backslash \\ newline \n tab \t """ end'
        triple = Triple(URIRef(EX + "s"), URIRef(EX + "p"), Literal(text))
        output = TurtleWriter().serialize([triple])
        assert parse_turtle(output) == [triple]

    def test_language_and_datatype_round_trip(self):
        triples = [
            Triple(URIRef(EX + "s"), URIRef(EX + "p"), Literal("bonjour", lang="fr")),
            Triple(URIRef(EX + "s"), URIRef(EX + "p"), Literal("7", datatype=XSD.integer)),
        ]
        assert parse_turtle(TurtleWriter().serialize(triples)) == triples

    def test_blank_nodes_round_trip(self):
        triples = parse_turtle(f'@prefix ex: <{EX}> .\n_:x ex:p _:y .\n_:y ex:q "v" .')
        assert parse_turtle(TurtleWriter().serialize(triples)) == triples

    def test_empty_input_writes_prefixes_only(self):
        output = TurtleWriter().serialize([])
        assert parse_turtle(output) == []
        assert "@prefix rdf:" in output
