"""
Integration tests for SemanticProcessor: loading lifecycle, accumulation,
all-or-nothing loads and export.
"""

from collections import Counter
from unittest.mock import patch

import pytest
from rdflib import Graph, URIRef

from conftest import EX, SN
from sinople_semantic import ParseError, ProcessorConfig, SemanticProcessor, parse_turtle


@pytest.mark.integration
class TestLifecycle:

    def test_new_processor_is_empty(self, processor):
        assert processor.triple_count() == 0
        assert processor.query_constructs() == []

    def test_triple_count_matches_document(self, processor, time_space_ttl):
        added = processor.load_turtle(time_space_ttl)
        assert added == 11
        assert processor.triple_count() == 11

    def test_duplicate_triples_are_retained(self, processor, prefixes):
        processor.load_turtle(prefixes + "ex:a ex:p ex:b .\nex:a ex:p ex:b .")
        assert processor.triple_count() == 2

    def test_empty_document_is_valid(self, processor):
        assert processor.load_turtle("") == 0
        assert processor.triple_count() == 0

    def test_clear_resets_count(self, loaded_processor, character_ttl):
        loaded_processor.load_turtle(character_ttl)
        loaded_processor.clear()
        assert loaded_processor.triple_count() == 0
        assert loaded_processor.query_constructs() == []

    def test_clear_on_empty_processor(self, processor):
        processor.clear()
        assert processor.triple_count() == 0

    def test_successive_loads_accumulate(self, processor, prefixes):
        processor.load_turtle(prefixes + 'ex:first a sn:Construct ; rdfs:label "First" .')
        processor.load_turtle(prefixes + 'ex:second a sn:Construct ; rdfs:label "Second" .')
        assert [c.label for c in processor.query_constructs()] == ["First", "Second"]

    def test_entanglement_can_span_documents(self, processor, prefixes):
        processor.load_turtle(prefixes + "ex:a a sn:Construct .")
        processor.load_turtle(prefixes + '''
            ex:b a sn:Construct .
            ex:l a sn:Entanglement ; sn:hasSource ex:a ; sn:hasTarget ex:b .
        ''')
        assert len(processor.query_entanglements()) == 1

    def test_blank_node_labels_do_not_merge_across_loads(self, processor, prefixes):
        processor.load_turtle(prefixes + "_:x ex:p ex:a .")
        processor.load_turtle(prefixes + "_:x ex:p ex:b .")
        subjects = {t.subject for t in processor.store}
        assert len(subjects) == 2

    def test_instances_are_independent(self, time_space_ttl):
        first, second = SemanticProcessor(), SemanticProcessor()
        first.load_turtle(time_space_ttl)
        assert second.triple_count() == 0


@pytest.mark.integration
class TestFailedLoads:

    def test_parse_error_leaves_store_untouched(self, loaded_processor, prefixes):
        before = loaded_processor.triple_count()
        with pytest.raises(ParseError):
            loaded_processor.load_turtle(prefixes + 'ex:new a sn:Construct ; rdfs:label "unterminated .')
        assert loaded_processor.triple_count() == before
        assert EX + "new" not in [c.id for c in loaded_processor.query_constructs()]

    def test_partial_document_is_not_loaded(self, processor, prefixes):
        text = prefixes + "ex:a ex:p ex:b .\nex:c ex:p unknown:d ."
        with pytest.raises(ParseError):
            processor.load_turtle(text)
        assert processor.triple_count() == 0

    def test_memory_refusal_raises(self, processor):
        with patch(
            "sinople_semantic.processor.MemoryManager.check_memory_available",
            return_value=(False, "too big"),
        ):
            with pytest.raises(MemoryError, match="too big"):
                processor.load_turtle("<http://a> <http://b> <http://c> .")
        assert processor.triple_count() == 0


@pytest.mark.integration
class TestGlossRoundTrip:

    def test_one_construct_one_gloss(self, processor, prefixes):
        processor.load_turtle(prefixes + 'ex:c a sn:Construct ; rdfs:label "C" ; sn:hasGloss "annotation"@en .')
        constructs = processor.query_constructs()
        assert len(constructs) == 1
        assert len(constructs[0].glosses) == 1
        assert constructs[0].glosses[0].text == "annotation"
        assert constructs[0].glosses[0].language == "en"


@pytest.mark.integration
class TestExport:

    def test_export_reloads_to_same_triples(self, loaded_processor, character_ttl):
        loaded_processor.load_turtle(character_ttl)
        exported = loaded_processor.export_turtle()
        assert Counter(parse_turtle(exported)) == Counter(loaded_processor.store)

    def test_export_keeps_duplicates(self, processor, prefixes):
        processor.load_turtle(prefixes + "ex:a ex:p ex:b .\nex:a ex:p ex:b .")
        reloaded = SemanticProcessor()
        reloaded.load_turtle(processor.export_turtle())
        assert reloaded.triple_count() == 2

    def test_export_uses_sn_prefix(self, loaded_processor):
        assert f"@prefix sn: <{SN}> ." in loaded_processor.export_turtle()
        assert "a sn:Construct" in loaded_processor.export_turtle()

    def test_construct_to_turtle(self, loaded_processor):
        ttl = loaded_processor.construct_to_turtle(EX + "time")
        triples = parse_turtle(ttl)
        assert len(triples) == 4
        assert all(t.subject == URIRef(EX + "time") for t in triples)

    def test_construct_to_turtle_unknown(self, loaded_processor):
        assert loaded_processor.construct_to_turtle(EX + "nothing") == ""

    def test_to_graph_binds_prefixes(self, loaded_processor):
        config = ProcessorConfig(prefixes={"ex": EX})
        processor = SemanticProcessor(config)
        processor.load_turtle(loaded_processor.export_turtle())
        graph = processor.to_graph()
        assert isinstance(graph, Graph)
        assert len(graph) == 11
        namespaces = dict(graph.namespaces())
        assert str(namespaces["sn"]) == SN
        assert str(namespaces["ex"]) == EX


@pytest.mark.integration
def test_custom_namespace():
    config = ProcessorConfig(ontology_namespace="http://sinople.org/ontology#")
    processor = SemanticProcessor(config)
    processor.load_turtle('''
        @prefix sn: <http://sinople.org/ontology#> .
        <http://example.org/x> a sn:Construct .
    ''')
    assert [c.id for c in processor.query_constructs()] == ["http://example.org/x"]
