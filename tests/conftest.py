"""
Pytest configuration and fixtures for the test suite.

Defines markers for selective test execution:
    pytest -m unit          # Fast unit tests
    pytest -m integration   # Tests spanning parser, store and queries
"""

import os
import sys

import pytest

# Add src to path for imports
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))

from sinople_semantic import SemanticProcessor  # noqa: E402

SN = "https://sinople.org/ontology#"
EX = "https://example.org/"


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: Fast unit tests")
    config.addinivalue_line("markers", "integration: Tests spanning parser, store and queries")


@pytest.fixture
def prefixes():
    """Prefix block shared by the sample documents."""
    return f'''
        @prefix sn: <{SN}> .
        @prefix rdfs: <http://www.w3.org/2000/01/rdf-schema#> .
        @prefix ex: <{EX}> .
    '''


@pytest.fixture
def time_space_ttl(prefixes):
    """Two constructs joined by one entanglement."""
    return prefixes + '''
        ex:time a sn:Construct ;
            rdfs:label "Time" ;
            rdfs:comment "The fourth dimension" ;
            sn:hasGloss "tempus"@la .

        ex:space a sn:Construct ;
            rdfs:label "Space" .

        ex:link a sn:Entanglement ;
            rdfs:label "Time and space" ;
            sn:hasSource ex:time ;
            sn:hasTarget ex:space ;
            sn:relationshipType "interdependent" .
    '''


@pytest.fixture
def character_ttl(prefixes):
    return prefixes + '''
        ex:chronos a sn:Character ;
            rdfs:label "Chronos" ;
            rdfs:comment "Keeper of time" ;
            sn:hasConstruct ex:time .
    '''


@pytest.fixture
def processor():
    """A fresh processor with an empty store."""
    return SemanticProcessor()


@pytest.fixture
def loaded_processor(processor, time_space_ttl):
    processor.load_turtle(time_space_ttl)
    return processor
