"""
Gemeinsame Test-Fixtures und Konfiguration.
"""
import sys
from pathlib import Path
from unittest.mock import MagicMock

import pytest

# Füge das Projekt-Root-Verzeichnis zum Python-Pfad hinzu
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from tests.fixtures.osm_fixtures import CAFE_X_TAGS, build_node_xml

@pytest.fixture
def osm_config():
    """OSM-Konfiguration für Tests."""
    return {
        'api': {
            'url': 'https://osm.test/api/0.6',
            'timeout': 5,
            'user_agent': 'CampusCoffeeTest/1.0'
        }
    }

@pytest.fixture
def cafe_tags():
    """Tags des Beispielknotens 'Cafe X'."""
    return dict(CAFE_X_TAGS)

@pytest.fixture
def cafe_xml():
    """XML-Antwort für den Beispielknoten 12345."""
    return build_node_xml(12345)

@pytest.fixture
def stub_client(cafe_xml):
    """Client-Stub, der standardmäßig den Beispielknoten liefert."""
    client = MagicMock()
    client.fetch_node.return_value = cafe_xml
    return client
