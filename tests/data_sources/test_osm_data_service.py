"""
Tests für den OSM-Datenservice.
"""

import logging
import pytest
import requests
from unittest.mock import MagicMock, patch

from campuscoffee.data_sources.osm_fetcher import OSMDataService, translate_fetch_error
from campuscoffee.data_sources.osm.attributes import REQUIRED_TAGS
from campuscoffee.domain.exceptions import OsmNodeMissingFieldsException, OsmNodeNotFoundException
from campuscoffee.domain.models import OsmAmenity, OsmNode
from tests.fixtures.osm_fixtures import CAFE_X_TAGS, build_node_xml, without

def http_error(status_code):
    response = MagicMock()
    response.status_code = status_code
    return requests.HTTPError(f"{status_code} Error", response=response)

class TestFetchNode:
    """Tests für den erfolgreichen Abruf."""

    def test_example_node(self, stub_client):
        service = OSMDataService(client=stub_client)
        node = service.fetch_node(12345)

        assert node == OsmNode(
            node_id=12345,
            name="Cafe X",
            amenity=OsmAmenity.CAFE,
            city="Heidelberg",
            street="Hauptstr",
            house_number="1",
            postcode="69117",
            description="n/a"
        )
        stub_client.fetch_node.assert_called_once_with(12345)

    def test_description_is_used(self, stub_client):
        stub_client.fetch_node.return_value = build_node_xml(
            12345, dict(CAFE_X_TAGS, description="Kaffee und Kuchen"))
        node = OSMDataService(client=stub_client).fetch_node(12345)
        assert node.description == "Kaffee und Kuchen"

    @pytest.mark.parametrize("extra_tags, expected", [
        ({'name:de': 'B', 'name:en': 'C'}, 'C'),
        ({'name:de': 'B'}, 'B'),
        ({}, 'Cafe X'),
    ])
    def test_name_priority(self, stub_client, extra_tags, expected):
        stub_client.fetch_node.return_value = build_node_xml(12345, dict(CAFE_X_TAGS, **extra_tags))
        assert OSMDataService(client=stub_client).fetch_node(12345).name == expected

    def test_address_copied_verbatim(self, stub_client):
        tags = dict(CAFE_X_TAGS, **{'addr:street': ' Im Neuenheimer Feld ', 'addr:housenumber': '205a'})
        stub_client.fetch_node.return_value = build_node_xml(12345, tags)
        node = OSMDataService(client=stub_client).fetch_node(12345)
        assert node.street == ' Im Neuenheimer Feld '
        assert node.house_number == '205a'

    def test_idempotent(self, stub_client):
        service = OSMDataService(client=stub_client)
        assert service.fetch_node(12345) == service.fetch_node(12345)
        assert stub_client.fetch_node.call_count == 2

    def test_mismatching_node_id_keeps_requested_id(self, stub_client, caplog):
        stub_client.fetch_node.return_value = build_node_xml(999)
        with caplog.at_level(logging.WARNING):
            node = OSMDataService(client=stub_client).fetch_node(12345)
        assert node.node_id == 12345
        assert "999" in caplog.text

class TestMissingFields:
    """Tests für fehlende Pflichtfelder."""

    @pytest.mark.parametrize("key", REQUIRED_TAGS)
    def test_single_missing_key(self, stub_client, key):
        stub_client.fetch_node.return_value = build_node_xml(12345, without(CAFE_X_TAGS, key))
        with pytest.raises(OsmNodeMissingFieldsException) as exc:
            OSMDataService(client=stub_client).fetch_node(12345)
        assert exc.value.node_id == 12345
        assert exc.value.field_name == key

    def test_first_missing_key_wins(self, stub_client):
        tags = without(without(CAFE_X_TAGS, 'addr:postcode'), 'addr:street')
        stub_client.fetch_node.return_value = build_node_xml(12345, tags)
        with pytest.raises(OsmNodeMissingFieldsException) as exc:
            OSMDataService(client=stub_client).fetch_node(12345)
        assert exc.value.field_name == 'addr:street'

    def test_unsupported_amenity(self, stub_client):
        stub_client.fetch_node.return_value = build_node_xml(12345, dict(CAFE_X_TAGS, amenity='bank'))
        with pytest.raises(OsmNodeMissingFieldsException) as exc:
            OSMDataService(client=stub_client).fetch_node(12345)
        assert exc.value.field_name == 'amenity'

    def test_name_en_does_not_replace_required_name(self, stub_client):
        tags = dict(without(CAFE_X_TAGS, 'name'), **{'name:en': 'Cafe X'})
        stub_client.fetch_node.return_value = build_node_xml(12345, tags)
        with pytest.raises(OsmNodeMissingFieldsException) as exc:
            OSMDataService(client=stub_client).fetch_node(12345)
        assert exc.value.field_name == 'name'

class TestNodeNotFound:
    """Tests für nicht abrufbare Knoten."""

    @pytest.mark.parametrize("error", [
        http_error(404),
        http_error(410),
        http_error(500),
        http_error(429),
        requests.ConnectionError("connection refused"),
        requests.Timeout("read timed out"),
        requests.RequestException("unknown"),
    ])
    def test_transport_errors(self, stub_client, error):
        stub_client.fetch_node.side_effect = error
        with pytest.raises(OsmNodeNotFoundException) as exc:
            OSMDataService(client=stub_client).fetch_node(12345)
        assert exc.value.node_id == 12345
        assert exc.value.__cause__ is error

    @pytest.mark.parametrize("body", [None, "", "   \n"])
    def test_empty_body(self, stub_client, body):
        stub_client.fetch_node.return_value = body
        with pytest.raises(OsmNodeNotFoundException):
            OSMDataService(client=stub_client).fetch_node(12345)

    @pytest.mark.parametrize("body", [
        "<osm><node id='1'>",
        "<osm version='0.6'></osm>",
        "<osm><node/></osm>",
        "not xml at all",
    ])
    def test_malformed_payload(self, stub_client, body, caplog):
        stub_client.fetch_node.return_value = body
        with caplog.at_level(logging.ERROR):
            with pytest.raises(OsmNodeNotFoundException):
                OSMDataService(client=stub_client).fetch_node(12345)
        assert "Ungültige OSM-Antwort" in caplog.text

    def test_unexpected_error_is_collapsed(self, stub_client):
        stub_client.fetch_node.side_effect = RuntimeError("boom")
        with pytest.raises(OsmNodeNotFoundException):
            OSMDataService(client=stub_client).fetch_node(12345)

@pytest.mark.parametrize("node_id", [0, -5, "12345", 1.5, True])
def test_invalid_node_id(stub_client, node_id):
    with pytest.raises(ValueError):
        OSMDataService(client=stub_client).fetch_node(node_id)
    stub_client.fetch_node.assert_not_called()

def test_translate_fetch_error_logs_not_found_as_warning(caplog):
    with caplog.at_level(logging.WARNING):
        result = translate_fetch_error(7, http_error(404))
    assert isinstance(result, OsmNodeNotFoundException)
    assert result.node_id == 7
    assert caplog.records[-1].levelno == logging.WARNING

def test_translate_fetch_error_logs_server_error(caplog):
    with caplog.at_level(logging.WARNING):
        translate_fetch_error(7, http_error(503))
    assert caplog.records[-1].levelno == logging.ERROR

def test_default_client_uses_config(osm_config):
    with patch('campuscoffee.data_sources.osm_fetcher.OSMBaseClient') as mock_client:
        service = OSMDataService(config=osm_config)
    mock_client.assert_called_once_with(osm_config)
    assert service.client is mock_client.return_value
