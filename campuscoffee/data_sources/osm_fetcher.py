"""
OSM-Fetcher: ruft einen Knoten ab, validiert ihn und erzeugt einen OsmNode.
"""

import logging
from typing import Dict, Any, Optional, Protocol
import requests

from .osm.client import OSMBaseClient
from .osm.parser import OSMResponseParser
from .osm.attributes import REQUIRED_TAGS, get_required_tag, resolve_name, resolve_description
from campuscoffee.domain.exceptions import (
    OsmNodeMissingFieldsException,
    OsmNodeNotFoundException,
    OsmParseError
)
from campuscoffee.domain.models import OsmAmenity, OsmNode

logger = logging.getLogger(__name__)

NOT_FOUND_STATUS_CODES = (404, 410)

class NodeClient(Protocol):
    """Schnittstelle des HTTP-Clients, die der Fetcher benötigt."""
    def fetch_node(self, node_id: int) -> str: ...

def translate_fetch_error(node_id: int, error: Exception) -> OsmNodeNotFoundException:
    """
    Übersetzt einen Transportfehler in den Fehler, den Aufrufer sehen.

    Alle Transportfehler werden derzeit zu OsmNodeNotFoundException.

    Args:
        node_id: Angefragte Knoten-ID
        error: Ausnahme des HTTP-Clients

    Returns:
        OsmNodeNotFoundException für den Knoten
    """
    if isinstance(error, requests.HTTPError):
        status = error.response.status_code if error.response is not None else None
        if status in NOT_FOUND_STATUS_CODES:
            logger.warning(f"⚠️ OSM-Knoten {node_id} nicht gefunden (HTTP {status})")
        else:
            logger.error(f"❌ HTTP-Fehler beim Abruf von OSM-Knoten {node_id}: {status} - {str(error)}")
    elif isinstance(error, requests.Timeout):
        logger.error(f"❌ Timeout beim Abruf von OSM-Knoten {node_id}: {str(error)}")
    else:
        logger.error(f"❌ Fehler beim Abruf von OSM-Knoten {node_id}: {str(error)}")
    return OsmNodeNotFoundException(node_id)

class OSMDataService:
    """Holt OSM-Knoten und bildet sie auf OsmNode ab."""

    def __init__(self, client: Optional[NodeClient] = None, config: Optional[Dict[str, Any]] = None):
        """
        Initialisiert den Service.

        Args:
            client: HTTP-Client mit fetch_node(node_id) -> str
            config: Optionales Konfigurationsobjekt für den Standard-Client
        """
        self.client = client or OSMBaseClient(config)
        self.parser = OSMResponseParser()

    def fetch_node(self, node_id: int) -> OsmNode:
        """
        Ruft einen OSM-Knoten ab und validiert ihn.

        Args:
            node_id: Positive OSM-Knoten-ID

        Returns:
            Validierter OsmNode

        Raises:
            ValueError: Bei ungültiger node_id
            OsmNodeNotFoundException: Knoten nicht abrufbar oder nicht lesbar
            OsmNodeMissingFieldsException: Pflichtfeld fehlt oder Amenity nicht unterstützt
        """
        if isinstance(node_id, bool) or not isinstance(node_id, int) or node_id <= 0:
            raise ValueError(f"node_id muss eine positive Ganzzahl sein: {node_id!r}")

        try:
            logger.debug(f"🔄 Hole OSM-Knoten {node_id}")
            try:
                xml_response = self.client.fetch_node(node_id)
            except requests.RequestException as e:
                raise translate_fetch_error(node_id, e) from e

            if not xml_response or not xml_response.strip():
                logger.error(f"❌ Leere Antwort der OSM-API für Knoten {node_id}")
                raise OsmNodeNotFoundException(node_id)

            node = self._parse_node(xml_response, node_id)
            logger.debug(f"✅ OSM-Knoten {node_id} erfolgreich geladen")
            return node

        except (OsmNodeNotFoundException, OsmNodeMissingFieldsException):
            raise
        except OsmParseError as e:
            logger.error(f"❌ Ungültige OSM-Antwort für Knoten {node_id}: {str(e)}")
            raise OsmNodeNotFoundException(node_id) from e
        except Exception as e:
            logger.error(f"❌ Fehler beim Abruf von OSM-Knoten {node_id}: {str(e)}", exc_info=True)
            raise OsmNodeNotFoundException(node_id) from e

    def _parse_node(self, xml_response: str, node_id: int) -> OsmNode:
        """
        Parst die XML-Antwort und erzeugt den OsmNode.

        Args:
            xml_response: XML-Antwort der OSM-API
            node_id: Angefragte Knoten-ID

        Returns:
            OsmNode
        """
        osm_response = self.parser.parse(xml_response)
        if osm_response.node_id != node_id:
            logger.warning(f"⚠️ OSM-Antwort enthält Knoten {osm_response.node_id}, angefragt war {node_id}")
        tags = osm_response.tags

        # Pflichtfelder
        required = {key: get_required_tag(tags, key, node_id) for key in REQUIRED_TAGS}

        amenity = OsmAmenity.from_osm_value(required['amenity'])
        if amenity is None:
            logger.warning(f"⚠️ OSM-Knoten {node_id} hat nicht unterstützten Amenity-Typ: {required['amenity']}")
            raise OsmNodeMissingFieldsException(node_id, 'amenity')

        return OsmNode(
            node_id=node_id,
            name=resolve_name(tags) or required['name'],
            amenity=amenity,
            city=required['addr:city'],
            street=required['addr:street'],
            house_number=required['addr:housenumber'],
            postcode=required['addr:postcode'],
            description=resolve_description(tags)
        )
