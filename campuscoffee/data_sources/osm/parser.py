"""
Parser für XML-Antworten der OSM-API.
"""

import logging
from typing import Dict, NamedTuple, Union
from lxml import etree
from campuscoffee.domain.exceptions import OsmParseError

logger = logging.getLogger(__name__)

class OsmResponse(NamedTuple):
    """Rohdaten eines Knotens: ID und Tags."""
    node_id: int
    tags: Dict[str, str]

class OSMResponseParser:
    """Liest das <osm><node><tag k=".." v=".."/></node></osm>-Format der OSM-API."""

    @staticmethod
    def _create_parser() -> etree.XMLParser:
        # lxml-Parser sind nicht threadsicher, daher einer pro Aufruf
        return etree.XMLParser(resolve_entities=False, no_network=True, remove_comments=True)

    def parse(self, xml_response: Union[str, bytes]) -> OsmResponse:
        """Parst eine Knoten-Antwort.

        Args:
            xml_response: XML-Dokument als Text oder Bytes

        Returns:
            OsmResponse mit Knoten-ID und Tags

        Raises:
            OsmParseError: Bei ungültigem XML, fehlendem <node> oder fehlender ID
        """
        if isinstance(xml_response, str):
            xml_response = xml_response.encode('utf-8')

        try:
            root = etree.fromstring(xml_response, parser=self._create_parser())
        except (etree.XMLSyntaxError, ValueError) as e:
            raise OsmParseError("Ungültiges XML in OSM-Antwort", e)

        node = root if root.tag == 'node' else root.find('node')
        if node is None:
            raise OsmParseError(f"Kein <node>-Element in OSM-Antwort (Root: <{root.tag}>)")

        raw_id = node.get('id')
        try:
            node_id = int(raw_id)
        except (TypeError, ValueError) as e:
            raise OsmParseError(f"Ungültige Knoten-ID: {raw_id!r}", e)

        tags = {}
        for tag in node.findall('tag'):
            key = tag.get('k')
            if key is None:
                logger.debug(f"Tag ohne Schlüssel in Knoten {node_id} ignoriert")
                continue
            tags[key] = tag.get('v', '')

        return OsmResponse(node_id=node_id, tags=tags)
