"""
OSM-Client für die Abfrage einzelner Knoten über die OSM-API.
"""

import logging
from typing import Dict, Any, Optional
import requests
from .config import OSMConfig
from campuscoffee.domain.exceptions import OSMConfigError

logger = logging.getLogger(__name__)

class OSMBaseClient:
    """HTTP-Client für die OpenStreetMap-API."""

    def __init__(self, config: Optional[Dict[str, Any]] = None, session: Optional[requests.Session] = None):
        """
        Initialisiert den OSM-Client.

        Args:
            config: Optionales Konfigurationsobjekt
            session: Optionale requests-Session, z.B. für Tests

        Raises:
            OSMConfigError: Wenn die Konfiguration ungültig ist
        """
        self.config = OSMConfig(config)
        result = self.config.validate()
        if not result.is_valid:
            raise OSMConfigError("Ungültige OSM-Konfiguration: " + "; ".join(result.errors))
        self.session = session
        self.headers = {
            'User-Agent': self.config.user_agent,
            'Accept': 'application/xml'
        }

    def fetch_node(self, node_id: int) -> str:
        """
        Ruft das XML-Dokument eines Knotens ab.

        Es wird genau ein Request gesendet, ohne Wiederholung.

        Args:
            node_id: OSM-Knoten-ID

        Returns:
            XML-Antwort als Text

        Raises:
            requests.HTTPError: Bei HTTP-Fehlerstatus (z.B. 404)
            requests.RequestException: Bei Verbindungsfehlern und Timeouts
        """
        url = self.config.node_url(node_id)
        logger.debug(f"🔄 GET {url}")

        # Ohne Session eigener Request pro Aufruf, kein geteilter Zustand
        http = self.session if self.session is not None else requests
        response = http.get(url, headers=self.headers, timeout=self.config.timeout)
        response.raise_for_status()
        return response.text

    def close(self) -> None:
        """Schließt eine übergebene Session."""
        if self.session is not None:
            self.session.close()
