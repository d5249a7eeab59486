"""
Konfigurationsmanagement für die OSM-API.
"""

import logging
from typing import Dict, Any, Optional
from core.config_manager import load_config as load_yaml_config, get_config_path, ValidationResult
from campuscoffee.domain.exceptions import OSMConfigError

logger = logging.getLogger(__name__)

DEFAULT_API_URL = "https://api.openstreetmap.org/api/0.6"
DEFAULT_TIMEOUT = 10.0
DEFAULT_USER_AGENT = "CampusCoffee/0.1"

class OSMConfig:
    """Konfigurationsklasse für die OSM-API."""

    def __init__(self, config: Optional[Dict[str, Any]] = None):
        """
        Initialisiert die OSM-Konfiguration.

        Args:
            config: Optionales Konfigurationsobjekt, entweder der Inhalt
                des 'osm'-Blocks oder ein Dictionary mit 'osm'-Schlüssel
        """
        self._config = {}
        if config is not None:
            self._config = config.get('osm') or config
        else:
            self._load_config()

    def _load_config(self) -> None:
        """Lädt die OSM-Konfiguration aus config/osm/config.yml"""
        osm_config_path = get_config_path('osm/config.yml')

        if not osm_config_path.exists():
            logger.warning(f"⚠️ Keine OSM-Konfiguration gefunden unter {osm_config_path}, nutze Standardwerte")
            return

        config = load_yaml_config(osm_config_path, load_referenced=False)
        self._config = config.get('osm', {})
        logger.info("✅ OSM-Konfiguration erfolgreich geladen")

    @property
    def api(self) -> Dict[str, Any]:
        """Gibt den API-Block zurück."""
        return self._config.get('api', {}) or {}

    @property
    def api_url(self) -> str:
        """Gibt die Basis-URL der OSM-API zurück."""
        return str(self.api.get('url', DEFAULT_API_URL)).rstrip('/')

    @property
    def timeout(self) -> float:
        """Gibt das Request-Timeout in Sekunden zurück."""
        try:
            return float(self.api.get('timeout', DEFAULT_TIMEOUT))
        except (TypeError, ValueError) as e:
            raise OSMConfigError("Ungültiges Timeout in der OSM-Konfiguration", e)

    @property
    def user_agent(self) -> str:
        """Gibt den User-Agent für OSM-Anfragen zurück."""
        return self.api.get('user_agent', DEFAULT_USER_AGENT)

    def node_url(self, node_id: int) -> str:
        """Baut die URL für einen einzelnen Knoten."""
        return f"{self.api_url}/node/{node_id}"

    def validate(self) -> ValidationResult:
        """Validiert die Konfiguration.

        Returns:
            ValidationResult mit allen gefundenen Fehlern
        """
        errors = []

        if not self.api_url.startswith(('http://', 'https://')):
            errors.append(f"api.url muss eine HTTP(S)-URL sein, ist aber '{self.api_url}'")

        try:
            if self.timeout <= 0:
                errors.append(f"api.timeout muss positiv sein, ist aber {self.timeout}")
        except OSMConfigError as e:
            errors.append(e.message)

        if not self.user_agent or not str(self.user_agent).strip():
            errors.append("api.user_agent darf nicht leer sein")

        for error in errors:
            logger.warning(f"⚠️ {error}")

        return ValidationResult(is_valid=not errors, errors=errors)
