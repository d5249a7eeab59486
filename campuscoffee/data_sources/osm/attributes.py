"""
Tag-Verarbeitung für OSM-Knoten.
"""

import logging
from typing import Mapping, Optional, Sequence, Tuple
from campuscoffee.domain.exceptions import OsmNodeMissingFieldsException
from campuscoffee.domain.models import DESCRIPTION_FALLBACK

logger = logging.getLogger(__name__)

# Reihenfolge bestimmt, welches fehlende Feld gemeldet wird
REQUIRED_TAGS: Tuple[str, ...] = (
    'name',
    'addr:city',
    'addr:street',
    'addr:housenumber',
    'addr:postcode',
    'amenity',
)

NAME_PRIORITY: Tuple[str, ...] = ('name:en', 'name:de', 'name')

def get_tag(tags: Mapping[str, str], key: str) -> Optional[str]:
    """Gibt den Tag-Wert zurück, leere Werte zählen als nicht vorhanden."""
    value = tags.get(key)
    if value is None or not value.strip():
        return None
    return value

def get_required_tag(tags: Mapping[str, str], key: str, node_id: int) -> str:
    """
    Holt ein Pflicht-Tag.

    Args:
        tags: Tags des Knotens
        key: Tag-Schlüssel
        node_id: Knoten-ID für die Fehlermeldung

    Returns:
        Wert des Tags

    Raises:
        OsmNodeMissingFieldsException: Wenn das Tag fehlt oder leer ist
    """
    value = get_tag(tags, key)
    if value is None:
        logger.warning(f"⚠️ OSM-Knoten {node_id} fehlt Pflichtfeld '{key}'. Vorhandene Tags: {sorted(tags)}")
        raise OsmNodeMissingFieldsException(node_id, key)
    return value

def first_present(tags: Mapping[str, str], keys: Sequence[str]) -> Optional[str]:
    """Gibt den ersten vorhandenen Wert in der Reihenfolge von keys zurück."""
    return next((value for value in (get_tag(tags, key) for key in keys) if value is not None), None)

def resolve_name(tags: Mapping[str, str]) -> Optional[str]:
    """Anzeigename: name:en vor name:de vor name."""
    return first_present(tags, NAME_PRIORITY)

def resolve_description(tags: Mapping[str, str]) -> str:
    """Beschreibung oder 'n/a'."""
    return get_tag(tags, 'description') or DESCRIPTION_FALLBACK
