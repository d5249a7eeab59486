"""
Domänenmodelle und Fehlerklassen.
"""

from .models import OsmAmenity, OsmNode, DESCRIPTION_FALLBACK
from .exceptions import (
    CampusCoffeeError,
    OsmNodeNotFoundException,
    OsmNodeMissingFieldsException,
    OsmParseError,
    OSMConfigError
)

__all__ = [
    'OsmAmenity',
    'OsmNode',
    'DESCRIPTION_FALLBACK',
    'CampusCoffeeError',
    'OsmNodeNotFoundException',
    'OsmNodeMissingFieldsException',
    'OsmParseError',
    'OSMConfigError'
]
