"""
OSM-Modul für den Abruf einzelner OpenStreetMap-Knoten.
"""

from .client import OSMBaseClient
from .config import OSMConfig
from .parser import OSMResponseParser, OsmResponse
from .attributes import REQUIRED_TAGS, NAME_PRIORITY, get_required_tag, resolve_name, resolve_description

__all__ = [
    'OSMBaseClient',
    'OSMConfig',
    'OSMResponseParser',
    'OsmResponse',
    'REQUIRED_TAGS',
    'NAME_PRIORITY',
    'get_required_tag',
    'resolve_name',
    'resolve_description'
]
