"""
Domänenmodelle für OpenStreetMap-Daten.

Ein OsmNode ist die validierte Sicht auf einen OSM-Knoten, bevor daraus
ein POS-Eintrag erzeugt wird.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Optional

DESCRIPTION_FALLBACK = "n/a"

class OsmAmenity(Enum):
    """Unterstützte OSM-Amenity-Typen mit ihrem OSM-Code."""

    BAR = "bar"
    BIERGARTEN = "biergarten"
    CAFE = "cafe"
    FAST_FOOD = "fast_food"
    FOOD_COURT = "food_court"
    ICE_CREAM = "ice_cream"
    PUB = "pub"
    RESTAURANT = "restaurant"
    VENDING_MACHINE = "vending_machine"

    @property
    def osm_value(self) -> str:
        """Gibt den Code zurück, den die OSM-API verwendet."""
        return self.value

    @classmethod
    def from_osm_value(cls, osm_value: Optional[str]) -> Optional["OsmAmenity"]:
        """Sucht den Enum-Wert zu einem OSM-Code.

        Args:
            osm_value: Code aus dem 'amenity'-Tag

        Returns:
            OsmAmenity oder None, wenn der Code nicht unterstützt wird
        """
        if osm_value is None:
            return None
        return _AMENITY_BY_OSM_VALUE.get(osm_value)

_AMENITY_BY_OSM_VALUE: Dict[str, OsmAmenity] = {amenity.osm_value: amenity for amenity in OsmAmenity}

@dataclass(frozen=True)
class OsmNode:
    """OSM-Knoten mit allen Angaben, die für einen POS benötigt werden."""

    node_id: int
    name: str
    amenity: OsmAmenity
    city: str
    street: str
    house_number: str
    postcode: str
    description: str = DESCRIPTION_FALLBACK

    def __post_init__(self):
        if isinstance(self.node_id, bool) or not isinstance(self.node_id, int) or self.node_id <= 0:
            raise ValueError(f"node_id muss eine positive Ganzzahl sein: {self.node_id!r}")
        if not isinstance(self.amenity, OsmAmenity):
            raise ValueError(f"Ungültiger Amenity-Typ: {self.amenity!r}")
        for field_name in ('name', 'city', 'street', 'house_number', 'postcode', 'description'):
            value = getattr(self, field_name)
            if not isinstance(value, str) or not value.strip():
                raise ValueError(f"Feld '{field_name}' darf nicht leer sein")

    def to_dict(self) -> Dict[str, object]:
        """Gibt den Knoten als flaches Dictionary zurück."""
        return {
            'node_id': self.node_id,
            'name': self.name,
            'amenity': self.amenity.osm_value,
            'city': self.city,
            'street': self.street,
            'house_number': self.house_number,
            'postcode': self.postcode,
            'description': self.description,
        }
