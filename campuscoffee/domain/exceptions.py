"""
Fehlerklassen für den OSM-Import.
"""

from typing import Optional

class CampusCoffeeError(Exception):
    """Basisklasse für Fehler im CampusCoffee-Backend."""
    def __init__(self, message: str, details: Optional[Exception] = None):
        self.message = message
        self.details = details
        super().__init__(f"{message}" + (f": {str(details)}" if details else ""))

class OsmNodeNotFoundException(CampusCoffeeError):
    """OSM-Knoten konnte nicht abgerufen oder gelesen werden."""
    def __init__(self, node_id: int):
        self.node_id = node_id
        super().__init__(f"OpenStreetMap node with ID {node_id} does not exist.")

class OsmNodeMissingFieldsException(CampusCoffeeError):
    """OSM-Knoten existiert, aber ein Pflichtfeld fehlt oder ist nicht unterstützt."""
    def __init__(self, node_id: int, field_name: str):
        self.node_id = node_id
        self.field_name = field_name
        super().__init__(f"OpenStreetMap node with ID {node_id} is missing required field '{field_name}'.")

class OsmParseError(CampusCoffeeError):
    """Antwort der OSM-API ist kein gültiges Knoten-Dokument."""
    pass

class OSMConfigError(CampusCoffeeError):
    """Fehler bei der OSM-Konfiguration."""
    pass
