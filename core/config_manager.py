"""
Konfigurationsmanager für den OSM-Import.

Dieses Modul stellt Funktionen zum Laden von YAML-Konfigurationsdateien
und zum Auflösen modulspezifischer Konfigurationen bereit.
"""

import yaml
from pathlib import Path
from typing import Dict, Any, NamedTuple, Union, Optional
from core.logging_config import LoggedOperation
import logging

logger = logging.getLogger(__name__)

CONFIG_ROOT = Path(__file__).resolve().parent.parent / 'config'

class ValidationResult(NamedTuple):
    """Ergebnis der Konfigurationsvalidierung."""
    is_valid: bool
    errors: list[str]

def load_config(config_file: Union[str, Path], load_referenced: bool = True) -> Dict[str, Any]:
    """Lädt eine YAML-Konfigurationsdatei und optional referenzierte Konfigurationen.

    Args:
        config_file: Pfad zur Konfigurationsdatei
        load_referenced: Wenn True, werden referenzierte Konfigurationen auch geladen

    Returns:
        Dictionary mit der Konfiguration

    Raises:
        FileNotFoundError: Wenn die Datei nicht existiert
        ValueError: Bei falscher Endung, leerer Datei oder YAML-Syntaxfehler
    """
    with LoggedOperation("Konfiguration laden", logger):
        config_path = Path(config_file)

        if not config_path.exists():
            raise FileNotFoundError(f"Konfigurationsdatei nicht gefunden: {config_path}")

        if config_path.suffix not in ('.yml', '.yaml'):
            raise ValueError(f"Ungültiges Dateiformat: {config_path.suffix}")

        with open(config_path, 'r', encoding='utf-8') as f:
            try:
                config = yaml.safe_load(f)
            except yaml.YAMLError as e:
                raise ValueError(f"YAML Syntax-Fehler in {config_path}") from e

        if not config:
            raise ValueError(f"Leere Konfigurationsdatei: {config_path}")
        if not isinstance(config, dict):
            raise ValueError(f"Konfiguration muss ein Mapping sein: {config_path}")

        # Lade referenzierte Konfigurationen
        if load_referenced and 'config_files' in config:
            config['_referenced'] = {}
            for key, ref_path in config['config_files'].items():
                ref_config_path = get_config_path(ref_path, base_dir=config_path.parent)
                config['_referenced'][key] = load_config(ref_config_path, load_referenced=False)

        logger.info(f"✅ Konfiguration geladen: {config_path}")
        return config

def get_module_config(global_config: Dict[str, Any], module_name: str) -> Optional[Dict[str, Any]]:
    """Holt die Konfiguration für ein spezifisches Modul.

    Args:
        global_config: Globale Konfiguration
        module_name: Name des Moduls (z.B. 'osm')

    Returns:
        Modulspezifische Konfiguration oder None
    """
    # Referenzierte Konfigurationen haben Vorrang
    referenced = global_config.get('_referenced', {})
    if module_name in referenced:
        return referenced[module_name]

    if module_name in global_config:
        return global_config[module_name]

    return None

def get_config_path(config_name: str = 'global.yml', base_dir: Optional[Path] = None) -> Path:
    """Ermittelt den absoluten Pfad zu einer Konfigurationsdatei.

    Args:
        config_name: Name der Konfigurationsdatei (z.B. 'osm/config.yml')
        base_dir: Basisverzeichnis, default ist das config/-Verzeichnis des Projekts

    Returns:
        Absoluter Pfad zur Konfigurationsdatei
    """
    root_dir = base_dir or CONFIG_ROOT

    # Präfix 'config/' ist relativ zum Projektverzeichnis gemeint
    if config_name.startswith('config/'):
        config_name = config_name[len('config/'):]
        root_dir = CONFIG_ROOT

    if not config_name.endswith(('.yml', '.yaml')):
        config_name += '.yml'

    return root_dir / config_name
