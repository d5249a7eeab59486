#!/usr/bin/env python3
"""
CLI-Tool zum Abrufen eines einzelnen OSM-Knotens.
"""

import click
import logging
from typing import Optional
from core.config_manager import load_config, get_module_config, get_config_path
from core.logging_config import setup_logging
from campuscoffee.data_sources.osm_fetcher import OSMDataService
from campuscoffee.domain.exceptions import CampusCoffeeError

logger = logging.getLogger(__name__)

@click.command()
@click.argument('node_id', type=click.IntRange(min=1))
@click.option('--config', '-c', default=None, help='Pfad zur Konfigurationsdatei (default: config/global.yml des Projekts)')
@click.option('--verbose', '-v', is_flag=True, help='Debug-Ausgaben aktivieren')
def run_osm_import(node_id: int, config: Optional[str], verbose: bool):
    """Holt den OSM-Knoten NODE_ID und gibt die POS-Daten aus."""
    config_path = config or get_config_path()
    try:
        global_config = load_config(config_path)
    except (FileNotFoundError, ValueError) as e:
        setup_logging(verbose=verbose)
        logger.error(f"❌ Konfiguration konnte nicht geladen werden: {str(e)}")
        raise click.Abort()

    try:
        logging_config = global_config.get('logging') or {}
        if not isinstance(logging_config, dict):
            raise ValueError(f"'logging' muss ein Mapping sein, ist aber {type(logging_config).__name__}")
        setup_logging(logging_config.get('level'), verbose=verbose)
    except ValueError as e:
        setup_logging(verbose=verbose)
        logger.error(f"❌ Ungültige Logging-Konfiguration: {str(e)}")
        raise click.Abort()

    osm_config = get_module_config(global_config, 'osm')
    if not osm_config:
        logger.warning("⚠️ Keine OSM-Konfiguration gefunden, nutze Standardwerte")
        osm_config = {}

    try:
        service = OSMDataService(config=osm_config)
    except CampusCoffeeError as e:
        logger.error(f"❌ OSM-Client konnte nicht erstellt werden: {e.message}")
        raise click.Abort()

    try:
        node = service.fetch_node(node_id)
    except CampusCoffeeError as e:
        logger.error(f"❌ Import von Knoten {node_id} fehlgeschlagen: {e.message}")
        raise click.Abort()

    logger.info(f"✅ OSM-Knoten {node_id} geladen: {node.name}")
    for key, value in node.to_dict().items():
        click.echo(f"{key}: {value}")

if __name__ == "__main__":
    run_osm_import()
