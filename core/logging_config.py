"""
Logging-Konfiguration für den OSM-Import.
"""
import logging
import sys
from contextlib import contextmanager
from typing import Optional, Union

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

def resolve_level(level: Union[int, str, None], verbose: bool = False) -> int:
    """Übersetzt einen Level-Namen oder das Verbose-Flag in ein Logging-Level.

    Args:
        level: Logging-Level als int oder Name (z.B. 'DEBUG')
        verbose: Erzwingt DEBUG, wenn True

    Returns:
        int: Logging-Level
    """
    if verbose:
        return logging.DEBUG
    if level is None:
        return logging.INFO
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(str(level).upper())
    if not isinstance(resolved, int):
        raise ValueError(f"Unbekanntes Logging-Level: {level}")
    return resolved

def setup_logging(level: Union[int, str, None] = logging.INFO, verbose: bool = False) -> None:
    """Konfiguriert das Logging-System.

    Args:
        level: Logging-Level (default: INFO)
        verbose: Aktiviert DEBUG-Ausgaben
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(resolve_level(level, verbose))

    # Nur einmal einen Handler anhängen
    if root_logger.handlers:
        return

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root_logger.addHandler(console_handler)

    root_logger.debug("🔧 Logging-System initialisiert")

@contextmanager
def LoggedOperation(operation_name: str, logger: Optional[logging.Logger] = None):
    """Kontext-Manager für geloggte Operationen.

    Args:
        operation_name: Name der Operation
        logger: Optionaler Logger, sonst der Modul-Logger
    """
    logger = logger or logging.getLogger(__name__)
    logger.debug(f"🔄 Starte: {operation_name}")
    try:
        yield
    except Exception as e:
        logger.error(f"❌ Fehler bei {operation_name}: {str(e)}")
        raise
    finally:
        logger.debug(f"✅ Beendet: {operation_name}")
