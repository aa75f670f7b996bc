"""
Journalisation de CineTrailer (loguru).

Deux sorties :
- stderr, colorée, au niveau choisi en ligne de commande ou par CINETRAILER_LOG_LEVEL
- fichier JSON tournant (CINETRAILER_LOG_FILE), toujours en DEBUG, pour
  retrouver après coup les films créés, modifiés ou supprimés
"""

import sys
from typing import Optional

from loguru import logger

from .config import Settings

_CONSOLE_FORMAT = (
    "<green>{time:HH:mm:ss}</green> "
    "<level>{level: <7}</level> "
    "<cyan>{name}</cyan> | "
    "<level>{message}</level>"
)


def level_from_verbosity(verbose: int = 0, quiet: bool = False, default: str = "INFO") -> str:
    """Traduit les options -v/-q de la CLI en niveau de log console.

    -q force ERROR ; -v passe en DEBUG ; -vv et plus en TRACE.
    """
    if quiet:
        return "ERROR"
    if verbose >= 2:
        return "TRACE"
    if verbose == 1:
        return "DEBUG"
    return default


def configure_logging(settings: Settings, console_level: Optional[str] = None) -> None:
    """Remplace les handlers loguru par ceux de l'application.

    Args :
        settings : Configuration (niveau, fichier, rotation, rétention)
        console_level : Niveau console imposé par la CLI, sinon settings.log_level
    """
    level = (console_level or settings.log_level).upper()
    logger.remove()
    logger.add(sys.stderr, level=level, format=_CONSOLE_FORMAT, colorize=True)

    log_file = settings.log_file
    log_file.parent.mkdir(parents=True, exist_ok=True)
    logger.add(
        log_file,
        level="DEBUG",
        serialize=True,
        rotation=settings.log_rotation_size,
        retention=settings.log_retention_count,
        compression="zip",
        enqueue=True,
    )
    logger.debug(f"Journalisation console={level}, fichier={log_file}")
