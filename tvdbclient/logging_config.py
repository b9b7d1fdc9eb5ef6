"""
Activation des logs de tvdbclient via loguru.

Les logs de la librairie sont désactivés à l'import (logger.disable).
configure_logging() les réactive et ajoute des handlers limités au
namespace "tvdbclient": les handlers de l'application hôte ne sont
jamais retirés.

- Sortie console : une ligne par requete, sur stderr par défaut
- Sortie fichier (optionnelle) : JSON avec rotation
"""

import sys
from pathlib import Path
from typing import Any, Optional, TextIO

from loguru import logger

from tvdbclient.config import Settings

PACKAGE = "tvdbclient"

CONSOLE_FORMAT = (
    "<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | "
    "<cyan>{name}</cyan> | <level>{message}</level>"
)

# Handlers ajoutés par configure_logging, retirés à la reconfiguration
_handler_ids: list[int] = []


def _is_package_record(record: dict[str, Any]) -> bool:
    name = record["name"] or ""
    return name == PACKAGE or name.startswith(f"{PACKAGE}.")


def disable_logging() -> None:
    """Retire les handlers de tvdbclient et coupe à nouveau ses logs."""
    while _handler_ids:
        logger.remove(_handler_ids.pop())
    logger.disable(PACKAGE)


def configure_logging(
    log_level: str = "INFO",
    log_file: Optional[Path] = None,
    rotation_size: str = "10 MB",
    retention_count: int = 5,
    sink: TextIO = sys.stderr,
) -> list[int]:
    """Active les logs de tvdbclient.

    Un appel répété remplace les handlers du précédent.

    Args :
        log_level : Niveau minimum pour la console (DEBUG pour voir chaque requête)
        log_file : Fichier JSON optionnel, qui reçoit tous les niveaux
        rotation_size : Taille maximale du fichier avant rotation (ex: "10 MB")
        retention_count : Nombre de fichiers rotatifs à conserver
        sink : Flux texte de la console

    Returns :
        Identifiants loguru des handlers ajoutés
    """
    disable_logging()
    logger.enable(PACKAGE)

    _handler_ids.append(
        logger.add(
            sink,
            level=log_level,
            format=CONSOLE_FORMAT,
            filter=_is_package_record,
            colorize=False if sink is not sys.stderr else None,
        )
    )

    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        _handler_ids.append(
            logger.add(
                log_file,
                level="DEBUG",
                format="{message}",
                filter=_is_package_record,
                serialize=True,
                rotation=rotation_size,
                retention=retention_count,
                compression="zip",
                enqueue=True,
            )
        )

    logger.debug("Logs tvdbclient actifs (niveau {level})", level=log_level)
    return list(_handler_ids)


def configure_from_settings(settings: Settings, sink: TextIO = sys.stderr) -> list[int]:
    """Active les logs à partir des Settings."""
    return configure_logging(
        log_level=settings.log_level,
        log_file=settings.log_file,
        rotation_size=settings.log_rotation_size,
        retention_count=settings.log_retention_count,
        sink=sink,
    )
