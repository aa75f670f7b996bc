"""
Initialisation des donnees de reference au demarrage.

Les cinq genres par defaut sont inseres seulement s'ils sont absents :
relancer l'application ne provoque ni doublon ni erreur de cle.
"""

from typing import Iterable

from loguru import logger

from cinetrailer.core.entities.catalog import Genre
from cinetrailer.core.ports.repositories import IGenreRepository

DEFAULT_GENRES: tuple[Genre, ...] = (
    Genre(id=1, title="ACTION"),
    Genre(id=2, title="COMEDY"),
    Genre(id=3, title="HORROR"),
    Genre(id=4, title="THRILLER"),
    Genre(id=5, title="ADVENTURE"),
)


def seed_default_genres(
    genre_repo: IGenreRepository,
    genres: Iterable[Genre] = DEFAULT_GENRES,
) -> int:
    """
    Insere les genres manquants.

    Args:
        genre_repo: Repository des genres
        genres: Genres de reference (DEFAULT_GENRES par defaut)

    Returns:
        Nombre de genres effectivement inseres.
    """
    missing = [g for g in genres if not genre_repo.exists_by_id(g.id)]
    if missing:
        genre_repo.save_all(missing)
        logger.info(f"{len(missing)} genre(s) insere(s) : {', '.join(g.title for g in missing)}")
    else:
        logger.debug("Genres par defaut deja presents")
    return len(missing)
