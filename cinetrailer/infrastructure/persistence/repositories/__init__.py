"""
Implementations SQLModel des repositories.

Ce module contient les implementations concretes des interfaces repository
definies dans cinetrailer/core/ports/repositories.py.

Chaque repository :
- Herite de l'interface ABC correspondante du domaine
- Recoit une session SQLModel via injection de dependances
- Convertit entre entites de domaine (dataclass) et modeles DB (SQLModel)
"""

from cinetrailer.infrastructure.persistence.repositories.genre_repository import (
    SQLModelGenreRepository,
)
from cinetrailer.infrastructure.persistence.repositories.movie_repository import (
    SQLModelMovieRepository,
)

__all__ = [
    "SQLModelGenreRepository",
    "SQLModelMovieRepository",
]
