"""
Ports (interfaces abstraites) définissant les contrats pour les adaptateurs.

Ports repository : Contrats de persistance des données
- IGenreRepository : Stockage des genres
- IMovieRepository : Stockage des films et de leurs genres

Ports stockage : Contrats pour les fichiers
- IStorageService : Stockage des affiches par nom
"""

from cinetrailer.core.ports.repositories import (
    IGenreRepository,
    IMovieRepository,
)
from cinetrailer.core.ports.storage import IStorageService

__all__ = [
    # Repositories
    "IGenreRepository",
    "IMovieRepository",
    # Stockage
    "IStorageService",
]
