"""
Module de persistance pour CineTrailer.

Ce module fournit l'infrastructure de stockage utilisant SQLModel (SQLAlchemy).
Il contient :

- database.py : Configuration de l'engine, session factory, initialisation
- models.py : Modeles SQLModel representant les tables de la base de donnees
- repositories/ : Implementations des ports IGenreRepository et IMovieRepository

Les modeles ici sont des adapters de persistance, distincts des entites de domaine
(dataclass dans core/entities/). La conversion entre les deux se fait dans les
repositories.
"""

from cinetrailer.infrastructure.persistence.database import (
    build_engine,
    get_engine,
    get_session,
    init_db,
    reset_engine,
)
from cinetrailer.infrastructure.persistence.models import (
    GenreModel,
    MovieGenreLink,
    MovieModel,
)

__all__ = [
    "build_engine",
    "get_engine",
    "get_session",
    "init_db",
    "reset_engine",
    "GenreModel",
    "MovieModel",
    "MovieGenreLink",
]
