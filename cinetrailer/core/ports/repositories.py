"""
Interfaces ports pour les repositories.

Interfaces abstraites (ports) définissant les contrats pour la persistance
des films et des genres. L'implémentation concrète utilise SQLModel
(SQLite par défaut).
"""

from abc import ABC, abstractmethod
from typing import Iterable

from cinetrailer.core.entities.catalog import Genre, Movie
from cinetrailer.core.value_objects import Lookup, Page, PageRequest, Sort


class IGenreRepository(ABC):
    """
    Interface de stockage des genres.

    Les identifiants de genre sont attribués à l'extérieur (seed).
    """

    @abstractmethod
    def find_by_id(self, genre_id: int) -> Lookup[Genre]:
        """Récupère un genre par son ID."""
        ...

    @abstractmethod
    def find_all(self, sort: Sort = Sort("title")) -> list[Genre]:
        """Liste tous les genres selon le tri demandé."""
        ...

    @abstractmethod
    def find_by_ids(self, genre_ids: Iterable[int]) -> list[Genre]:
        """Récupère les genres existants parmi les IDs donnés."""
        ...

    @abstractmethod
    def save(self, genre: Genre) -> Genre:
        """Sauvegarde un genre (insertion ou mise à jour par ID)."""
        ...

    @abstractmethod
    def save_all(self, genres: Iterable[Genre]) -> list[Genre]:
        """Sauvegarde plusieurs genres dans une seule transaction."""
        ...

    @abstractmethod
    def delete_by_id(self, genre_id: int) -> bool:
        """Supprime un genre. Retourne True si supprimé."""
        ...

    @abstractmethod
    def count(self) -> int:
        """Nombre total de genres."""
        ...

    @abstractmethod
    def exists_by_id(self, genre_id: int) -> bool:
        """Vérifie l'existence d'un genre."""
        ...


class IMovieRepository(ABC):
    """
    Interface de stockage des films.

    Chaque film est associé à un ou plusieurs genres via une table
    d'association ; les genres sont chargés avec le film.
    """

    @abstractmethod
    def find_by_id(self, movie_id: int) -> Lookup[Movie]:
        """Récupère un film (avec ses genres) par son ID."""
        ...

    @abstractmethod
    def find_all(self, request: PageRequest) -> Page[Movie]:
        """
        Récupère une page de films.

        Args :
            request : Numéro de page, taille et tri (délégués à la base)

        Retourne :
            La page demandée avec le nombre total de films
        """
        ...

    @abstractmethod
    def save(self, movie: Movie) -> Movie:
        """Sauvegarde un film et ses genres (insertion ou mise à jour)."""
        ...

    @abstractmethod
    def delete_by_id(self, movie_id: int) -> bool:
        """Supprime un film et ses associations. Retourne True si supprimé."""
        ...

    @abstractmethod
    def count(self) -> int:
        """Nombre total de films."""
        ...

    @abstractmethod
    def exists_by_id(self, movie_id: int) -> bool:
        """Vérifie l'existence d'un film."""
        ...
