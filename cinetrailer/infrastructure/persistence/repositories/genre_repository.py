"""
Implementation SQLModel du repository Genre.

Implemente l'interface IGenreRepository pour la persistance des genres.
"""

from typing import Iterable

from sqlalchemy import delete, func
from sqlmodel import Session, select

from cinetrailer.core.entities.catalog import GENRE_SORT_FIELDS, Genre
from cinetrailer.core.ports.repositories import IGenreRepository
from cinetrailer.core.value_objects import Found, Lookup, NotFound, Sort
from cinetrailer.infrastructure.persistence.models import GenreModel, MovieGenreLink


class SQLModelGenreRepository(IGenreRepository):
    """
    Repository SQLModel pour les genres.

    Les IDs sont fournis par l'appelant : save() insere le genre s'il
    n'existe pas encore, sinon met a jour son titre.
    """

    def __init__(self, session: Session) -> None:
        """
        Initialise le repository avec une session SQLModel.

        Args :
            session : Session SQLModel active pour les operations DB
        """
        self._session = session

    @staticmethod
    def _to_entity(model: GenreModel) -> Genre:
        return Genre(id=model.id, title=model.title)

    @staticmethod
    def _order_by(sort: Sort):
        if sort.field not in GENRE_SORT_FIELDS:
            raise ValueError(f"Tri non supporte pour les genres : {sort.field}")
        column = getattr(GenreModel, sort.field)
        return column.desc() if sort.descending else column.asc()

    def find_by_id(self, genre_id: int) -> Lookup[Genre]:
        """Recupere un genre par son ID."""
        model = self._session.get(GenreModel, genre_id)
        if model is None:
            return NotFound("genre", genre_id)
        return Found(self._to_entity(model))

    def find_all(self, sort: Sort = Sort("title")) -> list[Genre]:
        """Liste tous les genres (tries par titre par defaut)."""
        statement = select(GenreModel).order_by(self._order_by(sort), GenreModel.id)
        return [self._to_entity(m) for m in self._session.exec(statement).all()]

    def find_by_ids(self, genre_ids: Iterable[int]) -> list[Genre]:
        """Recupere les genres existants parmi les IDs donnes (tries par titre)."""
        ids = set(genre_ids)
        if not ids:
            return []
        statement = (
            select(GenreModel)
            .where(GenreModel.id.in_(ids))
            .order_by(GenreModel.title, GenreModel.id)
        )
        return [self._to_entity(m) for m in self._session.exec(statement).all()]

    def _upsert(self, genre: Genre) -> GenreModel:
        model = self._session.get(GenreModel, genre.id)
        if model is None:
            model = GenreModel(id=genre.id, title=genre.title)
        else:
            model.title = genre.title
        self._session.add(model)
        return model

    def save(self, genre: Genre) -> Genre:
        """Sauvegarde un genre (insertion ou mise a jour par ID)."""
        try:
            model = self._upsert(genre)
            self._session.commit()
        except Exception:
            self._session.rollback()
            raise
        self._session.refresh(model)
        return self._to_entity(model)

    def save_all(self, genres: Iterable[Genre]) -> list[Genre]:
        """Sauvegarde plusieurs genres dans une seule transaction."""
        try:
            models = [self._upsert(genre) for genre in genres]
            self._session.commit()
        except Exception:
            self._session.rollback()
            raise
        for model in models:
            self._session.refresh(model)
        return [self._to_entity(m) for m in models]

    def delete_by_id(self, genre_id: int) -> bool:
        """Supprime un genre et ses associations aux films."""
        model = self._session.get(GenreModel, genre_id)
        if model is None:
            return False
        try:
            self._session.execute(
                delete(MovieGenreLink).where(MovieGenreLink.genre_id == genre_id)
            )
            self._session.delete(model)
            self._session.commit()
        except Exception:
            self._session.rollback()
            raise
        return True

    def count(self) -> int:
        """Nombre total de genres."""
        return self._session.exec(select(func.count()).select_from(GenreModel)).one()

    def exists_by_id(self, genre_id: int) -> bool:
        """Verifie l'existence d'un genre."""
        return self._session.get(GenreModel, genre_id) is not None
