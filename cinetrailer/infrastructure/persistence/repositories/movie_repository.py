"""
Implementation SQLModel du repository Movie.

Implemente l'interface IMovieRepository pour la persistance des films
et de leurs associations aux genres (table genre_movie).

Les genres ne sont jamais charges implicitement : une seule requete de
jointure sur la table d'association ramene les genres de tous les films
d'un resultat.
"""

from collections import defaultdict
from typing import Iterable

from sqlalchemy import delete, func
from sqlmodel import Session, select

from cinetrailer.core.entities.catalog import MOVIE_SORT_FIELDS, Genre, Movie
from cinetrailer.core.ports.repositories import IMovieRepository
from cinetrailer.core.value_objects import Found, Lookup, NotFound, Page, PageRequest
from cinetrailer.infrastructure.persistence.models import (
    GenreModel,
    MovieGenreLink,
    MovieModel,
    utc_now,
)


class SQLModelMovieRepository(IMovieRepository):
    """
    Repository SQLModel pour les films.

    Implemente IMovieRepository avec conversion bidirectionnelle
    entre l'entite Movie (domaine) et MovieModel (persistance).
    Chaque save/delete est une transaction unique (rollback si echec).
    """

    def __init__(self, session: Session) -> None:
        """
        Initialise le repository avec une session SQLModel.

        Args :
            session : Session SQLModel active pour les operations DB
        """
        self._session = session

    def _to_entity(self, model: MovieModel, genres: Iterable[Genre]) -> Movie:
        """
        Convertit un modele DB en entite domaine.

        Args :
            model : Le modele MovieModel depuis la DB
            genres : Les genres associes, deja charges

        Retourne :
            L'entite Movie correspondante
        """
        return Movie(
            id=model.id,
            title=model.title,
            synopsis=model.synopsis,
            premiere_date=model.premiere_date,
            trailer_id=model.trailer_id,
            cover_path=model.cover_path,
            genres=tuple(genres),
        )

    def _load_genres(self, movie_ids: list[int]) -> dict[int, list[Genre]]:
        """Charge les genres de plusieurs films en une seule requete."""
        if not movie_ids:
            return {}
        statement = (
            select(MovieGenreLink.movie_id, GenreModel)
            .join(GenreModel, GenreModel.id == MovieGenreLink.genre_id)
            .where(MovieGenreLink.movie_id.in_(movie_ids))
            .order_by(GenreModel.title, GenreModel.id)
        )
        genres_by_movie: dict[int, list[Genre]] = defaultdict(list)
        for movie_id, genre in self._session.exec(statement).all():
            genres_by_movie[movie_id].append(Genre(id=genre.id, title=genre.title))
        return genres_by_movie

    @staticmethod
    def _order_by(request: PageRequest):
        sort = request.sort
        if sort.field not in MOVIE_SORT_FIELDS:
            raise ValueError(f"Tri non supporte pour les films : {sort.field}")
        column = getattr(MovieModel, sort.field)
        return column.desc() if sort.descending else column.asc()

    def find_by_id(self, movie_id: int) -> Lookup[Movie]:
        """Recupere un film et ses genres par son ID interne."""
        model = self._session.get(MovieModel, movie_id)
        if model is None:
            return NotFound("film", movie_id)
        genres = self._load_genres([model.id])
        return Found(self._to_entity(model, genres.get(model.id, ())))

    def find_all(self, request: PageRequest) -> Page[Movie]:
        """Recupere une page de films, tri et pagination faits par la base."""
        statement = (
            select(MovieModel)
            .order_by(self._order_by(request), MovieModel.id)
            .offset(request.offset)
            .limit(request.size)
        )
        models = self._session.exec(statement).all()
        genres = self._load_genres([m.id for m in models])
        return Page(
            items=tuple(self._to_entity(m, genres.get(m.id, ())) for m in models),
            number=request.page,
            size=request.size,
            total=self.count(),
            sort=request.sort,
        )

    def save(self, movie: Movie) -> Movie:
        """
        Sauvegarde un film (insertion ou mise a jour par ID).

        Les associations aux genres sont remplacees par celles de l'entite.
        """
        try:
            model = None
            if movie.id is not None:
                model = self._session.get(MovieModel, movie.id)
            if model is None:
                model = MovieModel(
                    id=movie.id,
                    title=movie.title,
                    synopsis=movie.synopsis,
                    premiere_date=movie.premiere_date,
                    trailer_id=movie.trailer_id,
                    cover_path=movie.cover_path,
                )
            else:
                model.title = movie.title
                model.synopsis = movie.synopsis
                model.premiere_date = movie.premiere_date
                model.trailer_id = movie.trailer_id
                model.cover_path = movie.cover_path
                model.updated_at = utc_now()
            self._session.add(model)
            self._session.flush()

            self._session.execute(
                delete(MovieGenreLink).where(MovieGenreLink.movie_id == model.id)
            )
            for genre_id in dict.fromkeys(movie.genre_ids):
                self._session.add(MovieGenreLink(movie_id=model.id, genre_id=genre_id))

            self._session.commit()
        except Exception:
            self._session.rollback()
            raise

        self._session.refresh(model)
        genres = self._load_genres([model.id])
        return self._to_entity(model, genres.get(model.id, ()))

    def delete_by_id(self, movie_id: int) -> bool:
        """Supprime un film et ses associations dans une seule transaction."""
        model = self._session.get(MovieModel, movie_id)
        if model is None:
            return False
        try:
            self._session.execute(
                delete(MovieGenreLink).where(MovieGenreLink.movie_id == movie_id)
            )
            self._session.delete(model)
            self._session.commit()
        except Exception:
            self._session.rollback()
            raise
        return True

    def count(self) -> int:
        """Nombre total de films."""
        return self._session.exec(select(func.count()).select_from(MovieModel)).one()

    def exists_by_id(self, movie_id: int) -> bool:
        """Verifie l'existence d'un film."""
        return self._session.get(MovieModel, movie_id) is not None
