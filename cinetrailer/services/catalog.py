"""
Service de gestion du catalogue (administration).

Orchestre le stockage des affiches et la persistance des films :

- Creation : validation -> stockage de l'affiche -> enregistrement du film.
  Aucune ecriture si la validation echoue, aucun film si le stockage echoue.
- Modification : les metadonnees sont toujours ecrasees ; une nouvelle affiche
  est d'abord stockee, le film enregistre, puis l'ancienne supprimee.
- Suppression : le film est supprime, puis son affiche locale (au mieux).
"""

from collections.abc import Mapping
from datetime import date
from typing import Any, Optional, Union

from loguru import logger
from pydantic import BaseModel, ConfigDict, Field
from pydantic import ValidationError as PydanticValidationError

from cinetrailer.core.entities.catalog import Genre, Movie, is_external_reference
from cinetrailer.core.exceptions import MissingCoverError, ValidationError
from cinetrailer.core.ports.repositories import IGenreRepository, IMovieRepository
from cinetrailer.core.ports.storage import IStorageService
from cinetrailer.core.value_objects import UploadedFile

# Message affiche pour chaque champ du formulaire en erreur
FIELD_MESSAGES: dict[str, str] = {
    "title": "Le titre est obligatoire",
    "synopsis": "Le synopsis est obligatoire",
    "premiere_date": "La date de sortie est obligatoire (AAAA-MM-JJ)",
    "trailer_id": "L'identifiant YouTube de la bande-annonce est obligatoire",
    "genre_ids": "Choisissez au moins un genre",
}


class MovieInput(BaseModel):
    """
    Donnees saisies dans le formulaire d'un film.

    Les chaines sont nettoyees des espaces ; une chaine vide est refusee.
    """

    model_config = ConfigDict(str_strip_whitespace=True)

    title: str = Field(min_length=1)
    synopsis: str = Field(min_length=1)
    premiere_date: date
    trailer_id: str = Field(min_length=1)
    genre_ids: list[int] = Field(min_length=1)


def _field_errors(error: PydanticValidationError) -> dict[str, str]:
    """Convertit les erreurs pydantic en messages par champ."""
    errors: dict[str, str] = {}
    for detail in error.errors():
        loc = detail.get("loc") or ("__root__",)
        name = str(loc[0])
        errors.setdefault(name, FIELD_MESSAGES.get(name, detail.get("msg", "Valeur invalide")))
    return errors


class CatalogService:
    """
    Service d'administration du catalogue.

    Utilisation:
        service = CatalogService(movie_repo, genre_repo, storage)
        movie = service.create(
            {"title": "Inception", "synopsis": "...", "premiere_date": "2010-07-16",
             "trailer_id": "YoHD9XEInc0", "genre_ids": [1, 5]},
            UploadedFile("poster.jpg", content),
        )
    """

    def __init__(
        self,
        movie_repo: IMovieRepository,
        genre_repo: IGenreRepository,
        storage: IStorageService,
    ) -> None:
        """
        Initialise le service.

        Args:
            movie_repo: Repository des films
            genre_repo: Repository des genres
            storage: Stockage des affiches
        """
        self._movie_repo = movie_repo
        self._genre_repo = genre_repo
        self._storage = storage

    def genre_choices(self) -> list[Genre]:
        """Genres proposes dans les formulaires, tries par titre."""
        return self._genre_repo.find_all()

    def get_for_edit(self, movie_id: int) -> Movie:
        """Film a modifier. Leve NotFoundError si l'ID est inconnu."""
        return self._movie_repo.find_by_id(movie_id).unwrap()

    def validate(
        self,
        data: Union[MovieInput, Mapping[str, Any]],
        cover: Optional[UploadedFile] = None,
        require_cover: bool = False,
    ) -> tuple[MovieInput, tuple[Genre, ...]]:
        """
        Valide les donnees d'un film sans aucun effet de bord.

        Toutes les erreurs sont collectees avant d'etre levees.

        Raises:
            MissingCoverError: affiche requise mais absente ou vide
            ValidationError: au moins un champ invalide ou genre inconnu
        """
        errors: dict[str, str] = {}
        movie_input: Optional[MovieInput] = None
        genres: tuple[Genre, ...] = ()

        try:
            if isinstance(data, MovieInput):
                movie_input = data
            else:
                movie_input = MovieInput.model_validate(dict(data))
        except PydanticValidationError as e:
            errors.update(_field_errors(e))

        if movie_input is not None:
            genres = tuple(self._genre_repo.find_by_ids(movie_input.genre_ids))
            unknown = set(movie_input.genre_ids) - {g.id for g in genres}
            if unknown:
                ids = ", ".join(str(i) for i in sorted(unknown))
                errors["genre_ids"] = f"Genre inconnu : {ids}"

        if require_cover and (cover is None or cover.is_empty):
            raise MissingCoverError(errors)
        if errors:
            raise ValidationError(errors)
        return movie_input, genres

    def create(
        self,
        data: Union[MovieInput, Mapping[str, Any]],
        cover: Optional[UploadedFile],
    ) -> Movie:
        """
        Cree un film avec son affiche.

        L'affiche est stockee avant l'enregistrement du film : si le stockage
        echoue (StorageError), aucun film n'est cree.
        """
        movie_input, genres = self.validate(data, cover, require_cover=True)

        cover_path = self._storage.store(cover.content, cover.filename)
        movie = self._movie_repo.save(
            Movie(
                title=movie_input.title,
                synopsis=movie_input.synopsis,
                premiere_date=movie_input.premiere_date,
                trailer_id=movie_input.trailer_id,
                cover_path=cover_path,
                genres=genres,
            )
        )
        logger.info(f"Film cree : {movie.title} (id={movie.id})")
        return movie

    def update(
        self,
        movie_id: int,
        data: Union[MovieInput, Mapping[str, Any]],
        cover: Optional[UploadedFile] = None,
    ) -> Movie:
        """
        Modifie un film.

        Sans nouvelle affiche, cover_path est conserve. Avec une nouvelle
        affiche : stockage, enregistrement du film, puis suppression de
        l'ancienne affiche locale (sauf si elle porte le meme nom).
        """
        movie_input, genres = self.validate(data)
        movie = self._movie_repo.find_by_id(movie_id).unwrap()

        movie.title = movie_input.title
        movie.synopsis = movie_input.synopsis
        movie.premiere_date = movie_input.premiere_date
        movie.trailer_id = movie_input.trailer_id
        movie.genres = genres

        previous_cover = movie.cover_path
        replace_cover = cover is not None and not cover.is_empty
        if replace_cover:
            movie.cover_path = self._storage.store(cover.content, cover.filename)

        saved = self._movie_repo.save(movie)
        logger.info(f"Film modifie : {saved.title} (id={saved.id})")

        if replace_cover and previous_cover != saved.cover_path:
            self._discard_cover(previous_cover)
        return saved

    def delete(self, movie_id: int) -> Movie:
        """
        Supprime un film puis son affiche locale.

        La suppression en base est definitive : un echec de suppression
        du fichier est seulement journalise.

        Returns:
            Le film supprime.
        """
        movie = self._movie_repo.find_by_id(movie_id).unwrap()
        self._movie_repo.delete_by_id(movie_id)
        logger.info(f"Film supprime : {movie.title} (id={movie_id})")
        self._discard_cover(movie.cover_path)
        return movie

    def _discard_cover(self, cover_path: Optional[str]) -> bool:
        """Supprime une affiche du stockage, jamais une URL externe."""
        if not cover_path:
            return False
        if is_external_reference(cover_path):
            logger.debug(f"Affiche externe conservee : {cover_path}")
            return False
        return self._storage.delete(cover_path)
