"""
Modeles SQLModel pour la base de donnees CineTrailer.

Ces modeles representent les tables de la base de donnees.
Ils sont distincts des entites de domaine (dataclass dans core/entities/)
selon l'architecture hexagonale.

Tables:
- genres: Genres (identifiants attribues au seed)
- movies: Films du catalogue
- genre_movie: Association film <-> genre (plusieurs a plusieurs)

Aucune Relationship SQLModel n'est declaree : les genres d'un film sont
charges par une requete de jointure explicite dans le repository.
"""

from __future__ import annotations

from datetime import date, datetime, timezone

from sqlmodel import Field, SQLModel


def utc_now() -> datetime:
    """Horodatage UTC avec fuseau (les colonnes datetime le requierent)."""
    return datetime.now(timezone.utc)


class GenreModel(SQLModel, table=True):
    """
    Modele representant un genre.

    L'ID n'est pas auto-incremente : il est fixe par le seed.
    """

    __tablename__ = "genres"

    id: int = Field(primary_key=True, sa_column_kwargs={"autoincrement": False})
    title: str = Field(index=True)


class MovieModel(SQLModel, table=True):
    """
    Modele representant un film du catalogue.

    cover_path contient le nom du fichier dans le stockage, ou une URL absolue.
    """

    __tablename__ = "movies"

    id: int | None = Field(default=None, primary_key=True)
    title: str = Field(index=True)
    synopsis: str
    premiere_date: date = Field(index=True)
    trailer_id: str
    cover_path: str | None = None
    created_at: datetime | None = Field(default_factory=utc_now)
    updated_at: datetime | None = Field(default_factory=utc_now)


class MovieGenreLink(SQLModel, table=True):
    """Ligne d'association entre un film et un genre."""

    __tablename__ = "genre_movie"

    movie_id: int = Field(foreign_key="movies.id", primary_key=True)
    genre_id: int = Field(foreign_key="genres.id", primary_key=True, index=True)
