"""
Catalog entities.

Entities representing the movies published in the catalog and the
genres they are filed under.
"""

import re
from dataclasses import dataclass
from datetime import date
from typing import Optional

# Scheme prefix ("https://", "s3://") marking a cover hosted outside the storage
_URL_SCHEME = re.compile(r"^[A-Za-z][A-Za-z0-9+.\-]*://")

# Fields accepted by the movie store for sorting
MOVIE_SORT_FIELDS: frozenset[str] = frozenset({"id", "title", "premiere_date"})
GENRE_SORT_FIELDS: frozenset[str] = frozenset({"id", "title"})


def is_external_reference(cover_path: Optional[str]) -> bool:
    """Return True when the cover points to a URL rather than a stored file."""
    return bool(cover_path) and _URL_SCHEME.match(cover_path) is not None


@dataclass(frozen=True)
class Genre:
    """
    Movie genre.

    Genres are seeded once with fixed ids and shared between movies.

    Attributes:
        id: Externally assigned identifier
        title: Display label (ACTION, COMEDY...)
    """

    id: int
    title: str


@dataclass
class Movie:
    """
    Movie published in the catalog.

    Attributes:
        id: Internal database ID (None until persisted)
        title: Movie title
        synopsis: Plot summary
        premiere_date: Release date
        trailer_id: YouTube video id of the trailer
        cover_path: Stored cover filename, or an absolute URL
        genres: Genres of the movie (at least one)
    """

    id: Optional[int] = None
    title: str = ""
    synopsis: str = ""
    premiere_date: Optional[date] = None
    trailer_id: str = ""
    cover_path: Optional[str] = None
    genres: tuple[Genre, ...] = ()

    @property
    def genre_ids(self) -> list[int]:
        return [genre.id for genre in self.genres]

    @property
    def trailer_url(self) -> str:
        return f"https://www.youtube.com/embed/{self.trailer_id}"
