"""
Business entities representing core domain concepts.

Exports:
- Genre: Movie genre (seeded, shared)
- Movie: Movie record with its cover and genres
- is_external_reference: Tells URL covers apart from stored files
"""

from cinetrailer.core.entities.catalog import (
    GENRE_SORT_FIELDS,
    MOVIE_SORT_FIELDS,
    Genre,
    Movie,
    is_external_reference,
)

__all__ = [
    "Genre",
    "Movie",
    "is_external_reference",
    "MOVIE_SORT_FIELDS",
    "GENRE_SORT_FIELDS",
]
