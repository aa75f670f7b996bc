"""
Tests pour les entites du catalogue.
"""

import pytest

from cinetrailer.core.entities.catalog import Genre, Movie, is_external_reference


class TestIsExternalReference:
    """Distinction entre URL et fichier du stockage."""

    @pytest.mark.parametrize(
        "cover_path",
        [
            "http://example.com/poster.jpg",
            "https://image.tmdb.org/t/p/w500/poster.jpg",
            "s3://bucket/poster.jpg",
        ],
    )
    def test_urls(self, cover_path):
        assert is_external_reference(cover_path)

    @pytest.mark.parametrize(
        "cover_path",
        ["poster.jpg", "http_poster.jpg", "httpposter.jpg", "covers/poster.jpg", "", None],
    )
    def test_local_names(self, cover_path):
        assert not is_external_reference(cover_path)


class TestMovie:
    """Tests pour l'entite Movie."""

    def test_genre_ids(self):
        movie = Movie(genres=(Genre(1, "ACTION"), Genre(5, "ADVENTURE")))
        assert movie.genre_ids == [1, 5]

    def test_trailer_url(self):
        assert Movie(trailer_id="YoHD9XEInc0").trailer_url == (
            "https://www.youtube.com/embed/YoHD9XEInc0"
        )
