"""
Tests d'integration de l'application web (FastAPI + TestClient).

Chaque test demarre l'application (lifespan) sur une base SQLite et un
repertoire de stockage temporaires.
"""

import pytest
from fastapi.testclient import TestClient
from sqlmodel import Session, select

from cinetrailer.core.exceptions import StorageError
from cinetrailer.infrastructure.persistence import database
from cinetrailer.infrastructure.persistence.models import MovieModel
from cinetrailer.web.app import app
from cinetrailer.web.routes.admin import _upload_name

POSTER = bytes(range(256)) * 4


@pytest.fixture
def client(tmp_path, monkeypatch):
    monkeypatch.setenv("CINETRAILER_DATABASE_URL", f"sqlite:///{tmp_path}/web.db")
    monkeypatch.setenv("CINETRAILER_STORAGE_DIR", str(tmp_path / "covers"))
    monkeypatch.setenv("CINETRAILER_LOG_FILE", str(tmp_path / "logs" / "web.log"))
    database.reset_engine()
    with TestClient(app) as test_client:
        yield test_client
    database.reset_engine()


def _form(title="Inception", premiere_date="2010-07-16", genre_ids=("1", "5"), **overrides):
    data = {
        "title": title,
        "synopsis": "Un voleur s'introduit dans les reves.",
        "premiere_date": premiere_date,
        "trailer_id": "YoHD9XEInc0",
        "genre_ids": list(genre_ids),
    }
    data.update(overrides)
    return data


def _create(client, filename="poster.jpg", content=POSTER, **form):
    return client.post(
        "/admin/movies",
        data=_form(**form),
        files={"cover": (filename, content, "image/jpeg")},
        follow_redirects=False,
    )


def _movie_ids(client):
    with Session(database.get_engine()) as session:
        return [m.id for m in session.exec(select(MovieModel).order_by(MovieModel.id)).all()]


class TestStartup:
    def test_creates_storage_dir(self, client, tmp_path):
        assert (tmp_path / "covers").is_dir()

    def test_seeds_genres(self, client):
        response = client.get("/admin/movies/new")
        assert response.status_code == 200
        for title in ("ACTION", "COMEDY", "HORROR", "THRILLER", "ADVENTURE"):
            assert title in response.text


class TestPublicPages:
    def test_home_empty(self, client):
        response = client.get("/")
        assert response.status_code == 200
        assert "Aucun film" in response.text

    def test_home_shows_latest_four(self, client):
        for year in range(2001, 2007):
            _create(client, filename=f"p{year}.jpg", title=f"Film {year}", premiere_date=f"{year}-01-01")

        response = client.get("/")

        assert "Film 2006" in response.text
        assert "Film 2003" in response.text
        assert "Film 2002" not in response.text

    def test_movies_listing(self, client):
        _create(client)
        response = client.get("/movies", params={"sort": "title,asc", "size": 10})
        assert response.status_code == 200
        assert "Inception" in response.text

    def test_movies_listing_bad_params(self, client):
        response = client.get("/movies", params={"page": -3, "size": 10000, "sort": "color,up"})
        assert response.status_code == 200

    def test_movie_detail(self, client):
        _create(client)
        movie_id = _movie_ids(client)[0]

        response = client.get(f"/movies/{movie_id}")

        assert response.status_code == 200
        assert "Inception" in response.text
        assert "YoHD9XEInc0" in response.text

    def test_movie_detail_unknown(self, client):
        response = client.get("/movies/999")
        assert response.status_code == 404
        assert "introuvable" in response.text


class TestAssets:
    def test_serves_stored_cover(self, client):
        _create(client)
        response = client.get("/assets/poster.jpg")
        assert response.status_code == 200
        assert response.content == POSTER
        assert response.headers["content-type"].startswith("image/jpeg")

    def test_missing_file(self, client):
        assert client.get("/assets/absent.jpg").status_code == 404


class TestAdminCreate:
    def test_cover_name_stays_inside_storage(self, client, tmp_path):
        response = _create(client, filename="../escaped.jpg")

        assert response.status_code == 303
        assert (tmp_path / "covers" / "escaped.jpg").read_bytes() == POSTER
        assert not (tmp_path / "escaped.jpg").exists()
        assert client.get("/assets/escaped.jpg").status_code == 200

    def test_cover_name_without_basename_rejected(self, client):
        response = _create(client, filename="covers/..")

        assert response.status_code == 422
        assert _movie_ids(client) == []

    def test_success_redirects(self, client):
        response = _create(client)

        assert response.status_code == 303
        assert response.headers["location"] == "/admin"
        assert len(_movie_ids(client)) == 1

    def test_listing_shows_created_movie(self, client):
        _create(client)
        response = client.get("/admin")
        assert response.status_code == 200
        assert "Inception" in response.text

    def test_admin_listing_five_per_page(self, client):
        for i in range(7):
            _create(client, filename=f"p{i}.jpg", title=f"Titre {i}")

        first = client.get("/admin").text
        second = client.get("/admin", params={"page": 1}).text

        assert "Titre 4" in first and "Titre 5" not in first
        assert "Titre 5" in second and "Titre 6" in second

    def test_missing_cover_rerenders_form(self, client):
        response = client.post("/admin/movies", data=_form(), follow_redirects=False)

        assert response.status_code == 422
        assert "obligatoire" in response.text
        assert 'value="Inception"' in response.text
        assert _movie_ids(client) == []

    def test_no_genre_rerenders_form(self, client):
        response = _create(client, genre_ids=())

        assert response.status_code == 422
        assert "Choisissez au moins un genre" in response.text
        assert _movie_ids(client) == []


class TestAdminEdit:
    def test_edit_form(self, client):
        _create(client)
        movie_id = _movie_ids(client)[0]

        response = client.get(f"/admin/movies/{movie_id}/edit")

        assert response.status_code == 200
        assert 'value="Inception"' in response.text
        assert "/assets/poster.jpg" in response.text

    def test_edit_form_unknown(self, client):
        assert client.get("/admin/movies/999/edit").status_code == 404

    def test_update_without_file_keeps_cover(self, client, tmp_path):
        _create(client)
        movie_id = _movie_ids(client)[0]

        response = client.post(
            f"/admin/movies/{movie_id}/edit",
            data=_form(title="Inception 2"),
            follow_redirects=False,
        )

        assert response.status_code == 303
        detail = client.get(f"/movies/{movie_id}").text
        assert "Inception 2" in detail
        assert "/assets/poster.jpg" in detail
        assert (tmp_path / "covers" / "poster.jpg").exists()

    def test_update_with_file_replaces_cover(self, client, tmp_path):
        _create(client)
        movie_id = _movie_ids(client)[0]

        response = client.post(
            f"/admin/movies/{movie_id}/edit",
            data=_form(),
            files={"cover": ("poster-v2.jpg", b"v2", "image/jpeg")},
            follow_redirects=False,
        )

        assert response.status_code == 303
        assert (tmp_path / "covers" / "poster-v2.jpg").read_bytes() == b"v2"
        assert not (tmp_path / "covers" / "poster.jpg").exists()

    def test_update_invalid_rerenders(self, client):
        _create(client)
        movie_id = _movie_ids(client)[0]

        response = client.post(
            f"/admin/movies/{movie_id}/edit",
            data=_form(premiere_date="demain"),
            follow_redirects=False,
        )

        assert response.status_code == 422
        assert "date de sortie" in response.text


class TestAdminDelete:
    def test_delete_redirects_and_removes_cover(self, client, tmp_path):
        _create(client)
        movie_id = _movie_ids(client)[0]

        response = client.post(f"/admin/movies/{movie_id}/delete", follow_redirects=False)

        assert response.status_code == 303
        assert response.headers["location"] == "/admin"
        assert _movie_ids(client) == []
        assert not (tmp_path / "covers" / "poster.jpg").exists()

    def test_delete_unknown(self, client):
        response = client.post("/admin/movies/999/delete", follow_redirects=False)
        assert response.status_code == 404


@pytest.mark.parametrize(
    "filename,expected",
    [
        ("poster.jpg", "poster.jpg"),
        ("../escaped.jpg", "escaped.jpg"),
        ("/etc/cron.d/job", "job"),
        ("C:\\Users\\me\\poster.jpg", "poster.jpg"),
        ("..", ""),
        (None, ""),
    ],
)
def test_upload_name_drops_directories(filename, expected):
    assert _upload_name(filename) == expected


def test_startup_fails_when_storage_cannot_be_created(tmp_path, monkeypatch):
    blocker = tmp_path / "blocker"
    blocker.write_text("pas un repertoire")
    monkeypatch.setenv("CINETRAILER_DATABASE_URL", f"sqlite:///{tmp_path}/web.db")
    monkeypatch.setenv("CINETRAILER_STORAGE_DIR", str(blocker / "covers"))
    monkeypatch.setenv("CINETRAILER_LOG_FILE", str(tmp_path / "logs" / "web.log"))
    database.reset_engine()
    try:
        with pytest.raises(StorageError):
            with TestClient(app):
                pass
    finally:
        database.reset_engine()
    assert not (blocker / "covers").exists()
