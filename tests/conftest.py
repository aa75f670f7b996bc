"""
Fixtures pytest partagees pour les tests CineTrailer.

Ce module contient les fixtures communes utilisees dans les tests:
- Settings de test avec chemins temporaires
- Engine / session SQLite dans un fichier temporaire
- Repositories, stockage local et services prets a l'emploi
"""

from datetime import date
from pathlib import Path
from typing import Iterator

import pytest
from sqlalchemy import Engine
from sqlmodel import Session, SQLModel

from cinetrailer.adapters.file_storage import LocalFileStorage
from cinetrailer.config import Settings
from cinetrailer.core.entities.catalog import Genre, Movie
from cinetrailer.core.value_objects import Sort, UploadedFile
from cinetrailer.infrastructure.persistence import models  # noqa: F401
from cinetrailer.infrastructure.persistence.database import build_engine
from cinetrailer.infrastructure.persistence.repositories import (
    SQLModelGenreRepository,
    SQLModelMovieRepository,
)
from cinetrailer.services.bootstrap import seed_default_genres
from cinetrailer.services.catalog import CatalogService
from cinetrailer.services.listing import ListingService


@pytest.fixture
def test_settings(tmp_path: Path) -> Settings:
    """
    Settings de test avec chemins temporaires.

    Utilise tmp_path de pytest pour isoler base, stockage et logs.
    """
    return Settings(
        storage_dir=tmp_path / "covers",
        database_url=f"sqlite:///{tmp_path}/test.db",
        log_file=tmp_path / "logs" / "test.log",
    )


@pytest.fixture
def engine(tmp_path: Path) -> Iterator[Engine]:
    """Engine SQLite sur un fichier temporaire, tables creees."""
    engine = build_engine(f"sqlite:///{tmp_path}/repo.db")
    SQLModel.metadata.create_all(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session(engine: Engine) -> Iterator[Session]:
    with Session(engine) as session:
        yield session


@pytest.fixture
def genre_repo(session: Session) -> SQLModelGenreRepository:
    return SQLModelGenreRepository(session)


@pytest.fixture
def movie_repo(session: Session) -> SQLModelMovieRepository:
    return SQLModelMovieRepository(session)


@pytest.fixture
def seeded_genres(genre_repo: SQLModelGenreRepository) -> list[Genre]:
    """Les cinq genres par defaut, tries par ID."""
    seed_default_genres(genre_repo)
    return genre_repo.find_all(Sort("id"))


@pytest.fixture
def storage(tmp_path: Path) -> LocalFileStorage:
    """Stockage local initialise dans un repertoire temporaire."""
    storage = LocalFileStorage(tmp_path / "covers")
    storage.initialize()
    return storage


@pytest.fixture
def catalog(
    movie_repo: SQLModelMovieRepository,
    genre_repo: SQLModelGenreRepository,
    storage: LocalFileStorage,
    seeded_genres: list[Genre],
) -> CatalogService:
    return CatalogService(movie_repo, genre_repo, storage)


@pytest.fixture
def listing(movie_repo: SQLModelMovieRepository) -> ListingService:
    return ListingService(movie_repo, public_page_size=20, admin_page_size=5, latest_count=4)


@pytest.fixture
def movie_data() -> dict:
    """Donnees de formulaire valides (Inception, ACTION + ADVENTURE)."""
    return {
        "title": "Inception",
        "synopsis": "Un voleur s'introduit dans les reves.",
        "premiere_date": "2010-07-16",
        "trailer_id": "YoHD9XEInc0",
        "genre_ids": [1, 5],
    }


@pytest.fixture
def cover() -> UploadedFile:
    """Affiche de 1024 octets."""
    return UploadedFile(filename="poster.jpg", content=bytes(range(256)) * 4)


@pytest.fixture
def make_movie(seeded_genres: list[Genre]):
    """Fabrique d'entites Movie non persistees."""
    by_id = {g.id: g for g in seeded_genres}

    def _make(
        title: str,
        premiere_date: date = date(2020, 1, 1),
        genre_ids: tuple[int, ...] = (1,),
        cover_path: str | None = None,
    ) -> Movie:
        return Movie(
            title=title,
            synopsis=f"Synopsis de {title}",
            premiere_date=premiere_date,
            trailer_id="dQw4w9WgXcQ",
            cover_path=cover_path or f"{title.lower().replace(' ', '_')}.jpg",
            genres=tuple(by_id[i] for i in genre_ids),
        )

    return _make
