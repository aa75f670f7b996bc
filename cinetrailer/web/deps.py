"""
Dépendances partagées de l'application web.

Fournit les templates Jinja2 utilisées par toutes les routes, ainsi que les
dépendances FastAPI (session par requête, services, pagination).
"""

import tomllib
from collections.abc import Generator
from pathlib import Path
from typing import Optional
from urllib.parse import quote

from fastapi import Depends, Request
from fastapi.templating import Jinja2Templates
from sqlmodel import Session

from ..config import Settings
from ..core.entities.catalog import MOVIE_SORT_FIELDS, is_external_reference
from ..core.ports.storage import IStorageService
from ..core.value_objects import Sort
from ..infrastructure.persistence.database import get_session
from ..infrastructure.persistence.repositories import (
    SQLModelGenreRepository,
    SQLModelMovieRepository,
)
from ..services.catalog import CatalogService
from ..services.listing import ListingService

_WEB_DIR = Path(__file__).parent
_PROJECT_ROOT = _WEB_DIR.parent.parent

templates = Jinja2Templates(directory=_WEB_DIR / "templates")

# Version dynamique lue depuis pyproject.toml, disponible dans tous les templates
with open(_PROJECT_ROOT / "pyproject.toml", "rb") as f:
    _pyproject = tomllib.load(f)
templates.env.globals["app_version"] = f"CineTrailer v{_pyproject['project']['version']}"


def cover_url(cover_path: Optional[str]) -> Optional[str]:
    """URL d'affichage d'une affiche : URL externe telle quelle, sinon /assets/."""
    if not cover_path:
        return None
    if is_external_reference(cover_path):
        return cover_path
    return f"/assets/{quote(cover_path)}"


templates.env.globals["cover_url"] = cover_url


def get_db_session() -> Generator[Session, None, None]:
    """Session SQLModel ouverte pour la durée de la requête."""
    yield from get_session()


def get_settings(request: Request) -> Settings:
    return request.app.state.container.config()


def get_storage(request: Request) -> IStorageService:
    return request.app.state.container.storage()


def get_listing_service(
    settings: Settings = Depends(get_settings),
    session: Session = Depends(get_db_session),
) -> ListingService:
    return ListingService(
        SQLModelMovieRepository(session),
        public_page_size=settings.public_page_size,
        admin_page_size=settings.admin_page_size,
        latest_count=settings.home_latest_count,
    )


def get_catalog_service(
    storage: IStorageService = Depends(get_storage),
    session: Session = Depends(get_db_session),
) -> CatalogService:
    return CatalogService(
        SQLModelMovieRepository(session),
        SQLModelGenreRepository(session),
        storage,
    )


def resolve_paging(
    settings: Settings,
    page: int,
    size: Optional[int],
    sort: Optional[str],
    default_sort: Sort,
    default_size: int,
) -> tuple[int, int, Sort]:
    """
    Normalise les paramètres de pagination reçus en query string.

    Page négative ramenée à 0, taille bornée à [1, max_page_size],
    tri inconnu remplacé par le tri par défaut.
    """
    return (
        max(0, page),
        settings.clamp_page_size(size, default_size),
        Sort.parse(sort, default=default_sort, allowed=MOVIE_SORT_FIELDS),
    )
