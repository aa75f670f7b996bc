"""
Routes publiques: accueil, catalogue paginé et fiche détail d'un film.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Request

from ...config import Settings
from ...services.listing import PUBLIC_DEFAULT_SORT, ListingService
from ..deps import get_listing_service, get_settings, resolve_paging, templates

router = APIRouter()


@router.get("/")
async def home(
    request: Request,
    listing: ListingService = Depends(get_listing_service),
):
    """Page d'accueil avec les derniers films sortis."""
    return templates.TemplateResponse(
        request,
        "index.html",
        {"latest_movies": listing.latest()},
    )


@router.get("/movies")
async def movies(
    request: Request,
    page: int = 0,
    size: Optional[int] = None,
    sort: Optional[str] = None,
    listing: ListingService = Depends(get_listing_service),
    settings: Settings = Depends(get_settings),
):
    """Catalogue public, trié par date de sortie décroissante par défaut."""
    page, size, parsed_sort = resolve_paging(
        settings, page, size, sort, PUBLIC_DEFAULT_SORT, settings.public_page_size
    )
    return templates.TemplateResponse(
        request,
        "movies.html",
        {"movies": listing.public_page(page, size, parsed_sort), "base_url": "/movies"},
    )


@router.get("/movies/{movie_id}")
async def movie_detail(
    request: Request,
    movie_id: int,
    listing: ListingService = Depends(get_listing_service),
):
    """Fiche d'un film (404 si l'ID est inconnu)."""
    return templates.TemplateResponse(
        request,
        "movie.html",
        {"movie": listing.detail(movie_id)},
    )
