"""
Routes d'administration: listing, création, modification et suppression des films.

Les formulaires sont envoyés en multipart (métadonnées + affiche). En cas
d'erreur de validation, le formulaire est réaffiché avec les valeurs saisies ;
en cas de succès, redirection vers /admin.
"""

from pathlib import PurePosixPath
from typing import Any, Optional

from fastapi import APIRouter, Depends, Request
from fastapi.responses import RedirectResponse
from starlette.datastructures import UploadFile

from ...config import Settings
from ...core.entities.catalog import Movie
from ...core.exceptions import ValidationError
from ...core.value_objects import UploadedFile
from ...services.catalog import CatalogService
from ...services.listing import ADMIN_DEFAULT_SORT, ListingService
from ..deps import (
    get_catalog_service,
    get_listing_service,
    get_settings,
    resolve_paging,
    templates,
)

router = APIRouter(prefix="/admin")

# Champs texte du formulaire film
_TEXT_FIELDS = ("title", "synopsis", "premiere_date", "trailer_id")


def _upload_name(filename: Optional[str]) -> str:
    """Nom de fichier sans repertoire : le stockage ecrit sous root/nom."""
    name = PurePosixPath((filename or "").replace("\\", "/")).name
    return "" if name in (".", "..") else name


async def _read_movie_form(request: Request) -> tuple[dict[str, Any], Optional[UploadedFile]]:
    """Extrait les métadonnées et l'affiche d'un formulaire multipart."""
    form = await request.form()
    values: dict[str, Any] = {name: form.get(name) or "" for name in _TEXT_FIELDS}
    values["genre_ids"] = [str(v) for v in form.getlist("genre_ids") if v]

    cover = None
    upload = form.get("cover")
    if isinstance(upload, UploadFile):
        cover = UploadedFile(
            filename=_upload_name(upload.filename), content=await upload.read()
        )
    return values, cover


def _movie_values(movie: Movie) -> dict[str, Any]:
    """Valeurs initiales du formulaire d'édition."""
    return {
        "title": movie.title,
        "synopsis": movie.synopsis,
        "premiere_date": movie.premiere_date.isoformat() if movie.premiere_date else "",
        "trailer_id": movie.trailer_id,
        "genre_ids": [str(g.id) for g in movie.genres],
    }


def _render_form(
    request: Request,
    catalog: CatalogService,
    action: str,
    values: dict[str, Any],
    errors: Optional[dict[str, str]] = None,
    movie: Optional[Movie] = None,
    status_code: int = 200,
):
    return templates.TemplateResponse(
        request,
        "admin/movie_form.html",
        {
            "action": action,
            "values": values,
            "errors": errors or {},
            "movie": movie,
            "genres": catalog.genre_choices(),
        },
        status_code=status_code,
    )


@router.get("")
async def admin_index(
    request: Request,
    page: int = 0,
    size: Optional[int] = None,
    sort: Optional[str] = None,
    listing: ListingService = Depends(get_listing_service),
    settings: Settings = Depends(get_settings),
):
    """Listing d'administration, 5 films par page triés par titre."""
    page, size, parsed_sort = resolve_paging(
        settings, page, size, sort, ADMIN_DEFAULT_SORT, settings.admin_page_size
    )
    return templates.TemplateResponse(
        request,
        "admin/index.html",
        {"movies": listing.admin_page(page, size, parsed_sort), "base_url": "/admin"},
    )


@router.get("/movies/new")
async def new_movie_form(
    request: Request,
    catalog: CatalogService = Depends(get_catalog_service),
):
    """Formulaire de création."""
    return _render_form(request, catalog, "/admin/movies", {"genre_ids": []})


@router.post("/movies")
async def create_movie(
    request: Request,
    catalog: CatalogService = Depends(get_catalog_service),
):
    """Crée un film ; l'affiche est obligatoire."""
    values, cover = await _read_movie_form(request)
    try:
        catalog.create(values, cover)
    except ValidationError as e:
        return _render_form(
            request, catalog, "/admin/movies", values, e.errors, status_code=422
        )
    return RedirectResponse(url="/admin", status_code=303)


@router.get("/movies/{movie_id}/edit")
async def edit_movie_form(
    request: Request,
    movie_id: int,
    catalog: CatalogService = Depends(get_catalog_service),
):
    """Formulaire de modification (404 si le film est inconnu)."""
    movie = catalog.get_for_edit(movie_id)
    return _render_form(
        request,
        catalog,
        f"/admin/movies/{movie_id}/edit",
        _movie_values(movie),
        movie=movie,
    )


@router.post("/movies/{movie_id}/edit")
async def update_movie(
    request: Request,
    movie_id: int,
    catalog: CatalogService = Depends(get_catalog_service),
):
    """Modifie un film ; l'affiche n'est remplacée que si un fichier est envoyé."""
    values, cover = await _read_movie_form(request)
    try:
        catalog.update(movie_id, values, cover)
    except ValidationError as e:
        return _render_form(
            request,
            catalog,
            f"/admin/movies/{movie_id}/edit",
            values,
            e.errors,
            movie=catalog.get_for_edit(movie_id),
            status_code=422,
        )
    return RedirectResponse(url="/admin", status_code=303)


@router.post("/movies/{movie_id}/delete")
async def delete_movie(
    movie_id: int,
    catalog: CatalogService = Depends(get_catalog_service),
):
    """Supprime un film et son affiche locale."""
    catalog.delete(movie_id)
    return RedirectResponse(url="/admin", status_code=303)
