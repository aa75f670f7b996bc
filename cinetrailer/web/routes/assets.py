"""
Route de service des fichiers stockés (affiches).
"""

from fastapi import APIRouter, Depends
from fastapi.responses import FileResponse

from ...core.ports.storage import IStorageService
from ..deps import get_storage

router = APIRouter(prefix="/assets")


@router.get("/{filename}")
async def get_asset(filename: str, storage: IStorageService = Depends(get_storage)):
    """Retourne le fichier demandé, ou 404 s'il est introuvable ou illisible."""
    resource = storage.retrieve_as_resource(filename)
    return FileResponse(resource.path, media_type=resource.media_type)
