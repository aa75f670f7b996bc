"""
Application FastAPI de CineTrailer.

Initialise l'application web avec le Container DI, prépare le stockage et
les genres par défaut, configure les fichiers statiques et monte les routes.
"""

from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI, Request
from fastapi.staticfiles import StaticFiles
from loguru import logger

from ..container import Container
from ..core.exceptions import NotFoundError, StorageError
from ..services.bootstrap import seed_default_genres
from .deps import templates
from .routes.admin import router as admin_router
from .routes.assets import router as assets_router
from .routes.home import router as home_router

_WEB_DIR = Path(__file__).parent


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Initialise le Container DI au démarrage.

    Un échec de création du répertoire de stockage (StorageError) empêche
    le démarrage de l'application.
    """
    container = Container()
    container.database.init()
    container.storage().initialize()
    seed_default_genres(container.genre_repository())
    app.state.container = container
    logger.info("CineTrailer démarré", storage=str(container.config().storage_dir))
    yield


app = FastAPI(title="CineTrailer", lifespan=lifespan)

# Fichiers statiques
app.mount("/static", StaticFiles(directory=_WEB_DIR / "static"), name="static")

# Routes
app.include_router(home_router)
app.include_router(admin_router)
app.include_router(assets_router)


@app.exception_handler(NotFoundError)
async def not_found_handler(request: Request, exc: NotFoundError):
    """Film ou fichier introuvable : page 404."""
    logger.debug(f"Introuvable : {exc}")
    return templates.TemplateResponse(
        request,
        "not_found.html",
        {"message": str(exc)},
        status_code=404,
    )


@app.exception_handler(StorageError)
async def storage_error_handler(request: Request, exc: StorageError):
    """Échec du stockage pendant une requête : mutation abandonnée."""
    logger.error(f"Erreur de stockage : {exc}")
    return templates.TemplateResponse(
        request,
        "error.html",
        {"message": str(exc)},
        status_code=500,
    )
