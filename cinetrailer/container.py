"""
Container d'injection de dependances via dependency-injector.

Fournit une gestion centralisee des dependances pour les interfaces CLI et Web :
configuration, stockage des affiches, repositories SQLModel et services.
"""

from dependency_injector import containers, providers

from .adapters.file_storage import LocalFileStorage
from .config import Settings
from .infrastructure.persistence.database import get_session, init_db
from .infrastructure.persistence.repositories import (
    SQLModelGenreRepository,
    SQLModelMovieRepository,
)
from .services.catalog import CatalogService
from .services.listing import ListingService


class Container(containers.DeclarativeContainer):
    """Container DI de l'application.

    Utilisation :
        container = Container()
        container.database.init()  # Initialise la DB une fois
        container.storage().initialize()
        listing = container.listing_service()

    Les routes web construisent leurs repositories sur la session de la
    requete ; les providers de repositories servent a la CLI.
    """

    # Configuration - singleton charge une seule fois
    config = providers.Singleton(Settings)

    # Database - Resource pour initialisation unique
    database = providers.Resource(init_db)

    # Session factory - nouvelle session a chaque appel
    session = providers.Factory(lambda: next(get_session()))

    # Stockage des affiches - un seul repertoire racine
    storage = providers.Singleton(
        LocalFileStorage,
        root=config.provided.storage_dir,
    )

    # Repositories - Factory pour nouvelle instance avec session fraiche
    genre_repository = providers.Factory(
        SQLModelGenreRepository,
        session=session,
    )
    movie_repository = providers.Factory(
        SQLModelMovieRepository,
        session=session,
    )

    # Services - Factory car dependent de repositories (sessions fraiches)
    catalog_service = providers.Factory(
        CatalogService,
        movie_repo=movie_repository,
        genre_repo=genre_repository,
        storage=storage,
    )
    listing_service = providers.Factory(
        ListingService,
        movie_repo=movie_repository,
        public_page_size=config.provided.public_page_size,
        admin_page_size=config.provided.admin_page_size,
        latest_count=config.provided.home_latest_count,
    )
