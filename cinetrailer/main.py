"""
Point d'entrée CLI de CineTrailer.

Initialise le container DI, configure le logging et fournit les commandes CLI
(serveur web, genres, listing des films).
"""

from typing import Annotated

import typer
from loguru import logger
from rich.console import Console
from rich.table import Table

from . import __version__
from .config import Settings
from .container import Container
from .core.entities.catalog import MOVIE_SORT_FIELDS
from .core.value_objects import Sort
from .logging_config import configure_logging, level_from_verbosity
from .services.bootstrap import seed_default_genres
from .services.listing import ADMIN_DEFAULT_SORT

app = typer.Typer(
    name="cinetrailer",
    help="Catalogue de bandes-annonces de films",
)
container = Container()
console = Console()


@app.callback()
def main_callback(
    verbose: Annotated[
        int,
        typer.Option(
            "--verbose", "-v", count=True, help="Augmenter la verbosite (-v, -vv)"
        ),
    ] = 0,
    quiet: Annotated[
        bool,
        typer.Option("--quiet", "-q", help="Mode silencieux (erreurs uniquement)"),
    ] = False,
) -> None:
    """CineTrailer - Catalogue de bandes-annonces."""
    settings = get_config()
    configure_logging(settings, level_from_verbosity(verbose, quiet, default=settings.log_level))
    logger.debug(f"CineTrailer v{__version__}")


def get_config() -> Settings:
    """Récupère les paramètres de l'application depuis le container DI."""
    return container.config()


@app.command()
def info() -> None:
    """Affiche la configuration actuelle."""
    config = get_config()
    logger.info("Configuration CineTrailer")
    typer.echo(f"Stockage des affiches : {config.storage_dir}")
    typer.echo(f"Base de données : {config.database_url}")
    typer.echo(f"Films par page (public) : {config.public_page_size}")
    typer.echo(f"Films par page (admin) : {config.admin_page_size}")
    typer.echo(f"Niveau de log : {config.log_level}")


@app.command()
def version() -> None:
    """Affiche les informations de version."""
    typer.echo(f"CineTrailer v{__version__}")


@app.command()
def seed() -> None:
    """Crée les tables, le répertoire de stockage et les genres par défaut."""
    container.database.init()
    container.storage().initialize()
    inserted = seed_default_genres(container.genre_repository())
    typer.echo(f"{inserted} genre(s) ajouté(s)")


@app.command()
def genres() -> None:
    """Liste les genres disponibles."""
    container.database.init()
    table = Table(title="Genres")
    table.add_column("ID", justify="right")
    table.add_column("Titre")
    for genre in container.genre_repository().find_all():
        table.add_row(str(genre.id), genre.title)
    console.print(table)


@app.command()
def movies(
    page: Annotated[int, typer.Option(min=0, help="Numéro de page (0 = première)")] = 0,
    size: Annotated[int, typer.Option(min=1, help="Films par page")] = 5,
    sort: Annotated[str, typer.Option(help="Tri 'champ,sens' (ex: premiere_date,desc)")] = str(
        ADMIN_DEFAULT_SORT
    ),
) -> None:
    """Liste une page du catalogue."""
    container.database.init()
    parsed_sort = Sort.parse(sort, default=ADMIN_DEFAULT_SORT, allowed=MOVIE_SORT_FIELDS)
    result = container.listing_service().admin_page(page, size, parsed_sort)

    table = Table(title=f"Films - page {result.number + 1}/{result.total_pages}")
    table.add_column("ID", justify="right")
    table.add_column("Titre")
    table.add_column("Sortie")
    table.add_column("Genres")
    table.add_column("Affiche")
    for movie in result:
        table.add_row(
            str(movie.id),
            movie.title,
            movie.premiere_date.isoformat() if movie.premiere_date else "",
            ", ".join(g.title for g in movie.genres),
            movie.cover_path or "",
        )
    console.print(table)
    typer.echo(f"Total : {result.total} film(s)")


@app.command()
def serve(
    host: Annotated[str, typer.Option(help="Adresse d'écoute")] = "0.0.0.0",
    port: Annotated[int, typer.Option(help="Port d'écoute")] = 8000,
    reload: Annotated[bool, typer.Option(help="Rechargement automatique")] = False,
) -> None:
    """Lance le serveur web CineTrailer."""
    import uvicorn

    typer.echo(f"Démarrage du serveur sur {host}:{port}")
    uvicorn.run("cinetrailer.web.app:app", host=host, port=port, reload=reload)


def main() -> None:
    """Point d'entrée de l'application."""
    app()


if __name__ == "__main__":
    main()
