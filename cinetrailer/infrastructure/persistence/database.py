"""
Configuration de la base de donnees de CineTrailer.

Ce module fournit :
- Engine SQLAlchemy (SQLite par defaut) cree a la demande
- Session factory avec context manager
- Fonction d'initialisation des tables

La base de donnees est configuree via CINETRAILER_DATABASE_URL
(defaut: sqlite:///data/cinetrailer.db).
"""

from collections.abc import Generator
from pathlib import Path
from typing import Optional

from sqlalchemy import Engine
from sqlmodel import Session, SQLModel, create_engine

# Engine global - initialise lors du premier appel a get_engine()
_engine: Optional[Engine] = None


def build_engine(db_url: str) -> Engine:
    """
    Cree un engine pour l'URL donnee.

    Pour un fichier SQLite, le repertoire parent est cree si necessaire.
    """
    connect_args = {}
    if db_url.startswith("sqlite"):
        connect_args["check_same_thread"] = False
        if db_url.startswith("sqlite:///") and not db_url.startswith("sqlite:///:memory:"):
            db_path = Path(db_url.replace("sqlite:///", ""))
            db_path.parent.mkdir(exist_ok=True, parents=True)

    return create_engine(db_url, echo=False, connect_args=connect_args)


def get_engine() -> Engine:
    """
    Retourne l'engine, en le creant si necessaire.

    Utilise la configuration de l'application pour l'URL de la BDD.
    """
    global _engine
    if _engine is None:
        from cinetrailer.config import Settings

        _engine = build_engine(Settings().database_url)
    return _engine


def reset_engine() -> None:
    """Ferme et oublie l'engine courant (changement de configuration, tests)."""
    global _engine
    if _engine is not None:
        _engine.dispose()
    _engine = None


def get_session() -> Generator[Session, None, None]:
    """
    Generateur de session SQLModel.

    Utilisation avec next() ou comme dependance FastAPI :
        session = next(get_session())
        try:
            # operations
        finally:
            session.close()

    Yields:
        Session SQLModel connectee a l'engine
    """
    with Session(get_engine()) as session:
        yield session


def init_db() -> None:
    """
    Initialise la base de donnees en creant toutes les tables.

    Importe les modeles pour enregistrer leurs metadonnees dans
    SQLModel.metadata, puis cree les tables manquantes.

    Doit etre appelee une fois au demarrage de l'application.
    """
    # L'import est fait ici pour eviter les imports circulaires
    from cinetrailer.infrastructure.persistence import models  # noqa: F401

    SQLModel.metadata.create_all(get_engine())
