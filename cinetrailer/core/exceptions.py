"""
Exceptions du catalogue.

Toutes les erreurs métier héritent de CatalogError pour que la couche web
puisse les intercepter à un seul endroit :

- ValidationError : champ obligatoire manquant ou invalide (formulaire réaffiché)
- MissingCoverError : cas particulier de validation, affiche absente ou vide
- NotFoundError : film inconnu ou fichier introuvable (404)
- StorageError : échec du système de fichiers (fatal au démarrage)
"""

from typing import Optional


class CatalogError(Exception):
    """Erreur de base du catalogue."""


class ValidationError(CatalogError):
    """
    Erreur de validation des données saisies.

    Attributs :
        errors : Messages d'erreur indexés par nom de champ
    """

    def __init__(self, errors: dict[str, str], message: Optional[str] = None) -> None:
        self.errors = dict(errors)
        if message is None:
            fields = ", ".join(sorted(self.errors))
            message = f"Donnees invalides : {fields}"
        super().__init__(message)


class MissingCoverError(ValidationError):
    """L'affiche est obligatoire à la création d'un film."""

    def __init__(self, errors: Optional[dict[str, str]] = None) -> None:
        merged = dict(errors or {})
        merged.setdefault("cover", "L'affiche est obligatoire")
        super().__init__(merged)


class NotFoundError(CatalogError):
    """Film, genre ou fichier introuvable."""


class StorageError(CatalogError):
    """Échec d'une opération sur le stockage des fichiers."""
