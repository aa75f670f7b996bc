"""
Interface port pour le stockage des fichiers.

Le stockage associe un nom logique à un fichier sous un répertoire racine
unique. Les affiches des films y sont déposées et servies via /assets.
"""

from abc import ABC, abstractmethod
from pathlib import Path

from cinetrailer.core.value_objects import StoredResource


class IStorageService(ABC):
    """
    Interface de stockage de fichiers par nom.

    Le nom retourné par store() est la référence conservée en base
    (cover_path). Aucun versionnement : un nom existant est écrasé.
    """

    @abstractmethod
    def initialize(self) -> None:
        """
        Crée le répertoire racine si nécessaire.

        Lève StorageError si le répertoire ne peut pas être créé.
        """
        ...

    @abstractmethod
    def store(self, content: bytes, filename: str) -> str:
        """
        Enregistre un fichier sous son nom d'origine.

        Args :
            content : Contenu binaire (non vide)
            filename : Nom du fichier, utilisé tel quel

        Retourne :
            Le nom stocké

        Lève StorageError si le contenu est vide ou si l'écriture échoue.
        """
        ...

    @abstractmethod
    def resolve(self, name: str) -> Path:
        """Chemin physique correspondant à un nom (sans vérifier l'existence)."""
        ...

    @abstractmethod
    def retrieve_as_resource(self, name: str) -> StoredResource:
        """
        Récupère un fichier lisible.

        Lève NotFoundError si le fichier n'existe pas ou n'est pas lisible.
        """
        ...

    @abstractmethod
    def delete(self, name: str) -> bool:
        """
        Supprime un fichier (ou répertoire) du stockage.

        Ne lève jamais d'exception : les échecs sont journalisés.

        Retourne :
            True si quelque chose a été supprimé, False sinon
        """
        ...
