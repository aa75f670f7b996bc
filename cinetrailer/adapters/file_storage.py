"""
Adaptateur de stockage local des fichiers.

Implementation concrete de IStorageService : chaque fichier est ecrit sous
le repertoire racine configure (CINETRAILER_STORAGE_DIR) avec son nom
d'origine. Le dernier fichier ecrit sous un nom donne remplace le precedent.
"""

import os
import shutil
from pathlib import Path

from loguru import logger

from cinetrailer.core.exceptions import NotFoundError, StorageError
from cinetrailer.core.ports.storage import IStorageService
from cinetrailer.core.value_objects import StoredResource


class LocalFileStorage(IStorageService):
    """
    Stockage des fichiers sur le systeme de fichiers local.

    Utilisation:
        storage = LocalFileStorage(Path("data/covers"))
        storage.initialize()
        name = storage.store(content, "poster.jpg")
        resource = storage.retrieve_as_resource(name)
    """

    def __init__(self, root: Path) -> None:
        """
        Initialise le stockage.

        Args:
            root: Repertoire racine de tous les fichiers stockes
        """
        self._root = Path(root)

    @property
    def root(self) -> Path:
        return self._root

    def initialize(self) -> None:
        """Cree le repertoire racine (et ses parents) si necessaire."""
        try:
            self._root.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise StorageError(
                f"Impossible d'initialiser le stockage dans {self._root}"
            ) from e
        logger.debug(f"Stockage initialise : {self._root}")

    def store(self, content: bytes, filename: str) -> str:
        """
        Ecrit le contenu sous root/filename, en ecrasant un fichier existant.

        Le nom n'est ni normalise ni assaini : l'appelant fournit un nom sur.
        """
        if not content:
            raise StorageError("empty file")

        destination = self.resolve(filename)
        try:
            destination.write_bytes(content)
        except OSError as e:
            raise StorageError(f"Erreur lors du stockage du fichier {filename}") from e

        logger.info(f"Fichier stocke : {filename} ({len(content)} octets)")
        return filename

    def resolve(self, name: str) -> Path:
        return self._root / name

    def retrieve_as_resource(self, name: str) -> StoredResource:
        """Retourne le fichier s'il existe et est lisible."""
        path = self.resolve(name)
        if not path.is_file() or not os.access(path, os.R_OK):
            raise NotFoundError(f"Le fichier est introuvable : {name}")
        return StoredResource(name=name, path=path)

    def delete(self, name: str) -> bool:
        """
        Supprime le fichier ou repertoire root/name (recursif).

        Suppression au mieux : tout echec est journalise, jamais propage.
        """
        if not name:
            logger.warning("Suppression ignoree : nom de fichier vide")
            return False

        path = self.resolve(name)
        try:
            if path.is_dir() and not path.is_symlink():
                shutil.rmtree(path)
            else:
                path.unlink()
        except FileNotFoundError:
            logger.warning(f"Fichier a supprimer introuvable : {name}")
            return False
        except OSError as e:
            logger.warning(f"Erreur lors de la suppression de {name}: {e}")
            return False

        logger.info(f"Fichier supprime : {name}")
        return True
