"""
Objets valeur pour les fichiers echanges avec le stockage.

- UploadedFile : fichier recu d'un formulaire (nom d'origine + contenu)
- StoredResource : fichier present dans le stockage, pret a etre servi
"""

import mimetypes
from dataclasses import dataclass
from pathlib import Path
from typing import BinaryIO


@dataclass(frozen=True)
class UploadedFile:
    """
    Fichier televerse par un administrateur.

    Attributs :
        filename : Nom d'origine du fichier cote client
        content : Contenu binaire complet
    """

    filename: str
    content: bytes

    @property
    def is_empty(self) -> bool:
        """Vrai si aucun fichier n'a ete choisi dans le formulaire."""
        return not self.filename or not self.content

    @property
    def size(self) -> int:
        return len(self.content)


@dataclass(frozen=True)
class StoredResource:
    """
    Fichier lisible du stockage.

    Attributs :
        name : Nom logique (reference stockee dans cover_path)
        path : Chemin physique sous la racine du stockage
    """

    name: str
    path: Path

    @property
    def size(self) -> int:
        return self.path.stat().st_size

    @property
    def media_type(self) -> str:
        """Type MIME devine depuis l'extension (octet-stream par defaut)."""
        guessed, _ = mimetypes.guess_type(self.name)
        return guessed or "application/octet-stream"

    def open(self) -> BinaryIO:
        return self.path.open("rb")

    def read_bytes(self) -> bytes:
        return self.path.read_bytes()
