"""
Objets valeur immutables representant des concepts du domaine sans identite.

Exports :
- Sort, SortDirection, PageRequest, Page : pagination et tri des listings
- Found, NotFound, Lookup : resultat d'une recherche par identifiant
- UploadedFile, StoredResource : fichiers recus et fichiers stockes
"""

from cinetrailer.core.value_objects.files import StoredResource, UploadedFile
from cinetrailer.core.value_objects.lookup import Found, Lookup, NotFound
from cinetrailer.core.value_objects.paging import (
    Page,
    PageRequest,
    Sort,
    SortDirection,
)

__all__ = [
    "Sort",
    "SortDirection",
    "PageRequest",
    "Page",
    "Found",
    "NotFound",
    "Lookup",
    "UploadedFile",
    "StoredResource",
]
