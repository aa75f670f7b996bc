"""
Objets valeur de pagination et de tri.

Equivalent des parametres `page`, `size` et `sort` des listings : les
repositories les traduisent en ORDER BY / LIMIT / OFFSET cote base.
Les numeros de page commencent a 0.
"""

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Generic, Optional, TypeVar

T = TypeVar("T")


class SortDirection(Enum):
    """Sens du tri."""

    ASC = "asc"
    DESC = "desc"


@dataclass(frozen=True)
class Sort:
    """
    Critere de tri sur un champ.

    Attributs :
        field : Nom du champ de l'entite (ex: "title", "premiere_date")
        direction : Sens du tri (ASC par defaut)
    """

    field: str
    direction: SortDirection = SortDirection.ASC

    @property
    def descending(self) -> bool:
        return self.direction is SortDirection.DESC

    @classmethod
    def parse(
        cls,
        raw: Optional[str],
        default: "Sort",
        allowed: Optional[frozenset[str]] = None,
    ) -> "Sort":
        """
        Parse un parametre de tri de la forme "champ,sens".

        Le sens est optionnel ("title" equivaut a "title,asc").
        Retourne `default` si la valeur est vide, si le champ n'est pas
        dans `allowed` ou si le sens est inconnu.
        """
        if not raw:
            return default
        name, _, direction = raw.partition(",")
        name = name.strip()
        if not name or (allowed is not None and name not in allowed):
            return default
        try:
            parsed = SortDirection((direction.strip() or "asc").lower())
        except ValueError:
            return default
        return cls(field=name, direction=parsed)

    def __str__(self) -> str:
        return f"{self.field},{self.direction.value}"


@dataclass(frozen=True)
class PageRequest:
    """
    Demande d'une page de resultats.

    Attributs :
        page : Numero de page (0 = premiere page)
        size : Nombre maximum d'elements par page
        sort : Critere de tri
    """

    page: int = 0
    size: int = 20
    sort: Sort = field(default_factory=lambda: Sort("id"))

    def __post_init__(self) -> None:
        if self.page < 0:
            raise ValueError(f"Numero de page negatif : {self.page}")
        if self.size < 1:
            raise ValueError(f"Taille de page invalide : {self.size}")

    @property
    def offset(self) -> int:
        """Index du premier element de la page."""
        return self.page * self.size


@dataclass(frozen=True)
class Page(Generic[T]):
    """
    Page de resultats avec les informations de navigation.

    Attributs :
        items : Elements de la page courante
        number : Numero de la page (0 = premiere)
        size : Taille de page demandee
        total : Nombre total d'elements toutes pages confondues
        sort : Tri applique
    """

    items: tuple[T, ...]
    number: int
    size: int
    total: int
    sort: Optional[Sort] = None

    @property
    def total_pages(self) -> int:
        return max(1, math.ceil(self.total / self.size))

    @property
    def has_next(self) -> bool:
        return self.number + 1 < self.total_pages

    @property
    def has_previous(self) -> bool:
        return self.number > 0

    @property
    def is_first(self) -> bool:
        return not self.has_previous

    @property
    def is_last(self) -> bool:
        return not self.has_next

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self):
        return iter(self.items)
