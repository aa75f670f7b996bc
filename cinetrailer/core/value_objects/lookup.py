"""
Resultat type d'une recherche par identifiant.

Les repositories retournent `Found(valeur)` ou `NotFound(entite, cle)` au lieu
de lever une exception. La conversion en NotFoundError se fait a la frontiere
(service ou route web) via `unwrap()`.
"""

from dataclasses import dataclass
from typing import Generic, NoReturn, TypeVar, Union

from cinetrailer.core.exceptions import NotFoundError

T = TypeVar("T")


@dataclass(frozen=True)
class Found(Generic[T]):
    """Enregistrement trouve."""

    value: T

    @property
    def found(self) -> bool:
        return True

    def unwrap(self) -> T:
        return self.value


@dataclass(frozen=True)
class NotFound:
    """
    Aucun enregistrement pour la cle demandee.

    Attributs :
        entity : Nom lisible de l'entite ("film", "genre")
        key : Identifiant recherche
    """

    entity: str
    key: object

    @property
    def found(self) -> bool:
        return False

    def unwrap(self) -> NoReturn:
        raise NotFoundError(f"{self.entity} introuvable : {self.key}")


Lookup = Union[Found[T], NotFound]
