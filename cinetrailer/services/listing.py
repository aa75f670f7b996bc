"""
Projections en lecture du catalogue.

- Accueil : les derniers films sortis (4 par defaut)
- Catalogue public : pagine, tri par date de sortie decroissante par defaut
- Administration : pagine par 5, tri par titre par defaut
- Fiche detail d'un film
"""

from typing import Optional

from cinetrailer.core.entities.catalog import Movie
from cinetrailer.core.ports.repositories import IMovieRepository
from cinetrailer.core.value_objects import Page, PageRequest, Sort, SortDirection

LATEST_SORT = Sort("premiere_date", SortDirection.DESC)
PUBLIC_DEFAULT_SORT = Sort("premiere_date", SortDirection.DESC)
ADMIN_DEFAULT_SORT = Sort("title", SortDirection.ASC)


class ListingService:
    """
    Service de consultation du catalogue.

    Le tri et la pagination sont delegues au repository (donc a la base).
    """

    def __init__(
        self,
        movie_repo: IMovieRepository,
        public_page_size: int = 20,
        admin_page_size: int = 5,
        latest_count: int = 4,
    ) -> None:
        self._movie_repo = movie_repo
        self._public_page_size = public_page_size
        self._admin_page_size = admin_page_size
        self._latest_count = latest_count

    def latest(self, limit: Optional[int] = None) -> list[Movie]:
        """Derniers films par date de sortie (page 0 de l'accueil)."""
        request = PageRequest(page=0, size=limit or self._latest_count, sort=LATEST_SORT)
        return list(self._movie_repo.find_all(request).items)

    def public_page(
        self, page: int = 0, size: Optional[int] = None, sort: Optional[Sort] = None
    ) -> Page[Movie]:
        """Page du catalogue public."""
        request = PageRequest(
            page=page,
            size=size or self._public_page_size,
            sort=sort or PUBLIC_DEFAULT_SORT,
        )
        return self._movie_repo.find_all(request)

    def admin_page(
        self, page: int = 0, size: Optional[int] = None, sort: Optional[Sort] = None
    ) -> Page[Movie]:
        """Page du listing d'administration."""
        request = PageRequest(
            page=page,
            size=size or self._admin_page_size,
            sort=sort or ADMIN_DEFAULT_SORT,
        )
        return self._movie_repo.find_all(request)

    def detail(self, movie_id: int) -> Movie:
        """Fiche d'un film. Leve NotFoundError si l'ID est inconnu."""
        return self._movie_repo.find_by_id(movie_id).unwrap()
