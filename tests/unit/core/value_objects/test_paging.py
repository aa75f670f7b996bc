"""
Tests pour les objets valeur de pagination et de tri.
"""

import pytest

from cinetrailer.core.value_objects import Page, PageRequest, Sort, SortDirection

DEFAULT = Sort("premiere_date", SortDirection.DESC)
ALLOWED = frozenset({"id", "title", "premiere_date"})


class TestSortParse:
    """Tests pour Sort.parse()."""

    @pytest.mark.parametrize(
        "raw,expected",
        [
            ("title", Sort("title", SortDirection.ASC)),
            ("title,asc", Sort("title", SortDirection.ASC)),
            ("title,DESC", Sort("title", SortDirection.DESC)),
            (" premiere_date , desc ", Sort("premiere_date", SortDirection.DESC)),
        ],
    )
    def test_valid_values(self, raw, expected):
        assert Sort.parse(raw, default=DEFAULT, allowed=ALLOWED) == expected

    @pytest.mark.parametrize("raw", [None, "", ",desc", "synopsis,asc", "title,sideways"])
    def test_invalid_values_fall_back_to_default(self, raw):
        assert Sort.parse(raw, default=DEFAULT, allowed=ALLOWED) == DEFAULT

    def test_without_allowed_accepts_any_field(self):
        assert Sort.parse("anything", default=DEFAULT).field == "anything"

    def test_str_round_trips(self):
        assert str(DEFAULT) == "premiere_date,desc"
        assert Sort.parse(str(DEFAULT), default=Sort("id")) == DEFAULT


class TestPageRequest:
    """Tests pour PageRequest."""

    def test_offset(self):
        assert PageRequest(page=3, size=5).offset == 15

    def test_negative_page_rejected(self):
        with pytest.raises(ValueError):
            PageRequest(page=-1, size=5)

    def test_zero_size_rejected(self):
        with pytest.raises(ValueError):
            PageRequest(page=0, size=0)


class TestPage:
    """Tests pour Page."""

    def test_navigation_middle_page(self):
        page = Page(items=("a", "b"), number=1, size=2, total=6)
        assert page.total_pages == 3
        assert page.has_previous
        assert page.has_next
        assert not page.is_first
        assert not page.is_last

    def test_empty_result_has_one_page(self):
        page = Page(items=(), number=0, size=5, total=0)
        assert page.total_pages == 1
        assert page.is_first and page.is_last
        assert len(page) == 0

    def test_iterates_over_items(self):
        page = Page(items=(1, 2, 3), number=0, size=5, total=3)
        assert list(page) == [1, 2, 3]
