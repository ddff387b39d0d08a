import math

import pytest

from admin_console.core.pagination import clamp_page, page_count, page_window
from admin_console.services.listing import ListState, filter_records, paginate
from tests.helpers import sample_records


@pytest.mark.parametrize("term", ["", "lea", "LEANNE", "april", ".biz", "e", "zz", "@"])
def test_filter_keeps_exactly_name_or_email_matches(term) -> None:
    records = sample_records()
    expected = [
        r for r in records
        if term.lower() in r.name.lower() or term.lower() in r.email.lower()
    ]
    assert filter_records(records, term) == expected


def test_filter_preserves_collection_order() -> None:
    records = list(reversed(sample_records()))
    ids = [r.id for r in filter_records(records, "leanne")]
    assert ids == [11, 1]


def test_city_filter_is_exact() -> None:
    records = sample_records()
    assert [r.id for r in filter_records(records, "", "Gwenborough")] == [1, 11]
    assert filter_records(records, "", "gwenborough") == []
    assert [r.id for r in filter_records(records, "twin", "Gwenborough")] == [11]


def test_page_math() -> None:
    assert page_count(0, 5) == 0
    assert page_count(5, 5) == 1
    assert page_count(11, 5) == 3
    assert clamp_page(0, 3) == 1
    assert clamp_page(9, 3) == 3
    assert clamp_page(4, 0) == 1
    assert page_window(list(range(11)), 3, 5) == [10]


@pytest.mark.parametrize("page_size", [1, 2, 5, 7, 20])
def test_paginate_never_exceeds_page_size(page_size) -> None:
    records = sample_records()
    pages = math.ceil(len(records) / page_size)
    seen = []
    for page in range(1, pages + 1):
        result = paginate(records, page, page_size)
        assert len(result.rows) <= page_size
        assert result.pages == pages
        assert result.page_buttons == list(range(1, pages + 1))
        seen.extend(r.id for r in result.rows)
    assert seen == [r.id for r in records]


def test_paginate_clamps_out_of_range_page() -> None:
    result = paginate(sample_records(), 99, 5)
    assert result.page == 3
    assert [r.id for r in result.rows] == [11]


def test_paginate_empty_result_has_no_buttons() -> None:
    result = paginate(sample_records(), 2, 5, search="zz")
    assert result.rows == []
    assert result.total == 0
    assert result.pages == 0
    assert result.page == 1
    assert result.page_buttons == []


class TestListState:
    def _on_page_three(self) -> ListState:
        state = ListState()
        state.apply(1, page=3)
        return state

    def test_requested_page_is_honoured_when_nothing_changed(self) -> None:
        state = self._on_page_three()
        assert state.page == 3
        state.apply(1, search="", city="", page=2)
        assert state.page == 2

    def test_search_change_resets_page(self) -> None:
        state = self._on_page_three()
        state.apply(1, search="lea", page=3)
        assert state.page == 1

    def test_city_change_resets_page(self) -> None:
        state = self._on_page_three()
        state.apply(1, city="Gwenborough")
        assert state.page == 1

    def test_collection_change_resets_page(self) -> None:
        state = self._on_page_three()
        state.apply(2, page=3)
        assert state.page == 1

    def test_setters_reset_only_on_change(self) -> None:
        state = self._on_page_three()
        state.set_search("")
        state.set_city("")
        assert state.page == 3
        state.set_search("x")
        assert state.page == 1

    def test_view_stores_clamped_page(self) -> None:
        state = ListState()
        state.apply(1, page=50)
        result = state.view(sample_records(), 5)
        assert result.page == 3
        assert state.page == 3
