"""List filter/paginate engine for the directory view.

The visible page is always derived from the base collection plus the
current criteria; it is never stored. Changing the search term, the city
filter or the base collection sends the view back to page 1.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field

from admin_console.core.pagination import clamp_page, page_count, page_window
from admin_console.domain.directory import DirectoryRecord


def matches_search(record: DirectoryRecord, search: str) -> bool:
    """Case-insensitive substring match against name or email."""
    if not search:
        return True
    needle = search.lower()
    return needle in record.name.lower() or needle in record.email.lower()


def filter_records(
    records: Iterable[DirectoryRecord],
    search: str = "",
    city: str = "",
) -> list[DirectoryRecord]:
    """Apply the search term, then the exact city filter. Order is preserved."""
    kept = [record for record in records if matches_search(record, search)]
    if city:
        kept = [record for record in kept if record.city == city]
    return kept


@dataclass(frozen=True)
class DirectoryPage:
    rows: list[DirectoryRecord]
    total: int
    page: int
    pages: int
    page_size: int
    search: str = ""
    city: str = ""

    @property
    def page_buttons(self) -> list[int]:
        return list(range(1, self.pages + 1))


def paginate(
    records: Sequence[DirectoryRecord],
    page: int,
    page_size: int,
    *,
    search: str = "",
    city: str = "",
) -> DirectoryPage:
    """Filter *records* and cut out the requested page (clamped)."""
    filtered = filter_records(records, search, city)
    pages = page_count(len(filtered), page_size)
    current = clamp_page(page, pages)
    return DirectoryPage(
        rows=page_window(filtered, current, page_size),
        total=len(filtered),
        page=current,
        pages=pages,
        page_size=page_size,
        search=search,
        city=city,
    )


@dataclass
class ListState:
    """Per-session filter and page selection for the directory view."""

    search: str = ""
    city: str = ""
    page: int = 1
    seen_version: int | None = field(default=None)

    def set_search(self, search: str) -> None:
        if search != self.search:
            self.search = search
            self.page = 1

    def set_city(self, city: str) -> None:
        if city != self.city:
            self.city = city
            self.page = 1

    def observe(self, version: int) -> None:
        """Record the base collection version; a change resets to page 1."""
        if self.seen_version is not None and version != self.seen_version:
            self.page = 1
        self.seen_version = version

    def apply(
        self,
        version: int,
        *,
        search: str | None = None,
        city: str | None = None,
        page: int | None = None,
    ) -> None:
        """Fold one request's criteria into the state.

        A requested page is honoured only when neither the criteria nor the
        base collection changed; otherwise the view restarts at page 1.
        """
        criteria = (self.search, self.city)
        moved = self.seen_version is not None and version != self.seen_version
        if search is not None:
            self.set_search(search)
        if city is not None:
            self.set_city(city)
        self.observe(version)
        if page is not None and not moved and criteria == (self.search, self.city):
            self.page = page

    def view(self, records: Sequence[DirectoryRecord], page_size: int) -> DirectoryPage:
        result = paginate(
            records, self.page, page_size, search=self.search, city=self.city,
        )
        self.page = result.page
        return result
