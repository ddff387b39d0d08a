"""Pagination helpers for list endpoints."""


import math
from collections.abc import Sequence
from typing import TypeVar

from fastapi import Query
from pydantic import BaseModel

T = TypeVar("T")


class ListParams:
    """FastAPI dependency for `?search=&city=&page=1`."""

    def __init__(
        self,
        search: str | None = Query(default=None, description="Match name or email (case-insensitive)"),
        city: str | None = Query(default=None, description="Exact city match; empty clears the filter"),
        page: int | None = Query(default=None, ge=1, description="Page number (1-based)"),
    ):
        self.search = search
        self.city = city
        self.page = page


class PageMeta(BaseModel):
    total: int
    page: int
    limit: int
    pages: int

    model_config = {"populate_by_name": True}


def page_count(total: int, limit: int) -> int:
    """Number of pages needed for *total* items; zero when there are none."""
    return math.ceil(total / limit) if limit else 0


def clamp_page(page: int, pages: int) -> int:
    """Clamp *page* into ``[1, pages]``; page 1 when there are no pages."""
    if pages <= 0:
        return 1
    return max(1, min(page, pages))


def page_window(items: Sequence[T], page: int, limit: int) -> list[T]:
    """Slice ``[(page-1)*limit, page*limit)`` out of *items*."""
    offset = (page - 1) * limit
    return list(items[offset:offset + limit])
