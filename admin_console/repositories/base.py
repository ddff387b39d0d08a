"""Generic in-memory repository keyed by integer id."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any, Generic, Protocol, TypeVar


class HasId(Protocol):
    id: int


RecordT = TypeVar("RecordT", bound=HasId)


class InMemoryRepository(Generic[RecordT]):
    """Ordered collection of records with unique, never-reused integer ids.

    The collection is a plain list kept in insertion order. ``replace_all``
    swaps the whole list in one assignment, so readers never observe a
    partially loaded collection. ``version`` increases on every change and
    lets derived views detect that the base collection moved.
    """

    def __init__(self, records: Iterable[RecordT] = ()):
        self._records: list[RecordT] = []
        self._next_id = 1
        self.version = 0
        self.replace_all(records)

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _touch(self) -> None:
        self.version += 1

    def _index_of(self, entity_id: int) -> int | None:
        for index, record in enumerate(self._records):
            if record.id == entity_id:
                return index
        return None

    def next_id(self) -> int:
        """Reserve and return a fresh id."""
        entity_id = self._next_id
        self._next_id += 1
        return entity_id

    # ------------------------------------------------------------------
    # Read
    # ------------------------------------------------------------------

    def __len__(self) -> int:
        return len(self._records)

    def get_by_id(self, entity_id: int) -> RecordT | None:
        index = self._index_of(entity_id)
        return None if index is None else self._records[index]

    def list(self) -> list[RecordT]:
        """Return a copy of the records in collection order."""
        return list(self._records)

    # ------------------------------------------------------------------
    # Write
    # ------------------------------------------------------------------

    def add(self, record: RecordT) -> RecordT:
        if self._index_of(record.id) is not None:
            raise ValueError(f"duplicate id {record.id}")
        self._records.append(record)
        self._next_id = max(self._next_id, record.id + 1)
        self._touch()
        return record

    def update(self, entity_id: int, **changes: Any) -> RecordT | None:
        record = self.get_by_id(entity_id)
        if record is None:
            return None
        changes.pop("id", None)
        for name, value in changes.items():
            setattr(record, name, value)
        self._touch()
        return record

    def delete(self, entity_id: int) -> bool:
        index = self._index_of(entity_id)
        if index is None:
            return False
        del self._records[index]
        self._touch()
        return True

    def replace_all(self, records: Iterable[RecordT]) -> None:
        """Swap in a new collection. Duplicate ids keep the first occurrence."""
        fresh: list[RecordT] = []
        seen: set[int] = set()
        for record in records:
            if record.id in seen:
                continue
            seen.add(record.id)
            fresh.append(record)
        self._records = fresh
        self._next_id = max([self._next_id, *(entity_id + 1 for entity_id in seen)])
        self._touch()
