"""Directory repository, the shared base collection behind the users view."""


from admin_console.domain.directory import DirectoryRecord
from admin_console.repositories.base import InMemoryRepository


class DirectoryRepository(InMemoryRepository[DirectoryRecord]):

    def cities(self) -> list[str]:
        """Distinct non-empty cities in first-seen order."""
        seen: dict[str, None] = {}
        for record in self._records:
            if record.city:
                seen.setdefault(record.city, None)
        return list(seen)
