"""Upload manifest repository."""


from admin_console.domain.upload import UploadRecord
from admin_console.repositories.base import InMemoryRepository


class UploadRepository(InMemoryRepository[UploadRecord]):
    pass
