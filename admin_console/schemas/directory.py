"""Directory schemas (request DTOs and response models)."""


from pydantic import Field, field_validator
from pydantic.alias_generators import to_snake

from admin_console.core.response import ListResponse
from admin_console.domain.principal import Role
from admin_console.schemas.common import CamelModel

class DirectoryRecordCreate(CamelModel):
    name: str = Field(..., min_length=1)
    email: str = Field(..., min_length=1)
    company_name: str = ""
    website: str = ""
    city: str = ""
    role: Role = Role.VIEWER

class DirectoryRecordEdit(CamelModel):
    """Replace one field: `{ "field": "companyName", "value": "Acme" }`."""

    field: str
    value: str

    @field_validator("field")
    @classmethod
    def _snake_case_field(cls, v: str) -> str:
        return to_snake(v)

class DirectoryRecordOut(CamelModel):
    id: int
    name: str
    email: str
    company_name: str
    website: str
    city: str
    role: Role

class DirectoryFilters(CamelModel):
    search: str
    city: str

class DirectoryListResponse(ListResponse[DirectoryRecordOut]):
    """Page of the directory plus what the filter bar and pager need."""

    filters: DirectoryFilters
    cities: list[str]
    page_buttons: list[int]
    can_manage: bool
