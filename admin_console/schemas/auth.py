"""Login / session schemas."""


from pydantic import Field

from admin_console.domain.principal import Role
from admin_console.schemas.common import CamelModel

class LoginRequest(CamelModel):
    email: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)

class PrincipalOut(CamelModel):
    email: str
    role: Role

class NavLinkOut(CamelModel):
    label: str
    href: str

class SessionOut(CamelModel):
    principal: PrincipalOut
    navigation: list[NavLinkOut]
