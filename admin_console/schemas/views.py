"""View models returned by the guarded console views."""


from admin_console.schemas.auth import NavLinkOut, PrincipalOut
from admin_console.schemas.common import CamelModel
from admin_console.schemas.directory import DirectoryListResponse
from admin_console.schemas.upload import UploadOut

class ShellOut(CamelModel):
    """Header shared by every view: who is signed in and where they can go."""

    principal: PrincipalOut | None = None
    navigation: list[NavLinkOut]

class LoginViewOut(CamelModel):
    view: str = "login"
    shell: ShellOut

class DashboardViewOut(CamelModel):
    view: str = "dashboard"
    shell: ShellOut
    user_count: int
    upload_count: int

class UsersViewOut(CamelModel):
    view: str = "users"
    shell: ShellOut
    directory: DirectoryListResponse

class UploadsViewOut(CamelModel):
    view: str = "uploads"
    shell: ShellOut
    uploads: list[UploadOut]
    can_upload: bool
    notice: str | None = None
