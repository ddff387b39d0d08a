from pydantic import Field
from pydantic_settings import BaseSettings

class Settings(BaseSettings):
    """Application configuration loaded from environment variables / .env file."""

    app_name: str = "Admin Console"
    app_env: str = "development"
    frontend_url: str = "http://localhost:3000"

    # Directory listing
    page_size: int = Field(default=5, ge=1, alias="PAGE_SIZE")

    # Uploads (metadata only, bytes are discarded)
    max_upload_size_mb: int = Field(default=5, alias="MAX_UPLOAD_SIZE_MB")
    allowed_upload_types: list[str] = Field(
        default=["image/jpeg", "image/png", "image/gif", "application/pdf"],
        alias="ALLOWED_UPLOAD_TYPES",
    )

    # Seed directory (fetched once at startup)
    seed_url: str = Field(
        default="https://jsonplaceholder.typicode.com/users",
        alias="SEED_URL",
    )
    seed_enabled: bool = Field(default=True, alias="SEED_ENABLED")
    seed_timeout: float = Field(default=10.0, alias="SEED_TIMEOUT")

    # Browser session
    session_cookie_name: str = Field(
        default="console_session", alias="SESSION_COOKIE_NAME",
    )
    max_sessions: int = Field(default=1000, ge=1, alias="MAX_SESSIONS")

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "populate_by_name": True,
    }

    @property
    def max_upload_size_bytes(self) -> int:
        return self.max_upload_size_mb * 1024 * 1024

    @property
    def is_development(self) -> bool:
        return self.app_env == "development"

settings = Settings()
