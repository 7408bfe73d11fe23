from pydantic import field_validator
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Google Docs API
    docs_api_base: str = "https://docs.googleapis.com/v1"
    http_timeout_seconds: float = 30.0

    @field_validator("docs_api_base", mode="before")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        """Allow DOCS_API_BASE to be configured with or without a trailing slash."""
        return v.rstrip("/")

    # Metadata parsing
    default_metadata_tab: str = "Metadata"

    # Context lookup
    default_lookaround: int = 0
    max_lookaround: int = 20

    # Frontend
    cors_origins: list[str] = ["http://localhost:3000"]

    # Rate limiting
    rate_limit_enabled: bool = False
    rate_limit_storage_uri: str = "memory://"
    rate_limit_general_per_minute: int = 100
    rate_limit_parse_per_minute: int = 30

    # Request size limits
    max_request_size_bytes: int = 1024 * 1024  # 1MB

    class Config:
        env_file = ".env"
        extra = "ignore"


settings = Settings()
