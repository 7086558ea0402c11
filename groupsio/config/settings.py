"""
Client settings, read from the environment (GROUPSIO_*) or a .env file.
"""

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class ClientSettings(BaseSettings):
    api_key: str | None = None
    base_url: str = "https://groups.io/api/v1/"

    # Page size requested from list endpoints; the server caps this at 100.
    max_results: int = 100
    # Upper bound on pages fetched by a single list call. None is unbounded.
    max_pages: int | None = None

    timeout: float = 30.0

    model_config = SettingsConfigDict(env_prefix="GROUPSIO_", env_file=".env")

    @field_validator("base_url")
    @classmethod
    def trailing_slash(cls, value: str) -> str:
        # Endpoints are joined as suffixes, e.g. base_url + "getgroup"
        return value if value.endswith("/") else value + "/"
