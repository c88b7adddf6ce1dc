"""
Runtime configuration for the HTTP server, CLI and export documents.

Uses ``pydantic_settings.BaseSettings`` for environment variable
binding, type coercion and validation.  A ``.env`` file in the
working directory is loaded first so local overrides work without
exporting variables.
"""

from __future__ import annotations

import functools

import dotenv
import pydantic
import pydantic_settings

DEFAULT_DISCLAIMER = (
    "This report is generated for educational purposes. Population frequencies "
    "are illustrative estimates, not live statistics. No data was stored or transmitted."
)


class Settings(pydantic_settings.BaseSettings):
    """Environment-backed settings.

    Attributes:
        environment: ``development`` or ``production``.
        host: Interface the HTTP server binds to.
        port: Port the HTTP server listens on.
        export_version: Format version stamped into export documents.
        disclaimer: Disclaimer text stamped into export documents.
    """

    environment: str = pydantic.Field(default="development", validation_alias="ENVIRONMENT")
    host: str = pydantic.Field(default="0.0.0.0", validation_alias="UVICORN_HOST")
    port: int = pydantic.Field(default=3001, validation_alias="UVICORN_PORT")
    export_version: str = pydantic.Field(default="1.0.0", validation_alias="ECHOPRINT_EXPORT_VERSION")
    disclaimer: str = pydantic.Field(default=DEFAULT_DISCLAIMER, validation_alias="ECHOPRINT_DISCLAIMER")

    @property
    def is_production(self) -> bool:
        return self.environment == "production"


@functools.lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Load ``.env`` and return the process-wide settings instance."""
    dotenv.load_dotenv()
    return Settings()
