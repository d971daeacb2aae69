"""
Library configuration loaded from environment variables.

All settings are validated on first access to fail fast on misconfiguration.
"""

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Serialization and CLI settings with validation.

    Each setting is read from an OPENPAYMENTS_ prefixed environment variable
    (e.g. OPENPAYMENTS_STRICT_DECODING=true). Use a .env file for local
    development.
    """

    model_config = SettingsConfigDict(
        env_prefix="OPENPAYMENTS_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # XML rendering
    xml_pretty_print: bool = Field(
        default=True,
        description="Indent rendered XML documents",
    )
    xml_declaration: bool = Field(
        default=True,
        description="Emit the <?xml ...?> declaration when rendering",
    )
    xml_encoding: str = Field(
        default="UTF-8",
        description="Character encoding of rendered XML",
    )

    # XML decoding
    strict_decoding: bool = Field(
        default=False,
        description="Raise on unknown elements and attributes instead of skipping them",
    )
    validate_on_parse: bool = Field(
        default=False,
        description="Run schema facet validation as part of parse_document",
    )

    # CLI
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="INFO",
        description="Log level used by the command-line interface",
    )


@lru_cache
def get_settings() -> Settings:
    """
    Get cached library settings.

    Settings are loaded once and cached for subsequent calls. Tests that
    change the environment call get_settings.cache_clear().
    """
    return Settings()
