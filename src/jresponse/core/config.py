"""
Configuration management for jresponse.

Handles loading configuration from environment variables and .env files.
The conversion functions themselves take explicit arguments; settings
only supply defaults for output helpers and logging setup.
"""

from __future__ import annotations

from typing import Annotated

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# =============================================================================
# Main Settings
# =============================================================================


class JResponseSettings(BaseSettings):
    """
    Main settings for jresponse, loaded from environment and .env file.

    Environment variables (prefix JRESP_):
        JRESP_DEBUG, JRESP_LOG_LEVEL
        JRESP_DEFAULT_FORMAT, JRESP_JSON_INDENT, JRESP_XML_PRETTY_PRINT
    """

    model_config = SettingsConfigDict(
        env_prefix="JRESP_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Output
    default_format: Annotated[str, Field(default="cli", pattern=r"^(xml|json|cli)$")]
    json_indent: Annotated[int | None, Field(default=None, ge=0, le=8)]
    xml_pretty_print: bool = False

    # Logging
    debug: bool = False
    log_level: Annotated[str, Field(default="INFO", pattern=r"^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$")]


# =============================================================================
# Singleton Settings Access
# =============================================================================

_settings: JResponseSettings | None = None


def get_settings() -> JResponseSettings:
    """
    Get the global settings instance.

    Creates a new instance on first call, returns cached instance thereafter.
    """
    global _settings
    if _settings is None:
        _settings = JResponseSettings()
    return _settings


def reset_settings() -> None:
    """Reset the global settings instance (useful for testing)."""
    global _settings
    _settings = None
