"""
Core module for jresponse.

Contains configuration management, exceptions, and logging setup.
"""

from __future__ import annotations

from jresponse.core.config import JResponseSettings, get_settings, reset_settings
from jresponse.core.exceptions import (
    ConfigurationError,
    JResponseError,
    JSONParsingError,
    MalformedInput,
    MalformedInputError,
    RenderingError,
    RenderingFailure,
    UnknownRecordError,
    XMLParsingError,
)
from jresponse.core.logging import setup_logging

__all__ = [
    # Settings
    "get_settings",
    "reset_settings",
    "JResponseSettings",
    # Logging
    "setup_logging",
    # Exceptions
    "JResponseError",
    "ConfigurationError",
    "MalformedInputError",
    "MalformedInput",
    "XMLParsingError",
    "JSONParsingError",
    "UnknownRecordError",
    "RenderingError",
    "RenderingFailure",
]
