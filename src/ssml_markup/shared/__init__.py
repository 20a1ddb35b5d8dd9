"""Shared utilities for SSML markup processing.

This module provides the error types, configuration objects and logging
helpers used across the parsing, serialization and cache layers.
"""

from .config import (
    DEFAULT_MAX_DEPTH,
    MAX_SUPPORTED_DEPTH,
    CacheConfig,
    ParserConfig,
)
from .errors import (
    ConfigError,
    ConfigValidationError,
    MalformedMarkupError,
    MalformedReason,
    SSMLMarkupError,
)
from .logging import (
    CorrelationLogger,
    get_logger,
)

__all__ = [
    "DEFAULT_MAX_DEPTH",
    "MAX_SUPPORTED_DEPTH",
    "CacheConfig",
    "ParserConfig",
    "ConfigError",
    "ConfigValidationError",
    "MalformedMarkupError",
    "MalformedReason",
    "SSMLMarkupError",
    "CorrelationLogger",
    "get_logger",
]
