"""Domain layer - pure greeting logic with no I/O or framework dependencies.

Contents:
    * :mod:`.behaviors` - Greeting and name abbreviation
    * :mod:`.enums` - Domain enumerations (OutputFormat)
    * :mod:`.errors` - Domain exception types
"""

from __future__ import annotations

from .behaviors import (
    CANONICAL_GREETING,
    DEFAULT_MAX_WIDTH,
    ELLIPSIS,
    MIN_ABBREVIATION_WIDTH,
    abbreviate,
    build_greeting,
    greet,
)
from .enums import OutputFormat
from .errors import ConfigurationError, InvalidWidthError

__all__ = [
    # Behaviors
    "CANONICAL_GREETING",
    "DEFAULT_MAX_WIDTH",
    "ELLIPSIS",
    "MIN_ABBREVIATION_WIDTH",
    "abbreviate",
    "build_greeting",
    "greet",
    # Enums
    "OutputFormat",
    # Errors
    "ConfigurationError",
    "InvalidWidthError",
]
