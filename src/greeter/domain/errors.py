"""Domain-specific exceptions for typed error handling at boundaries."""

from __future__ import annotations


class ConfigurationError(Exception):
    """Configuration is present but cannot be used.

    Raised when the ``[greeter]`` section holds values of the wrong type or
    outside their allowed range. Caught at the CLI boundary and mapped to
    ``ExitCode.CONFIG_ERROR``.

    Example:
        >>> from greeter.domain.errors import ConfigurationError
        >>> str(ConfigurationError("greeter.max_width must be an integer"))
        'greeter.max_width must be an integer'
    """


class InvalidWidthError(ValueError):
    """Truncation width too small to hold a character plus the ellipsis.

    Inherits from ValueError so callers treating bad arguments generically
    still catch it.

    Example:
        >>> from greeter.domain.errors import InvalidWidthError
        >>> isinstance(InvalidWidthError("Minimum abbreviation width is 4, got 2"), ValueError)
        True
    """


__all__ = [
    "ConfigurationError",
    "InvalidWidthError",
]
