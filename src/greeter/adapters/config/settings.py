"""Greeter settings model and loader.

Validates the ``[greeter]`` configuration section once at the boundary so
commands work with typed, immutable values.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, cast

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from greeter.domain.behaviors import DEFAULT_MAX_WIDTH, MIN_ABBREVIATION_WIDTH
from greeter.domain.errors import ConfigurationError


class GreeterSettings(BaseModel):
    """Validated, immutable greeter settings.

    Example:
        >>> GreeterSettings().max_width
        10
        >>> GreeterSettings(max_width="12").max_width
        12
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    max_width: int = Field(default=DEFAULT_MAX_WIDTH, ge=MIN_ABBREVIATION_WIDTH)


def _describe(exc: ValidationError) -> str:
    """Flatten pydantic errors into ``greeter.<field>: <message>`` lines."""
    parts: list[str] = []
    for error in exc.errors():
        location = ".".join(str(item) for item in error["loc"]) or "<section>"
        parts.append(f"greeter.{location}: {error['msg']}")
    return "; ".join(parts)


def load_greeter_settings(config_dict: Mapping[str, Any]) -> GreeterSettings:
    """Load GreeterSettings from a configuration dictionary.

    Args:
        config_dict: Configuration mapping, typically ``Config.as_dict()``.
            Settings are read from its ``greeter`` section; a missing section
            yields the defaults.

    Returns:
        Validated settings.

    Raises:
        ConfigurationError: If the section is not a table or a value is invalid.

    Examples:
        >>> load_greeter_settings({"greeter": {"max_width": 15}}).max_width
        15
        >>> load_greeter_settings({}).max_width
        10
        >>> load_greeter_settings({"greeter": {"max_width": 2}})  # doctest: +IGNORE_EXCEPTION_DETAIL
        Traceback (most recent call last):
        ...
        greeter.domain.errors.ConfigurationError: greeter.max_width: ...
    """
    section: Any = config_dict.get("greeter", {})
    if not isinstance(section, Mapping):
        raise ConfigurationError(f"[greeter] must be a table, got {type(section).__name__}")

    try:
        return GreeterSettings.model_validate(dict(cast(Mapping[str, Any], section)))
    except ValidationError as exc:
        raise ConfigurationError(_describe(exc)) from exc


__all__ = [
    "GreeterSettings",
    "load_greeter_settings",
]
