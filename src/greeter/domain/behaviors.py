"""Pure domain functions with no I/O or framework dependencies."""

from __future__ import annotations

from typing import Final

from .errors import InvalidWidthError

#: Static greeting used when no name is supplied.
CANONICAL_GREETING: Final[str] = "Hello!"

GREETING_PREFIX: Final[str] = "Hello, "
GREETING_SUFFIX: Final[str] = "!"

#: Marker appended to names that were cut short.
ELLIPSIS: Final[str] = "..."

#: Display budget for a name, ellipsis included.
DEFAULT_MAX_WIDTH: Final[int] = 10

#: Smallest width that still keeps one character in front of the ellipsis.
MIN_ABBREVIATION_WIDTH: Final[int] = len(ELLIPSIS) + 1


def build_greeting() -> str:
    """Return the static greeting shown when no name is given.

    Example:
        >>> build_greeting()
        'Hello!'
    """
    return CANONICAL_GREETING


def abbreviate(text: str, max_width: int = DEFAULT_MAX_WIDTH) -> str:
    """Shorten ``text`` to at most ``max_width`` characters.

    Text that already fits is returned untouched. Longer text keeps its first
    ``max_width - 3`` characters followed by ``"..."``.

    Args:
        text: Any string, including the empty string.
        max_width: Maximum length of the result, ellipsis included.

    Returns:
        ``text`` itself or its abbreviated form.

    Raises:
        InvalidWidthError: If ``max_width`` is below :data:`MIN_ABBREVIATION_WIDTH`.

    Examples:
        >>> abbreviate("John")
        'John'
        >>> abbreviate("John Williams Smith, Jr.")
        'John Wi...'
        >>> abbreviate("abcdefghij")
        'abcdefghij'
        >>> abbreviate("abcdef", max_width=3)  # doctest: +IGNORE_EXCEPTION_DETAIL
        Traceback (most recent call last):
        ...
        greeter.domain.errors.InvalidWidthError: Minimum abbreviation width is 4, got 3
    """
    if max_width < MIN_ABBREVIATION_WIDTH:
        raise InvalidWidthError(f"Minimum abbreviation width is {MIN_ABBREVIATION_WIDTH}, got {max_width}")
    if len(text) <= max_width:
        return text
    return text[: max_width - len(ELLIPSIS)] + ELLIPSIS


def greet(name: str, max_width: int = DEFAULT_MAX_WIDTH) -> str:
    r"""Build the greeting for ``name``.

    Long names are abbreviated with :func:`abbreviate` so the name segment
    never exceeds ``max_width`` characters.

    Examples:
        >>> greet("John")
        'Hello, John!'
        >>> greet("John Williams Smith, Jr.")
        'Hello, John Wi...!'
        >>> greet("")
        'Hello, !'
    """
    return f"{GREETING_PREFIX}{abbreviate(name, max_width)}{GREETING_SUFFIX}"


__all__ = [
    "CANONICAL_GREETING",
    "DEFAULT_MAX_WIDTH",
    "ELLIPSIS",
    "GREETING_PREFIX",
    "GREETING_SUFFIX",
    "MIN_ABBREVIATION_WIDTH",
    "abbreviate",
    "build_greeting",
    "greet",
]
