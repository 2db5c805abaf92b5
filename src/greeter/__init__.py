"""Public package surface: greeting functions, configuration, and metadata.

Example:
    >>> from greeter import greet
    >>> greet("John Williams Smith, Jr.")
    'Hello, John Wi...!'
"""

from __future__ import annotations

from .__init__conf__ import print_info
from .composition import get_config
from .domain.behaviors import (
    CANONICAL_GREETING,
    DEFAULT_MAX_WIDTH,
    ELLIPSIS,
    abbreviate,
    build_greeting,
    greet,
)

__all__ = [
    "CANONICAL_GREETING",
    "DEFAULT_MAX_WIDTH",
    "ELLIPSIS",
    "abbreviate",
    "build_greeting",
    "get_config",
    "greet",
    "print_info",
]
