"""CLI command implementations, re-exported for registration on the root group.

Contents:
    * Greeting command from :mod:`.greet`
    * Metadata command from :mod:`.info`
    * Config command from :mod:`.config`
    * Logging demo from :mod:`.logging`
"""

from __future__ import annotations

from .config import cli_config
from .greet import cli_hello
from .info import cli_info
from .logging import cli_logdemo

__all__ = [
    "cli_config",
    "cli_hello",
    "cli_info",
    "cli_logdemo",
]
