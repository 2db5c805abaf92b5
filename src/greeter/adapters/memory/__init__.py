"""In-memory adapter implementations for testing.

Contents:
    * :mod:`.config` - In-memory configuration adapters
    * :mod:`.logging` - In-memory logging adapter
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from .config import (
    display_config_in_memory,
    get_config_in_memory,
    load_greeter_settings_in_memory,
)
from .logging import init_logging_in_memory

if TYPE_CHECKING:
    from greeter.application.ports import (
        DisplayConfig,
        GetConfig,
        InitLogging,
        LoadGreeterSettings,
    )

    _assert_get_config: GetConfig = get_config_in_memory
    _assert_display_config: DisplayConfig = display_config_in_memory
    _assert_load_greeter_settings: LoadGreeterSettings = load_greeter_settings_in_memory
    _assert_init_logging: InitLogging = init_logging_in_memory

__all__ = [
    "display_config_in_memory",
    "get_config_in_memory",
    "init_logging_in_memory",
    "load_greeter_settings_in_memory",
]
