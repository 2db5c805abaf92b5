"""Static package metadata surfaced to CLI commands and documentation.

Values are kept in sync with ``pyproject.toml`` by the metadata tests. The
``LAYEREDCONF_*`` identifiers drive lib_layered_config's platform paths.
"""

from __future__ import annotations

name = "greeter"
title = "Greet people by name, abbreviating long names to a fixed width"
version = "1.0.0"
homepage = "https://github.com/greeter-dev/greeter"
author = "greeter developers"
author_email = "greeter-dev@users.noreply.github.com"
shell_command = "greeter"

#: Vendor identifier for lib_layered_config (macOS/Windows paths).
LAYEREDCONF_VENDOR: str = "greeter-dev"
#: Application name for lib_layered_config (macOS/Windows paths).
LAYEREDCONF_APP: str = "Greeter"
#: Configuration slug for lib_layered_config (Linux paths, env prefix).
LAYEREDCONF_SLUG: str = "greeter"


def print_info() -> None:
    """Print the summarised metadata block used by the CLI ``info`` command.

    Example:
        >>> print_info()  # doctest: +ELLIPSIS
        Info for greeter:
        ...
    """
    fields = [
        ("name", name),
        ("title", title),
        ("version", version),
        ("homepage", homepage),
        ("author", author),
        ("author_email", author_email),
        ("shell_command", shell_command),
    ]
    pad = max(len(label) for label, _ in fields)
    lines = [f"Info for {name}:", ""]
    lines.extend(f"    {label.ljust(pad)} = {value}" for label, value in fields)
    print("\n".join(lines))
