"""Console script entry point with production wiring.

Lives at package level so the adapters layer never imports the composition
root directly.
"""

from __future__ import annotations

from .adapters.cli.main import main as cli_main
from .composition import build_production


def main() -> int:
    """Run the ``greeter`` console script and return its exit code."""
    return cli_main(services_factory=build_production)


__all__ = ["main"]
