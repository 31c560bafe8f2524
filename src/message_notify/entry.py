"""Console script entry point for ``message-notify``.

Lives outside ``adapters`` so production wiring from ``composition`` can
reach the CLI without the adapters layer importing the composition root.
"""

from __future__ import annotations

from .adapters.cli.main import main as cli_main
from .composition import build_production


def main() -> int:
    """Run the CLI with production services and return the exit code."""
    return cli_main(services_factory=build_production)


__all__ = ["main"]
