"""Console script entry point with production wiring.

``pyproject.toml`` points the ``algebra`` script here. Living at package
level lets it import the composition root without the adapters layer
depending on it.
"""

from __future__ import annotations

from .adapters.cli.main import main as cli_main
from .composition import build_production


def main() -> int:
    """Run the CLI with production services and return its exit code."""
    return cli_main(services_factory=build_production)


__all__ = ["main"]
