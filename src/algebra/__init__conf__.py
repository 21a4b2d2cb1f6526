"""Static package metadata surfaced to CLI commands and documentation.

Values here must stay in sync with ``pyproject.toml``; the metadata tests
compare both so configuration paths derived from the ``LAYEREDCONF_*``
identifiers never drift from the distribution name.

Contents:
    * Module-level constants describing the distribution.
    * :func:`print_info` - render the constants for the ``info`` command.
"""

from __future__ import annotations

#: Distribution name declared in ``pyproject.toml``.
name = "algebra"
#: Human-readable summary shown in CLI help output.
title = "Square and cube of integers, with an explicit integer overflow policy"
#: Release version, bumped together with ``pyproject.toml``.
version = "1.0.0"
#: Repository homepage presented to users.
homepage = "https://github.com/algebra-tutorial/algebra"
#: Author attribution surfaced in CLI output.
author = "Algebra Tutorial Authors"
#: Contact email surfaced in CLI output.
author_email = "maintainers@algebra-tutorial.dev"
#: Console-script name published by the package.
shell_command = "algebra"

#: Vendor namespace used by lib_layered_config (macOS/Windows paths).
LAYEREDCONF_VENDOR: str = "algebra-tutorial"
#: Application name used by lib_layered_config (macOS/Windows paths).
LAYEREDCONF_APP: str = "Algebra"
#: Configuration slug used by lib_layered_config (Linux paths, env prefix).
LAYEREDCONF_SLUG: str = "algebra"


def print_info() -> None:
    """Print the summarised metadata block used by the CLI ``info`` command.

    Example:
        >>> print_info()  # doctest: +ELLIPSIS
        Info for algebra:
        ...
    """
    fields = (
        ("name", name),
        ("title", title),
        ("version", version),
        ("homepage", homepage),
        ("author", author),
        ("author_email", author_email),
        ("shell_command", shell_command),
    )
    pad = max(len(label) for label, _ in fields)
    lines = [f"Info for {name}:", ""]
    lines.extend(f"    {label.ljust(pad)} = {value}" for label, value in fields)
    print("\n".join(lines))
