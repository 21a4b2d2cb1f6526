"""Layered configuration loading for the ``algebra`` CLI.

Contents:
    * :func:`get_config` - cached ``read_config`` call per profile.
    * :func:`get_default_config_path` - bundled ``defaultconfig.toml``.
    * :func:`validate_profile` - profile-name check used before any file access.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from lib_layered_config import (
    DEFAULT_MAX_PROFILE_LENGTH,
    Config,
    read_config,
    validate_profile_name,
)

from algebra import __init__conf__

_DEFAULT_CONFIG_FILE = Path(__file__).with_name("defaultconfig.toml")


def validate_profile(profile: str, max_length: int = DEFAULT_MAX_PROFILE_LENGTH) -> None:
    """Reject profile names that cannot become a configuration subdirectory.

    Raises:
        ValueError: For empty, overlong or reserved names and names with
            path separators or traversal.

    Examples:
        >>> validate_profile("wrap32")

        >>> validate_profile("../etc")  # doctest: +IGNORE_EXCEPTION_DETAIL
        Traceback (most recent call last):
        ...
        ValueError: profile contains invalid characters: ../etc
    """
    validate_profile_name(profile, max_length=max_length)


def get_default_config_path() -> Path:
    """Return the ``defaultconfig.toml`` bundled with the package.

    Example:
        >>> get_default_config_path().name
        'defaultconfig.toml'
    """
    return _DEFAULT_CONFIG_FILE


@lru_cache(maxsize=4)
def get_config(*, profile: str | None = None, start_dir: str | None = None) -> Config:
    """Load ``[algebra]`` and ``[lib_log_rich]`` settings from every layer.

    Precedence, lowest first: bundled defaults, app, host, user, ``.env``,
    environment variables (namespaced by the ``algebra`` slug). Results are
    cached per ``(profile, start_dir)``; ``get_config.cache_clear()`` forces
    the next call to read from disk. An invalid profile raises before any
    file is read and is never cached.

    Args:
        profile: Optional profile; adds ``profile/<name>/`` to each layer path.
        start_dir: Directory that seeds ``.env`` discovery.

    Raises:
        ValueError: If ``profile`` is not a valid profile name.

    Example:
        >>> get_config().get("algebra", default={}).get("inputs")
        [5, 3, 9]
    """
    if profile is not None:
        validate_profile(profile)
    return read_config(
        vendor=__init__conf__.LAYEREDCONF_VENDOR,
        app=__init__conf__.LAYEREDCONF_APP,
        slug=__init__conf__.LAYEREDCONF_SLUG,
        profile=profile,
        default_file=_DEFAULT_CONFIG_FILE,
        start_dir=start_dir,
    )


__all__ = [
    "get_config",
    "get_default_config_path",
    "validate_profile",
]
