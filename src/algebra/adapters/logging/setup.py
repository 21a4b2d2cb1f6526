"""Centralized lib_log_rich initialization for every entry point.

Both ``python -m algebra`` and the ``algebra`` console script reach this
module through the root CLI command, so the runtime is configured from the
same ``[lib_log_rich]`` section no matter how the program was started.

Contents:
    * :class:`LoggingConfigModel` - boundary model for the config section.
    * :func:`init_logging` - idempotent runtime initialization.
"""

from __future__ import annotations

from typing import cast

import lib_log_rich.config
import lib_log_rich.runtime
from lib_layered_config import Config
from pydantic import BaseModel, ConfigDict

from algebra import __init__conf__


class LoggingConfigModel(BaseModel):
    """Typed view of the ``[lib_log_rich]`` configuration section.

    Unknown keys are kept and forwarded to ``RuntimeConfig`` unchanged.

    Example:
        >>> LoggingConfigModel(service="algebra", console_level="DEBUG").model_dump(exclude_none=True)
        {'service': 'algebra', 'environment': 'prod', 'console_level': 'DEBUG'}
    """

    service: str | None = None
    environment: str = "prod"

    model_config = ConfigDict(extra="allow")


def _build_runtime_config(config: Config) -> lib_log_rich.runtime.RuntimeConfig:
    """Map the ``[lib_log_rich]`` section onto a ``RuntimeConfig``.

    An empty or missing ``service`` falls back to the distribution name.
    """
    log_raw: object = config.get("lib_log_rich", default={})
    parsed = LoggingConfigModel.model_validate(cast("dict[str, object]", log_raw) if log_raw else {})
    extra_config = parsed.model_dump(exclude={"service", "environment"}, exclude_none=True)

    return lib_log_rich.runtime.RuntimeConfig(
        service=parsed.service or __init__conf__.name,
        environment=parsed.environment,
        **extra_config,
    )


def init_logging(config: Config) -> None:
    """Initialize the lib_log_rich runtime once per process.

    Enables ``.env`` loading so ``LOG_*`` variables apply, builds the runtime
    from ``config`` and bridges stdlib :mod:`logging` so ``logging.getLogger``
    records in the domain and CLI modules reach lib_log_rich. Later calls
    return immediately.

    Args:
        config: Loaded layered configuration holding the ``[lib_log_rich]`` section.

    Example:
        >>> from lib_layered_config import Config
        >>> init_logging(Config({"lib_log_rich": {"environment": "test"}}, {}))  # doctest: +SKIP
    """
    if lib_log_rich.runtime.is_initialised():
        return
    lib_log_rich.config.enable_dotenv()
    lib_log_rich.runtime.init(_build_runtime_config(config))
    lib_log_rich.runtime.attach_std_logging()


__all__ = [
    "LoggingConfigModel",
    "init_logging",
]
