"""Centralized logging initialization for all entry points.

Both ``python -m greeter`` and the ``greeter`` console script reach
:func:`init_logging` through the root CLI group, so the lib_log_rich runtime
is configured in exactly one place.

Contents:
    * :class:`LoggingConfigModel` – validated view of the ``[lib_log_rich]`` section.
    * :func:`init_logging` – idempotent logging initialization with layered config.
"""

from __future__ import annotations

from typing import cast

import lib_log_rich.config
import lib_log_rich.runtime
from lib_layered_config import Config
from pydantic import BaseModel, ConfigDict

from greeter import __init__conf__


class LoggingConfigModel(BaseModel):
    """Pydantic model for [lib_log_rich] config section validation.

    Extra fields are allowed to pass through to lib_log_rich.RuntimeConfig.

    Example:
        >>> LoggingConfigModel(service="greeter", environment="dev").environment
        'dev'
        >>> LoggingConfigModel().environment
        'prod'
    """

    service: str | None = None
    environment: str = "prod"

    model_config = ConfigDict(extra="allow")


def _build_runtime_config(config: Config) -> lib_log_rich.runtime.RuntimeConfig:
    """Map the ``[lib_log_rich]`` section onto a RuntimeConfig.

    ``service`` falls back to the package name; every other key is handed
    to lib_log_rich unchanged.
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
    """Initialize lib_log_rich runtime with the provided configuration.

    The first call enables ``.env`` loading for ``LOG_*`` variables, starts
    the runtime and bridges the standard :mod:`logging` module into it, so
    ``logging.getLogger(__name__)`` calls anywhere in the package end up in
    lib_log_rich. Later calls return immediately.

    Args:
        config: Loaded configuration holding the ``[lib_log_rich]`` section.

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
