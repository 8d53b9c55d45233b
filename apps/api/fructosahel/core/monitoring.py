from __future__ import annotations

import logging
from collections.abc import Callable

from fastapi import FastAPI
from prometheus_fastapi_instrumentator import Instrumentator

from fructosahel.models import RuntimeMode

APP_TAG = "fructosahel"

logger = logging.getLogger("fructosahel.monitoring")


class NoiseFilter(logging.Filter):
    """Drops expected transient failures and tags the rest with the platform."""

    def __init__(self, platform: RuntimeMode, ignored: tuple[str, ...]) -> None:
        super().__init__()
        self.platform = platform
        self.ignored = ignored

    def filter(self, record: logging.LogRecord) -> bool:
        message = record.getMessage()
        if record.exc_info and record.exc_info[1] is not None:
            message = f"{message} {record.exc_info[1]}"
        if any(token in message for token in self.ignored):
            return False
        record.app = APP_TAG
        record.platform = self.platform.value
        return True


def _install_filter(platform: RuntimeMode, ignored: tuple[str, ...]) -> NoiseFilter:
    # Logger filters skip records propagated from child loggers, handler filters do not.
    noise_filter = NoiseFilter(platform, ignored)
    for handler in logging.getLogger("fructosahel").handlers:
        for existing in list(handler.filters):
            if isinstance(existing, NoiseFilter):
                handler.removeFilter(existing)
        handler.addFilter(noise_filter)
    return noise_filter


def _bootstrap_server(app: FastAPI) -> None:
    _install_filter(RuntimeMode.SERVER, ("ECONNRESET", "504", "timeout"))
    Instrumentator().instrument(app).expose(app, include_in_schema=False)


def _bootstrap_edge(app: FastAPI) -> None:
    _install_filter(RuntimeMode.EDGE, ("timeout",))
    Instrumentator(should_group_status_codes=True).instrument(app)


MONITORING_BOOTSTRAPS: dict[RuntimeMode, Callable[[FastAPI], None]] = {
    RuntimeMode.SERVER: _bootstrap_server,
    RuntimeMode.EDGE: _bootstrap_edge,
}


def bootstrap_monitoring(app: FastAPI, mode: RuntimeMode | None) -> RuntimeMode | None:
    if mode is None:
        logger.info("Monitoring disabled reason=no_runtime_mode")
        return None
    MONITORING_BOOTSTRAPS[mode](app)
    logger.info("Monitoring bootstrapped runtime=%s", mode.value)
    return mode
