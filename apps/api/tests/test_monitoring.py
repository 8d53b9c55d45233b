import logging

from fastapi import FastAPI

from fructosahel.core.monitoring import NoiseFilter, bootstrap_monitoring
from fructosahel.models import RuntimeMode


def _record(message: str) -> logging.LogRecord:
    return logging.LogRecord("fructosahel.test", logging.ERROR, __file__, 1, message, None, None)


def test_noise_filter_drops_expected_errors_and_tags_the_rest() -> None:
    server_filter = NoiseFilter(RuntimeMode.SERVER, ("ECONNRESET", "504", "timeout"))

    dropped = _record("upstream read ECONNRESET")
    kept = _record("catalog lookup failed")

    assert not server_filter.filter(dropped)
    assert server_filter.filter(kept)
    assert kept.platform == "server"
    assert kept.app == "fructosahel"


def test_edge_filter_only_drops_timeouts() -> None:
    edge_filter = NoiseFilter(RuntimeMode.EDGE, ("timeout",))
    assert edge_filter.filter(_record("upstream read ECONNRESET"))
    assert not edge_filter.filter(_record("request timeout"))


def test_missing_runtime_mode_skips_monitoring() -> None:
    app = FastAPI()
    assert bootstrap_monitoring(app, None) is None
    assert "/metrics" not in {route.path for route in app.routes}


def test_server_runtime_exposes_metrics() -> None:
    app = FastAPI()
    assert bootstrap_monitoring(app, RuntimeMode.SERVER) is RuntimeMode.SERVER
    assert "/metrics" in {route.path for route in app.routes}


def test_edge_runtime_instruments_without_endpoint() -> None:
    app = FastAPI()
    assert bootstrap_monitoring(app, RuntimeMode.EDGE) is RuntimeMode.EDGE
    assert "/metrics" not in {route.path for route in app.routes}
