"""
Sentry Filter Tests.
"""
import sys

from solar_simulator.core.config import Settings
from solar_simulator.core.exceptions import ConfigurationError, NotFoundError
from solar_simulator.core.sentry import _before_send, init_sentry


def _hint(exc: Exception) -> dict:
    try:
        raise exc
    except Exception:
        return {"exc_info": sys.exc_info()}


def test_client_errors_are_dropped():
    event = {"exception": {"values": []}}

    assert _before_send(event, _hint(NotFoundError("Farm", "atlantis"))) is None


def test_server_errors_are_sent():
    event = {"exception": {"values": []}}

    assert _before_send(event, _hint(ConfigurationError("broken"))) is event
    assert _before_send(event, _hint(RuntimeError("boom"))) is event


def test_events_without_exception_are_sent():
    event = {"message": "hello"}

    assert _before_send(event, {}) is event


def test_init_skipped_without_dsn():
    assert init_sentry(Settings(_env_file=None, sentry_dsn="")) is False
