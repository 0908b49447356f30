"""
Sentry Integration - Error Tracking

Only enabled when SENTRY_DSN is set.
"""
import sentry_sdk
from sentry_sdk.integrations.fastapi import FastApiIntegration

from solar_simulator.core.config import Settings
from solar_simulator.core.logging import get_logger

logger = get_logger(__name__)


def init_sentry(settings: Settings) -> bool:
    """Initialize Sentry SDK. Returns True when a DSN was configured."""
    if not settings.sentry_dsn:
        logger.debug("Sentry DSN not configured, skipping initialization")
        return False

    sentry_sdk.init(
        dsn=settings.sentry_dsn,
        environment=settings.environment,
        release=f"solar-simulator@{settings.app_version}",
        traces_sample_rate=settings.sentry_traces_sample_rate,
        integrations=[FastApiIntegration(transaction_style="endpoint")],
        send_default_pii=False,
        before_send=_before_send,
    )

    logger.info("Sentry initialized", environment=settings.environment)
    return True


def _before_send(event, hint):
    """Drop client errors (4xx) before they reach Sentry."""
    exc_info = hint.get("exc_info")
    if exc_info:
        _, exc_value, _ = exc_info
        status_code = getattr(exc_value, "status_code", None)
        if isinstance(status_code, int) and 400 <= status_code < 500:
            return None
    return event
