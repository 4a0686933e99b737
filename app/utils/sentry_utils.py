"""Sentry error tracking utilities."""

import logging
import os

import sentry_sdk
from sentry_sdk.integrations.fastapi import FastApiIntegration
from sentry_sdk.integrations.sqlalchemy import SqlalchemyIntegration

from app.utils.environment import is_debug, get_environment

logger = logging.getLogger(__name__)

_sentry_initialized = False


def configure_sentry(dsn_env_var: str = "SENTRY_DSN") -> bool:
    """Initialize Sentry for error tracking.

    Only initializes in deployed environments with a DSN configured.

    Returns:
        True if Sentry was initialized, False otherwise
    """
    global _sentry_initialized

    if _sentry_initialized:
        return True

    if is_debug():
        return False

    dsn = os.getenv(dsn_env_var)
    if not dsn:
        return False

    try:
        sentry_sdk.init(
            dsn=dsn,
            environment=get_environment(),
            traces_sample_rate=float(os.getenv("SENTRY_TRACES_SAMPLE_RATE", "0.2")),
            integrations=[
                FastApiIntegration(transaction_style="endpoint"),
                SqlalchemyIntegration(),
            ],
            # Prompts and generated sites are customer content
            send_default_pii=False,
        )
    except Exception as e:
        logger.warning(f"Failed to initialize Sentry: {e}")
        return False

    _sentry_initialized = True
    return True


def capture_exception(exception: Exception) -> None:
    """Send an exception to Sentry if tracking is enabled."""
    if not _sentry_initialized:
        return
    sentry_sdk.capture_exception(exception)


def set_user_context(user_id: str, email: str | None = None) -> None:
    """Attach the authenticated account to subsequent Sentry events."""
    if not _sentry_initialized:
        return
    sentry_sdk.set_user({"id": str(user_id), "email": email})
