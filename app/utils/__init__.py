"""Utility modules for the SiteForge backend."""

from app.utils.logger import logger, setup_logger
from app.utils.environment import is_production, is_staging, is_debug, get_environment
from app.utils.sentry_utils import configure_sentry, capture_exception
from app.utils.response_utils import error_response, app_error_response
from app.utils.constants import API_PREFIX

__all__ = [
    # Logger
    "logger",
    "setup_logger",
    # Environment
    "is_production",
    "is_staging",
    "is_debug",
    "get_environment",
    # Sentry
    "configure_sentry",
    "capture_exception",
    # Response
    "error_response",
    "app_error_response",
    # Constants
    "API_PREFIX",
]
