"""Environment detection helpers.

ENV is one of 'local', 'test', 'staging' or 'production'. Anything unset is
treated as 'local'.
"""

import os


def get_environment() -> str:
    """Return the current environment name."""
    return os.getenv("ENV", "local")


def is_production() -> bool:
    return get_environment() == "production"


def is_staging() -> bool:
    return get_environment() == "staging"


def is_debug() -> bool:
    """Local development and test runs log at DEBUG and skip error tracking."""
    return get_environment() in ("local", "test")