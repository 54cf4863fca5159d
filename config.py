"""Configuration from environment."""

import os

# PQUEUE_ORDER picks the order of queues built by the API and CLI:
# "desc" puts the highest priority first, "asc" the lowest.
DEFAULT_ORDER = "desc"
VALID_ORDERS = ("asc", "desc")

DEFAULT_LOG_LEVEL = "INFO"


def get_default_order() -> str:
    value = (os.environ.get("PQUEUE_ORDER") or DEFAULT_ORDER).strip().lower()
    if value not in VALID_ORDERS:
        raise ValueError(f"PQUEUE_ORDER must be one of {', '.join(VALID_ORDERS)}, got {value!r}")
    return value


def get_log_level() -> str:
    return (os.environ.get("PQUEUE_LOG_LEVEL") or DEFAULT_LOG_LEVEL).strip().upper()
