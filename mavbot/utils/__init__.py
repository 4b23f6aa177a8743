"""Utility functions for MAVBot."""

from mavbot.utils.logging import (
    configure_logging,
    configure_structured_logging,
    get_request_id,
    set_request_id,
)
from mavbot.utils.observability import setup_logfire

__all__ = [
    "setup_logfire",
    "set_request_id",
    "get_request_id",
    "configure_logging",
    "configure_structured_logging",
]
