"""Observability configuration with Pydantic Logfire."""

import logging

from mavbot.config import settings

logger = logging.getLogger(__name__)


def setup_logfire() -> None:
    """Configure Logfire for observability.

    Only activates if LOGFIRE_TOKEN environment variable is set.
    Instruments aiohttp, which carries both Web API calls and the
    Socket Mode connection.
    """
    if not settings.logfire_token:
        return

    try:
        import logfire

        logfire.configure(
            token=settings.logfire_token,
            service_name="mavbot",
            send_to_logfire="if-token-present",
        )
        logfire.instrument_aiohttp_client()
    except Exception as e:
        # Log but don't fail - observability is optional
        logger.warning("Failed to configure Logfire: %s", str(e))
