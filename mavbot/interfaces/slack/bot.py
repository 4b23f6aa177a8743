# mavbot/interfaces/slack/bot.py
"""Slack bot implementation with AsyncWebClient and a Socket Mode client.

Wires together:
- AsyncWebClient for chat.postMessage and users.info
- aiohttp SocketModeClient for the Socket Mode connection
- EventRouter as the single consumer of incoming requests
"""

import asyncio
import contextlib
import logging
import signal

from dotenv import load_dotenv
from slack_sdk.socket_mode.aiohttp import SocketModeClient
from slack_sdk.web.async_client import AsyncWebClient

# Load environment variables from .env file
load_dotenv()

from mavbot import __version__
from mavbot.config import settings
from mavbot.interfaces.slack.router import EventRouter
from mavbot.utils.logging import configure_logging
from mavbot.utils.observability import setup_logfire

logger = logging.getLogger(__name__)
socket_logger = logging.getLogger("mavbot.socketmode")


class MissingCredentialsError(ValueError):
    """Raised when a Slack token required to connect is not configured."""


# ============================================================================
# Bot Factory and Startup Functions
# ============================================================================


def create_bot(
    auth_token: str | None = None,
    app_token: str | None = None,
    debug: bool | None = None,
) -> tuple[AsyncWebClient, SocketModeClient, EventRouter]:
    """Create and configure the Slack bot.

    Args:
        auth_token: Slack bot token (xoxb-*). Defaults to SLACK_AUTH_TOKEN env var.
        app_token: Slack app token (xapp-*). Defaults to SLACK_APP_TOKEN env var.
        debug: Verbose Socket Mode logging. Defaults to SLACK_DEBUG env var.

    Returns:
        Tuple of (AsyncWebClient, SocketModeClient, EventRouter). The router
        is already registered as the socket client's request listener.

    Raises:
        MissingCredentialsError: If either token is empty.
    """
    resolved_auth_token = auth_token or settings.slack_auth_token
    resolved_app_token = app_token or settings.slack_app_token
    resolved_debug = settings.slack_debug if debug is None else debug

    if not resolved_auth_token:
        raise MissingCredentialsError("SLACK_AUTH_TOKEN is not set")
    if not resolved_app_token:
        raise MissingCredentialsError("SLACK_APP_TOKEN is not set")

    if resolved_debug:
        socket_logger.setLevel(logging.DEBUG)

    web_client = AsyncWebClient(
        token=resolved_auth_token, timeout=settings.slack_api_timeout
    )
    socket_client = SocketModeClient(
        app_token=resolved_app_token,
        logger=socket_logger,
        web_client=web_client,
        trace_enabled=resolved_debug,
    )

    router = EventRouter(web_client, poll_interval=settings.poll_interval)
    socket_client.socket_mode_request_listeners.append(router.enqueue)
    return web_client, socket_client, router


def _install_signal_handlers(stop: asyncio.Event) -> None:
    """Set ``stop`` on SIGINT/SIGTERM where the event loop supports it."""
    loop = asyncio.get_running_loop()
    for sig in (signal.SIGINT, signal.SIGTERM):
        with contextlib.suppress(NotImplementedError, RuntimeError):
            loop.add_signal_handler(sig, stop.set)


async def _connect_until_stopped(socket_client: SocketModeClient, stop: asyncio.Event) -> bool:
    """Connect the socket client unless ``stop`` is set first.

    SocketModeClient.connect() retries forever on failure, so it is raced
    against the stop event and cancelled if the stop event wins.

    Returns:
        True if the connection was established, False if stopped first.
    """
    connect_task = asyncio.create_task(socket_client.connect())
    stop_task = asyncio.create_task(stop.wait())
    try:
        await asyncio.wait(
            {connect_task, stop_task}, return_when=asyncio.FIRST_COMPLETED
        )
    finally:
        for task in (connect_task, stop_task):
            if not task.done():
                task.cancel()
                with contextlib.suppress(asyncio.CancelledError):
                    await task

    if connect_task.cancelled():
        return False
    connect_task.result()
    return not stop.is_set()


async def start_bot(
    auth_token: str | None = None,
    app_token: str | None = None,
    debug: bool | None = None,
    stop: asyncio.Event | None = None,
) -> None:
    """Start the Slack bot with Socket Mode and block until stopped.

    Args:
        auth_token: Slack bot token override.
        app_token: Slack app token override.
        debug: Socket Mode debug logging override.
        stop: Event that ends the receive loop when set. A new one is
            created (and wired to SIGINT/SIGTERM) if omitted.
    """
    _, socket_client, router = create_bot(auth_token, app_token, debug)

    if stop is None:
        stop = asyncio.Event()
        _install_signal_handlers(stop)

    setup_logfire()

    logger.info("Starting Slack bot with Socket Mode...")
    try:
        if await _connect_until_stopped(socket_client, stop):
            await router.run(stop)
        else:
            logger.info("Stopped before the Socket Mode connection was established")
    except asyncio.CancelledError:
        logger.info("Received shutdown signal")
    finally:
        stop.set()
        await socket_client.close()
        logger.info("Slack bot stopped")


def main(debug: bool | None = None) -> None:
    """Entry point with graceful shutdown handling."""
    print(f"MAVBot {__version__} started")

    if not settings.has_slack_credentials:
        raise MissingCredentialsError("SLACK_AUTH_TOKEN and SLACK_APP_TOKEN must be set")

    configure_logging(settings.log_level, settings.log_format)

    try:
        asyncio.run(start_bot(debug=debug))
    except KeyboardInterrupt:
        logger.info("Shutdown complete")


if __name__ == "__main__":
    main()
