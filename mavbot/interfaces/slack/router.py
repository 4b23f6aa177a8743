# mavbot/interfaces/slack/router.py
"""Single-consumer event router for Socket Mode requests.

The Socket Mode client runs each incoming request listener in its own task.
EventRouter.enqueue is registered as that listener and only queues the
request; EventRouter.run drains the queue on one task, so handlers run
strictly one at a time in arrival order.
"""

import asyncio
import logging
from typing import Any

from slack_sdk.socket_mode.request import SocketModeRequest
from slack_sdk.socket_mode.response import SocketModeResponse

from mavbot.interfaces.slack.events import (
    AppMention,
    EventParseError,
    InteractiveCallback,
    SlashCommand,
    parse_request,
)
from mavbot.interfaces.slack.handlers import (
    handle_app_mention,
    handle_interaction,
    handle_slash_command,
)
from mavbot.utils.logging import set_request_id

logger = logging.getLogger(__name__)

DEFAULT_POLL_INTERVAL = 1.0


class EventRouter:
    """Receives Socket Mode requests and dispatches them to handlers.

    Args:
        client: Slack AsyncWebClient shared by all handlers.
        poll_interval: Seconds to wait for a request before re-checking
            the stop event.
    """

    def __init__(self, client: Any, poll_interval: float = DEFAULT_POLL_INTERVAL) -> None:
        self._client = client
        self._poll_interval = poll_interval
        self._queue: asyncio.Queue[tuple[Any, SocketModeRequest]] = asyncio.Queue()

    @property
    def pending(self) -> int:
        """Number of requests waiting to be dispatched."""
        return self._queue.qsize()

    async def enqueue(self, socket_client: Any, request: SocketModeRequest) -> None:
        """Socket Mode request listener: queue the request for the consumer."""
        self._queue.put_nowait((socket_client, request))

    async def run(self, stop: asyncio.Event) -> None:
        """Dispatch queued requests until ``stop`` is set.

        Requests still queued when ``stop`` is set are dropped. A failing
        handler is logged and never ends the loop.
        """
        logger.info("Socket mode listener started")
        while not stop.is_set():
            try:
                socket_client, request = await asyncio.wait_for(
                    self._queue.get(), timeout=self._poll_interval
                )
            except asyncio.TimeoutError:
                continue

            if stop.is_set():
                break

            try:
                await self.dispatch(socket_client, request)
            except Exception:
                logger.exception(
                    "Error handling %s request %s", request.type, request.envelope_id
                )
            finally:
                set_request_id("")

        logger.info("Shutting down socket mode listener")

    async def dispatch(self, socket_client: Any, request: SocketModeRequest) -> None:
        """Parse one request, acknowledge it, and run the matching handler."""
        set_request_id(request.envelope_id)

        try:
            event = parse_request(request)
        except EventParseError as e:
            logger.warning("Could not parse %s request: %s", request.type, e)
            return

        if event is None:
            logger.debug("Ignoring %s request", request.type)
            await self._ack(socket_client, request)
            return

        if isinstance(event, AppMention):
            await self._ack(socket_client, request)
            await handle_app_mention(event, self._client)
        elif isinstance(event, SlashCommand):
            payload = None
            try:
                payload = await handle_slash_command(event, self._client)
            finally:
                await self._ack(socket_client, request, payload)
        elif isinstance(event, InteractiveCallback):
            try:
                await handle_interaction(event)
            finally:
                await self._ack(socket_client, request)

    async def _ack(
        self, socket_client: Any, request: SocketModeRequest, payload: dict | None = None
    ) -> None:
        response = SocketModeResponse(envelope_id=request.envelope_id, payload=payload)
        await socket_client.send_socket_mode_response(response)
