# mavbot/interfaces/slack/events.py
"""Typed Slack events parsed from Socket Mode requests.

Socket Mode delivers three envelope types that the bot cares about:
- events_api: Events API callbacks (only app_mention is handled)
- slash_commands: slash command invocations
- interactive: interactive component callbacks (block_actions etc.)

parse_request() turns a raw SocketModeRequest into one of the frozen
dataclasses below, returns None for envelopes the bot ignores, and raises
EventParseError when a payload does not have the expected shape.
"""

from dataclasses import dataclass
from typing import Any

from slack_sdk.socket_mode.request import SocketModeRequest

EVENTS_API = "events_api"
SLASH_COMMANDS = "slash_commands"
INTERACTIVE = "interactive"


class EventParseError(ValueError):
    """Raised when a Socket Mode payload cannot be read as the expected event."""


@dataclass(frozen=True)
class AppMention:
    """The bot was @mentioned in a channel message.

    Attributes:
        channel: Channel ID the mention was posted in.
        user: Slack user ID of the author.
        text: Raw message text, including the <@BOT> mention.
        ts: Message timestamp.
    """

    channel: str
    user: str
    text: str
    ts: str = ""


@dataclass(frozen=True)
class SlashCommand:
    """A slash command invocation.

    Attributes:
        command: Command name including the leading slash (e.g. "/hello").
        text: Free-text argument typed after the command.
        user_id: Slack user ID of the invoking user.
        user_name: Slack handle of the invoking user.
        channel_id: Channel the command was run in.
        response_url: Webhook URL for delayed responses.
    """

    command: str
    text: str
    user_id: str
    user_name: str
    channel_id: str
    response_url: str = ""


@dataclass(frozen=True)
class BlockAction:
    """A single action inside a block_actions callback."""

    action_id: str
    block_id: str
    type: str
    selected_options: tuple[str, ...] = ()


@dataclass(frozen=True)
class InteractiveCallback:
    """A user interacted with a previously sent UI element.

    Attributes:
        type: Callback type (e.g. "block_actions").
        user_id: Slack user ID of the interacting user.
        channel_id: Channel of the message holding the element, if any.
        actions: Actions carried by a block_actions callback.
    """

    type: str
    user_id: str
    channel_id: str = ""
    actions: tuple[BlockAction, ...] = ()

    @property
    def action_id(self) -> str:
        """ID of the first action, or empty string when there is none."""
        return self.actions[0].action_id if self.actions else ""


SlackEvent = AppMention | SlashCommand | InteractiveCallback


def _require(payload: dict[str, Any], key: str) -> Any:
    """Fetch a required key or raise EventParseError."""
    try:
        return payload[key]
    except KeyError:
        raise EventParseError(f"missing '{key}'") from None


def _as_dict(value: Any, what: str) -> dict[str, Any]:
    if not isinstance(value, dict):
        raise EventParseError(f"{what} is {type(value).__name__}, expected object")
    return value


def _parse_events_api(payload: dict[str, Any]) -> AppMention | None:
    if payload.get("type") != "event_callback":
        return None

    event = _as_dict(_require(payload, "event"), "event")
    if event.get("type") != "app_mention":
        return None

    return AppMention(
        channel=_require(event, "channel"),
        user=_require(event, "user"),
        text=event.get("text", ""),
        ts=event.get("ts", ""),
    )


def _parse_slash_command(payload: dict[str, Any]) -> SlashCommand:
    return SlashCommand(
        command=_require(payload, "command"),
        text=payload.get("text", ""),
        user_id=payload.get("user_id", ""),
        user_name=payload.get("user_name", ""),
        channel_id=_require(payload, "channel_id"),
        response_url=payload.get("response_url", ""),
    )


def _parse_block_action(action: Any) -> BlockAction:
    action = _as_dict(action, "action")
    options = action.get("selected_options") or []
    return BlockAction(
        action_id=action.get("action_id", ""),
        block_id=action.get("block_id", ""),
        type=action.get("type", ""),
        selected_options=tuple(
            _as_dict(option, "selected option").get("value", "") for option in options
        ),
    )


def _parse_interactive(payload: dict[str, Any]) -> InteractiveCallback:
    callback_type = _require(payload, "type")
    user = _as_dict(payload.get("user") or {}, "user")
    channel = _as_dict(payload.get("channel") or {}, "channel")

    actions: tuple[BlockAction, ...] = ()
    if callback_type == "block_actions":
        raw_actions = payload.get("actions") or []
        if not isinstance(raw_actions, list):
            raise EventParseError("actions is not a list")
        actions = tuple(_parse_block_action(a) for a in raw_actions)

    return InteractiveCallback(
        type=callback_type,
        user_id=user.get("id", ""),
        channel_id=channel.get("id", ""),
        actions=actions,
    )


def parse_request(request: SocketModeRequest) -> SlackEvent | None:
    """Parse a Socket Mode request into a typed event.

    Args:
        request: Raw request received from the Socket Mode client.

    Returns:
        The parsed event, or None if the envelope is one the bot ignores.

    Raises:
        EventParseError: If the payload is malformed for its envelope type.
    """
    if request.type not in (EVENTS_API, SLASH_COMMANDS, INTERACTIVE):
        return None

    payload = _as_dict(request.payload, "payload")

    if request.type == EVENTS_API:
        return _parse_events_api(payload)
    if request.type == SLASH_COMMANDS:
        return _parse_slash_command(payload)
    return _parse_interactive(payload)
