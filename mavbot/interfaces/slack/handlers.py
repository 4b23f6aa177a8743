# mavbot/interfaces/slack/handlers.py
"""Event handlers for Slack bot.

Provides handlers for:
- @mentions (app_mention event)
- Slash commands (/hello, /was-this-article-useful)
- Interactive callbacks (block_actions)

Handlers are called one at a time by the EventRouter. Errors from the
Slack Web API propagate to the router, which logs them and moves on.
"""

import logging
from collections.abc import Awaitable, Callable
from typing import Any

from mavbot.interfaces.slack.events import AppMention, InteractiveCallback, SlashCommand
from mavbot.interfaces.slack.replies import (
    build_article_feedback,
    build_hello_reply,
    build_mention_reply,
    build_unknown_command_reply,
)

logger = logging.getLogger(__name__)

SlashCommandHandler = Callable[[SlashCommand, Any], Awaitable[dict | None]]


# ============================================================================
# App Mention Handler
# ============================================================================


async def handle_app_mention(event: AppMention, client: Any) -> None:
    """Reply to an @mention with a greeting or an offer of help.

    Args:
        event: Parsed app_mention event.
        client: Slack AsyncWebClient instance.

    Raises:
        SlackApiError: If the user lookup or the post fails.
    """
    response = await client.users_info(user=event.user)
    user_name = response["user"]["name"]

    attachment = build_mention_reply(event.text, user_name)
    await client.chat_postMessage(channel=event.channel, attachments=[attachment])
    logger.info("Answered mention from %s in %s", user_name, event.channel)


# ============================================================================
# Slash Command Handlers
# ============================================================================


async def handle_hello_command(command: SlashCommand, client: Any) -> dict | None:
    """Echo the /hello argument back to the channel."""
    attachment = build_hello_reply(command.user_name, command.text)
    await client.chat_postMessage(channel=command.channel_id, attachments=[attachment])
    return None


async def handle_article_feedback(command: SlashCommand, client: Any) -> dict | None:
    """Ask the user whether the article was useful.

    Nothing is posted; the question goes back as the ack payload so Slack
    shows it directly to the invoking user.
    """
    return {"attachments": [build_article_feedback()]}


# Slash command name to handler mapping
SLASH_COMMANDS: dict[str, SlashCommandHandler] = {
    "/hello": handle_hello_command,
    "/was-this-article-useful": handle_article_feedback,
}


async def handle_slash_command(command: SlashCommand, client: Any) -> dict | None:
    """Route a slash command to its handler by exact name.

    Args:
        command: Parsed slash command.
        client: Slack AsyncWebClient instance.

    Returns:
        Payload to send with the Socket Mode ack, or None for an empty ack.
        Unknown commands get an ephemeral "unknown command" payload.
    """
    handler = SLASH_COMMANDS.get(command.command)
    if handler is None:
        logger.warning(
            "Unknown slash command %s from %s", command.command, command.user_name
        )
        return build_unknown_command_reply(command.command, list(SLASH_COMMANDS))

    logger.info("Handling %s from %s", command.command, command.user_name)
    return await handler(command, client)


# ============================================================================
# Interactive Callback Handler
# ============================================================================


async def handle_interaction(callback: InteractiveCallback) -> None:
    """Log what the user picked. No reply is sent."""
    logger.info("The action called is: %s", callback.action_id)
    logger.info("The response was of type: %s", callback.type)

    for action in callback.actions:
        logger.info(
            "Action %s (block %s, %s) selected options: %s",
            action.action_id,
            action.block_id,
            action.type,
            list(action.selected_options),
        )
