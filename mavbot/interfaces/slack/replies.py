# mavbot/interfaces/slack/replies.py
"""Reply payload builders for Slack messages.

All builders return plain dicts in Slack's legacy attachment / Block Kit
format, ready to pass to chat.postMessage or to a Socket Mode ack.
"""

from datetime import datetime

GREETING_COLOR = "#4af030"
NEUTRAL_COLOR = "#3d3d3d"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

ARTICLE_ACTION_ID = "answer"


def _context_fields(user_name: str, now: datetime | None = None) -> list[dict]:
    """Date and initiating user fields shared by every attachment reply."""
    now = now or datetime.now()
    return [
        {"title": "Date", "value": now.strftime(DATE_FORMAT)},
        {"title": "Initializer", "value": user_name},
    ]


def _mrkdwn(text: str) -> dict:
    return {"type": "mrkdwn", "text": text}


def build_mention_reply(
    text: str, user_name: str, now: datetime | None = None
) -> dict:
    """Build the attachment answering an @mention.

    Messages containing "hello" (any case) get a greeting, everything else
    gets an offer of help.

    Args:
        text: Raw mention text.
        user_name: Name of the user who mentioned the bot.
        now: Timestamp for the Date field (defaults to current local time).

    Returns:
        Attachment dict.
    """
    if "hello" in text.lower():
        body = f"Hello {user_name}"
        pretext = "Greetings"
        color = GREETING_COLOR
    else:
        body = f"How can I help you {user_name}"
        pretext = "How can I be of service?"
        color = NEUTRAL_COLOR

    return {
        "fallback": body,
        "pretext": pretext,
        "text": body,
        "color": color,
        "fields": _context_fields(user_name, now),
    }


def build_hello_reply(user_name: str, text: str, now: datetime | None = None) -> dict:
    """Build the attachment echoing a /hello command."""
    body = f"Hello {user_name}! You said: {text}"
    return {
        "fallback": body,
        "text": body,
        "color": GREETING_COLOR,
        "fields": _context_fields(user_name, now),
    }


def build_article_feedback() -> dict:
    """Build the Yes/No checkbox question for /was-this-article-useful.

    Returns:
        Attachment dict holding one section block with a checkboxes accessory.
    """
    checkboxes = {
        "type": "checkboxes",
        "action_id": ARTICLE_ACTION_ID,
        "options": [
            {
                "text": _mrkdwn("Yes"),
                "description": _mrkdwn("Did you Enjoy it?"),
                "value": "yes",
            },
            {
                "text": _mrkdwn("No"),
                "description": _mrkdwn("Did you Dislike it?"),
                "value": "no",
            },
        ],
    }
    return {
        "fallback": "Rate the tutorial",
        "text": "Rate the tutorial",
        "color": GREETING_COLOR,
        "blocks": [
            {
                "type": "section",
                "text": _mrkdwn("Did you think this article was helpful?"),
                "accessory": checkboxes,
            }
        ],
    }


def build_unknown_command_reply(command: str, known: list[str]) -> dict:
    """Build an ephemeral ack payload for a slash command the bot does not know."""
    supported = ", ".join(f"`{name}`" for name in known)
    return {
        "response_type": "ephemeral",
        "text": f"Unknown command `{command}`. Supported commands: {supported}",
    }
