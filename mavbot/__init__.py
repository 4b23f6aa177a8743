"""MAVBot: a small Slack bot running over Socket Mode."""

__version__ = "0.1.0"
