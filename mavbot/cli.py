# mavbot/cli.py
"""Command line entry for MAVBot."""

import click

from mavbot import __version__


@click.group()
def cli() -> None:
    """MAVBot: a Slack bot that answers mentions and slash commands."""


@cli.command()
def version() -> None:
    """Display the current version of MAVBot."""
    click.echo(__version__)


@cli.command()
@click.option(
    "--debug/--no-debug",
    default=None,
    help="Verbose Socket Mode logging (defaults to SLACK_DEBUG).",
)
def start(debug: bool | None) -> None:
    """Run MAVBot: connect to Slack and handle events until interrupted.

    Environment variables required:
        SLACK_AUTH_TOKEN: Bot User OAuth Token (xoxb-...)
        SLACK_APP_TOKEN: App-Level Token for Socket Mode (xapp-...)
    """
    from mavbot.interfaces.slack.bot import MissingCredentialsError, main

    try:
        main(debug=debug)
    except MissingCredentialsError as e:
        raise click.ClickException(str(e)) from e


if __name__ == "__main__":
    cli()
