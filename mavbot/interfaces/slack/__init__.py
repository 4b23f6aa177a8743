# mavbot/interfaces/slack/__init__.py
"""Slack integration package for MAVBot.

This package provides the Slack bot implementation using AsyncWebClient
and the aiohttp SocketModeClient from slack-sdk.

Entry point: mavbot start
"""
