"""Shared runtime context for the slackstatus command."""

from __future__ import annotations

from dataclasses import dataclass

from rich.console import Console

from slackstatus.client import SlackClient
from slackstatus.config import Settings


@dataclass
class AppContext:
    """Container for shared runtime objects."""

    settings: Settings
    client: SlackClient
    console: Console
