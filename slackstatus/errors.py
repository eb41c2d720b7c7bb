"""Domain-specific exceptions for slackstatus."""

from __future__ import annotations


class SlackStatusError(Exception):
    """Base exception for expected CLI errors."""

    def __init__(self, message: str, exit_code: int = 1) -> None:
        super().__init__(message)
        self.exit_code = exit_code


class ConfigError(SlackStatusError):
    """Raised when the config file is missing, unreadable or invalid."""


class PresetNotFoundError(SlackStatusError):
    """Raised when the requested action matches no configured status preset."""

    def __init__(self, action: str) -> None:
        super().__init__(f"Status not found: {action}")
        self.action = action


class TransportError(SlackStatusError):
    """Raised when a request cannot be built or sent."""


class RemoteRejection(SlackStatusError):
    """Raised for Slack API responses where ok=false.

    Reported as a warning by the dispatcher, never fatal.
    """

    def __init__(self, method: str, error: str, workspace: str) -> None:
        super().__init__(f"Slack API rejected {method} for {workspace}: {error}")
        self.method = method
        self.error = error
        self.workspace = workspace
