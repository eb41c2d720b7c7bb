"""Send profile and presence updates to the resolved workspaces."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from rich.console import Console

from slackstatus.client import PRESENCE_METHOD, PROFILE_METHOD, SlackClient
from slackstatus.errors import RemoteRejection
from slackstatus.models import (
    Resolution,
    StatusPreset,
    Target,
    Workspace,
    target_workspaces,
)
from slackstatus.render import render_rejection, render_sent


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SentCall:
    workspace: str
    method: str


@dataclass
class DispatchReport:
    """Calls completed in one run, plus any the API rejected."""

    sent: list[SentCall] = field(default_factory=list)
    rejections: list[RemoteRejection] = field(default_factory=list)
    empty: bool = False


def status_payload(text: str, emoji: str) -> dict:
    return {"profile": {"status_text": text, "status_emoji": emoji}}


def presence_payload(presence: str) -> dict:
    return {"presence": presence}


def _send_all(
    client: SlackClient,
    payload: dict,
    method: str,
    workspaces: tuple[Workspace, ...],
    report: DispatchReport,
    console: Console | None,
) -> None:
    # Sequential; a TransportError propagates and aborts the remaining sends.
    for workspace in workspaces:
        try:
            client.send_request(payload, method, workspace)
        except RemoteRejection as exc:
            logger.debug("%s", exc)
            report.rejections.append(exc)
            if console is not None:
                render_rejection(console, exc)
        else:
            if console is not None:
                render_sent(console, method, workspace.short_name)
        report.sent.append(SentCall(workspace.short_name, method.lstrip("/")))


def set_status(
    client: SlackClient,
    text: str,
    emoji: str,
    target: Target,
    report: DispatchReport | None = None,
    console: Console | None = None,
) -> DispatchReport:
    report = report if report is not None else DispatchReport()
    _send_all(
        client,
        status_payload(text, emoji),
        PROFILE_METHOD,
        target_workspaces(target),
        report,
        console,
    )
    return report


def set_presence(
    client: SlackClient,
    presence: str,
    target: Target,
    report: DispatchReport | None = None,
    console: Console | None = None,
) -> DispatchReport:
    report = report if report is not None else DispatchReport()
    _send_all(
        client,
        presence_payload(presence),
        PRESENCE_METHOD,
        target_workspaces(target),
        report,
        console,
    )
    return report


def apply_preset(
    client: SlackClient,
    preset: StatusPreset,
    target: Target,
    console: Console | None = None,
) -> DispatchReport:
    """Issue the profile update, then the presence update, to every target."""

    report = DispatchReport()
    if not target_workspaces(target):
        logger.debug("No workspaces configured; nothing to update")
        report.empty = True
        return report

    set_status(client, preset.status_text, preset.emoji, target, report, console)
    set_presence(client, preset.presence, target, report, console)
    return report


def dispatch(
    client: SlackClient, resolution: Resolution, console: Console | None = None
) -> DispatchReport:
    return apply_preset(client, resolution.preset, resolution.target, console)
