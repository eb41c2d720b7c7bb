"""Resolve CLI input into a target workspace set and one status preset."""

from __future__ import annotations

import logging
from typing import Sequence

from slackstatus.config import ConfigStore
from slackstatus.errors import PresetNotFoundError
from slackstatus.models import (
    AllWorkspaces,
    OneWorkspace,
    Resolution,
    StatusPreset,
    Target,
    Workspace,
)
from slackstatus.registry import load_statuses, load_workspaces


logger = logging.getLogger(__name__)


def select_workspace(
    workspaces: Sequence[Workspace], selector: str | None
) -> Workspace | None:
    """Return the first workspace whose short name equals ``selector``."""

    needle = (selector or "").strip()
    if not needle:
        return None
    for workspace in workspaces:
        if workspace.short_name == needle:
            return workspace
    return None


def resolve_target(workspaces: Sequence[Workspace], selector: str | None) -> Target:
    """Pick one workspace, or all of them.

    A selector that matches no workspace does not fail: it falls back to
    every configured workspace, and the miss is kept on the result so the
    caller can warn about it.
    """

    selected = select_workspace(workspaces, selector)
    if selected is not None:
        return OneWorkspace(selected)

    needle = (selector or "").strip() or None
    if needle:
        logger.debug(
            "Workspace %r matched no configured workspace; targeting all", needle
        )
    return AllWorkspaces(tuple(workspaces), selector=needle)


def resolve_status(presets: Sequence[StatusPreset], action: str) -> StatusPreset:
    for preset in presets:
        if preset.short_name == action:
            return preset
    raise PresetNotFoundError(action)


def resolve(
    store: ConfigStore,
    selector: str | None,
    action: str,
    *,
    note: str | None = None,
) -> Resolution:
    """Build the full resolution for one invocation from the config store."""

    workspaces = load_workspaces(store)
    preset = resolve_status(load_statuses(store), action).with_note(note)
    target = resolve_target(workspaces, selector)
    logger.debug("Resolved %s -> %s", action, target)
    return Resolution(target=target, preset=preset)
