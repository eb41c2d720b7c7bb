"""Build workspace and status preset lists from the config store."""

from __future__ import annotations

import logging

from slackstatus.config import ConfigStore
from slackstatus.errors import ConfigError
from slackstatus.models import PRESENCE_VALUES, StatusPreset, Workspace


logger = logging.getLogger(__name__)

WORKSPACE_ORDER_KEY = "workspaces"
WORKSPACES_KEY = "workspace_credentials"
STATUSES_KEY = "statuses"

DEFAULT_STATUSES: tuple[StatusPreset, ...] = (
    StatusPreset("work", ":male-technologist:", "auto", "Hard at work"),
    StatusPreset("wfh", ":house_with_garden:", "auto", "Working from home"),
    StatusPreset("lunch", ":sandwich:", "away", "Out to lunch"),
    StatusPreset("ooo", ":palm_tree:", "away", "OOO"),
    StatusPreset("offline", "", "away", ""),
)


def _workspace_keys(store: ConfigStore) -> list[str]:
    if store.has(WORKSPACE_ORDER_KEY):
        keys: list[str] = []
        for key in store.get_list(WORKSPACE_ORDER_KEY):
            if key not in keys:
                keys.append(key)
        return keys
    return store.section_keys(WORKSPACES_KEY)


def load_workspaces(store: ConfigStore) -> tuple[Workspace, ...]:
    """Return configured workspaces in their defined iteration order.

    Order is the ``workspaces`` list when present, otherwise the
    ``workspace_credentials`` keys sorted lexicographically.
    """

    workspaces = []
    for key in _workspace_keys(store):
        prefix = f"{WORKSPACES_KEY}.{key}"
        workspace = Workspace(
            short_name=store.get_string(f"{prefix}.short_name"),
            token=store.get_string(f"{prefix}.token"),
        )
        if not store.has(prefix) and not (workspace.short_name or workspace.token):
            raise ConfigError(f"Workspace {key} is listed but has no credentials")
        if not workspace.short_name:
            raise ConfigError(f"Workspace {key} has no short_name")
        if not workspace.token:
            logger.warning("Workspace %s has no token configured", key)
        workspaces.append(workspace)

    logger.debug("Loaded %d workspace(s)", len(workspaces))
    return tuple(workspaces)


def load_statuses(store: ConfigStore) -> tuple[StatusPreset, ...]:
    """Return configured status presets, or the built-in ones if none are set."""

    if not store.has(STATUSES_KEY):
        logger.debug("No statuses section; using built-in presets")
        return DEFAULT_STATUSES

    presets = []
    for key in store.section_keys(STATUSES_KEY):
        prefix = f"{STATUSES_KEY}.{key}"
        presence = store.get_string(f"{prefix}.presence")
        if presence not in PRESENCE_VALUES:
            raise ConfigError(
                f"Status {key} has invalid presence {presence!r}; "
                "expected 'auto' or 'away'"
            )
        presets.append(
            StatusPreset(
                short_name=store.get_string(f"{prefix}.short_name"),
                emoji=store.get_string(f"{prefix}.emoji"),
                presence=presence,  # type: ignore[arg-type]
                status_text=store.get_string(f"{prefix}.status_text"),
            )
        )

    logger.debug("Loaded %d status preset(s)", len(presets))
    return tuple(presets)
