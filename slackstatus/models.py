"""Value types shared by the registries, resolver and dispatcher."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal, Union


Presence = Literal["auto", "away"]
PRESENCE_VALUES: tuple[str, ...] = ("auto", "away")


@dataclass(frozen=True)
class Workspace:
    """One Slack workspace and the bearer token used to update it."""

    short_name: str
    token: str = field(repr=False)


@dataclass(frozen=True)
class StatusPreset:
    short_name: str
    emoji: str
    presence: Presence
    status_text: str

    def with_note(self, note: str | None) -> "StatusPreset":
        """Return a copy with ``note`` appended to the status text."""

        note = (note or "").strip()
        if not note:
            return self
        text = f"{self.status_text} {note}" if self.status_text else note
        return StatusPreset(
            short_name=self.short_name,
            emoji=self.emoji,
            presence=self.presence,
            status_text=text,
        )


@dataclass(frozen=True)
class AllWorkspaces:
    """Fan-out target: every configured workspace.

    ``selector`` keeps a workspace name that was given but matched nothing.
    """

    workspaces: tuple[Workspace, ...]
    selector: str | None = None

    @property
    def selector_missed(self) -> bool:
        return bool(self.selector)


@dataclass(frozen=True)
class OneWorkspace:
    workspace: Workspace


Target = Union[AllWorkspaces, OneWorkspace]


def target_workspaces(target: Target) -> tuple[Workspace, ...]:
    if isinstance(target, OneWorkspace):
        return (target.workspace,)
    return target.workspaces


@dataclass(frozen=True)
class Resolution:
    """Everything one invocation needs: the target and the preset."""

    target: Target
    preset: StatusPreset
