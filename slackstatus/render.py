"""Console rendering for slackstatus output."""

from __future__ import annotations

from typing import TYPE_CHECKING, Sequence

from rich.markup import escape

from slackstatus.errors import RemoteRejection
from slackstatus.models import AllWorkspaces, StatusPreset, Workspace

if TYPE_CHECKING:
    from slackstatus.dispatch import DispatchReport


def render_sent(console, method: str, workspace: str) -> None:
    console.print(
        f"[green]✓[/] [dim]{escape(method.lstrip('/'))}[/] → [bold]{escape(workspace)}[/]"
    )


def render_rejection(console, exc: RemoteRejection) -> None:
    console.print(
        f"[yellow]![/] [dim]{escape(exc.method)}[/] → [bold]{escape(exc.workspace)}[/] "
        f"[yellow]rejected: {escape(exc.error)}[/]"
    )


def render_target_warning(console, target: AllWorkspaces) -> None:
    if target.selector_missed:
        console.print(
            f"[yellow]No workspace named {escape(target.selector or '')!r}; "
            "updating all workspaces.[/]"
        )


def render_summary(console, preset: StatusPreset, report: "DispatchReport") -> None:
    if report.empty:
        console.print("[yellow]No workspaces configured; nothing was updated.[/]")
        return

    workspaces = sorted({call.workspace for call in report.sent})
    label = escape(preset.status_text or "(cleared)")
    line = (
        f"[bold]{escape(preset.short_name)}[/] {escape(preset.emoji)} {label} "
        f"[dim]({preset.presence}, {len(workspaces)} workspace(s))[/]"
    )
    if report.rejections:
        line = f"{line} [yellow]{len(report.rejections)} rejected[/]"
    console.print(line)


def render_config(
    console,
    workspaces: Sequence[Workspace],
    presets: Sequence[StatusPreset],
) -> None:
    console.print(f"[bold]WORKSPACES[/] [dim]({len(workspaces)})[/]")
    if not workspaces:
        console.print("[dim]No workspaces configured.[/]")
    for workspace in workspaces:
        token_state = "token:ok" if workspace.token else "[red]token:missing[/]"
        console.print(f"  [cyan]{escape(workspace.short_name)}[/]  [dim]{token_state}[/]")

    console.print(f"[bold]STATUSES[/] [dim]({len(presets)})[/]")
    width = max((len(preset.short_name) for preset in presets), default=0)
    for preset in presets:
        presence_color = "green" if preset.presence == "auto" else "yellow"
        console.print(
            f"  [cyan]{escape(preset.short_name.ljust(width))}[/]  "
            f"[{presence_color}]{preset.presence:<4}[/]  "
            f"{escape(preset.emoji)} {escape(preset.status_text)}"
        )
