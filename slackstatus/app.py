"""Click application entrypoint for slackstatus."""

from __future__ import annotations

import logging
from typing import Sequence

import click
from rich.console import Console

from slackstatus.client import SlackClient
from slackstatus.config import load_settings
from slackstatus.context import AppContext
from slackstatus.dispatch import dispatch
from slackstatus.errors import SlackStatusError
from slackstatus.models import AllWorkspaces, target_workspaces
from slackstatus.registry import load_statuses, load_workspaces
from slackstatus.render import render_config, render_summary, render_target_warning
from slackstatus.resolve import resolve, resolve_target


LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

logger = logging.getLogger(__name__)


@click.command(
    "slackstatus",
    context_settings={"help_option_names": ["-h", "--help"]},
)
@click.argument("args", nargs=-1, metavar="[WORKSPACE] STATUS")
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False),
    help="Config file (default is $HOME/.slackstatus.yml).",
)
@click.option("--note", help="Text appended to the status text, e.g. a return date.")
@click.option(
    "--test-auth",
    is_flag=True,
    help="Call auth.test for the selected workspace(s) and print the raw response.",
)
@click.option(
    "--list",
    "list_only",
    is_flag=True,
    help="List configured workspaces and statuses.",
)
@click.option("--verbose", is_flag=True, help="Enable debug logging.")
@click.pass_context
def main(
    ctx: click.Context,
    args: tuple[str, ...],
    config_path: str | None,
    note: str | None,
    test_auth: bool,
    list_only: bool,
    verbose: bool,
) -> None:
    """Update your Slack status quickly from the command line.

    Sets emoji, status text and presence in every configured workspace, or
    only in WORKSPACE when given:

    \b
      $ slackstatus lunch
      $ slackstatus acme lunch
    """

    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format=LOG_FORMAT,
    )

    if list_only and test_auth:
        raise click.UsageError(
            "--list and --test-auth cannot be used together.", ctx=ctx
        )
    if list_only:
        max_args = 0
    elif test_auth:
        max_args = 1
    else:
        max_args = 2
    min_args = 0 if (list_only or test_auth) else 1
    if not min_args <= len(args) <= max_args:
        raise click.UsageError(
            f"Expected between {min_args} and {max_args} arguments, got {len(args)}.",
            ctx=ctx,
        )

    settings = load_settings(config_path)
    if settings.store.path is not None:
        logger.debug("Using config file: %s", settings.store.path)
    client = SlackClient(timeout_seconds=settings.timeout_seconds)
    ctx.call_on_close(client.close)

    app = AppContext(
        settings=settings,
        client=client,
        console=Console(soft_wrap=True),
    )

    if list_only:
        _list_config(app)
    elif test_auth:
        _test_auth(app, args[0] if args else None)
    else:
        selector, action = (None, args[0]) if len(args) == 1 else args
        _set_status(app, selector, action, note)


def _set_status(
    app: AppContext, selector: str | None, action: str, note: str | None
) -> None:
    resolution = resolve(app.settings.store, selector, action, note=note)
    if isinstance(resolution.target, AllWorkspaces):
        render_target_warning(app.console, resolution.target)

    report = dispatch(app.client, resolution, app.console)
    render_summary(app.console, resolution.preset, report)


def _test_auth(app: AppContext, selector: str | None) -> None:
    target = resolve_target(load_workspaces(app.settings.store), selector)
    if isinstance(target, AllWorkspaces):
        render_target_warning(app.console, target)

    workspaces = target_workspaces(target)
    if not workspaces:
        app.console.print("[yellow]No workspaces configured.[/]")
        return
    for workspace in workspaces:
        click.echo(app.client.auth_test(workspace))


def _list_config(app: AppContext) -> None:
    store = app.settings.store
    render_config(app.console, load_workspaces(store), load_statuses(store))


def run(argv: Sequence[str] | None = None) -> None:
    """CLI entrypoint with user-friendly error handling."""

    try:
        main(args=list(argv) if argv is not None else None, standalone_mode=False)
    except SlackStatusError as exc:
        console = Console(stderr=True, soft_wrap=True)
        console.print(f"[red]{exc}[/]")
        raise SystemExit(exc.exit_code)
    except click.ClickException as exc:
        exc.show()
        raise SystemExit(exc.exit_code)
