"""CLI for the roster manager.

Usage:
    python -m roster                      # Start the interactive menu
    python -m roster menu --log-level debug
    python -m roster menu --no-color
"""

from __future__ import annotations

import logging
from typing import Optional

import typer
from rich.console import Console

from roster.config import Settings
from roster.log import configure_logging
from roster.menu import RosterMenu
from roster.store import RosterStore

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="roster",
    help="Console student roster manager",
    invoke_without_command=True,
)


def _resolve(base: Settings, log_level: Optional[str], no_color: bool) -> Settings:
    """Apply CLI flags on top of base settings, exiting 1 on a bad level."""
    try:
        return base.with_overrides(log_level=log_level, no_color=no_color)
    except ValueError as e:
        Console(stderr=True).print(f"[red]{e}[/red]. Choose: critical, error, warning, info, debug")
        raise typer.Exit(1)


def _start_menu(settings: Settings) -> None:
    console = Console(no_color=settings.no_color, highlight=False)
    configure_logging(settings.log_level_number, Console(stderr=True, no_color=settings.no_color))
    logger.info("Starting menu (log level %s)", settings.log_level)

    RosterMenu(RosterStore(), console).run()


@app.callback()
def main(
    ctx: typer.Context,
    log_level: Optional[str] = typer.Option(None, "--log-level", "-l", help="Log level (overrides ROSTER_LOG_LEVEL)"),
    no_color: bool = typer.Option(False, "--no-color", help="Disable colored output (or set ROSTER_NO_COLOR=1)"),
) -> None:
    """Console student roster manager. Runs the menu when no command is given."""
    # Flags given before a command carry over to it through ctx.obj
    ctx.obj = _resolve(Settings.from_env(), log_level, no_color)
    if ctx.invoked_subcommand is None:
        _start_menu(ctx.obj)


@app.command("menu")
def cmd_menu(
    ctx: typer.Context,
    log_level: Optional[str] = typer.Option(None, "--log-level", "-l", help="Log level (overrides ROSTER_LOG_LEVEL)"),
    no_color: bool = typer.Option(False, "--no-color", help="Disable colored output (or set ROSTER_NO_COLOR=1)"),
) -> None:
    """Start the interactive add/remove/view menu."""
    base = ctx.obj if isinstance(ctx.obj, Settings) else Settings.from_env()
    _start_menu(_resolve(base, log_level, no_color))


if __name__ == "__main__":
    app()
