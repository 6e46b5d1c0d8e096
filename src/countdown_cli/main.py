"""Main entry point for the countdown CLI."""

from typing import Optional

import typer
from rich.markup import escape

from countdown_cli import __version__
from countdown_cli.config import get_config_manager
from countdown_cli.models.timer import (
    DesktopNotifier,
    NullNotifier,
    TimerClock,
    TimerDisplay,
    TimerSession,
    get_theme,
    show_exit_message,
)
from countdown_cli.models.timer.themes import theme_names
from countdown_cli.utils.exit_codes import (
    ERROR_GENERAL,
    ERROR_INVALID_ARGS,
    INTERRUPTED,
    get_exit_code_description,
    get_exit_code_name,
)
from countdown_cli.utils.logger import get_logger, log_file_path
from countdown_cli.utils.ui.console import get_console

app = typer.Typer(
    name="countdown",
    help="A terminal-based countdown timer",
    add_completion=False,
)

console = get_console()


def _version_callback(value: bool) -> None:
    if value:
        console.print(f"countdown [version]{__version__}[/version]")
        raise typer.Exit()


def _list_styles_callback(value: bool) -> None:
    if value:
        for name in theme_names():
            console.print(name)
        raise typer.Exit()


@app.command()
def countdown(
    duration: Optional[int] = typer.Option(
        None, "--duration", "-d", min=0, help="Countdown length in seconds [default: 120]"
    ),
    title: Optional[str] = typer.Option(
        None, "--title", "-t", help="Title shown above the timer"
    ),
    style: Optional[str] = typer.Option(
        None, "--style", "-s", help="Colour theme (see --list-styles)"
    ),
    no_notify: bool = typer.Option(
        False, "--no-notify", help="Do not send a desktop notification when done"
    ),
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
    list_styles: bool = typer.Option(
        False,
        "--list-styles",
        callback=_list_styles_callback,
        is_eager=True,
        help="List available colour themes and exit",
    ),
) -> None:
    """
    Run an interactive countdown.

    Keys: q quit, r restart, space pause/resume, j/k +/-10s,
    p pomodoro (25 min), m set minutes, h help.
    """
    logger = get_logger()
    config = get_config_manager().config

    duration = config.duration_seconds if duration is None else duration
    title = config.title if title is None else title
    style = config.style if style is None else style

    try:
        theme = get_theme(style)
    except KeyError:
        console.print(
            f"[error]Unknown style '{escape(style)}'. "
            f"Available: {', '.join(theme_names())}[/error]"
        )
        raise typer.Exit(ERROR_INVALID_ARGS) from None

    notifier = DesktopNotifier() if config.notify and not no_notify else NullNotifier()
    session = TimerSession(
        TimerClock(duration),
        title=title,
        notifier=notifier,
        pomodoro_seconds=config.pomodoro_seconds,
        poll_interval=config.poll_interval_ms / 1000,
        tagline_interval=config.tagline_interval_seconds,
    )
    logger.info(
        "countdown started: duration=%ss title=%r style=%s", duration, title, theme.name
    )

    display = TimerDisplay(theme, console)
    try:
        display.run(session)
    except KeyboardInterrupt:
        logger.info("exiting: %s", get_exit_code_name(INTERRUPTED))
        raise typer.Exit(INTERRUPTED) from None
    except Exception as e:
        logger.exception("terminal display failed")
        console.print(
            f"[error]✗ {get_exit_code_description(ERROR_GENERAL)}: {escape(str(e))}[/error]"
        )
        console.print(f"Details in {escape(str(log_file_path()))}", soft_wrap=True)
        raise typer.Exit(ERROR_GENERAL) from e

    show_exit_message(session, console)


# Main entry point
def main():
    """Main entry point."""
    app()


if __name__ == "__main__":
    main()
