"""Full-screen countdown UI rendered with rich."""

from __future__ import annotations

from rich.align import Align
from rich.console import Console, Group
from rich.live import Live
from rich.markup import escape
from rich.panel import Panel
from rich.style import Style
from rich.table import Table
from rich.text import Text

from .keyboard import get_keyboard_handler
from .session import Mode, TimerFrame, TimerSession
from .themes import DEFAULT_THEME, Theme, get_theme

BAR_BLOCKS = 12


def _round_half_up(value: float) -> int:
    return int(value + 0.5)


def progress_bar(frame: TimerFrame, blocks: int = BAR_BLOCKS) -> str:
    """Build the one-line status bar, e.g. ``[..] [████░░░░░░░░]  33% 01:20``."""
    filled = min(blocks, _round_half_up(frame.progress * blocks))
    percent = _round_half_up(frame.progress * 100)
    return (
        f"{frame.status} [{'█' * filled}{'░' * (blocks - filled)}] "
        f"{percent:>3}% {frame.time_str}"
    )


class TimerDisplay:
    """Renders TimerFrames and owns the terminal while a session runs."""

    def __init__(self, theme: Theme | None = None, console: Console | None = None):
        self.theme = theme or get_theme(DEFAULT_THEME)
        self.console = console or Console()

    def create_layout(self, frame: TimerFrame) -> Panel:
        """Create the full-screen renderable for one frame."""
        if frame.mode is Mode.HELP:
            content = self._create_help_content(frame)
        elif frame.mode is Mode.MANUAL_INPUT:
            content = self._create_input_content(frame)
        else:
            content = self._create_normal_content(frame)

        return Panel(
            Align.center(content, vertical="middle"),
            border_style=self.theme.border,
            style=Style(bgcolor=self.theme.bg),
            expand=True,
        )

    def _time_style(self, frame: TimerFrame) -> Style:
        if frame.done:
            return Style(color=self.theme.alert, bold=True, blink2=True)
        return Style(color=self.theme.text, bold=True, blink=True)

    def _bar_style(self, frame: TimerFrame) -> Style:
        if frame.done:
            return Style(color=self.theme.alert, bold=True, blink2=True)
        return Style(color=self.theme.accent, bgcolor=self.theme.bar_bg, bold=True)

    def _dim_style(self) -> Style:
        return Style(color=self.theme.text, bgcolor=self.theme.bg, dim=True)

    def _face_line(self, frame: TimerFrame) -> Text:
        return Text(
            f"(；・∀・)  {frame.time_str}",
            style=self._time_style(frame),
            justify="center",
        )

    def _create_normal_content(self, frame: TimerFrame) -> Group:
        title = Text(
            frame.title,
            style=Style(color=self.theme.title, bold=True, italic=True),
            justify="center",
        )
        time_text = Text(frame.time_str, style=self._time_style(frame), justify="center")
        bar = Text(progress_bar(frame), style=self._bar_style(frame), justify="center")
        tagline = Text(
            frame.tagline,
            style=Style(color=self.theme.muted, italic=True),
            justify="center",
        )
        return Group(title, Text(""), time_text, bar, Text(""), tagline)

    def _create_help_content(self, frame: TimerFrame) -> Group:
        legend = Table.grid(padding=(0, 2))
        legend.add_column(justify="right")
        legend.add_column()
        legend.add_column(justify="right")
        legend.add_column()

        pairs = list(frame.help_legend)
        for i in range(0, len(pairs), 2):
            row: list[str] = []
            for key, action in pairs[i : i + 2]:
                row.extend([f"{key}:", action])
            legend.add_row(*row)

        panel = Panel(
            legend,
            title="Control Panel: 操作一覧",
            border_style=self._dim_style(),
            style=self._dim_style(),
            expand=False,
        )
        return Group(Align.center(panel), Text(""), self._face_line(frame))

    def _create_input_content(self, frame: TimerFrame) -> Group:
        prompt = Text(
            "⏱️  Enter duration in minutes:", style=self._dim_style(), justify="center"
        )
        buffer = Text(
            f">> {frame.input_buffer}",
            style=Style(color=self.theme.input, bold=True),
            justify="center",
        )
        return Group(
            prompt, Text(""), buffer, Text(""), Text(""), self._face_line(frame)
        )

    def run(self, session: TimerSession, keyboard=None) -> None:
        """
        Run the session full-screen until it is terminated.

        The alternate screen and cbreak mode are released on every exit
        path, including exceptions raised while rendering.
        """
        keyboard = keyboard or get_keyboard_handler()

        try:
            with Live(
                self.create_layout(session.snapshot()),
                console=self.console,
                auto_refresh=False,
                screen=True,
            ) as live:

                def render(frame: TimerFrame) -> None:
                    live.update(self.create_layout(frame), refresh=True)

                session.run(render, keyboard)
        finally:
            keyboard.stop()


def show_exit_message(session: TimerSession, console: Console | None = None):
    """Print a short summary once the full-screen display has closed."""
    console = console or Console()
    frame = session.snapshot()

    if frame.done:
        body = f"[bold green]✓ {escape(frame.title)} finished[/bold green]"
        border = "green"
    else:
        body = (
            f"[yellow]{escape(frame.title)} stopped[/yellow]\n"
            f"Remaining: {frame.time_str}"
        )
        border = "yellow"

    console.print(Panel(body, border_style=border, padding=(0, 2), expand=False))
