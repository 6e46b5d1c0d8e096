"""Timer session: modal key handling, frame loop and completion latch."""

from __future__ import annotations

import logging
import time
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from typing import Protocol

from .clock import TimerClock

logger = logging.getLogger(__name__)

KEY_ESC = "esc"
KEY_ENTER = "enter"
KEY_BACKSPACE = "backspace"
KEY_SPACE = " "

ADJUST_STEP_SECONDS = 10
DEFAULT_POMODORO_SECONDS = 1500
DEFAULT_POLL_INTERVAL = 0.2
DEFAULT_TAGLINE_INTERVAL = 5.0

COMPLETION_TITLE = "⌛ Timer Done"

TAGLINES = (
    "press 'h' for control panel (＾ｖ＾)ノ",
    "set custom time with 'm' key ⌛",
    "pomodoro mode? hit 'p' 💡",
    "press 'space' to pause/resume ⏸️",
)

HELP_LEGEND = (
    ("q", "quit"),
    ("r", "restart"),
    ("j", "+10s"),
    ("k", "-10s"),
    ("p", "pomodoro"),
    ("␣", "pause/resume"),
    ("m", "manual set (mins)"),
    ("esc", "close"),
)


class Mode(Enum):
    """UI mode; exactly one is active at a time."""

    NORMAL = "normal"
    HELP = "help"
    MANUAL_INPUT = "manual_input"


class KeySource(Protocol):
    def poll(self, timeout: float) -> str | None: ...


class Notifier(Protocol):
    def notify(self, title: str, body: str) -> None: ...


@dataclass(frozen=True)
class TimerFrame:
    """Everything the renderer needs to draw one frame."""

    mode: Mode
    title: str
    time_str: str
    done: bool
    paused: bool
    progress: float
    tagline: str
    input_buffer: str
    help_legend: tuple[tuple[str, str], ...] = HELP_LEGEND

    @property
    def status(self) -> str:
        if self.done:
            return "[OK]"
        if self.paused:
            return "[||]"
        return "[..]"


def format_remaining(seconds: float) -> str:
    """Format whole remaining seconds as ``MM:SS`` (minutes may exceed 99)."""
    total = max(0, int(seconds))
    mins, secs = divmod(total, 60)
    return f"{mins:02d}:{secs:02d}"


class TimerSession:
    """Drives a TimerClock from keystrokes, one frame at a time.

    Each frame samples the clock, renders, rotates the tagline, waits up to
    ``poll_interval`` seconds for a single key, applies it, and then checks
    for completion with a fresh clock sample. The completion notifier fires
    at most once until a restart-class action (``r``, ``p`` or a manual
    duration) clears the latch.
    """

    def __init__(
        self,
        clock: TimerClock,
        *,
        title: str,
        notifier: Notifier,
        pomodoro_seconds: float = DEFAULT_POMODORO_SECONDS,
        poll_interval: float = DEFAULT_POLL_INTERVAL,
        tagline_interval: float = DEFAULT_TAGLINE_INTERVAL,
        now: Callable[[], float] = time.monotonic,
    ):
        self.clock = clock
        self.title = title
        self.notifier = notifier
        self.pomodoro_seconds = pomodoro_seconds
        self.poll_interval = poll_interval
        self.tagline_interval = tagline_interval
        self._now = now

        self.mode = Mode.NORMAL
        self.input_buffer = ""
        self.already_notified = False
        self.running = True
        self.tagline_index = 0
        self.last_tagline_change = self._now()

    @property
    def tagline(self) -> str:
        return TAGLINES[self.tagline_index % len(TAGLINES)]

    def snapshot(self) -> TimerFrame:
        remaining = self.clock.remaining()
        return TimerFrame(
            mode=self.mode,
            title=self.title,
            time_str=format_remaining(remaining),
            done=remaining == 0,
            paused=self.clock.paused,
            progress=self.clock.progress(),
            tagline=self.tagline,
            input_buffer=self.input_buffer,
        )

    # ------------------------------------------------------------------
    # Frame loop
    # ------------------------------------------------------------------

    def run(self, render: Callable[[TimerFrame], None], keys: KeySource) -> None:
        """Run frames until the session is terminated with ``q``."""
        logger.info(
            "session started: title=%r target=%.0fs",
            self.title,
            self.clock.target_duration,
        )
        while self.frame(render, keys):
            pass
        logger.info("session ended")

    def frame(self, render: Callable[[TimerFrame], None], keys: KeySource) -> bool:
        """Run one frame. Returns False once the session has terminated."""
        now = self._now()
        render(self.snapshot())
        self.rotate_tagline(now)

        key = keys.poll(self.poll_interval)
        if key is not None:
            self.handle_key(key)
            if not self.running:
                return False

        self.check_completion()
        return True

    def rotate_tagline(self, now: float) -> None:
        if now - self.last_tagline_change >= self.tagline_interval:
            self.tagline_index += 1
            self.last_tagline_change = now

    def check_completion(self) -> bool:
        """Fire the notifier if the countdown just reached zero.

        Returns True if a notification was sent on this call.
        """
        if self.already_notified or self.clock.remaining() > 0:
            return False

        self.already_notified = True
        logger.info("countdown finished: %s", self.title)
        try:
            self.notifier.notify(COMPLETION_TITLE, f"{self.title} is over!")
        except Exception:
            logger.warning("completion notification failed", exc_info=True)
        return True

    # ------------------------------------------------------------------
    # Key dispatch
    # ------------------------------------------------------------------

    def handle_key(self, key: str) -> None:
        handlers = {
            Mode.NORMAL: self._handle_normal,
            Mode.HELP: self._handle_help,
            Mode.MANUAL_INPUT: self._handle_manual_input,
        }
        handlers[self.mode](key)

    def _handle_normal(self, key: str) -> None:
        if key == "q":
            self.running = False
        elif key == "r":
            self._restart(None)
        elif key == KEY_SPACE:
            paused = self.clock.toggle_pause()
            logger.debug("paused" if paused else "resumed")
        elif key == "h":
            self.mode = Mode.HELP
        elif key == "j":
            self.clock.adjust_target(ADJUST_STEP_SECONDS)
            logger.debug("target now %.0fs", self.clock.target_duration)
        elif key == "k":
            if self.clock.target_duration > ADJUST_STEP_SECONDS:
                self.clock.adjust_target(-ADJUST_STEP_SECONDS)
                logger.debug("target now %.0fs", self.clock.target_duration)
        elif key == "p":
            self._restart(self.pomodoro_seconds)
        elif key == "m":
            self.input_buffer = ""
            self.mode = Mode.MANUAL_INPUT
        elif key == KEY_ESC:
            self.mode = Mode.NORMAL

    def _handle_help(self, key: str) -> None:
        if key in ("q", "h", KEY_ESC):
            self.mode = Mode.NORMAL

    def _handle_manual_input(self, key: str) -> None:
        if len(key) == 1 and key in "0123456789":
            self.input_buffer += key
        elif key == KEY_BACKSPACE:
            self.input_buffer = self.input_buffer[:-1]
        elif key == KEY_ENTER:
            minutes = _parse_minutes(self.input_buffer)
            if minutes is not None:
                self._restart(minutes * 60)
            self.input_buffer = ""
            self.mode = Mode.NORMAL
        elif key in (KEY_ESC, "q"):
            self.input_buffer = ""
            self.mode = Mode.NORMAL

    def _restart(self, new_target: float | None) -> None:
        self.clock.restart(new_target)
        self.already_notified = False
        logger.debug("restarted: target=%.0fs", self.clock.target_duration)


def _parse_minutes(text: str) -> int | None:
    """Parse a non-negative whole number of minutes, or None."""
    text = text.strip()
    if not (text.isascii() and text.isdigit()):
        return None
    return int(text)
