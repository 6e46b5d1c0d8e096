"""Countdown timer core: clock, session state machine and terminal collaborators."""

from .clock import TimerClock
from .keyboard import KeyboardHandler, WindowsKeyboardHandler, get_keyboard_handler
from .notifier import DesktopNotifier, NullNotifier
from .session import Mode, TimerFrame, TimerSession
from .themes import THEMES, Theme, get_theme
from .ui import TimerDisplay, show_exit_message

__all__ = [
    "TimerClock",
    "TimerSession",
    "TimerFrame",
    "Mode",
    "TimerDisplay",
    "KeyboardHandler",
    "WindowsKeyboardHandler",
    "get_keyboard_handler",
    "DesktopNotifier",
    "NullNotifier",
    "Theme",
    "THEMES",
    "get_theme",
    "show_exit_message",
]
