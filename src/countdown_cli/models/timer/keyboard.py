"""Cross-platform keyboard input handler for timer controls."""

import os
import sys
from collections import deque
from typing import Optional

_NAMED_KEYS = {
    "\r": "enter",
    "\n": "enter",
    "\x7f": "backspace",
    "\x08": "backspace",
}


def _skip_escape_sequence(chunk: str, start: int) -> int:
    """Return the index just past a CSI or SS3 sequence at *start*, or *start*.

    *start* points at the ESC. CSI is ``ESC [`` up to a final byte in
    ``@``..``~``; SS3 is ``ESC O`` plus one byte.
    """
    intro = chunk[start + 1 : start + 2]
    if intro == "O" and start + 2 < len(chunk):
        return start + 3
    if intro == "[":
        for end in range(start + 2, len(chunk)):
            if "@" <= chunk[end] <= "~":
                return end + 1
        # Truncated sequence: drop the rest of the read
        return len(chunk)
    return start


def _translate(chunk: str) -> list[str]:
    """Split raw terminal input into key names.

    An ESC that starts a CSI or SS3 sequence (arrows, mouse reports,
    function keys) swallows the whole sequence; any other ESC is the
    escape key.
    """
    keys: list[str] = []
    i = 0
    while i < len(chunk):
        ch = chunk[i]
        if ch == "\x1b":
            end = _skip_escape_sequence(chunk, i)
            if end == i:
                keys.append("esc")
                i += 1
            else:
                i = end
            continue
        keys.append(_NAMED_KEYS.get(ch, ch))
        i += 1
    return keys


class KeyboardHandler:
    """Keyboard poller that puts the terminal in cbreak mode."""

    def __init__(self):
        self.fd = sys.stdin.fileno()
        self.old_settings = None
        self._pending: deque[str] = deque()
        self._setup()

    def _setup(self):
        """Setup terminal for unbuffered key input."""
        try:
            import termios
            import tty

            self.old_settings = termios.tcgetattr(self.fd)
            tty.setcbreak(self.fd)
        except Exception:
            # Not a TTY (or Windows); poll() will never see input
            pass

    def poll(self, timeout: float = 0.0) -> Optional[str]:
        """
        Wait up to *timeout* seconds for a single keypress.

        Returns the character for printable keys, "esc", "enter" or
        "backspace" for those keys, and None when nothing arrived or the
        input was not a key.
        """
        if self._pending:
            return self._pending.popleft()

        try:
            import select

            if not select.select([self.fd], [], [], timeout)[0]:
                return None
            raw = os.read(self.fd, 64)
        except Exception:
            return None

        self._pending.extend(_translate(raw.decode("utf-8", errors="ignore")))
        if self._pending:
            return self._pending.popleft()
        return None

    def stop(self):
        """Restore terminal settings."""
        if self.old_settings:
            try:
                import termios

                termios.tcsetattr(self.fd, termios.TCSADRAIN, self.old_settings)
            except Exception:
                pass


class WindowsKeyboardHandler:
    """Keyboard handler for Windows using msvcrt."""

    def __init__(self):
        try:
            import msvcrt

            self.msvcrt = msvcrt
        except ImportError:
            self.msvcrt = None

    def poll(self, timeout: float = 0.0) -> Optional[str]:
        """Wait up to *timeout* seconds for a key on Windows."""
        if not self.msvcrt:
            return None

        import time

        deadline = time.monotonic() + timeout
        while not self.msvcrt.kbhit():
            if time.monotonic() >= deadline:
                return None
            time.sleep(0.01)

        key = self.msvcrt.getwch()
        if key in ("\x00", "\xe0"):
            # Function/arrow key prefix; swallow the scan code
            self.msvcrt.getwch()
            return None
        if key == "\x1b":
            return "esc"
        return _NAMED_KEYS.get(key, key)

    def stop(self):
        """No cleanup needed on Windows."""
        pass


def get_keyboard_handler():
    """Return the keyboard handler for the current platform."""
    if sys.platform == "win32":
        return WindowsKeyboardHandler()
    return KeyboardHandler()
