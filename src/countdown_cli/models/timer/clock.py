"""Pausable countdown clock anchored on a monotonic time source."""

from __future__ import annotations

import time
from collections.abc import Callable


class TimerClock:
    """Tracks elapsed time against a mutable target duration.

    While running, elapsed time is ``now - reference_instant``. While paused,
    ``paused_elapsed`` holds the value frozen at the moment of pausing.
    Resuming re-anchors ``reference_instant`` so that the paused interval
    never counts toward elapsed time.

    All durations are float seconds.
    """

    def __init__(
        self,
        target_duration: float,
        now: Callable[[], float] = time.monotonic,
    ):
        self._now = now
        self.target_duration = max(0.0, float(target_duration))
        self.reference_instant = self._now()
        self.paused = False
        self.paused_elapsed = 0.0

    def elapsed(self) -> float:
        """Return elapsed running time, frozen while paused."""
        if self.paused:
            return self.paused_elapsed
        # A clock that steps backwards must not yield negative elapsed time
        return max(0.0, self._now() - self.reference_instant)

    def remaining(self) -> float:
        """Return time left until the target, floored at zero."""
        return max(0.0, self.target_duration - self.elapsed())

    def is_done(self) -> bool:
        return self.remaining() == 0

    def progress(self) -> float:
        """Fraction of the target that has elapsed, in [0, 1]."""
        if self.target_duration <= 0:
            return 1.0
        return min(1.0, max(0.0, self.elapsed() / self.target_duration))

    def pause(self) -> None:
        if self.paused:
            return
        self.paused_elapsed = self.elapsed()
        self.paused = True

    def resume(self) -> None:
        if not self.paused:
            return
        self.reference_instant = self._now() - self.paused_elapsed
        self.paused = False

    def toggle_pause(self) -> bool:
        """Pause a running clock or resume a paused one.

        Returns the new paused state.
        """
        if self.paused:
            self.resume()
        else:
            self.pause()
        return self.paused

    def adjust_target(self, delta: float) -> bool:
        """Shift the target duration by *delta* seconds.

        A change that would make the target negative is refused and the
        target is left as it was. Elapsed time and pause state are never
        touched.

        Returns True if the adjustment was applied.
        """
        new_target = self.target_duration + delta
        if new_target < 0:
            return False
        self.target_duration = new_target
        return True

    def restart(self, new_target: float | None = None) -> None:
        """Reset elapsed time to zero and resume, optionally with a new target."""
        if new_target is not None:
            self.target_duration = max(0.0, float(new_target))
        self.reference_instant = self._now()
        self.paused = False
        self.paused_elapsed = 0.0
