"""Unit tests for countdown_cli.models.timer.clock.

The clock is driven by the ``fake_clock`` fixture so every assertion is
exact; no real sleeping happens.
"""

from __future__ import annotations

import pytest

from countdown_cli.models.timer.clock import TimerClock


@pytest.fixture()
def clock(fake_clock) -> TimerClock:
    return TimerClock(120, now=fake_clock)


# ---------------------------------------------------------------------------
# Construction and derived values
# ---------------------------------------------------------------------------


class TestTimerClockBasics:
    def test_starts_running_with_zero_elapsed(self, clock):
        assert clock.paused is False
        assert clock.elapsed() == 0
        assert clock.remaining() == 120

    def test_elapsed_follows_time_source(self, clock, fake_clock):
        fake_clock.advance(30)
        assert clock.elapsed() == 30
        assert clock.remaining() == 90

    def test_remaining_floors_at_zero(self, clock, fake_clock):
        fake_clock.advance(500)
        assert clock.remaining() == 0
        assert clock.is_done() is True

    def test_not_done_before_target(self, clock, fake_clock):
        fake_clock.advance(119.5)
        assert clock.is_done() is False

    def test_negative_target_is_clamped(self, fake_clock):
        clock = TimerClock(-5, now=fake_clock)
        assert clock.target_duration == 0
        assert clock.is_done() is True

    def test_elapsed_never_negative_when_time_goes_backwards(self, clock, fake_clock):
        fake_clock.advance(-10)
        assert clock.elapsed() == 0
        assert clock.remaining() == 120

    @pytest.mark.parametrize("advance", [0, 1, 60, 119, 120, 121, 10_000])
    def test_remaining_within_bounds(self, clock, fake_clock, advance):
        fake_clock.advance(advance)
        assert 0 <= clock.remaining() <= clock.target_duration

    def test_progress(self, clock, fake_clock):
        assert clock.progress() == 0
        fake_clock.advance(60)
        assert clock.progress() == pytest.approx(0.5)
        fake_clock.advance(600)
        assert clock.progress() == 1.0

    def test_progress_of_zero_target_is_complete(self, fake_clock):
        assert TimerClock(0, now=fake_clock).progress() == 1.0


# ---------------------------------------------------------------------------
# Pause / resume
# ---------------------------------------------------------------------------


class TestPauseResume:
    def test_pause_freezes_elapsed(self, clock, fake_clock):
        fake_clock.advance(10)
        clock.pause()
        fake_clock.advance(50)
        assert clock.paused is True
        assert clock.elapsed() == 10

    def test_resume_does_not_count_paused_time(self, clock, fake_clock):
        fake_clock.advance(10)
        clock.pause()
        fake_clock.advance(50)
        clock.resume()
        assert clock.elapsed() == 10
        fake_clock.advance(5)
        assert clock.elapsed() == 15

    def test_pause_twice_is_noop(self, clock, fake_clock):
        fake_clock.advance(10)
        clock.pause()
        fake_clock.advance(10)
        clock.pause()
        assert clock.paused_elapsed == 10

    def test_resume_when_running_is_noop(self, clock, fake_clock):
        fake_clock.advance(10)
        anchor = clock.reference_instant
        clock.resume()
        assert clock.reference_instant == anchor
        assert clock.elapsed() == 10

    def test_toggle_pause_returns_new_state(self, clock):
        assert clock.toggle_pause() is True
        assert clock.toggle_pause() is False

    def test_many_cycles_equal_sum_of_running_time(self, clock, fake_clock):
        running_total = 0.0
        for run_for, pause_for in [(3, 7), (0.25, 100), (12.5, 0), (1, 1)] * 5:
            fake_clock.advance(run_for)
            running_total += run_for
            clock.pause()
            fake_clock.advance(pause_for)
            clock.resume()
        assert clock.elapsed() == pytest.approx(running_total)

    def test_no_jump_when_toggling(self, clock, fake_clock):
        fake_clock.advance(42)
        before = clock.elapsed()
        clock.pause()
        assert clock.elapsed() == before
        clock.resume()
        assert clock.elapsed() == before


# ---------------------------------------------------------------------------
# Target adjustment and restart
# ---------------------------------------------------------------------------


class TestAdjustTarget:
    def test_increase(self, clock):
        assert clock.adjust_target(10) is True
        assert clock.target_duration == 130

    def test_decrease(self, clock):
        assert clock.adjust_target(-10) is True
        assert clock.target_duration == 110

    def test_decrease_below_zero_is_refused(self, fake_clock):
        clock = TimerClock(5, now=fake_clock)
        assert clock.adjust_target(-10) is False
        assert clock.target_duration == 5

    def test_decrease_to_exactly_zero_is_allowed(self, fake_clock):
        clock = TimerClock(10, now=fake_clock)
        assert clock.adjust_target(-10) is True
        assert clock.target_duration == 0

    def test_does_not_touch_elapsed_or_pause(self, clock, fake_clock):
        fake_clock.advance(30)
        clock.pause()
        clock.adjust_target(60)
        assert clock.paused is True
        assert clock.elapsed() == 30

    def test_adding_time_after_expiry_resumes_countdown(self, fake_clock):
        clock = TimerClock(5, now=fake_clock)
        fake_clock.advance(6)
        assert clock.is_done()
        clock.adjust_target(10)
        assert clock.remaining() == 9
        assert clock.elapsed() == 6


class TestRestart:
    def test_restart_zeroes_elapsed(self, clock, fake_clock):
        fake_clock.advance(80)
        clock.restart()
        assert clock.elapsed() == 0
        assert clock.target_duration == 120

    def test_restart_with_new_target(self, clock, fake_clock):
        fake_clock.advance(80)
        clock.restart(1500)
        assert clock.target_duration == 1500
        assert clock.remaining() == 1500

    def test_restart_clears_pause(self, clock, fake_clock):
        fake_clock.advance(10)
        clock.pause()
        clock.restart()
        assert clock.paused is False
        assert clock.paused_elapsed == 0
        fake_clock.advance(3)
        assert clock.elapsed() == 3
