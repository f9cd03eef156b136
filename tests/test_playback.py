"""
Tests for the playback controller.

Everything runs on ManualScheduler virtual time except the one
ThreadingScheduler smoke test at the bottom.
"""

import threading

import pytest

from algorithms.snapshot import ArraySnapshot, Trace
from engine import ManualScheduler, PlaybackController, PlaybackState, ThreadingScheduler
from engine.clock import Scheduler, TimerHandle


def make_trace(n: int) -> Trace:
    snapshots = tuple(ArraySnapshot.of([i], status=f"step {i}") for i in range(n))
    return Trace(kind="sorting", algorithm="bubble", snapshots=snapshots)


class _NoCancel(TimerHandle):
    def cancel(self) -> None:
        pass


class LeakyScheduler(ManualScheduler):
    """A scheduler that cannot cancel: stale ticks always fire."""

    def call_later(self, delay_seconds, callback):
        super().call_later(delay_seconds, callback)
        return _NoCancel()


class TestLoad:

    def test_load_lands_on_stopped_at_zero(self, controller):
        controller.load(make_trace(5))
        assert controller.state is PlaybackState.STOPPED
        assert controller.index == 0
        assert controller.current_snapshot().status == "step 0"

    def test_status_dict(self, controller):
        controller.load(make_trace(5))
        assert controller.status().to_dict() == {
            "index": 0, "length": 5, "isPlaying": False, "state": "stopped", "speed": 500,
        }

    def test_empty_controller(self, controller):
        assert controller.current_snapshot() is None
        assert controller.status().length == 0
        controller.play()
        assert controller.state is PlaybackState.STOPPED

    def test_load_while_playing_cancels_the_timer(self, controller, scheduler):
        controller.load(make_trace(5))
        controller.play()
        scheduler.advance(500)
        controller.load(make_trace(3))
        assert controller.state is PlaybackState.STOPPED
        assert controller.index == 0
        assert scheduler.pending == 0
        scheduler.advance(5000)
        assert controller.index == 0


class TestPlay:

    def test_ticks_advance_one_snapshot_per_interval(self, controller, scheduler):
        controller.load(make_trace(5))
        controller.play()
        assert controller.is_playing
        scheduler.advance(499)
        assert controller.index == 0
        scheduler.advance(1)
        assert controller.index == 1

    def test_pauses_on_the_last_snapshot(self, controller, scheduler):
        controller.load(make_trace(5))
        controller.play()
        assert scheduler.advance(2000) == 4
        assert controller.index == 4
        assert controller.state is PlaybackState.PAUSED
        assert scheduler.pending == 0

    def test_play_at_end_restarts(self, controller, scheduler):
        controller.load(make_trace(3))
        controller.goto(2)
        controller.play()
        assert controller.index == 0
        assert controller.is_playing

    def test_single_snapshot_trace_pauses_immediately(self, controller, scheduler):
        controller.load(make_trace(1))
        controller.play()
        assert controller.state is PlaybackState.PAUSED
        assert scheduler.pending == 0

    def test_play_twice_schedules_once(self, controller, scheduler):
        controller.load(make_trace(5))
        controller.play()
        controller.play()
        assert scheduler.pending == 1

    def test_pause_stops_ticks(self, controller, scheduler):
        controller.load(make_trace(5))
        controller.play()
        scheduler.advance(500)
        controller.pause()
        scheduler.advance(5000)
        assert controller.index == 1
        assert controller.state is PlaybackState.PAUSED

    def test_toggle(self, controller):
        controller.load(make_trace(5))
        controller.toggle_play()
        assert controller.is_playing
        controller.toggle_play()
        assert controller.state is PlaybackState.PAUSED

    def test_close_pauses_and_cancels(self, controller, scheduler):
        controller.load(make_trace(5))
        controller.play()
        controller.close()
        assert controller.state is PlaybackState.PAUSED
        assert scheduler.pending == 0


class TestNavigation:

    def test_step_forward_and_back(self, controller):
        controller.load(make_trace(5))
        controller.step_forward()
        controller.step_forward()
        assert controller.index == 2
        controller.step_backward()
        assert controller.index == 1
        assert controller.state is PlaybackState.PAUSED

    def test_steps_clamp_at_the_ends(self, controller):
        controller.load(make_trace(3))
        controller.step_backward()
        assert controller.index == 0
        controller.goto(2)
        controller.step_forward()
        assert controller.index == 2

    def test_step_while_playing_pauses(self, controller, scheduler):
        controller.load(make_trace(5))
        controller.play()
        controller.step_forward()
        assert controller.state is PlaybackState.PAUSED
        scheduler.advance(5000)
        assert controller.index == 1

    def test_goto_clamps(self, controller):
        controller.load(make_trace(5))
        controller.goto(99)
        assert controller.index == 4
        controller.goto(-3)
        assert controller.index == 0

    def test_reset(self, controller, scheduler):
        controller.load(make_trace(5))
        controller.play()
        scheduler.advance(1000)
        controller.reset()
        assert controller.index == 0
        assert controller.state is PlaybackState.PAUSED
        assert scheduler.pending == 0


class TestSpeed:

    def test_speed_is_clamped(self, controller):
        assert controller.set_speed(50) == 100
        assert controller.set_speed(5000) == 900
        assert controller.set_speed(300) == 300

    def test_presets(self, controller):
        assert controller.set_speed_preset("fast") == 100
        assert controller.set_speed_preset("slow") == 900
        assert controller.set_speed_preset("unknown") == 500

    def test_constructor_clamps(self, scheduler):
        assert PlaybackController(scheduler=scheduler, speed_ms=10).speed_ms == 100

    def test_change_applies_from_the_next_tick(self, controller, scheduler):
        """The pending tick keeps its deadline; later ticks use the new interval."""
        controller.load(make_trace(5))
        controller.play()
        scheduler.advance(200)
        controller.set_speed(100)
        scheduler.advance(299)
        assert controller.index == 0
        scheduler.advance(1)
        assert controller.index == 1
        scheduler.advance(100)
        assert controller.index == 2


class TestTickGuards:

    def test_stale_tick_is_ignored(self):
        """A tick that fires after pause + play belongs to an old generation."""
        scheduler = LeakyScheduler()
        controller = PlaybackController(scheduler=scheduler)
        controller.load(make_trace(5))
        controller.play()
        scheduler.advance(200)
        controller.pause()
        controller.play()
        scheduler.advance(300)
        assert controller.index == 0
        scheduler.advance(200)
        assert controller.index == 1

    def test_stale_tick_after_load(self):
        scheduler = LeakyScheduler()
        controller = PlaybackController(scheduler=scheduler)
        controller.load(make_trace(5))
        controller.play()
        controller.load(make_trace(5))
        scheduler.advance(1000)
        assert controller.index == 0
        assert controller.state is PlaybackState.STOPPED

    def test_on_change_sees_every_index(self, scheduler):
        seen = []
        controller = PlaybackController(scheduler=scheduler, on_change=lambda snap: seen.append(snap.status))
        controller.load(make_trace(4))
        controller.play()
        scheduler.advance(1500)
        assert seen == ["step 0", "step 1", "step 2", "step 3"]

    def test_on_change_may_pause(self, scheduler):
        """A callback that pauses stops the rescheduling."""
        holder = {}

        def stop_at_two(snap):
            if snap.status == "step 2":
                holder["controller"].pause()

        controller = PlaybackController(scheduler=scheduler, on_change=stop_at_two)
        holder["controller"] = controller
        controller.load(make_trace(5))
        controller.play()
        scheduler.advance(5000)
        assert controller.index == 2
        assert controller.state is PlaybackState.PAUSED
        assert scheduler.pending == 0


class TestThreadingScheduler:

    def test_real_timer_plays_to_the_end(self):
        done = threading.Event()

        def on_change(snap):
            if snap.status == "step 2":
                done.set()

        controller = PlaybackController(scheduler=ThreadingScheduler(), speed_ms=100, on_change=on_change)
        controller.load(make_trace(3))
        controller.play()
        assert done.wait(timeout=5)
        controller.close()
        assert controller.index == 2


class TestSchedulerInterface:

    def test_incomplete_scheduler_cannot_be_created(self):
        class NoCallLater(Scheduler):
            pass

        with pytest.raises(TypeError):
            NoCallLater()

    def test_incomplete_handle_cannot_be_created(self):
        class NoCancel(TimerHandle):
            pass

        with pytest.raises(TypeError):
            NoCancel()

    def test_manual_scheduler_fires_in_deadline_order(self):
        scheduler = ManualScheduler()
        fired = []
        scheduler.call_later(0.3, lambda: fired.append("late"))
        scheduler.call_later(0.1, lambda: fired.append("early"))
        handle = scheduler.call_later(0.2, lambda: fired.append("cancelled"))
        handle.cancel()
        assert scheduler.pending == 2
        assert scheduler.advance(300) == 2
        assert fired == ["early", "late"]
