"""Tests for the cooperative frame/timer scheduler and the debouncer."""

from scheduler import Debouncer, FrameScheduler


class TestFrameScheduler:
    def test_frame_callbacks_run_once(self, scheduler):
        calls = []
        scheduler.request_frame(lambda: calls.append("a"))
        assert scheduler.run_frame() == 1
        assert scheduler.run_frame() == 0
        assert calls == ["a"]

    def test_frames_requested_during_a_frame_are_deferred(self, scheduler):
        calls = []

        def chain():
            calls.append(scheduler.frame_count)
            scheduler.request_frame(chain)

        scheduler.request_frame(chain)
        for _ in range(3):
            scheduler.run_frame()
        assert calls == [0, 1, 2]
        assert scheduler.pending_frames == 1

    def test_cancelled_frame_does_not_run(self, scheduler):
        calls = []
        handle = scheduler.request_frame(lambda: calls.append(1))
        handle.cancel()
        handle.cancel()
        assert handle.cancelled
        scheduler.run_frame()
        assert calls == []

    def test_timers_fire_in_due_order(self, scheduler):
        calls = []
        scheduler.call_later(30, lambda: calls.append("late"))
        scheduler.call_later(10, lambda: calls.append("early"))
        scheduler.call_later(10, lambda: calls.append("early-2"))

        assert scheduler.advance(9) == 0
        assert scheduler.advance(25) == 3
        assert calls == ["early", "early-2", "late"]
        assert scheduler.now_ms == 34

    def test_callbacks_see_their_due_time(self, scheduler):
        seen = []
        scheduler.call_later(40, lambda: seen.append(scheduler.now_ms))
        scheduler.advance(100)
        assert seen == [40]
        assert scheduler.now_ms == 100

    def test_chained_timers_fire_within_one_advance(self, scheduler):
        calls = []

        def rearm():
            calls.append(scheduler.now_ms)
            if len(calls) < 5:
                scheduler.call_later(10, rearm)

        scheduler.call_later(10, rearm)
        scheduler.advance(35)
        assert calls == [10, 20, 30]
        assert scheduler.next_timer_due == 40

    def test_cancelled_timer_does_not_fire(self, scheduler):
        calls = []
        handle = scheduler.call_later(5, lambda: calls.append(1))
        handle.cancel()
        assert scheduler.pending_timers == 0
        assert scheduler.next_timer_due is None
        scheduler.advance(10)
        assert calls == []

    def test_failing_callback_is_logged_and_others_run(self, scheduler, caplog):
        calls = []

        def boom():
            raise RuntimeError("boom")

        scheduler.request_frame(boom)
        scheduler.request_frame(lambda: calls.append("after"))
        scheduler.run_frame()

        assert calls == ["after"]
        assert "Unhandled error in scheduled frame callback" in caplog.text

    def test_negative_delay_is_rejected(self, scheduler):
        import pytest
        with pytest.raises(ValueError):
            scheduler.call_later(-1, lambda: None)

    def test_start_time(self):
        assert FrameScheduler(start_ms=500).now_ms == 500.0


class TestDebouncer:
    def test_only_last_call_in_a_burst_runs(self, scheduler):
        calls = []
        debounced = Debouncer(scheduler, 250, lambda value: calls.append(value))

        debounced(1)
        scheduler.advance(100)
        debounced(2)
        scheduler.advance(200)
        assert calls == []
        assert debounced.pending

        scheduler.advance(50)
        assert calls == [2]
        assert not debounced.pending

    def test_cancel_drops_pending_call(self, scheduler):
        calls = []
        debounced = Debouncer(scheduler, 250, lambda: calls.append(1))
        debounced()
        debounced.cancel()
        scheduler.advance(1000)
        assert calls == []
