"""Unit tests for the timing module."""
import asyncio

import pytest
from hypothesis import given
from hypothesis import strategies as st

from herochat.timing import (
    AsyncioScheduler,
    ManualScheduler,
    Scheduler,
    TimerGroup,
    TimerHandle,
    create_scheduler,
)


class TestSchedulerInterface:
    """Tests for the abstract base classes."""

    def test_scheduler_is_abstract(self):
        """Test that Scheduler cannot be instantiated directly."""
        with pytest.raises(TypeError):
            Scheduler()  # type: ignore

    def test_timer_handle_is_abstract(self):
        """Test that TimerHandle cannot be instantiated directly."""
        with pytest.raises(TypeError):
            TimerHandle()  # type: ignore


class TestManualScheduler:
    """Tests for the virtual-clock scheduler."""

    def test_nothing_runs_before_advance(self, scheduler):
        calls = []
        scheduler.call_later(10, calls.append, "a")
        assert calls == []
        assert scheduler.pending == 1

    def test_callback_runs_when_due(self, scheduler):
        calls = []
        handle = scheduler.call_later(100, calls.append, "tick")
        assert scheduler.advance(99) == 0
        assert calls == []
        assert scheduler.advance(1) == 1
        assert calls == ["tick"]
        assert handle.done
        assert scheduler.now() == 100

    def test_same_instant_runs_in_scheduling_order(self, scheduler):
        calls = []
        for name in "abc":
            scheduler.call_later(5, calls.append, name)
        scheduler.advance(5)
        assert calls == ["a", "b", "c"]

    def test_cancelled_callback_never_runs(self, scheduler):
        calls = []
        handle = scheduler.call_later(10, calls.append, "x")
        handle.cancel()
        handle.cancel()
        scheduler.advance(20)
        assert calls == []
        assert handle.cancelled
        assert not handle.done
        assert scheduler.pending == 0

    def test_nested_scheduling_within_window(self, scheduler):
        """A callback scheduled inside the advanced window runs in the same call."""
        calls = []

        def first():
            calls.append(("first", scheduler.now()))
            scheduler.call_later(5, lambda: calls.append(("second", scheduler.now())))

        scheduler.call_later(10, first)
        scheduler.advance(20)
        assert calls == [("first", 10), ("second", 15)]
        assert scheduler.now() == 20

    def test_frame_callback_uses_frame_interval(self):
        scheduler = ManualScheduler(frame_interval_ms=16)
        calls = []
        scheduler.call_next_frame(calls.append, "frame")
        scheduler.advance(15)
        assert calls == []
        scheduler.advance(1)
        assert calls == ["frame"]

    def test_negative_advance_fails(self, scheduler):
        with pytest.raises(ValueError):
            scheduler.advance(-1)

    def test_next_due_skips_cancelled(self, scheduler):
        first = scheduler.call_later(10, lambda: None)
        scheduler.call_later(30, lambda: None)
        first.cancel()
        assert scheduler.next_due() == 30

    def test_run_until_idle_returns_elapsed(self, scheduler):
        scheduler.call_later(40, lambda: None)
        scheduler.call_later(70, lambda: None)
        assert scheduler.run_until_idle() == 70
        assert scheduler.next_due() is None

    def test_run_until_idle_detects_endless_rearming(self, scheduler):
        def rearm():
            scheduler.call_later(1000, rearm)

        scheduler.call_later(1000, rearm)
        with pytest.raises(RuntimeError):
            scheduler.run_until_idle(limit_ms=10_000)

    @given(st.lists(st.floats(min_value=0, max_value=10_000), max_size=20))
    def test_callbacks_run_in_due_order(self, delays):
        """Property test: callbacks run sorted by due time."""
        scheduler = ManualScheduler()
        seen = []
        for delay in delays:
            scheduler.call_later(delay, lambda d=delay: seen.append(d))
        scheduler.run_until_idle()
        assert seen == sorted(delays)


class TestTimerGroup:
    """Tests for TimerGroup."""

    def test_cancel_all_drops_every_timer(self, scheduler):
        group = TimerGroup(scheduler)
        calls = []
        group.call_later(10, calls.append, 1)
        group.call_next_frame(calls.append, 2)
        assert group.pending == 2
        assert group.cancel_all() == 2
        scheduler.advance(100)
        assert calls == []
        assert group.pending == 0

    def test_pending_forgets_finished_timers(self, scheduler):
        group = TimerGroup(scheduler)
        group.call_later(10, lambda: None)
        group.call_later(50, lambda: None)
        scheduler.advance(20)
        assert group.pending == 1
        assert group.cancel_all() == 1

    def test_closed_group_refuses_new_timers(self, scheduler):
        group = TimerGroup(scheduler)
        group.close()
        calls = []
        handle = group.call_later(10, calls.append, "late")
        scheduler.advance(20)
        assert group.closed
        assert handle.cancelled
        assert calls == []


class TestAsyncioScheduler:
    """Tests for the asyncio-backed scheduler."""

    @pytest.mark.asyncio
    async def test_call_later_runs_on_loop(self):
        scheduler = AsyncioScheduler()
        done = asyncio.Event()
        calls = []

        def callback(value):
            calls.append(value)
            done.set()

        handle = scheduler.call_later(5, callback, "ok")
        await asyncio.wait_for(done.wait(), timeout=2)
        assert calls == ["ok"]
        assert handle.done

    @pytest.mark.asyncio
    async def test_cancel_prevents_callback(self):
        scheduler = AsyncioScheduler()
        calls = []
        handle = scheduler.call_later(5, calls.append, "never")
        handle.cancel()
        await asyncio.sleep(0.05)
        assert calls == []
        assert handle.cancelled

    @pytest.mark.asyncio
    async def test_next_frame_runs(self):
        scheduler = AsyncioScheduler(frame_interval_ms=1)
        done = asyncio.Event()
        scheduler.call_next_frame(done.set)
        await asyncio.wait_for(done.wait(), timeout=2)

    def test_scheduler_type(self):
        loop = asyncio.new_event_loop()
        try:
            assert AsyncioScheduler(loop=loop).scheduler_type == "asyncio"
        finally:
            loop.close()


class TestCreateScheduler:
    """Tests for the scheduler factory."""

    def test_create_manual(self):
        scheduler = create_scheduler("manual", frame_interval_ms=10)
        assert isinstance(scheduler, ManualScheduler)
        assert scheduler.frame_interval_ms == 10

    def test_unsupported_kind(self):
        with pytest.raises(ValueError, match="Unsupported scheduler"):
            create_scheduler("threads")
