"""Unit tests for the scroll synchronizer."""
import pytest

from herochat.scroll import ScrollSynchronizer
from herochat.timing import ManualScheduler


class FakeViewport:
    """Records scroll_to_bottom() calls with their virtual time."""

    def __init__(self, scheduler: ManualScheduler) -> None:
        self._scheduler = scheduler
        self.scrolled_at: list[float] = []

    def scroll_to_bottom(self) -> None:
        self.scrolled_at.append(self._scheduler.now())


@pytest.fixture
def viewport(scheduler):
    return FakeViewport(scheduler)


@pytest.fixture
def sync(viewport, scheduler):
    return ScrollSynchronizer(viewport, scheduler)


class TestScrollSynchronizer:
    """Tests for ScrollSynchronizer."""

    def test_requests_coalesce_to_one_frame(self, sync, viewport, scheduler):
        for _ in range(5):
            sync.request_scroll()
        assert sync.frame_pending
        scheduler.advance(100)
        assert viewport.scrolled_at == [16]
        assert sync.requests == 5
        assert sync.scroll_count == 1

    def test_scroll_runs_after_the_frame(self, sync, viewport, scheduler):
        sync.request_scroll()
        scheduler.advance(15)
        assert viewport.scrolled_at == []
        scheduler.advance(1)
        assert viewport.scrolled_at == [16]

    def test_catch_up_scrolls(self, sync, viewport, scheduler):
        sync.request_scroll(catch_up=True)
        scheduler.advance(200)
        assert viewport.scrolled_at == [16, 50, 150]

    def test_catch_ups_are_debounced(self, sync, viewport, scheduler):
        sync.request_scroll(catch_up=True)
        scheduler.advance(40)
        sync.request_scroll(catch_up=True)
        scheduler.advance(300)
        assert viewport.scrolled_at == [16, 56, 90, 190]

    def test_manual_scroll_releases_pin(self, sync, viewport, scheduler):
        sync.request_scroll(catch_up=True)
        sync.user_scrolled(distance_from_bottom=10)
        assert not sync.pinned
        sync.request_scroll()
        scheduler.advance(500)
        assert viewport.scrolled_at == []

    def test_returning_to_bottom_repins(self, sync, viewport, scheduler):
        sync.user_scrolled(10)
        sync.user_scrolled(1)
        assert sync.pinned
        sync.request_scroll()
        scheduler.advance(16)
        assert viewport.scrolled_at == [16]

    def test_repin_scrolls(self, sync, viewport, scheduler):
        sync.user_scrolled(50)
        sync.repin()
        scheduler.advance(200)
        assert sync.pinned
        assert viewport.scrolled_at == [16, 50, 150]

    def test_detach_cancels_everything(self, sync, viewport, scheduler):
        sync.request_scroll(catch_up=True)
        sync.detach()
        sync.request_scroll(catch_up=True)
        scheduler.advance(500)
        assert viewport.scrolled_at == []
        assert not sync.frame_pending


class TestEngineIntegration:
    """Scroll behaviour driven by engine events."""

    def test_streaming_keeps_viewport_pinned(self, engine, scheduler, viewport, sync):
        engine.add_listener(sync)
        engine.mount()
        scheduler.advance(150)
        # Welcome "Hello": 5 ticks at 10 ms, coalesced into fewer frames
        assert viewport.scrolled_at
        assert viewport.scrolled_at[-1] <= 150 + 16
        scheduler.run_until_idle()
        assert max(viewport.scrolled_at) <= 150 + 150

    def test_user_message_repins(self, ready_engine, scheduler, viewport, sync):
        ready_engine.add_listener(sync)
        sync.user_scrolled(30)
        ready_engine.submit("pump")
        assert sync.pinned
        scheduler.advance(16)
        assert viewport.scrolled_at

    def test_unmount_detaches(self, engine, scheduler, viewport, sync):
        engine.add_listener(sync)
        engine.mount()
        scheduler.advance(120)
        engine.unmount()
        count = len(viewport.scrolled_at)
        scheduler.advance(1000)
        assert len(viewport.scrolled_at) == count
