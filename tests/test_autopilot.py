"""Unit tests for the scripted auto-send demo."""
import random

import pytest

from herochat.engine import AutoPilot, ConversationEngine, ConversationPhase, Role
from herochat.playbook import AutoPilotSettings


@pytest.fixture
def make_pilot(make_playbook, scheduler):
    """Return a factory for an engine with an autopilot, not yet mounted."""
    def _make(seed: int = 7, **settings):
        values = dict(enabled=True, first_delay_ms=600, repeat_delay_ms=1200, min_gap_ms=900)
        values.update(settings)
        playbook = make_playbook(autopilot=AutoPilotSettings(**values))
        engine = ConversationEngine(playbook, scheduler, rng=random.Random(0))
        pilot = AutoPilot(engine, scheduler, rng=random.Random(seed))
        return engine, pilot
    return _make


class TestAutoPilot:
    """Tests for AutoPilot."""

    def test_disabled_by_default(self, engine, scheduler):
        pilot = AutoPilot(engine, scheduler)
        engine.mount()
        scheduler.advance(10_000)
        assert not pilot.enabled
        assert pilot.auto_sent == 0
        assert len(engine.transcript) == 1

    def test_first_pick_after_first_delay(self, make_pilot, scheduler):
        engine, pilot = make_pilot()
        engine.mount()
        scheduler.advance(150)
        assert pilot.armed

        scheduler.advance(599)
        assert pilot.auto_sent == 0
        scheduler.advance(1)
        assert pilot.auto_sent == 1
        assert engine.phase is ConversationPhase.THINKING
        question = engine.transcript[-1]
        assert question.role is Role.USER
        assert question.content in engine.playbook.starter_suggestions

    def test_pick_uses_injected_random_source(self, make_pilot, scheduler):
        engine, pilot = make_pilot(seed=3)
        engine.mount()
        scheduler.advance(750)
        expected = random.Random(3).choice(engine.playbook.starter_suggestions)
        assert engine.last_question == expected

    def test_repeat_delay_after_a_reply(self, make_pilot, scheduler):
        engine, pilot = make_pilot()
        engine.mount()
        scheduler.advance(750)
        assert pilot.auto_sent == 1
        scheduler.advance(1000)
        # Reply is streaming now; the next pick waits for the repeat delay
        while engine.phase is not ConversationPhase.AWAITING_USER_INPUT:
            scheduler.advance(10)
        ready_at = scheduler.now()
        scheduler.advance(1199)
        assert pilot.auto_sent == 1
        scheduler.advance(1)
        assert pilot.auto_sent == 2
        assert scheduler.now() == ready_at + 1200

    def test_min_gap_between_picks(self, make_pilot, scheduler):
        engine, pilot = make_pilot(repeat_delay_ms=100, min_gap_ms=5000)
        engine.mount()
        scheduler.advance(750)
        assert pilot.auto_sent == 1
        scheduler.advance(4999)
        assert pilot.auto_sent == 1
        scheduler.advance(1)
        assert pilot.auto_sent == 2

    def test_visitor_question_disarms(self, make_pilot, scheduler):
        engine, pilot = make_pilot()
        engine.mount()
        scheduler.advance(300)
        engine.submit("valves please")
        assert not pilot.armed
        assert pilot.active
        scheduler.advance(600)
        assert pilot.auto_sent == 0
        assert engine.last_question == "valves please"

    def test_cancel_is_permanent(self, make_pilot, scheduler):
        engine, pilot = make_pilot()
        engine.mount()
        scheduler.advance(300)
        assert pilot.cancel() is True
        assert pilot.cancel() is False
        assert not pilot.active

        engine.submit("pump")
        scheduler.run_until_idle()
        assert pilot.auto_sent == 0
        assert not pilot.active

    def test_detach_stops_listening(self, make_pilot, scheduler):
        engine, pilot = make_pilot()
        pilot.detach()
        engine.mount()
        scheduler.run_until_idle()
        assert pilot.auto_sent == 0

    def test_unmount_drops_pending_pick(self, make_pilot, scheduler):
        engine, pilot = make_pilot()
        engine.mount()
        scheduler.advance(300)
        engine.unmount()
        scheduler.advance(10_000)
        assert pilot.auto_sent == 0

    def test_cancel_is_logged(self, make_pilot, scheduler):
        engine, pilot = make_pilot()
        logs = []
        pilot.set_debug_callback(lambda level, component, message: logs.append(component))
        engine.mount()
        scheduler.advance(300)
        pilot.cancel()
        assert logs == ["AutoPilot"]
