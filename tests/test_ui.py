"""Smoke tests for the Textual front end."""
import pytest

from herochat.engine import ConversationPhase
from herochat.playbook import EngineTimings
from herochat.ui import HeroChatApp
from herochat.ui.widgets import SuggestionBar, ThinkingIndicator, TranscriptView


@pytest.fixture
def fast_playbook(make_playbook):
    return make_playbook(timings=EngineTimings(
        startup_delay_ms=10,
        cadence_ms=1,
        thinking_delay_ms=60,
        thinking_indicator_delay_ms=10,
        stage_interval_ms=20,
        suggestion_reveal_delay_ms=0,
    ))


async def wait_for(pilot, condition, attempts: int = 100) -> None:
    for _ in range(attempts):
        if condition():
            return
        await pilot.pause(0.05)
    raise AssertionError("condition not reached")


class TestHeroChatApp:
    """Tests for HeroChatApp."""

    @pytest.mark.asyncio
    async def test_welcome_then_question(self, fast_playbook):
        app = HeroChatApp(playbook=fast_playbook, autopilot=False, seed=1)
        async with app.run_test(size=(120, 40)) as pilot:
            engine = app.engine
            await wait_for(pilot, lambda: engine.phase is ConversationPhase.AWAITING_USER_INPUT)
            await pilot.pause()

            transcript = app.query_one("#transcript", TranscriptView)
            suggestions = app.query_one("#suggestions", SuggestionBar)
            assert transcript.message_count == 1
            assert suggestions.suggestions == tuple(fast_playbook.starter_suggestions)
            assert suggestions.display

            assert engine.pick_suggestion("Ask about pumps")
            await pilot.pause()
            assert transcript.message_count >= 2

            await wait_for(pilot, lambda: engine.phase is ConversationPhase.AWAITING_USER_INPUT)
            await pilot.pause()
            assert transcript.message_count == 3
            assert suggestions.suggestions == ("Pump curves",)
            assert not app.query_one("#thinking", ThinkingIndicator).display

    @pytest.mark.asyncio
    async def test_restart_clears_transcript(self, fast_playbook):
        app = HeroChatApp(playbook=fast_playbook, autopilot=False)
        async with app.run_test(size=(120, 40)) as pilot:
            engine = app.engine
            await wait_for(pilot, lambda: engine.phase is ConversationPhase.AWAITING_USER_INPUT)
            engine.submit("valves")
            await pilot.press("ctrl+r")
            await wait_for(pilot, lambda: len(engine.transcript) == 1
                           and engine.phase is ConversationPhase.AWAITING_USER_INPUT)
            await pilot.pause()
            assert app.query_one("#transcript", TranscriptView).message_count == 1

    @pytest.mark.asyncio
    async def test_exit_mid_stream_tears_down_engine(self, fast_playbook):
        app = HeroChatApp(playbook=fast_playbook, autopilot=False)
        async with app.run_test(size=(120, 40)) as pilot:
            engine = app.engine
            await wait_for(pilot, lambda: engine.phase is ConversationPhase.AWAITING_USER_INPUT)
            engine.submit("pump")
        assert not engine.mounted
        assert engine.submit("again") is False

    @pytest.mark.asyncio
    async def test_theme_toggle(self, fast_playbook):
        app = HeroChatApp(playbook=fast_playbook, autopilot=False)
        async with app.run_test() as pilot:
            assert app.theme == "herochat-dark"
            await pilot.press("ctrl+t")
            assert app.theme == "herochat-light"
