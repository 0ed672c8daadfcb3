"""Pytest configuration and shared fixtures."""
import random

import pytest

from herochat.engine import ConversationEngine, EngineListener
from herochat.playbook import AnswerRule, EngineTimings, KeywordClause, Playbook
from herochat.timing import ManualScheduler


class RecordingListener(EngineListener):
    """Collects every engine event as (name, *args) tuples."""

    def __init__(self) -> None:
        self.events: list[tuple] = []

    def on_phase_changed(self, old, new):
        self.events.append(("phase", old, new))

    def on_message_appended(self, message):
        self.events.append(("message", message))

    def on_stream_tick(self, message_id, prefix):
        self.events.append(("tick", message_id, prefix))

    def on_stream_completed(self, message_id):
        self.events.append(("completed", message_id))

    def on_suggestions_changed(self, suggestions):
        self.events.append(("suggestions", tuple(suggestions)))

    def on_thinking_stage(self, stage):
        self.events.append(("stage", stage))

    def on_unmounted(self):
        self.events.append(("unmounted",))

    def named(self, name: str) -> list[tuple]:
        return [event for event in self.events if event[0] == name]


@pytest.fixture
def scheduler():
    """Return a fresh virtual-clock scheduler."""
    return ManualScheduler()


@pytest.fixture
def rng():
    """Return a seeded random source."""
    return random.Random(1234)


@pytest.fixture
def make_playbook():
    """Return a factory for a small, fast playbook.

    Timeline with the defaults: welcome at 100 ms, "Hello" fully shown and
    starters visible at 150 ms. A question submitted at t shows the first
    thinking stage at t+200, rotates every 300 ms and gets its reply at
    t+1000.
    """
    def _make(**updates) -> Playbook:
        data = dict(
            name="tiny",
            welcome_message="Hello",
            starter_suggestions=["Ask about pumps", "Ask about valves", "Ask about heaters"],
            suggestion_pool=[
                "Ask about pumps",
                "Ask about valves",
                "Ask about heaters",
                "Pump curves",
                "Valve sizing",
            ],
            rules=[
                AnswerRule(
                    name="pumps",
                    clauses=[KeywordClause(all_of=["pump"])],
                    reply="Pumps move fluid.",
                    related_topics=["pump"],
                ),
                AnswerRule(
                    name="valves",
                    clauses=[KeywordClause(all_of=["valve"])],
                    reply="Valves **throttle** flow.",
                ),
            ],
            fallback_reply="No idea.",
            thinking_stages=["Reading data...", "Thinking hard..."],
            strip_markdown=True,
            timings=EngineTimings(
                startup_delay_ms=100,
                cadence_ms=10,
                thinking_delay_ms=1000,
                thinking_indicator_delay_ms=200,
                stage_interval_ms=300,
                suggestion_reveal_delay_ms=0,
            ),
        )
        data.update(updates)
        return Playbook(**data)
    return _make


@pytest.fixture
def playbook(make_playbook):
    """Return the default small playbook."""
    return make_playbook()


@pytest.fixture
def engine(playbook, scheduler, rng):
    """Return an engine over the small playbook, not yet mounted."""
    return ConversationEngine(playbook, scheduler, rng=rng)


@pytest.fixture
def recorder(engine):
    """Return a listener subscribed to the engine fixture."""
    listener = RecordingListener()
    engine.add_listener(listener)
    return listener


@pytest.fixture
def ready_engine(engine, scheduler):
    """Return a mounted engine showing its starter suggestions (t=150 ms)."""
    engine.mount()
    scheduler.advance(150)
    return engine
