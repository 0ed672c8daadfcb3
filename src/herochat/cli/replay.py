"""Headless replay of a conversation on the virtual clock.

Hides how a scripted session is driven without a terminal: the engine
runs on a ManualScheduler that is fast-forwarded until it is idle after
every question.
"""

import random
from collections.abc import Sequence

from pydantic import BaseModel, Field

from ..engine import ConversationEngine, ConversationPhase, DebugCallback, Message
from ..playbook import Playbook
from ..timing import ManualScheduler


class ReplayTurn(BaseModel):
    """One question and what the engine did with it."""

    question: str
    accepted: bool
    picked_suggestion: bool = Field(
        default=False,
        description="True when the question was one of the visible suggestions"
    )
    reply: str | None = None
    suggestions: list[str] = Field(default_factory=list)
    elapsed_ms: float = 0.0


class ReplayResult(BaseModel):
    """Outcome of a headless session."""

    playbook: str
    seed: int | None = None
    welcome: str
    starter_suggestions: list[str]
    turns: list[ReplayTurn] = Field(default_factory=list)
    transcript: list[Message] = Field(default_factory=list)
    total_ms: float = 0.0


def replay_session(
    playbook: Playbook,
    questions: Sequence[str],
    seed: int | None = None,
    debug_callback: DebugCallback | None = None,
) -> ReplayResult:
    """Play questions through a fresh engine.

    A question that matches a visible suggestion is picked; anything else
    is submitted as typed text.

    Raises:
        RuntimeError: If the engine never settles (virtual time limit hit)
    """
    scheduler = ManualScheduler()
    engine = ConversationEngine(playbook, scheduler, rng=random.Random(seed))
    engine.set_debug_callback(debug_callback)

    engine.mount()
    total = scheduler.run_until_idle()
    welcome = engine.transcript[0].content if engine.transcript else ""
    result = ReplayResult(
        playbook=playbook.name,
        seed=seed,
        welcome=welcome,
        starter_suggestions=list(engine.suggestions),
    )

    for question in questions:
        picked = question in engine.suggestions
        if picked:
            accepted = engine.pick_suggestion(question)
        else:
            accepted = engine.submit(question)
        elapsed = scheduler.run_until_idle() if accepted else 0.0
        total += elapsed

        reply = None
        if accepted:
            last = engine.transcript[-1]
            reply = last.content
        result.turns.append(ReplayTurn(
            question=question,
            accepted=accepted,
            picked_suggestion=picked,
            reply=reply,
            suggestions=list(engine.suggestions),
            elapsed_ms=elapsed,
        ))

    if engine.phase is not ConversationPhase.AWAITING_USER_INPUT:
        raise RuntimeError(f"Replay ended in phase {engine.phase.value}")

    result.transcript = list(engine.transcript)
    result.total_ms = total
    engine.unmount()
    return result
