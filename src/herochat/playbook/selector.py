"""Follow-up suggestion selection.

Hides how the next prompts are chosen: exclusion of the question just
asked, topic routing, and the random fallback.
"""

import random
from collections.abc import Sequence


def _normalise(prompt: str) -> str:
    return prompt.strip().lower()


class SuggestionSelector:
    """Picks up to `count` next-step prompts from a static pool.

    The random source is injectable so that tests (and `replay --seed`)
    can pin the fallback selection.
    """

    def __init__(
        self,
        pool: Sequence[str],
        rng: random.Random | None = None,
        count: int = 3
    ) -> None:
        if count < 1:
            raise ValueError(f"count must be >= 1, got {count}")
        self._pool = tuple(pool)
        self._rng = rng or random.Random()
        self._count = count

    @property
    def pool(self) -> tuple[str, ...]:
        return self._pool

    @property
    def count(self) -> int:
        return self._count

    def available(self, last_question: str) -> list[str]:
        """Pool without any prompt equal to last_question (case-insensitive)."""
        asked = _normalise(last_question)
        return [prompt for prompt in self._pool if _normalise(prompt) != asked]

    def select(
        self,
        last_question: str,
        related_topics: Sequence[str] = ()
    ) -> tuple[str, ...]:
        """Choose the next suggestion set.

        Args:
            last_question: The question that produced the current answer
            related_topics: Keywords of topics adjacent to that question

        Returns:
            Up to `count` prompts, never including last_question
        """
        candidates = self.available(last_question)
        if related_topics:
            topics = [topic.lower() for topic in related_topics]
            topical = [
                prompt for prompt in candidates
                if any(topic in prompt.lower() for topic in topics)
            ]
            if topical:
                return tuple(topical[:self._count])
        return self.sample(candidates)

    def sample(self, candidates: Sequence[str]) -> tuple[str, ...]:
        """Random pick of up to `count` prompts, in random order."""
        size = min(self._count, len(candidates))
        return tuple(self._rng.sample(list(candidates), size))
