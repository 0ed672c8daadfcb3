"""Data structures for the text streamer.

Hides how reveal progress is represented.
"""

from collections.abc import Iterator
from dataclasses import dataclass, field


def iter_prefixes(text: str) -> Iterator[str]:
    """Yield the increasingly long prefixes of text, ending with text itself.

    Lazy and forward-only: a text of length N yields exactly N prefixes,
    the empty string is never yielded.
    """
    for end in range(1, len(text) + 1):
        yield text[:end]


@dataclass
class StreamCursor:
    """Reveal progress for one message."""

    text: str
    cadence_ms: float
    revealed: int = 0
    _prefixes: Iterator[str] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._prefixes = iter_prefixes(self.text)

    @property
    def prefix(self) -> str:
        return self.text[:self.revealed]

    @property
    def finished(self) -> bool:
        return self.revealed >= len(self.text)

    @property
    def remaining(self) -> int:
        return len(self.text) - self.revealed

    def step(self) -> str:
        """Reveal one more character and return the new prefix."""
        prefix = next(self._prefixes)
        self.revealed = len(prefix)
        return prefix
