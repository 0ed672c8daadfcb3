"""Data models for hero-chat playbooks.

A playbook is everything that differs between two hero-chat variants:
copy, suggestion pools, the keyword answer table and the pacing. The
engine itself is identical for every playbook.
"""

from pydantic import BaseModel, ConfigDict, Field, model_validator


class KeywordClause(BaseModel):
    """A conjunction of keywords with an optional alternative set.

    Matches a question when every `all_of` keyword appears in it and, if
    `any_of` is non-empty, at least one of those appears too. Matching is
    case-insensitive substring matching.
    """

    model_config = ConfigDict(frozen=True)

    all_of: list[str] = Field(default_factory=list)
    any_of: list[str] = Field(default_factory=list)

    @model_validator(mode="after")
    def _not_empty(self) -> "KeywordClause":
        if not self.all_of and not self.any_of:
            raise ValueError("A keyword clause needs at least one keyword")
        return self

    def matches(self, question: str) -> bool:
        lowered = question.lower()
        if not all(keyword.lower() in lowered for keyword in self.all_of):
            return False
        if self.any_of:
            return any(keyword.lower() in lowered for keyword in self.any_of)
        return True


class AnswerRule(BaseModel):
    """One entry of the canned answer table."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(description="Short identifier used in logs")
    clauses: list[KeywordClause] = Field(
        min_length=1,
        description="The rule matches when any clause matches"
    )
    reply: str = Field(description="Assistant reply body")
    related_topics: list[str] = Field(
        default_factory=list,
        description="Keywords of adjacent topics; empty means random suggestions"
    )

    def matches(self, question: str) -> bool:
        return any(clause.matches(question) for clause in self.clauses)


class EngineTimings(BaseModel):
    """Pacing of the conversation, all values in milliseconds."""

    model_config = ConfigDict(frozen=True)

    startup_delay_ms: float = Field(default=1500, ge=0)
    cadence_ms: float = Field(default=25, ge=0, description="Delay per revealed character")
    thinking_delay_ms: float = Field(default=7500, ge=0)
    thinking_indicator_delay_ms: float = Field(default=800, ge=0)
    stage_interval_ms: float = Field(default=1500, gt=0)
    suggestion_reveal_delay_ms: float = Field(default=0, ge=0)
    suggestion_count: int = Field(default=3, ge=1, le=10)


class AutoPilotSettings(BaseModel):
    """Scripted demo that picks a suggestion when the visitor stays idle."""

    model_config = ConfigDict(frozen=True)

    enabled: bool = False
    first_delay_ms: float = Field(default=6000, ge=0)
    repeat_delay_ms: float = Field(default=12000, ge=0)
    min_gap_ms: float = Field(default=9000, ge=0)


class Playbook(BaseModel):
    """Complete description of one hero-chat variant."""

    model_config = ConfigDict(frozen=True)

    name: str
    title: str = "ChatAPC"
    description: str = ""
    welcome_message: str
    starter_suggestions: list[str] = Field(min_length=1)
    suggestion_pool: list[str] = Field(min_length=1)
    rules: list[AnswerRule] = Field(default_factory=list)
    fallback_reply: str
    thinking_stages: list[str] = Field(default_factory=lambda: ["Thinking..."], min_length=1)
    strip_markdown: bool = False
    timings: EngineTimings = Field(default_factory=EngineTimings)
    autopilot: AutoPilotSettings = Field(default_factory=AutoPilotSettings)

    def with_timings(self, **overrides: float) -> "Playbook":
        """Return a copy with some timing values replaced.

        Raises:
            pydantic.ValidationError: If an override is out of range
        """
        timings = EngineTimings.model_validate({**self.timings.model_dump(), **overrides})
        return self.model_copy(update={"timings": timings})
