"""Keyword answer table.

The "AI" of the demo: the first rule whose keywords occur in the question
supplies the reply, the fallback reply covers everything else.
"""

from dataclasses import dataclass

from .markdown import strip_markdown
from .models import AnswerRule, Playbook
from .selector import SuggestionSelector


@dataclass(frozen=True)
class Reply:
    """Result of an answer lookup."""

    text: str
    suggestions: tuple[str, ...]
    rule_name: str | None = None

    @property
    def is_fallback(self) -> bool:
        return self.rule_name is None


class AnswerTable:
    """Looks up canned replies for a playbook."""

    def __init__(self, playbook: Playbook, selector: SuggestionSelector) -> None:
        self._playbook = playbook
        self._selector = selector

    @property
    def rules(self) -> list[AnswerRule]:
        return self._playbook.rules

    def match(self, question: str) -> AnswerRule | None:
        """First rule matching the question, in table order."""
        for rule in self._playbook.rules:
            if rule.matches(question):
                return rule
        return None

    def lookup(self, question: str) -> Reply:
        """Reply text plus the next suggestion set for a question."""
        rule = self.match(question)
        if rule is None:
            text = self._playbook.fallback_reply
            suggestions = self._selector.select(question)
            rule_name = None
        else:
            text = rule.reply
            suggestions = self._selector.select(question, rule.related_topics)
            rule_name = rule.name
        if self._playbook.strip_markdown:
            text = strip_markdown(text)
        return Reply(text=text, suggestions=suggestions, rule_name=rule_name)
