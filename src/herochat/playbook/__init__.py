"""Playbooks: the scripted content of the hero chat.

Each module hides one decision:
- models.py: shape of a playbook (copy, pools, rules, pacing)
- builtin.py: the shipped variants
- selector.py: how follow-up suggestions are chosen
- answers.py: keyword matching of questions to canned replies
- markdown.py: cleanup of reply text before streaming
- loader.py: where playbooks come from
"""

from .answers import AnswerTable, Reply
from .builtin import BUILTIN_PLAYBOOKS, CONSTRAINTS_PLAYBOOK, DEFAULT_PLAYBOOK, REFINERY_PLAYBOOK
from .loader import dump_playbook, get_playbook, load_playbook
from .markdown import strip_markdown
from .models import AnswerRule, AutoPilotSettings, EngineTimings, KeywordClause, Playbook
from .selector import SuggestionSelector

__all__ = [
    "AnswerRule",
    "AnswerTable",
    "AutoPilotSettings",
    "BUILTIN_PLAYBOOKS",
    "CONSTRAINTS_PLAYBOOK",
    "DEFAULT_PLAYBOOK",
    "EngineTimings",
    "KeywordClause",
    "Playbook",
    "REFINERY_PLAYBOOK",
    "Reply",
    "SuggestionSelector",
    "dump_playbook",
    "get_playbook",
    "load_playbook",
    "strip_markdown",
]
