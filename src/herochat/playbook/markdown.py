"""Markdown cleanup for canned replies.

Replies are streamed as plain text, so emphasis markers would show up as
literal asterisks while typing.
"""

import re

_BOLD_STARS = re.compile(r"\*\*(.*?)\*\*")
_BOLD_UNDERSCORES = re.compile(r"__(.*?)__")
_ITALIC_STARS = re.compile(r"\*(.*?)\*")
_ITALIC_UNDERSCORES = re.compile(r"_(.*?)_")
_FENCED_BLOCK = re.compile(r"```[\s\S]*?```")
_INLINE_CODE = re.compile(r"`([^`]*)`")
_LEADING_BULLET = re.compile(r"^[ \t]*[•\-*]+", re.MULTILINE)


def strip_markdown(text: str) -> str:
    """Remove markdown emphasis and code markers.

    Fenced blocks are dropped entirely, inline code keeps its content and
    leading bullets of any style become a single dash.
    """
    result = _BOLD_STARS.sub(r"\1", text)
    result = _BOLD_UNDERSCORES.sub(r"\1", result)
    result = _ITALIC_STARS.sub(r"\1", result)
    result = _ITALIC_UNDERSCORES.sub(r"\1", result)
    result = _FENCED_BLOCK.sub("", result)
    result = _INLINE_CODE.sub(r"\1", result)
    return _LEADING_BULLET.sub("-", result)
