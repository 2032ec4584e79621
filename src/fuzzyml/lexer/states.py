"""Lexer states and character classes.

This module defines the finite state machine states for the tag lexer
and the whitespace predicate shared by every scanner.
"""

from __future__ import annotations

from enum import Enum, auto


class TagState(Enum):
    """Tag lexer states.

    The lexer starts in OUTSIDE and has no terminal state; every structure
    that completes returns it to OUTSIDE for the next one.

    """

    OUTSIDE = auto()  # Body text
    SAW_OPEN_ANGLE = auto()  # <
    SAW_BANG = auto()  # <!
    SAW_DASH = auto()  # <!-
    IN_COMMENT = auto()  # <!-- ...
    SAW_COMMENT_DASH = auto()  # - inside comment
    SAW_SECOND_COMMENT_DASH = auto()  # -- inside comment
    TAG_NAME = auto()  # <name
    ATTR_NAME = auto()  # <name attr
    ATTR_LOOKING_FOR_VALUE = auto()  # <name attr (maybe =)
    ATTR_VALUE = auto()  # <name attr=
    SINGLE_QUOTED_VALUE = auto()  # <name attr='...
    DOUBLE_QUOTED_VALUE = auto()  # <name attr="...
    UNQUOTED_VALUE = auto()  # <name attr=...
    TAG_SAW_SLASH = auto()  # <name ... /
    END_TAG_NAME = auto()  # </name


# Quoted values also end at a line break
QUOTED_VALUE_TERMINATORS = {
    TagState.SINGLE_QUOTED_VALUE: frozenset({"'", "\n", "\r"}),
    TagState.DOUBLE_QUOTED_VALUE: frozenset({'"', "\n", "\r"}),
}


def is_whitespace(char: str) -> bool:
    """Return True for any character at or below U+0020, controls included."""
    return char <= " "


def to_lower(char: str) -> str:
    """Lower-case one character, always returning exactly one character.

    ``str.lower()`` expands U+0130 to two code points; only the first is kept.
    """
    lowered = char.lower()
    return lowered[:1] if lowered else char
