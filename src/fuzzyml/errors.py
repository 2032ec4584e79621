"""Exception classes for fuzzyml.

Malformed markup never raises: the lexer absorbs it and resynchronizes.
The only exception the lexer itself raises signals a defect in the state
machine, not a problem with the input.
"""

from __future__ import annotations

from typing import Any


class FuzzyMLError(Exception):
    """Base exception for all fuzzyml errors.

    Subclass this for specific error categories.
    """

    pass


class InvalidStateError(FuzzyMLError):
    """The lexer reached a state its dispatcher does not recognize.

    This can only happen when the lexer's internal state has been corrupted
    from outside (or by a bug in a transition); no sequence of characters
    passed to ``consume()`` produces it.
    """

    def __init__(self, state: Any) -> None:
        """Initialize with the unrecognized state value.

        Args:
            state: The offending state value
        """
        self.state = state
        super().__init__(f"Invalid lexer state: {state!r}")
