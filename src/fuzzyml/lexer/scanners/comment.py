"""Comment and markup-declaration scanner mixin."""

from __future__ import annotations

from fuzzyml.lexer.states import TagState


class CommentScannerMixin:
    """Mixin providing the ``<!-- ... -->`` states.

    Only ``<!--`` opens a comment. Any other ``<!`` sequence is dropped
    without an event and the lexer goes back to body text. Inside a comment
    nothing is reported; a run of two or more dashes followed by ``>``
    closes it.

    """

    # These will be set by the TagLexer class
    _state: TagState

    def _scan_saw_bang(self, char: str) -> None:
        if char == "-":
            self._state = TagState.SAW_DASH
        else:
            self._state = TagState.OUTSIDE

    def _scan_saw_dash(self, char: str) -> None:
        if char == "-":
            self._state = TagState.IN_COMMENT
        else:
            self._state = TagState.OUTSIDE

    def _scan_in_comment(self, char: str) -> None:
        if char == "-":
            self._state = TagState.SAW_COMMENT_DASH

    def _scan_saw_comment_dash(self, char: str) -> None:
        if char == "-":
            self._state = TagState.SAW_SECOND_COMMENT_DASH
        else:
            self._state = TagState.IN_COMMENT

    def _scan_saw_second_comment_dash(self, char: str) -> None:
        """Close on ``>``; further dashes keep the comment closable."""
        if char == ">":
            self._state = TagState.OUTSIDE
        elif char != "-":
            self._state = TagState.IN_COMMENT
