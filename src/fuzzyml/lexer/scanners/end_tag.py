"""End-tag scanner mixin."""

from __future__ import annotations

from fuzzyml.lexer.states import TagState, is_whitespace, to_lower
from fuzzyml.stringbuilder import CharBuffer


class EndTagScannerMixin:
    """Mixin providing ``</name>`` scanning.

    Whitespace after the name finalizes it; anything between there and the
    ``>`` is ignored, so ``</a junk>`` reports ``a``. An end tag whose name
    is empty (``</>``, ``</  >``) reports nothing.

    """

    # These will be set by the TagLexer class
    _state: TagState
    _tag_name_buffer: CharBuffer | None
    _tag_name: str | None

    def _emit_end_tag(self, name: str) -> None:
        """Report an end tag."""
        raise NotImplementedError

    def _scan_end_tag_name(self, char: str) -> None:
        buf = self._tag_name_buffer
        if is_whitespace(char):
            if buf:
                self._tag_name = buf.build()
                self._tag_name_buffer = None
        elif char == ">":
            if buf:
                self._tag_name = buf.build()
            self._tag_name_buffer = None
            if self._tag_name is not None:
                self._emit_end_tag(self._tag_name)
            self._tag_name = None
            self._state = TagState.OUTSIDE
        elif buf is not None:
            buf.append(to_lower(char))
