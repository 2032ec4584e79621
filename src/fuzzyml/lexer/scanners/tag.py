"""Start-tag scanner mixin."""

from __future__ import annotations

from fuzzyml.lexer.states import TagState, is_whitespace, to_lower
from fuzzyml.stringbuilder import CharBuffer


class TagScannerMixin:
    """Mixin providing body text, ``<`` dispatch, tag names and ``/>``.

    A self-closing tag reports twice: ``on_tag`` when the ``/`` is seen and
    ``on_end_tag`` with the same name when the closing ``>`` arrives.

    """

    # These will be set by the TagLexer class
    _state: TagState
    _tag_buf: CharBuffer
    _tag_name_buffer: CharBuffer | None
    _tag_name: str | None

    def _emit_text(self, char: str) -> None:
        """Report one character of body text."""
        raise NotImplementedError

    def _emit_tag(self) -> None:
        """Report the pending tag and its attributes."""
        raise NotImplementedError

    def _emit_end_tag(self, name: str) -> None:
        """Report an end tag."""
        raise NotImplementedError

    def _finalize_tag_name(self) -> None:
        """Turn the tag-name buffer into the pending tag name."""
        raise NotImplementedError

    def _start_attr_name(self, char: str = "") -> None:
        """Activate the attribute-name buffer."""
        raise NotImplementedError

    def _complete_tag(self) -> None:
        """Drop the pending tag and return to body text."""
        raise NotImplementedError

    def _scan_outside(self, char: str) -> None:
        if char == "<":
            self._state = TagState.SAW_OPEN_ANGLE
        else:
            self._emit_text(char)

    def _scan_saw_open_angle(self, char: str) -> None:
        if char == "!":
            self._state = TagState.SAW_BANG
        elif char == "/":
            self._state = TagState.END_TAG_NAME
            self._tag_name_buffer = self._tag_buf.clear()
        else:
            self._state = TagState.TAG_NAME
            self._tag_name_buffer = self._tag_buf.clear()
            if not is_whitespace(char):
                self._tag_name_buffer.append(to_lower(char))

    def _scan_tag_name(self, char: str) -> None:
        """Accumulate a start-tag name.

        Leading whitespace is skipped. A ``/`` before any name character
        abandons the tag without an event.
        """
        buf = self._tag_name_buffer
        if is_whitespace(char):
            if buf:
                self._finalize_tag_name()
                self._start_attr_name()
                self._state = TagState.ATTR_NAME
        elif char == "/":
            if buf:
                self._finalize_tag_name()
                self._emit_tag()
                self._state = TagState.TAG_SAW_SLASH
            else:
                self._tag_name_buffer = None
                self._state = TagState.OUTSIDE
        elif char == ">":
            if buf:
                self._finalize_tag_name()
            self._tag_name_buffer = None
            if self._tag_name is not None:
                self._emit_tag()
            self._complete_tag()
        elif buf is not None:
            buf.append(to_lower(char))

    def _scan_tag_saw_slash(self, char: str) -> None:
        if char == ">":
            if self._tag_name is not None:
                self._emit_end_tag(self._tag_name)
            self._complete_tag()
