"""Attribute scanner mixin."""

from __future__ import annotations

from fuzzyml.entities import decode_attribute
from fuzzyml.lexer.states import (
    QUOTED_VALUE_TERMINATORS,
    TagState,
    is_whitespace,
    to_lower,
)
from fuzzyml.stringbuilder import CharBuffer


class AttributeScannerMixin:
    """Mixin providing attribute name and value scanning.

    An attribute name is finalized into the *held name* and only written to
    the attribute map once it is known whether a value follows. Names are
    lower-cased; values keep their case and are entity-decoded when they end.

    """

    # These will be set by the TagLexer class
    _state: TagState
    _value_buf: CharBuffer
    _attr_name_buffer: CharBuffer | None
    _value_buffer: CharBuffer | None
    _attr_name: str | None
    _attributes: dict[str, str] | None

    def _emit_tag(self) -> None:
        """Report the pending tag and its attributes."""
        raise NotImplementedError

    def _start_attr_name(self, char: str = "") -> None:
        """Activate the attribute-name buffer."""
        raise NotImplementedError

    def _complete_tag(self) -> None:
        """Drop the pending tag and return to body text."""
        raise NotImplementedError

    def _hold_attr_name(self) -> None:
        """Finalize a non-empty attribute-name buffer into the held name."""
        buf = self._attr_name_buffer
        if buf:
            self._attr_name = buf.build()
        self._attr_name_buffer = None

    def _start_value(self) -> None:
        self._value_buffer = self._value_buf.clear()
        self._state = TagState.ATTR_VALUE

    def _insert_bare_attribute(self) -> None:
        """Store the held name (if any) with an empty value."""
        if self._attr_name is not None and self._attributes is not None:
            self._attributes[self._attr_name] = ""
        self._attr_name = None

    def _insert_value(self) -> None:
        """Decode the value buffer and store it under the held name."""
        if self._value_buffer is not None:
            value = decode_attribute(self._value_buffer.build())
            if self._attr_name is not None and self._attributes is not None:
                self._attributes[self._attr_name] = value
        self._attr_name = None
        self._value_buffer = None

    def _scan_attr_name(self, char: str) -> None:
        buf = self._attr_name_buffer
        if is_whitespace(char):
            if buf:
                self._hold_attr_name()
                self._state = TagState.ATTR_LOOKING_FOR_VALUE
        elif char == "=":
            if buf:
                self._hold_attr_name()
                self._start_value()
        elif char == "/":
            self._hold_attr_name()
            self._insert_bare_attribute()
            self._emit_tag()
            self._state = TagState.TAG_SAW_SLASH
        elif char == ">":
            self._hold_attr_name()
            self._insert_bare_attribute()
            self._emit_tag()
            self._complete_tag()
        elif buf is not None:
            buf.append(to_lower(char))

    def _scan_attr_looking_for_value(self, char: str) -> None:
        """Decide whether the held name is a bare attribute."""
        if char == "=":
            self._start_value()
        elif char == ">":
            self._insert_bare_attribute()
            self._emit_tag()
            self._complete_tag()
        elif char == "/":
            self._insert_bare_attribute()
            self._emit_tag()
            self._state = TagState.TAG_SAW_SLASH
        elif not is_whitespace(char):
            self._insert_bare_attribute()
            self._start_attr_name(char)
            self._state = TagState.ATTR_NAME

    def _scan_attr_value(self, char: str) -> None:
        if char == "'":
            self._state = TagState.SINGLE_QUOTED_VALUE
        elif char == '"':
            self._state = TagState.DOUBLE_QUOTED_VALUE
        elif not is_whitespace(char):
            self._state = TagState.UNQUOTED_VALUE
            if self._value_buffer is not None:
                self._value_buffer.append(char)

    def _scan_quoted_value(self, char: str) -> None:
        """Accumulate a quoted value until its quote or a line break.

        The character after the closing quote goes straight to the
        attribute-name state, so ``a="1"b="2"`` yields two attributes.
        """
        if char in QUOTED_VALUE_TERMINATORS[self._state]:
            self._insert_value()
            self._start_attr_name()
            self._state = TagState.ATTR_NAME
        elif self._value_buffer is not None:
            self._value_buffer.append(char)

    def _scan_unquoted_value(self, char: str) -> None:
        if is_whitespace(char):
            self._insert_value()
            self._start_attr_name()
            self._state = TagState.ATTR_NAME
        elif char == "/":
            self._insert_value()
            self._emit_tag()
            self._state = TagState.TAG_SAW_SLASH
        elif char == ">":
            self._insert_value()
            self._emit_tag()
            self._complete_tag()
        elif self._value_buffer is not None:
            self._value_buffer.append(char)
