"""Resettable character accumulator for the lexer's token buffers.

The lexer keeps one CharBuffer per buffer role (tag name, attribute name,
attribute value) for its whole lifetime and clears it when a new token
starts, instead of allocating a new accumulator per token.

Thread Safety:
CharBuffer instances belong to a single TagLexer.
No shared mutable state.

"""

from __future__ import annotations


class CharBuffer:
    """Append-only character accumulator with O(1) reset.

    Appends to a list, joins once when the token is finalized.

    Usage:
            >>> buf = CharBuffer()
            >>> _ = buf.append("d").append("i").append("v")
            >>> buf.build()
            'div'
            >>> len(buf.clear())
            0

    """

    __slots__ = ("_chars", "_size")

    def __init__(self) -> None:
        """Initialize empty CharBuffer."""
        self._chars: list[str] = []
        self._size = 0

    def append(self, s: str) -> CharBuffer:
        """Append text to the buffer.

        Args:
            s: Text to append, usually one character

        Returns:
            self for method chaining
        """
        self._chars.append(s)
        self._size += len(s)
        return self

    def build(self) -> str:
        """Join all appended text into the finished token."""
        return "".join(self._chars)

    def clear(self) -> CharBuffer:
        """Drop all accumulated text.

        Returns:
            self, so a role can be re-activated in one expression
        """
        self._chars.clear()
        self._size = 0
        return self

    def __len__(self) -> int:
        """Return number of characters accumulated."""
        return self._size

    def __bool__(self) -> bool:
        """Return True if anything has been appended."""
        return self._size > 0
