"""Protocols for fuzzyml.

Defines the contract between the tag lexer and whatever consumes its
events. The lexer only tokenizes; a TagListener decides what the events mean.
"""

from __future__ import annotations

from typing import Protocol


class TagListener(Protocol):
    """Protocol for consumers of tag lexer events.

    All callbacks run synchronously inside ``TagLexer.consume()`` or
    ``TagLexer.finish()``. A self-closing tag such as ``<br/>`` produces
    ``on_tag`` followed by ``on_end_tag`` for the same name.

    Thread Safety:
        A listener receives events from one lexer only. Sharing a listener
        between lexers running in different threads requires the listener
        to do its own locking.

    """

    def on_tag(self, name: str, attributes: dict[str, str]) -> None:
        """A start tag was recognized.

        Args:
            name: Lower-cased tag name
            attributes: Lower-cased attribute names mapped to decoded values.
                Bare attributes map to ``""``.
        """
        ...

    def on_end_tag(self, name: str) -> None:
        """An end tag (or the end of a self-closing tag) was recognized."""
        ...

    def on_text(self, char: str) -> None:
        """One character of body text outside any tag or comment."""
        ...

    def on_finish(self) -> None:
        """The character stream ended."""
        ...
