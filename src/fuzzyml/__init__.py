"""
fuzzyml — Fuzzy Tag Lexer for Crawled Markup

A single-pass, character-driven lexer that finds start tags, end tags,
self-closing tags, attributes and comments in HTML-like markup without ever
failing on malformed input. It does not build a tree and does not validate.

Quick Start:
    >>> from fuzzyml import iter_events
    >>> iter_events('<a HREF="X">link</a>')[0]
    TagEvent(TAG, 'a', {'href': 'X'})

    >>> # Or bring your own listener
    >>> from fuzzyml import NullListener, scan
    >>> class Links(NullListener):
    ...     def __init__(self) -> None:
    ...         self.hrefs: list[str] = []
    ...     def on_tag(self, name, attributes):
    ...         if name == "a" and "href" in attributes:
    ...             self.hrefs.append(attributes["href"])
    >>> links = Links()
    >>> _ = scan("<A href='/one'>1</A><a href=/two>2</a>", links)
    >>> links.hrefs
    ['/one', '/two']

Installation:
    pip install fuzzyml              # Core lexer (zero deps)
    pip install fuzzyml[dev]         # + pytest / hypothesis for the test suite
"""

from fuzzyml.config import (
    LexerConfig,
    get_lexer_config,
    lexer_config_context,
    reset_lexer_config,
    set_lexer_config,
)
from fuzzyml.entities import ENTITY_TABLE, decode_attribute, decode_body, resolve_entity
from fuzzyml.errors import FuzzyMLError, InvalidStateError
from fuzzyml.events import EventType, TagEvent
from fuzzyml.lexer import TagLexer, TagState, is_whitespace
from fuzzyml.listeners import EventRecorder, NullListener
from fuzzyml.protocols import TagListener

__version__ = "0.1.0"


def scan(
    text: str,
    listener: TagListener | None = None,
    *,
    config: LexerConfig | None = None,
) -> TagLexer:
    """Lex a complete string and signal end of stream.

    Args:
        text: Markup to lex
        listener: Receiver of events (default: NullListener)
        config: Optional diagnostics configuration

    Returns:
        The finished TagLexer, so callers can inspect its final ``state``.
    """
    lexer = TagLexer(listener, config=config)
    lexer.feed(text)
    lexer.finish()
    return lexer


def iter_events(text: str, *, config: LexerConfig | None = None) -> list[TagEvent]:
    """Lex ``text`` and return every event it produced, FINISH included."""
    recorder = EventRecorder()
    scan(text, recorder, config=config)
    return recorder.events


__all__ = [
    # Lexer
    "TagLexer",
    "TagState",
    "is_whitespace",
    "scan",
    "iter_events",
    # Listeners and events
    "TagListener",
    "NullListener",
    "EventRecorder",
    "EventType",
    "TagEvent",
    # Entity decoding
    "ENTITY_TABLE",
    "decode_attribute",
    "decode_body",
    "resolve_entity",
    # Configuration
    "LexerConfig",
    "get_lexer_config",
    "set_lexer_config",
    "reset_lexer_config",
    "lexer_config_context",
    # Errors
    "FuzzyMLError",
    "InvalidStateError",
    "__version__",
]
