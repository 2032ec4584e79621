"""Character-driven fuzzy tag lexer.

Feeds on one character at a time, never looks ahead and never fails on
malformed markup: anything it cannot make sense of is absorbed and the
machine resynchronizes at the next recognizable structure.

Thread Safety:
TagLexer instances hold mutable per-stream state. Create one per document.
All state is instance-local; no shared mutable state.

"""

from __future__ import annotations

from fuzzyml.config import LexerConfig, get_lexer_config
from fuzzyml.errors import InvalidStateError
from fuzzyml.lexer.scanners import (
    AttributeScannerMixin,
    CommentScannerMixin,
    EndTagScannerMixin,
    TagScannerMixin,
)
from fuzzyml.lexer.states import TagState, to_lower
from fuzzyml.listeners import NullListener
from fuzzyml.protocols import TagListener
from fuzzyml.stringbuilder import CharBuffer
from fuzzyml.utils.logger import get_logger

logger = get_logger(__name__)


class TagLexer(
    TagScannerMixin,
    CommentScannerMixin,
    AttributeScannerMixin,
    EndTagScannerMixin,
):
    """Fuzzy tag lexer.

    Each call to ``consume()`` makes at most one state transition and fires
    at most one listener callback, synchronously.

    Usage:
            >>> from fuzzyml.listeners import EventRecorder
            >>> recorder = EventRecorder()
            >>> lexer = TagLexer(recorder)
            >>> lexer.feed('<img SRC="a.png"/>')
            False
            >>> lexer.finish()
            >>> recorder.tags(), recorder.end_tags()
            ([('img', {'src': 'a.png'})], ['img'])

    Thread Safety:
        Not thread-safe. Use one TagLexer per character stream.

    """

    __slots__ = (
        "_listener",
        "_config",
        "_state",
        # One reusable buffer per role
        "_tag_buf",
        "_attr_buf",
        "_value_buf",
        # Active buffer per role (None when the role is idle)
        "_tag_name_buffer",
        "_attr_name_buffer",
        "_value_buffer",
        "_tag_name",  # Pending tag name
        "_attr_name",  # Held attribute name
        "_attributes",  # Attribute map of the pending tag
    )

    def __init__(
        self,
        listener: TagListener | None = None,
        *,
        config: LexerConfig | None = None,
    ) -> None:
        """Initialize lexer in the body-text state.

        Args:
            listener: Receiver of lexer events (default: NullListener)
            config: Diagnostics configuration (default: the context's config)
        """
        self._listener: TagListener = listener if listener is not None else NullListener()
        self._config = config if config is not None else get_lexer_config()

        self._tag_buf = CharBuffer()
        self._attr_buf = CharBuffer()
        self._value_buf = CharBuffer()

        self.reset()

    @property
    def state(self) -> TagState:
        """Current lexical state. Anything but OUTSIDE at finish() means
        the stream ended inside an unterminated structure."""
        return self._state

    @property
    def listener(self) -> TagListener:
        return self._listener

    def reset(self) -> None:
        """Return to body text, discarding any half-scanned structure."""
        self._state = TagState.OUTSIDE
        self._tag_name_buffer: CharBuffer | None = None
        self._attr_name_buffer: CharBuffer | None = None
        self._value_buffer: CharBuffer | None = None
        self._tag_name: str | None = None
        self._attr_name: str | None = None
        self._attributes: dict[str, str] | None = None

    def consume(self, char: str) -> bool:
        """Process one character.

        Args:
            char: The next character of the stream

        Returns:
            True to ask the caller to stop feeding; this lexer always
            returns False.

        Raises:
            InvalidStateError: Only if the internal state was corrupted.
        """
        state = self._state
        if state is TagState.OUTSIDE:
            self._scan_outside(char)
        elif state is TagState.TAG_NAME:
            self._scan_tag_name(char)
        elif state is TagState.ATTR_NAME:
            self._scan_attr_name(char)
        elif state is TagState.DOUBLE_QUOTED_VALUE or state is TagState.SINGLE_QUOTED_VALUE:
            self._scan_quoted_value(char)
        elif state is TagState.UNQUOTED_VALUE:
            self._scan_unquoted_value(char)
        elif state is TagState.ATTR_VALUE:
            self._scan_attr_value(char)
        elif state is TagState.ATTR_LOOKING_FOR_VALUE:
            self._scan_attr_looking_for_value(char)
        elif state is TagState.SAW_OPEN_ANGLE:
            self._scan_saw_open_angle(char)
        elif state is TagState.END_TAG_NAME:
            self._scan_end_tag_name(char)
        elif state is TagState.TAG_SAW_SLASH:
            self._scan_tag_saw_slash(char)
        elif state is TagState.IN_COMMENT:
            self._scan_in_comment(char)
        elif state is TagState.SAW_COMMENT_DASH:
            self._scan_saw_comment_dash(char)
        elif state is TagState.SAW_SECOND_COMMENT_DASH:
            self._scan_saw_second_comment_dash(char)
        elif state is TagState.SAW_BANG:
            self._scan_saw_bang(char)
        elif state is TagState.SAW_DASH:
            self._scan_saw_dash(char)
        else:
            raise InvalidStateError(state)
        return False

    def feed(self, text: str) -> bool:
        """Consume every character of ``text`` in order.

        Stops early if ``consume()`` asks to stop.

        Returns:
            The last value returned by ``consume()`` (False for empty text).
        """
        consume = self.consume
        for char in text:
            if consume(char):
                return True
        return False

    def finish(self) -> None:
        """Signal end of stream.

        An unterminated structure is not an error; it is only logged when
        ``report_unterminated`` is enabled.
        """
        if self._config.report_unterminated and self._state is not TagState.OUTSIDE:
            logger.debug("Stream ended inside markup (state %s)", self._state.name)
        self._listener.on_finish()

    # =========================================================================
    # Shared transition helpers
    # =========================================================================

    def _finalize_tag_name(self) -> None:
        buf = self._tag_name_buffer
        if buf is not None:
            self._tag_name = buf.build()
        self._tag_name_buffer = None
        self._attributes = {}

    def _start_attr_name(self, char: str = "") -> None:
        self._attr_name_buffer = self._attr_buf.clear()
        if char:
            self._attr_name_buffer.append(to_lower(char))

    def _complete_tag(self) -> None:
        self._state = TagState.OUTSIDE
        self._tag_name = None
        self._attributes = None
        self._attr_name = None
        self._attr_name_buffer = None
        self._value_buffer = None

    # =========================================================================
    # Event dispatch
    # =========================================================================

    def _emit_text(self, char: str) -> None:
        self._listener.on_text(char)

    def _emit_tag(self) -> None:
        name = self._tag_name
        attributes = self._attributes
        if name is None or attributes is None:
            return
        if self._config.trace_events:
            logger.debug("tag %r %r", name, attributes)
        self._listener.on_tag(name, attributes)

    def _emit_end_tag(self, name: str) -> None:
        if self._config.trace_events:
            logger.debug("end tag %r", name)
        self._listener.on_end_tag(name)
