"""Property-based tests for lexer invariants using Hypothesis.

These tests verify that certain properties always hold regardless
of the input, helping catch edge cases that example-based tests miss.
"""

from __future__ import annotations

from hypothesis import given, settings
from hypothesis import strategies as st

from fuzzyml import EventRecorder, EventType, TagLexer, TagState, iter_events, scan

# Characters that drive the state machine, plus some letters of both cases
MARKUP_ALPHABET = "<>/!-='\" \t\n\r&;#abcABCxyzXYZ019"

markup = st.text(alphabet=MARKUP_ALPHABET, max_size=300)

MAP_STATES = frozenset(
    {
        TagState.ATTR_NAME,
        TagState.ATTR_LOOKING_FOR_VALUE,
        TagState.ATTR_VALUE,
        TagState.SINGLE_QUOTED_VALUE,
        TagState.DOUBLE_QUOTED_VALUE,
        TagState.UNQUOTED_VALUE,
        TagState.TAG_SAW_SLASH,
    }
)

VALUE_STATES = frozenset(
    {
        TagState.ATTR_VALUE,
        TagState.SINGLE_QUOTED_VALUE,
        TagState.DOUBLE_QUOTED_VALUE,
        TagState.UNQUOTED_VALUE,
    }
)


class TestNeverRaises:
    """The lexer absorbs any input."""

    @given(st.text(max_size=1000))
    @settings(max_examples=200)
    def test_arbitrary_text(self, source: str) -> None:
        events = iter_events(source)
        assert events[-1].type is EventType.FINISH

    @given(markup)
    @settings(max_examples=300)
    def test_markup_heavy_text(self, source: str) -> None:
        events = iter_events(source)
        finishes = sum(1 for e in events if e.type is EventType.FINISH)
        assert finishes == 1


class TestBufferInvariants:
    """Internal buffers stay consistent with the current state."""

    @given(markup)
    @settings(max_examples=200)
    def test_at_most_one_active_buffer(self, source: str) -> None:
        lexer = TagLexer(EventRecorder())
        for char in source:
            lexer.consume(char)
            active = [
                b
                for b in (lexer._tag_name_buffer, lexer._attr_name_buffer, lexer._value_buffer)
                if b is not None
            ]
            assert len(active) <= 1

            if lexer._tag_name_buffer is not None:
                assert lexer.state in (TagState.TAG_NAME, TagState.END_TAG_NAME)
            if lexer._attr_name_buffer is not None:
                assert lexer.state is TagState.ATTR_NAME
            if lexer._value_buffer is not None:
                assert lexer.state in VALUE_STATES

    @given(markup)
    @settings(max_examples=200)
    def test_attribute_map_exists_only_inside_named_tag(self, source: str) -> None:
        lexer = TagLexer(EventRecorder())
        for char in source:
            lexer.consume(char)
            assert (lexer._attributes is not None) == (lexer.state in MAP_STATES)
            if lexer._attributes is not None:
                assert lexer._tag_name is not None


class TestCaseHandling:
    @given(markup)
    @settings(max_examples=200)
    def test_names_lowercased(self, source: str) -> None:
        for event in iter_events(source):
            if event.type in (EventType.TAG, EventType.END_TAG):
                assert event.value == event.value.lower()
            for name in event.attributes:
                assert name == name.lower()

    @given(st.from_regex(r"[A-Za-z]{1,20}", fullmatch=True))
    @settings(max_examples=100)
    def test_quoted_value_case_preserved(self, value: str) -> None:
        recorder = EventRecorder()
        scan(f'<A B="{value}">', recorder)
        assert recorder.tags() == [("a", {"b": value})]


class TestSelfClosing:
    @given(st.from_regex(r"[a-z]{1,10}", fullmatch=True))
    @settings(max_examples=50)
    def test_double_fire(self, name: str) -> None:
        recorder = EventRecorder()
        scan(f"<{name}/>", recorder)
        assert [(e.type, e.value) for e in recorder.structural()] == [
            (EventType.TAG, name),
            (EventType.END_TAG, name),
        ]


class TestBodyText:
    @given(st.text(alphabet=st.characters(blacklist_characters="<"), max_size=300))
    @settings(max_examples=100)
    def test_text_without_markup_passes_through(self, source: str) -> None:
        recorder = EventRecorder()
        lexer = scan(source, recorder)
        assert recorder.text() == source
        assert recorder.structural() == []
        assert lexer.state is TagState.OUTSIDE


class TestDeterminism:
    """Test that lexing is deterministic and instances are independent."""

    @given(markup)
    @settings(max_examples=50)
    def test_repeated_lexing_identical(self, source: str) -> None:
        assert iter_events(source) == iter_events(source)

    @given(markup, markup)
    @settings(max_examples=50)
    def test_prior_instances_do_not_affect_output(self, other: str, source: str) -> None:
        before = iter_events(source)
        iter_events(other)
        assert iter_events(source) == before

    @given(markup, markup)
    @settings(max_examples=50)
    def test_reset_restarts_cleanly(self, prefix: str, source: str) -> None:
        recorder = EventRecorder()
        lexer = TagLexer(recorder)
        lexer.feed(prefix)
        lexer.reset()
        recorder.clear()
        lexer.feed(source)
        lexer.finish()
        assert recorder.events == iter_events(source)
