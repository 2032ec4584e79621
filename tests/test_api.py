"""Tests for the public API: scan(), iter_events(), listeners and events."""

from __future__ import annotations

import logging

import pytest

import fuzzyml
from fuzzyml import (
    EventRecorder,
    EventType,
    NullListener,
    TagEvent,
    TagLexer,
    TagListener,
    TagState,
    iter_events,
    scan,
)


class TestScan:
    def test_returns_finished_lexer(self) -> None:
        lexer = scan("<p>hi</p>")
        assert isinstance(lexer, TagLexer)
        assert lexer.state is TagState.OUTSIDE

    def test_default_listener_is_null(self) -> None:
        assert isinstance(scan("").listener, NullListener)

    def test_reports_unterminated_state(self) -> None:
        assert scan("<a href='x").state is TagState.SINGLE_QUOTED_VALUE

    def test_uses_given_listener(self) -> None:
        recorder = EventRecorder()
        assert scan("<b>", recorder).listener is recorder


class TestIterEvents:
    def test_full_event_stream(self) -> None:
        assert iter_events('x<a HREF="X">y</a>') == [
            TagEvent(EventType.TEXT, "x"),
            TagEvent(EventType.TAG, "a", {"href": "X"}),
            TagEvent(EventType.TEXT, "y"),
            TagEvent(EventType.END_TAG, "a"),
            TagEvent(EventType.FINISH),
        ]

    def test_empty_input(self) -> None:
        assert iter_events("") == [TagEvent(EventType.FINISH)]


class TestEventRecorder:
    def test_attributes_snapshot(self) -> None:
        """Mutating the map a listener received does not alter the record."""

        class Mutating(EventRecorder):
            def on_tag(self, name: str, attributes: dict[str, str]) -> None:
                super().on_tag(name, attributes)
                attributes["injected"] = "1"

        recorder = Mutating()
        scan("<a b=1>", recorder)
        assert recorder.tags() == [("a", {"b": "1"})]

    def test_recorded_attributes_read_only(self) -> None:
        event = iter_events("<a b=1>")[0]
        with pytest.raises(TypeError):
            event.attributes["b"] = "2"  # type: ignore[index]

    def test_clear(self) -> None:
        recorder = EventRecorder()
        scan("<a>", recorder)
        recorder.clear()
        assert recorder.events == []

    def test_repr(self) -> None:
        assert repr(TagEvent(EventType.TAG, "a", {"b": "1"})) == "TagEvent(TAG, 'a', {'b': '1'})"
        assert repr(TagEvent(EventType.END_TAG, "a")) == "TagEvent(END_TAG, 'a')"

    def test_satisfies_protocol(self) -> None:
        listener: TagListener = EventRecorder()
        TagLexer(listener).feed("<a>")


class TestNullListener:
    def test_logs_tags_at_debug(self, caplog: pytest.LogCaptureFixture) -> None:
        caplog.set_level(logging.DEBUG, logger="fuzzyml")
        scan("<div/>")
        assert "Saw tag 'div'" in caplog.text
        assert "Saw end tag 'div'" in caplog.text

    def test_subclass_overrides_selected_callbacks(self) -> None:
        class Links(NullListener):
            def __init__(self) -> None:
                self.hrefs: list[str] = []

            def on_tag(self, name: str, attributes: dict[str, str]) -> None:
                if name == "a" and "href" in attributes:
                    self.hrefs.append(attributes["href"])

        links = Links()
        scan("<A href='/one'>1</A><a name=x><a href=/two>2</a>", links)
        assert links.hrefs == ["/one", "/two"]

    def test_plain_object_listener(self) -> None:
        """Any object with the four callbacks works; no base class needed."""

        class Counter:
            def __init__(self) -> None:
                self.counts = {"tag": 0, "end": 0, "text": 0, "finish": 0}

            def on_tag(self, name: str, attributes: dict[str, str]) -> None:
                self.counts["tag"] += 1

            def on_end_tag(self, name: str) -> None:
                self.counts["end"] += 1

            def on_text(self, char: str) -> None:
                self.counts["text"] += 1

            def on_finish(self) -> None:
                self.counts["finish"] += 1

        counter = Counter()
        scan("<p>ab<br/></p>", counter)
        assert counter.counts == {"tag": 2, "end": 2, "text": 2, "finish": 1}


class TestPackage:
    def test_version(self) -> None:
        assert fuzzyml.__version__ == "0.1.0"

    def test_all_exports_resolve(self) -> None:
        for name in fuzzyml.__all__:
            assert hasattr(fuzzyml, name), name


class TestTagEvent:
    def test_default_attributes_empty(self) -> None:
        event = TagEvent(EventType.END_TAG, "a")
        assert event.attributes == {}
        assert len(event.attributes) == 0

    def test_default_attributes_read_only(self) -> None:
        event = TagEvent(EventType.FINISH)
        with pytest.raises(TypeError):
            event.attributes["x"] = "1"  # type: ignore[index]

    def test_default_attributes_equal_across_events(self) -> None:
        first = TagEvent(EventType.TEXT, "a")
        second = TagEvent(EventType.TEXT, "b")
        assert first.attributes == second.attributes == {}

    def test_attributes_field_uses_factory(self) -> None:
        import dataclasses

        field = {f.name: f for f in dataclasses.fields(TagEvent)}["attributes"]
        assert field.default is dataclasses.MISSING
        assert field.default_factory is not dataclasses.MISSING
