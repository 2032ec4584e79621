"""Ready-made TagListener implementations.

NullListener is the default listener of a TagLexer and the base class to
subclass when only some callbacks matter. EventRecorder keeps every event.
"""

from __future__ import annotations

from types import MappingProxyType

from fuzzyml.events import EventType, TagEvent
from fuzzyml.utils.logger import get_logger

logger = get_logger(__name__)


class NullListener:
    """Listener whose callbacks do nothing beyond debug logging.

    Usage:
            >>> class LinkCollector(NullListener):
            ...     def __init__(self) -> None:
            ...         self.links: list[str] = []
            ...     def on_tag(self, name, attributes):
            ...         if name == "a" and "href" in attributes:
            ...             self.links.append(attributes["href"])

    """

    def on_tag(self, name: str, attributes: dict[str, str]) -> None:
        logger.debug(" Saw tag '%s'", name)

    def on_end_tag(self, name: str) -> None:
        logger.debug(" Saw end tag '%s'", name)

    def on_text(self, char: str) -> None:
        pass

    def on_finish(self) -> None:
        pass


class EventRecorder:
    """Listener that records every event as a TagEvent.

    Attribute maps are copied, so later mutation by another listener or by
    the caller does not change what was recorded.

    Usage:
            >>> from fuzzyml import scan
            >>> recorder = EventRecorder()
            >>> scan("<a HREF='X'>hi</a>", recorder).state
            <TagState.OUTSIDE: 1>
            >>> recorder.tags()
            [('a', {'href': 'X'})]
            >>> recorder.text()
            'hi'

    """

    __slots__ = ("events",)

    def __init__(self) -> None:
        self.events: list[TagEvent] = []

    def on_tag(self, name: str, attributes: dict[str, str]) -> None:
        self.events.append(TagEvent(EventType.TAG, name, MappingProxyType(dict(attributes))))

    def on_end_tag(self, name: str) -> None:
        self.events.append(TagEvent(EventType.END_TAG, name))

    def on_text(self, char: str) -> None:
        self.events.append(TagEvent(EventType.TEXT, char))

    def on_finish(self) -> None:
        self.events.append(TagEvent(EventType.FINISH))

    def structural(self) -> list[TagEvent]:
        """Return only TAG and END_TAG events, in order."""
        return [e for e in self.events if e.type in (EventType.TAG, EventType.END_TAG)]

    def tags(self) -> list[tuple[str, dict[str, str]]]:
        """Return (name, attributes) for every TAG event."""
        return [(e.value, dict(e.attributes)) for e in self.events if e.type is EventType.TAG]

    def end_tags(self) -> list[str]:
        """Return the name of every END_TAG event."""
        return [e.value for e in self.events if e.type is EventType.END_TAG]

    def text(self) -> str:
        """Join all recorded body text."""
        return "".join(e.value for e in self.events if e.type is EventType.TEXT)

    def clear(self) -> None:
        self.events.clear()
