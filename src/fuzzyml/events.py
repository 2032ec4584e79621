"""Event records for recorded lexer output.

EventRecorder turns listener callbacks into a list of TagEvent objects,
which is convenient for tests and for pipelines that want to inspect a
document's structure after the fact.

Thread Safety:
TagEvent is frozen (immutable) and safe to share across threads.
EventType is an enum (inherently immutable).

"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum, auto
from types import MappingProxyType


class EventType(Enum):
    """Kinds of event a TagLexer emits."""

    TAG = auto()  # <name ...>
    END_TAG = auto()  # </name> or the > of <name/>
    TEXT = auto()  # one body character
    FINISH = auto()  # end of stream


_NO_ATTRIBUTES: Mapping[str, str] = MappingProxyType({})


@dataclass(frozen=True, slots=True)
class TagEvent:
    """One recorded lexer event.

    Attributes:
        type: The event kind
        value: Tag name for TAG/END_TAG, the character for TEXT, "" for FINISH
        attributes: Attribute snapshot for TAG events, empty otherwise

    """

    type: EventType
    value: str = ""
    attributes: Mapping[str, str] = field(default_factory=lambda: _NO_ATTRIBUTES)

    def __repr__(self) -> str:
        if self.type is EventType.TAG:
            return f"TagEvent(TAG, {self.value!r}, {dict(self.attributes)!r})"
        return f"TagEvent({self.type.name}, {self.value!r})"
