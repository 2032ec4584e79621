"""Character-driven state-machine lexer for fuzzyml.

Architecture:
lexer/
├── __init__.py          # Re-exports TagLexer, TagState
├── core.py              # TagLexer class (mixin composition + dispatch)
├── states.py            # TagState enum, whitespace predicate
└── scanners/            # State-specific transitions
    ├── tag.py           # Body text, <, start-tag names, />
    ├── comment.py       # <!-- ... -->
    ├── attribute.py     # Attribute names and values
    └── end_tag.py       # </name>

Usage:
    >>> from fuzzyml.lexer import TagLexer
    >>> from fuzzyml.listeners import EventRecorder
    >>> recorder = EventRecorder()
    >>> lexer = TagLexer(recorder)
    >>> lexer.feed("<p class=x>hi</p>")
    False
    >>> recorder.structural()
    [TagEvent(TAG, 'p', {'class': 'x'}), TagEvent(END_TAG, 'p')]

"""

from fuzzyml.lexer.core import TagLexer
from fuzzyml.lexer.states import TagState, is_whitespace, to_lower

__all__ = ["TagLexer", "TagState", "is_whitespace", "to_lower"]
