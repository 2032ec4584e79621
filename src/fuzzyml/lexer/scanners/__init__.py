"""State-specific scanners for the fuzzyml tag lexer.

Each scanner is a mixin that provides the transitions for one family of
lexer states (comments, start tags, attributes, end tags).
"""

from __future__ import annotations

from fuzzyml.lexer.scanners.attribute import AttributeScannerMixin
from fuzzyml.lexer.scanners.comment import CommentScannerMixin
from fuzzyml.lexer.scanners.end_tag import EndTagScannerMixin
from fuzzyml.lexer.scanners.tag import TagScannerMixin

__all__ = [
    "AttributeScannerMixin",
    "CommentScannerMixin",
    "EndTagScannerMixin",
    "TagScannerMixin",
]
