"""Lenient character/entity reference decoding.

Only five named entities and decimal numeric references are understood.
Anything that fails to resolve is not an error: the ``&`` is emitted
literally and scanning resumes at the very next character, so the text
that looked like an entity (including its ``;``) passes through unchanged.

    >>> decode_attribute("val&amp;ue")
    'val&ue'
    >>> decode_attribute("val&xyz;ue")
    'val&xyz;ue'
    >>> decode_attribute("&#65;&#x41;")
    'A&#x41;'

Thread Safety:
All functions are pure. ENTITY_TABLE is a read-only mapping.

"""

from __future__ import annotations

from types import MappingProxyType

ENTITY_TABLE = MappingProxyType(
    {
        "amp": "&",
        "lt": "<",
        "gt": ">",
        "quot": '"',
        "apos": "'",
    }
)

# Numeric references parse as signed 32-bit decimal integers
_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1

# Out-of-range code points wrap instead of failing
_CODEPOINT_SPACE = 0x110000


def _parse_decimal(text: str) -> int | None:
    """Parse a signed 32-bit decimal integer, or return None."""
    digits = text[1:] if text[:1] in ("+", "-") else text
    if not digits or not digits.isdecimal():
        return None
    value = int(text)
    if value < _INT_MIN or value > _INT_MAX:
        return None
    return value


def resolve_entity(chunk: str) -> str | None:
    """Resolve the text between ``&`` and ``;``.

    Args:
        chunk: Entity body, e.g. ``"amp"`` or ``"#160"``

    Returns:
        The replacement character, or None if the chunk is not understood.
    """
    if chunk.startswith("#"):
        value = _parse_decimal(chunk[1:])
        if value is None:
            return None
        return chr(value % _CODEPOINT_SPACE)
    return ENTITY_TABLE.get(chunk)


def decode_attribute(text: str) -> str:
    """Decode entity references in an attribute value.

    Args:
        text: Raw attribute value, as accumulated by the lexer

    Returns:
        Decoded value. Text without ``&`` is returned unchanged.
    """
    if "&" not in text:
        return text

    out: list[str] = []
    i = 0
    n = len(text)
    while i < n:
        char = text[i]
        i += 1
        if char == "&":
            end = text.find(";", i)
            if end != -1:
                replacement = resolve_entity(text[i:end])
                if replacement is not None:
                    out.append(replacement)
                    i = end + 1
                    continue
        out.append(char)
    return "".join(out)


def decode_body(text: str) -> str:
    """Decode entity references in body text.

    Body text uses the same rules as attribute values. The lexer never calls
    this itself; it is offered to listeners that collect text via on_text().
    """
    return decode_attribute(text)


__all__ = [
    "ENTITY_TABLE",
    "decode_attribute",
    "decode_body",
    "resolve_entity",
]
