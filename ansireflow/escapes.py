"""
Escape sequence markers, terminators and related constants.

This module provides the constants and predicates used by the scanners and
writers to find the boundaries of terminal escape sequences. Only boundaries
are detected here; the meaning of a sequence's parameters is never parsed.
"""
from __future__ import annotations

# Introduces every escape sequence.
MARKER = '\x1b'

# Encoded form, for scanners working over raw bytes.
MARKER_BYTE = 0x1b

# The one sequence given special treatment: it clears all active styling.
RESET = '\x1b[0m'
RESET_BYTES = RESET.encode('ascii')

# A closed sequence is a reset when it ends with this suffix.
_RESET_SUFFIX = '[0m'

# Final character of an SGR (color/style) sequence.
SGR_FINAL = 'm'

# Tab stops fall on every multiple of this column.
TAB_STOP = 8

# Code point ranges, inclusive, that terminate an escape sequence:
# ASCII uppercase and lowercase letters.
TERMINATOR_RANGES = (
    (0x40, 0x5a),  # '@' through 'Z'
    (0x61, 0x7a),  # 'a' through 'z'
)


def is_marker(ch: str) -> bool:
    """Return True if ``ch`` is the escape marker, ESC (``U+001B``)."""
    return ch == MARKER


def is_terminator(ch: str) -> bool:
    """
    Return True if ``ch`` ends an escape sequence.

    :param ch: A single character.
    :returns: True when the code point of ``ch`` falls in ``0x40-0x5A`` or
        ``0x61-0x7A``.
    """
    ucs = ord(ch)
    return 0x40 <= ucs <= 0x5a or 0x61 <= ucs <= 0x7a


def is_terminator_byte(byte: int) -> bool:
    """Return True if the ASCII ``byte`` value ends an escape sequence."""
    return 0x40 <= byte <= 0x5a or 0x61 <= byte <= 0x7a


def is_reset(span: str | bytes) -> bool:
    r"""
    Return True if the closed escape ``span`` is the reset sequence.

    Matching is by the suffix ``'[0m'``, so ``'\x1b[0m'`` qualifies, while
    ``'\x1b[m'`` and ``'\x1b[1;0m'`` do not.
    """
    if isinstance(span, (bytes, bytearray)):
        return span.endswith(_RESET_SUFFIX.encode('ascii'))
    return span.endswith(_RESET_SUFFIX)
