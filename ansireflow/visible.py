"""
Iteration over the visible characters of text containing escape sequences.
"""
from __future__ import annotations

# std imports
from itertools import islice
from typing import Iterator

# local
from .errors import decode_utf8
from .escapes import MARKER, is_terminator


def iter_visible(text: str | bytes) -> Iterator[str]:
    r"""
    Iterate over the visible characters of ``text``.

    :param text: String that may contain terminal escape sequences, or UTF-8
        encoded bytes of one.
    :yields: Each character that is not part of an escape sequence, in order.
    :raises DecodeError: ``text`` is bytes that are not valid UTF-8.

    Escape sequences run from ESC through the first terminating letter and are
    skipped entirely. A sequence left unterminated at the end of input is
    swallowed: nothing after its ESC is yielded.

    Example::

        >>> list(iter_visible('\x1b[31mhi\x1b[0m'))
        ['h', 'i']
    """
    # decode before the first next() so a bad input fails at the call site
    return _iter_visible(decode_utf8(text))


def _iter_visible(text: str) -> Iterator[str]:
    in_escape = False
    for char in text:
        if char == MARKER:
            in_escape = True
        elif in_escape:
            if is_terminator(char):
                in_escape = False
        else:
            yield char


def strip_sequences(text: str | bytes) -> str:
    r"""
    Return ``text`` with all escape sequences removed.

    Example::

        >>> strip_sequences('\x1b[1;4;38;2;255;255mHello!\x1b[0m')
        'Hello!'
    """
    return ''.join(iter_visible(text))


def nth_visible(text: str | bytes, index: int) -> str | None:
    """
    Return the visible character at position ``index``, or None past the end.

    :raises ValueError: ``index`` is negative.
    """
    if index < 0:
        raise ValueError(f"index must be non-negative, got {index}")
    return next(islice(iter_visible(text), index, None), None)
