"""
Removal of the indentation shared by the lines of a text.

Spaces and tabs both count as one indentation character each.
"""
from __future__ import annotations

# std imports
import io

from typing import IO, Any

# local
from .errors import ReflowIOError

_BLANKS = (' ', '\t')


def detect_indent(text: str) -> int:
    """
    Return the indentation shared by the lines of ``text``.

    :returns: The smallest non-zero count of leading spaces and tabs found on
        a line holding other characters. Lines without indentation and blank
        lines do not lower it; 0 when no line is indented.
    """
    current = 0
    smallest = 0
    leading = True
    for char in text:
        if char in _BLANKS:
            if leading:
                current += 1
        elif char == '\n':
            current = 0
            leading = True
        else:
            if current > 0 and (smallest == 0 or current < smallest):
                smallest = current
            current = 0
            leading = False
    return smallest


def dedent(text: str) -> str:
    """
    Return ``text`` with the indentation found by :func:`detect_indent`
    removed from the start of every line.

    Lines indented by less lose what they have.
    """
    amount = detect_indent(text)
    if amount == 0:
        return text

    out = []
    omitted = 0
    omitting = True
    for char in text:
        if char in _BLANKS:
            if omitting:
                if omitted < amount:
                    omitted += 1
                    continue
                omitting = False
        elif char == '\n':
            omitted = 0
            omitting = True
        else:
            omitting = False
        out.append(char)
    return ''.join(out)


def dedent_to(text: str, sink: IO[Any]) -> None:
    """
    Write :func:`dedent` of ``text`` to ``sink``.

    A sink with a ``mode`` containing ``'b'``, or an :class:`io.BufferedIOBase`
    / :class:`io.RawIOBase`, receives UTF-8 bytes; any other sink receives text.

    :raises ReflowIOError: writing to ``sink`` failed.
    """
    output = dedent(text)
    binary = (isinstance(sink, (io.BufferedIOBase, io.RawIOBase))
              or 'b' in getattr(sink, 'mode', ''))
    try:
        sink.write(output.encode('utf-8') if binary else output)
    except OSError as err:
        raise ReflowIOError(f'write to sink failed: {err}') from err
