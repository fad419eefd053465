"""
Visible width measurement of text containing terminal escape sequences.

Two measurements are offered, kept as separate entry points:

- :func:`visible_len` counts every visible character, newline and tab
  included, by its UTF-8 encoded length. It is the length of the text once
  its escape sequences are stripped, in bytes.

- :func:`visible_width` tracks a cursor column instead: a tab advances to the
  next multiple of :data:`~.escapes.TAB_STOP` and a newline returns to column
  0. It is the column where the cursor rests after printing the text.

Width is the UTF-8 encoded length of a character and not its terminal cell
width, so a 4-byte emoji measures 4. East Asian wide characters and grapheme
clusters are not given special treatment.

An escape sequence left unterminated at the end of the input contributes
nothing to either measurement.
"""
from __future__ import annotations

# std imports
import logging

# local
from .errors import decode_utf8
from .escapes import MARKER, TAB_STOP, MARKER_BYTE, is_terminator, is_terminator_byte

logger = logging.getLogger(__name__)


def char_len(char: str) -> int:
    """
    Return the UTF-8 encoded length of one character.

    :param str char: A single character.
    :rtype: int
    :returns: 1, 2, 3 or 4.
    """
    ucs = ord(char)
    if ucs < 0x80:
        return 1
    if ucs < 0x800:
        return 2
    if ucs < 0x10000:
        return 3
    return 4


def next_column(column: int, char: str) -> int:
    """
    Return the cursor column after printing visible ``char`` at ``column``.

    :param int column: Current column, 0-indexed.
    :param str char: A single character outside of any escape sequence.
    :rtype: int
    """
    if char == '\n':
        return 0
    if char == '\t':
        return column + TAB_STOP - (column % TAB_STOP)
    return column + char_len(char)


def visible_len(text: str | bytes) -> int:
    r"""
    Given text, return its length with escape sequences removed.

    :param text: String, or UTF-8 encoded bytes, that may contain terminal
        escape sequences.
    :rtype: int
    :returns: Sum of the UTF-8 encoded lengths of every visible character.
        Tabs and newlines count as 1 like any other character.
    :raises DecodeError: ``text`` is bytes that are not valid UTF-8.

    ASCII-only input takes a fast path over raw bytes, anything else is
    decoded and scanned character by character; both agree on every input.

    Example::

        >>> visible_len('\x1b[1;4;38;2;255;255mHello!\x1b[0m')
        6
        >>> visible_len('\N{THINKING FACE}')
        4
    """
    if isinstance(text, (bytes, bytearray, memoryview)):
        data = bytes(text)
        if data.isascii():
            logger.debug('visible_len: ascii path for %d bytes', len(data))
            return _visible_len_ascii(data)
        logger.debug('visible_len: unicode path for %d bytes', len(data))
        return _visible_len_unicode(decode_utf8(data))

    text = decode_utf8(text)
    if text.isascii():
        logger.debug('visible_len: ascii path for %d chars', len(text))
        return _visible_len_ascii(text.encode('ascii'))
    logger.debug('visible_len: unicode path for %d chars', len(text))
    return _visible_len_unicode(text)


def _visible_len_ascii(data: bytes) -> int:
    """Count visible bytes of ASCII-only ``data``."""
    count = 0
    in_escape = False
    for byte in data:
        if byte == MARKER_BYTE:
            in_escape = True
        elif in_escape:
            if is_terminator_byte(byte):
                in_escape = False
        else:
            count += 1
    return count


def _visible_len_unicode(text: str) -> int:
    """Sum the UTF-8 lengths of the visible characters of ``text``."""
    count = 0
    in_escape = False
    for char in text:
        if char == MARKER:
            in_escape = True
        elif in_escape:
            if is_terminator(char):
                in_escape = False
        else:
            count += char_len(char)
    return count


def visible_width(text: str | bytes) -> int:
    r"""
    Given text, return the column where printing it leaves the cursor.

    :param text: String, or UTF-8 encoded bytes, that may contain terminal
        escape sequences.
    :rtype: int
    :returns: Final column, starting from 0. Newlines reset the column and
        tabs advance it to the next multiple of 8.
    :raises DecodeError: ``text`` is bytes that are not valid UTF-8.

    Example::

        >>> visible_width('ab\tc')
        9
        >>> visible_width('\x1b[31mfirst line\x1b[0m\nab')
        2
    """
    column = 0
    in_escape = False
    for char in decode_utf8(text):
        if char == MARKER:
            in_escape = True
        elif in_escape:
            if is_terminator(char):
                in_escape = False
        else:
            column = next_column(column, char)
    return column
