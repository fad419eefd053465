"""
Truncation of text to a visible width, ending in a tail marker.
"""
from __future__ import annotations

# std imports
import logging

from typing import IO, Any, List

# local
from .errors import IncrementalUtf8Decoder, decode_utf8
from .escapes import MARKER, is_terminator
from .width import next_column, visible_width
from .writer import StyleWriter

logger = logging.getLogger(__name__)

# Appended where text is cut.
DEFAULT_TAIL = '...'


class TruncateWriter:
    r"""
    Writer cutting text that is wider than ``width`` visible columns.

    :param int width: Maximum visible width of the output.
    :param tail: Marker appended where the text is cut, default ``'...'``.
    :param sink: Binary file-like object receiving the output, see
        :class:`~.writer.StyleWriter`.
    :raises ValueError: ``width`` is negative.

    Text that fits within ``width`` is written unchanged. Wider text is cut
    so that it and the tail together fit within ``width``: the active style
    is reset at the cut and the tail is written unstyled. When ``width`` is
    narrower than the tail itself, the output is the tail alone.

    Characters that fit before the cut are written straight away. Those that
    would only fit without the tail are held back until either the text ends,
    and they are written, or the text overflows, and they are dropped.

    Example::

        >>> writer = TruncateWriter(8)
        >>> writer.write('\x1b[1mhello world\x1b[0m')
        19
        >>> writer.close()
        >>> writer.getvalue()
        b'\x1b[1mhello\x1b[0m...'
    """

    def __init__(self, width: int, tail: str | bytes = DEFAULT_TAIL,
                 sink: IO[bytes] | Any | None = None):
        if width < 0:
            raise ValueError(f"width must be non-negative, got {width}")
        self.width = width
        self.tail = decode_utf8(tail)
        self.tail_width = visible_width(self.tail)
        self.column = 0
        self.in_escape = False
        self.done = False
        self.style_writer = StyleWriter(sink)
        self._held: List[str] = []
        self._decoder = IncrementalUtf8Decoder()

    @property
    def budget(self) -> int:
        """Visible columns available to the text when the tail is appended."""
        return self.width - self.tail_width

    def write(self, text: str | bytes) -> int:
        """
        Write text, cutting it once it overflows.

        :returns: Length of ``text`` as given, in characters or bytes, whether
            or not any of it was kept.
        :raises DecodeError: ``text`` is not valid UTF-8.
        :raises ReflowIOError: the sink failed.
        """
        chars = self._decoder.decode(text)
        if self.done:
            return len(text)
        if self.budget < 0:
            self._write_tail_only()
            return len(text)

        holding = bool(self._held)
        kept: List[str] = self._held if holding else []
        for char in chars:
            if char == MARKER:
                self.in_escape = True
            elif self.in_escape:
                if is_terminator(char):
                    self.in_escape = False
            else:
                column = next_column(self.column, char)
                if column > self.width:
                    if not holding:
                        self.style_writer.write(''.join(kept))
                    self._cut()
                    return len(text)
                if column > self.budget and not holding:
                    self.style_writer.write(''.join(kept))
                    kept = self._held
                    holding = True
                self.column = column
            kept.append(char)
        if not holding:
            self.style_writer.write(''.join(kept))
        return len(text)

    def _cut(self) -> None:
        logger.debug('truncate: cut at column %d of %d', self.column, self.width)
        self._held.clear()
        self.style_writer.reset()
        self.style_writer.write(self.tail)
        self.done = True

    def _write_tail_only(self) -> None:
        logger.debug('truncate: width %d is narrower than tail %r', self.width, self.tail)
        self.style_writer.write(self.tail)
        self.done = True

    def close(self) -> None:
        """
        Finish writing, keeping any held characters since the text fit.

        :raises DecodeError: the last ``bytes`` write ended part way through a
            multi-byte character.
        :raises ReflowIOError: the sink failed.
        """
        self._decoder.finish()
        if not self.done:
            if self.budget < 0:
                self._write_tail_only()
            else:
                logger.debug('truncate: text fits in %d columns', self.width)
                self.style_writer.write(''.join(self._held))
                self._held.clear()
                self.done = True
        self.style_writer.close()

    def getvalue(self) -> bytes:
        """Return everything written to the sink so far."""
        return self.style_writer.getvalue()

    def __enter__(self) -> TruncateWriter:
        return self

    def __exit__(self, *exc_info) -> None:
        if exc_info[0] is None:
            self.close()


def truncate(text: str | bytes, width: int,
             tail: str | bytes = DEFAULT_TAIL) -> str | bytes:
    r"""
    Return text cut to at most ``width`` visible columns, tail included.

    :param text: Text, or UTF-8 encoded bytes, that may contain terminal
        escape sequences.
    :param int width: Maximum visible width of the result.
    :param tail: Marker appended where the text is cut.
    :returns: Truncated text, of the same type as ``text``.
    :raises DecodeError: ``text`` or ``tail`` is bytes that are not valid
        UTF-8.
    :raises ValueError: ``width`` is negative.

    The visible width of the result is ``min(visible_width(text), width)``
    when every visible character is a single byte and ``width`` is at least
    the width of the tail. A multi-byte character that does not fit is
    dropped whole, so the result may fall short of ``width``, but never
    exceeds it. When ``width`` is narrower than the tail, the result is the
    tail alone.

    Example::

        >>> truncate('hello world', 8)
        'hello...'
        >>> truncate('hello', 5)
        'hello'
        >>> truncate('hello', 2)
        '...'
    """
    writer = TruncateWriter(width, tail)
    writer.write(text)
    writer.close()
    output = writer.getvalue()
    if isinstance(text, str):
        return output.decode('utf-8')
    return output
