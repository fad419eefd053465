"""
Right-padding of every line to a minimum visible width.

Padding counts visible columns, so escape sequences inside a line do not
shorten its padding, and it closes any open style before the padding spaces
so they are never colored.
"""
from __future__ import annotations

# std imports
import logging

from typing import IO, Any

# local
from .errors import IncrementalUtf8Decoder
from .escapes import MARKER, is_terminator
from .width import next_column
from .writer import StyleWriter

logger = logging.getLogger(__name__)


class PaddingWriter:
    r"""
    Writer padding each line with spaces up to ``width`` visible columns.

    :param int width: Minimum visible width of every line.
    :param sink: Binary file-like object receiving the output, see
        :class:`~.writer.StyleWriter`.
    :raises ValueError: ``width`` is negative.

    On every newline, and on :meth:`close` when the text does not end with
    one, the active style is reset, then a line short of ``width`` is padded
    with spaces, then the newline is written. Tabs count up to the next tab
    stop.

    Example::

        >>> writer = PaddingWriter(6)
        >>> writer.write('\x1b[31mred\x1b[0m\nblue')
        17
        >>> writer.close()
        >>> writer.getvalue()
        b'\x1b[31mred\x1b[0m   \nblue  '
    """

    def __init__(self, width: int, sink: IO[bytes] | Any | None = None):
        if width < 0:
            raise ValueError(f"width must be non-negative, got {width}")
        self.width = width
        self.column = 0
        self.in_escape = False
        self.style_writer = StyleWriter(sink)
        self._decoder = IncrementalUtf8Decoder()

    def write(self, text: str | bytes) -> int:
        """
        Write text, padding each line it completes.

        :returns: Length of ``text`` as given, in characters or bytes.
        :raises DecodeError: ``text`` is not valid UTF-8.
        :raises ReflowIOError: the sink failed. The column counts only what
            was written before the failure.
        """
        chars = self._decoder.decode(text)
        column = self.column
        in_escape = self.in_escape
        start = 0
        for idx, char in enumerate(chars):
            if char == MARKER:
                in_escape = True
            elif in_escape:
                if is_terminator(char):
                    in_escape = False
            elif char == '\n':
                self.style_writer.write(chars[start:idx])
                self.column, self.in_escape = column, False
                self._pad()
                self.style_writer.write('\n')
                self.column = column = 0
                start = idx + 1
            else:
                column = next_column(column, char)
        self.style_writer.write(chars[start:])
        self.column, self.in_escape = column, in_escape
        return len(text)

    def _pad(self) -> None:
        self.style_writer.reset()
        if self.column < self.width:
            self.style_writer.write(' ' * (self.width - self.column))

    def close(self) -> None:
        """
        Pad the final line, if the text did not end with a newline.

        An escape sequence left unterminated at the end of the text is
        dropped, and the line is padded as if it were absent.

        :raises DecodeError: the last ``bytes`` write ended part way through a
            multi-byte character.
        :raises ReflowIOError: the sink failed.
        """
        self._decoder.finish()
        if self.in_escape:
            self.style_writer.discard_pending()
            self.in_escape = False
        if self.column != 0:
            self._pad()
            self.column = 0
        self.style_writer.close()

    def getvalue(self) -> bytes:
        """Return everything written to the sink so far."""
        return self.style_writer.getvalue()

    def __enter__(self) -> PaddingWriter:
        return self

    def __exit__(self, *exc_info) -> None:
        if exc_info[0] is None:
            self.close()


def pad(text: str | bytes, width: int) -> str | bytes:
    r"""
    Return text with every line right-padded to ``width`` visible columns.

    :param text: Text, or UTF-8 encoded bytes, that may contain terminal
        escape sequences.
    :param int width: Minimum visible width of every line.
    :returns: Padded text, of the same type as ``text``.
    :raises DecodeError: ``text`` is bytes that are not valid UTF-8.
    :raises ValueError: ``width`` is negative.

    Example::

        >>> pad('ab\ncdef', 4)
        'ab  \ncdef'
    """
    writer = PaddingWriter(width)
    writer.write(text)
    writer.close()
    output = writer.getvalue()
    logger.debug('pad: %d columns, %d in, %d bytes out', width, len(text), len(output))
    if isinstance(text, str):
        return output.decode('utf-8')
    return output
