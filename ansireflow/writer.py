"""
Style tracking for text streamed through to an output sink.

:class:`StyleWriter` forwards text to a binary sink unchanged while watching
the escape sequences that pass through it. It remembers the most recent
color/style (SGR) sequence, so that a caller injecting line breaks or other
text can close the active style with :meth:`StyleWriter.reset` and re-open it
afterwards with :meth:`StyleWriter.restore`.
"""
from __future__ import annotations

# std imports
import io

from typing import IO, Any

# local
from .buffer import AnsiBuffer
from .errors import (
    ReflowError,
    ReflowIOError,
    IncrementalUtf8Decoder,
    decode_utf8,
    encode_utf8,
)
from .escapes import MARKER, SGR_FINAL, RESET_BYTES, is_reset, is_terminator

_MARKER_BYTES = MARKER.encode('ascii')


class StyleWriter:
    r"""
    Pass-through writer that tracks the currently open terminal style.

    :param sink: Binary file-like object receiving the output; anything with a
        ``write(bytes)`` method. A ``flush()`` method is called when present.
        Defaults to a new :class:`io.BytesIO`.

    Characters outside of escape sequences go straight to the sink. The
    characters of an escape sequence are held back until its terminator
    arrives, then written out as a whole. A reset sequence (ending in
    ``[0m``) forgets the remembered style; any other sequence ending in ``m``
    becomes the remembered style.

    Example::

        >>> writer = StyleWriter()
        >>> writer.write('\x1b[31mred')
        8
        >>> writer.reset(); writer.write('\n'); writer.restore()
        1
        >>> writer.getvalue()
        b'\x1b[31mred\x1b[0m\n\x1b[31m'
    """

    def __init__(self, sink: IO[bytes] | Any | None = None):
        self.sink = io.BytesIO() if sink is None else sink
        #: True while inside an unterminated escape sequence.
        self.in_escape = False
        #: Bytes of the open escape sequence, not yet written to the sink.
        self.pending_escape = b''
        #: Bytes of the most recent non-reset SGR sequence.
        self.last_style = b''
        #: True while a non-reset style is active.
        self.style_dirty = False
        self._decoder = IncrementalUtf8Decoder()

    @classmethod
    def from_bytes(cls, initial: bytes) -> StyleWriter:
        """Create a writer whose output starts with the given ``initial`` bytes."""
        sink = io.BytesIO(initial)
        sink.seek(0, io.SEEK_END)
        return cls(sink)

    @classmethod
    def from_str(cls, initial: str) -> StyleWriter:
        """Create a writer whose output starts with the given ``initial`` text."""
        return cls.from_bytes(encode_utf8(initial))

    def write(self, text: str | bytes) -> int:
        """
        Write text through to the sink, tracking escape sequences.

        :param text: Text, or UTF-8 encoded bytes. A multi-byte character may be
            split across consecutive ``bytes`` writes.
        :returns: Length of ``text`` as given, in characters or bytes.
        :raises DecodeError: ``text`` is not valid UTF-8, or is text holding a
            lone surrogate.
        :raises ReflowIOError: the sink failed; characters before the failing
            one have been written and tracked, the failing one has not.
        """
        chars = self._decoder.decode(text)
        idx = 0
        end = len(chars)
        while idx < end:
            if not self.in_escape:
                marker = chars.find(MARKER, idx)
                if marker == -1:
                    marker = end
                if marker > idx:
                    self._emit(encode_utf8(chars[idx:marker]))
                idx = marker
                if idx == end:
                    break
            self._write_escape_char(chars[idx])
            idx += 1
        self.flush()
        return len(text)

    def _write_escape_char(self, char: str) -> None:
        if char == MARKER:
            self.in_escape = True
            self.pending_escape += _MARKER_BYTES
            return

        span = self.pending_escape + encode_utf8(char)
        if not is_terminator(char):
            self.pending_escape = span
            return

        self._emit(span)
        self.in_escape = False
        self.pending_escape = b''
        if is_reset(span):
            self.last_style = b''
            self.style_dirty = False
        elif char == SGR_FINAL:
            self.last_style = span
            self.style_dirty = True

    def _emit(self, data: bytes) -> None:
        try:
            self.sink.write(data)
        except OSError as err:
            raise ReflowIOError(f'write to sink failed: {err}') from err

    def discard_pending(self) -> None:
        """Drop the unterminated escape sequence held back, if any."""
        self.in_escape = False
        self.pending_escape = b''

    def reset(self) -> None:
        """
        Close the active style by writing the reset sequence.

        Does nothing unless a style is active. The remembered style is kept, so
        :meth:`restore` can re-open it afterwards.
        """
        if not self.style_dirty:
            return
        self._emit(RESET_BYTES)
        self.style_dirty = False

    def restore(self) -> None:
        """Re-open the remembered style by writing its sequence again, if any."""
        if not self.last_style:
            return
        self._emit(self.last_style)
        self.style_dirty = True

    def last_style_str(self) -> str:
        """
        Return the remembered style sequence as text.

        :raises DecodeError: the remembered bytes are not valid UTF-8.
        """
        return decode_utf8(self.last_style)

    def flush(self) -> None:
        """Flush the sink, if it can be flushed."""
        flush = getattr(self.sink, 'flush', None)
        if flush is None:
            return
        try:
            flush()
        except OSError as err:
            raise ReflowIOError(f'flush of sink failed: {err}') from err

    def close(self) -> None:
        """
        Finish writing.

        :raises DecodeError: the last ``bytes`` write ended part way through a
            multi-byte character.
        """
        self._decoder.finish()
        self.flush()

    def getvalue(self) -> bytes:
        """
        Return everything written to the sink so far.

        :raises ReflowError: the sink does not keep what is written to it.
        """
        if isinstance(self.sink, AnsiBuffer):
            return bytes(self.sink)
        getvalue = getattr(self.sink, 'getvalue', None)
        if getvalue is None:
            raise ReflowError(
                f'sink of type {type(self.sink).__name__} does not retain its output')
        return getvalue()

    def getvalue_str(self) -> str:
        """
        Return everything written to the sink so far, as text.

        :raises DecodeError: the output is not valid UTF-8.
        """
        return decode_utf8(self.getvalue())

    def __enter__(self) -> StyleWriter:
        return self

    def __exit__(self, *exc_info) -> None:
        if exc_info[0] is None:
            self.close()
