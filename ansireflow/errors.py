"""
Exception types raised by ansireflow, and the UTF-8 decoding that raises them.

Every fallible operation either returns its result or raises one of the
classes below; nothing is swallowed, and nothing is retried.
"""
from __future__ import annotations

# std imports
import codecs


class ReflowError(Exception):
    """
    Base class for all ansireflow errors.

    Raised directly for failures that fit no narrower category, with a message
    describing what occurred.
    """


class DecodeError(ReflowError, ValueError):
    """Bytes were not valid UTF-8 at a point where text was required."""


class ReflowIOError(ReflowError, OSError):
    """Writing to or flushing an output sink failed."""


def decode_utf8(data: str | bytes | bytearray | memoryview) -> str:
    """
    Return ``data`` as text.

    :param data: Native text, which is returned unchanged, or UTF-8 encoded
        bytes.
    :raises DecodeError: ``data`` is bytes that are not valid UTF-8.
    :raises TypeError: ``data`` is neither text nor bytes.
    """
    if isinstance(data, str):
        return data
    if isinstance(data, (bytes, bytearray, memoryview)):
        try:
            return bytes(data).decode('utf-8')
        except UnicodeDecodeError as err:
            raise DecodeError(
                f'invalid utf-8 at byte offset {err.start}: {err.reason}') from err
    raise TypeError(f'expected str or bytes, got {type(data).__name__}')


def encode_utf8(text: str) -> bytes:
    """
    Return the UTF-8 encoding of ``text``.

    :raises DecodeError: ``text`` holds a lone surrogate, which has no UTF-8
        encoding.
    """
    try:
        return text.encode('utf-8')
    except UnicodeEncodeError as err:
        raise DecodeError(
            f'text is not representable as utf-8 at index {err.start}: {err.reason}') from err


class IncrementalUtf8Decoder:
    """
    Decode UTF-8 fed in pieces, reassembling characters split between pieces.

    A failed :meth:`decode` leaves the decoder as it was before the call.
    """

    def __init__(self):
        self._decoder = codecs.getincrementaldecoder('utf-8')()

    @property
    def pending(self) -> bool:
        """True while the bytes fed so far end part way through a character."""
        return bool(self._decoder.getstate()[0])

    def decode(self, data: str | bytes | bytearray | memoryview) -> str:
        """
        Return the text completed by ``data``.

        Native text is returned unchanged, provided no partial character is
        waiting for its remaining bytes.

        :raises DecodeError: ``data`` is not valid UTF-8, or is text written
            while a character is incomplete.
        :raises TypeError: ``data`` is neither text nor bytes.
        """
        if isinstance(data, str):
            if self.pending:
                raise DecodeError('text written while a utf-8 sequence is incomplete')
            return data
        if not isinstance(data, (bytes, bytearray, memoryview)):
            raise TypeError(f'expected str or bytes, got {type(data).__name__}')
        state = self._decoder.getstate()
        try:
            return self._decoder.decode(bytes(data))
        except UnicodeDecodeError as err:
            self._decoder.setstate(state)
            raise DecodeError(
                f'invalid utf-8 at byte offset {err.start}: {err.reason}') from err

    def finish(self) -> None:
        """
        Check that no partial character is left over.

        :raises DecodeError: the input ended part way through a character.
        """
        try:
            self._decoder.decode(b'', final=True)
        except UnicodeDecodeError as err:
            self._decoder.reset()
            raise DecodeError(f'truncated utf-8 at end of input: {err.reason}') from err
