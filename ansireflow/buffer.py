"""
An escape-sequence aware byte buffer.

:class:`AnsiBuffer` stores text as UTF-8 bytes, appended to but never edited
in place, and measures the visible length of its contents.
"""
from __future__ import annotations

# std imports
from typing import Iterable

# local
from .errors import decode_utf8, encode_utf8
from .width import visible_len


class AnsiBuffer:
    r"""
    Growable byte buffer able to measure the visible size of its contents.

    :param initial: Optional starting contents, text or bytes.

    Example::

        >>> buf = AnsiBuffer()
        >>> buf.push_str('\x1b[1;4;38;2;255;255m')
        >>> buf.push_str('Hello World!')
        >>> buf.push_str('\x1b[0m')
        >>> len(buf), buf.visible_len()
        (35, 12)
    """

    __slots__ = ('_data',)

    def __init__(self, initial: str | bytes | bytearray | None = None):
        self._data = bytearray()
        if isinstance(initial, str):
            self.push_str(initial)
        elif initial is not None:
            self.push_bytes(initial)

    @classmethod
    def from_iterable(cls, items: Iterable[int | str]) -> AnsiBuffer:
        """
        Build a buffer from byte values or characters.

        Integers are taken as byte values (0-255), strings are UTF-8 encoded.
        """
        buf = cls()
        for item in items:
            if isinstance(item, int):
                buf._data.append(item)
            else:
                buf.push_str(item)
        return buf

    def push_str(self, text: str) -> None:
        """
        Append the UTF-8 encoding of ``text``.

        :raises DecodeError: ``text`` holds a lone surrogate.
        """
        self._data += encode_utf8(text)

    def push_char(self, char: str) -> None:
        """
        Append a single character, UTF-8 encoded.

        :raises ValueError: ``char`` is not exactly one character.
        """
        if len(char) != 1:
            raise ValueError(f"expected a single character, got {char!r}")
        self.push_str(char)

    def push_bytes(self, data: bytes | bytearray | memoryview) -> None:
        """Append raw bytes. They are not validated until a checked view is taken."""
        self._data += data

    def visible_len(self) -> int:
        """
        Return the length of the contents with escape sequences removed.

        :raises DecodeError: the buffer holds bytes that are not valid UTF-8.
        """
        return visible_len(bytes(self._data))

    def data(self) -> bytes:
        """Return a copy of the raw contents."""
        return bytes(self._data)

    def to_str(self) -> str:
        """
        Return the contents as text.

        :raises DecodeError: the buffer does not hold valid UTF-8.
        """
        return decode_utf8(self._data)

    # Python strings are always independent copies, so the owned and the
    # borrowed views differ in name only.
    to_string = to_str

    def to_str_unchecked(self) -> str:
        """
        Return the contents as text without validating them.

        The caller guarantees the buffer holds valid UTF-8, for instance
        because only :meth:`push_str` and :meth:`push_char` were used to fill
        it. Invalid bytes are not reported: each one is carried through as a
        lone surrogate (``surrogateescape``).
        """
        return self._data.decode('utf-8', 'surrogateescape')

    to_string_unchecked = to_str_unchecked

    def into_bytes(self) -> bytes:
        """Return the raw contents and empty the buffer."""
        data = bytes(self._data)
        self._data.clear()
        return data

    def clear(self) -> None:
        """Discard the contents."""
        self._data.clear()

    def is_ascii(self) -> bool:
        """Return True if every byte is ASCII."""
        return self._data.isascii()

    def is_empty(self) -> bool:
        """Return True if the buffer holds no bytes."""
        return not self._data

    def write(self, data: bytes | bytearray | memoryview) -> int:
        """Append ``data``, so a buffer can be used as a binary sink."""
        self.push_bytes(data)
        return len(data)

    def __len__(self) -> int:
        return len(self._data)

    def __bytes__(self) -> bytes:
        return bytes(self._data)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, AnsiBuffer):
            return self._data == other._data
        return NotImplemented

    def __repr__(self) -> str:
        return f'{type(self).__name__}({bytes(self._data)!r})'
