"""
Indentation of every line of a text.

Indentation is prepended as-is, so it never interacts with escape sequences
inside the lines.
"""
from __future__ import annotations

# std imports
import enum

from typing import List, NamedTuple, Optional


class IndentStyle(enum.Enum):
    """Character used to indent text."""
    SPACES = ' '
    TABS = '\t'

    def as_str(self) -> str:
        """Return the indentation character."""
        return self.value


class LineEnding(enum.Enum):
    """Line separator of a text."""
    NEWLINE = '\n'
    CARRIAGE_RETURN = '\r\n'

    @classmethod
    def detect(cls, text: str) -> LineEnding:
        r"""Return :attr:`CARRIAGE_RETURN` if ``text`` contains ``'\r\n'``, else :attr:`NEWLINE`."""
        return cls.CARRIAGE_RETURN if '\r\n' in text else cls.NEWLINE

    def as_str(self) -> str:
        """Return the separator."""
        return self.value


class IndentOptions(NamedTuple):
    """
    How text should be indented (immutable).

    :param style: Indent with spaces or with tabs.
    :param number: How many indentation characters to prepend.
    :param line_ending: Separator to rejoin lines with, or None to use the one
        detected in the input.
    """
    style: IndentStyle = IndentStyle.SPACES
    number: int = 4
    line_ending: Optional[LineEnding] = None

    @classmethod
    def spaces(cls, number: int) -> IndentOptions:
        """Indent with ``number`` spaces."""
        return cls(IndentStyle.SPACES, number)

    @classmethod
    def tabs(cls, number: int) -> IndentOptions:
        """Indent with ``number`` tabs."""
        return cls(IndentStyle.TABS, number)

    @classmethod
    def four_spaces(cls) -> IndentOptions:
        return cls.spaces(4)

    @classmethod
    def two_spaces(cls) -> IndentOptions:
        return cls.spaces(2)

    @classmethod
    def one_tab(cls) -> IndentOptions:
        return cls.tabs(1)

    def make_indent(self) -> str:
        """Return the full indentation string."""
        return self.style.as_str() * self.number

    def get_line_ending(self, text: str) -> str:
        """Return the configured separator, or the one detected in ``text``."""
        line_ending = self.line_ending or LineEnding.detect(text)
        return line_ending.as_str()

    def indent_line(self, line: str) -> str:
        """Indent ``line``, unless it already starts with the indentation."""
        indentation = self.make_indent()
        if line.startswith(indentation):
            return line
        return indentation + line

    def indent_line_unchecked(self, line: str) -> str:
        """Indent ``line`` whatever it starts with."""
        return self.make_indent() + line


def split_lines(text: str) -> List[str]:
    r"""
    Return the lines of ``text``, split on ``'\n'`` and ``'\r\n'`` only.

    A final line ending does not start an empty line. Other separators
    recognized by :meth:`str.splitlines`, such as a bare ``'\r'`` or a form
    feed, are kept inside the line.
    """
    lines = text.split('\n')
    last = lines.pop()
    lines = [line[:-1] if line.endswith('\r') else line for line in lines]
    if last:
        lines.append(last)
    return lines


def indent(text: str, options: IndentOptions = IndentOptions(),
           checked: bool = False) -> str:
    r"""
    Return ``text`` with every line indented.

    :param text: Text to indent.
    :param options: How to indent.
    :param checked: When True, lines already starting with the indentation
        are left alone.
    :returns: Indented lines, joined with the separator from ``options`` or,
        by default, the one detected in ``text``.

    Example::

        >>> indent('One\nTwo\nThree', IndentOptions.one_tab())
        '\tOne\n\tTwo\n\tThree'
    """
    if not text:
        return text
    separator = options.get_line_ending(text)
    indent_line = options.indent_line if checked else options.indent_line_unchecked
    return separator.join(indent_line(line) for line in split_lines(text))


def indent_in_place(lines: List[str], options: IndentOptions = IndentOptions()) -> None:
    """Indent each string of the ``lines`` list, modifying the list."""
    indentation = options.make_indent()
    for idx, line in enumerate(lines):
        lines[idx] = indentation + line
