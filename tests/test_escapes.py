"""Tests for escape marker and terminator classification."""
# 3rd party
import pytest

# local
from ansireflow import MARKER, RESET, TAB_STOP, is_marker, is_reset, is_terminator
from ansireflow.escapes import TERMINATOR_RANGES, is_terminator_byte


def test_constants():
    assert MARKER == '\x1b'
    assert RESET == '\x1b[0m'
    assert TAB_STOP == 8
    assert TERMINATOR_RANGES == ((0x40, 0x5a), (0x61, 0x7a))


def test_is_marker():
    assert is_marker('\x1b')
    assert not is_marker('[')
    assert not is_marker('\x9b')  # C1 CSI is not recognised
    assert not is_marker('e')


@pytest.mark.parametrize('ucs', list(range(0x40, 0x5b)) + list(range(0x61, 0x7b)))
def test_is_terminator_letters(ucs):
    assert is_terminator(chr(ucs))
    assert is_terminator_byte(ucs)


@pytest.mark.parametrize('char,name', [
    ('0', 'digit'),
    (';', 'separator'),
    ('[', 'CSI bracket 0x5b'),
    ('`', 'backtick 0x60'),
    ('{', 'brace 0x7b'),
    ('?', 'private marker 0x3f'),
    ('\x1b', 'ESC'),
    (' ', 'space'),
    ('Ł', 'code point whose low byte is 0x41'),
    ('쁭', 'code point whose low byte is 0x6d'),
    ('\N{THINKING FACE}', 'emoji'),
])
def test_is_not_terminator(char, name):
    assert not is_terminator(char), name


@pytest.mark.parametrize('span,expected', [
    ('\x1b[0m', True),
    (b'\x1b[0m', True),
    ('\x1b[1;0m', False),
    ('\x1b[m', False),
    ('\x1b[31m', False),
    ('\x1b[10m', False),
    ('\x1b[0K', False),
])
def test_is_reset(span, expected):
    assert is_reset(span) is expected
