"""Tests for iteration over visible characters."""
# 3rd party
import pytest

# local
from ansireflow import DecodeError, iter_visible, nth_visible, strip_sequences

SGR_RED = '\x1b[31m'
SGR_RESET = '\x1b[0m'
SGR_FANCY = '\x1b[1;4;38;2;255;255m'


@pytest.mark.parametrize('text,expected', [
    # empty and plain
    ('', ''),
    ('hello', 'hello'),
    ('hello world', 'hello world'),
    # SGR sequences
    (SGR_RED, ''),
    (SGR_RESET, ''),
    ('\x1b[m', ''),
    (f'{SGR_RED}red{SGR_RESET}', 'red'),
    (f'{SGR_FANCY}Hello!{SGR_RESET}', 'Hello!'),
    ('\x1b[1m\x1b[31mbold red\x1b[0m', 'bold red'),
    # other sequences end at their first letter too
    ('a\x1b[2Cb', 'ab'),
    ('\x1b[5;10HAB', 'AB'),
    # multi-byte text
    (f'{SGR_FANCY}\N{THINKING FACE}{SGR_RESET}', '\N{THINKING FACE}'),
    (f'{SGR_RED}東京{SGR_RESET}', '東京'),
    # control characters are visible to this iterator
    ('a\tb\nc', 'a\tb\nc'),
])
def test_strip_sequences(text, expected):
    assert strip_sequences(text) == expected
    assert ''.join(iter_visible(text)) == expected


@pytest.mark.parametrize('text,expected', [
    # lone escape at end
    ('abc\x1b', 'abc'),
    # unterminated sequences swallow the rest of the input
    ('\x1b[', ''),
    ('text\x1b[31;', 'text'),
    ('text\x1b[123', 'text'),
    # the first letter terminates, even if it is not a CSI final byte
    ('a\x1bbc', 'ac'),
    ('text\x1b[more', 'textore'),
    # ESC inside a sequence does not restart it
    ('\x1b[\x1b[31mX', 'X'),
])
def test_malformed_sequences(text, expected):
    assert strip_sequences(text) == expected


def test_iter_visible_is_lazy():
    """Only as much input as needed is consumed."""
    it = iter_visible(f'{SGR_RED}ab{SGR_RESET}c')
    assert next(it) == 'a'
    assert next(it) == 'b'
    assert next(it) == 'c'
    with pytest.raises(StopIteration):
        next(it)


def test_iter_visible_restartable():
    text = f'{SGR_RED}abc{SGR_RESET}'
    assert list(iter_visible(text)) == list(iter_visible(text)) == ['a', 'b', 'c']


def test_iter_visible_bytes():
    data = f'{SGR_RED}été{SGR_RESET}'.encode('utf-8')
    assert list(iter_visible(data)) == ['é', 't', 'é']
    assert strip_sequences(bytearray(data)) == 'été'


def test_iter_visible_invalid_bytes():
    with pytest.raises(DecodeError):
        iter_visible(b'abc\xff')
    # DecodeError is also a ValueError
    with pytest.raises(ValueError):
        strip_sequences(b'\xc3')


def test_iter_visible_wrong_type():
    with pytest.raises(TypeError):
        iter_visible(42)


def test_nth_visible():
    text = f'{SGR_RED}ab{SGR_RESET}\x1b[1mcd'
    assert nth_visible(text, 0) == 'a'
    assert nth_visible(text, 2) == 'c'
    assert nth_visible(text, 3) == 'd'
    assert nth_visible(text, 4) is None
    assert nth_visible('', 0) is None
    with pytest.raises(ValueError):
        nth_visible(text, -1)
