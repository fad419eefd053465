"""Tests for removing shared indentation."""
# std imports
import io

# 3rd party
import pytest

# local
from ansireflow import ReflowIOError, dedent, dedent_to, detect_indent

SPACED = (
    '    Blah blah blah blah\n'
    '    blah blah blah\n'
    '        blah blah, nested\n'
    '    blah blah blah blah')

TABBED = '\tBlah blah blah\n\tblah blah\n\tblah blah blah blah'


def test_dedent_spaces():
    assert dedent(SPACED) == (
        'Blah blah blah blah\n'
        'blah blah blah\n'
        '    blah blah, nested\n'
        'blah blah blah blah')


def test_dedent_tabs():
    assert dedent(TABBED) == 'Blah blah blah\nblah blah\nblah blah blah blah'


@pytest.mark.parametrize('text,expected', [
    ('', 0),
    ('no indent\nat all', 0),
    (SPACED, 4),
    (TABBED, 1),
    ('  a\n    b', 2),
    ('    a\n  b', 2),
    ('\t a\n\t\t\tb', 2),
    ('   \n      a', 6),
    ('a\n   b', 3),
])
def test_detect_indent(text, expected):
    assert detect_indent(text) == expected


def test_dedent_unindented_lines():
    assert dedent('one\ntwo') == 'one\ntwo'
    # 'one' has no indentation and does not lower it
    assert dedent('one\n  two') == 'one\ntwo'


def test_dedent_less_indented_line():
    assert dedent('    a\n  b\n      c') == '  a\nb\n    c'


def test_dedent_keeps_inner_blanks():
    assert dedent('  a  b\n  c\td') == 'a  b\nc\td'


def test_dedent_blank_lines():
    assert dedent('  a\n\n  b\n') == 'a\n\nb\n'


def test_dedent_to_text_sink():
    sink = io.StringIO()
    dedent_to(TABBED, sink)
    assert sink.getvalue() == dedent(TABBED)


def test_dedent_to_binary_sink():
    sink = io.BytesIO()
    dedent_to('  東\n  京', sink)
    assert sink.getvalue() == '東\n京'.encode()


def test_dedent_to_sink_failure(failing_sink):
    failing_sink.fail = True
    with pytest.raises(ReflowIOError):
        dedent_to(TABBED, failing_sink)
