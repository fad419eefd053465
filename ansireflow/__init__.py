"""
ansireflow module.

Measure, pad and truncate text containing terminal escape sequences.
"""
# re-export the public functions & classes from top-level module path, so
# that 'from ansireflow.width import visible_len' may be written as
# 'from ansireflow import visible_len'.

# std imports
import logging

# local
from .errors import ReflowError, DecodeError, ReflowIOError, decode_utf8, encode_utf8
from .escapes import MARKER, RESET, TAB_STOP, is_reset, is_marker, is_terminator
from .visible import iter_visible, nth_visible, strip_sequences
from .width import char_len, visible_len, visible_width
from .buffer import AnsiBuffer
from .writer import StyleWriter
from .padding import PaddingWriter, pad
from .truncate import DEFAULT_TAIL, TruncateWriter, truncate
from .indent import IndentStyle, LineEnding, IndentOptions, indent, indent_in_place
from .dedent import dedent, dedent_to, detect_indent

logging.getLogger(__name__).addHandler(logging.NullHandler())

# The __all__ attribute defines the items exported from statement,
# 'from ansireflow import *', but also to say, "This is the public API".
__all__ = (
    # errors
    'ReflowError', 'DecodeError', 'ReflowIOError', 'decode_utf8', 'encode_utf8',
    # escape classification
    'MARKER', 'RESET', 'TAB_STOP', 'is_marker', 'is_terminator', 'is_reset',
    # scanning
    'iter_visible', 'strip_sequences', 'nth_visible',
    'char_len', 'visible_len', 'visible_width',
    # rewriting
    'AnsiBuffer', 'StyleWriter',
    'PaddingWriter', 'pad',
    'DEFAULT_TAIL', 'TruncateWriter', 'truncate',
    # indentation
    'IndentStyle', 'LineEnding', 'IndentOptions', 'indent', 'indent_in_place',
    'dedent', 'dedent_to', 'detect_indent',
)

# Keep in sync with version.json, which setup.py reads.
__version__ = '0.1.0'
