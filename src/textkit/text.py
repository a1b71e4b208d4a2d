"""Predicates, whitespace normalization and simple composition of strings.

All functions in this module treat a missing (`None`) text argument as the
empty string.
"""

__docformat__ = 'google'

__all__ = [
    # Predicates
    'is_empty',
    'contains',
    'starts_with',
    'ends_with',
    # Whitespace
    'collapse_whitespace',
    'strip_newlines',
    # Composition
    'slice',
    'repeat',
    'join',
    'surround',
    'quote',
    'unquote'
]

from typing import Any, Iterable, Optional

from textkit.helpers import text_input
from textkit.patterns import (
    DEFAULT_QUOTE,
    BLANK_PATTERN,
    WHITESPACE_RUN_PATTERN,
    NEWLINES_PATTERN
)

@text_input
def is_empty(s: str) -> bool:
    """
    Check if a string is empty or contains only whitespace.

    Example:
        >>> is_empty(' \\t\\n')
        True
        >>> is_empty(' a ')
        False
    """
    return BLANK_PATTERN.fullmatch(s) is not None

@text_input
def contains(s: str, sub: str) -> bool:
    """Check if a string contains a substring. Always true for an empty substring."""
    return sub in s

@text_input
def starts_with(s: str, prefix: str) -> bool:
    """Check if a string starts with a prefix. Always true for an empty prefix."""
    return s.startswith(prefix)

@text_input
def ends_with(s: str, suffix: str) -> bool:
    """Check if a string ends with a suffix. Always true for an empty suffix."""
    return s.endswith(suffix)

@text_input
def collapse_whitespace(s: str) -> str:
    """
    Replace every run of whitespace with a single space and strip both ends.

    Example:
        >>> collapse_whitespace('  a \\t b\\n\\nc ')
        'a b c'
    """
    return WHITESPACE_RUN_PATTERN.sub(' ', s).strip(' ')

@text_input
def strip_newlines(s: str) -> str:
    """
    Replace every run of line breaks with a single space.

    Example:
        >>> strip_newlines('a\\r\\nb\\n\\n\\nc')
        'a b c'
    """
    return NEWLINES_PATTERN.sub(' ', s)

@text_input
def slice(s: str, start: int, end: Optional[int] = None) -> str:
    """
    Extract a section of a string. Negative indices count from the end.

    Example:
        >>> slice('hello world', 6)
        'world'
        >>> slice('hello world', 0, -6)
        'hello'
    """
    return s[start:end]

@text_input
def repeat(s: str, n: int = 1) -> str:
    """
    Repeat a string `n` times. Zero or negative `n` gives an empty string.

    Example:
        >>> repeat('ab', 3)
        'ababab'
    """
    return s * n

_MISSING = object()

def join(separator: Any, coll: Optional[Iterable[Any]] = _MISSING) -> str:
    """
    Join items into one string, optionally with a separator between them.

    Called with a single argument, the argument is the collection and no
    separator is used. Items are converted with `str`; `None` items become
    empty strings, and a `None` collection joins to an empty string.

    Args:
        separator: Separator inserted between items, or the collection itself
            when `coll` is omitted
        coll: Items to join

    Example:
        >>> join('-', ['a', 'b', 'c'])
        'a-b-c'
        >>> join(['a', 'b'])
        'ab'
        >>> join(', ', [1, None, 'x'])
        '1, , x'
        >>> join('-', None)
        ''
    """
    if coll is _MISSING:
        separator, coll = '', separator
    if coll is None:
        return ''
    items = ('' if item is None else str(item) for item in coll)
    return str(separator).join(items)

@text_input
def surround(s: str, wrap: str) -> str:
    """
    Surround a string with another string.

    Example:
        >>> surround('foo', '**')
        '**foo**'
    """
    return join([wrap, s, wrap])

@text_input
def quote(s: str, qchar: str = DEFAULT_QUOTE) -> str:
    """
    Wrap a string in quote characters.

    Example:
        >>> print(quote('foo'))
        "foo"
        >>> quote('foo', '*')
        '*foo*'
    """
    return surround(s, qchar)

@text_input
def unquote(s: str, qchar: str = DEFAULT_QUOTE) -> str:
    """
    Remove matching quote characters from both ends of a string.

    Strings too short to hold an opening and closing quote are returned unchanged.

    Args:
        s: Input text
        qchar: Quote character (or string) expected at both ends

    Returns:
        Interior of the string if it is quoted, else the unmodified string

    Example:
        >>> unquote('"foo"')
        'foo'
        >>> unquote('*foo*', '*')
        'foo'
        >>> unquote('"foo')
        '"foo'
        >>> print(unquote('"'))
        "
    """
    width = len(qchar or '')
    if width == 0 or len(s) < 2 * width:
        return s
    elif s.startswith(qchar) and s.endswith(qchar):
        return s[width:-width]
    else:
        return s
