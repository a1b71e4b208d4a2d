r"""Escaping, trimming, replacement and splitting built on dynamically constructed patterns.

Every function here that takes literal text destined for a regex escapes it
with `escape_regexp` first. Arguments that are already compiled patterns are
never escaped.

Replacement strings are handed to `re.sub` as-is, so back-references use
Python syntax (`\1`, `\g<name>`, `\g<0>`).
"""

__docformat__ = 'google'

__all__ = [
    'escape_regexp',
    'trim',
    'ltrim',
    'rtrim',
    'replace',
    'replace_first',
    'split'
]

import logging
import re
from typing import Callable, List, Union

from textkit.errors import InvalidArgument
from textkit.helpers import text_input
from textkit.patterns import (
    METACHARACTER_PATTERN,
    BACKSPACE_PATTERN,
    DEFAULT_STRIP_CHARS,
    DEFAULT_SPLIT_PATTERN
)

logger = logging.getLogger(__name__)

Match = Union[str, re.Pattern]
Replacement = Union[str, Callable[[str], str]]

@text_input
def escape_regexp(s: str) -> str:
    r"""
    Escape every regex metacharacter so the result matches `s` literally.

    The result is also safe inside a character class.

    Args:
        s: Literal text

    Returns:
        Text with each metacharacter preceded by a backslash

    Example:
        >>> print(escape_regexp('1+1=2'))
        1\+1=2
        >>> print(escape_regexp('[a-z]*'))
        \[a\-z\]\*
        >>> print(escape_regexp('a/b'))
        a\/b
    """
    escaped = METACHARACTER_PATTERN.sub(r'\\\1', s)
    return BACKSPACE_PATTERN.sub(r'\\x08', escaped)

def _character_class(chars: str) -> str:
    return f'[{escape_regexp(chars)}]'

@text_input
def trim(s: str, chars: str = DEFAULT_STRIP_CHARS) -> str:
    """
    Remove runs of the given characters from both ends of a string.

    Args:
        s: Input text
        chars: Strip-set; every character in it is removable. An empty
            strip-set leaves `s` untouched.

    Returns:
        Text without leading or trailing strip-set characters

    Example:
        >>> trim('  hello  ')
        'hello'
        >>> trim('-_-hello-_-', '_-')
        'hello'
        >>> trim('  hello  ', '')
        '  hello  '
    """
    if not chars:
        return s
    strip_class = _character_class(chars)
    return re.sub(f'\\A{strip_class}+|{strip_class}+\\Z', '', s)

@text_input
def ltrim(s: str, chars: str = DEFAULT_STRIP_CHARS) -> str:
    """
    Remove a run of the given characters from the start of a string.

    Example:
        >>> ltrim('  hello  ')
        'hello  '
        >>> ltrim('xxhixx', 'x')
        'hixx'
    """
    if not chars:
        return s
    return re.sub(f'\\A{_character_class(chars)}+', '', s)

@text_input
def rtrim(s: str, chars: str = DEFAULT_STRIP_CHARS) -> str:
    """
    Remove a run of the given characters from the end of a string.

    Example:
        >>> rtrim('  hello  ')
        '  hello'
        >>> rtrim('xxhixx', 'x')
        'xxhi'
    """
    if not chars:
        return s
    return re.sub(f'{_character_class(chars)}+\\Z', '', s)

def _compile_match(match: Match) -> re.Pattern:
    """
    Build a fresh pattern for a literal string or an existing compiled pattern.

    Raises:
        InvalidArgument: If `match` is neither a string nor a compiled pattern.
    """
    if isinstance(match, str):
        return re.compile(escape_regexp(match))
    elif isinstance(match, re.Pattern):
        return re.compile(match.pattern)
    else:
        raise InvalidArgument(f'Invalid match arg: {match!r}', argument=match)

def _substitute(s: str, match: Match, replacement: Replacement, count: int) -> str:
    pattern = _compile_match(match)
    logger.debug('Substituting %r in %d characters (count=%d)', pattern.pattern, len(s), count)

    if callable(replacement):
        return pattern.sub(lambda m: replacement(m.group(0)), s, count=count)
    else:
        return pattern.sub(replacement, s, count=count)

@text_input
def replace(s: str, match: Match, replacement: Replacement) -> str:
    r"""
    Replace every occurrence of `match` in a string.

    Args:
        s: Input text
        match: Literal substring (matched exactly) or compiled pattern
            (rebuilt from its source text, so flags given to `re.compile`
            are dropped; inline flags such as `(?i)` still apply)
        replacement: Replacement string, which may contain back-references,
            or a function receiving each matched substring

    Returns:
        Text with all occurrences replaced

    Raises:
        InvalidArgument: If `match` is neither a string nor a compiled pattern.

    Example:
        >>> replace('aaa', 'a', 'b')
        'bbb'
        >>> replace('1.5.0', '.', '-')
        '1-5-0'
        >>> replace('snake_case_name', re.compile('_(\\w)'), '<\\1>')
        'snake<c>ase<n>ame'
        >>> replace('one two', re.compile('\\w+'), str.upper)
        'ONE TWO'
    """
    return _substitute(s, match, replacement, count=0)

@text_input
def replace_first(s: str, match: Match, replacement: Replacement) -> str:
    """
    Replace the first occurrence of `match` in a string.

    Accepts the same arguments as `replace`.

    Raises:
        InvalidArgument: If `match` is neither a string nor a compiled pattern.

    Example:
        >>> replace_first('aaa', 'a', 'b')
        'baa'
        >>> replace_first('a+b+c', '+', ' plus ')
        'a plus b+c'
    """
    return _substitute(s, match, replacement, count=1)

@text_input
def split(s: str, sep: Match = DEFAULT_SPLIT_PATTERN, limit: int = 0) -> List[str]:
    r"""
    Split a string on a literal separator or a compiled pattern.

    Args:
        s: Input text
        sep: Literal separator or compiled pattern, used as-is with its
            flags. Defaults to a single whitespace character. An empty
            separator splits into characters.
        limit: Maximum number of splits plus one; the last piece holds the
            remainder. 0 means unlimited with trailing empty pieces dropped,
            a negative value means unlimited with trailing empty pieces kept.
            Groups captured by a pattern separator are returned as extra
            pieces, as with `re.split`, so they are not counted by `limit`.

    Returns:
        List of pieces

    Raises:
        InvalidArgument: If `sep` is neither a string nor a compiled pattern.

    Example:
        >>> split('a b c')
        ['a', 'b', 'c']
        >>> split('a.b.c', '.')
        ['a', 'b', 'c']
        >>> split('a,b,c,d', ',', 2)
        ['a', 'b,c,d']
        >>> split('a,b,,', ',')
        ['a', 'b']
        >>> split('a,b,,', ',', -1)
        ['a', 'b', '', '']
        >>> split('a1b2c3d', re.compile('(\\d)'), 3)
        ['a', '1', 'b', '2', 'c3d']
    """
    pattern = sep if isinstance(sep, re.Pattern) else _compile_match(sep)

    if not pattern.pattern:
        pieces = list(s)
        if limit > 0 and len(pieces) > limit:
            pieces = pieces[:limit - 1] + [s[limit - 1:]]
        return pieces

    if limit == 1:
        return [s]
    elif limit > 1:
        return pattern.split(s, maxsplit=limit - 1)

    pieces = pattern.split(s)
    if limit == 0 and len(pieces) > 1:
        while pieces and pieces[-1] == '':
            pieces.pop()
    return pieces
