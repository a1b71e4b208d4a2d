"""Case conversion functions.

`camel_case` and `selector_case` convert between `camelCase` and
`selector-case` (the CSS property convention) and only consider ASCII
letters at word joins. `lower`, `upper` and `capitalize` follow Python's
own Unicode case mappings.
"""

__docformat__ = 'google'

__all__ = [
    'lower',
    'upper',
    'capitalize',
    'camel_case',
    'selector_case',
    'title_case',
    'dasherize'
]

import re
from functools import partial

from textkit.helpers import text_input, chain_operations
from textkit.substitution import escape_regexp, trim, replace
from textkit.patterns import (
    WHITESPACE,
    HYPHENATED_LOWER_PATTERN,
    UPPERCASE_PATTERN,
    SEPARATOR_RUN_PATTERN
)

@text_input
def lower(s: str) -> str:
    """Convert a string to lower case."""
    return s.lower()

@text_input
def upper(s: str) -> str:
    """Convert a string to upper case."""
    return s.upper()

@text_input
def capitalize(s: str) -> str:
    """
    Convert the first character to upper case, leaving the rest untouched.

    Example:
        >>> capitalize('hello World')
        'Hello World'
        >>> capitalize('')
        ''
    """
    return s[:1].upper() + s[1:]

@text_input
def camel_case(s: str) -> str:
    """
    Convert a string from selector-case to camelCase.

    Example:
        >>> camel_case('background-color')
        'backgroundColor'
        >>> camel_case('-moz-transform')
        'MozTransform'
    """
    return HYPHENATED_LOWER_PATTERN.sub(lambda m: m.group(1).upper(), s)

@text_input
def selector_case(s: str) -> str:
    """
    Convert a string from camelCase to selector-case.

    Example:
        >>> selector_case('backgroundColor')
        'background-color'
        >>> selector_case('MozTransform')
        '-moz-transform'
    """
    return UPPERCASE_PATTERN.sub('-\\1', s).lower()

@text_input
def title_case(s: str, delimiters: str = None) -> str:
    """
    Capitalize the first letter of the string and of every word after a delimiter.

    Only lowercase ASCII letters are changed; the rest of each word is untouched.

    Args:
        s: Input text
        delimiters: Characters that separate words. Defaults to whitespace.
            An empty string capitalizes the first letter only.

    Returns:
        Text in TitleCase

    Example:
        >>> title_case('one two three')
        'One Two Three'
        >>> title_case('one_two-three', '_-')
        'One_Two-Three'
        >>> title_case('one two', '')
        'One two'
    """
    delimiter_class = WHITESPACE if delimiters is None else escape_regexp(delimiters)
    delimiter_run = f'|[{delimiter_class}]+' if delimiter_class else ''
    pattern = re.compile(f'(\\A{delimiter_run})([a-z])')
    return pattern.sub(lambda m: m.group(1) + m.group(2).upper(), s)

@text_input
def dasherize(s: str) -> str:
    """
    Convert a camelized or underscored string into a dasherized one.

    Operations performed:
        1. Trim surrounding spaces
        2. Insert a hyphen before every uppercase ASCII letter
        3. Collapse runs of hyphens, underscores and whitespace into one hyphen
        4. Lowercase

    Example:
        >>> dasherize('MozTransform')
        '-moz-transform'
        >>> dasherize('the_quick  brown__fox')
        'the-quick-brown-fox'
        >>> dasherize(' backgroundColor ')
        'background-color'
    """
    dasherizing_functions = [
        trim
        , partial(replace, match=UPPERCASE_PATTERN, replacement='-\\1')
        , partial(replace, match=SEPARATOR_RUN_PATTERN, replacement='-')
        , lower
    ]
    return chain_operations(s, dasherizing_functions)
