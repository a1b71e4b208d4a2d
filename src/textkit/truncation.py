"""Word-boundary-aware truncation.

`prune` never cuts a word in half and never returns text longer than its
input. Word boundaries are located on a mask of the candidate slice rather
than on the text itself: letter-like characters (those whose upper and lower
case forms differ) become `A` and everything else becomes a space, so the
same rule works for any alphabet that has case.
"""

__docformat__ = 'google'

__all__ = [
    'prune'
]

from textkit.helpers import text_input
from textkit.substitution import replace, replace_first, rtrim
from textkit.patterns import (
    DEFAULT_ELLIPSIS,
    PRUNE_TAIL_PATTERN,
    WORD_PAIR_PATTERN,
    LAST_WORD_PATTERN
)

def _mask_character(char: str) -> str:
    return 'A' if char.upper() != char.lower() else ' '

@text_input
def prune(s: str, max_len: int, ellipsis: str = DEFAULT_ELLIPSIS) -> str:
    """
    Truncate a string at a word boundary and append an ellipsis.

    Strings shorter than `max_len` are returned unchanged, as is any string
    that would only grow once the ellipsis is added.

    Args:
        s: Input text
        max_len: Length above which the text is truncated
        ellipsis: Suffix marking the cut

    Returns:
        Truncated text ending in `ellipsis`, or the unmodified string

    Example:
        >>> prune('Hello World', 5)
        'Hello...'
        >>> prune('Hello World', 8)
        'Hello...'
        >>> prune('Hello, world', 5)
        'Hello...'
        >>> prune('Hello', 10)
        'Hello'
        >>> prune('Hello World', 5, ' (continued)')
        'Hello World'
    """
    if len(s) < max_len:
        return s

    template = replace(s[:max_len + 1], PRUNE_TAIL_PATTERN, _mask_character)

    if WORD_PAIR_PATTERN.match(template[-2:]):
        template = replace_first(template, LAST_WORD_PATTERN, '')
    else:
        template = rtrim(template[:-1])

    if len(template) + len(ellipsis) > len(s):
        return s
    else:
        return s[:len(template)] + ellipsis
