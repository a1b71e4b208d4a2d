"""URL slug generation.

A slug is a lowercase, hyphen-delimited, ASCII-only rendering of arbitrary
text. Accented Latin characters are transliterated through the packaged table
in `textkit.lookups`; any other non-ASCII character is dropped.
"""

__docformat__ = 'google'

__all__ = [
    'slugify'
]

from functools import partial

from textkit.case import lower, dasherize
from textkit.helpers import text_input, chain_operations
from textkit.lookups import load_transliteration_table
from textkit.substitution import replace
from textkit.patterns import NON_SLUG_PATTERN

def transliterate(s: str) -> str:
    """
    Replace every character found in the transliteration table with its ASCII counterpart.

    Example:
        >>> transliterate('crème brûlée')
        'creme brulee'
    """
    table = load_transliteration_table()
    return replace(s, table.pattern, table.transliterate)

@text_input
def slugify(s: str) -> str:
    """
    Transform text into a URL slug.

    Operations performed:
        1. Lowercase
        2. Transliterate accented characters to ASCII
        3. Drop every character that is not an ASCII word character, whitespace or hyphen
        4. Dasherize

    Slugifying a slug returns it unchanged.

    Example:
        >>> slugify('Un été à Paris')
        'un-ete-a-paris'
        >>> slugify('Zażółć gęślą jaźń')
        'zazolc-gesla-jazn'
        >>> slugify('C++ vs. Rust!')
        'c-vs-rust'
        >>> slugify('snake_case and  spaces')
        'snake-case-and-spaces'
    """
    slugifying_functions = [
        lower
        , transliterate
        , partial(replace, match=NON_SLUG_PATTERN, replacement='')
        , dasherize
    ]
    return chain_operations(s, slugifying_functions)
