"""Regex building blocks, compiled patterns and default arguments shared by textkit.

Patterns built at call time from user-supplied text (strip-sets, literal
match strings, title case delimiters) are assembled in the modules that use
them. Everything here is fixed at import time.
"""

__docformat__ = 'google'

import re

## Defaults
DEFAULT_STRIP_CHARS: str = " "
"""Characters removed by the trim family when no strip-set is given.

Used in `textkit.substitution.trim`, `textkit.substitution.ltrim` and
`textkit.substitution.rtrim`."""

DEFAULT_ELLIPSIS: str = "..."
"""Suffix appended by `textkit.truncation.prune` when text is cut."""

DEFAULT_QUOTE: str = '"'
"""Quote character used by `textkit.text.quote` and `textkit.text.unquote`."""

MISSING_TRANSLITERATION: str = "-"
"""Stand-in for a transliteration source character with no target at the same position.

Used in `textkit.lookups.TransliterationTable.transliterate`."""

## Escaping
# Building blocks
REGEXP_METACHARACTERS: str = "-()\\[\\]{}+?*.$^|,:#<!\\\\/"
"""Uncompiled character class body listing every character escaped by
`textkit.substitution.escape_regexp`.

Covers the regex metacharacters plus `-`, which is special inside a
character class, and `/`, which delimits patterns in other regex dialects."""

# Patterns
METACHARACTER_PATTERN: re.Pattern = re.compile(f"([{REGEXP_METACHARACTERS}])")
"""Compiled regex capturing a single regex metacharacter.

Capture groups:
    * 1: the metacharacter

Used in `textkit.substitution.escape_regexp`."""

BACKSPACE_PATTERN: re.Pattern = re.compile("\\x08")
"""Compiled regex matching a literal backspace character.

Used in `textkit.substitution.escape_regexp`."""

## Whitespace
# Building blocks
WHITESPACE: str = "\\s"
"""Uncompiled regex building block for a single whitespace character, including `\\xa0`."""

# Patterns
BLANK_PATTERN: re.Pattern = re.compile(f"{WHITESPACE}*")
"""Compiled regex that fully matches empty or whitespace-only text.

Used in `textkit.text.is_empty`."""

WHITESPACE_RUN_PATTERN: re.Pattern = re.compile(f"{WHITESPACE}+")
"""Compiled regex matching a run of adjacent whitespace characters.

Used in `textkit.text.collapse_whitespace`."""

NEWLINES_PATTERN: re.Pattern = re.compile("(?:\\r\\n|\\r|\\n)+")
"""Compiled regex matching a run of line breaks in any convention.

Used in `textkit.text.strip_newlines`."""

DEFAULT_SPLIT_PATTERN: re.Pattern = re.compile(WHITESPACE)
"""Separator used by `textkit.substitution.split` when none is given.

Matches exactly one whitespace character, so adjacent whitespace produces
empty pieces."""

## Case
# Patterns
HYPHENATED_LOWER_PATTERN: re.Pattern = re.compile("-([a-z])")
"""Compiled regex matching a hyphen followed by a lowercase ASCII letter.

Capture groups:
    * 1: the letter

Used in `textkit.case.camel_case`."""

UPPERCASE_PATTERN: re.Pattern = re.compile("([A-Z])")
"""Compiled regex capturing a single uppercase ASCII letter.

Capture groups:
    * 1: the letter

Used in `textkit.case.selector_case` and `textkit.case.dasherize`."""

SEPARATOR_RUN_PATTERN: re.Pattern = re.compile(f"[-_{WHITESPACE}]+")
"""Compiled regex matching a run of hyphens, underscores and whitespace.

Used in `textkit.case.dasherize`."""

## Slugs
# Patterns
NON_SLUG_PATTERN: re.Pattern = re.compile(f"[^0-9A-Za-z_{WHITESPACE}-]")
"""Matches every character except ASCII word characters, whitespace and hyphens.

Whitespace and underscores survive this step so that `textkit.case.dasherize`
can turn them into hyphens.

Used in `textkit.slugs.slugify`."""

## Pruning
# Patterns
PRUNE_TAIL_PATTERN: re.Pattern = re.compile(".(?=\\W*\\w*\\Z)")
"""Compiled regex matching each character of the trailing `non-word* word*` context.

Applied to the candidate slice in `textkit.truncation.prune` to build the
word mask; only the tail of the slice is rewritten."""

WORD_PAIR_PATTERN: re.Pattern = re.compile("\\w\\w")
"""Compiled regex matching two adjacent word characters.

Used in `textkit.truncation.prune` to detect a cut that fell inside a word."""

LAST_WORD_PATTERN: re.Pattern = re.compile("\\s*\\S+\\Z")
"""Compiled regex matching the final run of non-whitespace and the whitespace before it.

Used in `textkit.truncation.prune`."""
