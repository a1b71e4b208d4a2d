"""Packaged lookup tables.
"""

__docformat__ = 'google'

__all__ = [
    'TransliterationTable',
    'load_transliteration_table'
]

import logging
import re
from functools import cache, cached_property
from typing import Dict

import yaml

from textkit.connections import TransliterationDataSource
from textkit.patterns import MISSING_TRANSLITERATION
from textkit.substitution import escape_regexp

logger = logging.getLogger(__name__)


class TransliterationTable(TransliterationDataSource):
    """
    Two parallel strings mapping accented characters to ASCII.

    `source[i]` transliterates to `target[i]`. A source character with no
    target at its position transliterates to `textkit.patterns.MISSING_TRANSLITERATION`.

    Args:
        source: Characters to replace. Read from the packaged YAML file if omitted.
        target: Replacement characters, position by position

    Example:
        >>> table = TransliterationTable('éàß', 'ea')
        >>> table.transliterate('é')
        'e'
        >>> table.transliterate('ß')
        '-'
    """
    def __init__(self, source: str = None, target: str = None):
        if source is None:
            with self.yaml_path().open('r', encoding='utf-8') as f:
                data = yaml.safe_load(f)
            source, target = data['source'], data['target']
            logger.debug('Loaded transliteration table with %d entries', len(source))
        self.source = source
        self.target = target or ''

    @cached_property
    def source_to_target(self) -> Dict[str, str]:
        return dict(zip(self.source, self.target))

    @cached_property
    def pattern(self) -> re.Pattern:
        """Compiled regex matching any single source character."""
        if not self.source:
            return re.compile('(?!)')
        return re.compile(f'[{escape_regexp(self.source)}]')

    def transliterate(self, char: str) -> str:
        return self.source_to_target.get(char, MISSING_TRANSLITERATION)

@cache
def load_transliteration_table() -> TransliterationTable:
    """
    Load the packaged transliteration table once per process.

    Example:
        >>> table = load_transliteration_table()
        >>> table.transliterate('ł')
        'l'
        >>> table is load_transliteration_table()
        True
    """
    return TransliterationTable()
