import re
import unittest
from textkit import substitution
from textkit.errors import InvalidArgument

class TestEscapeRegexp(unittest.TestCase):
    def test_escape_regexp_matches_literally(self):
        literal = '.*+?^${}()|[]\\/'
        pattern = re.compile(substitution.escape_regexp(literal))
        self.assertEqual(pattern.fullmatch(literal) is not None, True)

    def test_escape_regexp_leaves_plain_text(self):
        result = substitution.escape_regexp('hello world')
        self.assertEqual(result, 'hello world')

    def test_escape_regexp_backspace(self):
        result = substitution.escape_regexp('a\x08b')
        self.assertEqual(result, 'a\\x08b')

    def test_escape_regexp_empty(self):
        self.assertEqual(substitution.escape_regexp(''), '')
        self.assertEqual(substitution.escape_regexp(None), '')

class TestTrim(unittest.TestCase):
    def test_trim_default(self):
        result = substitution.trim('   hello world   ')
        self.assertEqual(result, 'hello world')

    def test_trim_only_spaces_by_default(self):
        result = substitution.trim('\thello\n')
        self.assertEqual(result, '\thello\n')

    def test_trim_character_set(self):
        result = substitution.trim('_-_hello_-_', '-_')
        self.assertEqual(result, 'hello')

    def test_trim_keeps_interior(self):
        result = substitution.trim('xx-a-xx', 'x')
        self.assertEqual(result, '-a-')

    def test_trim_metacharacters(self):
        result = substitution.trim('[]hello[]', '[]')
        self.assertEqual(result, 'hello')

    def test_trim_range_is_literal(self):
        result = substitution.trim('bbhellobb', 'a-c')
        self.assertEqual(result, 'bbhellobb')

    def test_trim_empty_chars_is_noop(self):
        result = substitution.trim('  hello  ', '')
        self.assertEqual(result, '  hello  ')

    def test_trim_whole_string(self):
        result = substitution.trim('     ')
        self.assertEqual(result, '')

    def test_trim_true_end_of_string(self):
        result = substitution.rtrim('hello  \n')
        self.assertEqual(result, 'hello  \n')

    def test_trim_empty(self):
        self.assertEqual(substitution.trim(''), '')
        self.assertEqual(substitution.trim(None), '')

    def test_trim_composition(self):
        for s in ['', ' ', '  a  ', 'a b', ' a', 'a ']:
            result = substitution.trim(substitution.ltrim(substitution.rtrim(s)))
            self.assertEqual(result.startswith(' '), False)
            self.assertEqual(result.endswith(' '), False)

class TestLtrim(unittest.TestCase):
    def test_ltrim(self):
        result = substitution.ltrim('  hello  ')
        self.assertEqual(result, 'hello  ')

    def test_ltrim_character_set(self):
        result = substitution.ltrim('0012300', '0')
        self.assertEqual(result, '12300')

class TestRtrim(unittest.TestCase):
    def test_rtrim(self):
        result = substitution.rtrim('  hello  ')
        self.assertEqual(result, '  hello')

    def test_rtrim_character_set(self):
        result = substitution.rtrim('0012300', '0')
        self.assertEqual(result, '00123')

class TestReplace(unittest.TestCase):
    def test_replace_all(self):
        result = substitution.replace('aaa', 'a', 'b')
        self.assertEqual(result, 'bbb')

    def test_replace_literal_metacharacters(self):
        result = substitution.replace('a.b.c', '.', '')
        self.assertEqual(result, 'abc')

    def test_replace_pattern(self):
        result = substitution.replace('a1b22c333', re.compile('\\d+'), '#')
        self.assertEqual(result, 'a#b#c#')

    def test_replace_pattern_back_reference(self):
        result = substitution.replace('John Smith', re.compile('(\\w+) (\\w+)'), '\\2, \\1')
        self.assertEqual(result, 'Smith, John')

    def test_replace_pattern_drops_compile_flags(self):
        result = substitution.replace('Aaa', re.compile('a', re.I), 'b')
        self.assertEqual(result, 'Abb')

    def test_replace_first_pattern_drops_compile_flags(self):
        result = substitution.replace_first('Aaa', re.compile('a', re.I), 'b')
        self.assertEqual(result, 'Aba')

    def test_replace_pattern_inline_flags(self):
        result = substitution.replace('Aaa', re.compile('(?i)a'), 'b')
        self.assertEqual(result, 'bbb')

    def test_replace_does_not_mutate_pattern(self):
        pattern = re.compile('a', re.I)
        substitution.replace_first('aaa', pattern, 'b')
        self.assertEqual(pattern.pattern, 'a')
        self.assertEqual(pattern.flags & re.I, re.I)

    def test_replace_function(self):
        result = substitution.replace('one two', 'o', lambda match: match.upper())
        self.assertEqual(result, 'One twO')

    def test_replace_function_receives_substring(self):
        seen = []
        substitution.replace('ab12', re.compile('\\d'), lambda match: seen.append(match) or '')
        self.assertEqual(seen, ['1', '2'])

    def test_replace_invalid_match(self):
        with self.assertRaises(InvalidArgument):
            substitution.replace('aaa', 42, 'b')

    def test_replace_invalid_match_is_type_error(self):
        with self.assertRaises(TypeError) as context:
            substitution.replace('aaa', None, 'b')
        self.assertEqual(context.exception.argument, None)

    def test_replace_empty(self):
        result = substitution.replace('', 'a', 'b')
        self.assertEqual(result, '')

class TestReplaceFirst(unittest.TestCase):
    def test_replace_first(self):
        result = substitution.replace_first('aaa', 'a', 'b')
        self.assertEqual(result, 'baa')

    def test_replace_first_pattern(self):
        result = substitution.replace_first('a1b22c333', re.compile('\\d+'), '#')
        self.assertEqual(result, 'a#b22c333')

    def test_replace_first_invalid_match(self):
        with self.assertRaises(InvalidArgument):
            substitution.replace_first('aaa', ['a'], 'b')

class TestSplit(unittest.TestCase):
    def test_split_default_whitespace(self):
        result = substitution.split('a b\tc')
        self.assertEqual(result, ['a', 'b', 'c'])

    def test_split_adjacent_whitespace(self):
        result = substitution.split('a  b')
        self.assertEqual(result, ['a', '', 'b'])

    def test_split_literal(self):
        result = substitution.split('a|b|c', '|')
        self.assertEqual(result, ['a', 'b', 'c'])

    def test_split_pattern(self):
        result = substitution.split('a1b22c', re.compile('\\d+'))
        self.assertEqual(result, ['a', 'b', 'c'])

    def test_split_pattern_keeps_flags(self):
        result = substitution.split('aXbxc', re.compile('x', re.I))
        self.assertEqual(result, ['a', 'b', 'c'])

    def test_split_pattern_captured_groups(self):
        result = substitution.split('a1b2c3d', re.compile('(\\d)'), 3)
        self.assertEqual(result, ['a', '1', 'b', '2', 'c3d'])

    def test_split_limit(self):
        result = substitution.split('a-b-c-d', '-', 3)
        self.assertEqual(result, ['a', 'b', 'c-d'])

    def test_split_limit_one(self):
        result = substitution.split('a-b-c', '-', 1)
        self.assertEqual(result, ['a-b-c'])

    def test_split_drops_trailing_empty(self):
        result = substitution.split('a-b--', '-')
        self.assertEqual(result, ['a', 'b'])

    def test_split_negative_limit_keeps_trailing_empty(self):
        result = substitution.split('a-b--', '-', -1)
        self.assertEqual(result, ['a', 'b', '', ''])

    def test_split_empty_separator(self):
        result = substitution.split('abc', '')
        self.assertEqual(result, ['a', 'b', 'c'])

    def test_split_empty_separator_limit(self):
        result = substitution.split('abcd', '', 2)
        self.assertEqual(result, ['a', 'bcd'])

    def test_split_empty(self):
        result = substitution.split('')
        self.assertEqual(result, [''])

    def test_split_invalid_separator(self):
        with self.assertRaises(InvalidArgument):
            substitution.split('a b', 1)
