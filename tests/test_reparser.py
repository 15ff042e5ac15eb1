"""Tests for reading existing docblocks back into rows."""

import pytest

from docblockr.formatter import formatDocBlock
from docblockr.languages import getParser
from docblockr.reparser import joinLines, parseDocBlock, splitTagLine, stripMarkers


def profile(language):
    return getParser(language).profile


class TestStripMarkers:
    def test_block(self):
        """Delimiters and line markers are removed."""
        assert stripMarkers('/**\n * foo\n * bar\n */', profile('javascript')) == ['', 'foo', 'bar', '']

    def test_one_line(self):
        """A block on one line."""
        assert stripMarkers('/** foo */', profile('javascript')) == ['foo']

    def test_yard(self):
        """YARD blocks."""
        assert stripMarkers('##\n# foo\n#   bar', profile('ruby')) == ['', 'foo', 'bar']


class TestJoinLines:
    def test_continuations(self):
        """Plain lines continue the line before, a period ends the summary."""
        lines = ['Summary line', 'continues here.', 'Next paragraph.', '@param foo a long', 'description here']
        assert joinLines(lines, profile('javascript')) == [
            'Summary line continues here.',
            'Next paragraph.',
            '@param foo a long description here',
        ]

    def test_blank_lines(self):
        """Blank lines separate paragraphs, the one after the summary is dropped when it is put back."""
        lines = ['Summary.', '', 'Details', '', 'More']
        assert joinLines(lines, profile('java')) == ['Summary.', 'Details', '', 'More']
        assert joinLines(lines, profile('javascript')) == ['Summary.', '', 'Details', '', 'More']

    def test_blank_before_tag_kept(self):
        """Without an empty-line policy, a blank before a tag is kept."""
        lines = ['Summary', '', '@param {string} a - x']
        assert joinLines(lines, profile('javascript')) == ['Summary', '', '@param {string} a - x']

    def test_blank_between_sections(self):
        """Blanks between different tags are dropped only when they are put back."""
        lines = ['Summary', '', '@param $a x', '', '@param $b y', '', '@return int z']
        assert joinLines(lines, profile('php')) == [
            'Summary', '@param $a x', '', '@param $b y', '@return int z'
        ]
        assert joinLines(lines, profile('java')) == [
            'Summary', '@param $a x', '', '@param $b y', '', '@return int z'
        ]


class TestSplitTagLine:
    def test_full(self):
        """Tag, type, name and description."""
        assert splitTagLine('@param {string} foo - bar baz', profile('javascript')) == ['@param', '{string}', 'foo', 'bar baz']

    def test_nested_type(self):
        """Braces inside the type are balanced."""
        assert splitTagLine('@param {Object<string, {a: number}>} foo', profile('javascript')) == [
            '@param', '{Object<string, {a: number}>}', 'foo'
        ]

    def test_no_name_column(self):
        """Return tags have no name."""
        assert splitTagLine('@returns {number} - the result', profile('javascript')) == [
            '@returns', '{number}', None, 'the result'
        ]

    def test_unnamed(self):
        """A dash where the name should be leaves it empty."""
        assert splitTagLine('@param {Object} - options', profile('javascript')) == ['@param', '{Object}', '', 'options']

    def test_unstructured(self):
        """Other tags keep their text whole."""
        assert splitTagLine('@see http://example.com/a b', profile('javascript')) == ['@see', 'http://example.com/a b']
        assert splitTagLine('@private', profile('javascript')) == ['@private']

    def test_php_type(self):
        """Bare types are the first word."""
        assert splitTagLine('@param string $foo the foo', profile('php')) == ['@param', 'string', '$foo', 'the foo']


class TestParseDocBlock:
    def test_block(self):
        """A hand-written block."""
        text = '\n'.join([
            '/**',
            ' * Summary line',
            ' * continues here.',
            ' * @param {string} foo - a long',
            ' *     description here',
            ' * @see Other',
            ' */',
        ])
        assert parseDocBlock(text, profile('javascript')) == [
            ['Summary line continues here.'],
            ['@param', '{string}', 'foo', 'a long description here'],
            ['@see', 'Other'],
        ]

    def test_blank_row(self):
        """Kept blanks come back as blank rows and are rendered again."""
        text = '/**\n * Summary\n *\n * @param {string} a - x\n */'
        p = profile('javascript')
        rows = parseDocBlock(text, p)
        assert rows == [['Summary'], [''], ['@param', '{string}', 'a', 'x']]
        assert '\n'.join(formatDocBlock(rows, p, withPlaceholders=False)) == text

    def test_empty(self):
        """Nothing in the comment, nothing to reformat."""
        assert parseDocBlock('/**\n *\n */', profile('javascript')) is None
        assert parseDocBlock('/** */', profile('javascript')) is None

    def test_prose_dialects(self):
        """Markdown dialects are not read back."""
        assert parseDocBlock('/// foo', profile('rust')) is None
        assert parseDocBlock('/// foo', profile('swift')) is None


ROUND_TRIPS = [
    ('javascript', [
        ['Does a thing.'],
        ['@param', '{string}', 'foo', 'the foo'],
        ['@param', '{Object<string, number>}', 'map', 'a map'],
        ['@returns', '{number}', None, 'the result'],
    ]),
    ('php', [
        ['Does a thing.'],
        ['More detail here.'],
        ['@param', 'string', '$foo', 'the foo'],
        ['@return', 'int', None, 'the result'],
    ]),
    ('java', [
        ['Summary.'],
        ['@param', None, 'a', 'first'],
        ['@throws', None, 'IOException', 'when it fails'],
        ['@return', None, None, 'the sum'],
    ]),
    ('cpp', [
        ['brief'],
        ['\\param', None, 'x', 'the x'],
        ['@return', None, None, 'something'],
    ]),
    ('ruby', [
        ['Does a thing.'],
        ['@param', '[String]', 'name', 'the name'],
        ['@return', '[Boolean]', None, 'whether it worked'],
    ]),
]


@pytest.mark.parametrize('language,rows', ROUND_TRIPS)
@pytest.mark.parametrize('alignTags', [0, 3])
def test_round_trip(language, rows, alignTags):
    """Reading back a formatted block gives the same rows."""
    p = profile(language)
    text = '\n'.join(formatDocBlock(rows, p, withPlaceholders=False, alignTags=alignTags))
    assert parseDocBlock(text, p) == rows
