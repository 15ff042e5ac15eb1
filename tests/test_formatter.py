"""Tests for rendering rows into comment lines."""

from docblockr.formatter import formatBlockComment, formatDocBlock, formatHeaderBlock
from docblockr.languages import getParser
from docblockr.settings import Settings


def profile(language, **settings):
    return getParser(language, Settings(settings)).profile


JAVA_ROWS = [
    ['summary'],
    ['@param', None, 'a', 'first'],
    ['@param', None, 'b', 'second'],
    ['@return', None, None, 'the sum'],
]


class TestTagTable:
    def test_javascript(self):
        """Placeholders are kept and renumbered, descriptions follow a dash."""
        rows = [
            ['${0:summary}'],
            ['@param', '{${1:type}}', 'bar', '${2:description}'],
            ['@returns', '{${3:number}}', None, '${4:description}'],
        ]
        assert formatDocBlock(rows, profile('javascript')) == [
            '/**',
            ' * ${0:summary}',
            ' * @param {${1:type}} bar - ${2:description}',
            ' * @returns {${3:number}} - ${4:description}',
            ' */',
        ]

    def test_plain(self):
        """Without placeholders only the text is left."""
        rows = [['${0:summary}'], ['@param', '${1:string}', '\\$name', '${2:description}']]
        assert formatDocBlock(rows, profile('php'), withPlaceholders=False)[1:4] == [
            ' * summary',
            ' *',
            ' * @param string $name description',
        ]

    def test_free_text_rows(self):
        """Tag rows with a single value and blank rows."""
        rows = [['summary'], [''], ['@extends', 'Bar']]
        assert formatDocBlock(rows, profile('javascript'), withPlaceholders=False) == [
            '/**', ' * summary', ' *', ' * @extends Bar', ' */'
        ]

    def test_comment_opener(self):
        """The C-family opener can be /*!."""
        out = formatDocBlock([['brief']], profile('cpp', docblockr_comment_style=1), withPlaceholders=False)
        assert out == ['/*!', ' * brief', ' */']

    def test_yard(self):
        """YARD blocks use # lines and [Type] columns."""
        rows = [
            ['description'],
            ['@param', '[String]', 'name', 'the name'],
            ['@return', '[Boolean]', None, 'whether'],
        ]
        assert formatDocBlock(rows, profile('ruby'), withPlaceholders=False) == [
            '##',
            '# description',
            '#',
            '# @param [String] name the name',
            '# @return [Boolean] whether',
        ]

    def test_empty(self):
        """No rows, no lines."""
        assert formatDocBlock([], profile('javascript')) == []


class TestAlignment:
    def test_description_column(self):
        """With full alignment every description starts at the same offset."""
        rows = [
            ['summary'],
            ['@param', 'int', 'a', 'first'],
            ['@param', 'string', 'longName', 'second'],
        ]
        out = formatDocBlock(rows, profile('php'), withPlaceholders=False, alignTags=3)
        assert out[3] == ' * @param int    a        first'
        assert out[4] == ' * @param string longName second'
        assert out[3].index('first') == out[4].index('second')

    def test_tag_column_only(self):
        """Level 1 pads the tag only."""
        out = formatDocBlock(JAVA_ROWS, profile('java'), withPlaceholders=False, alignTags=1)
        assert out[3] == ' * @param  a first'
        assert out[5] == ' * @return the sum'

    def test_type_column(self):
        """Level 2 pads tag and type, names are left alone."""
        rows = [
            ['@param', 'int', 'a', 'first'],
            ['@param', 'string', 'longName', 'second'],
        ]
        out = formatDocBlock(rows, profile('php'), withPlaceholders=False, alignTags=2)
        assert out[1] == ' * @param int    a first'
        assert out[2] == ' * @param string longName second'

    def test_placeholders_do_not_count(self):
        """Widths are measured without placeholder markup."""
        rows = [
            ['@param', '${0:int}', '\\$a', '${1:x}'],
            ['@param', '${2:string}', '\\$bb', '${3:y}'],
        ]
        out = formatDocBlock(rows, profile('php'), withPlaceholders=False, alignTags=3)
        assert out[1] == ' * @param int    $a  x'
        assert out[2] == ' * @param string $bb y'

    def test_no_trailing_whitespace(self):
        """Padded rows without a description are trimmed."""
        rows = [['@param', 'int', 'a'], ['@param', 'string', 'longName', 'x']]
        out = formatDocBlock(rows, profile('php'), withPlaceholders=False, alignTags=3)
        assert out[1] == ' * @param int    a'


class TestEmptyLines:
    def test_none(self):
        """Policy 0 adds nothing."""
        out = formatDocBlock(JAVA_ROWS, profile('java', docblockr_add_empty_line={'java': 0}), withPlaceholders=False)
        assert ' *' not in out

    def test_after_summary(self):
        """Policy 1 separates the summary only."""
        out = formatDocBlock(JAVA_ROWS, profile('java'), withPlaceholders=False)
        assert out == [
            '/**',
            ' * summary',
            ' *',
            ' * @param a first',
            ' * @param b second',
            ' * @return the sum',
            ' */',
        ]

    def test_between_sections(self):
        """Policy 2 also separates groups of different tags."""
        out = formatDocBlock(JAVA_ROWS, profile('java', docblockr_add_empty_line={'java': 2}), withPlaceholders=False)
        assert out == [
            '/**',
            ' * summary',
            ' *',
            ' * @param a first',
            ' * @param b second',
            ' *',
            ' * @return the sum',
            ' */',
        ]

    def test_no_double_blank(self):
        """An existing blank row is not doubled."""
        rows = [['summary'], [''], ['@param', None, 'a', 'first']]
        out = formatDocBlock(rows, profile('java'), withPlaceholders=False)
        assert out == ['/**', ' * summary', ' *', ' * @param a first', ' */']

    def test_tag_first(self):
        """No summary blank when the block starts with a tag."""
        rows = [['@param', None, 'a', 'first'], ['@param', None, 'b', 'second']]
        out = formatDocBlock(rows, profile('java'), withPlaceholders=False)
        assert out == ['/**', ' * @param a first', ' * @param b second', ' */']


class TestProseDialects:
    def test_rust(self):
        """Arguments and returns are Markdown sections."""
        rows = [
            ['${0:description}'],
            ['@param', None, 'a', '${1:description}'],
            ['@returns', None, None, '${2:description}'],
        ]
        assert formatDocBlock(rows, profile('rust'), withPlaceholders=False) == [
            '/// description',
            '///',
            '/// # Arguments',
            '///',
            '/// * `a` - description',
            '///',
            '/// # Returns',
            '///',
            '/// description',
        ]

    def test_swift(self):
        """Parameters, throws and returns are callouts."""
        rows = [
            ['description'],
            ['@param', None, 'name', 'who'],
            ['@returns', None, None, 'a greeting'],
            ['@throws', None, None, 'on failure'],
        ]
        assert formatDocBlock(rows, profile('swift'), withPlaceholders=False) == [
            '/// description',
            '///',
            '/// - Parameters:',
            '///   - name: who',
            '///',
            '/// - Throws: on failure',
            '///',
            '/// - Returns: a greeting',
            '///',
        ]

    def test_swift_summary_only(self):
        """A lone summary has no trailing marker."""
        assert formatDocBlock([['description']], profile('swift'), withPlaceholders=False) == ['/// description']

    def test_rdoc(self):
        """RDoc uses headed sections."""
        rows = [
            ['description'],
            ['@param', '[String]', 'name', 'the name'],
            ['@return', '[Boolean]', None, 'whether'],
        ]
        assert formatDocBlock(rows, profile('ruby', docblockr_comment_style_ruby=0), withPlaceholders=False) == [
            '##',
            '# description',
            '#',
            '# == Parameters:',
            '#',
            '# +name+:: the name',
            '#',
            '# == Returns:',
            '# whether',
        ]


class TestHeader:
    ROWS = [['$FILENAME'], ['$WORKSPACE_NAME'], [''], ['@author', '${0:name}']]

    def test_block(self):
        """Block dialects render the header as any other block."""
        assert formatHeaderBlock(self.ROWS, profile('javascript')) == [
            '/**', ' * $FILENAME', ' * $WORKSPACE_NAME', ' *', ' * @author ${0:name}', ' */'
        ]

    def test_rust(self):
        """Rust headers are inner doc comments."""
        assert formatHeaderBlock(self.ROWS, profile('rust'), withPlaceholders=False) == [
            '//! $FILENAME', '//! $WORKSPACE_NAME', '//!', '//! author name'
        ]

    def test_swift(self):
        """Swift headers use callouts."""
        assert formatHeaderBlock(self.ROWS, profile('swift'), withPlaceholders=False) == [
            '/// $FILENAME', '///', '/// $WORKSPACE_NAME', '///', '/// - Author: name'
        ]

    def test_rdoc(self):
        """RDoc headers use labelled lists."""
        assert formatHeaderBlock(self.ROWS, profile('ruby', docblockr_comment_style_ruby=0), withPlaceholders=False) == [
            '# $FILENAME', '# $WORKSPACE_NAME', '#', '# Author:: name'
        ]


class TestBlockComment:
    def test_dialects(self):
        """The bare comment offered when there is nothing to document."""
        assert formatBlockComment(profile('javascript')) == ['/**', ' * ${0:comment}', ' */']
        assert formatBlockComment(profile('ruby')) == ['##', '# ${0:comment}']
        assert formatBlockComment(profile('ruby', docblockr_comment_style_ruby=0)) == ['=begin', '${0:comment}', '=end']
        assert formatBlockComment(profile('rust')) == ['/// ${0:comment}']

    def test_plain(self):
        """Without placeholders."""
        assert formatBlockComment(profile('javascript'), False) == ['/**', ' * comment', ' */']
