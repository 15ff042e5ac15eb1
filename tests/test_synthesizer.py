"""Tests for turning declarations into rows."""

from docblockr.languages import getParser
from docblockr.model import (
    CONSTRUCTOR, GENERATOR, GETTER, MEMBER, PLAIN,
    CallableDecl, ClassDecl, VarDecl,
    canonicalRow, escape, fixTabStops, stripPlaceholders
)
from docblockr.synthesizer import synthesize


def rows(language, declaration):
    return synthesize(declaration, getParser(language))


class TestModel:
    def test_escape(self):
        """Sigils are escaped, host tokens are not."""
        assert escape('$foo') == '\\$foo'
        assert escape('$FILENAME') == '$FILENAME'
        assert escape('foo') == 'foo'

    def test_strip_placeholders(self):
        """Markup and escapes are removed."""
        assert stripPlaceholders('${1:foo} \\$bar') == 'foo $bar'
        assert stripPlaceholders('{${0:type}}') == '{type}'

    def test_fix_tab_stops(self):
        """Placeholders are renumbered in output order."""
        assert fixTabStops(['${5:a} ${9:b}', '${2:c}']) == ['${0:a} ${1:b}', '${2:c}']

    def test_canonical_row(self):
        """Trailing empty fields are dropped."""
        assert canonicalRow(['@param', 'x', None, None]) == ['@param', 'x']
        assert canonicalRow(['summary']) == ['summary']


class TestClasses:
    def test_extends(self):
        """One row per supertype."""
        assert rows('javascript', ClassDecl('Foo', ['Bar'])) == [['${0:summary}'], ['@extends', 'Bar']]

    def test_single_supertype(self):
        """Only the first supertype where the language allows one."""
        assert rows('java', ClassDecl('Foo', ['Bar', 'Baz'])) == [['${0:summary}'], ['@extends', 'Bar']]

    def test_multiple_supertypes(self):
        """C++ keeps every base."""
        assert rows('cpp', ClassDecl('Foo', ['Bar', 'Baz'])) == [
            ['${0:brief}'], ['@extends', 'Bar'], ['@extends', 'Baz']
        ]

    def test_no_extends_tag(self):
        """Languages without an extends tag get the summary only."""
        assert rows('ruby', ClassDecl('Foo', [])) == [['${0:description}']]


class TestFunctions:
    def test_params(self):
        """One row per argument, placeholders in emission order."""
        out = rows('javascript', CallableDecl('foo', PLAIN, 'a, isOk, cb = 5', None, None))
        assert out == [
            ['${0:summary}'],
            ['@param', '{${1:type}}', 'a', '${2:description}'],
            ['@param', '{${3:boolean}}', 'isOk', '${4:description}'],
            ['@param', '{${5:number}}', 'cb', '${6:description}'],
        ]

    def test_no_params(self):
        """No arguments, no param rows."""
        assert rows('javascript', CallableDecl('foo', PLAIN, None, None, None)) == [['${0:summary}']]

    def test_return(self):
        """A known return type gets a return row."""
        out = rows('javascript', CallableDecl('load', PLAIN, None, 'Promise', None))
        assert out == [['${0:summary}'], ['@returns', '{${1:Promise}}', None, '${2:description}']]

    def test_return_from_name(self):
        """Boolean-looking names return booleans."""
        out = rows('javascript', CallableDecl('isReady', PLAIN, None, None, None))
        assert out[-1] == ['@returns', '{${1:boolean}}', None, '${2:description}']

    def test_constructor(self):
        """Constructors have no return row."""
        out = rows('javascript', CallableDecl('Person', CONSTRUCTOR, 'name', 'Person', None))
        assert [row[0] for row in out] == ['${0:summary}', '@param']

    def test_generator(self):
        """Generators yield."""
        out = rows('javascript', CallableDecl('gen', GENERATOR, None, None, None))
        assert out[-1] == ['@yields', '{${1:type}}', None, '${2:description}']

    def test_getter(self):
        """Getters belong to a parent and document their type."""
        out = rows('javascript', CallableDecl('name', GETTER, None, None, None))
        assert out == [
            ['${0:summary}'],
            ['@memberof', '${1:parent}'],
            ['@type', '{${2:type}}', None, '${3:description}'],
        ]

    def test_member(self):
        """Methods belong to a parent."""
        out = rows('javascript', CallableDecl('render', MEMBER, None, None, None))
        assert out == [['${0:summary}'], ['@memberof', '${1:parent}']]

    def test_void_without_type_column(self):
        """void is not documented where comments carry no types."""
        out = rows('java', CallableDecl('run', PLAIN, None, 'void', None))
        assert out == [['${0:summary}']]

    def test_void_with_type_column(self):
        """void is documented where comments carry types."""
        out = rows('php', CallableDecl('run', PLAIN, None, 'void', None))
        assert out[-1] == ['@return', '${1:void}', None, '${2:description}']

    def test_return_without_type_column(self):
        """The return row has no type where comments carry none."""
        out = rows('java', CallableDecl('add', PLAIN, 'int a', 'int', None))
        assert out == [
            ['${0:summary}'],
            ['@param', None, 'a', '${1:description}'],
            ['@return', None, None, '${2:description}'],
        ]

    def test_throws_with_arg_column(self):
        """Exception names go in the name column."""
        out = rows('java', CallableDecl('read', PLAIN, None, 'void', ['IOException']))
        assert out[-1] == ['@throws', None, 'IOException', '${1:description}']

    def test_throws_with_type_column(self):
        """Exception names go in the type column."""
        out = rows('javascript', CallableDecl('read', PLAIN, None, None, ['Error']))
        assert out[-1] == ['@throws', '{${1:Error}}', None, '${2:description}']

    def test_sigils_escaped(self):
        """PHP variable names are escaped."""
        out = rows('php', CallableDecl('set', PLAIN, 'string $name', None, None))
        assert out[1] == ['@param', '${1:string}', '\\$name', '${2:description}']

    def test_statement(self):
        """Statement names are never documented."""
        assert rows('javascript', CallableDecl('if', PLAIN, 'x', None, None)) is None

    def test_nothing(self):
        """No declaration, no rows."""
        assert rows('javascript', None) is None


class TestVars:
    def test_inferred(self):
        """The type comes from the value."""
        assert rows('javascript', VarDecl('count', None, '5')) == [['${0:summary}'], ['@type', '{${1:number}}']]

    def test_declared(self):
        """A declared type wins."""
        assert rows('php', VarDecl('$count', 'int', '"5"')) == [['${0:summary}'], ['@var', '${1:int}']]

    def test_without_type_column(self):
        """The type is a plain placeholder where comments carry no types."""
        assert rows('cpp', VarDecl('MAX', 'int', '10')) == [['${0:brief}'], ['@var', '${1:int}']]

    def test_no_var_tag(self):
        """Languages without a var tag get the summary only."""
        assert rows('rust', VarDecl('count', 'u32', '0')) == [['${0:description}']]
