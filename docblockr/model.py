"""
The shapes passed between the classifier, the synthesizer and the formatter.

A DocBlock is a plain list of rows, each row a list of up to four fields:
[tag, type, argName, description]. A row with a single field is free text.
"""
import re
from collections import namedtuple


ClassDecl = namedtuple('ClassDecl', ['name', 'superTypes'])
CallableDecl = namedtuple('CallableDecl', ['name', 'kind', 'rawArgs', 'returnType', 'throwsTypes'])
VarDecl = namedtuple('VarDecl', ['name', 'declaredType', 'initializerExpr'])

Argument = namedtuple('Argument', ['name', 'type', 'value'])

DocTag = namedtuple('DocTag', ['tag', 'template'])

# callable kinds
PLAIN = 'plain'
CONSTRUCTOR = 'constructor'
GETTER = 'getter'
GENERATOR = 'generator'
MEMBER = 'member'

# control-flow keywords which look like calls to the function grammars
STATEMENTS = frozenset(['for', 'foreach', 'if', 'switch', 'while', 'catch'])

# tokens provided by the host, passed through unescaped
TEMPLATE_VARIABLES = (
    '$FILENAME',
    '$FILEPATH',
    '$WORKSPACE_NAME',
    '$WORKSPACE_PATH',
    '$SELECTED_TEXT',
    '$LINE_NUMBER',
    '$DATE',
    '$YEAR',
)

_placeholderRe = re.compile(r'\$\{\d+:([^}]*)\}')
_tabStopRe = re.compile(r'(\$\{)\d+(:)')


def escape(str):
    """ escape a leading sigil so it survives snippet insertion, host tokens excepted """
    if str and str.startswith('$') and str not in TEMPLATE_VARIABLES:
        return '\\' + str
    return str


def placeholder(text, index):
    """
    Wrap `text` in a positional placeholder. Returns the markup and the next free index.
    """
    return '${%d:%s}' % (index, text), index + 1


def stripPlaceholders(str):
    """
    "${1:foo} \\$bar" --> "foo $bar"
    """
    if not str:
        return str
    return _placeholderRe.sub('\\1', str).replace('\\$', '$')


def outputWidth(str):
    # the length of a string after it is output as plain text
    return len(stripPlaceholders(str or ''))


def counter(start=0):
    count = start
    while True:
        yield(count)
        count += 1


def fixTabStops(lines):
    """ renumber every placeholder so the tab order follows the output, starting at 0 """
    tabIndex = counter()

    def swapTabs(m):
        return "%s%d%s" % (m.group(1), next(tabIndex), m.group(2))

    return [_tabStopRe.sub(swapTabs, line) for line in lines]


def canonicalRow(row):
    """ drop trailing empty fields, "@param x" and "@param x None None" are the same row """
    row = list(row)
    while len(row) > 1 and not row[-1]:
        row.pop()
    return row
