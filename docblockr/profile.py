"""
Per-language configuration. Each parser fills in a settings dict in
`setupSettings`, which is frozen into a LanguageProfile once per parser.
"""
from collections import namedtuple
from types import MappingProxyType


BLOCK = 'block'
YARD = 'yard'
RDOC = 'rdoc'
RUSTDOC = 'rustdoc'
SWIFT = 'swift'

# dialects rendered as a table of tags, as opposed to Markdown-flavoured prose
TABULAR_DIALECTS = (BLOCK, YARD)

# empty-line policies
NO_EMPTY_LINES = 0
AFTER_SUMMARY = 1
BETWEEN_SECTIONS = 2

DEFAULT_TYPE_NAMES = {
    'integer': 'number',
    'float': 'number',
    'string': 'string',
    'array': 'Array',
    'object': 'Object',
    'bool': 'boolean',
    'function': 'Function',
    'regexp': 'RegExp',
}

_fields = [
    'language',
    'varIdentifier',
    'fnIdentifier',
    'clsIdentifier',
    'typeFormat',
    'summaryKey',
    'varTag',
    'returnTag',
    'yieldTag',
    'throwsTag',
    'memberTag',
    'extendsTag',
    'multipleSuperTypes',
    'typeTags',
    'argTags',
    'descTags',
    'dialect',
    'commentOpener',
    'linePrefix',
    'commentCloser',
    'tagChars',
    'descSeparator',
    'emptyLines',
    'typeNames',
    'voidTypes',
    'fnOpener',
    'tagCompletion',
]

_defaults = {
    'typeFormat': None,
    'summaryKey': 'summary',
    'varTag': None,
    'returnTag': '@return',
    'yieldTag': '@yields',
    'throwsTag': '@throws',
    'memberTag': None,
    'extendsTag': '@extends',
    'multipleSuperTypes': False,
    'typeTags': (),
    'argTags': ('@param',),
    'descTags': ('@return', '@returns', '@throws'),
    'dialect': BLOCK,
    'commentOpener': '/**',
    'linePrefix': ' *',
    'commentCloser': ' */',
    'tagChars': '@',
    'descSeparator': ' ',
    'emptyLines': NO_EMPTY_LINES,
    'typeNames': DEFAULT_TYPE_NAMES,
    'voidTypes': ('void',),
    'fnOpener': None,
    'tagCompletion': r'^\*\s+@(?P<tag>\S*)$',
}


class LanguageProfile(namedtuple('LanguageProfile', _fields)):
    __slots__ = ()

    def normalizeTag(self, tag):
        """ "\\param" --> "@param" """
        if tag and tag[0] in self.tagChars:
            return '@' + tag[1:]
        return tag

    def isTag(self, text):
        return bool(text) and text[0] in self.tagChars

    def hasTypeColumn(self, tag):
        return self.typeFormat is not None and self.normalizeTag(tag) in self.typeTags

    def hasArgColumn(self, tag):
        return self.normalizeTag(tag) in self.argTags

    def isStructured(self, tag):
        tag = self.normalizeTag(tag)
        return tag in self.typeTags or tag in self.argTags or tag in self.descTags

    def alignableColumns(self, tag):
        """ column indexes which take part in alignment for rows starting with `tag` """
        columns = [0]
        if self.hasTypeColumn(tag):
            columns.append(1)
        if self.hasArgColumn(tag):
            columns.append(2)
        return columns

    def formatType(self, type):
        if self.typeFormat is None:
            return None
        return self.typeFormat % type

    def isVoid(self, type):
        return type is not None and type.replace(' ', '') in self.voidTypes

    @property
    def isTabular(self):
        return self.dialect in TABULAR_DIALECTS


def createProfile(settings):
    values = dict(_defaults)
    values.update(settings)
    for key in ('typeTags', 'argTags', 'descTags'):
        values[key] = frozenset(values[key])
    typeNames = dict(DEFAULT_TYPE_NAMES)
    typeNames.update(values['typeNames'])
    values['typeNames'] = MappingProxyType(typeNames)
    return LanguageProfile(**values)
