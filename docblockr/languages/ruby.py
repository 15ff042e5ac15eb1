import re

from ..model import CONSTRUCTOR, PLAIN, Argument, CallableDecl, ClassDecl
from ..profile import RDOC, YARD
from .base import DocsParser

YARD_TYPE_NAMES = {
    'integer': 'Integer',
    'float': 'Float',
    'string': 'String',
    'array': 'Array',
    'object': 'Hash',
    'bool': 'Boolean',
    'function': 'Proc',
    'regexp': 'Regexp',
}


class DocsRuby(DocsParser):
    language = 'ruby'

    # https://rubydoc.info/gems/yard/file/docs/Tags.md#taglist
    tags = [
        ('abstract', '${0:description}'),
        ('api', '${0:description}'),
        ('author', '${0:description}'),
        ('deprecated', '${0:description}'),
        ('example', ''),
        ('note', '${0:description}'),
        ('option', '[${0:type}] ${1:name} ${2:description}'),
        ('overload', '${0:description}'),
        ('param', '[${0:type}] ${1:name} ${2:description}'),
        ('private', ''),
        ('raise', '[${0:type}] ${1:description}'),
        ('return', '[${0:type}] ${1:description}'),
        ('see', '${0:name} ${1:description}'),
        ('since', '${0:description}'),
        ('todo', '${0:description}'),
        ('version', '${0:description}'),
        ('yield', '[${0:parameters}] ${1:description}'),
        ('yieldparam', '[${0:type}] ${1:name} ${2:description}'),
        ('yieldreturn', '[${0:type}] ${1:description}'),
    ]

    def setupSettings(self):
        yard = self.config.get('docblockr_comment_style_ruby', 1) != 0
        return {
            'language': self.language,
            'varIdentifier': '[a-z_][A-Za-z0-9_]*',
            'fnIdentifier': '[a-z_][A-Za-z0-9_]*[!?=]?',
            'clsIdentifier': '[A-Z_][A-Za-z0-9_]*(?:::[A-Z_][A-Za-z0-9_]*)*',
            'typeFormat': '[%s]',
            'summaryKey': 'description',
            'returnTag': '@return',
            'yieldTag': '@yieldreturn',
            'throwsTag': '@raise',
            'extendsTag': None,
            'typeTags': ('@param', '@option', '@return', '@raise', '@yieldparam', '@yieldreturn'),
            'argTags': ('@param', '@option', '@yieldparam'),
            'descTags': ('@return', '@raise', '@yieldreturn'),
            'dialect': YARD if yard else RDOC,
            'commentOpener': '##',
            'linePrefix': '#',
            'commentCloser': None,
            'tagCompletion': r'^#\s+@(?P<tag>\S*)$',
            'typeNames': YARD_TYPE_NAMES,
            'voidTypes': ('void', 'nil'),
            'emptyLines': self.emptyLines(1),
        }

    def parseClass(self, line):
        res = re.search(r'^\s*(?:class|module)\s+(?P<name>' + self.profile.clsIdentifier + r')', line)
        if not res:
            return None
        return ClassDecl(res.group('name'), [])

    def parseFunction(self, line):
        res = re.search(
            r'^\s*def\s+(?:self\.)?(?P<name>' + self.profile.fnIdentifier + r')'
            # List of parameters, with or without parentheses
            + r'(?:\s*\(\s*(?P<args>.*?)\)|[ \t]+(?P<bare>[^;#]*))?',
            line
        )
        if not res:
            return None

        name = res.group('name')
        args = (res.group('args') or res.group('bare') or '').strip()
        kind = PLAIN
        returnType = None

        if name.endswith('?'):
            returnType = self.profile.typeNames['bool']
        if name == 'initialize':
            kind = CONSTRUCTOR

        return CallableDecl(name, kind, args or None, returnType, None)

    def parseArg(self, arg):
        parts = re.split(r'\s*[:=]\s*', arg.strip(), 1)
        name = parts[0].split()[-1] if parts[0].split() else parts[0]
        value = (parts[1].strip() or None) if len(parts) > 1 else None

        type = None
        if name.startswith('**'):
            type = 'Hash'
        elif name.startswith('*'):
            type = 'Array'
        elif name.startswith('&'):
            type = 'Block'

        return Argument(name.lstrip('*&'), type, value)
