import re

from ..model import CONSTRUCTOR, PLAIN, Argument, CallableDecl, ClassDecl
from ..profile import SWIFT
from .base import DocsParser

MODIFIERS = r'(?:(?:@\w+|public|private|internal|open|fileprivate|static|class|final|override|mutating|nonmutating|required|convenience|dynamic|lazy)\s+)*'


class DocsSwift(DocsParser):
    language = 'swift'

    tags = [
        ('attention', '${0:description}'),
        ('author', '${0:description}'),
        ('authors', '${0:description}'),
        ('bug', '${0:description}'),
        ('complexity', '${0:description}'),
        ('copyright', '${0:description}'),
        ('date', '${0:description}'),
        ('example', '${0:description}'),
        ('experiment', '${0:description}'),
        ('important', '${0:description}'),
        ('invariant', '${0:description}'),
        ('note', '${0:description}'),
        ('parameter', '${0:name} ${1:description}'),
        ('postcondition', '${0:description}'),
        ('precondition', '${0:description}'),
        ('remark', '${0:description}'),
        ('remarks', '${0:description}'),
        ('requires', '${0:description}'),
        ('returns', '${0:description}'),
        ('see', '${0:description}'),
        ('since', '${0:description}'),
        ('throws', '${0:description}'),
        ('todo', '${0:description}'),
        ('version', '${0:description}'),
        ('warning', '${0:description}'),
    ]

    def setupSettings(self):
        # names can contain almost any unicode character, this covers the usual ones
        return {
            'language': self.language,
            'varIdentifier': '[A-Za-z_][A-Za-z0-9_]*',
            'fnIdentifier': '[A-Za-z_][A-Za-z0-9_]*',
            'clsIdentifier': '[A-Z_][A-Za-z0-9_]*',
            'summaryKey': 'description',
            'returnTag': '@returns',
            'extendsTag': None,
            'dialect': SWIFT,
            'commentOpener': '///',
            'linePrefix': '///',
            'commentCloser': None,
            'tagCompletion': r'^/{3}\s+-\s*(?P<tag>\S*)$',
            'voidTypes': ('Void', '()'),
        }

    def parseClass(self, line):
        # class className: classType (, protocol)*
        res = re.search(
            r'^\s*' + MODIFIERS
            + r'(?:class|struct|enum|protocol|actor|extension)\s+(?P<name>' + self.profile.clsIdentifier + r')',
            line
        )
        if not res:
            return None
        return ClassDecl(res.group('name'), [])

    def parseFunction(self, line):
        # functions taking closures with nested parentheses of their own will fail
        res = re.search(
            r'^\s*' + MODIFIERS
            + r'(?:func\s+(?P<name>' + self.profile.fnIdentifier + r')|(?P<init>init)[?!]?)'
            # generic
            + r'(?:\s*<[^>]*?>)?'
            # arguments with nested parentheses (1 level)
            + r'\s*\((?P<args>(?:[^()]|\([^()]*\))*)\)'
            + r'\s*(?:async\s*)?(?:re)?(?P<throws>throws)?'
            # return type
            + r'(?:\s*->\s*(?P<rettype>[^{]+))?',
            line
        )
        if not res:
            return None

        kind = PLAIN
        name = res.group('name')
        if res.group('init'):
            kind = CONSTRUCTOR
            name = 'init'

        return CallableDecl(
            name,
            kind,
            res.group('args').strip() or None,
            self.parseReturnType(res.group('rettype')),
            ['Error'] if res.group('throws') else None
        )

    def parseReturnType(self, type):
        """ "(Int, Int)" --> "Tuple", "String?" --> "Optional(String)" """
        if not type:
            return None

        type = type.strip()
        if self.profile.isVoid(type):
            return type

        res = re.search(
            r'^(?:(?P<type>' + self.profile.varIdentifier + r')(?:<[^>]*>)?|(?P<tuple>\([^)]*\)))(?P<optional>\?)?',
            type
        )
        if not res:
            return 'type'  # probably a function

        type = res.group('type') or 'Tuple'
        if res.group('optional'):
            type = 'Optional(%s)' % type
        return type

    def parseArg(self, arg):
        res = re.search(
            # label or _
            r'^\s*(?:(?P<label>' + self.profile.varIdentifier + r'|_)\s+)?'
            # name
            + r'(?P<name>' + self.profile.varIdentifier + r')\s*:\s*'
            # type
            + r'(?:inout\s+)?(?:@escaping\s+)?(?P<type>[^=]+?)'
            # default value
            + r'(?:\s*=\s*(?P<value>.+))?$',
            arg
        )
        if not res:
            return Argument(arg.strip(), None, None)

        type = res.group('type').strip()
        if type.endswith('?'):
            type = 'Optional(%s)' % type[:-1]

        return Argument(res.group('name'), type, res.group('value'))
