import re

from ..model import CONSTRUCTOR, PLAIN, Argument, CallableDecl, ClassDecl, VarDecl
from .base import DocsParser


def nullable(type):
    """ "?int" --> "int|null" """
    if type and type.startswith('?'):
        return type[1:] + '|null'
    return type


class DocsPHP(DocsParser):
    language = 'php'

    tags = [
        ('api', ''),
        ('author', '${0:name} ${1:email}'),
        ('category', '${0:description}'),
        ('copyright', '${0:description}'),
        ('deprecated', '${0:version} ${1:description}'),
        ('example', '${0:location} ${1:description}'),
        ('filesource', ''),
        ('global', '${0:type} ${1:name}'),
        ('ignore', '${0:description}'),
        ('internal', '${0:description}'),
        ('license', '${0:url} ${1:name}'),
        ('link', '${0:uri} ${1:description}'),
        ('method', '${0:returnType} ${1:name}(${2:args}) ${3:description}'),
        ('package', '${0:name}'),
        ('param', '${0:type} ${1:name} ${2:description}'),
        ('property', '${0:type} ${1:name} ${2:description}'),
        ('property-read', '${0:type} ${1:name} ${2:description}'),
        ('property-write', '${0:type} ${1:name} ${2:description}'),
        ('return', '${0:type} ${1:description}'),
        ('see', '${0:uri} ${1:description}'),
        ('since', '${0:version} ${1:description}'),
        ('source', '${0:start} ${1:count} ${2:description}'),
        ('subpackage', '${0:name}'),
        ('throws', '${0:type} ${1:description}'),
        ('todo', '${0:description}'),
        ('uses', '${0:fqsen} ${1:description}'),
        ('var', '${0:type} ${1:name} ${2:description}'),
        ('version', '${0:version} ${1:description}'),
    ]

    def setupSettings(self):
        shortIdentifier = '[a-zA-Z_$\x7f-\xff][a-zA-Z0-9_\x7f-\xff]*'
        return {
            'language': self.language,
            'varIdentifier': shortIdentifier + '(?:->' + shortIdentifier + ')*',
            'fnIdentifier': shortIdentifier,
            'clsIdentifier': shortIdentifier,
            'fnOpener': r'function(?:\s+' + shortIdentifier + r')?\s*\(',
            'typeFormat': '%s',
            'varTag': '@var',
            'returnTag': '@return',
            'typeTags': ('@param', '@property', '@return', '@throws', '@var'),
            'argTags': ('@param', '@property'),
            'emptyLines': self.emptyLines(2),
            'typeNames': {
                'integer': 'integer',
                'float': 'float',
                'string': 'string',
                'array': 'array',
                'object': 'object',
                'bool': 'boolean',
                'function': 'callable',
                'regexp': 'string',
            },
        }

    def parseClass(self, line):
        res = re.search(
            r'^\s*(?:(?:abstract|final|readonly)\s+)*class\s+'
            + r'(?P<name>' + self.profile.clsIdentifier + r')'
            + r'(?:\s+extends\s+(?P<extends>[a-zA-Z0-9_\\\x7f-\xff]+))?',
            line
        )
        if not res:
            return None

        extends = res.group('extends')
        return ClassDecl(res.group('name'), [extends] if extends else [])

    def parseFunction(self, line):
        res = re.search(
            r'^\s*(?:(?:final|abstract)\s+)?(?:(?:public|protected|private)\s+)?(?:final\s+)?(?:static\s+)?'
            + r'function\s+&?\s*'
            + r'(?P<name>' + self.profile.fnIdentifier + r')\s*'
            # nested parentheses are not matched
            + r'\(\s*(?P<args>.*?)\)'
            + r'(?:\s*:\s*(?P<rettype>\??[a-zA-Z0-9_|\\]+))?',
            line
        )
        if not res:
            return None

        name = res.group('name')
        kind = PLAIN
        returnType = nullable(res.group('rettype'))

        if name == '__construct':
            kind = CONSTRUCTOR
            returnType = None

        return CallableDecl(name, kind, res.group('args') or None, returnType, None)

    def parseVar(self, line):
        res = re.search(
            r'^\s*(?P<modifiers>(?:(?:var|public|protected|private|static|const|final|readonly)\s+)*)'
            + r'(?:(?P<type>\??[a-zA-Z_\\][a-zA-Z0-9_|\\]*)\s+(?=[$a-zA-Z_]))?'
            + r'(?P<name>' + self.profile.varIdentifier + r')'
            + r'(?:\s*=>?\s*(?P<value>.*?)(?:[;,]|$))?',
            line
        )
        if not res:
            return None

        # "echo $foo" is not a declaration
        if res.group('type') and not res.group('modifiers'):
            return None

        return VarDecl(res.group('name'), nullable(res.group('type')), res.group('value'))

    def parseArg(self, arg):
        variable = r'(?P<name>\$[a-zA-Z_\x7f-\xff][a-zA-Z0-9_\x7f-\xff]*)'
        default = r'(?:\s*=\s*(?P<value>.*))?'

        # promoted constructor properties
        arg = re.sub(r'^\s*(?:(?:public|protected|private|readonly)\s+)+', '', arg).strip()

        res = re.search(
            r'^(?P<type>\??[a-zA-Z_\\\x7f-\xff][a-zA-Z0-9_|\\\x7f-\xff]*)\s+&?(?P<splat>\.{3})?'
            + variable + default,
            arg
        )
        if res:
            type = nullable(res.group('type'))
            if res.group('splat'):
                type += '[]'
            return Argument(res.group('name'), type, res.group('value'))

        res = re.search(r'&?(?P<splat>\.{3})' + variable, arg)
        if res:
            return Argument(res.group('name'), self.profile.typeNames['array'], None)

        res = re.search(r'&?' + variable + default, arg)
        if res:
            return Argument(res.group('name'), None, res.group('value'))

        return Argument(arg, None, None)
