import re

from ..model import CONSTRUCTOR, GENERATOR, PLAIN, Argument, CallableDecl, ClassDecl, VarDecl
from .javascript import DocsJavascript


def normalizeType(type):
    """
    "string | null" --> "?string", "A|B" --> "(A|B)", and literal
    array / object / function types to their names
    """
    type = re.sub(r'\s', '', type or '')
    if not type:
        return None
    if type.endswith('|null'):
        return '?' + type[:-len('|null')]
    if '|' in type:
        return '(' + type + ')'
    if type[0] == '[':
        return 'Array'
    if type[0] == '{':
        return 'Object'
    if type[0] == '(':
        return 'Function'  # most likely
    return type


class DocsTypescript(DocsJavascript):
    language = 'typescript'

    def setupSettings(self):
        settings = DocsJavascript.setupSettings(self)
        settings['language'] = self.language
        settings['emptyLines'] = self.emptyLines(0)

        identifier = settings['varIdentifier']
        baseType = identifier + r'(?:\.' + identifier + r')*(?:\[\])?'
        self.parametricType = (
            baseType + r'(?:\s*<\s*' + baseType + r'(?:\s*,\s*' + baseType + r'\s*)*>)?'
        )
        return settings

    def parseClass(self, line):
        res = re.search(
            r'^\s*(?:export\s+(?:default\s+)?)?(?:(?:abstract|declare)\s+)*class\s+'
            + r'(?P<name>' + self.profile.clsIdentifier + r')'
            + r'(?:\s*<[^>]*>)?'
            + r'(?:\s+extends\s+(?P<extends>' + self.profile.clsIdentifier + r'))?',
            line
        )
        if not res:
            return None

        extends = res.group('extends')
        return ClassDecl(res.group('name'), [extends] if extends else [])

    def parseFunction(self, line):
        returnTypes = self.parametricType + r'(?:\s*\|\s*' + self.parametricType + r')*'

        res = re.search(
            r'^\s*(?:export\s+(?:default\s+)?)?'
            # Modifiers
            + r'(?P<modifiers>(?:(?:public|private|protected|static|readonly|abstract|declare|async)\s+)*)'
            + r'(?:function(?P<generator>\s*\*)?\s*)?'
            # Method name
            + r'(?P<name>' + self.profile.fnIdentifier + r')\s*'
            # Type parameter
            + r'(?:<[^>]+>)?\s*'
            # Params
            + r'\((?P<args>.*?)\)\s*'
            # Return value
            + r'(?::\s*(?P<rettype>' + returnTypes + r'))?',
            line
        )
        if res:
            isAsync = 'async' in res.group('modifiers').split()
        else:
            res = re.search(
                r'^\s*(?:export\s+)?(?:const|let|var)\s+'
                + r'(?P<name>' + self.profile.varIdentifier + r')\s*'
                + r'(?::\s*[^=]+)?=\s*'
                + r'(?P<async>async\s+)?'
                + r'(?:(?P<arg>' + self.profile.varIdentifier + r')|\((?P<args>.*?)\))\s*'
                + r'(?::\s*(?P<rettype>' + returnTypes + r'))?\s*=>',
                line
            )
            if not res:
                return None
            isAsync = bool(res.group('async'))

        groups = res.groupdict()
        name = groups['name']
        args = groups.get('args') or groups.get('arg')
        returnType = normalizeType(groups.get('rettype'))
        kind = PLAIN

        if groups.get('generator'):
            kind = GENERATOR
        if isAsync and not returnType:
            returnType = 'Promise'
        if name == 'constructor':
            kind = CONSTRUCTOR
            returnType = None

        return CallableDecl(name, kind, args, returnType, None)

    def parseVar(self, line):
        res = re.search(
            # Modifiers
            r'^\s*(?:export\s+)?(?:(?:public|private|protected|static|readonly|declare|var|let|const)\s+)*'
            # Name
            + r'(?P<name>' + self.profile.varIdentifier + r')[?!]?\s*'
            # Parametric type
            + r'(?::\s*(?P<type>' + self.parametricType + r'))?'
            # Value
            + r'(?:\s*=\s*(?P<value>.*?))?\s*(?:[;,]|$)',
            line
        )
        if not res:
            return None

        return VarDecl(res.group('name'), res.group('type'), res.group('value'))

    def parseArg(self, arg):
        # "cb: () => void = noop" has one default value, not two
        parts = re.split(r'=(?!>)', arg, 1)
        name = parts[0]
        value = parts[1].strip() if len(parts) > 1 else None
        type = None

        if ':' in name:
            name, type = name.split(':', 1)
            type = normalizeType(type)

        name = re.sub(r'\b(?:public|private|protected|readonly)\s+', '', name)
        name = re.sub(r'[ ?]', '', name)
        if name.startswith('...'):
            name = name[3:]
            type = type or 'Array'

        return Argument(name.strip(), type, value)
