import re

from ..model import PLAIN, Argument, CallableDecl, ClassDecl, VarDecl
from ..profile import RUSTDOC
from .base import DocsParser

# #[derive(...)] and pub / pub(crate)
PREAMBLE = r'^\s*(?:#\[.+?\]\s*)*(?:pub(?:\s*\([^)]*\))?\s+)?'

SECTION = '\n///\n/// ${0:description}'
EXAMPLE = '\n///\n/// ```\n/// ${0:description}\n/// ```'


class DocsRust(DocsParser):
    language = 'rust'

    # https://github.com/rust-lang/rfcs/blob/master/text/1574-more-api-documentation-conventions.md
    tags = [
        ('Aborts', SECTION),
        ('Errors', SECTION),
        ('Examples', EXAMPLE),
        ('Panics', SECTION),
        ('Safety', SECTION),
        ('Undefined Behavior', SECTION),
    ]

    def setupSettings(self):
        return {
            'language': self.language,
            'varIdentifier': '[A-Za-z_][A-Za-z0-9_]*',
            'fnIdentifier': '[A-Za-z_][A-Za-z0-9_]*',
            'clsIdentifier': '[A-Z_][A-Za-z0-9_]*',
            'summaryKey': 'description',
            'returnTag': '@returns',
            'extendsTag': None,
            'dialect': RUSTDOC,
            'commentOpener': '///',
            'linePrefix': '///',
            'commentCloser': None,
            'tagCompletion': r'^/{3} #\s*(?P<tag>.*)$',
            'voidTypes': ('()',),
        }

    def parseClass(self, line):
        res = re.search(
            PREAMBLE + r'(?:struct|trait|enum|union)\s+(?P<name>' + self.profile.clsIdentifier + r')',
            line
        )
        if not res:
            return None
        return ClassDecl(res.group('name'), [])

    def parseFunction(self, line):
        res = re.search(
            PREAMBLE
            + r'(?:(?:const|async|unsafe|extern(?:\s+"[^"]*")?)\s+)*'
            + r'fn\s+(?P<name>' + self.profile.fnIdentifier + r')'
            # Type parameters if any
            + r'(?:\s*<[^(]*>)?'
            # List of parameters
            + r'\s*\(\s*(?P<args>.*?)\)'
            # Return value if any
            + r'(?:\s*->\s*(?P<rettype>[^{;]+?))?'
            + r'\s*(?:where\b[^{;]*)?(?:[{;].*)?$',
            line
        )
        if not res:
            return None

        rettype = res.group('rettype')
        return CallableDecl(
            res.group('name'),
            PLAIN,
            res.group('args').strip() or None,
            rettype.strip() if rettype else None,
            None
        )

    def parseVar(self, line):
        res = re.search(
            r'^\s*(?:#\[.+?\]\s*)*'
            + r'let\s+(?:mut\s+)?(?P<name>' + self.profile.varIdentifier + r')'
            + r'(?:\s*:\s*(?P<type>[^=;]+?))?\s*(?:=\s*(?P<value>[^;]*))?;?\s*$',
            line
        )
        if not res:
            return None
        return VarDecl(res.group('name'), res.group('type'), res.group('value'))

    def getDefinition(self, lines):
        # attributes on lines of their own
        lines = list(lines)
        while lines and re.match(r'^\s*#!?\[.*\]\s*$', lines[0]):
            lines.pop(0)
        return DocsParser.getDefinition(self, lines)

    def parseArgs(self, args):
        # the receiver is not documented
        return [arg for arg in DocsParser.parseArgs(self, args) if arg.name != 'self']

    def parseArg(self, arg):
        parts = re.split(r'\s*:\s*', arg.strip(), 1)
        words = parts[0].split()
        name = words[-1].lstrip('&') if words else parts[0]
        type = parts[1].strip() if len(parts) > 1 else None
        return Argument(name, type or None, None)
