import re

from ..model import PLAIN, Argument, CallableDecl, ClassDecl
from .base import DocsParser


class DocsObjC(DocsParser):
    language = 'objc'

    # HeaderDoc tags
    tags = [
        ('abstract', '${0:description}'),
        ('apiuid', '${0:description}'),
        ('attribute', ''),
        ('attributelist', ''),
        ('attributeblock', ''),
        ('availability', '${0:description}'),
        ('brief', '${0:description}'),
        ('discussion', '${0:description}'),
        ('indexgroup', '${0:name}'),
        ('internal', ''),
        ('link', '${0:link}'),
        ('namespace', '${0:namespace}'),
        ('see', '${0:link}'),
        ('seealso', '${0:link}'),
        ('updated', '${0:description}'),
        ('frameworkcopyright', '${0:year} ${1:description}'),
        ('frameworkpath', '${0:path}'),
        ('frameworkuid', '${0:UID}'),
        ('headerpath', '${0:path}'),
        ('author', '${0:author}'),
        ('charset', '${0:charset}'),
        ('compilerflag', '${0:flags}'),
        ('copyright', '${0:copyright}'),
        ('CFBundleIdentifier', '${0:bundle}'),
        ('encoding', '${0:charset}'),
        ('flag', '${0:flags}'),
        ('ignore', '${0:description}'),
        ('ignorefuncmacro', '${0:description}'),
        ('preprocinfo', ''),
        ('related', '${0:description}'),
        ('unsorted', ''),
        ('version', '${0:version}'),
        ('whyinclude', '${0:description}'),
        ('classdesign', '${0:description}'),
        ('coclass', '${0:class} ${1:description}'),
        ('dependency', '${0:description}'),
        ('deprecated', '${0:description}'),
        ('helper', '${0:class}'),
        ('helperclass', '${0:class}'),
        ('helps', '${0:description}'),
        ('instancesize', '${0:description}'),
        ('ownership', '${0:description}'),
        ('performance', '${0:description}'),
        ('security', '${0:description}'),
        ('superclass', '${0:class}'),
        ('templatefield', '${0:field} ${1:description}'),
        ('var', '${0:var}'),
        ('param', '${0:name} ${1:description}'),
        ('result', '${0:description}'),
        ('return', '${0:description}'),
        ('throws', '${0:description}'),
        ('callback', '${0:function} ${1:description}'),
        ('field', '${0:field} ${1:description}'),
        ('constant', '${0:name} ${1:description}'),
        ('const', '${0:name} ${1:description}'),
        ('define', '${0:name}'),
        ('defined', '${0:name}'),
        ('noParse', ''),
        ('parseOnly', ''),
    ]

    def setupSettings(self):
        identifier = '[a-zA-Z_$][a-zA-Z_$0-9]*'
        return {
            'language': self.language,
            'varIdentifier': identifier,
            'fnIdentifier': identifier,
            'clsIdentifier': identifier,
            'varTag': '@var',
            'returnTag': '@return',
            'commentOpener': '/*!' if self.config.get('docblockr_comment_style') == 1 else '/**',
            'tagChars': '@\\',
            'tagCompletion': r'^\*\s+[@\\](?P<tag>\S*)$',
            'emptyLines': self.emptyLines(1),
        }

    def parseClass(self, line):
        res = re.search(
            r'^\s*@(?:interface|implementation|protocol)\s+'
            + r'(?P<name>' + self.profile.clsIdentifier + r')'
            + r'(?:\s*:\s*(?P<extends>' + self.profile.clsIdentifier + r'))?',
            line
        )
        if not res:
            return None

        extends = res.group('extends')
        return ClassDecl(res.group('name'), [extends] if extends else [])

    def parseFunction(self, line):
        typeRe = r'[A-Za-z_$][A-Za-z0-9_$]*\s*\**'
        res = re.search(
            r'[-+]\s*\(\s*(?P<retval>' + typeRe + r')\s*\)\s*'
            + r'(?P<name>' + self.profile.fnIdentifier + r')'
            + r'\s*(?::(?P<args>[^{;]*))?',
            line
        )
        if not res:
            return None

        name = res.group('name')
        argStr = res.group('args')
        args = []

        # "- (void)foo:(int)a bar:(int)b" is the selector "foo:bar:"
        if argStr:
            groups = re.split(r'\s*:\s*', argStr.strip())
            for i, group in enumerate(groups):
                if i < len(groups) - 1:
                    part = re.search(r'\s+(\S*)$', group)
                    if part:
                        name += ':' + part.group(1)
                        group = group[:part.start()]
                args.append(group)
            name += ':'

        retval = re.sub(r'\s', '', res.group('retval'))
        return CallableDecl(name, PLAIN, '|||'.join(args) or None, retval, None)

    def parseArgs(self, args):
        """
        Selector arguments are joined with "|||" by parseFunction, each of
        them "(type)name"
        """
        if not args:
            return []
        return [self.parseArg(arg) for arg in args.split('|||')]

    def parseArg(self, arg):
        res = re.search(r'^\s*\((?P<type>[^)]*)\)\s*(?P<name>\S+)', arg)
        if not res:
            return Argument(arg.strip(), None, None)
        return Argument(res.group('name'), res.group('type').strip(), None)
