import re

from ..model import CONSTRUCTOR, PLAIN, Argument, CallableDecl, ClassDecl, VarDecl
from ..tokenizer import splitByCommas
from .base import DocsParser

# words which can start a statement that looks like a typed declaration
KEYWORDS = r'(?:return|new|delete|throw|else|case|goto|using|namespace|typedef|co_return|co_yield)\b'


class DocsCPP(DocsParser):
    language = 'cpp'

    # Doxygen commands
    tags = [
        ('addtogroup', '${0:name} ${1:title}'),
        ('callgraph', ''),
        ('hidecallgraph', ''),
        ('callergraph', ''),
        ('hidecallergraph', ''),
        ('showrefby', ''),
        ('hiderefby', ''),
        ('showrefs', ''),
        ('hiderefs', ''),
        ('class', '${0:name} ${1:header file} ${2:header name}'),
        ('concept', '${0:name}'),
        ('def', '${0:name}'),
        ('defgroup', '${0:name} ${1:group} ${2:title}'),
        ('dir', '${0:path} ${1:fragment}'),
        ('enum', '${0:name}'),
        ('example', '${0:lineno}, ${1:file name}'),
        ('endinternal', ''),
        ('extends', '${0:name}'),
        ('file', '${0:name}'),
        ('fn', ''),
        ('headerfile', '${0:header file} ${1:header name}'),
        ('hideinitializer', ''),
        ('idlexcept', '${0:name}'),
        ('implements', '${0:name}'),
        ('ingroup', '${0:groupname}'),
        ('interface', '${0:name} ${1:header file} ${2:header name}'),
        ('internal', ''),
        ('mainpage', '${0:title}'),
        ('memberof', '${0:name}'),
        ('name', '${0:header}'),
        ('namespace', '${0:name}'),
        ('nosubgrouping', ''),
        ('overload', '${0:function declaration}'),
        ('page', '${0:name} ${1:title}'),
        ('private', ''),
        ('privatesection', ''),
        ('property', ''),
        ('protected', ''),
        ('protectedsection', ''),
        ('protocol', '${0:name} ${1:header file} ${2:header name}'),
        ('public', ''),
        ('publicsection', ''),
        ('pure', ''),
        ('relates', '${0:name}'),
        ('related', '${0:name}'),
        ('relatesalso', '${0:name}'),
        ('relatedalso', '${0:name}'),
        ('showinitializer', ''),
        ('static', ''),
        ('struct', '${0:name} ${1:header file} ${2:header name}'),
        ('typedef', ''),
        ('union', '${0:name} ${1:header file} ${2:header name}'),
        ('var', ''),
        ('weakgroup', '${0:name} ${1:title}'),
        ('author', '${0:author}'),
        ('brief', '${0:description}'),
        ('bug', '${0:description}'),
        ('copyright', '${0:copyright}'),
        ('date', '${0:date}'),
        ('deprecated', '${0:description}'),
        ('details', '${0:description}'),
        ('noop', ''),
        ('raisewarning', ''),
        ('note', '${0:text}'),
        ('param', '${0:name} ${1:description}'),
        ('result', '${0:description}'),
        ('return', '${0:description}'),
        ('retval', '${0:description}'),
        ('see', '${0:references}'),
        ('since', '${0:text}'),
        ('tparam', '${0:name} ${1:description}'),
        ('throw', '${0:exception description}'),
        ('throws', '${0:exception description}'),
        ('todo', '${0:text}'),
        ('version', '${0:version}'),
        ('warning', '${0:message}'),
    ]

    def setupSettings(self):
        validChars = '[A-Za-z_][A-Za-z0-9_]*'
        identifier = validChars + '(?:::' + validChars + r')*(?:\s*<[^<>;()]*>)?'
        return {
            'language': self.language,
            'varIdentifier': validChars,
            'fnIdentifier': identifier,
            'clsIdentifier': identifier,
            'summaryKey': 'brief',
            'varTag': '@var',
            'returnTag': '@return',
            'multipleSuperTypes': True,
            'argTags': ('@param', '@tparam'),
            'descTags': ('@return', '@returns', '@retval', '@throw', '@throws'),
            'commentOpener': '/*!' if self.config.get('docblockr_comment_style') == 1 else '/**',
            'tagChars': '@\\',
            'tagCompletion': r'^\*\s+[@\\](?P<tag>\S*)$',
            'emptyLines': self.emptyLines(1),
        }

    def parseClass(self, line):
        attributes = r'(?:\[\[[^\]]*\]\]\s*)*'
        res = re.search(
            r'^\s*(?:template\s*<[^>]*>\s*)?'
            # class-key
            + r'(?:class|struct|union)\s+' + attributes
            # class-head-name
            + r'(?P<name>' + self.profile.clsIdentifier + r')'
            + r'\s*(?:final\b)?'
            # base-clause
            + r'\s*(?::(?P<bases>[^{;]*))?',
            line
        )
        if not res:
            return None

        superTypes = []
        for base in splitByCommas(res.group('bases') or ''):
            base = re.sub(attributes, '', base)
            base = re.sub(r'\b(?:virtual|private|public|protected)\b', '', base).strip()
            if base:
                superTypes.append(base)

        return ClassDecl(res.group('name'), superTypes)

    def parseFunction(self, line):
        identifier = self.profile.fnIdentifier
        res = re.search(
            r'^\s*(?:template\s*<[^>]*>\s*)?'
            + r'(?:(?:static|inline|virtual|explicit|extern|constexpr|consteval|friend|const|unsigned|signed|long|short)\s+)*'
            # return type
            + r'(?:(?!' + KEYWORDS + r')(?P<rettype>' + identifier + r')(?P<pointer>[\s&*]+))?'
            # fnName
            + r'(?P<name>(?:[A-Za-z_][A-Za-z0-9_]*::)*~?' + identifier + r')'
            # (arg1, arg2)
            + r'\s*\(\s*(?P<args>.*?)\)',
            line
        )
        if not res:
            return None

        name = res.group('name').strip()
        returnType = None
        if res.group('rettype'):
            returnType = res.group('rettype') + re.sub(r'\s', '', res.group('pointer'))

        # Foo::Foo and Foo::~Foo
        parts = name.split('::')
        kind = PLAIN
        if name.startswith('~') or (len(parts) > 1 and parts[-1].lstrip('~') == parts[-2]):
            kind = CONSTRUCTOR

        return CallableDecl(name, kind, res.group('args') or None, returnType, None)

    def parseVar(self, line):
        res = re.search(
            r'^\s*(?:(?:static|const|constexpr|extern|volatile|mutable|inline|thread_local|unsigned|signed|long|short)\s+)*'
            + r'(?!' + KEYWORDS + r')(?P<type>' + self.profile.clsIdentifier + r')(?P<pointer>[\s&*]+)'
            + r'(?P<name>' + self.profile.varIdentifier + r')\s*(?P<array>\[[^\]]*\])?'
            + r'\s*(?:=\s*(?P<value>[^;,]*)|\{(?P<init>[^}]*)\})?\s*[;,]?\s*$',
            line
        )
        if not res:
            return None

        type = res.group('type') + re.sub(r'\s', '', res.group('pointer'))
        if res.group('array'):
            type += '[]'

        return VarDecl(res.group('name'), type, res.group('value'))

    def parseArgs(self, args):
        # f(void) takes no arguments
        if args and args.strip() == 'void':
            return []
        return DocsParser.parseArgs(self, args)

    def parseArg(self, arg):
        parts = arg.split('=', 1)
        value = parts[1].strip() if len(parts) > 1 else None

        res = re.search(
            r'^(?P<type>.*?[\s&*])(?P<name>' + self.profile.varIdentifier + r')\s*(?P<array>\[[^\]]*\])?$',
            parts[0].strip()
        )
        if not res:
            return Argument(parts[0].strip(), None, value)

        type = re.sub(r'\s+', ' ', res.group('type')).strip()
        if res.group('array'):
            type += '[]'

        return Argument(res.group('name'), type, value)
