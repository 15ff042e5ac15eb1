import re

from ..model import CONSTRUCTOR, PLAIN, Argument, CallableDecl, ClassDecl
from .base import MAX_DEFINITION_LINES, DocsParser, stripLineComments


class DocsJava(DocsParser):
    language = 'java'

    tags = [
        ('author', '${0:name}'),
        ('version', '${0:version}'),
        ('since', '${0:version}'),
        ('see', '${0:reference}'),
        ('serial', ''),
        ('serialField', ''),
        ('param', '${0:name} ${1:description}'),
        ('return', '${0:description}'),
        ('exception', '${0:classname} ${1:description}'),
        ('throws', '${0:classname} ${1:description}'),
        ('deprecated', '${0:description}'),
        ('inheritDoc', ''),
        ('link', '${0:reference}'),
        ('linkPlain', '${0:reference}'),
        ('value', ''),
        ('docRoot', ''),
        ('code', ''),
        ('literal', ''),
    ]

    def setupSettings(self):
        identifier = '[a-zA-Z_$][a-zA-Z_$0-9]*'
        return {
            'language': self.language,
            'varIdentifier': identifier,
            'fnIdentifier': identifier,
            'clsIdentifier': identifier,
            'fnOpener': identifier + r'(?:\s+' + identifier + r')?\s*\(',
            'returnTag': '@return',
            'argTags': ('@param', '@throws', '@exception'),
            'emptyLines': self.emptyLines(1),
        }

    def parseClass(self, line):
        res = re.search(
            r'^\s*(?:(?:public|protected|private|static|abstract|final|sealed|non-sealed|strictfp)\s+)*'
            + r'(?:class|interface|enum|record|@interface)\s+'
            + r'(?P<name>' + self.profile.clsIdentifier + r')'
            + r'(?:\s*<[^>]*>)?'
            + r'(?:\s+extends\s+(?P<extends>[a-zA-Z_$][a-zA-Z_$0-9.]*))?',
            line
        )
        if not res:
            return None

        extends = res.group('extends')
        return ClassDecl(res.group('name'), [extends] if extends else [])

    def parseFunction(self, line):
        res = re.search(
            # Modifiers
            r'^\s*(?:(?:public|protected|private|static|abstract|final|transient|synchronized|native|strictfp|default)\s+)*'
            # Type parameters
            + r'(?:<[^>]*>\s+)?'
            # Return value, constructors have none
            + r'(?:(?!(?:return|new|throw|else)\b)(?P<retval>[a-zA-Z_$][<>., a-zA-Z_$0-9?\[\]]*?)\s+)?'
            # Method name
            + r'(?P<name>' + self.profile.fnIdentifier + r')\s*'
            # Params
            + r'\((?P<args>.*?)\)\s*'
            # Throws
            + r'(?:throws\s+(?P<throws>[a-zA-Z_$0-9.,\s]*))?',
            line
        )
        if not res:
            return None

        retval = res.group('retval')
        retval = re.sub(r'\s', '', retval) if retval else None
        kind = PLAIN if retval else CONSTRUCTOR

        throws = [t.strip() for t in (res.group('throws') or '').split(',') if t.strip()]

        return CallableDecl(res.group('name'), kind, res.group('args').strip() or None, retval, throws)

    def parseArg(self, arg):
        # drop annotations and `final`
        arg = re.sub(r'@[\w.]+(?:\([^)]*\))?\s*|\bfinal\s+', '', arg).strip()
        if not arg:
            return Argument(arg, None, None)

        name = arg.split()[-1]
        type = arg[:arg.rindex(name)].strip() or None
        return Argument(name, type, None)

    def getDefinition(self, lines):
        """
        Java declarations are often preceded by annotations, which can span
        several lines. Skip those, then read up to the opening brace.
        """
        definition = ''
        open_curly_annotation = False
        open_paren_annotation = False
        fnOpener = self.profile.fnOpener

        for line in lines[:MAX_DEFINITION_LINES]:
            # Move past empty lines
            if re.search(r'^\s*$', line):
                continue
            # strip comments
            line = stripLineComments(line)
            if definition == '':
                # Must check here for function opener on same line as annotation
                if fnOpener and re.search(r'^\s*@', line) and re.search(fnOpener, re.sub(r'@[\w.]+(?:\([^)]*\))?', '', line)):
                    line = re.sub(r'^\s*(?:@[\w.]+(?:\([^)]*\))?\s*)+', '', line)
                # Handle Annotations
                elif re.search(r'^\s*@', line):
                    if re.search(r'\{', line) and not re.search(r'\}', line):
                        open_curly_annotation = True
                    if re.search(r'\(', line) and not re.search(r'\)', line):
                        open_paren_annotation = True
                    continue
                elif open_curly_annotation:
                    if re.search(r'\}', line):
                        open_curly_annotation = False
                    continue
                elif open_paren_annotation:
                    if re.search(r'\)', line):
                        open_paren_annotation = False
                    continue
                elif re.search(r'^\s*$', line):
                    continue
                # Check for function
                elif not fnOpener or not re.search(fnOpener, line):
                    definition = line.strip()
                    break
            definition = (definition + ' ' + line.strip()).strip()
            if line.find(';') > -1 or line.find('{') > -1:
                definition = re.sub(r'\s*[;{]\s*$', '', definition)
                break
        else:
            if len(lines) > MAX_DEFINITION_LINES:
                return ''

        return definition
