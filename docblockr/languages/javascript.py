import re

from ..model import (
    CONSTRUCTOR, GENERATOR, GETTER, MEMBER, PLAIN,
    Argument, CallableDecl, ClassDecl, VarDecl
)
from .base import DocsParser


class DocsJavascript(DocsParser):
    language = 'javascript'

    tags = [
        ('abstract', ''),
        ('access', '${0:package|private|protected|public}'),
        ('alias', '${0:aliasNamepath}'),
        ('async', ''),
        ('author', '${0:name} ${1:email}'),
        ('borrows', '${0:namepath} as ${1:namepath}'),
        ('callback', '${0:namepath}'),
        ('class', '${0:name}'),
        ('classdesc', '${0:description}'),
        ('const', '{${0:type}}'),
        ('constructs', '${0:name}'),
        ('copyright', '${0:copyright}'),
        ('default', '${0:value}'),
        ('deprecated', '${0:description}'),
        ('desc', '${0:description}'),
        ('enum', '{${0:type}}'),
        ('event', '${0:eventName}'),
        ('example', '${0:example}'),
        ('exports', '${0:moduleName}'),
        ('extends', '${0:namepath}'),
        ('external', '${0:name}'),
        ('file', '${0:description}'),
        ('fires', '${0:eventName}'),
        ('function', '${0:functionName}'),
        ('generator', ''),
        ('global', ''),
        ('hideconstructor', ''),
        ('ignore', ''),
        ('implements', '{${0:typeExpression}}'),
        ('inheritdoc', ''),
        ('inner', ''),
        ('instance', ''),
        ('interface', '${0:name}'),
        ('kind', '${0:kindName}'),
        ('lends', '${0:namepath}'),
        ('license', '${0:identifier}'),
        ('listens', '${0:eventName}'),
        ('memberof', '${0:parentNamepath}'),
        ('mixes', '${0:otherObjectPath}'),
        ('mixin', '${0:MixinName}'),
        ('module', '${0:moduleName}'),
        ('name', '${0:namepath}'),
        ('namespace', '${0:name}'),
        ('override', ''),
        ('package', ''),
        ('param', '{${0:type}} ${1:name} - ${2:description}'),
        ('private', ''),
        ('property', '{${0:type}} ${1:name} - ${2:description}'),
        ('protected', ''),
        ('public', ''),
        ('readonly', ''),
        ('requires', '${0:moduleName}'),
        ('returns', '{${0:type}} - ${1:description}'),
        ('see', '${0:namepath}'),
        ('since', '${0:versionDescription}'),
        ('static', ''),
        ('this', '${0:namePath}'),
        ('throws', '{${0:type}} - ${1:description}'),
        ('todo', '${0:description}'),
        ('tutorial', '${0:description}'),
        ('type', '{${0:type}}'),
        ('typedef', '{${0:type}} ${1:namepath}'),
        ('variation', '${0:variationNumber}'),
        ('version', '${0:version}'),
        ('yields', '{${0:type}} - ${1:description}'),
    ]

    def setupSettings(self):
        identifier = '[a-zA-Z_$][a-zA-Z_$0-9]*'
        return {
            'language': self.language,
            'varIdentifier': identifier,
            'fnIdentifier': identifier,
            'clsIdentifier': identifier,
            'fnOpener': r'function(?:\s+' + identifier + r')?\s*\(',
            'typeFormat': '{%s}',
            'varTag': '@type',
            'returnTag': '@returns',
            'memberTag': '@memberof',
            'typeTags': ('@param', '@property', '@returns', '@yields', '@throws', '@type'),
            'argTags': ('@param', '@property'),
            'descSeparator': ' - ',
            'emptyLines': self.emptyLines(0),
        }

    def parseClass(self, line):
        res = re.search(
            r'^\s*(?:export\s+(?:default\s+)?)?class\s+'
            + r'(?P<name>' + self.profile.clsIdentifier + r')'
            + r'(?:\s+extends\s+(?P<extends>' + self.profile.clsIdentifier + r'))?',
            line
        )
        if not res:
            return None

        extends = res.group('extends')
        return ClassDecl(res.group('name'), [extends] if extends else [])

    def parseFunction(self, line):
        identifier = self.profile.varIdentifier
        # quotes indicate what will be matched in each line
        preFunction = (
            # "  "var foo = function bar (baz, quaz) {}
            r'^\s*'
            r'(?:'
            # "return" foo = function bar (baz, quaz) {}
            r'return\s+'
            r'|'
            # "export default "var foo = function bar (baz, quaz) {}
            r'(?:export\s+(?:default\s+)?)?'
            # export default "var "foo = function bar (baz, quaz) {}
            r'(?:(?:var|let|const)\s+)?'
            r')?'
            r'(?:'
            # var "bar.prototype."foo = function bar (baz, quaz) {}
            r'(?:[a-zA-Z_$][a-zA-Z_$0-9.]*\.)?'
            # var "foo = "function bar (baz, quaz) {}
            r'(?P<name1>' + identifier + r')\s*[:=]\s*'
            r')?'
        )
        modifiers = r'(?:\bstatic\s+)?(?P<promise>\basync\s+)?'

        functionRe = (
            preFunction + modifiers
            # var foo = "function "bar (baz, quaz) {}
            + r'(?:function(?P<generator>\s*\*)?)\s*'
            # var foo = function "bar "(baz, quaz) {}
            + r'(?:\b(?P<name2>' + self.profile.fnIdentifier + r'))?\s*'
            # var foo = function bar "(baz, quaz)" {}
            + r'\(\s*(?P<args>.*?)\)'
        )
        methodRe = (
            r'^\s*' + modifiers
            + r'(?P<generator>\*)?\s*'
            + r'(?P<name2>' + self.profile.fnIdentifier + r')\s*'
            + r'\(\s*(?P<args>.*?)\)\s*\{'
        )
        getterRe = (
            r'^\s*(?P<getter>get|set)\s+'
            + r'(?P<name2>' + self.profile.fnIdentifier + r')\s*'
            + r'\(\s*(?P<args>.*?)\)\s*\{'
        )
        arrowRe = (
            preFunction
            + r'(?P<promise>async\s+)?'
            + r'(?:'
            # var foo = "bar" => {}
            + r'(?P<arg>' + identifier + r')'
            + r'|'
            # var foo = "(bar, baz)" => {}
            + r'\(\s*(?P<args>.*?)\)'
            + r')\s*'
            # var foo = bar "=>" {}
            + r'=>\s*'
        )

        kind = PLAIN
        for which, regex in (('function', functionRe), ('method', methodRe),
                             ('getter', getterRe), ('arrow', arrowRe)):
            res = re.search(regex, line)
            if res:
                break
        else:
            return None

        groups = res.groupdict()
        # grab the name out of "name1 = function name2(foo)" preferring name1
        name = groups.get('name1') or groups.get('name2') or ''
        args = groups.get('args') or groups.get('arg') or None
        returnType = None

        if which == 'function' and name[:1].isupper():
            kind = CONSTRUCTOR
        elif which == 'method':
            kind = CONSTRUCTOR if name == 'constructor' else MEMBER
        elif which == 'getter':
            kind = GETTER if groups['getter'] == 'get' else MEMBER

        if groups.get('generator'):
            kind = GENERATOR
        if groups.get('promise'):
            returnType = 'Promise'

        return CallableDecl(name, kind, args, returnType, None)

    def parseVar(self, line):
        res = re.search(
            r'(?P<name>' + self.profile.varIdentifier + r')\s*[=:]\s*(?P<value>.*?)(?:[;,]|$)',
            line
        )
        if not res:
            return None

        return VarDecl(res.group('name'), None, res.group('value'))

    def parseArg(self, arg):
        identifier = self.profile.varIdentifier

        # rest parameter
        res = re.search(r'\.{3}(?P<name>' + identifier + ')', arg)
        if res:
            return Argument(res.group('name'), 'Array', None)

        # destructuring assignment
        res = re.search(r'^(?P<object>\{.*\})|^(?P<array>\[.*\])', arg)
        if res:
            return Argument('', 'Object' if res.group('object') else 'Array', None)

        res = re.search(r'(?P<name>' + identifier + r')(?:\s*=\s*(?P<value>.*))?', arg)
        if res:
            return Argument(res.group('name'), None, res.group('value'))

        return Argument(arg.strip(), None, None)
