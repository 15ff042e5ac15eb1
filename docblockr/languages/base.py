import logging
import re
from functools import reduce

from ..formatter import formatBlockComment, formatDocBlock, formatHeaderBlock
from ..model import STATEMENTS, Argument, DocTag
from ..profile import createProfile
from ..reparser import parseDocBlock
from ..settings import Settings
from ..synthesizer import synthesize
from ..tokenizer import splitByCommas, stripComments

logger = logging.getLogger(__name__)

MAX_DEFINITION_LINES = 25  # don't go further than this


def blankStrings(line):
    """ 'foo("a, b")' --> 'foo("")', so quoted brackets and commas can't confuse the scan """
    line = re.sub(r"'(?:\\.|[^'\\])*'", "''", line)
    return re.sub(r'"(?:\\.|[^"\\])*"', '""', line)


def stripLineComments(line):
    line = re.sub(r"//.*", "", line)
    return re.sub(r"/\*.*?\*/", "", line)


class DocsParser(object):
    """
    One grammar per language. Subclasses provide `setupSettings` and the
    `parseClass` / `parseFunction` / `parseVar` / `parseArg` recognizers,
    everything else is shared.
    """

    language = None

    # known tags, a list of (name, template) pairs
    tags = []

    def __init__(self, config=None):
        self.config = config if config is not None else Settings()
        self.profile = createProfile(self.setupSettings())

    def setupSettings(self):
        raise NotImplementedError

    def emptyLines(self, default):
        return self.config.forLanguage('docblockr_add_empty_line', self.language, default)

    def parseDeclaration(self, line):
        """
        Classify a declaration: a class, then a function, then a variable. The
        first recognizer that matches wins. Returns None if nothing matched.
        """
        if not line or not line.strip():
            return None

        try:
            for recognizer in (self.parseClass, self.parseFunction, self.parseVar):
                out = recognizer(line)
                if out:
                    if out.name in STATEMENTS:
                        logger.debug('%r is a statement, not a declaration', line)
                        return None
                    return out
        except Exception:
            logger.debug('could not classify %r', line, exc_info=True)
            return None

        logger.debug('no declaration found in %r', line)
        return None

    def parseClass(self, line):
        return None

    def parseFunction(self, line):
        return None

    def parseVar(self, line):
        return None

    def parseArgs(self, args):
        """
        A list of Arguments, one per parameter
        """
        if not args:
            return []
        return [self.parseArg(arg) for arg in splitByCommas(stripComments(args))]

    def parseArg(self, arg):
        return Argument(arg.strip(), None, None)

    def getDefinition(self, lines):
        """
        get a relevant definition from the lines following the insertion point
        returns string
        """
        openBrackets = 0

        definition = ''

        # count the number of open parentheses
        def countBrackets(total, bracket):
            return total + (1 if bracket == '(' else -1)

        for line in lines[:MAX_DEFINITION_LINES]:
            line = blankStrings(stripLineComments(line)).strip()
            if not line:
                continue

            searchForBrackets = line

            # on the first line, only start looking from *after* the actual function starts. This is
            # needed for cases like this:
            # (function (foo, bar) { ... })
            if definition == '' and self.profile.fnOpener:
                opener = re.search(self.profile.fnOpener, line)
                if opener:
                    # ignore everything before the function opener
                    searchForBrackets = line[opener.start():]

            openBrackets = reduce(countBrackets, re.findall('[()]', searchForBrackets), openBrackets)

            definition = (definition + ' ' + line).strip()
            if openBrackets <= 0 or line.endswith(';'):
                break
        else:
            if len(lines) > MAX_DEFINITION_LINES:
                logger.debug('no definition within %d lines', MAX_DEFINITION_LINES)
                return ''

        return definition

    def lookupTags(self, partial):
        """
        All known tags starting with `partial`, e.g. "par" --> [DocTag('param', ...)]
        """
        partial = (partial or '').lstrip('@\\').lower()
        return [DocTag(name, template) for name, template in self.tags if name.lower().startswith(partial)]

    def getTagPartial(self, line):
        """ the partially typed tag on a comment line, or None """
        res = re.search(self.profile.tagCompletion, line.strip())
        return res.group('tag') if res else None

    def getDocBlock(self, line):
        """ classify a declaration and turn it into rows, None if there's nothing to document """
        return synthesize(self.parseDeclaration(line), self)

    def formatDocBlock(self, docBlock, withPlaceholders=True, wrapWidth=None):
        return formatDocBlock(
            docBlock,
            self.profile,
            withPlaceholders=withPlaceholders,
            alignTags=self.config.alignLevel(),
            wrapWidth=wrapWidth
        )

    def formatHeaderBlock(self, docBlock, withPlaceholders=True):
        return formatHeaderBlock(docBlock, self.profile, withPlaceholders, self.config.alignLevel())

    def formatBlockComment(self, withPlaceholders=True):
        return formatBlockComment(self.profile, withPlaceholders)

    def parseDocBlock(self, text):
        return parseDocBlock(text, self.profile)
