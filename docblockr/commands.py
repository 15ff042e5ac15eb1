"""
The operations an editor (or the command line) invokes: generating a
docblock for the text after the cursor, the file header, tag completion and
reformatting every docblock in a document.

All of them take and return plain strings.
"""
import datetime
import logging
import re
import time

from .languages import getParser
from .profile import BLOCK, YARD
from .settings import Settings

logger = logging.getLogger(__name__)

_blockRe = re.compile(r'^[\t ]*/\*[*!](?:(?!/\*[*!]).)+?\*/[\t ]*$', re.M | re.S)
_yardRe = re.compile(r'^[\t ]*##\n(?:[\t ]*#[^\n]*\n)*[\t ]*#[^\n]*', re.M)
_customTagRe = re.compile(r'^(?P<tag>[@\\]\S+)(?:\s*(?P<remainder>.+))?$')


def _parserFor(language, settings):
    settings = settings if settings is not None else Settings()
    parser = getParser(language, settings)
    if parser is None:
        return None
    if not settings.isEnabled(parser.language):
        logger.debug('%s is disabled', parser.language)
        return None
    return parser


def generate(text, language, settings=None, snippet=True):
    """
    A docblock for the declaration at the start of `text`, as a list of lines.
    Falls back to a bare comment when there's nothing to document. Returns
    None if the language isn't supported or is disabled.
    """
    parser = _parserFor(language, settings)
    if parser is None:
        return None

    # end of file, or another comment next: nothing to document
    if not text.strip() or re.match(r'^\s*(?:/[*/]|#(?!\[))', text):
        return parser.formatBlockComment(snippet)

    definition = parser.getDefinition(text.splitlines())
    docBlock = parser.getDocBlock(definition) if definition else None

    if not docBlock:
        return parser.formatBlockComment(snippet)

    return parser.formatDocBlock(docBlock, withPlaceholders=snippet)


def substituteVariables(line):
    """ fill in $YEAR, {{date}} and {{datetime}} """
    def getVar(match):
        varName = match.group(1)
        if varName == 'datetime':
            date = datetime.datetime.now().replace(microsecond=0)
            offset = time.timezone / -3600.0
            return "%s%s%02d%02d" % (
                date.isoformat(),
                '+' if offset >= 0 else "-",
                abs(offset),
                (offset % 1) * 60
            )
        elif varName == 'date':
            return datetime.date.today().isoformat()
        else:
            return match.group(0)

    line = re.sub(r'\$YEAR(?![A-Z])', str(datetime.date.today().year), line)
    return re.sub(r'\{\{([^}]+)\}\}', getVar, line)


def headerRow(tag, parser):
    """
    "@license MIT" --> ["@license", "MIT"], a bare "@author" takes the
    template of the first known tag it matches
    """
    res = _customTagRe.match(tag)
    if not res:
        return [tag]

    if res.group('remainder'):
        return [res.group('tag'), res.group('remainder')]

    known = parser.lookupTags(res.group('tag'))
    if known:
        return ['@' + known[0].tag, known[0].template]

    return [tag]


def header(language, settings=None, snippet=True):
    """ the file header block, as a list of lines """
    parser = _parserFor(language, settings)
    if parser is None:
        return None

    docBlock = [['$FILENAME'], ['$WORKSPACE_NAME']]

    customTags = parser.config.get('docblockr_custom_tags') or []
    if customTags:
        docBlock.append([''])
        for tag in customTags:
            docBlock.append(headerRow(substituteVariables(tag), parser))

    return parser.formatHeaderBlock(docBlock, withPlaceholders=snippet)


def completeTag(line, language, settings=None):
    """
    Known tags matching the one being typed on a comment line, as
    DocTag(tag, template) pairs.
    """
    parser = _parserFor(language, settings)
    if parser is None:
        return []

    partial = parser.getTagPartial(line)
    if partial is None:
        return []

    return parser.lookupTags(partial)


def findDocBlocks(text, language, settings=None):
    """
    (start, end) offsets of every complete docblock in `text`. An unfinished
    comment is never matched together with the block after it.
    """
    parser = getParser(language, settings)
    if parser is None:
        return []

    if parser.profile.dialect == BLOCK:
        regex = _blockRe
    elif parser.profile.dialect == YARD:
        regex = _yardRe
    else:
        return []

    return [(m.start(), m.end()) for m in regex.finditer(text)]


def reformat(text, language, settings=None, width=None):
    """
    Re-align and re-wrap every docblock in a document. Blocks which can't be
    read back are left alone.
    """
    parser = _parserFor(language, settings)
    if parser is None or not parser.profile.isTabular:
        return text

    width = width or parser.config.get('docblockr_wrap_width', 80)

    # backwards, so the offsets of the blocks still to do stay valid
    for start, end in reversed(findDocBlocks(text, language, parser.config)):
        block = text[start:end]
        indent = re.match(r'^[\t ]*', block).group(0)

        docBlock = parser.parseDocBlock(block)
        if not docBlock:
            continue

        lines = parser.formatDocBlock(docBlock, withPlaceholders=False, wrapWidth=width - len(indent))
        text = text[:start] + indent + ('\n' + indent).join(lines) + text[end:]

    return text
