"""
Reads an existing docblock back into rows, so it can be re-aligned and
re-wrapped. Only the tag-table dialects can be read back.
"""
import logging
import re

from .model import canonicalRow
from .profile import AFTER_SUMMARY, BETWEEN_SECTIONS

logger = logging.getLogger(__name__)

_openerRe = re.compile(r'^\s*(?:/\*[*!]|##)')
_closerRe = re.compile(r'\*/\s*$')


def stripMarkers(text, profile):
    """ the comment text without its delimiters, one stripped string per line """
    text = _closerRe.sub('', _openerRe.sub('', text.strip()))
    marker = re.compile(r'^\s*%s' % re.escape(profile.linePrefix.strip()))
    return [marker.sub('', line).strip() for line in text.splitlines()]


def leadingWord(line, profile):
    return line.split(None, 1)[0] if profile.isTag(line) else line


def blankPutBack(out, line, profile):
    """ whether the formatter adds a blank line between out[-1] and `line` by itself """
    if profile.emptyLines >= AFTER_SUMMARY and len(out) == 1 and not profile.isTag(out[0]):
        return True
    return (profile.emptyLines == BETWEEN_SECTIONS
            and profile.isTag(line)
            and leadingWord(line, profile) != leadingWord(out[-1], profile))


def joinLines(lines, profile):
    """
    Build logical lines: a tag starts a new line, plain text continues the
    previous one. Blank lines come back as '', unless the formatter would
    put them back anyway.
    """
    out = []
    pendingBlank = False

    for line in lines:
        if not line:
            pendingBlank = bool(out)
            continue

        if pendingBlank:
            if not blankPutBack(out, line, profile):
                out.append('')
            out.append(line)
        elif profile.isTag(line):
            out.append(line)
        elif not out or out[-1] == '':
            out.append(line)
        elif len(out) == 1 and not profile.isTag(out[0]) and out[0].endswith('.'):
            # a period ends the summary, what follows is a paragraph of its own
            out.append(line)
        else:
            out[-1] += ' ' + line

        pendingBlank = False

    return out


def splitType(text, profile):
    """
    Take the type off the front of `text`. Returns (type, rest), type is None
    if there isn't one.
    """
    if not text:
        return None, text

    fmt = profile.typeFormat
    if fmt == '%s':
        parts = text.split(None, 1)
        return parts[0], (parts[1] if len(parts) > 1 else '')

    opener = fmt[0]
    closer = fmt[-1]
    if text[0] != opener:
        return None, text

    depth = 0
    for idx, char in enumerate(text):
        if char == opener:
            depth += 1
        elif char == closer:
            depth -= 1
            if depth == 0:
                return text[:idx + 1], text[idx + 1:].lstrip()

    return text, ''


def splitTagLine(line, profile):
    """
    "@param {string} foo - bar" --> ["@param", "{string}", "foo", "bar"]
    """
    parts = line.split(None, 1)
    tag = parts[0]
    rest = parts[1] if len(parts) > 1 else ''

    if not profile.isStructured(tag):
        return [tag, rest] if rest else [tag]

    type = None
    if profile.hasTypeColumn(tag):
        type, rest = splitType(rest, profile)

    name = None
    if profile.hasArgColumn(tag) and rest:
        if rest == '-' or rest.startswith('- '):
            name = ''
        else:
            parts = rest.split(None, 1)
            name = parts[0]
            rest = parts[1] if len(parts) > 1 else ''

    description = re.sub(r'^-(?:\s+|$)', '', rest).strip()

    return canonicalRow([tag, type, name, description or None])


def parseDocBlock(text, profile):
    """
    Rows for an existing comment, or None if there is nothing in it (or the
    dialect can't be read back).
    """
    if not profile.isTabular:
        logger.debug('%s comments are not re-parsed', profile.dialect)
        return None

    lines = stripMarkers(text, profile)
    if not ''.join(lines).strip():
        return None

    out = []
    for line in joinLines(lines, profile):
        if profile.isTag(line):
            out.append(splitTagLine(line, profile))
        else:
            out.append([line])

    return out
