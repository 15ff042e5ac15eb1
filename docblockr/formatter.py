"""
Renders DocBlock rows into comment lines.

Tag-table dialects (`/** ... */` and YARD) share the column-aligning renderer.
The Markdown-flavoured dialects (rustdoc, Swift, RDoc) have renderers of their
own which only share the row model.
"""
from .model import fixTabStops, outputWidth, stripPlaceholders
from .profile import (
    AFTER_SUMMARY, BETWEEN_SECTIONS, BLOCK, RDOC, RUSTDOC, SWIFT, YARD
)
from .wrapper import wrapLines


def field(row, idx):
    return row[idx] if idx < len(row) else None


def isBlank(row):
    return len(row) == 1 and not row[0]


def finish(lines, withPlaceholders):
    lines = [line.rstrip() for line in lines]
    if withPlaceholders:
        return fixTabStops(lines)
    return [stripPlaceholders(line) for line in lines]


def formatDocBlock(docBlock, profile, withPlaceholders=True, alignTags=0, wrapWidth=None):
    """
    Render rows as a list of lines.

    `alignTags` is the number of leading columns to pad (0 to 3), `wrapWidth`
    re-flows descriptions which run past that column. Only plain output
    (no placeholders) is wrapped.
    """
    if not docBlock:
        return []

    if profile.dialect == RUSTDOC:
        out = formatRustBlock(docBlock, profile)
    elif profile.dialect == SWIFT:
        out = formatSwiftBlock(docBlock, profile)
    elif profile.dialect == RDOC:
        out = formatRDocBlock(docBlock, profile)
    else:
        out = formatTagTable(docBlock, profile, alignTags)

    out = finish(out, withPlaceholders)

    if wrapWidth and not withPlaceholders:
        out = wrapLines(out, wrapWidth, profile)

    return out


def columnWidths(docBlock, profile):
    """ the widest rendered value of each alignable column, keyed by column index """
    widths = {}
    for row in docBlock:
        if len(row) < 2 or not profile.isTag(row[0]):
            continue
        for idx in profile.alignableColumns(row[0]):
            if idx < len(row):
                widths[idx] = max(widths.get(idx, 0), outputWidth(row[idx]))
    return widths


def formatRow(row, profile, widths, alignTags):
    if len(row) == 1 or not profile.isTag(row[0]):
        return ' '.join(f for f in row if f)

    alignable = profile.alignableColumns(row[0])
    line = ''

    for idx, value in enumerate(row[:3]):
        padded = idx in alignable and idx < alignTags
        if not value and not (padded and widths.get(idx)):
            continue
        value = value or ''
        if padded:
            value += ' ' * (widths.get(idx, 0) - outputWidth(value))
        line = value if idx == 0 else line + ' ' + value

    description = field(row, 3)
    if description:
        line += profile.descSeparator + description

    return line


def formatTagTable(docBlock, profile, alignTags=0):
    widths = columnWidths(docBlock, profile) if alignTags else {}
    prefix = profile.linePrefix
    last = len(docBlock) - 1

    out = [profile.commentOpener]

    for index, row in enumerate(docBlock):
        text = formatRow(row, profile, widths, alignTags)
        out.append(prefix + ' ' + text if text else prefix)

        if index == last:
            continue

        nextRow = docBlock[index + 1]
        if isBlank(row) or isBlank(nextRow):
            continue

        if profile.emptyLines >= AFTER_SUMMARY and index == 0 and not profile.isTag(row[0]):
            out.append(prefix)
        elif (profile.emptyLines == BETWEEN_SECTIONS
                and profile.isTag(nextRow[0])
                and nextRow[0] != row[0]):
            out.append(prefix)

    if profile.commentCloser:
        out.append(profile.commentCloser)

    return out


def splitSections(docBlock, profile):
    """
    Group rows for the prose dialects: (summary, other free text, other tags,
    params, throws, returns)
    """
    summary = None
    text = []
    tags = []
    params = []
    throws = []
    returns = []

    for row in docBlock:
        tag = row[0]
        if not profile.isTag(tag):
            if summary is None:
                summary = tag
            elif tag:
                text.append(tag)
        elif tag == '@param':
            params.append(row)
        elif tag == profile.throwsTag:
            throws.append(row)
        elif tag == profile.returnTag:
            returns.append(row)
        else:
            tags.append(row)

    return summary or '', text, tags, params, throws, returns


def tagValue(row):
    return ' '.join(f for f in row[1:] if f)


def formatRustBlock(docBlock, profile):
    summary, text, tags, params, throws, returns = splitSections(docBlock, profile)

    out = ['/// ' + summary]
    out.extend('/// ' + line for line in text)

    if params:
        out.extend(['///', '/// # Arguments', '///'])
        for row in params:
            out.append('/// * `%s` - %s' % (field(row, 2) or '', field(row, 3) or ''))

    if returns:
        out.extend(['///', '/// # Returns', '///'])
        for row in returns:
            out.append('/// ' + (field(row, 3) or ''))

    return out


def formatSwiftBlock(docBlock, profile):
    summary, text, tags, params, throws, returns = splitSections(docBlock, profile)

    out = ['/// ' + summary]
    out.extend('/// ' + line for line in text)

    if tags:
        out.append('///')
        for row in tags:
            out.append('/// - %s: %s' % (row[0][1:], tagValue(row)))

    if params:
        out.append('///')
        out.append('/// - Parameters:')
        for row in params:
            out.append('///   - %s: %s' % (field(row, 2) or '', field(row, 3) or ''))

    for row in throws:
        out.append('///')
        out.append('/// - Throws: ' + (field(row, 3) or ''))

    for row in returns:
        out.append('///')
        out.append('/// - Returns: ' + (field(row, 3) or ''))

    if len(out) > 1:
        out.append('///')

    return out


def formatRDocBlock(docBlock, profile):
    # http://blog.firsthand.ca/2010/09/ruby-rdoc-example.html
    summary, text, tags, params, throws, returns = splitSections(docBlock, profile)

    out = ['##', '# ' + summary]
    out.extend('# ' + line for line in text)

    if params:
        out.extend(['#', '# == Parameters:', '#'])
        for row in params:
            out.append('# +%s+:: %s' % (field(row, 2) or '', field(row, 3) or ''))

    if returns:
        out.extend(['#', '# == Returns:'])
        for row in returns:
            out.append('# ' + (field(row, 3) or ''))

    return out


def headerTag(tag):
    """ "@AUTHOR" --> "Author" """
    return tag[1:].lower().capitalize()


def formatHeaderBlock(docBlock, profile, withPlaceholders=True, alignTags=0):
    """
    The file header. Tag-table dialects render it like any other block, the
    prose dialects use their own "Tag: value" conventions.
    """
    if profile.isTabular:
        return formatDocBlock(docBlock, profile, withPlaceholders, alignTags)

    out = []
    for idx, row in enumerate(docBlock):
        tag = row[0]
        isTag = profile.isTag(tag)

        if profile.dialect == RUSTDOC:
            text = ' '.join(f for f in row if f)
            if isTag:
                text = text[1:]
            out.append('//! ' + text)
        elif profile.dialect == SWIFT:
            if isTag:
                out.append('/// - %s: %s' % (headerTag(tag), tagValue(row)))
            else:
                out.append('/// ' + tag)
            if idx == 0:
                out.append('///')
        else:
            if isTag:
                out.append('# %s:: %s' % (headerTag(tag), tagValue(row)))
            else:
                out.append('# ' + tag)

    return finish(out, withPlaceholders)


def formatBlockComment(profile, withPlaceholders=True):
    """ the bare comment offered when there is no declaration to document """
    if profile.dialect == BLOCK:
        out = [profile.commentOpener, profile.linePrefix + ' ${0:comment}', profile.commentCloser]
    elif profile.dialect == YARD:
        out = [profile.commentOpener, profile.linePrefix + ' ${0:comment}']
    elif profile.dialect == RDOC:
        out = ['=begin', '${0:comment}', '=end']
    else:
        out = ['/// ${0:comment}']

    return finish(out, withPlaceholders)
