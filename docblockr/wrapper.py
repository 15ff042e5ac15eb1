import re


def descriptionOffset(body, profile):
    """
    Where the description starts in a comment line with its marker removed.
    "@param {string} foo - bar" --> 22 (the position of "bar")
    """
    if not profile.isTag(body):
        return 0

    tag = body.split(None, 1)[0]

    pattern = r'\S+\s+'
    if profile.hasTypeColumn(tag):
        pattern += r'(?:\{[^}]*\}|\[[^\]]*\]|\S+)\s+'
    if profile.hasArgColumn(tag):
        pattern += r'\S+\s+'
    pattern += r'(?:-\s+)?'

    res = re.match(pattern, body) or re.match(r'\S+\s+', body)
    return res.end() if res else 0


def wrapLine(line, width, profile):
    marker = re.escape(profile.linePrefix.strip())
    lead = re.match(r'^(\s*%s ?)' % marker, line)
    if not lead:
        return [line]

    lead = lead.group(1)
    body = line[len(lead):]
    offset = descriptionOffset(body, profile)

    words = body[offset:].split()
    if not words:
        return [line]

    # line comments need the marker on every line
    indent = '' if profile.commentCloser else lead.rstrip()
    indent += ' ' * (len(lead) + offset - len(indent))

    out = []
    current = lead + body[:offset] + words[0]

    for word in words[1:]:
        if len(current) + 1 + len(word) <= width:
            current += ' ' + word
        else:
            out.append(current)
            # a word longer than the line is never split
            current = indent + word

    out.append(current)
    return out


def wrapLines(lines, width, profile):
    """
    Re-flow lines longer than `width`. Continuation lines are indented to the
    column where the description started, so they read as one paragraph.    """
    delimiters = (profile.commentOpener, (profile.commentCloser or '').strip())

    out = []
    for line in lines:
        if len(line) <= width or line.strip() in delimiters:
            out.append(line)
        else:
            out.extend(wrapLine(line, width, profile))

    return out
