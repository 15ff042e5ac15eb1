import re


# characters which open a section inside which commas are not separators between different arguments
openQuotes = '"\'<('
# characters which close the section. The position of the character here should match the opening
# indicator in `openQuotes`
closeQuotes = '"\'>)'


def splitByCommas(str):
    """
    Split a string by unenclosed commas: that is, commas which are not inside of quotes or brackets.
    splitByCommas('foo, bar(baz, quux), fwip = "hey, hi"')
     ==> ['foo', 'bar(baz, quux)', 'fwip = "hey, hi"']

    Unterminated quotes or brackets swallow the rest of the string, nothing is raised.
    """
    out = []

    if not str:
        return out

    # the current token
    current = ''

    matchingQuote = ''
    insideQuotes = False
    nextIsLiteral = False
    arrayDepth = 0
    objectDepth = 0

    for char in str:
        if nextIsLiteral:  # previous char was a \
            current += char
            nextIsLiteral = False
        elif char == '\\':
            if insideQuotes:
                nextIsLiteral = True
            else:
                current += char
        elif insideQuotes:
            current += char
            if char == matchingQuote:
                insideQuotes = False
        elif char in openQuotes:
            current += char
            matchingQuote = closeQuotes[openQuotes.index(char)]
            insideQuotes = True
        elif char == '[':
            current += char
            arrayDepth += 1
        elif char == ']':
            current += char
            arrayDepth -= 1
        elif char == '{':
            current += char
            objectDepth += 1
        elif char == '}':
            current += char
            objectDepth -= 1
        elif char == ',' and arrayDepth == 0 and objectDepth == 0:
            out.append(current.strip())
            current = ''
        else:
            current += char

    out.append(current.strip())
    return [arg for arg in out if arg]


def stripComments(args):
    """ remove block comments inside an argument list """
    return re.sub(r'/\*.*?\*/', '', args)
