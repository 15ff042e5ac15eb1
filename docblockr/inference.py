"""
Best-effort guessing of a type name, either from a literal value or from the
name of the thing being documented.
"""
import re


def isNumeric(val):
    try:
        float(val)
        return True
    except ValueError:
        return False


def guessTypeFromValue(val, profile):
    """
    Guess the type of a literal value. Returns None if nothing looks familiar,
    the caller is expected to fall back to the name, then to "type".
    """
    if not val:
        return None

    val = val.strip()
    typeNames = profile.typeNames

    if isNumeric(val):
        if '.' in val or 'e' in val.lower():
            return typeNames['float']
        return typeNames['integer']

    if val[0] in ('"', "'", '`'):
        return typeNames['string']

    if val[:5].lower() == 'array' or val[0] == '[':
        return typeNames['array']

    if val[0] == '{':
        return typeNames['object']

    if val.lower() in ('true', 'false'):
        return typeNames['bool']

    if re.match(r'^RegExp|^/[^/*].*/[a-z]*$', val):
        return typeNames['regexp']

    if val[:4] == 'new ':
        res = re.match(r'new\s+(?P<type>' + profile.fnIdentifier + ')', val)
        return res.group('type') if res else None

    return None


def guessTypeFromName(name, profile):
    if not name:
        return None

    if re.match('[$_]?(?:is|has)[A-Z_]', name):
        return profile.typeNames['bool']

    if re.match('^[$_]?(?:cb|callback|done|next|fn)$', name):
        return profile.typeNames['function']

    return None


def resolveType(declared, value, name, profile):
    """ declared type -> value -> name -> the literal "type" placeholder """
    return (declared
            or guessTypeFromValue(value, profile)
            or guessTypeFromName(name, profile)
            or 'type')
