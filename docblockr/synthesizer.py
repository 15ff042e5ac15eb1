"""
Turns a classified declaration into the rows of a DocBlock.

Every editable field is wrapped in a placeholder. The running placeholder
index is passed into, and returned from, each step so the tab order follows
the emission order: summary first (always 0), then each field in turn.
"""
from .inference import guessTypeFromName, resolveType
from .model import (
    CONSTRUCTOR, GENERATOR, GETTER, MEMBER, STATEMENTS,
    CallableDecl, ClassDecl, VarDecl, escape, placeholder
)


def synthesize(declaration, parser):
    """
    Returns a list of rows, or None if there is nothing to document.
    """
    if declaration is None or declaration.name in STATEMENTS:
        return None

    if isinstance(declaration, ClassDecl):
        return formatClass(declaration, parser.profile)
    if isinstance(declaration, CallableDecl):
        return formatFunction(declaration, parser)
    if isinstance(declaration, VarDecl):
        return formatVar(declaration, parser.profile)
    return None


def formatSummary(profile, index=0):
    summary, index = placeholder(profile.summaryKey, index)
    return [summary], index


def formatClass(declaration, profile):
    row, index = formatSummary(profile)
    out = [row]

    if profile.extendsTag:
        superTypes = list(declaration.superTypes or [])
        if not profile.multipleSuperTypes:
            superTypes = superTypes[:1]
        for superType in superTypes:
            out.append([profile.extendsTag, escape(superType)])

    return out


def formatFunction(declaration, parser):
    profile = parser.profile
    row, index = formatSummary(profile)
    out = [row]

    if declaration.kind in (MEMBER, GETTER) and profile.memberTag:
        parent, index = placeholder('parent', index)
        out.append([profile.memberTag, parent])

    # if there are arguments, add a @param for each
    for arg in parser.parseArgs(declaration.rawArgs):
        row, index = formatParam(arg, profile, index)
        out.append(row)

    row, index = formatReturn(declaration, profile, index)
    if row:
        out.append(row)

    for exceptionName in declaration.throwsTypes or []:
        row, index = formatThrows(exceptionName, profile, index)
        out.append(row)

    return out


def formatTypeField(tag, type, profile, index):
    """ the type column for `tag`, or None if the language has no such column """
    if not profile.hasTypeColumn(tag):
        return None, index
    text, index = placeholder(escape(type), index)
    return profile.formatType(text), index


def formatParam(arg, profile, index):
    type, index = formatTypeField(
        '@param',
        resolveType(arg.type, arg.value, arg.name, profile),
        profile,
        index
    )
    description, index = placeholder('description', index)
    return ['@param', type, escape(arg.name), description], index


def formatReturn(declaration, profile, index):
    """
    The trailing @return / @yields / @type row. Constructors get none, and
    neither do void functions in languages which don't document types.
    """
    kind = declaration.kind
    returnType = declaration.returnType

    if kind == CONSTRUCTOR:
        return None, index

    if kind == GETTER:
        tag = profile.varTag or profile.returnTag
        returnType = returnType or 'type'
    elif kind == GENERATOR:
        tag = profile.yieldTag
        returnType = returnType or 'type'
    else:
        tag = profile.returnTag
        if not returnType:
            returnType = guessTypeFromName(declaration.name, profile)
        if not returnType:
            return None, index
        if profile.isVoid(returnType) and not profile.hasTypeColumn(tag):
            return None, index

    type, index = formatTypeField(tag, returnType, profile, index)
    description, index = placeholder('description', index)
    return [tag, type, None, description], index


def formatThrows(exceptionName, profile, index):
    tag = profile.throwsTag
    name = None
    type = None
    if profile.hasArgColumn(tag):
        name = escape(exceptionName)
    else:
        type, index = formatTypeField(tag, exceptionName, profile, index)
    description, index = placeholder('description', index)
    return [tag, type, name, description], index


def formatVar(declaration, profile):
    row, index = formatSummary(profile)
    out = [row]

    if not profile.varTag:
        return out

    type = resolveType(declaration.declaredType, declaration.initializerExpr, declaration.name, profile)
    if profile.hasTypeColumn(profile.varTag):
        text, index = formatTypeField(profile.varTag, type, profile, index)
    else:
        text, index = placeholder(escape(type), index)
    out.append([profile.varTag, text])

    return out
