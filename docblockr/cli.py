"""Command line front end: generate, header, format and tags."""
import argparse
import logging
import sys

from . import __version__
from .commands import completeTag, generate, header, reformat
from .languages import PARSERS, getParser
from .settings import Settings, SettingsError

logger = logging.getLogger('docblockr')


def readInput(path):
    if not path or path == '-':
        return sys.stdin.read()
    with open(path, encoding='utf-8') as f:
        return f.read()


def printLines(lines):
    sys.stdout.write('\n'.join(lines) + '\n')


def cmdGenerate(args, settings):
    printLines(generate(readInput(args.file), args.language, settings, snippet=args.snippet))
    return 0


def cmdHeader(args, settings):
    printLines(header(args.language, settings, snippet=args.snippet))
    return 0


def cmdFormat(args, settings):
    if args.in_place and not args.file:
        logger.error('--in-place needs a file')
        return 2

    text = reformat(readInput(args.file), args.language, settings, width=args.width)

    if args.in_place:
        with open(args.file, 'w', encoding='utf-8') as f:
            f.write(text)
    else:
        sys.stdout.write(text)
    return 0


def cmdTags(args, settings):
    # either a bare partial ("par") or the comment line being typed ("* @par")
    tags = completeTag(args.partial, args.language, settings)
    if not tags:
        tags = getParser(args.language, settings).lookupTags(args.partial)

    for tag in tags:
        print('%s\t%s' % (tag.tag, tag.template))
    return 0


def buildParser():
    parser = argparse.ArgumentParser(prog='docblockr', description='Generate and reformat documentation comments.')
    parser.add_argument('--version', action='version', version='%(prog)s ' + __version__)
    parser.add_argument('--settings', help='JSON settings file')
    parser.add_argument('-v', '--verbose', action='store_true', help='log debugging output')

    language = argparse.ArgumentParser(add_help=False)
    language.add_argument(
        '-l', '--language', required=True,
        help='source language, one of: %s' % ', '.join(sorted(PARSERS))
    )

    subparsers = parser.add_subparsers(dest='command')
    subparsers.required = True

    p = subparsers.add_parser('generate', parents=[language], help='docblock for the declaration read from FILE')
    p.add_argument('file', nargs='?', help='source text starting at the declaration (default: stdin)')
    p.add_argument('--snippet', action='store_true', help='keep ${n:placeholder} fields')
    p.set_defaults(func=cmdGenerate)

    p = subparsers.add_parser('header', parents=[language], help='file header block')
    p.add_argument('--snippet', action='store_true', help='keep ${n:placeholder} fields')
    p.set_defaults(func=cmdHeader)

    p = subparsers.add_parser('format', parents=[language], help='reformat every docblock in FILE')
    p.add_argument('file', nargs='?', help='document to reformat (default: stdin)')
    p.add_argument('-w', '--width', type=int, help='wrap column (default: docblockr_wrap_width)')
    p.add_argument('-i', '--in-place', action='store_true', help='rewrite FILE instead of printing')
    p.set_defaults(func=cmdFormat)

    p = subparsers.add_parser('tags', parents=[language], help='list known tags starting with PARTIAL')
    p.add_argument('partial', help='a tag prefix, or the comment line being typed, e.g. "* @par"')
    p.set_defaults(func=cmdTags)

    return parser


def main(argv=None):
    parser = buildParser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(name)s: %(levelname)s: %(message)s'
    )

    try:
        settings = Settings.load(args.settings) if args.settings else Settings()
    except SettingsError as e:
        logger.error('%s', e)
        return 1

    docsParser = getParser(args.language, settings)
    if docsParser is None:
        parser.error('unsupported language: %s' % args.language)

    if not settings.isEnabled(docsParser.language):
        logger.error('%s is disabled in the settings', args.language)
        return 1

    return args.func(args, settings)


if __name__ == '__main__':
    sys.exit(main())
