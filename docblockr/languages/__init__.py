import logging

from .base import DocsParser
from .cpp import DocsCPP
from .java import DocsJava
from .javascript import DocsJavascript
from .objc import DocsObjC
from .php import DocsPHP
from .ruby import DocsRuby
from .rust import DocsRust
from .swift import DocsSwift
from .typescript import DocsTypescript

logger = logging.getLogger(__name__)

PARSERS = {
    'c': DocsCPP,
    'c++': DocsCPP,
    'cpp': DocsCPP,
    'cuda-c++': DocsCPP,
    'lsl': DocsCPP,
    'apex': DocsJava,
    'groovy': DocsJava,
    'java': DocsJava,
    'javascript': DocsJavascript,
    'js': DocsJavascript,
    'jsx': DocsJavascript,
    'objc': DocsObjC,
    'objc++': DocsObjC,
    'php': DocsPHP,
    'ruby': DocsRuby,
    'rust': DocsRust,
    'swift': DocsSwift,
    'ts': DocsTypescript,
    'tsx': DocsTypescript,
    'typescript': DocsTypescript,
}


def getParser(language, config=None):
    """
    The parser for a language identifier or one of its aliases, None if the
    language isn't supported.
    """
    parser = PARSERS.get((language or '').lower())
    if parser is None:
        logger.debug('no parser for language %r', language)
        return None
    return parser(config)


__all__ = ['DocsParser', 'PARSERS', 'getParser']
