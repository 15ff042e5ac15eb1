"""
User configuration. Mirrors the editor settings object the plugin used to read
from: a `get(key, default)` lookup backed by defaults, optionally layered over
a parent (workspace settings falling back to global settings).
"""
import json
import logging
import re

logger = logging.getLogger(__name__)


LANGUAGES = ('cpp', 'java', 'javascript', 'objc', 'php', 'ruby', 'rust', 'swift', 'typescript')

DEFAULTS = {
    'docblockr_enabled': dict((language, True) for language in LANGUAGES),
    'docblockr_align_tags': 0,
    'docblockr_add_empty_line': {
        'cpp': 1,
        'java': 1,
        'javascript': 0,
        'objc': 1,
        'php': 2,
        'ruby': 1,
        'typescript': 0,
    },
    'docblockr_comment_style': 0,
    'docblockr_comment_style_ruby': 1,
    'docblockr_custom_tags': [],
    'docblockr_wrap_width': 80,
}


class SettingsError(ValueError):
    pass


def stripJsonComments(text):
    """ settings files are JSON, but allow // line comments like the editor does """
    return re.sub(r'^\s*//.*$', '', text, flags=re.MULTILINE)


class Settings(object):

    def __init__(self, values=None, parent=None):
        self.values = dict(values or {})
        self.parent = parent

    @classmethod
    def load(cls, path, parent=None):
        logger.debug('loading settings from %s', path)
        try:
            with open(path, encoding='utf-8') as f:
                text = f.read()
        except OSError as e:
            raise SettingsError('could not read settings file %s: %s' % (path, e))

        try:
            values = json.loads(stripJsonComments(text))
        except ValueError as e:
            raise SettingsError('invalid settings file %s: %s' % (path, e))

        if not isinstance(values, dict):
            raise SettingsError('settings file %s must contain an object' % path)

        return cls(values, parent)

    def get(self, key, default=None):
        if key in self.values:
            return self.values[key]
        if self.parent is not None:
            return self.parent.get(key, default)
        return DEFAULTS.get(key, default)

    def set(self, key, value):
        self.values[key] = value

    def forLanguage(self, key, language, default=None):
        """ look up `language` in a per-language mapping setting """
        mapping = self.get(key) or {}
        if language in mapping:
            return mapping[language]
        return DEFAULTS.get(key, {}).get(language, default)

    def isEnabled(self, language):
        return bool(self.forLanguage('docblockr_enabled', language, False))

    def alignLevel(self):
        """
        How many leading columns to pad: 0 none, 1 tag, 2 tag + type, 3 tag + type + name.
        Accepts the older "shallow" / "deep" values too.
        """
        value = self.get('docblockr_align_tags', 0)
        if value is True or value == 'deep':
            return 3
        if value == 'shallow':
            return 1
        try:
            return max(0, min(3, int(value)))
        except (TypeError, ValueError):
            logger.warning('ignoring invalid docblockr_align_tags value %r', value)
            return 0
