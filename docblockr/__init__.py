"""
DocBlockr
Generates and reformats documentation comments for JavaScript, TypeScript,
PHP, Java, C/C++, Objective-C, Ruby, Rust and Swift.
"""
__version__ = '2.14.1'

from .commands import completeTag, findDocBlocks, generate, header, reformat  # noqa: E402
from .languages import getParser  # noqa: E402
from .settings import Settings, SettingsError  # noqa: E402

__all__ = [
    'Settings',
    'SettingsError',
    'completeTag',
    'findDocBlocks',
    'generate',
    'getParser',
    'header',
    'reformat',
]
