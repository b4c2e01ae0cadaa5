"""
shortcodes - Shortcode expansion for Markdown documents

Replaces {{< name attrs >}} ... {{< /name >}} markers with HTML fragments.
"""

__version__ = "0.1.0"

from .processor import Processor, document_process
from .shortcodes import ShortcodeRegistry
from .matcher import Matcher, check, rewrite
from .tokenizer import attributes_tokenize
from .exceptions import (
    ShortcodeError,
    NoClosingDirectiveError,
    UnterminatedStringError,
    InvalidAttributeCountError,
    UnknownAttributeValueError,
    UnknownHintKindError,
)
from .log import LOG, state_connectToLogger

__all__ = [
    "Processor",
    "document_process",
    "ShortcodeRegistry",
    "Matcher",
    "check",
    "rewrite",
    "attributes_tokenize",
    "ShortcodeError",
    "NoClosingDirectiveError",
    "UnterminatedStringError",
    "InvalidAttributeCountError",
    "UnknownAttributeValueError",
    "UnknownHintKindError",
    "LOG",
    "state_connectToLogger",
    "__version__",
]
