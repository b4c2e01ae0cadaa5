"""
shortcodes - Shortcode expansion for Markdown documents

A build-pipeline stage that expands {{< name >}} ... {{< /name >}} markers
(columns, hint, tabs, details) into HTML.
"""

__version__ = "0.1.0"

from .lib import (
    Processor,
    document_process,
    ShortcodeRegistry,
    ShortcodeError,
    LOG,
    state_connectToLogger,
)

__all__ = [
    "Processor",
    "document_process",
    "ShortcodeRegistry",
    "ShortcodeError",
    "LOG",
    "state_connectToLogger",
    "__version__",
]
