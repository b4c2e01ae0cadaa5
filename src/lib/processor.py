"""
Document processor

Checks every registered shortcode kind against the unmodified document,
so errors report source line numbers, then runs one rewrite pass per kind
in registration order, feeding each pass's output into the next. The
first error aborts the document; no partially rewritten text is returned.

Example:
    >>> processor = Processor()
    >>> html = processor.process("{{< hint info >}}Hi{{< /hint >}}")
    >>> '<blockquote class="shortcode-hint info">Hi</blockquote>' in html
    True
"""

from typing import Optional

from .log import LOG
from .matcher import check, rewrite
from .shortcodes import ShortcodeRegistry


class Processor:
    """
    Applies every shortcode kind to a single document

    Holds no per-document state, so one instance may be shared between
    documents and threads.
    """

    def __init__(self, registry: Optional[ShortcodeRegistry] = None) -> None:
        """
        Args:
            registry: Shortcode kinds to apply (defaults to the built-ins)
        """
        self.registry = registry if registry is not None else ShortcodeRegistry()

    def process(self, document: str) -> str:
        """
        Transform one document's text

        Args:
            document: Raw document text

        Returns:
            Document with all shortcodes expanded

        Raises:
            ShortcodeError: First failure of any pass, with the line number
                of the offending occurrence in the given document
        """
        for spec in self.registry:
            check(document, spec)

        for spec in self.registry:
            LOG(f"Pass '{spec.name}' over {len(document)} characters", level=3)
            document = rewrite(document, spec)
        return document


def document_process(document: str) -> str:
    """Transform one document's text with the built-in shortcodes"""
    return Processor().process(document)
