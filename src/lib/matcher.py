"""
Shortcode matcher and rewriter

Locates occurrences of one shortcode kind in a document and rebuilds the
document with every occurrence replaced by its rendered fragment.

Marker syntax (fixed):

    {{< name attr "quoted attr" >}}
    content
    {{< /name >}}

Whitespace after '{{<' and around '/name' is optional, so '{{<hint info>}}'
and '{{</hint>}}' are accepted too. The name must not run on into further
name characters, so 'tab' never matches inside '{{< tabs >}}'.

Attribute text ends at the first '>}}' and may not contain '{{<', even inside
quotes: an opening marker whose '>}}' comes after another '{{<' is
reported as unclosed rather than swallowing the following marker.

The rewrite is a single left-to-right pass over the unmodified input with
a moving cursor, appending literal text and rendered fragments to a fresh
output list. Offsets are only ever computed against the input.
"""

import re
from typing import Iterator, List, Optional, Tuple

from ..models.shortcodes import Occurrence, ShortcodeSpec
from .exceptions import NoClosingDirectiveError, ShortcodeError
from .tokenizer import attributes_tokenize
from .log import LOG

OPEN_DELIMITER = "{{<"
ATTRS_CLOSE = ">}}"


def line_number_at(text: str, offset: int) -> int:
    """1-based line number of a character offset"""
    return text.count("\n", 0, offset) + 1


class Matcher:
    """
    Finds occurrences of a single shortcode kind

    Attributes:
        name: Shortcode name to match
        open_pattern: Compiled regex for '{{< name'
        close_pattern: Compiled regex for '{{< /name >}}'
    """

    def __init__(self, name: str) -> None:
        self.name = name
        escaped = re.escape(name)
        self.open_pattern = re.compile(r"\{\{<\s*" + escaped + r"(?![\w-])")
        self.close_pattern = re.compile(r"\{\{<\s*/\s*" + escaped + r"\s*>\}\}")

    def occurrence_find(self, text: str, position: int = 0) -> Optional[Occurrence]:
        """
        Find the next occurrence at or after position

        Args:
            text: Text to scan
            position: Offset to start scanning from

        Returns:
            Occurrence, or None if no further opening marker exists

        Raises:
            NoClosingDirectiveError: If an opening marker has no '>}}',
                reaches another '{{<' before its '>}}' (quoted or not),
                or has no matching closing marker
        """
        opening = self.open_pattern.search(text, position)
        if not opening:
            return None

        line_number = line_number_at(text, opening.start())
        attrs_start = opening.end()
        attrs_end = text.find(ATTRS_CLOSE, attrs_start)

        # A '{{<' before the '>}}' means this marker was never closed
        nested_open = text.find(OPEN_DELIMITER, attrs_start)
        if attrs_end == -1 or (nested_open != -1 and nested_open < attrs_end):
            raise NoClosingDirectiveError(
                f"Opening marker '{OPEN_DELIMITER} {self.name}' is missing '{ATTRS_CLOSE}'",
                shortcode=self.name,
                line_number=line_number,
            )

        content_start = attrs_end + len(ATTRS_CLOSE)
        closing = self.close_pattern.search(text, content_start)
        if not closing:
            raise NoClosingDirectiveError(
                f"No closing marker '{OPEN_DELIMITER} /{self.name} {ATTRS_CLOSE}' found",
                shortcode=self.name,
                line_number=line_number,
            )

        return Occurrence(
            match_start=opening.start(),
            attrs_span=(attrs_start, attrs_end),
            content_span=(content_start, closing.start()),
            match_end=closing.end(),
        )

    def occurrences_find(self, text: str) -> Iterator[Occurrence]:
        """Yield all occurrences in text, left to right, non-overlapping"""
        position = 0
        while True:
            occurrence = self.occurrence_find(text, position)
            if occurrence is None:
                return
            yield occurrence
            position = occurrence.match_end


def fragments_render(text: str, spec: ShortcodeSpec) -> Iterator[Tuple[Occurrence, str]]:
    """
    Yield each occurrence of a shortcode kind with its rendered fragment

    Specs flagged 'numbered' also receive the occurrence's 0-based ordinal.

    Raises:
        ShortcodeError: From matching, tokenizing or rendering. Shortcode
            name and line number are attached if the raiser left them unset.
    """
    matcher = Matcher(spec.name)
    occurrences = matcher.occurrences_find(text)

    for ordinal, occurrence in enumerate(occurrences):
        line_number = line_number_at(text, occurrence.match_start)
        content = occurrence.content_text(text)

        try:
            attributes = attributes_tokenize(occurrence.attributes_text(text))
            LOG(
                f"{spec.name} @ line {line_number}: attributes {attributes}",
                level=3,
            )
            if spec.numbered:
                fragment = spec.render(content, attributes, ordinal)
            else:
                fragment = spec.render(content, attributes)
        except ShortcodeError as error:
            error.context_attach(shortcode=spec.name, line_number=line_number)
            raise

        yield occurrence, fragment


def check(text: str, spec: ShortcodeSpec) -> int:
    """
    Match, tokenize and render every occurrence without rewriting

    Running this on the unmodified document makes error line numbers point
    at the source, which later passes can no longer do.

    Returns:
        Number of occurrences found

    Raises:
        ShortcodeError: First failure, with shortcode name and line number
    """
    return sum(1 for _ in fragments_render(text, spec))


def rewrite(text: str, spec: ShortcodeSpec) -> str:
    """
    Replace every occurrence of a shortcode kind with its rendered fragment

    Args:
        text: Document text (left untouched)
        spec: Shortcode kind to expand

    Returns:
        Rewritten text with spec.header prepended once, or the input
        itself if the shortcode does not occur

    Raises:
        ShortcodeError: From matching, tokenizing or rendering. Line
            numbers count lines of text as given.
    """
    output: List[str] = []
    cursor = 0
    count = 0

    for occurrence, fragment in fragments_render(text, spec):
        output.append(text[cursor:occurrence.match_start])
        output.append(fragment)
        cursor = occurrence.match_end
        count += 1

    if not count:
        return text

    output.append(text[cursor:])
    LOG(f"Expanded {count} '{spec.name}' shortcode(s)", level=2)
    return spec.header + "".join(output)
