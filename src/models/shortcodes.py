"""
Shortcode specification and occurrence models

Defines the static identity of a shortcode kind (ShortcodeSpec) and the
location of one concrete instance of it in a document (Occurrence).
"""

from enum import Enum
from dataclasses import dataclass, field
from typing import Callable, List, Tuple

# (content, attributes[, ordinal]) -> rendered HTML fragment
Renderer = Callable[..., str]

# Half-open [start, end) character range into a document
Span = Tuple[int, int]


class HintKind(Enum):
    """
    Accepted attribute values for the hint shortcode

    The value doubles as the CSS class of the rendered block.
    """
    INFO = "info"
    OK = "ok"
    WARNING = "warning"
    DANGER = "danger"

    @classmethod
    def values(cls) -> List[str]:
        return [kind.value for kind in cls]


@dataclass(frozen=True)
class ShortcodeSpec:
    """
    Specification for a shortcode kind

    Attributes:
        name: Shortcode name as written in markers ({{< name >}})
        header: Fragment prepended once to a document using this shortcode
        render: Renderer (content, attributes) -> HTML fragment
        numbered: render also receives the occurrence's 0-based ordinal
            within the document, for markup that needs unique ids
        description: Human-readable description
        examples: Example usage strings
    """
    name: str
    header: str
    render: Renderer
    numbered: bool = False
    description: str = ""
    examples: List[str] = field(default_factory=list)


@dataclass(frozen=True)
class Occurrence:
    """
    One located shortcode in a document

    All offsets index the text that was scanned, never a rewritten copy.

    Attributes:
        match_start: Offset of the opening '{{<'
        attrs_span: Attribute text between the name and '>}}'
        content_span: Body between the opening and closing markers
        match_end: Offset just past the closing marker's '>}}'

    Example:
        For "{{< hint info >}}Hi{{< /hint >}}":
        Occurrence(match_start=0, attrs_span=(8, 14),
                   content_span=(17, 19), match_end=32)
    """
    match_start: int
    attrs_span: Span
    content_span: Span
    match_end: int

    def attributes_text(self, text: str) -> str:
        return text[self.attrs_span[0]:self.attrs_span[1]]

    def content_text(self, text: str) -> str:
        return text[self.content_span[0]:self.content_span[1]]
