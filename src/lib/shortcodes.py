"""
Shortcode implementations

Each shortcode turns its body and attribute list into an HTML fragment.
Renderers are pure: they never expand shortcodes of other kinds. Nesting
across kinds works because the processor runs one pass per kind, in
registration order (columns, hint, tabs, details).
"""

import hashlib
import html
import re
from typing import Dict, Iterator, List, Optional

from ..models.shortcodes import HintKind, ShortcodeSpec
from .exceptions import (
    InvalidAttributeCountError,
    ShortcodeError,
    UnknownAttributeValueError,
    UnknownHintKindError,
)
from .matcher import Matcher
from .tokenizer import attributes_tokenize

COLUMN_SEPARATOR = "<--->"

COLUMNS_HEADER = """<style>
.shortcode-columns { display: flex; flex-wrap: wrap; gap: 1rem; }
.shortcode-columns > .shortcode-column { flex: 1 1 0; min-width: 0; }
</style>
"""

HINT_HEADER = """<style>
.shortcode-hint { margin: 1rem 0; padding: 0.5rem 1rem; border-left: 4px solid; border-radius: 2px; }
.shortcode-hint.info { border-color: #6bf; background: rgba(102, 187, 255, 0.1); }
.shortcode-hint.ok { border-color: #5b6; background: rgba(85, 187, 102, 0.1); }
.shortcode-hint.warning { border-color: #fd6; background: rgba(255, 221, 102, 0.1); }
.shortcode-hint.danger { border-color: #f66; background: rgba(255, 102, 102, 0.1); }
</style>
"""

TABS_HEADER = """<style>
.shortcode-tabs { display: flex; flex-wrap: wrap; margin: 1rem 0; border: 1px solid #ccc; border-radius: 4px; }
.shortcode-tabs > input.shortcode-tabs-toggle { display: none; }
.shortcode-tabs > label { padding: 0.5rem 1rem; cursor: pointer; border-bottom: 2px solid transparent; }
.shortcode-tabs > .shortcode-tabs-content { order: 999; width: 100%; padding: 0 1rem; border-top: 1px solid #ccc; display: none; }
.shortcode-tabs > input.shortcode-tabs-toggle:checked + label { border-bottom-color: #06c; }
.shortcode-tabs > input.shortcode-tabs-toggle:checked + label + .shortcode-tabs-content { display: block; }
</style>
"""

DETAILS_HEADER = """<style>
.shortcode-details { margin: 1rem 0; border: 1px solid #ccc; border-radius: 4px; }
.shortcode-details > summary { padding: 0.5rem 1rem; cursor: pointer; }
.shortcode-details > .shortcode-details-content { padding: 0 1rem; }
</style>
"""

DEFAULT_DETAILS_TITLE = "Details"
DETAILS_OPEN_FLAG = "open"


def attribute_escape(value: str) -> str:
    """Escape a value for use inside a double-quoted HTML attribute"""
    return html.escape(value, quote=True)


def tabsId_make(attributes: List[str], content: str, ordinal: int = 0) -> str:
    """
    Build the id shared by a tab group's radio buttons

    Uses the tabs attribute when given. Otherwise a digest of the body plus
    the group's ordinal in the document, so output is deterministic and
    two groups with the same body still get distinct ids.
    """
    if attributes:
        return re.sub(r"[^\w-]+", "-", attributes[0]).strip("-") or "tabs"
    digest = hashlib.sha1(content.encode("utf-8")).hexdigest()[:8]
    return f"{digest}-{ordinal}"


class ShortcodeRegistry:
    """
    Registry of the built-in shortcode kinds

    The set of kinds is fixed. Iterating the registry yields specs in
    processing order.
    """

    def __init__(self) -> None:
        """Initialize the registry and register all built-in shortcodes"""
        self.specs: Dict[str, ShortcodeSpec] = {}
        self.columns_register()
        self.hint_register()
        self.tabs_register()
        self.details_register()

    def register(self, spec: ShortcodeSpec) -> None:
        """Register a shortcode specification (names must be unique)"""
        if spec.name in self.specs:
            raise ValueError(f"Shortcode '{spec.name}' is already registered")
        self.specs[spec.name] = spec

    def get(self, name: str) -> Optional[ShortcodeSpec]:
        return self.specs.get(name)

    def names(self) -> List[str]:
        return list(self.specs)

    def __iter__(self) -> Iterator[ShortcodeSpec]:
        return iter(self.specs.values())

    def __len__(self) -> int:
        return len(self.specs)

    def columns_register(self) -> None:
        """Register the side-by-side columns layout"""

        def columns_handler(content: str, attributes: List[str]) -> str:
            """Handle {{< columns [spacing] >}} - split body on <---> into columns"""
            if len(attributes) > 1:
                raise InvalidAttributeCountError("columns", "zero or one", len(attributes))

            if attributes:
                spacing = attribute_escape(attributes[0])
                container_open = f'<div class="shortcode-columns" style="gap: {spacing};">'
                column_open = f'<div class="shortcode-column" style="padding: {spacing};">'
            else:
                container_open = '<div class="shortcode-columns">'
                column_open = '<div class="shortcode-column">'

            columns = content.split(COLUMN_SEPARATOR)
            return (
                container_open
                + "".join(f"{column_open}{column}</div>" for column in columns)
                + "</div>"
            )

        self.register(ShortcodeSpec(
            name="columns",
            header=COLUMNS_HEADER,
            render=columns_handler,
            description="Side-by-side columns separated by <--->",
            examples=[
                "{{< columns >}}\nLeft\n<--->\nRight\n{{< /columns >}}",
                "{{< columns 2rem >}}\nA\n<--->\nB\n<--->\nC\n{{< /columns >}}",
            ],
        ))

    def hint_register(self) -> None:
        """Register the hint (callout) block"""

        def hint_handler(content: str, attributes: List[str]) -> str:
            """Handle {{< hint kind >}} - kind is one of info, ok, warning, danger"""
            if len(attributes) != 1:
                raise InvalidAttributeCountError("hint", "exactly one", len(attributes))

            try:
                kind = HintKind(attributes[0])
            except ValueError:
                raise UnknownHintKindError("hint", attributes[0], HintKind.values()) from None

            return f'<blockquote class="shortcode-hint {kind.value}">{content}</blockquote>'

        self.register(ShortcodeSpec(
            name="hint",
            header=HINT_HEADER,
            render=hint_handler,
            description="Highlighted callout block",
            examples=['{{< hint warning >}}\nMind the gap.\n{{< /hint >}}'],
        ))

    def tabs_register(self) -> None:
        """Register tabbed panels"""

        tab_matcher = Matcher("tab")

        def tabs_handler(content: str, attributes: List[str], ordinal: int = 0) -> str:
            """Handle {{< tabs [id] >}} - one panel per {{< tab "Label" >}} in the body"""
            if len(attributes) > 1:
                raise InvalidAttributeCountError("tabs", "zero or one", len(attributes))

            group = tabsId_make(attributes, content, ordinal)
            parts = ['<div class="shortcode-tabs">']

            try:
                for index, occurrence in enumerate(tab_matcher.occurrences_find(content)):
                    labels = attributes_tokenize(occurrence.attributes_text(content))
                    if len(labels) != 1:
                        raise InvalidAttributeCountError("tab", "exactly one", len(labels))

                    tab_id = f"tabs-{group}-{index}"
                    checked = ' checked="checked"' if index == 0 else ""
                    parts.append(
                        f'<input type="radio" class="shortcode-tabs-toggle" '
                        f'name="tabs-{group}" id="{tab_id}"{checked} />'
                    )
                    parts.append(f'<label for="{tab_id}">{attribute_escape(labels[0])}</label>')
                    parts.append(
                        f'<div class="shortcode-tabs-content">'
                        f'{occurrence.content_text(content)}</div>'
                    )
            except ShortcodeError as error:
                # Lines inside the body are not document lines; let the
                # rewriter attach the line of the enclosing tabs marker.
                error.line_number = None
                error.context_attach(shortcode="tab")
                raise

            parts.append("</div>")
            return "\n".join(parts)

        self.register(ShortcodeSpec(
            name="tabs",
            header=TABS_HEADER,
            render=tabs_handler,
            numbered=True,
            description="Tabbed panels, one per nested tab marker",
            examples=[
                '{{< tabs "install" >}}\n'
                '{{< tab "Linux" >}}apt install foo{{< /tab >}}\n'
                '{{< tab "macOS" >}}brew install foo{{< /tab >}}\n'
                '{{< /tabs >}}',
            ],
        ))

    def details_register(self) -> None:
        """Register the collapsible disclosure block"""

        def details_handler(content: str, attributes: List[str]) -> str:
            """Handle {{< details ["Title"] [open] >}}"""
            if len(attributes) > 2:
                raise InvalidAttributeCountError("details", "at most two", len(attributes))

            title = attribute_escape(attributes[0]) if attributes else DEFAULT_DETAILS_TITLE
            is_open = False
            if len(attributes) == 2:
                if attributes[1] != DETAILS_OPEN_FLAG:
                    raise UnknownAttributeValueError("details", attributes[1], [DETAILS_OPEN_FLAG])
                is_open = True

            open_attr = " open" if is_open else ""
            return (
                f'<details class="shortcode-details"{open_attr}>'
                f"<summary>{title}</summary>"
                f'<div class="shortcode-details-content">{content}</div>'
                f"</details>"
            )

        self.register(ShortcodeSpec(
            name="details",
            header=DETAILS_HEADER,
            render=details_handler,
            description="Collapsible block with a summary title",
            examples=['{{< details "Show answer" open >}}\n42\n{{< /details >}}'],
        ))
