"""
Shortcode renderer tests

Renderers are called directly through the registry: (content, attributes)
in, HTML fragment out.
"""

import pytest

from shortcodes.lib.shortcodes import (
    COLUMNS_HEADER,
    DETAILS_HEADER,
    HINT_HEADER,
    TABS_HEADER,
    ShortcodeRegistry,
    tabsId_make,
)
from shortcodes.lib.exceptions import (
    InvalidAttributeCountError,
    NoClosingDirectiveError,
    UnknownAttributeValueError,
    UnknownHintKindError,
    UnterminatedStringError,
)
from shortcodes.models import HintKind, ShortcodeSpec


@pytest.fixture
def registry():
    return ShortcodeRegistry()


def render(registry, name, content, attributes):
    return registry.get(name).render(content, attributes)


class TestRegistry:
    """Fixed, ordered set of shortcode kinds"""

    def test_processing_order(self, registry):
        """Kinds iterate in processing order"""
        assert [spec.name for spec in registry] == ["columns", "hint", "tabs", "details"]
        assert registry.names() == ["columns", "hint", "tabs", "details"]
        assert len(registry) == 4

    def test_headers(self, registry):
        """Each kind carries its own header"""
        assert registry.get("columns").header == COLUMNS_HEADER
        assert registry.get("hint").header == HINT_HEADER
        assert registry.get("tabs").header == TABS_HEADER
        assert registry.get("details").header == DETAILS_HEADER

    def test_unknown_name(self, registry):
        """Lookup of an unregistered kind returns None"""
        assert registry.get("tab") is None

    def test_duplicate_name_rejected(self, registry):
        """Two kinds may not share a name"""
        duplicate = ShortcodeSpec(name="hint", header="", render=lambda c, a: c)
        with pytest.raises(ValueError, match="already registered"):
            registry.register(duplicate)

    def test_examples_present(self, registry):
        """Every kind documents at least one example"""
        for spec in registry:
            assert spec.examples
            assert spec.description


class TestColumns:
    """{{< columns [spacing] >}}"""

    def test_two_columns(self, registry):
        """Body is split on the separator"""
        assert render(registry, "columns", "A<--->B", []) == (
            '<div class="shortcode-columns">'
            '<div class="shortcode-column">A</div>'
            '<div class="shortcode-column">B</div>'
            "</div>"
        )

    def test_single_column(self, registry):
        """No separator means one column"""
        result = render(registry, "columns", "only", [])
        assert result.count('class="shortcode-column"') == 1

    def test_spacing(self, registry):
        """Spacing is inlined on the container and every column"""
        result = render(registry, "columns", "A<--->B<--->C", ["2rem"])

        assert '<div class="shortcode-columns" style="gap: 2rem;">' in result
        assert result.count('<div class="shortcode-column" style="padding: 2rem;">') == 3

    def test_spacing_escaped(self, registry):
        """Spacing cannot break out of the style attribute"""
        result = render(registry, "columns", "A", ['1em" onclick="x'])
        assert 'onclick="x' not in result

    def test_too_many_attributes(self, registry):
        """More than one attribute is rejected"""
        with pytest.raises(InvalidAttributeCountError) as excinfo:
            render(registry, "columns", "A", ["1rem", "2rem"])

        assert excinfo.value.shortcode == "columns"
        assert excinfo.value.actual == 2


class TestHint:
    """{{< hint kind >}}"""

    @pytest.mark.parametrize("kind", HintKind.values())
    def test_known_kinds(self, registry, kind):
        """Each accepted kind becomes the block's class"""
        assert render(registry, "hint", "Careful", [kind]) == (
            f'<blockquote class="shortcode-hint {kind}">Careful</blockquote>'
        )

    def test_unknown_kind(self, registry):
        """Unrecognised kind is a structured error"""
        with pytest.raises(UnknownHintKindError) as excinfo:
            render(registry, "hint", "x", ["bogus"])

        assert isinstance(excinfo.value, UnknownAttributeValueError)
        assert excinfo.value.value == "bogus"
        assert "info" in excinfo.value.accepted

    @pytest.mark.parametrize("attributes", [[], ["info", "warning"]])
    def test_wrong_arity(self, registry, attributes):
        """Zero or two attributes are rejected"""
        with pytest.raises(InvalidAttributeCountError):
            render(registry, "hint", "x", attributes)


class TestTabs:
    """{{< tabs [id] >}} with nested {{< tab "Label" >}}"""

    BODY = (
        '\n{{< tab "Linux" >}}apt install foo{{< /tab >}}\n'
        "{{< tab 'macOS' >}}brew install foo{{< /tab >}}\n"
    )

    def test_panels(self, registry):
        """One radio, label and panel per tab; first tab checked"""
        result = render(registry, "tabs", self.BODY, ["install"])

        assert result.startswith('<div class="shortcode-tabs">')
        assert result.endswith("</div>")
        assert '<label for="tabs-install-0">Linux</label>' in result
        assert '<label for="tabs-install-1">macOS</label>' in result
        assert '<div class="shortcode-tabs-content">apt install foo</div>' in result
        assert '<div class="shortcode-tabs-content">brew install foo</div>' in result
        assert result.count('checked="checked"') == 1
        assert 'id="tabs-install-0" checked="checked"' in result
        assert result.count('name="tabs-install"') == 2

    def test_default_id_deterministic(self, registry):
        """Without an id the group id is derived from the body"""
        first = render(registry, "tabs", self.BODY, [])
        second = render(registry, "tabs", self.BODY, [])
        group = tabsId_make([], self.BODY)

        assert first == second
        assert group.endswith("-0")
        assert len(group) == 10
        assert f'name="tabs-{group}"' in first

    def test_default_id_ordinal(self, registry):
        """Groups with the same body but different ordinals get distinct ids"""
        first = registry.get("tabs").render(self.BODY, [], 0)
        second = registry.get("tabs").render(self.BODY, [], 1)

        assert tabsId_make([], self.BODY, 0) != tabsId_make([], self.BODY, 1)
        assert first != second
        assert f'name="tabs-{tabsId_make([], self.BODY, 1)}"' in second

    def test_tabs_spec_numbered(self, registry):
        """Only tabs needs the occurrence ordinal"""
        assert [spec.name for spec in registry if spec.numbered] == ["tabs"]

    def test_label_escaped(self, registry):
        """Labels are HTML-escaped like other attribute values"""
        result = render(registry, "tabs", '{{< tab "a<b & c" >}}x{{< /tab >}}', ["g"])
        assert '<label for="tabs-g-0">a&lt;b &amp; c</label>' in result

    def test_id_slugged(self):
        """Characters unsafe in ids are replaced"""
        assert tabsId_make(["my tabs!"], "") == "my-tabs"

    def test_no_tabs(self, registry):
        """A body without tab markers renders an empty group"""
        assert render(registry, "tabs", "stray text", []) == '<div class="shortcode-tabs">\n</div>'

    def test_tab_without_label(self, registry):
        """Each tab needs exactly one label"""
        with pytest.raises(InvalidAttributeCountError) as excinfo:
            render(registry, "tabs", "{{< tab >}}x{{< /tab >}}", [])

        assert excinfo.value.shortcode == "tab"
        assert excinfo.value.line_number is None

    def test_unclosed_tab(self, registry):
        """A tab marker without its close fails"""
        with pytest.raises(NoClosingDirectiveError) as excinfo:
            render(registry, "tabs", '{{< tab "A" >}}x', [])

        assert excinfo.value.shortcode == "tab"

    def test_unterminated_label(self, registry):
        """Label quoting errors name the tab"""
        with pytest.raises(UnterminatedStringError) as excinfo:
            render(registry, "tabs", '{{< tab "A >}}x{{< /tab >}}', [])

        assert excinfo.value.shortcode == "tab"

    def test_too_many_attributes(self, registry):
        """Tabs accept at most an id"""
        with pytest.raises(InvalidAttributeCountError):
            render(registry, "tabs", self.BODY, ["a", "b"])


class TestDetails:
    """{{< details ["Title"] [open] >}}"""

    def test_defaults(self, registry):
        """No attributes: default title, closed"""
        assert render(registry, "details", "Body", []) == (
            '<details class="shortcode-details">'
            "<summary>Details</summary>"
            '<div class="shortcode-details-content">Body</div>'
            "</details>"
        )

    def test_title(self, registry):
        """First attribute is the summary"""
        result = render(registry, "details", "Body", ["Show answer"])

        assert "<summary>Show answer</summary>" in result
        assert " open" not in result

    def test_title_escaped(self, registry):
        """Titles are HTML-escaped like other attribute values"""
        result = render(registry, "details", "Body", ["<b>Bold</b>"])
        assert "<summary>&lt;b&gt;Bold&lt;/b&gt;</summary>" in result

    def test_open(self, registry):
        """Second attribute 'open' expands the block"""
        result = render(registry, "details", "Body", ["Title", "open"])
        assert result.startswith('<details class="shortcode-details" open>')

    def test_unknown_flag(self, registry):
        """Second attribute must be 'open'"""
        with pytest.raises(UnknownAttributeValueError) as excinfo:
            render(registry, "details", "Body", ["Title", "shut"])

        assert excinfo.value.accepted == ["open"]

    def test_too_many_attributes(self, registry):
        """More than two attributes are rejected"""
        with pytest.raises(InvalidAttributeCountError):
            render(registry, "details", "Body", ["a", "open", "b"])
