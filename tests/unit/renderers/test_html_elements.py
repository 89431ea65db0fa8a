#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Tests for the BeautifulSoup HTML renderer."""
import pytest
from bs4 import BeautifulSoup

from mdfold.ast.nodes import (
    BlockQuote,
    CodeBlock,
    CodeSpan,
    Custom,
    HardLineBreak,
    Heading,
    HtmlBlock,
    HtmlInline,
    Image,
    Link,
    ListItem,
    OrderedList,
    Paragraph,
    SoftLineBreak,
    Strikethrough,
    Strong,
    TaskState,
    Text,
    ThematicBreak,
    UnorderedList,
)
from mdfold.ast.recursion import fold
from mdfold.ast.transforms import heading_anchor
from mdfold.exceptions import InvalidOptionsError, RenderingError
from mdfold.options.html import HtmlRendererOptions
from mdfold.options.markdown import MarkdownRendererOptions
from mdfold.renderers.html import HtmlRenderer, render_html
from mdfold.result import Ok
from mdfold.validation.anchors import lift_with_anchor, resolve


def html(node, **options) -> str:
    return render_html([node], HtmlRendererOptions(**options))


@pytest.mark.unit
class TestBlockElements:
    """Test block-level elements."""

    def test_heading(self) -> None:
        """Test headings with and without ids."""
        heading = Heading(level=2, raw_text="Getting Started", children=[Text("Getting Started")])
        assert html(heading) == "<h2>Getting Started</h2>"
        assert html(heading, heading_ids=True) == '<h2 id="getting-started">Getting Started</h2>'

    def test_heading_id_ignores_image_alt(self) -> None:
        """Test that heading ids come from words, never from image alt text."""
        heading = Heading(level=1, raw_text="Logo alt", children=[Text("Logo "), Image("x.png", alt="alt")])
        element = HtmlRenderer(HtmlRendererOptions(heading_ids=True)).render_node(heading)
        assert element["id"] == "logo"
        assert element["id"] == heading_anchor(heading)

    def test_heading_id_splits_words_per_text(self) -> None:
        """Test that words of separate inline nodes stay separate in the id."""
        heading = Heading(level=2, raw_text="foobar", children=[Text("foo"), Strong([Text("bar")])])
        element = HtmlRenderer(HtmlRendererOptions(heading_ids=True)).render_node(heading)
        assert element["id"] == "foo-bar"

    def test_heading_without_words_has_no_id(self) -> None:
        """Test that a heading with nothing to slug gets no id."""
        heading = Heading(level=1, raw_text="alt", children=[Image("x.png", alt="alt")])
        element = HtmlRenderer(HtmlRendererOptions(heading_ids=True)).render_node(heading)
        assert not element.has_attr("id")

    def test_nested_heading_id(self) -> None:
        """Test ids on headings below the top level."""
        quote = BlockQuote([Heading(level=3, children=[Text("Deep "), CodeSpan("api")])])
        assert html(quote, heading_ids=True) == '<blockquote><h3 id="deep-api">Deep <code>api</code></h3></blockquote>'

    def test_text_escaped(self) -> None:
        """Test that text content is entity-escaped."""
        assert html(Paragraph([Text("a < b & c")])) == "<p>a &lt; b &amp; c</p>"

    def test_code_block(self) -> None:
        """Test pre/code with a language class."""
        assert html(CodeBlock("x = 1\n", language="python")) == '<pre><code class="language-python">x = 1\n</code></pre>'
        assert html(CodeBlock("x")) == "<pre><code>x</code></pre>"

    def test_ordered_list(self) -> None:
        """Test that start is only written when it is not 1."""
        items = [[Paragraph([Text("a")])]]
        assert html(OrderedList(items=items)) == "<ol><li><p>a</p></li></ol>"
        assert html(OrderedList(items=items, start=3)) == '<ol start="3"><li><p>a</p></li></ol>'

    def test_task_list(self) -> None:
        """Test disabled checkboxes for task items."""
        block = UnorderedList(
            items=[
                ListItem([Paragraph([Text("done")])], task=TaskState.COMPLETE),
                ListItem([Paragraph([Text("todo")])], task=TaskState.INCOMPLETE),
                ListItem([Paragraph([Text("plain")])]),
            ]
        )
        soup = BeautifulSoup(html(block), "html.parser")
        items = soup.find_all("li")
        assert len(items) == 3
        assert items[0].input.has_attr("checked")
        assert items[0].input.has_attr("disabled")
        assert not items[1].input.has_attr("checked")
        assert items[2].input is None

    def test_thematic_break(self) -> None:
        """Test the hr element."""
        assert html(ThematicBreak()) == "<hr/>"

    def test_table(self, aligned_table) -> None:
        """Test table sections and cell alignment."""
        soup = BeautifulSoup(html(aligned_table), "html.parser")
        assert [th["align"] for th in soup.thead.find_all("th")] == ["left", "center", "right"]
        assert [td.get_text() for td in soup.tbody.find_all("td")] == ["alpha", "ok", "7"]


@pytest.mark.unit
class TestInlineElements:
    """Test inline elements."""

    def test_link_and_title(self) -> None:
        """Test anchors with optional titles."""
        assert html(Link("#intro", [Text("intro")])) == '<a href="#intro">intro</a>'
        element = HtmlRenderer().render_node(Link("https://example.com", [Text("x")], title="Example"))
        assert element["title"] == "Example"

    def test_image(self) -> None:
        """Test img attributes."""
        element = HtmlRenderer().render_node(Image("a.png", alt="logo", title="Logo"))
        assert element.name == "img"
        assert (element["src"], element["alt"], element["title"]) == ("a.png", "logo", "Logo")

    def test_simple_inlines(self) -> None:
        """Test code, strikethrough and breaks."""
        assert html(Paragraph([CodeSpan("a<b")])) == "<p><code>a&lt;b</code></p>"
        assert html(Strikethrough([Text("x")])) == "<del>x</del>"
        assert html(Paragraph([Text("a"), HardLineBreak(), Text("b")])) == "<p>a<br/>b</p>"
        assert html(Paragraph([Text("a"), SoftLineBreak(), Text("b")])) == "<p>a\nb</p>"


@pytest.mark.unit
class TestRawHtml:
    """Test raw HTML passthrough modes."""

    @pytest.mark.parametrize(
        "mode,expected",
        [
            ("pass-through", "<p><b>x</b></p>"),
            ("escape", "<p>&lt;b&gt;x&lt;/b&gt;</p>"),
            ("drop", "<p></p>"),
        ],
    )
    def test_inline_modes(self, mode: str, expected: str) -> None:
        """Test inline HTML in each mode."""
        assert html(Paragraph([HtmlInline("<b>x</b>")]), html_passthrough_mode=mode) == expected

    def test_block_pass_through(self) -> None:
        """Test that block HTML is parsed into the output."""
        assert html(HtmlBlock('<div class="x">y</div>')) == '<div class="x">y</div>'


@pytest.mark.unit
class TestCustomElements:
    """Test custom block handling."""

    def test_generic_element(self) -> None:
        """Test custom blocks without a handler."""
        assert html(Custom("aside", [Text("x")], attributes={"class": "note"})) == '<aside class="note">x</aside>'

    def test_handler(self) -> None:
        """Test a handler creating elements from the renderer's soup."""

        def details(soup, block):
            tag = soup.new_tag("details")
            for child in block.children:
                tag.append(child)
            return tag

        assert html(Custom("note", [Text("x")]), custom_handlers={"note": details}) == "<details>x</details>"

    def test_failing_handler(self) -> None:
        """Test that handler failures become RenderingError."""

        def broken(soup, block):
            raise ValueError("nope")

        with pytest.raises(RenderingError, match="Custom handler for 'note' failed"):
            html(Custom("note"), custom_handlers={"note": broken})


@pytest.mark.unit
class TestEntryPoints:
    """Test document rendering and anchor integration."""

    def test_document_one_element_per_line(self) -> None:
        """Test joining top-level elements."""
        doc = [Heading(level=1, children=[Text("T")]), Paragraph([Text("p")])]
        assert render_html(doc) == "<h1>T</h1>\n<p>p</p>"

    def test_render_with_anchor(self, linked_document) -> None:
        """Test ids assigned from anchor validation."""
        renderer = HtmlRenderer()
        result = resolve([fold(lift_with_anchor(renderer.render_with_anchor), node) for node in linked_document])
        assert isinstance(result, Ok)
        assert str(result.value[0]) == '<h1 id="intro">Intro</h1>'
        assert str(result.value[2]) == '<h2 id="usage">Usage</h2>'

    def test_wrong_options_type(self) -> None:
        """Test that markdown options are rejected."""
        with pytest.raises(InvalidOptionsError):
            HtmlRenderer(MarkdownRendererOptions())
