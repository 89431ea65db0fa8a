#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Integration tests: parse, render, validate and parse again."""
import pytest
from hypothesis import given, settings
from tree_strategies import parsed_documents

from mdfold import parse_markdown, render_html, render_markdown, validate_document
from mdfold.ast.nodes import HardLineBreak, Heading, Link, OrderedList, Paragraph, Table, Text, UnorderedList
from mdfold.ast.recursion import fold
from mdfold.ast.transforms import extract_document_words
from mdfold.options import MarkdownRendererOptions
from mdfold.renderers.html import HtmlRenderer
from mdfold.validation.anchors import lift_with_anchor, resolve
from mdfold.validation.slugs import render_document_slugs

DOCUMENTS = [
    "# Title\n\nA paragraph with **bold**, *emphasis* and `code`.\n",
    "- one\n- two\n  - nested\n\n1. first\n2. second\n",
    "> quoted\n>\n> twice\n\n---\n\n```js\nlet x = 1;\n```\n",
    "Use 2 \\* 3 here, not [a](https://example.com/a_b \"t\").\n",
    "| x | long header |\n| :-: | --- |\n| 1 | 2 |\n",
    "\\- not a list\n",
    "\\+ plus\n",
    "1\\. not ordered\n\n7\\) nor this\n",
    "\\> not a quote\n",
    "## Title \\#\n",
    "Setext\\\n\\---\n",
    "a\n\\===\n\nb\n\\- c\n",
    "- a\n\n* b\n\n1. x\n\n1) y\n",
]


@pytest.mark.integration
class TestMarkdownRoundTrip:
    """Rendering then parsing gives back the same blocks."""

    def test_sample_document(self, sample_text) -> None:
        """Test the shared sample document."""
        nodes = parse_markdown(sample_text)
        assert parse_markdown(render_markdown(nodes)) == nodes

    def test_sample_document_structure(self, sample_text) -> None:
        """Test that the sample parses into the expected top-level kinds."""
        nodes = parse_markdown(sample_text)
        assert any(isinstance(node, Table) for node in nodes)
        assert any(isinstance(node, OrderedList) and node.start == 3 for node in nodes)
        assert any(isinstance(node, UnorderedList) for node in nodes)
        assert [node.level for node in nodes if isinstance(node, Heading)] == [1, 2]

    @pytest.mark.parametrize("document", DOCUMENTS)
    def test_documents(self, document: str) -> None:
        """Test a range of constructs."""
        nodes = parse_markdown(document)
        assert parse_markdown(render_markdown(nodes)) == nodes

    @pytest.mark.parametrize("document", DOCUMENTS)
    def test_alternative_symbols(self, document: str) -> None:
        """Test that the symbol options do not change the parsed blocks."""
        options = MarkdownRendererOptions(
            emphasis_symbol="_", bullet_symbol="*", code_fence_char="~", table_style="compact"
        )
        nodes = parse_markdown(document)
        assert parse_markdown(render_markdown(nodes, options)) == nodes

    def test_rendering_is_idempotent(self, sample_text) -> None:
        """Test that normalised markdown normalises to itself."""
        once = render_markdown(parse_markdown(sample_text))
        assert render_markdown(parse_markdown(once)) == once

    @pytest.mark.parametrize(
        "document,expected",
        [
            ("\\- not a list\n", [Paragraph([Text("- not a list")])]),
            ("1\\. not ordered\n", [Paragraph([Text("1. not ordered")])]),
            ("\\> not a quote\n", [Paragraph([Text("> not a quote")])]),
            ("Setext\\\n\\---\n", [Paragraph([Text("Setext"), HardLineBreak(), Text("---")])]),
            ("## Title \\#\n", [Heading(level=2, raw_text="Title #", children=[Text("Title #")])]),
        ],
    )
    def test_escaped_markers_stay_text(self, document: str, expected: list) -> None:
        """Test that escaped block markers come back as text after rendering."""
        nodes = parse_markdown(document)
        assert nodes == expected
        assert parse_markdown(render_markdown(nodes)) == expected

    def test_adjacent_lists_stay_separate(self) -> None:
        """Test that consecutive lists of one kind are not merged on reparse."""
        nodes = parse_markdown("- a\n\n* b\n\n1. x\n\n1) y\n")
        assert [type(node) for node in nodes] == [UnorderedList, UnorderedList, OrderedList, OrderedList]
        assert render_markdown(nodes) == "- a\n\n* b\n\n1. x\n\n1) y\n"


@pytest.mark.integration
@pytest.mark.property
class TestRoundTripProperty:
    """Rendering is a fixed point for every document shape the parser produces."""

    @given(parsed_documents)
    @settings(deadline=5000)
    def test_parse_of_render(self, nodes) -> None:
        """Test that rendered blocks parse back unchanged."""
        assert parse_markdown(render_markdown(nodes)) == nodes

    @given(parsed_documents)
    @settings(deadline=5000)
    def test_parse_of_render_with_alternative_symbols(self, nodes) -> None:
        """Test the same with every symbol option switched."""
        options = MarkdownRendererOptions(
            emphasis_symbol="_", bullet_symbol="+", ordered_delimiter=")", code_fence_char="~"
        )
        assert parse_markdown(render_markdown(nodes, options)) == nodes


@pytest.mark.integration
class TestValidationPipeline:
    """Validation and rendering over parsed documents."""

    def test_sample_links_resolve(self, sample_text) -> None:
        """Test that the sample's internal link targets its heading."""
        assert validate_document(parse_markdown(sample_text), lambda block: None).is_ok()

    def test_html_with_validated_ids(self) -> None:
        """Test HTML rendering with ids coming from anchor validation."""
        nodes = parse_markdown("# Intro\n\nSee [usage](#usage).\n\n## Usage\n")
        renderer = HtmlRenderer()
        result = resolve([fold(lift_with_anchor(renderer.render_with_anchor), node) for node in nodes])
        html = "\n".join(str(element) for element in result.unwrap())
        assert html == (
            '<h1 id="intro">Intro</h1>\n'
            '<p>See <a href="#usage">usage</a>.</p>\n'
            '<h2 id="usage">Usage</h2>'
        )

    def test_slugs_mark_broken_links(self) -> None:
        """Test always-rendering validation on a parsed document."""
        nodes = parse_markdown("# Intro\n\n[ok](#intro) [bad](#nope)\n")

        def mark(block, valid):
            if isinstance(block, Link) and not valid:
                return "BROKEN"
            return block.kind

        rendered = render_document_slugs(nodes, mark)
        assert not rendered.valid
        assert rendered.value == ["heading", "paragraph"]

    def test_words_and_html_agree(self, sample_text) -> None:
        """Test that words extracted from blocks appear in the HTML text."""
        nodes = parse_markdown(sample_text)
        html = render_html(nodes)
        for word in extract_document_words(nodes):
            assert word in html
