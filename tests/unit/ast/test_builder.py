#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Tests for tree builder utilities."""
import pytest

from domtree.ast import (
    Anchor,
    Body,
    Bold,
    Div,
    DocumentBuilder,
    Header,
    Italic,
    Para,
    Text,
    anchor,
    body,
    bold,
    div,
    header,
    is_well_formed,
    italic,
    para,
    text,
)


@pytest.mark.unit
class TestVariadicConstructors:
    """Test the variadic node constructors."""

    def test_constructors_match_direct_construction(self):
        """Each helper builds the same node as the class."""
        assert text("a") == Text("a")
        assert para(text("a"), text("b")) == Para([Text("a"), Text("b")])
        assert header(2, text("h")) == Header(2, [Text("h")])
        assert anchor("#top", text("up")) == Anchor("#top", [Text("up")])
        assert bold(italic(text("x"))) == Bold([Italic([Text("x")])])
        assert div() == Div()
        assert body(div()) == Body([Div()])

    def test_children_order_preserved(self):
        """Arguments become children in order."""
        node = para(text("1"), text("2"), text("3"))
        assert [child.text for child in node.children] == ["1", "2", "3"]


@pytest.mark.unit
class TestDocumentBuilder:
    """Test DocumentBuilder functionality."""

    def test_init_creates_empty_children(self) -> None:
        """Test that initialization creates empty children list."""
        builder = DocumentBuilder()
        assert builder.children == []
        assert builder.get_document() == Body()

    def test_add_header(self) -> None:
        """Test adding a header."""
        doc = DocumentBuilder().add_header(1, [Text("Title")]).get_document()
        assert doc.children.to_list() == [Header(1, [Text("Title")])]

    def test_add_para_and_div(self) -> None:
        """Test adding paragraphs and divisions in order."""
        doc = DocumentBuilder().add_para([Text("p")]).add_div([Para([Text("inner")])]).get_document()
        assert isinstance(doc.children.first, Para)
        assert isinstance(doc.children.rest.first, Div)
        assert is_well_formed(doc)

    def test_add_node_allows_malformed(self) -> None:
        """Any node can be added; the grammar is not checked."""
        doc = DocumentBuilder().add_node(Text("loose")).get_document()
        assert doc.children.to_list() == [Text("loose")]
        assert not is_well_formed(doc)

    def test_documents_are_snapshots(self) -> None:
        """Later additions do not change an already returned document."""
        builder = DocumentBuilder().add_para([])
        first = builder.get_document()
        builder.add_para([])
        assert len(first.children) == 1
        assert len(builder.get_document().children) == 2
