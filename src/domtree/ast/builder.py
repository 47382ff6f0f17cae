#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/domtree/ast/builder.py
"""Helpers for constructing document trees.

The variadic constructors save wrapping every child sequence in a persistent
list by hand; ``DocumentBuilder`` accumulates blocks for a Body one at a time.
Neither checks the grammar: a malformed tree can be built on purpose and is
only rejected by an explicit validation pass.

Examples
--------
    >>> doc = body(header(1, text("Title")), para(text("Hi "), bold(text("there"))))
    >>> isinstance(doc, Body)
    True

"""

from __future__ import annotations

from domtree.ast.nodes import Anchor, Body, Bold, Div, Header, Italic, Node, Para, Text
from domtree.plist import from_iterable


def body(*children: Node) -> Body:
    """Create a Body holding ``children`` in order."""
    return Body(from_iterable(children))


def div(*children: Node) -> Div:
    """Create a Div holding ``children`` in order."""
    return Div(from_iterable(children))


def para(*children: Node) -> Para:
    """Create a Para holding ``children`` in order."""
    return Para(from_iterable(children))


def header(level: int, *children: Node) -> Header:
    """Create a Header of the given level holding ``children`` in order."""
    return Header(level, from_iterable(children))


def text(content: str) -> Text:
    """Create a Text leaf."""
    return Text(content)


def anchor(target: str, *children: Node) -> Anchor:
    """Create an Anchor pointing at ``target`` holding ``children`` in order."""
    return Anchor(target, from_iterable(children))


def bold(*children: Node) -> Bold:
    """Create a Bold span holding ``children`` in order."""
    return Bold(from_iterable(children))


def italic(*children: Node) -> Italic:
    """Create an Italic span holding ``children`` in order."""
    return Italic(from_iterable(children))


class DocumentBuilder:
    """Accumulate block nodes and produce a Body.

    Each ``add_*`` method appends one node and returns the builder so calls
    can be chained.

    Examples
    --------
    >>> doc = (
    ...     DocumentBuilder()
    ...     .add_header(1, [Text("Title")])
    ...     .add_para([Text("Body text")])
    ...     .get_document()
    ... )
    >>> len(doc.children)
    2

    """

    def __init__(self) -> None:
        """Initialize the builder with no children."""
        self.children: list[Node] = []

    def add_node(self, node: Node) -> DocumentBuilder:
        """Append any node, without checking that it is a block.

        Parameters
        ----------
        node : Node
            Node to append

        Returns
        -------
        DocumentBuilder
            This builder

        """
        self.children.append(node)
        return self

    def add_div(self, children: list[Node]) -> DocumentBuilder:
        """Append a Div holding ``children``."""
        return self.add_node(Div(from_iterable(children)))

    def add_para(self, children: list[Node]) -> DocumentBuilder:
        """Append a Para holding ``children``."""
        return self.add_node(Para(from_iterable(children)))

    def add_header(self, level: int, children: list[Node]) -> DocumentBuilder:
        """Append a Header of the given level holding ``children``."""
        return self.add_node(Header(level, from_iterable(children)))

    def get_document(self) -> Body:
        """Get the constructed document.

        The builder can keep being used afterwards; later additions do not
        affect documents already returned.

        Returns
        -------
        Body
            Document root holding the accumulated nodes

        """
        return Body(from_iterable(self.children))


__all__ = [
    "DocumentBuilder",
    "anchor",
    "body",
    "bold",
    "div",
    "header",
    "italic",
    "para",
    "text",
]
