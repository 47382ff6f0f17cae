#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/domtree/ast/utils.py
"""Utility functions for working with document trees.

Functions
---------
get_node_children : Children of any node (empty for Text)
extract_text : Plain text content of a tree
count_nodes : Number of nodes in a tree
tree_depth : Nesting depth of a tree

Examples
--------
    >>> from domtree.ast import Para, Text, Italic
    >>> p = Para([Text("Hello"), Italic([Text("world")])])
    >>> extract_text(p)
    'Hello world'
    >>> count_nodes(p), tree_depth(p)
    (4, 3)

"""

from __future__ import annotations

from abc import abstractmethod
from typing import Union

from domtree.ast.nodes import Anchor, Body, Bold, Div, Header, Italic, Node, Para, Text
from domtree.ast.visitors import NodeVisitor
from domtree.constants import DEFAULT_TEXT_JOINER
from domtree.functions import concat_strings
from domtree.plist import Empty, PList

ContainerNode = Union[Body, Div, Para, Header, Anchor, Bold, Italic]


def get_node_children(node: Node) -> PList[Node]:
    """Get the children of a node.

    Parameters
    ----------
    node : Node
        Any document node

    Returns
    -------
    PList of Node
        The node's children, or an empty list for a Text leaf

    """
    if isinstance(node, Text):
        return Empty()
    return node.children  # type: ignore[attr-defined]


class _ContainerVisitor(NodeVisitor[int]):
    # Routes every non-leaf variant through a single visit_container hook.

    @abstractmethod
    def visit_container(self, node: ContainerNode) -> int:
        """Visit any non-leaf node."""

    def visit_body(self, node: Body) -> int:
        return self.visit_container(node)

    def visit_div(self, node: Div) -> int:
        return self.visit_container(node)

    def visit_para(self, node: Para) -> int:
        return self.visit_container(node)

    def visit_header(self, node: Header) -> int:
        return self.visit_container(node)

    def visit_anchor(self, node: Anchor) -> int:
        return self.visit_container(node)

    def visit_bold(self, node: Bold) -> int:
        return self.visit_container(node)

    def visit_italic(self, node: Italic) -> int:
        return self.visit_container(node)

    def visit_text(self, node: Text) -> int:
        return 1


class NodeCounter(_ContainerVisitor):
    """Count every node in a tree, the root included."""

    def visit_container(self, node: ContainerNode) -> int:
        return node.children.foldl(lambda child, total: total + self(child), 1)


class DepthMeasurer(_ContainerVisitor):
    """Measure the longest root-to-leaf path, counted in nodes."""

    def visit_container(self, node: ContainerNode) -> int:
        return 1 + node.children.foldl(lambda child, deepest: max(deepest, self(child)), 0)


class TextExtractor(NodeVisitor[str]):
    """Concatenate the Text leaves of a tree in document order.

    Child results are joined right to left with ``foldr``; empty fragments
    contribute nothing and do not produce a doubled joiner.

    Parameters
    ----------
    joiner : str, default = " "
        String placed between the text of sibling nodes

    """

    def __init__(self, joiner: str = DEFAULT_TEXT_JOINER):
        """Initialize the extractor with a joiner."""
        self.joiner = joiner
        self._concat = concat_strings(joiner)

    def _combine(self, part: str, rest: str) -> str:
        if not part:
            return rest
        if not rest:
            return part
        return self._concat(part, rest)

    def _join_children(self, node: ContainerNode) -> str:
        return node.children.map(self).foldr(self._combine, "")

    def visit_body(self, node: Body) -> str:
        return self._join_children(node)

    def visit_div(self, node: Div) -> str:
        return self._join_children(node)

    def visit_para(self, node: Para) -> str:
        return self._join_children(node)

    def visit_header(self, node: Header) -> str:
        return self._join_children(node)

    def visit_text(self, node: Text) -> str:
        return node.text

    def visit_anchor(self, node: Anchor) -> str:
        return self._join_children(node)

    def visit_bold(self, node: Bold) -> str:
        return self._join_children(node)

    def visit_italic(self, node: Italic) -> str:
        return self._join_children(node)


def extract_text(node: Node, joiner: str = DEFAULT_TEXT_JOINER) -> str:
    """Extract plain text from a tree.

    Text content is preserved exactly, so whitespace already at the edge of
    a Text node combines with the joiner.

    Parameters
    ----------
    node : Node
        Root of the tree to read
    joiner : str, default = " "
        String used between sibling fragments. Use "" to rely only on
        whitespace inside the Text nodes

    Returns
    -------
    str
        Concatenated text content

    """
    return node.accept(TextExtractor(joiner))


def count_nodes(node: Node) -> int:
    """Return the number of nodes in the tree rooted at ``node``."""
    return node.accept(NodeCounter())


def tree_depth(node: Node) -> int:
    """Return the nesting depth of the tree; a lone leaf has depth 1."""
    return node.accept(DepthMeasurer())


__all__ = [
    "DepthMeasurer",
    "NodeCounter",
    "TextExtractor",
    "count_nodes",
    "extract_text",
    "get_node_children",
    "tree_depth",
]
