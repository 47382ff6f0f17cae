#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/domtree/ast/__init__.py
"""Document tree module.

This module provides the node variants of a simplified document tree, the
visitor protocol used to compute over them, and the containment grammar that
decides whether a tree is well-formed.

The module consists of several components:

- nodes: the eight node variants (Body, Div, Para, Header, Text, Anchor, Bold, Italic)
- visitors: the NodeVisitor base class
- grammar: RootRule, BlockRule and InlineRule plus the validate helpers
- builder: helpers for constructing trees
- utils: text extraction and tree metrics

Examples
--------
Basic usage:

    >>> from domtree.ast import Body, Para, Text, Bold, is_well_formed
    >>>
    >>> doc = Body([Para([Text("Hello "), Bold([Text("world")])])])
    >>> is_well_formed(doc)
    True

"""

from __future__ import annotations

# Builder helpers
from domtree.ast.builder import DocumentBuilder, anchor, body, bold, div, header, italic, para, text

# Grammar validation
from domtree.ast.grammar import BlockRule, InlineRule, RootRule, is_well_formed, validate

# Core node types
from domtree.ast.nodes import Anchor, Body, Bold, Div, Header, Italic, Node, Para, Text

# Utilities
from domtree.ast.utils import count_nodes, extract_text, get_node_children, tree_depth

# Visitors
from domtree.ast.visitors import NodeVisitor

__all__ = [
    # Nodes
    "Node",
    "Body",
    "Div",
    "Para",
    "Header",
    "Text",
    "Anchor",
    "Bold",
    "Italic",
    # Visitors
    "NodeVisitor",
    # Grammar
    "RootRule",
    "BlockRule",
    "InlineRule",
    "is_well_formed",
    "validate",
    # Builder
    "DocumentBuilder",
    "body",
    "div",
    "para",
    "header",
    "text",
    "anchor",
    "bold",
    "italic",
    # Utilities
    "get_node_children",
    "extract_text",
    "count_nodes",
    "tree_depth",
]
