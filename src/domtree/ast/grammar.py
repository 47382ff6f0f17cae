#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/domtree/ast/grammar.py
"""Containment grammar checks for document trees.

Node classes accept any children, so whether a tree is well-formed is decided
here, by three mutually recursive visitors:

.. code-block:: text

    Document ::= Body
    Body     ::= Block*
    Block    ::= Div | Para | Header
    Div      ::= Block*
    Para     ::= Inline*
    Header   ::= Inline*
    Inline   ::= Text | Anchor | Bold | Italic
    Anchor   ::= Inline*
    Bold     ::= Inline*
    Italic   ::= Inline*

``RootRule`` is the entry point, ``BlockRule`` checks a node found where a
block is expected and ``InlineRule`` checks a node found where inline content
is expected. Each child list is checked with ``PList.all_satisfy``, so the
walk stops at the first offending child. Empty child lists are always
acceptable.

The rules return a bare boolean and never raise. Use :func:`validate` with
``strict=True`` to turn a rejection into a :class:`GrammarError`.

Examples
--------
    >>> from domtree.ast import Body, Div, Para, Text
    >>> is_well_formed(Body([Div([Para([Text("hello")])])]))
    True
    >>> is_well_formed(Body([Text("loose text")]))
    False

"""

from __future__ import annotations

import logging
from typing import Optional

from domtree.ast.nodes import Anchor, Body, Bold, Div, Header, Italic, Node, Para, Text
from domtree.ast.visitors import NodeVisitor
from domtree.constants import MAX_HEADER_LEVEL, MIN_HEADER_LEVEL
from domtree.exceptions import GrammarError
from domtree.options import ValidationOptions

logger = logging.getLogger(__name__)


class InlineRule(NodeVisitor[bool]):
    """Accept a node that may appear in an inline context.

    Text is accepted outright; Anchor, Bold and Italic are accepted when all
    of their children are inline. Body and block nodes are rejected.

    Parameters
    ----------
    options : ValidationOptions or None, default = None
        Validation options; defaults are used when None

    """

    def __init__(self, options: Optional[ValidationOptions] = None):
        """Initialize the rule with validation options."""
        self.options = options or ValidationOptions()

    def visit_body(self, node: Body) -> bool:
        return False

    def visit_div(self, node: Div) -> bool:
        return False

    def visit_para(self, node: Para) -> bool:
        return False

    def visit_header(self, node: Header) -> bool:
        return False

    def visit_text(self, node: Text) -> bool:
        return True

    def visit_anchor(self, node: Anchor) -> bool:
        return node.children.all_satisfy(self)

    def visit_bold(self, node: Bold) -> bool:
        return node.children.all_satisfy(self)

    def visit_italic(self, node: Italic) -> bool:
        return node.children.all_satisfy(self)


class BlockRule(NodeVisitor[bool]):
    """Accept a node that may appear in a block context.

    Div is accepted when all of its children are blocks (so divisions nest);
    Para and Header are accepted when all of their children are inline.
    Body and inline nodes are rejected.

    Parameters
    ----------
    options : ValidationOptions or None, default = None
        Validation options; defaults are used when None

    """

    def __init__(self, options: Optional[ValidationOptions] = None):
        """Initialize the rule and the inline rule it delegates to."""
        self.options = options or ValidationOptions()
        self.inline_rule = InlineRule(self.options)

    def visit_body(self, node: Body) -> bool:
        return False

    def visit_div(self, node: Div) -> bool:
        return node.children.all_satisfy(self)

    def visit_para(self, node: Para) -> bool:
        return node.children.all_satisfy(self.inline_rule)

    def visit_header(self, node: Header) -> bool:
        if self.options.check_heading_levels and not MIN_HEADER_LEVEL <= node.level <= MAX_HEADER_LEVEL:
            return False
        return node.children.all_satisfy(self.inline_rule)

    def visit_text(self, node: Text) -> bool:
        return False

    def visit_anchor(self, node: Anchor) -> bool:
        return False

    def visit_bold(self, node: Bold) -> bool:
        return False

    def visit_italic(self, node: Italic) -> bool:
        return False


class RootRule(NodeVisitor[bool]):
    """Accept a complete document.

    Only a Body whose children are all blocks is a legal root; every other
    variant is rejected without looking at its children.

    Parameters
    ----------
    options : ValidationOptions or None, default = None
        Validation options shared with the block and inline rules

    Examples
    --------
        >>> from domtree.ast import Body, Para, Text
        >>> Body([Para([Text("a")])]).accept(RootRule())
        True
        >>> Para([Text("a")]).accept(RootRule())
        False

    """

    def __init__(self, options: Optional[ValidationOptions] = None):
        """Initialize the rule and the block rule it delegates to."""
        self.options = options or ValidationOptions()
        self.block_rule = BlockRule(self.options)

    def visit_body(self, node: Body) -> bool:
        return node.children.all_satisfy(self.block_rule)

    def visit_div(self, node: Div) -> bool:
        return False

    def visit_para(self, node: Para) -> bool:
        return False

    def visit_header(self, node: Header) -> bool:
        return False

    def visit_text(self, node: Text) -> bool:
        return False

    def visit_anchor(self, node: Anchor) -> bool:
        return False

    def visit_bold(self, node: Bold) -> bool:
        return False

    def visit_italic(self, node: Italic) -> bool:
        return False


def is_well_formed(node: Node, options: Optional[ValidationOptions] = None) -> bool:
    """Decide whether ``node`` is the root of a well-formed document.

    Parameters
    ----------
    node : Node
        Candidate document root
    options : ValidationOptions or None, default = None
        Validation options; ``strict`` is ignored here

    Returns
    -------
    bool
        True when the tree satisfies the containment grammar

    """
    verdict = node.accept(RootRule(options))
    logger.debug("%s tree is %s", type(node).__name__, "well-formed" if verdict else "not well-formed")
    return verdict


def validate(node: Node, options: Optional[ValidationOptions] = None) -> bool:
    """Validate a document tree, optionally raising on rejection.

    Parameters
    ----------
    node : Node
        Candidate document root
    options : ValidationOptions or None, default = None
        Validation options; defaults are used when None

    Returns
    -------
    bool
        True when the tree is well-formed. False is returned only when
        ``options.strict`` is off

    Raises
    ------
    GrammarError
        If ``options.strict`` is set and the tree is not well-formed

    """
    options = options or ValidationOptions()
    verdict = is_well_formed(node, options)
    if not verdict and options.strict:
        raise GrammarError(type(node).__name__)
    return verdict


__all__ = [
    "BlockRule",
    "InlineRule",
    "RootRule",
    "is_well_formed",
    "validate",
]
