#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/domtree/ast/visitors.py
"""Visitor pattern implementation for document trees.

A visitor is a total function over the eight node variants. Each node's
``accept`` calls the visitor method named after its own variant, so new
whole-tree computations (validators, extractors, renderers) are added by
writing a new visitor rather than touching the node classes.

Every ``visit_*`` method is abstract: a subclass that forgets one cannot be
instantiated.

"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

from domtree.ast.nodes import Anchor, Body, Bold, Div, Header, Italic, Node, Para, Text

R = TypeVar("R")


class NodeVisitor(ABC, Generic[R]):
    """Abstract base class for document node visitors.

    Visitors are also callable, so an instance can be handed directly to
    ``PList.map`` or ``PList.all_satisfy``.

    Examples
    --------
    Visitor that counts Text leaves:

        >>> class TextCounter(NodeVisitor[int]):
        ...     def visit_text(self, node):
        ...         return 1
        ...     def _sum(self, node):
        ...         return node.children.foldl(lambda child, acc: acc + self(child), 0)
        ...     visit_body = visit_div = visit_para = visit_header = _sum
        ...     visit_anchor = visit_bold = visit_italic = _sum
        >>> Body([Para([Text("a"), Bold([Text("b")])])]).accept(TextCounter())
        2

    """

    def __call__(self, node: Node) -> R:
        """Apply this visitor to ``node``; equivalent to ``node.accept(self)``."""
        return node.accept(self)

    @abstractmethod
    def visit_body(self, node: Body) -> R:
        """Visit a Body node.

        Parameters
        ----------
        node : Body
            The document root to visit

        Returns
        -------
        R
            Result of processing this node

        """

    @abstractmethod
    def visit_div(self, node: Div) -> R:
        """Visit a Div node.

        Parameters
        ----------
        node : Div
            The division to visit

        Returns
        -------
        R
            Result of processing this node

        """

    @abstractmethod
    def visit_para(self, node: Para) -> R:
        """Visit a Para node.

        Parameters
        ----------
        node : Para
            The paragraph to visit

        Returns
        -------
        R
            Result of processing this node

        """

    @abstractmethod
    def visit_header(self, node: Header) -> R:
        """Visit a Header node.

        Parameters
        ----------
        node : Header
            The header to visit

        Returns
        -------
        R
            Result of processing this node

        """

    @abstractmethod
    def visit_text(self, node: Text) -> R:
        """Visit a Text node.

        Parameters
        ----------
        node : Text
            The text leaf to visit

        Returns
        -------
        R
            Result of processing this node

        """

    @abstractmethod
    def visit_anchor(self, node: Anchor) -> R:
        """Visit an Anchor node.

        Parameters
        ----------
        node : Anchor
            The hyperlink to visit

        Returns
        -------
        R
            Result of processing this node

        """

    @abstractmethod
    def visit_bold(self, node: Bold) -> R:
        """Visit a Bold node.

        Parameters
        ----------
        node : Bold
            The bold span to visit

        Returns
        -------
        R
            Result of processing this node

        """

    @abstractmethod
    def visit_italic(self, node: Italic) -> R:
        """Visit an Italic node.

        Parameters
        ----------
        node : Italic
            The italic span to visit

        Returns
        -------
        R
            Result of processing this node

        """


__all__ = [
    "NodeVisitor",
]
