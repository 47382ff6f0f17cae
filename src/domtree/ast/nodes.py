#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/domtree/ast/nodes.py
"""Document node classes.

This module defines the eight node variants of a simplified document tree,
a restricted analogue of the HTML DOM. Each node holds its children in a
persistent list (or a string, for the Text leaf) and supports the visitor
pattern through ``accept``.

Node Categories
---------------
The root of a document:
    - Body

Block-level nodes, which stack vertically:
    - Div, Para, Header

Inline nodes, which run together without line breaks:
    - Text, Anchor, Bold, Italic

Nothing in these classes stops a caller from putting any node under any
other node. Containment is checked separately by
:mod:`domtree.ast.grammar`.

"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, TypeVar

from domtree.exceptions import ValidationError
from domtree.plist import Empty, PList, from_iterable

if TYPE_CHECKING:
    from domtree.ast.visitors import NodeVisitor

R = TypeVar("R")


class Node(ABC):
    """Base class for all document nodes.

    Nodes are immutable. A tree is built once, validated and read any number
    of times.
    """

    @abstractmethod
    def accept(self, visitor: NodeVisitor[R]) -> R:
        """Accept a visitor for processing this node.

        Parameters
        ----------
        visitor : NodeVisitor
            A visitor with one visit_* method per node variant

        Returns
        -------
        R
            Result of the visitor method matching this node's variant

        """


def _coerce_children(node: Any) -> None:
    # Frozen dataclasses need object.__setattr__ to normalize a field.
    children = node.children
    if isinstance(children, PList):
        return
    if isinstance(children, (list, tuple)):
        object.__setattr__(node, "children", from_iterable(children))
        return
    raise ValidationError(
        f"{type(node).__name__} children must be a PList, list or tuple, not {type(children).__name__}",
        parameter_name="children",
        parameter_value=children,
    )


# ============================================================================
# Document Root
# ============================================================================


@dataclass(frozen=True)
class Body(Node):
    """Root node containing the whole document.

    Parameters
    ----------
    children : PList of Node, default = Empty()
        Content of the page; well-formed documents hold only block nodes

    """

    children: PList[Node] = field(default_factory=Empty)

    def __post_init__(self) -> None:
        _coerce_children(self)

    def accept(self, visitor: NodeVisitor[R]) -> R:
        """Dispatch to ``visitor.visit_body``."""
        return visitor.visit_body(self)


# ============================================================================
# Block-level Nodes
# ============================================================================


@dataclass(frozen=True)
class Div(Node):
    """Division of the document.

    Parameters
    ----------
    children : PList of Node, default = Empty()
        Nested divisions, paragraphs and headers

    """

    children: PList[Node] = field(default_factory=Empty)

    def __post_init__(self) -> None:
        _coerce_children(self)

    def accept(self, visitor: NodeVisitor[R]) -> R:
        """Dispatch to ``visitor.visit_div``."""
        return visitor.visit_div(self)


@dataclass(frozen=True)
class Para(Node):
    """Paragraph of inline content.

    Parameters
    ----------
    children : PList of Node, default = Empty()
        Inline nodes making up the paragraph

    """

    children: PList[Node] = field(default_factory=Empty)

    def __post_init__(self) -> None:
        _coerce_children(self)

    def accept(self, visitor: NodeVisitor[R]) -> R:
        """Dispatch to ``visitor.visit_para``."""
        return visitor.visit_para(self)


@dataclass(frozen=True)
class Header(Node):
    """Header (title, section, subsection, ...).

    The level is not range-checked at construction; see
    ``ValidationOptions.check_heading_levels``.

    Parameters
    ----------
    level : int
        Header level, 1 being the most important
    children : PList of Node, default = Empty()
        Inline nodes making up the header text

    """

    level: int
    children: PList[Node] = field(default_factory=Empty)

    def __post_init__(self) -> None:
        _coerce_children(self)

    def accept(self, visitor: NodeVisitor[R]) -> R:
        """Dispatch to ``visitor.visit_header``."""
        return visitor.visit_header(self)


# ============================================================================
# Inline Nodes
# ============================================================================


@dataclass(frozen=True)
class Text(Node):
    """Run of unformatted text; the leaf of every tree.

    Parameters
    ----------
    text : str
        Literal text content

    """

    text: str

    def accept(self, visitor: NodeVisitor[R]) -> R:
        """Dispatch to ``visitor.visit_text``."""
        return visitor.visit_text(self)


@dataclass(frozen=True)
class Anchor(Node):
    """Hyperlink.

    Parameters
    ----------
    target : str
        Link destination
    children : PList of Node, default = Empty()
        Inline nodes making up the link text

    """

    target: str
    children: PList[Node] = field(default_factory=Empty)

    def __post_init__(self) -> None:
        _coerce_children(self)

    def accept(self, visitor: NodeVisitor[R]) -> R:
        """Dispatch to ``visitor.visit_anchor``."""
        return visitor.visit_anchor(self)


@dataclass(frozen=True)
class Bold(Node):
    """Bold formatting around inline content."""

    children: PList[Node] = field(default_factory=Empty)

    def __post_init__(self) -> None:
        _coerce_children(self)

    def accept(self, visitor: NodeVisitor[R]) -> R:
        """Dispatch to ``visitor.visit_bold``."""
        return visitor.visit_bold(self)


@dataclass(frozen=True)
class Italic(Node):
    """Italic formatting around inline content."""

    children: PList[Node] = field(default_factory=Empty)

    def __post_init__(self) -> None:
        _coerce_children(self)

    def accept(self, visitor: NodeVisitor[R]) -> R:
        """Dispatch to ``visitor.visit_italic``."""
        return visitor.visit_italic(self)


__all__ = [
    "Anchor",
    "Body",
    "Bold",
    "Div",
    "Header",
    "Italic",
    "Node",
    "Para",
    "Text",
]
