"""domtree - A simplified document tree with grammar validation.

domtree models a restricted HTML-like document as an immutable tree of eight
node variants, each holding its children in a generic persistent list. The
node types place no constraint on what may nest inside what; well-formedness
is decided by a separate pass of three mutually recursive visitors.

Key Features
------------
- Persistent list with map, foldr, foldl and short-circuiting all_satisfy
- Body, block (Div, Para, Header) and inline (Text, Anchor, Bold, Italic) nodes
- Double-dispatch visitors with exhaustiveness checked at instantiation
- Boolean grammar verdicts, with an opt-in strict mode that raises

Requirements
------------
- Python 3.10+

Examples
--------
Build and check a document:

    >>> from domtree import Body, Div, Para, Text, is_well_formed
    >>> is_well_formed(Body([Div([Para([Text("hello")])])]))
    True
    >>> is_well_formed(Body([Para([Div([])])]))
    False

"""

from __future__ import annotations

import logging

from domtree.ast import (
    Anchor,
    BlockRule,
    Body,
    Bold,
    Div,
    DocumentBuilder,
    Header,
    InlineRule,
    Italic,
    Node,
    NodeVisitor,
    Para,
    RootRule,
    Text,
    extract_text,
    is_well_formed,
    validate,
)
from domtree.exceptions import DomTreeError, GrammarError, ValidationError
from domtree.options import ValidationOptions
from domtree.plist import Cons, Empty, PList, from_iterable

__version__ = "1.0.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "__version__",
    # Persistent list
    "PList",
    "Empty",
    "Cons",
    "from_iterable",
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
    # Visitors and grammar
    "NodeVisitor",
    "RootRule",
    "BlockRule",
    "InlineRule",
    "is_well_formed",
    "validate",
    "DocumentBuilder",
    "extract_text",
    # Options and errors
    "ValidationOptions",
    "DomTreeError",
    "ValidationError",
    "GrammarError",
]
