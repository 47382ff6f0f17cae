#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/domtree/functions.py
"""Function abstractions used to parameterize list operations.

Behavior is passed to :class:`~domtree.plist.PList` operations as ordinary
Python callables. The aliases below only name the two shapes that appear in
signatures: a unary transform and a binary combiner.
"""

from __future__ import annotations

from typing import Callable, TypeVar

A = TypeVar("A")
A1 = TypeVar("A1")
A2 = TypeVar("A2")
R = TypeVar("R")

UnaryFunc = Callable[[A], R]
BinaryFunc = Callable[[A1, A2], R]


def concat_strings(separator: str = "") -> BinaryFunc[str, str, str]:
    """Return a combiner that joins two strings with ``separator`` in between.

    Parameters
    ----------
    separator : str, default = ""
        String placed between the two arguments

    Returns
    -------
    callable
        ``(first, second) -> first + separator + second``

    Examples
    --------
    >>> from domtree.plist import from_iterable
    >>> from_iterable(["a", "b", "c"]).foldr(concat_strings("-"), "")
    'a-b-c-'

    """

    def _concat(first: str, second: str) -> str:
        return first + separator + second

    return _concat


__all__ = [
    "BinaryFunc",
    "UnaryFunc",
    "concat_strings",
]
