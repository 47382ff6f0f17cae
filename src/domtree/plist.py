#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/domtree/plist.py
"""Generic persistent list.

A :class:`PList` is either :class:`Empty` or a :class:`Cons` cell holding one
element and the rest of the list. Lists are immutable and can only be built
inductively, so every list is finite and acyclic. All operations are pure and
preserve insertion order.

Recursive definitions are the reference semantics; the ``Cons`` methods walk
the cells with loops so that long lists do not exhaust the interpreter stack.

Examples
--------
    >>> from domtree.plist import Cons, Empty, from_iterable
    >>> nums = from_iterable([1, 2, 3])
    >>> nums == Cons(1, Cons(2, Cons(3, Empty())))
    True
    >>> nums.map(lambda n: n * 10).to_list()
    [10, 20, 30]
    >>> nums.foldr(lambda x, acc: [x] + acc, [])
    [1, 2, 3]
    >>> nums.foldl(lambda x, acc: [x] + acc, [])
    [3, 2, 1]
    >>> nums.all_satisfy(lambda n: n > 0)
    True

"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Generic, Iterable, Iterator, TypeVar

from domtree.exceptions import ValidationError
from domtree.functions import BinaryFunc, UnaryFunc

T = TypeVar("T")
U = TypeVar("U")


class PList(ABC, Generic[T]):
    """Base class for persistent lists.

    Subclasses are :class:`Empty` and :class:`Cons`; no other variant exists.
    """

    @abstractmethod
    def map(self, func: UnaryFunc[T, U]) -> PList[U]:
        """Apply ``func`` to every element, preserving order and length.

        Parameters
        ----------
        func : callable
            Transform applied to each element

        Returns
        -------
        PList
            New list of transformed elements

        """

    @abstractmethod
    def foldr(self, func: BinaryFunc[T, U, U], base: U) -> U:
        """Reduce right-associatively: ``func(x1, func(x2, ... func(xn, base)))``.

        Parameters
        ----------
        func : callable
            Combiner taking ``(element, accumulated)``
        base : U
            Value used for the empty tail

        Returns
        -------
        U
            The reduced value

        """

    @abstractmethod
    def foldl(self, func: BinaryFunc[T, U, U], base: U) -> U:
        """Reduce left to right: ``func(xn, ... func(x2, func(x1, base)))``.

        Parameters
        ----------
        func : callable
            Combiner taking ``(element, accumulated)``
        base : U
            Initial accumulator

        Returns
        -------
        U
            The reduced value

        """

    @abstractmethod
    def all_satisfy(self, pred: UnaryFunc[T, bool]) -> bool:
        """Return True when every element satisfies ``pred``.

        Evaluation stops at the first element that fails; later elements are
        never passed to ``pred``. The empty list is vacuously True.

        Parameters
        ----------
        pred : callable
            Predicate applied to each element in list order

        Returns
        -------
        bool
            Whether all elements satisfy ``pred``

        """

    def __iter__(self) -> Iterator[T]:
        node: PList[T] = self
        while isinstance(node, Cons):
            yield node.first
            node = node.rest

    def __len__(self) -> int:
        return sum(1 for _ in self)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PList):
            return NotImplemented
        sentinel = object()
        mine, theirs = iter(self), iter(other)
        while True:
            left = next(mine, sentinel)
            right = next(theirs, sentinel)
            if left is sentinel or right is sentinel:
                return left is right
            if left != right:
                return False

    def __hash__(self) -> int:
        return hash(tuple(self))

    def __repr__(self) -> str:
        return f"from_iterable({list(self)!r})"

    def to_list(self) -> list[T]:
        """Return the elements as a builtin list, in order."""
        return list(self)


@dataclass(frozen=True, eq=False, repr=False)
class Empty(PList[T]):
    """The list with no elements."""

    def map(self, func: UnaryFunc[T, U]) -> PList[U]:
        return Empty()

    def foldr(self, func: BinaryFunc[T, U, U], base: U) -> U:
        return base

    def foldl(self, func: BinaryFunc[T, U, U], base: U) -> U:
        return base

    def all_satisfy(self, pred: UnaryFunc[T, bool]) -> bool:
        return True


@dataclass(frozen=True, eq=False, repr=False)
class Cons(PList[T]):
    """A non-empty list: ``first`` followed by the list ``rest``.

    Parameters
    ----------
    first : T
        Head element
    rest : PList
        Remaining elements. A builtin list or tuple is converted to a
        PList; any other type raises ValidationError

    """

    first: T
    rest: PList[T]

    def __post_init__(self) -> None:
        if isinstance(self.rest, PList):
            return
        if isinstance(self.rest, (list, tuple)):
            object.__setattr__(self, "rest", _build(list(self.rest)))
            return
        raise ValidationError(
            f"Cons rest must be a PList, list or tuple, not {type(self.rest).__name__}",
            parameter_name="rest",
            parameter_value=self.rest,
        )

    def map(self, func: UnaryFunc[T, U]) -> PList[U]:
        # Apply in list order, then rebuild from the right.
        return _build([func(item) for item in self])

    def foldr(self, func: BinaryFunc[T, U, U], base: U) -> U:
        result = base
        for item in reversed(list(self)):
            result = func(item, result)
        return result

    def foldl(self, func: BinaryFunc[T, U, U], base: U) -> U:
        result = base
        for item in self:
            result = func(item, result)
        return result

    def all_satisfy(self, pred: UnaryFunc[T, bool]) -> bool:
        for item in self:
            if not pred(item):
                return False
        return True


def _build(items: list[Any]) -> PList[Any]:
    result: PList[Any] = Empty()
    for item in reversed(items):
        result = Cons(item, result)
    return result


def from_iterable(items: Iterable[T]) -> PList[T]:
    """Build a persistent list holding ``items`` in iteration order.

    Parameters
    ----------
    items : iterable
        Source elements; consumed once

    Returns
    -------
    PList
        ``Empty()`` for an empty iterable, otherwise a chain of ``Cons`` cells

    """
    return _build(list(items))


__all__ = [
    "Cons",
    "Empty",
    "PList",
    "from_iterable",
]
