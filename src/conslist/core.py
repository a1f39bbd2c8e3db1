"""Immutable singly-linked lists with structural sharing.

A list is either a ``Node`` holding one value and a reference to the rest
of the list, or ``Empty``. Prepending never copies: the new node simply
references the list it was built on, so any number of lists can share a
common suffix.

All traversals are iterative, so list length is not bounded by the
interpreter's recursion limit.
"""

from __future__ import annotations

import operator
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Generic, TypeVar

from conslist.iterator import ListIterator

if TYPE_CHECKING:
    from typing import TextIO

T = TypeVar("T")


@dataclass(frozen=True, eq=False, repr=False)
class PersistentList(Generic[T]):
    """Base class for list values.

    Concrete values are always ``Node`` or ``Empty``; the base class itself
    cannot be instantiated.
    """

    def __new__(cls, *args: Any, **kwargs: Any) -> PersistentList[T]:
        if cls is PersistentList:
            msg = "PersistentList is abstract; use Node, Empty or list_of()"
            raise TypeError(msg)
        return super().__new__(cls)

    @staticmethod
    def new() -> Empty[Any]:
        """Return the empty list."""
        return EMPTY

    def prepend(self, value: T) -> Node[T]:
        """Return a new list with ``value`` in front of this one.

        This list is referenced as the new node's successor, not copied.
        """
        return Node(value, self)

    def is_empty(self) -> bool:
        return isinstance(self, Empty)

    def iter(self, trace: TextIO | None = None) -> ListIterator[T]:
        """Return a fresh front-to-back iterator.

        Args:
            trace: Optional stream receiving one line per element visited.
        """
        return ListIterator(self, trace)

    def length(self, trace: TextIO | None = None) -> int:
        """Count the nodes before the end of the list."""
        count = 0
        for _ in self.iter(trace):
            count += 1
        return count

    def contains(self, value: object, trace: TextIO | None = None) -> bool:
        """Check whether some element compares equal to ``value``.

        Stops at the first match.
        """
        return any(item == value for item in self.iter(trace))

    def front(self) -> T | None:
        """Return the first value, or None for the empty list."""
        match self:
            case Node(value=value):
                return value
            case _:
                return None

    def back(self) -> T | None:
        """Return the second value, or the only value of a one-node list.

        Only the immediate successor is inspected, so for any list longer
        than two this is the second element, not the last one. Use
        ``last()`` for the final element.
        """
        match self:
            case Node(next=Node(value=second)):
                return second
            case Node(value=first):
                return first
            case _:
                return None

    def last(self, trace: TextIO | None = None) -> T | None:
        """Return the final value, or None for the empty list."""
        result = None
        for item in self.iter(trace):
            result = item
        return result

    def tail(self) -> PersistentList[T] | None:
        """Return the list without its first node, or None when empty."""
        match self:
            case Node(next=rest):
                return rest
            case _:
                return None

    def skip(self, n: int) -> PersistentList[T] | None:
        """Return the sublist starting ``n`` nodes from the front.

        Returns None when that position is past the last node, including
        ``skip(0)`` on the empty list.
        """
        if n < 0:
            return None
        current: PersistentList[T] = self
        for _ in range(n):
            match current:
                case Node(next=rest):
                    current = rest
                case _:
                    return None
        if current.is_empty():
            return None
        return current

    def get(self, n: int) -> T | None:
        """Return the value at index ``n``, or None when out of range."""
        sub = self.skip(n)
        if sub is None:
            return None
        return sub.front()

    # =========================================================================
    # Python protocols
    # =========================================================================

    def __iter__(self) -> ListIterator[T]:
        return self.iter()

    def __len__(self) -> int:
        return self.length()

    def __bool__(self) -> bool:
        return not self.is_empty()

    def __contains__(self, value: object) -> bool:
        return self.contains(value)

    def __getitem__(self, index: int) -> T:
        sub = self.skip(index)
        if sub is None:
            msg = "list index out of range"
            raise IndexError(msg)
        return sub.front()  # type: ignore[return-value]

    def __repr__(self) -> str:
        return "list_of({})".format(", ".join(repr(item) for item in self))

    def __hash__(self) -> int:
        return hash(tuple(self))

    # =========================================================================
    # Comparison
    # =========================================================================

    def _mismatch(
        self, other: PersistentList[Any]
    ) -> tuple[PersistentList[Any], PersistentList[Any]]:
        """Advance both lists past their common prefix.

        Stops at the first pair of unequal values, at the end of either
        list, or at a node both lists share.
        """
        left: PersistentList[Any] = self
        right: PersistentList[Any] = other
        while left is not right:
            match (left, right):
                case (Node(value=a, next=left_rest), Node(value=b, next=right_rest)):
                    if a != b:
                        break
                    left, right = left_rest, right_rest
                case _:
                    break
        return left, right

    def _order(
        self, other: PersistentList[Any], op: Callable[[Any, Any], bool]
    ) -> bool:
        """Lexicographic comparison; Empty sorts before any Node.

        Like tuple comparison, ``op`` is applied to the first unequal pair
        of values, so elements only need to support that one operator.
        """
        left, right = self._mismatch(other)
        match (left, right):
            case (Node(value=a), Node(value=b)) if left is not right:
                return op(a, b)
            case _:
                return op(not left.is_empty(), not right.is_empty())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PersistentList):
            return NotImplemented
        left, right = self._mismatch(other)
        return left is right or (left.is_empty() and right.is_empty())

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, PersistentList):
            return NotImplemented
        return self._order(other, operator.lt)

    def __le__(self, other: object) -> bool:
        if not isinstance(other, PersistentList):
            return NotImplemented
        return self._order(other, operator.le)

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, PersistentList):
            return NotImplemented
        return self._order(other, operator.gt)

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, PersistentList):
            return NotImplemented
        return self._order(other, operator.ge)


@dataclass(frozen=True, eq=False, repr=False)
class Node(PersistentList[T]):
    """A non-empty list cell: one value plus the rest of the list."""

    value: T
    next: PersistentList[T]


@dataclass(frozen=True, eq=False, repr=False)
class Empty(PersistentList[T]):
    """The terminal, zero-element list."""


# Singleton instance for the empty list
EMPTY: Empty[Any] = Empty()


def list_of(*values: T, tail: PersistentList[T] = EMPTY) -> PersistentList[T]:
    """Build a list whose front is the first argument.

    Values are prepended right to left, so the last argument becomes the
    node just before ``tail``.

    Args:
        *values: Elements, front to back.
        tail: Existing list to share as the suffix (default: empty).

    Returns:
        The new list, or ``tail`` itself when no values are given.
    """
    result = tail
    for value in reversed(values):
        result = result.prepend(value)
    return result


def from_iterable(values: Iterable[T]) -> PersistentList[T]:
    """Build a list from any iterable, first item at the front."""
    return list_of(*values)


__all__ = [
    "EMPTY",
    "Empty",
    "Node",
    "PersistentList",
    "from_iterable",
    "list_of",
]
