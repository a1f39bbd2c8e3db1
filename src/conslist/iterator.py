"""Forward cursor over a persistent list."""

from __future__ import annotations

from typing import TYPE_CHECKING, Generic, TypeVar, cast

if TYPE_CHECKING:
    from typing import TextIO

    from conslist.core import Node, PersistentList

T = TypeVar("T")


class ListIterator(Generic[T]):
    """Walks a list front to back without modifying it.

    Once the end is reached, every further call raises StopIteration.
    A new iterator is obtained from the list with ``iter()``.
    """

    def __init__(self, start: PersistentList[T], trace: TextIO | None = None) -> None:
        """Initialize the iterator.

        Args:
            start: List to walk.
            trace: Debug stream; when set, one line is written per advance.
        """
        self.current = start
        self.trace = trace

    def __iter__(self) -> ListIterator[T]:
        return self

    def __next__(self) -> T:
        if self.current.is_empty():
            raise StopIteration
        node = cast("Node[T]", self.current)
        self.current = node.next
        if self.trace is not None:
            self.trace.write(f"next: {node.value!r}\n")
        return node.value
