"""conslist: immutable singly-linked lists with structural sharing."""

from __future__ import annotations

from conslist.cli import main
from conslist.core import EMPTY, Empty, Node, PersistentList, from_iterable, list_of
from conslist.iterator import ListIterator

__all__ = [
    "EMPTY",
    "Empty",
    "ListIterator",
    "Node",
    "PersistentList",
    "from_iterable",
    "list_of",
    "main",
]
