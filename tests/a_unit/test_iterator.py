"""Unit tests for conslist.iterator."""

from __future__ import annotations

from io import StringIO

import pytest

from conslist.core import EMPTY, list_of
from conslist.iterator import ListIterator


class TestListIterator:
    """Tests for front-to-back traversal."""

    def test_yields_front_to_back(self) -> None:
        """Values come out front first."""
        it = list_of(1, 2, 3).iter()
        assert next(it) == 1
        assert next(it) == 2
        assert next(it) == 3

    def test_stays_exhausted(self) -> None:
        """An exhausted iterator keeps raising StopIteration."""
        it = list_of(1).iter()
        assert next(it) == 1
        with pytest.raises(StopIteration):
            next(it)
        with pytest.raises(StopIteration):
            next(it)

    def test_empty(self) -> None:
        """The empty list yields nothing."""
        assert list(EMPTY.iter()) == []

    def test_fresh_iterator_each_call(self) -> None:
        """Each iter() call starts a new, independent cursor."""
        lst = list_of("a", "b")
        first = lst.iter()
        next(first)
        second = lst.iter()
        assert first is not second
        assert list(second) == ["a", "b"]
        assert list(first) == ["b"]

    def test_iter_protocol(self) -> None:
        """iter() on a list returns a ListIterator that is its own iterator."""
        lst = list_of(1, 2)
        it = iter(lst)
        assert isinstance(it, ListIterator)
        assert iter(it) is it

    def test_does_not_modify_list(self) -> None:
        """Iterating leaves the list intact."""
        lst = list_of(1, 2, 3)
        list(lst)
        assert lst == list_of(1, 2, 3)


class TestTrace:
    """Tests for the debug trace stream."""

    def test_no_trace_by_default(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Nothing is written unless a trace stream is given."""
        list(list_of(1, 2))
        captured = capsys.readouterr()
        assert captured.out == ""
        assert captured.err == ""

    def test_trace_line_per_advance(self) -> None:
        """One trace line is written per element."""
        stream = StringIO()
        items = list(list_of(1, "two").iter(trace=stream))
        assert items == [1, "two"]
        assert stream.getvalue() == "next: 1\nnext: 'two'\n"

    def test_trace_stops_at_end(self) -> None:
        """Reaching the end writes no trace line."""
        stream = StringIO()
        it = ListIterator(list_of(5), trace=stream)
        list(it)
        with pytest.raises(StopIteration):
            next(it)
        assert stream.getvalue() == "next: 5\n"
