from __future__ import annotations
from collections.abc import Collection, Generator, Iterable
from copy import deepcopy
from typing import Any, Generic, Self, TypeVar, cast

from fwdlist.containers.forward.basic_iterator import ConstIterator, Iterator, check_position
from fwdlist.containers.forward.node import Node, SentinelNode

# pylint: disable=protected-access
# pyright: reportPrivateUsage=false

T = TypeVar("T")


class SingleLinkedList(Collection[T], Generic[T]):
    """
    A singly-linked list headed by an embedded sentinel node.

    Elements are reached through forward cursors (`Iterator` / `ConstIterator`). Insertion
    and removal are anchored at the predecessor of the affected position
    (`insert_after` / `erase_after`); `before_begin()` returns a cursor on the sentinel so
    the head can be changed through the same two calls.

    Every constructor that copies elements builds a temporary list to completion and then
    swaps it in, so a failure part way through leaves nothing behind. `assign` uses the same
    scheme and leaves the target untouched on failure.

    Precondition violations on cursors (end cursor used as a position, `erase_after` with no
    successor) are checked with `assert`. `pop_front` on an empty list does nothing.

    The list is not thread-safe.

    Attributes:
        _head (SentinelNode[T]):
            The sentinel. Its `next_node` is the first element's node. It is created with the
            list and never replaced, so `before_begin()` cursors always refer to this list.
        _size (int):
            The number of nodes reachable from `_head`.
    """

    _head: SentinelNode[T]
    _size: int

    def __init__(self, values: Iterable[T] | None = None):
        """
        Creates an empty list, or a list holding `values` in iteration order.

        Passing another `SingleLinkedList` makes a copy of it. Elements are shared, not
        copied; use `copy.deepcopy` to copy them too.

        Args:
            values (Iterable[T] | None):
                Finite iterable of initial elements.
        """
        self._head = SentinelNode()
        self._size = 0
        if values is None:
            return

        temp: SingleLinkedList[T] = SingleLinkedList()
        current = temp.before_begin()
        for value in values:
            current = temp.insert_after(current, value)
        self.swap(temp)

    def assign(self, other: Iterable[T]) -> Self:
        """
        Replaces the contents with the elements of `other` (copy-and-swap).

        Assigning a list to itself leaves it unchanged. If building the copy fails, the
        exception propagates and this list keeps its previous contents.

        Args:
            other (Iterable[T]):
                Source of the new elements, typically another `SingleLinkedList`.

        Returns:
            Self:
                This list.
        """
        temp: SingleLinkedList[T] = SingleLinkedList(other)
        self.swap(temp)
        return self

    def swap(self, other: SingleLinkedList[T]) -> None:
        """
        Exchanges the contents of two lists in O(1).

        Cursors to elements keep referring to the same elements, which now belong to the
        other list. `before_begin()` cursors are not exchanged: they keep referring to the
        sentinel of the list that produced them.

        Args:
            other (SingleLinkedList[T]):
                The list to exchange contents with.
        """
        self._head.next_node, other._head.next_node = other._head.next_node, self._head.next_node
        self._size, other._size = other._size, self._size

    def size(self) -> int:
        return self._size

    def empty(self) -> bool:
        return self._size == 0

    def __len__(self) -> int:
        return self._size

    def push_front(self, value: T) -> None:
        self._head.next_node = Node(value, self._head.next_node)
        self._size += 1

    def pop_front(self) -> None:
        """
        Removes the first element. Does nothing on an empty list.
        """
        first = self._head.next_node
        if first is None:
            return
        self._head.next_node = first.next_node
        first.next_node = None
        self._size -= 1

    def insert_after(self, pos: ConstIterator[T], value: T) -> Iterator[T]:
        """
        Inserts `value` right after the position `pos`.

        Args:
            pos (ConstIterator[T]):
                Cursor on an element of this list, or `before_begin()` to insert at the
                head. Must not be the end cursor.
            value (T):
                The element to insert.

        Returns:
            Iterator[T]:
                Cursor on the inserted element.

        Raises:
            TypeError: If `pos` is not a cursor.
        """
        node = check_position(pos)._node
        assert node is not None, "insert_after an end iterator"
        # the list is only touched once the new node exists
        new_node = Node(value, node.next_node)
        node.next_node = new_node
        self._size += 1
        return Iterator._from_node(new_node)

    def erase_after(self, pos: ConstIterator[T]) -> Iterator[T]:
        """
        Removes the element right after the position `pos`.

        Only cursors on the removed element are invalidated.

        Args:
            pos (ConstIterator[T]):
                Cursor on an element of this list, or `before_begin()` to remove the head.
                It must have a successor.

        Returns:
            Iterator[T]:
                Cursor on the element that followed the removed one, or the end cursor.

        Raises:
            TypeError: If `pos` is not a cursor.
        """
        node = check_position(pos)._node
        assert node is not None, "erase_after an end iterator"
        erased = node.next_node
        assert erased is not None, "erase_after the last element"
        node.next_node = erased.next_node
        erased.next_node = None
        self._size -= 1
        return Iterator._from_node(node.next_node)

    def clear(self) -> None:
        # unlink one node at a time so long chains are released without deep recursion
        while (first := self._head.next_node) is not None:
            self._head.next_node = first.next_node
            first.next_node = None
        self._size = 0

    def begin(self) -> Iterator[T]:
        return Iterator._from_node(self._head.next_node)

    def end(self) -> Iterator[T]:
        return Iterator._from_node(None)

    def cbegin(self) -> ConstIterator[T]:
        return ConstIterator._from_node(self._head.next_node)

    def cend(self) -> ConstIterator[T]:
        return ConstIterator._from_node(None)

    def before_begin(self) -> Iterator[T]:
        """
        Returns a cursor on the sentinel. It must not be dereferenced; incrementing it once
        gives `begin()`. It is the position to pass to `insert_after` / `erase_after` to
        change the head of the list.
        """
        return Iterator._from_node(self._head)

    def cbefore_begin(self) -> ConstIterator[T]:
        return ConstIterator._from_node(self._head)

    def __iter__(self) -> Generator[T, None, None]:
        node = self._head.next_node
        while node is not None:
            yield node.value
            node = node.next_node

    def __contains__(self, item: object) -> bool:
        return any(value == item for value in self)

    def copy(self) -> Self:
        return type(self)(self)

    __copy__ = copy

    def __deepcopy__(self, memo: dict[int, Any]) -> Self:
        result = type(self)()
        memo[id(self)] = result
        result.assign(deepcopy(value, memo) for value in self)
        return result

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SingleLinkedList):
            return NotImplemented
        return equal(self, cast(SingleLinkedList[T], other))

    def __ne__(self, other: object) -> bool:
        if not isinstance(other, SingleLinkedList):
            return NotImplemented
        return not equal(self, cast(SingleLinkedList[T], other))

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, SingleLinkedList):
            return NotImplemented
        return lexicographical_compare(self, cast(SingleLinkedList[T], other))

    def __le__(self, other: object) -> bool:
        if not isinstance(other, SingleLinkedList):
            return NotImplemented
        rhs = cast(SingleLinkedList[T], other)
        return lexicographical_compare(self, rhs) or equal(self, rhs)

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, SingleLinkedList):
            return NotImplemented
        return lexicographical_compare(cast(SingleLinkedList[T], other), self)

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, SingleLinkedList):
            return NotImplemented
        return not lexicographical_compare(self, cast(SingleLinkedList[T], other))

    __hash__ = None  # type: ignore[assignment]


def swap(lhs: SingleLinkedList[T], rhs: SingleLinkedList[T]) -> None:
    lhs.swap(rhs)


def equal(lhs: SingleLinkedList[T], rhs: SingleLinkedList[T]) -> bool:
    """
    Returns True if both lists have the same size and equal elements in the same order.
    """
    if lhs.size() != rhs.size():
        return False
    return all(a == b for a, b in zip(lhs, rhs))


def lexicographical_compare(lhs: SingleLinkedList[T], rhs: SingleLinkedList[T]) -> bool:
    """
    Returns True if `lhs` orders strictly before `rhs`.

    Elements are compared with `<` only. The first position where either element is less
    than the other decides; otherwise the shorter list orders first, so a proper prefix is
    less than its extension and an empty list is less than any non-empty one.
    """
    first1, last1 = lhs.cbegin(), lhs.cend()
    first2, last2 = rhs.cbegin(), rhs.cend()
    while first1 != last1:
        if first2 == last2:
            return False
        if first1.value < first2.value:  # type: ignore[operator]
            return True
        if first2.value < first1.value:  # type: ignore[operator]
            return False
        first1.increment()
        first2.increment()
    return first2 != last2
