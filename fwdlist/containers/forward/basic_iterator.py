from __future__ import annotations
from typing import Any, Generic, Self, TypeVar, cast

from fwdlist.containers.forward.node import Node, SentinelNode

T = TypeVar("T")


class ConstIterator(Generic[T]):
    """
    Read-only forward cursor over the nodes of a `SingleLinkedList`.

    A cursor refers to a real node, to the list's sentinel (as returned by
    `before_begin()`), or to nothing at all (the end cursor). Cursors compare equal when
    they refer to the same node, regardless of their mutability, so every end cursor is
    equal to every other end cursor.

    Dereferencing (`value`) or advancing a cursor that does not refer to a real node is a
    contract violation and is trapped with `assert`.

    A cursor stays valid until the node it refers to is removed from its list. `swap()`
    moves the nodes, and therefore the cursors pointing at them, to the other list.

    Attributes:
        _node (Node[T] | None):
            The referenced node, or None for the end cursor.
    """

    __slots__ = ("_node",)

    _node: Node[T] | None

    def __init__(self, other: ConstIterator[T] | None = None):
        """
        Creates an end cursor, or a copy of `other`.

        Args:
            other (ConstIterator[T] | None):
                Cursor to copy. Both read-only and read-write cursors are accepted.

        Raises:
            TypeError: If `other` is not a cursor.
        """
        if other is None:
            self._node = None
        elif isinstance(other, ConstIterator):
            self._node = cast(ConstIterator[T], other)._node
        else:
            raise TypeError(f"cannot copy a cursor from {type(other).__name__}")

    @classmethod
    def _from_node(cls, node: Node[T] | None) -> Self:
        it = cls.__new__(cls)
        it._node = node
        return it

    def _deref(self) -> Node[T]:
        node = self._node
        assert node is not None, "dereferencing an end iterator"
        assert not isinstance(node, SentinelNode), "dereferencing a before_begin iterator"
        return node

    @property
    def value(self) -> T:
        """
        The element the cursor refers to. The stored object itself is returned, so
        attribute access on it reaches the element in place.
        """
        return self._deref().value

    def increment(self) -> Self:
        """
        Advances to the successor node (pre-increment).

        Advancing past the last real node yields the end cursor.

        Returns:
            Self:
                This cursor, after it has moved.
        """
        node = self._node
        assert node is not None, "incrementing an end iterator"
        self._node = node.next_node
        return self

    def post_increment(self) -> Self:
        """
        Advances to the successor node and returns a copy of the prior position.

        Returns:
            Self:
                A new cursor referring to the node this cursor referred to before the call.
        """
        prior = self.copy()
        self.increment()
        return prior

    def copy(self) -> Self:
        return type(self)._from_node(self._node)

    __copy__ = copy

    def __eq__(self, other: object) -> bool:
        if isinstance(other, ConstIterator):
            return self._node is cast(ConstIterator[T], other)._node
        return NotImplemented

    def __ne__(self, other: object) -> bool:
        if isinstance(other, ConstIterator):
            return self._node is not cast(ConstIterator[T], other)._node
        return NotImplemented

    # cursors move in place, so they cannot be dict keys
    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        name = type(self).__name__
        if self._node is None:
            return f"{name}(end)"
        if isinstance(self._node, SentinelNode):
            return f"{name}(before_begin)"
        return f"{name}({self._node.value!r})"


class Iterator(ConstIterator[T]):
    """
    Read-write forward cursor. Assigning to `value` replaces the element in place.

    An `Iterator` is a `ConstIterator`, so it is accepted wherever a read-only cursor is;
    building an `Iterator` from a `ConstIterator` raises TypeError.
    """

    __slots__ = ()

    def __init__(self, other: Iterator[T] | None = None):
        if other is not None and not isinstance(other, Iterator):
            raise TypeError(f"cannot convert {type(other).__name__} to Iterator")
        super().__init__(other)

    @ConstIterator.value.setter
    def value(self, value: T) -> None:
        self._deref().value = value


def check_position(pos: object) -> ConstIterator[Any]:
    """
    Returns `pos` if it can be used as a list position.

    Both cursor kinds are accepted. Whether the cursor belongs to the list it is passed to
    is not checked.

    Raises:
        TypeError: If `pos` is not a cursor.
    """
    if not isinstance(pos, ConstIterator):
        raise TypeError(f"position must be a cursor, got {type(pos).__name__}")
    return cast(ConstIterator[Any], pos)
