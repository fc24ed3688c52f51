from __future__ import annotations
from typing import Generic, TypeVar

T = TypeVar("T")


class Node(Generic[T]):
    """
    A single link cell of a `SingleLinkedList`.

    Each node exclusively owns the node referenced by `next_node`; a node is
    reachable from exactly one predecessor (another node or the list's sentinel).

    Attributes:
        value (T):
            The stored element.
        next_node (Node[T] | None):
            The successor, or None at the end of the chain.
    """

    __slots__ = ("value", "next_node")

    value: T
    next_node: Node[T] | None

    def __init__(self, value: T, next_node: Node[T] | None = None):
        self.value = value
        self.next_node = next_node


class SentinelNode(Node[T]):
    """
    Head node embedded in a list. Only its `next_node` link is meaningful; the
    `value` slot is never assigned, so reading it raises AttributeError.
    """

    __slots__ = ()

    def __init__(self) -> None:  # pylint: disable=super-init-not-called
        self.next_node = None
