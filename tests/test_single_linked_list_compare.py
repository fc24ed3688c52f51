import itertools
import pytest
from fwdlist.containers.forward.single_linked_list import (
    SingleLinkedList,
    equal,
    lexicographical_compare,
)


class LessOnly:
    """
    Element type ordered by `<` only; equality falls back to identity.
    """

    def __init__(self, key: int):
        self.key = key

    def __lt__(self, other: "LessOnly") -> bool:
        return self.key < other.key


@pytest.fixture(name="samples")
def samples_impl() -> list[SingleLinkedList[int]]:
    return [
        SingleLinkedList(values)
        for values in ([], [0], [1], [1, 2], [1, 2, 0], [1, 2, 3], [1, 2, 4], [2], [1, 3])
    ]


def test_equal_lists() -> None:
    assert SingleLinkedList([1, 2, 3]) == SingleLinkedList([1, 2, 3])
    assert equal(SingleLinkedList([1, 2, 3]), SingleLinkedList([1, 2, 3]))
    assert not SingleLinkedList([1, 2, 3]) != SingleLinkedList([1, 2, 3])  # pylint: disable=unneeded-not


def test_unequal_lists() -> None:
    assert SingleLinkedList([1, 2, 3]) != SingleLinkedList([1, 2, 4])
    assert SingleLinkedList([1, 2]) != SingleLinkedList([1, 2, 3])
    assert not equal(SingleLinkedList([1, 2]), SingleLinkedList([1, 2, 3]))


def test_lexicographic_order() -> None:
    assert SingleLinkedList([1, 2, 3]) < SingleLinkedList([1, 2, 4])
    assert SingleLinkedList([1, 2]) < SingleLinkedList([1, 2, 0])
    assert SingleLinkedList([]) < SingleLinkedList([0])
    assert lexicographical_compare(SingleLinkedList([1, 2]), SingleLinkedList([1, 3]))
    assert not lexicographical_compare(SingleLinkedList([2]), SingleLinkedList([1, 3]))


def test_empty_lists() -> None:
    a: SingleLinkedList[int] = SingleLinkedList()
    b: SingleLinkedList[int] = SingleLinkedList()
    assert a == b
    assert not a < b
    assert not b < a
    assert a <= b
    assert a >= b


def test_derived_operators() -> None:
    small = SingleLinkedList([1, 2])
    large = SingleLinkedList([1, 3])
    assert small <= large
    assert small <= SingleLinkedList([1, 2])
    assert large > small
    assert large >= small
    assert large >= SingleLinkedList([1, 3])
    assert not small > large
    assert not small >= large


def test_trichotomy(samples: list[SingleLinkedList[int]]) -> None:
    for a, b in itertools.product(samples, repeat=2):
        outcomes = [a < b, b < a, a == b]
        assert outcomes.count(True) == 1, (a, b)
        assert (a == b) == (list(a) == list(b))
        assert (a < b) == (list(a) < list(b))


def test_derived_operators_agree(samples: list[SingleLinkedList[int]]) -> None:
    for a, b in itertools.product(samples, repeat=2):
        assert (a != b) == (not a == b)  # pylint: disable=unneeded-not
        assert (a <= b) == (a < b or a == b)
        assert (a > b) == (b < a)
        assert (a >= b) == (not a < b)  # pylint: disable=unneeded-not


def test_order_uses_less_than_only() -> None:
    a = SingleLinkedList([LessOnly(1), LessOnly(2)])
    b = SingleLinkedList([LessOnly(1), LessOnly(3)])
    assert a < b
    assert not b < a
    assert b > a


def test_compare_with_other_types() -> None:
    lst = SingleLinkedList([1, 2])
    assert lst != [1, 2]
    assert lst != (1, 2)
    assert not lst == [1, 2]  # pylint: disable=unneeded-not
    with pytest.raises(TypeError):
        _ = lst < [1, 2]  # type: ignore[operator]
