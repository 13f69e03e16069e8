"""Unit tests for OrderedSet."""

import pytest
from dirview.core.ordered_set import OrderedSet
from dirview.exceptions import DuplicateElementError


def _numbers(*items: int) -> OrderedSet[int]:
    """Build an OrderedSet by pushing items one at a time."""
    ordered_set: OrderedSet[int] = OrderedSet()
    for item in items:
        ordered_set.push(item)
    return ordered_set


class TestConstruction:
    """Tests for building OrderedSet instances."""

    def test_empty(self) -> None:
        """A new set without arguments is empty."""
        ordered_set: OrderedSet[str] = OrderedSet()
        assert len(ordered_set) == 0
        assert ordered_set.to_list() == []

    def test_from_sequence_preserves_order(self) -> None:
        """Constructing from a sequence keeps its order verbatim."""
        ordered_set = OrderedSet(["a", "b", "c"])
        assert ordered_set.to_list() == ["a", "b", "c"]

    def test_from_sequence_with_duplicates_fails(self) -> None:
        """Constructing from a sequence with a repeated value raises."""
        with pytest.raises(DuplicateElementError) as exc_info:
            OrderedSet(["a", "b", "c", "a"])
        assert exc_info.value.item == "a"

    def test_duplicate_error_is_value_error(self) -> None:
        """DuplicateElementError can be caught as ValueError."""
        with pytest.raises(ValueError):
            OrderedSet([1, 1])


class TestPush:
    """Tests for push()."""

    def test_push_appends(self) -> None:
        """push() adds elements at the end."""
        assert _numbers(1, 2).to_list() == [1, 2]

    def test_push_duplicate_fails(self) -> None:
        """push() refuses an element already present."""
        ordered_set = OrderedSet(["Dog", "Cat"])
        with pytest.raises(DuplicateElementError):
            ordered_set.push("Dog")

    def test_failed_push_leaves_set_unchanged(self) -> None:
        """A rejected push does not alter the set."""
        ordered_set = _numbers(1, 2)
        with pytest.raises(DuplicateElementError):
            ordered_set.push(1)
        assert ordered_set.to_list() == [1, 2]


class TestSetAlgebra:
    """Tests for union, intersection, difference and disjointness."""

    def test_intersection_keeps_receiver_order(self) -> None:
        """intersection() returns shared elements in the receiver's order."""
        left = _numbers(1, 2, 9, 3)
        right = _numbers(10, 9, 2, 11)
        assert left.intersection(right).to_list() == [2, 9]

    def test_difference(self) -> None:
        """difference() returns the receiver's elements missing from other."""
        left = _numbers(1, 2, 9, 3)
        right = _numbers(10, 2, 9, 11)
        assert left.difference(right).to_list() == [1, 3]

    def test_union_appends_other_exclusive_elements(self) -> None:
        """union() keeps receiver order, then other's new elements in other's order."""
        left = _numbers(1, 2, 9, 3)
        right = _numbers(11, 2, 10, 9)
        assert left.union(right).to_list() == [1, 2, 9, 3, 11, 10]

    def test_operators(self) -> None:
        """The |, & and - operators map to union, intersection and difference."""
        left = _numbers(1, 2, 3)
        right = _numbers(3, 4)
        assert (left | right).to_list() == [1, 2, 3, 4]
        assert (left & right).to_list() == [3]
        assert (left - right).to_list() == [1, 2]

    def test_operations_do_not_mutate_operands(self) -> None:
        """Set algebra leaves both operands untouched."""
        left = _numbers(1, 2, 3)
        right = _numbers(3, 4)
        left.union(right)
        left.intersection(right)
        left.difference(right)
        assert left.to_list() == [1, 2, 3]
        assert right.to_list() == [3, 4]

    def test_is_disjoint_false(self) -> None:
        """Sets sharing an element are not disjoint."""
        assert _numbers(1, 2, 9, 3).is_disjoint(_numbers(10, 2, 9, 11)) is False

    def test_is_disjoint_true(self) -> None:
        """Sets with no shared element are disjoint."""
        assert _numbers(1, 2).is_disjoint(_numbers(3, 4)) is True

    def test_empty_sets_are_disjoint(self) -> None:
        """Two empty sets are disjoint."""
        assert OrderedSet().is_disjoint(OrderedSet()) is True


class TestReverse:
    """Tests for reverse()."""

    def test_reverse_order(self) -> None:
        """reverse() returns the elements in exactly reversed order."""
        assert _numbers(1, 2, 9, 3).reverse().to_list() == [3, 9, 2, 1]

    def test_reverse_does_not_mutate_receiver(self) -> None:
        """reverse() leaves the receiver in its original order."""
        ordered_set = _numbers(1, 2, 9, 3)
        ordered_set.reverse()
        assert ordered_set.to_list() == [1, 2, 9, 3]

    def test_reverse_is_involution(self) -> None:
        """Reversing twice restores the original order."""
        ordered_set = _numbers(5, 1, 4)
        assert ordered_set.reverse().reverse() == ordered_set

    def test_builtin_reversed(self) -> None:
        """reversed() iterates from last to first."""
        assert list(reversed(_numbers(1, 2, 3))) == [3, 2, 1]


class TestCopies:
    """Tests for to_list() and copy() independence."""

    def test_to_list_is_independent(self) -> None:
        """Mutating the returned list does not affect the set."""
        ordered_set = _numbers(1, 2)
        items = ordered_set.to_list()
        items.append(3)
        assert ordered_set.to_list() == [1, 2]

    def test_copy_is_independent(self) -> None:
        """Pushing onto a copy does not affect the original."""
        original = _numbers(1, 2)
        duplicate = original.copy()
        duplicate.push(3)
        assert original.to_list() == [1, 2]
        assert duplicate.to_list() == [1, 2, 3]


class TestProtocol:
    """Tests for container protocol methods."""

    def test_contains(self) -> None:
        """Membership checks use element equality."""
        ordered_set = OrderedSet(["a", "b"])
        assert "a" in ordered_set
        assert "z" not in ordered_set

    def test_equality_is_order_sensitive(self) -> None:
        """Sets with the same elements in different order are not equal."""
        assert _numbers(1, 2) == _numbers(1, 2)
        assert _numbers(1, 2) != _numbers(2, 1)

    def test_equality_with_other_type(self) -> None:
        """Comparison with a non-OrderedSet is never equal."""
        assert _numbers(1, 2) != [1, 2]

    def test_repr(self) -> None:
        """repr() shows the elements in order."""
        assert repr(_numbers(1, 2)) == "OrderedSet([1, 2])"
