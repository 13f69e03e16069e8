"""Insertion-ordered set with strict uniqueness.

OrderedSet keeps elements in first-insertion order and refuses to hold
the same element twice. Unlike the builtin set, adding an element that
is already present is an error rather than a no-op.

Elements are stored as keys of a dict, which preserves insertion order
and gives constant-time membership checks.
"""

from collections.abc import Hashable, Iterable, Iterator
from typing import Generic, TypeVar

from dirview.exceptions import DuplicateElementError

T = TypeVar("T", bound=Hashable)


class OrderedSet(Generic[T]):
    """Ordered, duplicate-rejecting collection with set algebra.

    All set operations return new instances and leave both operands
    untouched. The only mutating operation is push().

    Args:
        items: Optional initial elements, in order.

    Raises:
        DuplicateElementError: If items contains the same element twice.
    """

    __slots__ = ("_items",)

    def __init__(self, items: Iterable[T] | None = None) -> None:
        self._items: dict[T, None] = {}
        if items is not None:
            for item in items:
                self.push(item)

    @classmethod
    def _from_unique(cls, items: Iterable[T]) -> "OrderedSet[T]":
        """Build a set from elements already known to be unique."""
        new_set: OrderedSet[T] = cls()
        new_set._items = dict.fromkeys(items)
        return new_set

    def push(self, item: T) -> None:
        """Append an element at the end of the set.

        Args:
            item: Element to append.

        Raises:
            DuplicateElementError: If the element is already present.
        """
        if item in self._items:
            raise DuplicateElementError(item)
        self._items[item] = None

    def union(self, other: "OrderedSet[T]") -> "OrderedSet[T]":
        """Return the receiver's elements followed by other's exclusive elements.

        Elements contributed by each operand keep that operand's order.
        """
        return self._from_unique([*self._items, *(i for i in other if i not in self._items)])

    def intersection(self, other: "OrderedSet[T]") -> "OrderedSet[T]":
        """Return the receiver's elements that are also in other, in receiver order."""
        return self._from_unique(i for i in self._items if i in other)

    def difference(self, other: "OrderedSet[T]") -> "OrderedSet[T]":
        """Return the receiver's elements that are not in other, in receiver order."""
        return self._from_unique(i for i in self._items if i not in other)

    def is_disjoint(self, other: "OrderedSet[T]") -> bool:
        """Return True if the two sets share no element."""
        return not self.intersection(other)

    def reverse(self) -> "OrderedSet[T]":
        """Return a new set holding the elements in reverse order.

        The receiver keeps its current order.
        """
        return self._from_unique(reversed(self._items))

    def copy(self) -> "OrderedSet[T]":
        return self._from_unique(self._items)

    def to_list(self) -> list[T]:
        """Return a fresh list of the elements in set order."""
        return list(self._items)

    def __or__(self, other: "OrderedSet[T]") -> "OrderedSet[T]":
        return self.union(other)

    def __and__(self, other: "OrderedSet[T]") -> "OrderedSet[T]":
        return self.intersection(other)

    def __sub__(self, other: "OrderedSet[T]") -> "OrderedSet[T]":
        return self.difference(other)

    def __contains__(self, item: object) -> bool:
        return item in self._items

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __reversed__(self) -> Iterator[T]:
        return reversed(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __eq__(self, other: object) -> bool:
        # Order-sensitive: two sets are equal only if they iterate identically
        if not isinstance(other, OrderedSet):
            return NotImplemented
        return list(self._items) == list(other._items)

    def __repr__(self) -> str:
        return f"OrderedSet({list(self._items)!r})"
