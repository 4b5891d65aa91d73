"""A list-backed container that can be traversed in six different orders."""

from __future__ import annotations

from itertools import count
from typing import Any, Generic, Iterable, Iterator, Sequence, TypeVar

T = TypeVar("T")


def side_cross_indices(values: Sequence[Any]) -> list[int]:
    """Return indices of ``values``: smallest, largest, next smallest, next largest, ..."""
    ranked = sorted(range(len(values)), key=values.__getitem__)
    half = len(ranked) // 2
    result: list[int] = []
    for low, high in zip(ranked[:half], reversed(ranked[half:])):
        result.extend((low, high))
    if len(ranked) % 2:
        result.append(ranked[half])
    return result


def middle_out_indices(n: int) -> list[int]:
    """Return ``range(n)`` starting at the middle, then alternating left and right."""
    if n < 0:
        raise ValueError("n must not be negative")
    if n == 0:
        return []
    mid = n // 2
    result = [mid]
    for step in count(1):
        if len(result) >= n:
            break
        left, right = mid - step, mid + step
        if left >= 0:
            result.append(left)
        if right < n:
            result.append(right)
    return result


class MyContainer(Generic[T]):
    """Stores elements in insertion order and offers several traversal orders."""

    def __init__(self, items: Iterable[T] | None = None) -> None:
        self._data: list[T] = list(items) if items is not None else []

    def add_element(self, elem: T) -> None:
        """Append an element."""
        self._data.append(elem)

    def remove_element(self, elem: T) -> None:
        """Remove every occurrence of ``elem``; raise ValueError if there is none."""
        if elem not in self._data:
            raise ValueError("Element not found")
        self._data = [item for item in self._data if item != elem]

    def __len__(self) -> int:
        return len(self._data)

    def __iter__(self) -> Iterator[T]:
        return self.order()

    def __str__(self) -> str:
        return "[ " + "".join(f"{item} " for item in self._data) + "]"

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._data!r})"

    def copy(self) -> MyContainer[T]:
        """Return an independent container holding the same elements."""
        return type(self)(self._data)

    def ascending(self) -> Iterator[T]:
        """Iterate from smallest to largest."""
        return iter(sorted(self._data))

    def descending(self) -> Iterator[T]:
        """Iterate from largest to smallest."""
        return iter(sorted(self._data, reverse=True))

    def side_cross(self) -> Iterator[T]:
        """Iterate smallest, largest, second smallest, second largest, ..."""
        data = list(self._data)
        return (data[i] for i in side_cross_indices(data))

    def reverse(self) -> Iterator[T]:
        """Iterate in reverse insertion order."""
        return iter(self._data[::-1])

    def order(self) -> Iterator[T]:
        """Iterate in insertion order."""
        return iter(list(self._data))

    def middle_out(self) -> Iterator[T]:
        """Iterate from the middle element outwards, left before right."""
        data = list(self._data)
        return (data[i] for i in middle_out_indices(len(data)))