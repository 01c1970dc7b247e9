"""Sorting any comparable objects with an insertion sort."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import MutableSequence, TypeVar

T = TypeVar("T", bound="Comparable")


def _sign(a: int, b: int) -> int:
    if a < b:
        return -1
    if a == b:
        return 0
    return 1


class Comparable(ABC):
    """An object that can be ordered against another of its kind."""

    @abstractmethod
    def compare_to(self, other: Comparable) -> int:
        """Return -1, 0 or 1 as this object is less than, equal to or greater than ``other``."""

    def _check(self, other: Comparable) -> None:
        if not isinstance(other, type(self)):
            raise TypeError(
                f"cannot compare {type(self).__name__} with {type(other).__name__}"
            )


@dataclass
class Duck(Comparable):
    """A duck ordered by its weight."""

    name: str
    weight: int

    def compare_to(self, other: Comparable) -> int:
        self._check(other)
        assert isinstance(other, Duck)
        return _sign(self.weight, other.weight)


@dataclass
class IntValue(Comparable):
    """A boxed integer ordered by its value."""

    value: int

    def compare_to(self, other: Comparable) -> int:
        self._check(other)
        assert isinstance(other, IntValue)
        return _sign(self.value, other.value)


def insertion_sort(items: MutableSequence[T]) -> None:
    """Sort ``items`` in place, ascending by ``compare_to``; the sort is stable."""
    for i in range(1, len(items)):
        j = i
        while j > 0 and items[j - 1].compare_to(items[j]) > 0:
            items[j - 1], items[j] = items[j], items[j - 1]
            j -= 1


def _show_ducks(ducks: list[Duck]) -> None:
    for duck in ducks:
        print(f"duck: {duck.weight}")


def _show_ints(values: list[IntValue]) -> None:
    for value in values:
        print(f"intArray: {value.value}")


def run() -> None:
    """Sort a few ducks and a few integers and print them before and after."""
    ducks = [Duck("a", 4), Duck("b", 2), Duck("c", 44), Duck("d", 1)]
    print("Duck bevor sort:")
    _show_ducks(ducks)
    insertion_sort(ducks)
    print("Duck after sort:")
    _show_ducks(ducks)

    values = [IntValue(22), IntValue(33), IntValue(11)]
    print("intArray bevor sort:")
    _show_ints(values)
    insertion_sort(values)
    print("intArray after sort:")
    _show_ints(values)