"""Decorator pattern: condiments wrapped around a beverage add to its cost."""

from __future__ import annotations

from abc import ABC, abstractmethod
from decimal import Decimal

ESPRESSO_DESCRIPTION = "Espresso"
ESPRESSO_COST = Decimal("1.99")
DARK_ROAST_DESCRIPTION = "Dark Rost"
DARK_ROAST_COST = Decimal("0.99")
MILK_DESCRIPTION = "Milk"
MILK_COST = Decimal("0.10")


class Beverage(ABC):
    """A drink with a description and a price."""

    def __init__(self, description: str = "") -> None:
        self._description = description

    def description(self) -> str:
        """Return the drink's description."""
        return self._description

    @abstractmethod
    def cost(self) -> Decimal:
        """Return the drink's price."""


class Espresso(Beverage):
    """A plain espresso."""

    def __init__(self) -> None:
        super().__init__(ESPRESSO_DESCRIPTION)

    def cost(self) -> Decimal:
        return ESPRESSO_COST


class DarkRoast(Beverage):
    """A plain dark roast coffee."""

    def __init__(self) -> None:
        super().__init__(DARK_ROAST_DESCRIPTION)

    def cost(self) -> Decimal:
        return DARK_ROAST_COST


class BeverageDecorator(Beverage):
    """A beverage that wraps another one and adds to it."""

    def __init__(self, beverage: Beverage, description: str) -> None:
        super().__init__(description)
        self.beverage = beverage

    @abstractmethod
    def description(self) -> str:
        """Return the wrapped description extended by this decorator."""

    @abstractmethod
    def cost(self) -> Decimal:
        """Return the wrapped price plus this decorator's own."""


class MilkDecorator(BeverageDecorator):
    """Adds milk to a beverage."""

    def __init__(self, beverage: Beverage) -> None:
        super().__init__(beverage, MILK_DESCRIPTION)

    def description(self) -> str:
        return f"{self.beverage.description()}, {self._description}"

    def cost(self) -> Decimal:
        return self.beverage.cost() + MILK_COST


def run() -> None:
    """Print description and price of a plain and a decorated espresso."""
    espresso = Espresso()
    with_milk = MilkDecorator(espresso)
    for beverage in (espresso, with_milk):
        print(beverage.description())
        print(beverage.cost())