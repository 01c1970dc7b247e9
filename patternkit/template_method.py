"""Template method pattern: a fixed recipe with steps filled in by subclasses."""

from __future__ import annotations

import sys
from abc import ABC, abstractmethod
from typing import TextIO, final

BOIL_WATER = "Boil Water for beverage!"
POUR_IN_CUP = "Pour beverage in cup!"
TEA_BREW = "Steep the teabag in the water!"
TEA_CONDIMENTS = "Add lemon to tea!"
TEA_PROMPT = "Take lemon in your tea (y/n)? "
COFFEE_BREW = "Brew the coffee grinds!"
COFFEE_CONDIMENTS = "Add sugar and milk to coffee!"
COFFEE_PROMPT = "Take milk and sugar in your coffee (y/n)? "


def _say(text: str) -> str:
    print(text)
    return text


def read_answer(stream: TextIO) -> bool:
    """Read characters until a 'y' or an 'n' turns up.

    Every other character is skipped. Returns True for 'y' and False for
    'n'; raises EOFError if the stream ends before either is seen.
    """
    for char in iter(lambda: stream.read(1), ""):
        if char == "y":
            return True
        if char == "n":
            return False
    raise EOFError("input ended before a 'y' or 'n' answer")


class CaffeineBeverage(ABC):
    """A hot drink prepared by a fixed sequence of steps."""

    @final
    def prepare_recipe(self) -> list[str]:
        """Run the recipe and return the steps carried out, in order."""
        steps = [self.boil_water(), self.brew(), self.pour_in_cup()]
        if self.customer_wants_condiments():
            steps.append(self.add_condiments())
        return steps

    def boil_water(self) -> str:
        return _say(BOIL_WATER)

    def pour_in_cup(self) -> str:
        return _say(POUR_IN_CUP)

    @abstractmethod
    def brew(self) -> str:
        """Brew the drink and return the step's report."""

    @abstractmethod
    def add_condiments(self) -> str:
        """Add the condiments and return the step's report."""

    def customer_wants_condiments(self) -> bool:
        """Hook deciding whether condiments are added; yes by default."""
        return True


class _AskingBeverage(CaffeineBeverage):
    prompt = ""

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream

    def _ask(self) -> bool:
        print(self.prompt, end="", flush=True)
        return read_answer(sys.stdin if self._stream is None else self._stream)


class Tea(_AskingBeverage):
    """Tea; asks whether lemon is wanted."""

    prompt = TEA_PROMPT

    def brew(self) -> str:
        return _say(TEA_BREW)

    def add_condiments(self) -> str:
        return _say(TEA_CONDIMENTS)

    def customer_wants_condiments(self) -> bool:
        return self._ask()


class Coffee(_AskingBeverage):
    """Coffee; asks whether milk and sugar are wanted."""

    prompt = COFFEE_PROMPT

    def brew(self) -> str:
        return _say(COFFEE_BREW)

    def add_condiments(self) -> str:
        return _say(COFFEE_CONDIMENTS)

    def customer_wants_condiments(self) -> bool:
        return self._ask()


def run(stream: TextIO | None = None) -> list[list[str]]:
    """Prepare a tea and then a coffee, reading answers from ``stream``.

    Returns the steps of each recipe.
    """
    beverages: list[CaffeineBeverage] = [Tea(stream), Coffee(stream)]
    return [beverage.prepare_recipe() for beverage in beverages]