"""Adapter pattern: a turkey made to look like a duck."""

from __future__ import annotations

from abc import ABC, abstractmethod

GOBBLE = "Gobble!"
SHORT_FLIGHT = "I am flying a short distance!"


def _say(text: str) -> str:
    print(text)
    return text


class Turkey(ABC):
    """What a turkey can do."""

    @abstractmethod
    def gobble(self) -> str:
        """Make the turkey's sound and return the text spoken."""

    @abstractmethod
    def fly(self) -> str:
        """Fly and return the text spoken."""


class WildTurkey(Turkey):
    """A concrete turkey that reports its actions on standard output."""

    def gobble(self) -> str:
        return _say(GOBBLE)

    def fly(self) -> str:
        return _say(SHORT_FLIGHT)


class Duck(ABC):
    """The interface clients expect."""

    @abstractmethod
    def quack(self) -> str:
        """Quack and return the text spoken."""

    @abstractmethod
    def fly(self) -> str:
        """Fly and return the text spoken."""


class TurkeyAdapter(Duck):
    """Presents a turkey through the duck interface."""

    FLIGHTS_PER_FLY = 3

    def __init__(self, turkey: Turkey) -> None:
        self.turkey = turkey

    def quack(self) -> str:
        return self.turkey.gobble()

    def fly(self) -> str:
        # A turkey only manages short hops, so it flies several times.
        return "\n".join(self.turkey.fly() for _ in range(self.FLIGHTS_PER_FLY))


def exercise_duck(duck: Duck) -> list[str]:
    """Make a duck quack and fly; return what it said, in order."""
    return [duck.quack(), duck.fly()]


def run() -> None:
    """Show a turkey on its own and then through the duck interface."""
    wild_turkey = WildTurkey()
    adapter = TurkeyAdapter(wild_turkey)

    print("Turkey says...")
    wild_turkey.gobble()
    wild_turkey.fly()

    print("TurkeyAdapter says...")
    exercise_duck(adapter)