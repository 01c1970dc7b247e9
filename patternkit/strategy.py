"""Strategy pattern: ducks whose flying and quacking are swappable behaviours."""

from __future__ import annotations

from abc import ABC, abstractmethod

FLY_WITH_WINGS = "I can fly with wings!"
FLY_NO_WAY = "I can not fly :-("
QUACK = "I can quack!"
MUTE_QUACK = "I can not quack :-("
MALLARD_DISPLAY = "Im am mallard duck!"
RUBBER_DISPLAY = "Im am rubber duck!"


def _say(text: str) -> str:
    print(text)
    return text


class FlyBehavior(ABC):
    """A way of flying."""

    @abstractmethod
    def fly(self) -> str:
        """Fly and return the text spoken."""


class QuackBehavior(ABC):
    """A way of quacking."""

    @abstractmethod
    def quack(self) -> str:
        """Quack and return the text spoken."""


class FlyWithWings(FlyBehavior):
    """Real flight."""

    def fly(self) -> str:
        return _say(FLY_WITH_WINGS)


class FlyNoWay(FlyBehavior):
    """No flight at all."""

    def fly(self) -> str:
        return _say(FLY_NO_WAY)


class Quack(QuackBehavior):
    """A proper quack."""

    def quack(self) -> str:
        return _say(QUACK)


class MuteQuack(QuackBehavior):
    """Silence."""

    def quack(self) -> str:
        return _say(MUTE_QUACK)


class Duck(ABC):
    """A duck that delegates flying and quacking to exchangeable behaviours."""

    def __init__(
        self,
        fly_behavior: FlyBehavior | None = None,
        quack_behavior: QuackBehavior | None = None,
    ) -> None:
        self.fly_behavior = fly_behavior
        self.quack_behavior = quack_behavior
        self.swimming = False

    def swim(self) -> None:
        """Put the duck in the water; swimming prints nothing."""
        self.swimming = True

    @abstractmethod
    def display(self) -> str:
        """Describe the duck and return the text spoken."""

    def perform_fly(self) -> str | None:
        """Fly with the current behaviour; nothing happens without one."""
        if self.fly_behavior is None:
            return None
        return self.fly_behavior.fly()

    def perform_quack(self) -> str | None:
        """Quack with the current behaviour; nothing happens without one."""
        if self.quack_behavior is None:
            return None
        return self.quack_behavior.quack()


class MallardDuck(Duck):
    """A mallard duck."""

    def display(self) -> str:
        return _say(MALLARD_DISPLAY)


class RubberDuck(Duck):
    """A rubber duck."""

    def display(self) -> str:
        return _say(RUBBER_DISPLAY)


def run() -> None:
    """Show a rubber duck changing its behaviours at run time."""
    fly_with_wings = FlyWithWings()
    quack = Quack()
    rubber_duck = RubberDuck(FlyNoWay(), MuteQuack())

    rubber_duck.swim()
    rubber_duck.display()

    rubber_duck.perform_fly()
    rubber_duck.fly_behavior = fly_with_wings
    rubber_duck.perform_fly()

    rubber_duck.perform_quack()
    rubber_duck.quack_behavior = quack
    rubber_duck.perform_quack()