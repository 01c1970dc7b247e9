"""Command pattern: a remote control switching a light through commands."""

from __future__ import annotations

from abc import ABC, abstractmethod

LIGHT_ON = "Lihgt ist ON!"
LIGHT_OFF = "Lihgt ist OFF!"


class Command(ABC):
    """An action that can be carried out and reverted."""

    @abstractmethod
    def execute(self) -> str:
        """Carry out the action and return the receiver's report."""

    @abstractmethod
    def undo(self) -> str:
        """Revert the action and return the receiver's report."""


class Light:
    """The receiver: reports switching on standard output."""

    def on(self) -> str:
        print(LIGHT_ON)
        return LIGHT_ON

    def off(self) -> str:
        print(LIGHT_OFF)
        return LIGHT_OFF


class LightOnCommand(Command):
    """Switches a light on."""

    def __init__(self, receiver: Light) -> None:
        self.receiver = receiver

    def execute(self) -> str:
        return self.receiver.on()

    def undo(self) -> str:
        return self.receiver.off()


class LightOffCommand(Command):
    """Switches a light off."""

    def __init__(self, receiver: Light) -> None:
        self.receiver = receiver

    def execute(self) -> str:
        return self.receiver.off()

    def undo(self) -> str:
        return self.receiver.on()


class RemoteControl:
    """The invoker: holds one command for each button."""

    def __init__(self) -> None:
        self._on_command: Command | None = None
        self._off_command: Command | None = None

    def set_command(self, on_command: Command, off_command: Command) -> None:
        self._on_command = on_command
        self._off_command = off_command

    def switch_light_on(self) -> str:
        if self._on_command is None:
            raise RuntimeError("no command set for the on button")
        return self._on_command.execute()

    def switch_light_off(self) -> str:
        if self._off_command is None:
            raise RuntimeError("no command set for the off button")
        return self._off_command.execute()


def run() -> None:
    """Wire a light to a remote control and press both buttons."""
    light = Light()
    remote = RemoteControl()
    remote.set_command(LightOnCommand(light), LightOffCommand(light))
    remote.switch_light_on()
    remote.switch_light_off()