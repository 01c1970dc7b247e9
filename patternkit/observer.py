"""Observer pattern: weather displays notified of new measurements."""

from __future__ import annotations

import sys
from abc import ABC, abstractmethod
from typing import TextIO

MENU = (
    "Press 'm' or 'M' to simulate a new measurement",
    "Press 'T' to unregister Third Party Display",
    "Press 't' to register Third Party Display",
    "Press 'C' to unregister Current Conditions Display",
    "Press 'c' to register Current Conditions Display",
)

INITIAL_TEMPERATURE = 0.0
INITIAL_HUMIDITY = 20.0


class Observer(ABC):
    """Something that wants to hear about new measurements."""

    @abstractmethod
    def update(self, temperature: float, humidity: float) -> object:
        """Receive a new measurement."""


class Subject(ABC):
    """Something that observers can subscribe to."""

    @abstractmethod
    def register_observer(self, observer: Observer) -> None:
        """Add an observer."""

    @abstractmethod
    def unregister_observer(self, observer: Observer) -> None:
        """Remove an observer."""

    @abstractmethod
    def notify_observers(self) -> None:
        """Tell every observer about the current state."""


class WeatherData(Subject):
    """Holds the latest measurement and passes it on to observers."""

    def __init__(self) -> None:
        self.temperature = 0.0
        self.humidity = 0.0
        self._observers: list[Observer | None] = []

    @property
    def observers(self) -> tuple[Observer | None, ...]:
        """The registered observers, in registration order."""
        return tuple(self._observers)

    def register_observer(self, observer: Observer) -> None:
        self._observers.append(observer)

    def unregister_observer(self, observer: Observer) -> None:
        # Every registration of the observer is dropped.
        self._observers = [o for o in self._observers if o is not observer]

    def notify_observers(self) -> None:
        for observer in list(self._observers):
            if observer is not None:
                observer.update(self.temperature, self.humidity)

    def set_measurements(self, temperature: float, humidity: float) -> None:
        """Store a new measurement and notify the observers."""
        self.temperature = temperature
        self.humidity = humidity
        self.notify_observers()


def _format(value: float) -> str:
    return f"{value:g}"


class _Display(Observer):
    label = ""

    def __init__(self, weather_data: Subject) -> None:
        self.weather_data = weather_data
        weather_data.register_observer(self)

    def update(self, temperature: float, humidity: float) -> list[str]:
        lines = [
            f"{self.label}::Temperatur: {_format(temperature)}",
            f"{self.label}::Humidity: {_format(humidity)}",
        ]
        for line in lines:
            print(line)
        return lines


class CurrentConditionsDisplay(_Display):
    """Shows the current conditions; registers itself on creation."""

    label = "CurrentConditionsDisplay"

    def update(self, temperature: float, humidity: float) -> list[str]:
        return super().update(temperature, humidity)


class ThirdPartyDisplay(_Display):
    """A display from another vendor; registers itself on creation."""

    label = "ThirdPartyDisplay"

    def update(self, temperature: float, humidity: float) -> list[str]:
        return super().update(temperature, humidity)


def run(stream: TextIO | None = None) -> WeatherData:
    """Drive the weather station from single-character commands.

    Reads characters from ``stream`` (standard input by default) until it
    is exhausted and returns the weather data object.
    """
    source = sys.stdin if stream is None else stream
    weather_data = WeatherData()
    current = CurrentConditionsDisplay(weather_data)
    third_party = ThirdPartyDisplay(weather_data)

    temperature = INITIAL_TEMPERATURE
    humidity = INITIAL_HUMIDITY

    for line in MENU:
        print(line)

    for char in iter(lambda: source.read(1), ""):
        if char in ("m", "M"):
            weather_data.set_measurements(temperature, humidity)
            temperature += 1
            humidity += 1
        elif char == "T":
            weather_data.unregister_observer(third_party)
        elif char == "t":
            weather_data.register_observer(third_party)
        elif char == "C":
            weather_data.unregister_observer(current)
        elif char == "c":
            weather_data.register_observer(current)

    return weather_data