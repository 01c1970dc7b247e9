"""Model-view-controller: a beat model, a console view and a controller."""

from __future__ import annotations

import sys
import threading
from abc import ABC, abstractmethod
from typing import TextIO

DEFAULT_BPM = 90
DEFAULT_BEAT_INTERVAL = 1.0

MENU = (
    "Press 1 to set BPM'",
    "Press 2 to increase BPM'",
    "Press 3 to decrease BPM'",
    "Press 4 to start Beat'",
    "Press 5 to stop Beat'",
)
SELECT_PROMPT = "Please select action: "
BPM_PROMPT = "Please give BPM: "
INVALID_INPUT = "Invalid user input!"
CONTROLLER_NOT_SET = "Controller is not set!"
MODEL_NOT_SET = "Model is not set!"


def _read_token(stream: TextIO) -> str | None:
    """Read the next whitespace-separated token, or None at the end of input."""
    chars: list[str] = []
    for char in iter(lambda: stream.read(1), ""):
        if char.isspace():
            if chars:
                break
            continue
        chars.append(char)
    return "".join(chars) or None


class BeatObserver(ABC):
    """Wants to hear about every beat."""

    @abstractmethod
    def update_beat(self) -> object:
        """React to a beat."""


class BpmObserver(ABC):
    """Wants to hear when the tempo changes."""

    @abstractmethod
    def update_bpm(self) -> object:
        """React to a new tempo."""


class BeatModel:
    """Holds the tempo and, while on, beats in a background thread."""

    def __init__(
        self, bpm: int = DEFAULT_BPM, interval: float = DEFAULT_BEAT_INTERVAL
    ) -> None:
        self.bpm = bpm
        self.interval = interval
        self._bpm_observers: list[BpmObserver] = []
        self._beat_observers: list[BeatObserver] = []
        self._running = False
        self._stop = threading.Event()
        self._thread: threading.Thread | None = None

    @property
    def running(self) -> bool:
        """Whether the beat is currently on."""
        return self._running

    def on(self) -> None:
        """Start beating; does nothing but report if already on."""
        if self._running:
            print("Beat is already On")
            return
        self._running = True
        self._stop = threading.Event()
        self._thread = threading.Thread(target=self._run_beat, daemon=True)
        self._thread.start()

    def off(self) -> None:
        """Stop beating and wait for the beat thread to end."""
        if not self._running:
            print("Beat is already Off")
            return
        self._running = False
        self._stop.set()
        if self._thread is not None:
            self._thread.join()
            self._thread = None
        print("Beat is Off")

    def set_bpm(self, bpm: int) -> None:
        """Change the tempo and tell the tempo observers."""
        self.bpm = bpm
        for observer in list(self._bpm_observers):
            observer.update_bpm()

    def register_bpm_observer(self, observer: BpmObserver) -> None:
        self._bpm_observers.append(observer)

    def register_beat_observer(self, observer: BeatObserver) -> None:
        self._beat_observers.append(observer)

    def _run_beat(self) -> None:
        while not self._stop.wait(self.interval):
            for observer in list(self._beat_observers):
                observer.update_beat()
        print("BeatModel thread is stopping")


class DJView(BpmObserver, BeatObserver):
    """Console view: shows the tempo and turns key presses into controller calls."""

    def __init__(
        self,
        controller: BeatController | None = None,
        model: BeatModel | None = None,
    ) -> None:
        self.controller = controller
        self.model = model
        if model is not None:
            model.register_bpm_observer(self)
            model.register_beat_observer(self)

    def update_beat(self) -> str:
        if self.model is None:
            line = MODEL_NOT_SET
        else:
            line = f"Beat in real time with: {self.model.bpm}BPM! "
        print(line)
        return line

    def update_bpm(self) -> str:
        if self.model is None:
            line = MODEL_NOT_SET
        else:
            line = f"Current BPM: {self.model.bpm}"
        print(line)
        return line

    def _require_controller(self) -> BeatController | None:
        if self.controller is None:
            print(CONTROLLER_NOT_SET)
        return self.controller

    def press_set_bpm(self, stream: TextIO | None = None) -> None:
        """Ask for a tempo on ``stream`` and pass it to the controller.

        Raises ValueError if the answer is not a whole number and EOFError
        if the input ends first.
        """
        controller = self._require_controller()
        if controller is None:
            return
        print(BPM_PROMPT, end="", flush=True)
        token = _read_token(sys.stdin if stream is None else stream)
        if token is None:
            raise EOFError("input ended before a BPM value")
        controller.set_bpm(int(token))

    def press_increase_bpm(self) -> None:
        controller = self._require_controller()
        if controller is not None:
            controller.increase_bpm()

    def press_decrease_bpm(self) -> None:
        controller = self._require_controller()
        if controller is not None:
            controller.decrease_bpm()

    def press_start_beat(self) -> None:
        controller = self._require_controller()
        if controller is not None:
            controller.start()

    def press_stop_beat(self) -> None:
        controller = self._require_controller()
        if controller is not None:
            controller.stop()

    def run(self, stream: TextIO | None = None) -> None:
        """Show the menu and handle numbered actions until the input ends."""
        source = sys.stdin if stream is None else stream
        for line in MENU:
            print(line)
        actions = {
            "2": self.press_increase_bpm,
            "3": self.press_decrease_bpm,
            "4": self.press_start_beat,
            "5": self.press_stop_beat,
        }
        while True:
            print(SELECT_PROMPT, end="", flush=True)
            token = _read_token(source)
            if token is None:
                return
            if token == "1":
                try:
                    self.press_set_bpm(source)
                except ValueError:
                    print(INVALID_INPUT)
                except EOFError:
                    return
            elif token in actions:
                actions[token]()
            else:
                print(INVALID_INPUT)


class BeatController:
    """Turns view requests into model changes; creates the view for a model."""

    def __init__(self, model: BeatModel | None = None) -> None:
        self.model = model
        self.view = DJView(self, model) if model is not None else None

    def start(self) -> None:
        if self.model is not None:
            self.model.on()

    def stop(self) -> None:
        if self.model is not None:
            self.model.off()

    def increase_bpm(self) -> None:
        if self.model is not None:
            self.model.set_bpm(self.model.bpm + 1)

    def decrease_bpm(self) -> None:
        if self.model is not None:
            self.model.set_bpm(self.model.bpm - 1)

    def set_bpm(self, bpm: int) -> None:
        if self.model is not None:
            self.model.set_bpm(bpm)


def run(stream: TextIO | None = None) -> BeatModel:
    """Build model, controller and view and drive the view from ``stream``.

    The beat is switched off once the input ends; the model is returned.
    """
    model = BeatModel()
    controller = BeatController(model)
    assert controller.view is not None
    try:
        controller.view.run(stream)
    finally:
        if model.running:
            model.off()
    return model