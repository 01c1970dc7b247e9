"""Facade pattern: one home-theater object driving several devices."""

from __future__ import annotations

AMPLIFIER_ON = "Amplifier ON!"
AMPLIFIER_OFF = "Amplifier OFF!"
AMPLIFIER_SURROUND = "Amplifier surround sound ON!"
AMPLIFIER_VOLUME = "Amplifier volume: "
PLAYER_ON = "Player ON!"
PLAYER_OFF = "Player OFF!"
PLAYER_PLAYS = "Player plays: "
POPPER_ON = "Popcorn popper ON!"
POPPER_OFF = "Popcorn popper OFF!"
POPPER_POP = "Popcorn popper POP!"

MOVIE_VOLUME = 4
SILENT_VOLUME = 0
DEFAULT_MOVIE = "Kino"


def _say(text: str) -> str:
    print(text)
    return text


class Amplifier:
    """An amplifier that reports its actions on standard output."""

    def on(self) -> str:
        return _say(AMPLIFIER_ON)

    def off(self) -> str:
        return _say(AMPLIFIER_OFF)

    def set_surround_sound(self) -> str:
        return _say(AMPLIFIER_SURROUND)

    def set_volume(self, volume: int) -> str:
        return _say(f"{AMPLIFIER_VOLUME}{volume}")


class Player:
    """A movie player that reports its actions on standard output."""

    def on(self) -> str:
        return _say(PLAYER_ON)

    def off(self) -> str:
        return _say(PLAYER_OFF)

    def play(self, movie: str) -> str:
        return _say(f"{PLAYER_PLAYS}{movie}")


class PopcornPopper:
    """A popcorn machine that reports its actions on standard output."""

    def on(self) -> str:
        return _say(POPPER_ON)

    def off(self) -> str:
        return _say(POPPER_OFF)

    def pop(self) -> str:
        return _say(POPPER_POP)


class HomeTheaterFacade:
    """Runs the devices in the right order for watching a movie."""

    def __init__(
        self,
        amplifier: Amplifier,
        player: Player,
        popcorn_popper: PopcornPopper,
    ) -> None:
        self.amplifier = amplifier
        self.player = player
        self.popcorn_popper = popcorn_popper

    def watch_movie(self, movie: str) -> list[str]:
        """Get everything ready and start the movie; return the reports."""
        return [
            self.popcorn_popper.on(),
            self.popcorn_popper.pop(),
            self.amplifier.on(),
            self.amplifier.set_surround_sound(),
            self.amplifier.set_volume(MOVIE_VOLUME),
            self.player.on(),
            self.player.play(movie),
        ]

    def stop_movie(self) -> list[str]:
        """Stop the movie and shut everything down; return the reports."""
        return [
            self.player.off(),
            self.amplifier.set_volume(SILENT_VOLUME),
            self.amplifier.off(),
            self.popcorn_popper.off(),
        ]


def run() -> None:
    """Watch a movie through the facade and stop it again."""
    facade = HomeTheaterFacade(Amplifier(), Player(), PopcornPopper())
    facade.watch_movie(DEFAULT_MOVIE)
    facade.stop_movie()