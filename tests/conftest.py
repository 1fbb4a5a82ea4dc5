import pytest

from models import CamelColor, Track


class ScriptedRandom:
    """Random source that leaves shuffles alone and returns scripted choices."""

    def __init__(self, choices: list[int]):
        self.choices = list(choices)

    def shuffle(self, x) -> None:
        pass

    def choice(self, seq):
        return self.choices.pop(0)


@pytest.fixture
def example_track() -> Track:
    """Red alone on slot 0, Green on slot 1, Blue/Yellow/Purple stacked on slot 2."""
    track = Track()
    track.place(CamelColor.RED, 0)
    track.place(CamelColor.GREEN, 1)
    track.place(CamelColor.BLUE, 2)
    track.place(CamelColor.YELLOW, 2)
    track.place(CamelColor.PURPLE, 2)
    return track


@pytest.fixture
def scripted_rng():
    return ScriptedRandom
