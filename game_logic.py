"""
Core game logic: the dice pyramid, round setup and single draws.
"""

import logging
import random
from dataclasses import dataclass
from typing import List, Optional, Tuple

from config import ROLL_VALUES
from models import RACING_COLORS, CamelColor, Roll, Track

logger = logging.getLogger(__name__)


class Pyramid:
    """One die per racing camel, drawn without replacement until empty."""

    def __init__(self, rng: Optional[random.Random] = None) -> None:
        self.rng = rng if rng is not None else random.Random()
        self.dice: List[CamelColor] = []
        self.reset()

    def __len__(self) -> int:
        return len(self.dice)

    @property
    def remaining(self) -> Tuple[CamelColor, ...]:
        return tuple(self.dice)

    def roll(self) -> Optional[Roll]:
        """Pop the next die with a distance in ROLL_VALUES; None once the pyramid is empty."""
        if not self.dice:
            return None
        color = self.dice.pop()
        number = self.rng.choice(ROLL_VALUES)
        return Roll(color=color, number=number)

    def reset(self) -> None:
        self.dice = list(RACING_COLORS)
        self.rng.shuffle(self.dice)


@dataclass
class Game:
    track: Track
    pyramid: Pyramid


def setup_track(pyramid: Pyramid) -> Track:
    """
    Drain the pyramid onto an empty track, then refill it for the scoring phase.

    Each setup roll is an absolute placement: the camel goes to slot (number - 1),
    on top of whatever was drawn there before it. This differs from draws during
    play, which move a camel *by* the rolled number.
    """
    track = Track()
    while (roll := pyramid.roll()) is not None:
        track.place(roll.color, roll.number - 1)
    pyramid.reset()

    for line in track.describe():
        logger.info(line)
    return track


def new_game(rng: Optional[random.Random] = None) -> Game:
    """Set up a fresh round with a full pyramid."""
    pyramid = Pyramid(rng)
    track = setup_track(pyramid)
    return Game(track=track, pyramid=pyramid)


def draw_once(game: Game) -> Optional[Roll]:
    """Roll the next die and move its camel; None when every die is drawn."""
    roll = game.pyramid.roll()
    if roll is None:
        return None

    destination = game.track.advance(roll.color, roll.number)
    logger.info("Rolled %s %d -> slot %x", roll.color, roll.number, destination)
    return roll
