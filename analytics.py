"""
Round analytics: exact loser distribution by exhaustive enumeration.
"""

import logging
from fractions import Fraction
from itertools import permutations, product
from math import factorial
from typing import Dict, Iterable

from config import ROLL_VALUES
from game_logic import Game
from models import RACING_COLORS, CamelColor, InvariantViolation, Track

logger = logging.getLogger(__name__)


def count_outcomes(n_remaining: int) -> int:
    """Number of (draw order, distances) branches for `n_remaining` undrawn dice."""
    return factorial(n_remaining) * len(ROLL_VALUES) ** n_remaining


def enumerate_loser_tallies(
    track: Track,
    remaining: Iterable[CamelColor] = RACING_COLORS,
) -> Dict[CamelColor, int]:
    """
    Exact enumeration of all ways to finish the current round from `track`.
    Every order in which the `remaining` dice can be drawn is crossed with
    every tuple of distances; each branch runs on its own clone of the track.
    Returns:
      - tallies: racing camel -> number of branches in which it ends last
    """
    remaining = list(remaining)
    n = len(remaining)
    tallies = {p: 0 for p in RACING_COLORS}

    for draws_seq in permutations(remaining, n):
        for rolls in product(ROLL_VALUES, repeat=n):
            state = track.clone()
            for color, number in zip(draws_seq, rolls):
                state.advance(color, number)

            loser = state.losing()
            if loser is None:
                raise InvariantViolation("no racing camel left on the track")
            tallies[loser] += 1

    logger.debug(
        "Enumerated %d outcomes: %s",
        count_outcomes(n),
        ", ".join(f"{c}={t}" for c, t in tallies.items()),
    )
    return tallies


def loss_probabilities(tallies: Dict[CamelColor, int]) -> Dict[CamelColor, Fraction]:
    """Convert loser tallies to exact probabilities."""
    total = sum(tallies.values())
    if total == 0:
        return {p: Fraction(0) for p in tallies}
    return {p: Fraction(t, total) for p, t in tallies.items()}


def compute_loss_probs_for_game(game: Game) -> Dict[CamelColor, Fraction]:
    """
    Loss probabilities from the game's current track over its undrawn dice.
    Once every die is drawn there is a single branch: the current loser.
    """
    tallies = enumerate_loser_tallies(game.track, game.pyramid.remaining)
    return loss_probabilities(tallies)
