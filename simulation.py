"""
Monte Carlo loser estimation, used to cross-check the exact enumeration.
"""

import random
from collections import Counter
from typing import Dict, Iterable, Optional

from config import ROLL_VALUES
from models import RACING_COLORS, CamelColor, InvariantViolation, Track


def simulate_loser_from_track(
    base_track: Track,
    remaining: Iterable[CamelColor] = RACING_COLORS,
    n_games: int = 5000,
    rng: Optional[random.Random] = None,
) -> Dict[CamelColor, float]:
    """
    Monte Carlo: estimate loss probabilities for the rest of the round.
    Each sample shuffles the draw order of `remaining` and picks every distance
    uniformly from ROLL_VALUES.
    """
    rng = rng if rng is not None else random.Random()
    remaining = list(remaining)
    loss_counts = Counter()

    for _ in range(n_games):
        track = base_track.clone()
        order = remaining[:]
        rng.shuffle(order)
        for color in order:
            track.advance(color, rng.choice(ROLL_VALUES))

        loser = track.losing()
        if loser is None:
            raise InvariantViolation("no racing camel left on the track")
        loss_counts[loser] += 1

    return {p: loss_counts[p] / n_games if n_games > 0 else 0.0 for p in RACING_COLORS}
