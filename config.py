"""
Game configuration and constants.
"""

from math import factorial

# Camel names
RACING_COLORS_NAMES = ["Red", "Green", "Yellow", "Blue", "Purple"]  # rolled once per round
WILD_COLORS_NAMES = ["Black", "White"]  # may sit on the track, never rolled

# Game mechanics
ROLL_VALUES = (1, 2, 3)
TRACK_LENGTH = 16  # slots 0..15
FINISH_SLOT = TRACK_LENGTH - 1
TOTAL_OUTCOMES = factorial(len(RACING_COLORS_NAMES)) * len(ROLL_VALUES) ** len(RACING_COLORS_NAMES)

# Colors for plotting
COLOR_MAP = {
    "Red": "#e41a1c",
    "Green": "#4daf4a",
    "Yellow": "#ffd92f",
    "Blue": "#377eb8",
    "Purple": "#984ea3",
    "Black": "#222222",
    "White": "#f0f0f0",
}

# UI Settings
MONTE_CARLO_SIMULATIONS = 5000
LOG_LEVEL = "INFO"
