"""
Data models and state representations.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Tuple

from config import FINISH_SLOT, RACING_COLORS_NAMES, TRACK_LENGTH, WILD_COLORS_NAMES


class CamelColor(str, Enum):
    RED = "Red"
    GREEN = "Green"
    YELLOW = "Yellow"
    BLUE = "Blue"
    PURPLE = "Purple"
    BLACK = "Black"
    WHITE = "White"

    @property
    def is_racing(self) -> bool:
        return self.value in RACING_COLORS_NAMES

    def __str__(self) -> str:
        return self.value


RACING_COLORS: Tuple[CamelColor, ...] = tuple(CamelColor(n) for n in RACING_COLORS_NAMES)
WILD_COLORS: Tuple[CamelColor, ...] = tuple(CamelColor(n) for n in WILD_COLORS_NAMES)


class InvariantViolation(RuntimeError):
    """Track state is corrupted: a camel is missing, misplaced, or a move is invalid."""


@dataclass(frozen=True)
class Roll:
    """A die drawn from the pyramid: which camel moves and how far."""
    color: CamelColor
    number: int


@dataclass
class Track:
    """Fixed row of slots, each a stack of camels listed [bottom,...,top]."""
    spaces: List[List[CamelColor]] = field(
        default_factory=lambda: [[] for _ in range(TRACK_LENGTH)]
    )

    def clone(self) -> "Track":
        return Track(spaces=[stack[:] for stack in self.spaces])

    def place(self, color: CamelColor, slot: int) -> None:
        """Put `color` on top of the stack at absolute `slot` (setup only)."""
        if not 0 <= slot < TRACK_LENGTH:
            raise InvariantViolation(f"slot {slot} is outside the track")
        if any(color in stack for stack in self.spaces):
            raise InvariantViolation(f"{color} is already on the track")
        self.spaces[slot].append(color)

    def locate(self, color: CamelColor) -> Tuple[int, int]:
        """Return (slot, height) of `color`; height 0 is the bottom of the stack."""
        for slot, stack in enumerate(self.spaces):
            if color in stack:
                return slot, stack.index(color)
        raise InvariantViolation(f"couldn't find camel {color}")

    def advance(self, color: CamelColor, distance: int) -> int:
        """
        Move `color` and everything stacked on it `distance` slots forward.
          - The carried block keeps its order and lands on top of the destination stack.
          - Camels below `color` stay where they are.
          - Destinations past the end are clamped to the finish slot.
        Returns the destination slot.
        """
        if distance <= 0:
            raise InvariantViolation(f"move distance must be positive, got {distance}")

        source, height = self.locate(color)
        stack = self.spaces[source]
        unit = stack[height:]
        del stack[height:]

        destination = min(source + distance, FINISH_SLOT)
        self.spaces[destination].extend(unit)
        return destination

    def losing(self) -> Optional[CamelColor]:
        """Last place: bottom-most racing camel in the rearmost occupied slot."""
        for stack in self.spaces:
            for camel in stack:
                if camel.is_racing:
                    return camel
        return None

    def leading(self) -> Optional[CamelColor]:
        """First place: top-most racing camel in the foremost occupied slot."""
        for stack in reversed(self.spaces):
            for camel in reversed(stack):
                if camel.is_racing:
                    return camel
        return None

    def camels(self) -> List[CamelColor]:
        return [camel for stack in self.spaces for camel in stack]

    def describe(self) -> List[str]:
        return [
            f"{index:x} : [{', '.join(str(c) for c in stack)}]"
            for index, stack in enumerate(self.spaces)
        ]
