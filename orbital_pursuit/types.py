"""Common type aliases and enumerations.

``VisibilityFn`` is the pluggable extension point stored on the ``State`` to
select how the Pursuer's sensor behaves from turn to turn.
"""

from enum import StrEnum, auto
from typing import Callable, Optional


class Role(StrEnum):
    """The two sides of a match."""

    EVADER = auto()
    PURSUER = auto()


class Phase(StrEnum):
    """Match lifecycle phase. ``GAME_OVER`` is terminal until a reset."""

    PLAYING = auto()
    GAME_OVER = auto()


class TurnStage(StrEnum):
    """Which commit the engine is waiting for inside a turn."""

    AWAITING_EVADER_MOVE = auto()
    AWAITING_PURSUER_MOVE = auto()


def opponent(role: Role) -> Role:
    """Return the other role."""
    return Role.PURSUER if role == Role.EVADER else Role.EVADER


VisibilityFn = Callable[[int], bool]
PolicyKey = str
MaybeLane = Optional[int]
