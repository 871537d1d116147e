"""Lane choices and engine commands.

A move is expressed as a :class:`Lane`: the lane index is both the destination
orbital lane and, offset by two, the signed column drift (``LEFT_2`` drifts two
columns left, ``STAY`` keeps the column). ``Lane`` is an ``IntEnum`` so it maps
directly onto a Gymnasium ``Discrete(5)`` action space.

Commands are small frozen dataclasses consumed by
:func:`orbital_pursuit.step.step`.
"""

from dataclasses import dataclass
from enum import IntEnum
from typing import Union


class Lane(IntEnum):
    """The five move choices available to either role each turn."""

    LEFT_2 = 0
    LEFT_1 = 1
    STAY = 2
    RIGHT_1 = 3
    RIGHT_2 = 4


ALL_LANES = tuple(int(lane) for lane in Lane)
NEUTRAL_LANE = int(Lane.STAY)


@dataclass(frozen=True)
class EvaderMove:
    """Commit the Evader's lane for the current turn (resolved later)."""

    lane: int


@dataclass(frozen=True)
class PursuerMove:
    """Commit the Pursuer's lane; resolves the turn simultaneously."""

    lane: int


@dataclass(frozen=True)
class ResetMatch:
    """Reinitialize the match with the same configuration."""

    pass


Command = Union[EvaderMove, PursuerMove, ResetMatch]
