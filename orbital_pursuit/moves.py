"""Move legality and destination computation.

Every move is one of five :class:`~orbital_pursuit.actions.Lane` choices. The
lane index becomes the destination lane and ``lane - 2`` is the column drift,
so ``Lane.STAY`` keeps the column while changing (or keeping) the lane.

A lane is legal for a role iff the resulting column stays inside the role's
column range: the central band for the Evader, the full board for the
Pursuer. Lanes themselves can never leave the board since the destination lane
is the lane index.

Functions here are pure and independent of whose turn it is.
"""

from typing import Tuple

from pyrsistent import pset
from pyrsistent.typing import PSet

from orbital_pursuit.actions import ALL_LANES, NEUTRAL_LANE
from orbital_pursuit.components import Position
from orbital_pursuit.config import GameConfig
from orbital_pursuit.types import Role


def lane_delta(lane: int) -> int:
    """Signed column drift of ``lane`` (the middle lane does not drift)."""
    return lane - NEUTRAL_LANE


def column_range(config: GameConfig, role: Role) -> Tuple[int, int]:
    """Inclusive ``(lo, hi)`` column range a role may occupy."""
    if role == Role.EVADER:
        return config.evader_min_x, config.evader_max_x
    return 0, config.width - 1


def is_legal(config: GameConfig, role: Role, from_column: int, lane: int) -> bool:
    """Return True if ``role`` may pick ``lane`` while standing in ``from_column``."""
    if isinstance(lane, bool) or lane not in ALL_LANES:
        return False
    lo, hi = column_range(config, role)
    return lo <= from_column + lane_delta(lane) <= hi


def legal_lanes(config: GameConfig, role: Role, from_column: int) -> PSet[int]:
    """Set of lanes legal for ``role`` from ``from_column``."""
    return pset(
        lane for lane in ALL_LANES if is_legal(config, role, from_column, lane)
    )


def legal_lanes_or_neutral(
    config: GameConfig, role: Role, from_column: int
) -> Tuple[int, ...]:
    """Sorted legal lanes, or just the neutral lane if none are legal."""
    lanes = tuple(sorted(legal_lanes(config, role, from_column)))
    return lanes if lanes else (NEUTRAL_LANE,)


def apply_move(from_pos: Position, lane: int) -> Position:
    """Destination of moving from ``from_pos`` via ``lane``.

    Performs no validation; callers check :func:`is_legal` first.
    """
    return Position(from_pos.x + lane_delta(lane), lane)
