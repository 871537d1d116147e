"""Pursuer sensor model.

The Pursuer sees the Evader exactly on some turns and only through a degraded
proximity sensor on the others. Visibility is a pure function of the turn
counter; a :data:`VisibilityFn` is stored on the ``State`` so levels can swap
the cycle out (e.g. :func:`always_visible` for full-information analysis).

The *contact alert* is the degraded sensor's only output: a single boolean
saying "the Evader is inside the 3x3 lock zone" on hidden turns. It never
carries a position.

Updating ``last_observed_evader_pos`` is the engine's job, see
:mod:`orbital_pursuit.systems.memory`.
"""

from typing import Dict

from orbital_pursuit.components import Position
from orbital_pursuit.types import VisibilityFn
from orbital_pursuit.utils.math import chebyshev_distance

VISIBILITY_PERIOD = 4
VISIBLE_TURNS = 2
LOCK_RANGE = 1


def visibility_for_turn(turn: int) -> bool:
    """Repeating cycle: the first two turns of every four are visible.

    ``turn`` is 1-indexed, so turns 1, 2, 5, 6, 9, 10, ... are visible.
    """
    return (turn - 1) % VISIBILITY_PERIOD < VISIBLE_TURNS


def always_visible(turn: int) -> bool:
    """Full-information sensor; every turn is visible."""
    return True


def contact_alert(evader_pos: Position, pursuer_pos: Position, visible: bool) -> bool:
    """Return True iff the turn is hidden and the Evader is within lock range."""
    if visible:
        return False
    return chebyshev_distance(evader_pos, pursuer_pos) <= LOCK_RANGE


VISIBILITY_FN_REGISTRY: Dict[str, VisibilityFn] = {
    "cycle": visibility_for_turn,
    "always": always_visible,
}
"""Name to visibility function mapping used by :class:`GameConfig`."""
