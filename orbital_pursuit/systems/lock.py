"""Lock streak system.

Recomputes ``lock_streak`` from the freshly resolved positions: it grows by
one when the roles end the turn within Chebyshev distance 1 of each other
(the Pursuer's 3x3 lock zone) and drops straight back to zero otherwise.
"""

from dataclasses import replace

from orbital_pursuit.observability import LOCK_RANGE
from orbital_pursuit.state import State
from orbital_pursuit.utils.math import chebyshev_distance


def in_lock_range(state: State) -> bool:
    """Return True if the Evader is inside the Pursuer's lock zone."""
    return chebyshev_distance(state.evader_pos, state.pursuer_pos) <= LOCK_RANGE


def lock_system(state: State) -> State:
    """Update ``lock_streak`` for the turn that was just resolved."""
    if in_lock_range(state):
        return replace(state, lock_streak=state.lock_streak + 1)
    return replace(state, lock_streak=0)
