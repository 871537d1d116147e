"""Terminal condition systems.

Both win conditions are evaluated after every resolution in a fixed order:

1. :func:`capture_system`: the Pursuer wins once the lock streak reaches
   ``win_time``.
2. :func:`survival_system`: the Evader wins if the turn just played was the
   last one (``turn >= max_turns``, checked *before* the counter moves on).

Because capture runs first, a lock completed on the final turn goes to the
Pursuer. Each system is a no-op on a state that is already over.
"""

import logging
from dataclasses import replace

from orbital_pursuit.state import State
from orbital_pursuit.types import Phase, Role

logger = logging.getLogger(__name__)


def _game_over(state: State, winner: Role) -> State:
    logger.debug("Game over on turn %d: %s wins", state.turn, winner)
    return replace(state, phase=Phase.GAME_OVER, winner=winner)


def capture_system(state: State) -> State:
    """End the match for the Pursuer if the lock has been held long enough."""
    if state.is_terminal:
        return state
    if state.lock_streak >= state.config.win_time:
        return _game_over(state, Role.PURSUER)
    return state


def survival_system(state: State) -> State:
    """End the match for the Evader if the final turn has been played."""
    if state.is_terminal:
        return state
    if state.turn >= state.config.max_turns:
        return _game_over(state, Role.EVADER)
    return state


def turn_system(state: State) -> State:
    """Advance the turn counter for a match that continues."""
    if state.is_terminal:
        return state
    return replace(state, turn=state.turn + 1)
