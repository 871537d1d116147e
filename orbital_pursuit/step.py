"""State reducer and turn resolution.

:func:`step` is the only public mutation entry point: it takes a ``State`` and
a command and returns the next ``State``. A turn is two commits:

1. :class:`~orbital_pursuit.actions.EvaderMove` stores the Evader's
   destination in ``pending_evader_move``. Nothing Pursuer-facing changes, so
   the Pursuer plans blind.
2. :class:`~orbital_pursuit.actions.PursuerMove` resolves both moves at once
   and runs the systems in order:

   ``lock_system -> capture_system -> survival_system -> memory_system ->
   turn_system``

Illegal or out-of-turn commits are rejected by returning the input state
unchanged; callers are expected to offer only legal lanes, so this is a guard
and not a reported error. :class:`~orbital_pursuit.actions.ResetMatch` is
accepted at any time, including after the match is over.
"""

import logging
from dataclasses import replace

from orbital_pursuit.actions import Command, EvaderMove, PursuerMove, ResetMatch
from orbital_pursuit.moves import apply_move, is_legal
from orbital_pursuit.state import State, initial_state
from orbital_pursuit.systems.lock import lock_system
from orbital_pursuit.systems.memory import memory_system
from orbital_pursuit.systems.terminal import (
    capture_system,
    survival_system,
    turn_system,
)
from orbital_pursuit.types import Role, TurnStage

logger = logging.getLogger(__name__)


def step(state: State, command: Command) -> State:
    """Apply one command to the match.

    Args:
        state (State): Current immutable match state.
        command (Command): ``EvaderMove``, ``PursuerMove`` or ``ResetMatch``.

    Returns:
        State: Next state, or ``state`` itself when the command is rejected.

    Raises:
        ValueError: If ``command`` is not a recognized command type.
    """
    if isinstance(command, ResetMatch):
        return reset_match(state)
    if isinstance(command, EvaderMove):
        return _step_evader(state, command.lane)
    if isinstance(command, PursuerMove):
        return _step_pursuer(state, command.lane)
    raise ValueError(f"Command is not valid: {command!r}")


def commit_evader_move(state: State, lane: int) -> State:
    """Shorthand for ``step(state, EvaderMove(lane))``."""
    return step(state, EvaderMove(lane))


def commit_pursuer_move(state: State, lane: int) -> State:
    """Shorthand for ``step(state, PursuerMove(lane))``."""
    return step(state, PursuerMove(lane))


def reset_match(state: State) -> State:
    """Fresh match with the same config and visibility function."""
    return initial_state(state.config, state.visibility_fn)


def _accepts(state: State, role: Role, stage: TurnStage, lane: int) -> bool:
    if state.is_terminal or state.stage != stage:
        logger.debug("Rejected %s move on turn %d: out of turn", role, state.turn)
        return False
    if not is_legal(state.config, role, state.position_of(role).x, lane):
        logger.debug(
            "Rejected %s move on turn %d: illegal lane %r", role, state.turn, lane
        )
        return False
    return True


def _step_evader(state: State, lane: int) -> State:
    """Store the Evader's committed destination without revealing it."""
    if not _accepts(state, Role.EVADER, TurnStage.AWAITING_EVADER_MOVE, lane):
        return state
    return replace(state, pending_evader_move=apply_move(state.evader_pos, lane))


def _step_pursuer(state: State, lane: int) -> State:
    """Resolve the turn with the Pursuer's move and the pending Evader move."""
    if not _accepts(state, Role.PURSUER, TurnStage.AWAITING_PURSUER_MOVE, lane):
        return state
    assert state.pending_evader_move is not None
    state = replace(
        state,
        evader_pos=state.pending_evader_move,
        pursuer_pos=apply_move(state.pursuer_pos, lane),
        pending_evader_move=None,
    )
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug("Resolved turn %d: %s", state.turn, dict(state.description))
    return _after_resolution(state)


def _after_resolution(state: State) -> State:
    """Run the post-resolution systems.

    The order matters: the streak feeds the capture check, capture is
    checked before the turn limit, and the memory refresh reads the turn
    number before :func:`turn_system` increments it.
    """
    state = lock_system(state)
    state = capture_system(state)
    state = survival_system(state)
    state = memory_system(state)
    state = turn_system(state)
    return state
