"""Read-only views of the match for presentation and AI code.

Two views are provided:

* :class:`MatchSnapshot`: the full render-oriented snapshot. The Evader's
  pending move is reduced to a presence flag (``evader_committed``).
* :class:`PursuerView`: the Pursuer's information set. The true Evader
  position is included only on visible turns and the pending move never is,
  so any code built on this view plans blind by construction.

``snapshot_dict`` turns a snapshot into a JSON-friendly dict.
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional

from orbital_pursuit.components import Position
from orbital_pursuit.observability import contact_alert
from orbital_pursuit.state import State
from orbital_pursuit.types import Phase, Role


@dataclass(frozen=True)
class MatchSnapshot:
    evader_pos: Position
    pursuer_pos: Position
    last_observed_evader_pos: Position
    evader_committed: bool
    turn: int
    lock_streak: int
    phase: Phase
    winner: Optional[Role]
    to_move: Optional[Role]
    visible: bool
    contact_alert: bool


@dataclass(frozen=True)
class PursuerView:
    """What the Pursuer knows when choosing its move.

    Attributes:
        pursuer_pos: Pursuer's own position.
        evader_pos: True Evader position on visible turns, else ``None``.
        last_observed_evader_pos: Most recent sighting of the Evader.
        visible: Whether the sensor has exact vision this turn.
        contact_alert: Degraded-sensor proximity flag (hidden turns only).
        lock_streak: Current lock streak.
        turn: Current turn number.
        win_time: Streak needed to win.
    """

    pursuer_pos: Position
    evader_pos: Optional[Position]
    last_observed_evader_pos: Position
    visible: bool
    contact_alert: bool
    lock_streak: int
    turn: int
    win_time: int

    @property
    def target(self) -> Position:
        """Best known Evader position: exact when visible, else remembered."""
        if self.evader_pos is not None:
            return self.evader_pos
        return self.last_observed_evader_pos


def visible_this_turn(state: State) -> bool:
    return state.visibility_fn(state.turn)


def contact_alert_this_turn(state: State) -> bool:
    return contact_alert(state.evader_pos, state.pursuer_pos, visible_this_turn(state))


def snapshot(state: State) -> MatchSnapshot:
    """Build the render-oriented snapshot of ``state``."""
    return MatchSnapshot(
        evader_pos=state.evader_pos,
        pursuer_pos=state.pursuer_pos,
        last_observed_evader_pos=state.last_observed_evader_pos,
        evader_committed=state.pending_evader_move is not None,
        turn=state.turn,
        lock_streak=state.lock_streak,
        phase=state.phase,
        winner=state.winner,
        to_move=state.to_move,
        visible=visible_this_turn(state),
        contact_alert=contact_alert_this_turn(state),
    )


def pursuer_view(state: State) -> PursuerView:
    """Build the Pursuer's information set from ``state``."""
    visible = visible_this_turn(state)
    return PursuerView(
        pursuer_pos=state.pursuer_pos,
        evader_pos=state.evader_pos if visible else None,
        last_observed_evader_pos=state.last_observed_evader_pos,
        visible=visible,
        contact_alert=contact_alert_this_turn(state),
        lock_streak=state.lock_streak,
        turn=state.turn,
        win_time=state.config.win_time,
    )


def _position_dict(pos: Optional[Position]) -> Optional[Dict[str, int]]:
    if pos is None:
        return None
    return {"x": int(pos.x), "y": int(pos.y)}


def snapshot_dict(snap: MatchSnapshot) -> Dict[str, Any]:
    """JSON-friendly form of a snapshot (enums as their string values)."""
    return {
        "evader_pos": _position_dict(snap.evader_pos),
        "pursuer_pos": _position_dict(snap.pursuer_pos),
        "last_observed_evader_pos": _position_dict(snap.last_observed_evader_pos),
        "evader_committed": snap.evader_committed,
        "turn": int(snap.turn),
        "lock_streak": int(snap.lock_streak),
        "phase": str(snap.phase),
        "winner": str(snap.winner) if snap.winner is not None else None,
        "to_move": str(snap.to_move) if snap.to_move is not None else None,
        "visible": snap.visible,
        "contact_alert": snap.contact_alert,
    }
