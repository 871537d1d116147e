"""Immutable match ``State``.

The :class:`State` is the whole match at one instant. It is only ever changed
by :func:`orbital_pursuit.step.step`, which returns a *new* value for every
accepted command; rejected commands hand back the same object. Keeping all
fields on one frozen value means the position, streak, memory and phase
fields cannot drift out of sync with each other.

Design notes:

* The turn stage is not stored. ``pending_evader_move`` is set exactly when
  the Evader has committed and the Pursuer has not, so the stage is derived
  from it.
* ``pending_evader_move`` is the Evader's *secret*. Anything computing
  Pursuer-facing data goes through :func:`orbital_pursuit.view.pursuer_view`,
  which has no access to it.
* ``winner`` is only set together with ``phase == Phase.GAME_OVER``.
"""

from dataclasses import dataclass
from typing import Any, Optional

from pyrsistent import PMap, pmap

from orbital_pursuit.components import Position
from orbital_pursuit.config import DEFAULT_CONFIG, GameConfig
from orbital_pursuit.observability import VISIBILITY_FN_REGISTRY
from orbital_pursuit.types import Phase, Role, TurnStage, VisibilityFn


@dataclass(frozen=True)
class State:
    """Immutable match state.

    Attributes:
        config (GameConfig): Board and rule constants.
        visibility_fn (VisibilityFn): Turn number to Pursuer vision predicate.
        evader_pos (Position): Evader's true position.
        pursuer_pos (Position): Pursuer's position.
        last_observed_evader_pos (Position): Latest Evader position the
            Pursuer actually saw.
        pending_evader_move (Position | None): Evader destination committed
            for the current turn but not yet resolved.
        turn (int): Turn counter (1-based).
        lock_streak (int): Consecutive resolved turns ending within lock range.
        phase (Phase): ``PLAYING`` or ``GAME_OVER``.
        winner (Role | None): Winning role once the match is over.
    """

    config: GameConfig
    visibility_fn: VisibilityFn
    evader_pos: Position
    pursuer_pos: Position
    last_observed_evader_pos: Position
    pending_evader_move: Optional[Position] = None
    turn: int = 1
    lock_streak: int = 0
    phase: Phase = Phase.PLAYING
    winner: Optional[Role] = None

    @property
    def stage(self) -> TurnStage:
        """Which commit the current turn is waiting for."""
        if self.pending_evader_move is None:
            return TurnStage.AWAITING_EVADER_MOVE
        return TurnStage.AWAITING_PURSUER_MOVE

    @property
    def to_move(self) -> Optional[Role]:
        """Role expected to commit next, or ``None`` once the match is over."""
        if self.is_terminal:
            return None
        if self.stage == TurnStage.AWAITING_EVADER_MOVE:
            return Role.EVADER
        return Role.PURSUER

    @property
    def is_terminal(self) -> bool:
        return self.phase == Phase.GAME_OVER

    def position_of(self, role: Role) -> Position:
        """Current (resolved) position of ``role``."""
        return self.evader_pos if role == Role.EVADER else self.pursuer_pos

    @property
    def description(self) -> PMap[str, Any]:
        """Sparse serialization of populated fields.

        Skips ``None`` values and the callable ``visibility_fn``; handy for
        logging and debugging.
        """
        description: PMap[str, Any] = pmap()
        for field in self.__dataclass_fields__:
            value = getattr(self, field)
            if value is None or callable(value):
                continue
            description = description.set(field, value)
        return description


def initial_state(
    config: GameConfig = DEFAULT_CONFIG,
    visibility_fn: Optional[VisibilityFn] = None,
) -> State:
    """Fresh match state for ``config``.

    Args:
        config: Board and rule constants.
        visibility_fn: Overrides the visibility mode named by
            ``config.visibility`` when given.
    """
    if visibility_fn is None:
        visibility_fn = VISIBILITY_FN_REGISTRY[config.visibility]
    return State(
        config=config,
        visibility_fn=visibility_fn,
        evader_pos=config.evader_start,
        pursuer_pos=config.pursuer_start,
        last_observed_evader_pos=config.evader_start,
    )
