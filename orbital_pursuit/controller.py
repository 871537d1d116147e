"""Match controller.

Owns the round trip between a presentation layer and the engine: which mode
is being played, which side is human, when the AI moves. It holds the current
:class:`~orbital_pursuit.state.State` and replaces it with the reducer's
output after every accepted command.

AI moves are computed from the state at the moment :meth:`play_ai_turn` is
called and committed immediately. Any "thinking" delay belongs to the caller,
which must not commit anything else in between.
"""

import logging
import random
from enum import StrEnum, auto
from typing import Optional

from pyrsistent import pset
from pyrsistent.typing import PSet

from orbital_pursuit.actions import EvaderMove, PursuerMove, ResetMatch
from orbital_pursuit.ai import choose_move
from orbital_pursuit.ai.policy import PolicyLookup
from orbital_pursuit.config import DEFAULT_CONFIG, GameConfig
from orbital_pursuit.moves import legal_lanes
from orbital_pursuit.state import State, initial_state
from orbital_pursuit.step import step
from orbital_pursuit.types import Role, VisibilityFn, opponent
from orbital_pursuit.view import MatchSnapshot, snapshot

logger = logging.getLogger(__name__)


class Mode(StrEnum):
    """How the two roles are controlled."""

    HOTSEAT = auto()
    AI = auto()


class MatchController:
    """Stateful wrapper orchestrating turns over the pure reducer.

    Args:
        config: Board and rule constants for every match started here.
        policy: Optional Evader policy table for the AI.
        rng: Random source for AI tie-breaks.
        visibility_fn: Overrides the config's visibility mode.
    """

    def __init__(
        self,
        config: GameConfig = DEFAULT_CONFIG,
        policy: Optional[PolicyLookup] = None,
        rng: Optional[random.Random] = None,
        visibility_fn: Optional[VisibilityFn] = None,
    ) -> None:
        self.config = config
        self.policy = policy
        self.rng = rng if rng is not None else random.Random()
        self.state: State = initial_state(config, visibility_fn)
        self.mode: Mode = Mode.HOTSEAT
        self.human_role: Optional[Role] = None

    def start_hotseat(self) -> State:
        """Two humans share the controls."""
        self.mode = Mode.HOTSEAT
        self.human_role = None
        return self.reset()

    def start_ai_match(self, human_role: Role) -> State:
        """Human plays ``human_role``; the AI plays the other side."""
        self.mode = Mode.AI
        self.human_role = human_role
        return self.reset()

    def reset(self) -> State:
        self.state = step(self.state, ResetMatch())
        logger.debug("Match reset (mode=%s, human=%s)", self.mode, self.human_role)
        return self.state

    @property
    def ai_role(self) -> Optional[Role]:
        if self.mode != Mode.AI or self.human_role is None:
            return None
        return opponent(self.human_role)

    @property
    def is_human_turn(self) -> bool:
        to_move = self.state.to_move
        if to_move is None:
            return False
        if self.mode == Mode.HOTSEAT:
            return True
        return to_move == self.human_role

    @property
    def is_ai_turn(self) -> bool:
        return self.ai_role is not None and self.state.to_move == self.ai_role

    def legal_lanes(self) -> PSet[int]:
        """Lanes the side to move may choose (empty once the match is over)."""
        role = self.state.to_move
        if role is None:
            return pset()
        return legal_lanes(self.config, role, self.state.position_of(role).x)

    def submit(self, lane: int) -> bool:
        """Commit a human move for the side to move.

        Returns:
            bool: True if the engine accepted the move.
        """
        if not self.is_human_turn:
            return False
        return self._commit(lane)

    def play_ai_turn(self) -> Optional[int]:
        """Compute and commit the AI's lane if it is the AI's turn."""
        role = self.ai_role
        if role is None or not self.is_ai_turn:
            return None
        lane = choose_move(role, self.state, policy=self.policy, rng=self.rng)
        self._commit(lane)
        return lane

    def advance(self) -> State:
        """Play AI moves until a human must act or the match ends."""
        while self.is_ai_turn:
            self.play_ai_turn()
        return self.state

    def snapshot(self) -> MatchSnapshot:
        return snapshot(self.state)

    def _commit(self, lane: int) -> bool:
        role = self.state.to_move
        command = EvaderMove(lane) if role == Role.EVADER else PursuerMove(lane)
        next_state = step(self.state, command)
        accepted = next_state is not self.state
        self.state = next_state
        return accepted
