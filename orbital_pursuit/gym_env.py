"""Gymnasium environment wrapper for Orbital Pursuit.

The learner controls one role and the bundled heuristic AI plays the other.
One environment step is one full turn: both commits and the resolution.

Observation schema (all ``int64``):

``{"self": (x, y), "opponent": (x, y), "last_observed": (x, y),
"lock_streak": n, "turn": n, "visible": 0/1, "contact_alert": 0/1}``

The learner only sees what its role would. An Evader learner sees the
Pursuer exactly. A Pursuer learner sees the Evader only on visible turns
(``opponent`` is ``(-1, -1)`` otherwise) and never the committed Evader move.

Reward is ``+1`` when the learner's role wins, ``-1`` when it loses and ``0``
otherwise; ``terminated`` is set on game over. Illegal actions are replaced
by ``Lane.STAY`` (always legal) and flagged with ``info["illegal_action"]``.

Usage:

``env = OrbitalPursuitEnv(role=Role.EVADER, seed=0)``
"""

import random
from typing import Any, Dict, Optional, Tuple

import gymnasium as gym
import numpy as np
from gymnasium import spaces

from orbital_pursuit.actions import NEUTRAL_LANE, Lane
from orbital_pursuit.ai import choose_move
from orbital_pursuit.ai.policy import PolicyLookup
from orbital_pursuit.config import DEFAULT_CONFIG, GameConfig
from orbital_pursuit.moves import is_legal, legal_lanes
from orbital_pursuit.state import State, initial_state
from orbital_pursuit.step import commit_evader_move, commit_pursuer_move
from orbital_pursuit.types import Role, VisibilityFn, opponent
from orbital_pursuit.view import pursuer_view, snapshot, snapshot_dict

ObsType = Dict[str, Any]

HIDDEN = (-1, -1)


def _pos_array(x: int, y: int) -> np.ndarray:
    return np.array([x, y], dtype=np.int64)


def observation_dict(state: State, role: Role) -> ObsType:
    """Observation of ``state`` restricted to ``role``'s information set."""
    if role == Role.PURSUER:
        view = pursuer_view(state)
        seen = view.evader_pos
        return {
            "self": _pos_array(view.pursuer_pos.x, view.pursuer_pos.y),
            "opponent": _pos_array(*((seen.x, seen.y) if seen else HIDDEN)),
            "last_observed": _pos_array(
                view.last_observed_evader_pos.x, view.last_observed_evader_pos.y
            ),
            "lock_streak": np.int64(view.lock_streak),
            "turn": np.int64(view.turn),
            "visible": np.int64(view.visible),
            "contact_alert": np.int64(view.contact_alert),
        }
    snap = snapshot(state)
    return {
        "self": _pos_array(snap.evader_pos.x, snap.evader_pos.y),
        "opponent": _pos_array(snap.pursuer_pos.x, snap.pursuer_pos.y),
        "last_observed": _pos_array(
            snap.last_observed_evader_pos.x, snap.last_observed_evader_pos.y
        ),
        "lock_streak": np.int64(snap.lock_streak),
        "turn": np.int64(snap.turn),
        "visible": np.int64(snap.visible),
        "contact_alert": np.int64(snap.contact_alert),
    }


class OrbitalPursuitEnv(gym.Env[ObsType, np.integer]):
    """Single-learner ``Env`` against the heuristic opponent.

    Args:
        role: Role controlled by the learner.
        config: Board and rule constants.
        policy: Optional Evader policy table used when the opponent is the Evader.
        visibility_fn: Overrides the config's visibility mode.
        seed: Seed for the opponent's tie-break RNG.
    """

    metadata = {"render_modes": []}

    def __init__(
        self,
        role: Role = Role.EVADER,
        config: GameConfig = DEFAULT_CONFIG,
        policy: Optional[PolicyLookup] = None,
        visibility_fn: Optional[VisibilityFn] = None,
        seed: Optional[int] = None,
    ):
        self.role = role
        self.config = config
        self.policy = policy
        self._visibility_fn = visibility_fn
        self._rng = random.Random(seed)
        self.state: Optional[State] = None

        def int_box(low: int, high: int, shape: Tuple[int, ...] = ()) -> spaces.Box:
            return spaces.Box(low=low, high=high, shape=shape, dtype=np.int64)

        max_coord = max(config.width, config.lanes) - 1
        self.observation_space = spaces.Dict(
            {
                "self": int_box(-1, max_coord, (2,)),
                "opponent": int_box(-1, max_coord, (2,)),
                "last_observed": int_box(-1, max_coord, (2,)),
                "lock_streak": int_box(0, config.win_time),
                "turn": int_box(1, config.max_turns),
                "visible": int_box(0, 1),
                "contact_alert": int_box(0, 1),
            }
        )
        self.action_space = spaces.Discrete(len(Lane))

        self.reset(seed=seed)

    def reset(
        self, *, seed: Optional[int] = None, options: Optional[Dict[str, object]] = None
    ) -> Tuple[ObsType, Dict[str, object]]:
        """Start a new match. ``seed`` reseeds the opponent RNG when given."""
        super().reset(seed=seed)
        if seed is not None:
            self._rng = random.Random(seed)
        self.state = initial_state(self.config, self._visibility_fn)
        return self._get_obs(), self._get_info()

    def step(
        self, action: np.integer
    ) -> Tuple[ObsType, float, bool, bool, Dict[str, object]]:
        """Play one full turn with the learner's lane.

        Raises:
            ValueError: If ``action`` is outside the action space.
        """
        assert self.state is not None
        if not self.action_space.contains(int(action)):
            raise ValueError(f"Invalid action: {action}")
        if self.state.is_terminal:
            return self._get_obs(), 0.0, True, False, self._get_info()

        lane = int(action)
        own_x = self.state.position_of(self.role).x
        illegal = not is_legal(self.config, self.role, own_x, lane)
        if illegal:
            lane = NEUTRAL_LANE

        if self.role == Role.EVADER:
            self.state = commit_evader_move(self.state, lane)
            their_lane = choose_move(Role.PURSUER, self.state, rng=self._rng)
            self.state = commit_pursuer_move(self.state, their_lane)
        else:
            their_lane = choose_move(
                Role.EVADER, self.state, policy=self.policy, rng=self._rng
            )
            self.state = commit_evader_move(self.state, their_lane)
            self.state = commit_pursuer_move(self.state, lane)

        terminated = self.state.is_terminal
        reward = 0.0
        if terminated:
            reward = 1.0 if self.state.winner == self.role else -1.0
        info = self._get_info()
        info["illegal_action"] = illegal
        return self._get_obs(), reward, terminated, False, info

    def action_masks(self) -> np.ndarray:
        """Boolean mask of the learner's legal lanes."""
        assert self.state is not None
        lanes = legal_lanes(
            self.config, self.role, self.state.position_of(self.role).x
        )
        return np.array([lane in lanes for lane in Lane], dtype=bool)

    @property
    def opponent_role(self) -> Role:
        return opponent(self.role)

    def _get_obs(self) -> ObsType:
        assert self.state is not None
        return observation_dict(self.state, self.role)

    def _get_info(self) -> Dict[str, object]:
        """Phase and winner (no hidden information)."""
        assert self.state is not None
        snap = snapshot_dict(snapshot(self.state))
        return {"phase": snap["phase"], "winner": snap["winner"]}
