"""Evader decision procedure.

Order of preference:

1. The injected policy table, if it has a *legal* lane for the current key.
2. A one-ply greedy heuristic scoring each legal lane by
   ``10 * distance_to_pursuer - |x - band_centre|``: stay far from the
   Pursuer, with a weak pull towards the centre of the band so the Evader is
   not pinned against its edge. Exact ties are broken uniformly at random.
"""

import logging
import random
from typing import Dict, Optional

from pyrsistent import pmap
from pyrsistent.typing import PMap

from orbital_pursuit.ai.policy import (
    PolicyLookup,
    make_policy_key,
    policy_key,
    policy_or_null,
)
from orbital_pursuit.components import Position
from orbital_pursuit.config import DEFAULT_CONFIG, GameConfig
from orbital_pursuit.moves import apply_move, is_legal, legal_lanes_or_neutral
from orbital_pursuit.state import State
from orbital_pursuit.types import PolicyKey, Role
from orbital_pursuit.utils.math import best_keys, chebyshev_distance, column_distance

logger = logging.getLogger(__name__)

DISTANCE_WEIGHT = 10


def evader_lane_scores(
    config: GameConfig, evader_pos: Position, pursuer_pos: Position
) -> Dict[int, int]:
    """Heuristic score of every legal Evader lane."""
    center = Position(config.evader_center_x, evader_pos.y)
    scores: Dict[int, int] = {}
    for lane in legal_lanes_or_neutral(config, Role.EVADER, evader_pos.x):
        next_pos = apply_move(evader_pos, lane)
        scores[lane] = DISTANCE_WEIGHT * chebyshev_distance(
            next_pos, pursuer_pos
        ) - column_distance(next_pos, center)
    return scores


def choose_evader_move(
    state: State,
    policy: Optional[PolicyLookup] = None,
    rng: Optional[random.Random] = None,
) -> int:
    """Pick the Evader's lane for ``state``."""
    lane = policy_or_null(policy).lookup(policy_key(state))
    if lane is not None and is_legal(
        state.config, Role.EVADER, state.evader_pos.x, lane
    ):
        logger.debug("Evader policy lane %d on turn %d", lane, state.turn)
        return lane

    scores = evader_lane_scores(state.config, state.evader_pos, state.pursuer_pos)
    best = best_keys(scores)
    return (rng or random).choice(best)


def build_heuristic_table(config: GameConfig = DEFAULT_CONFIG) -> PMap[PolicyKey, int]:
    """Tabulate the Evader heuristic over every non-terminal decision point.

    Ties go to the lowest lane so the table is deterministic. The result is a
    baseline policy file to be replaced by a trained one.
    """
    table: Dict[PolicyKey, int] = {}
    for ex in range(config.evader_min_x, config.evader_max_x + 1):
        for ey in range(config.lanes):
            for px in range(config.width):
                for py in range(config.lanes):
                    evader_pos, pursuer_pos = Position(ex, ey), Position(px, py)
                    scores = evader_lane_scores(config, evader_pos, pursuer_pos)
                    lane = best_keys(scores)[0]
                    for streak in range(config.win_time):
                        for turn in range(1, config.max_turns + 1):
                            key = make_policy_key(
                                evader_pos, pursuer_pos, streak, turn
                            )
                            table[key] = lane
    return pmap(table)
