"""Pursuer decision procedure.

Always heuristic and always computed from :func:`orbital_pursuit.view.pursuer_view`,
so the Evader's pending move is out of reach. Each legal lane is scored
against the *target*: the Evader's true position on visible turns, the last
sighting otherwise.

* ``-10 * d - |x - target.x|`` where ``d`` is the Chebyshev distance from the
  resulting position to the target;
* ``+120`` when ``d <= 1`` (entering the lock zone), and ``+100`` more when
  that lock would complete the winning streak;
* on hidden turns with an active contact alert, ``+25 - 5 * m`` where ``m``
  is how far the lane moves the Pursuer from where it stands. The Evader is
  known to be close but not exactly where, so holding position around the
  contact zone is favoured over chasing a stale sighting.

Exact ties are broken uniformly at random.
"""

import logging
import random
from typing import Dict, Optional

from orbital_pursuit.config import GameConfig
from orbital_pursuit.moves import apply_move, legal_lanes_or_neutral
from orbital_pursuit.state import State
from orbital_pursuit.types import Role
from orbital_pursuit.utils.math import best_keys, chebyshev_distance, column_distance
from orbital_pursuit.view import PursuerView, pursuer_view

logger = logging.getLogger(__name__)

DISTANCE_WEIGHT = 10
LOCK_BONUS = 120
WINNING_LOCK_BONUS = 100
CONTACT_BONUS = 25
CONTACT_DRIFT_PENALTY = 5


def pursuer_lane_scores(config: GameConfig, view: PursuerView) -> Dict[int, int]:
    """Heuristic score of every legal Pursuer lane given the Pursuer's view."""
    target = view.target
    searching = not view.visible and view.contact_alert
    scores: Dict[int, int] = {}
    for lane in legal_lanes_or_neutral(config, Role.PURSUER, view.pursuer_pos.x):
        next_pos = apply_move(view.pursuer_pos, lane)
        dist = chebyshev_distance(target, next_pos)
        score = -DISTANCE_WEIGHT * dist - column_distance(next_pos, target)
        if dist <= 1:
            score += LOCK_BONUS
            if view.lock_streak + 1 >= view.win_time:
                score += WINNING_LOCK_BONUS
        if searching:
            score += CONTACT_BONUS - CONTACT_DRIFT_PENALTY * chebyshev_distance(
                next_pos, view.pursuer_pos
            )
        scores[lane] = score
    return scores


def choose_pursuer_move(state: State, rng: Optional[random.Random] = None) -> int:
    """Pick the Pursuer's lane for ``state``."""
    view = pursuer_view(state)
    best = best_keys(pursuer_lane_scores(state.config, view))
    lane = (rng or random).choice(best)
    logger.debug(
        "Pursuer lane %d on turn %d (visible=%s, alert=%s)",
        lane,
        view.turn,
        view.visible,
        view.contact_alert,
    )
    return lane
