"""Bundled AI opponents.

:func:`choose_move` is the single entry point used by the controller and the
Gymnasium environment. Both heuristics are one-ply greedy; the weighting
constants in :mod:`orbital_pursuit.ai.evader` and
:mod:`orbital_pursuit.ai.pursuer` are the whole definition of their strength.

``rng`` is anything with a ``choice`` method (normally ``random.Random``); pass
a seeded instance to make tie-breaks reproducible.
"""

import random
from typing import Optional

from orbital_pursuit.ai.evader import choose_evader_move
from orbital_pursuit.ai.policy import PolicyLookup
from orbital_pursuit.ai.pursuer import choose_pursuer_move
from orbital_pursuit.state import State
from orbital_pursuit.types import Role


def choose_move(
    role: Role,
    state: State,
    policy: Optional[PolicyLookup] = None,
    rng: Optional[random.Random] = None,
) -> int:
    """Return a legal lane for ``role`` (the neutral lane if none is legal).

    ``policy`` is only consulted for the Evader.
    """
    if role == Role.EVADER:
        return choose_evader_move(state, policy=policy, rng=rng)
    return choose_pursuer_move(state, rng=rng)


__all__ = ["choose_move", "choose_evader_move", "choose_pursuer_move"]
