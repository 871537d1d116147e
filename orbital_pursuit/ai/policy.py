"""Precomputed Evader policy tables.

A policy table maps a decision key to a lane. Keys are the comma-joined
``evaderX,evaderY,pursuerX,pursuerY,lockStreak,turn`` of the state the Evader
is deciding in. The AI only ever calls :meth:`PolicyLookup.lookup`; a missing
or unreadable table is the same as :class:`NullPolicy` and the AI falls back
to its heuristic.

Tables are read-only once loaded (stored as a ``pyrsistent`` map).
"""

import json
import logging
import os
from typing import Any, Dict, Mapping, Optional, Protocol, Union

from pyrsistent import pmap
from pyrsistent.typing import PMap

from orbital_pursuit.actions import ALL_LANES
from orbital_pursuit.components import Position
from orbital_pursuit.state import State
from orbital_pursuit.types import MaybeLane, PolicyKey

logger = logging.getLogger(__name__)

PathLike = Union[str, "os.PathLike[str]"]


class PolicyLookup(Protocol):
    """Synchronous keyed lane lookup."""

    def lookup(self, key: PolicyKey) -> MaybeLane: ...


class NullPolicy:
    """Policy that never has an answer."""

    def lookup(self, key: PolicyKey) -> MaybeLane:
        return None

    def __len__(self) -> int:
        return 0


class TablePolicy:
    """Policy backed by an immutable key to lane map."""

    def __init__(self, table: Mapping[PolicyKey, int]) -> None:
        self._table: PMap[PolicyKey, int] = pmap(table)

    def lookup(self, key: PolicyKey) -> MaybeLane:
        return self._table.get(key)

    def __len__(self) -> int:
        return len(self._table)

    @property
    def table(self) -> PMap[PolicyKey, int]:
        return self._table


def make_policy_key(
    evader_pos: Position, pursuer_pos: Position, lock_streak: int, turn: int
) -> PolicyKey:
    """Join the decision coordinates into a table key."""
    return ",".join(
        str(v)
        for v in (
            evader_pos.x,
            evader_pos.y,
            pursuer_pos.x,
            pursuer_pos.y,
            lock_streak,
            turn,
        )
    )


def policy_key(state: State) -> PolicyKey:
    """Table key for the Evader's decision in ``state``."""
    return make_policy_key(
        state.evader_pos, state.pursuer_pos, state.lock_streak, state.turn
    )


def _is_lane(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and value in ALL_LANES


def parse_policy_table(data: Any) -> Dict[PolicyKey, int]:
    """Keep the well-formed ``key -> lane`` entries of a decoded JSON object.

    Raises:
        ValueError: If ``data`` is not a JSON object.
    """
    if not isinstance(data, dict):
        raise ValueError("Policy table must be a JSON object")
    table = {k: v for k, v in data.items() if isinstance(k, str) and _is_lane(v)}
    dropped = len(data) - len(table)
    if dropped:
        logger.debug("Dropped %d malformed policy entries", dropped)
    return table


def load_policy_table(path: PathLike) -> Union[TablePolicy, NullPolicy]:
    """Load a JSON policy table, degrading to :class:`NullPolicy` on failure.

    Load failures are logged and never raised: without a table the Evader
    simply plays its heuristic.
    """
    try:
        with open(path, "r", encoding="utf-8") as fp:
            table = parse_policy_table(json.load(fp))
    except (OSError, ValueError) as exc:
        logger.warning("Policy table %s unavailable, using heuristic: %s", path, exc)
        return NullPolicy()
    logger.debug("Loaded %d policy entries from %s", len(table), path)
    return TablePolicy(table)


def save_policy_table(table: Mapping[PolicyKey, int], path: PathLike) -> None:
    """Write ``table`` as a JSON object with sorted keys."""
    with open(path, "w", encoding="utf-8") as fp:
        json.dump({k: int(v) for k, v in table.items()}, fp, sort_keys=True)


def policy_or_null(policy: Optional[PolicyLookup]) -> PolicyLookup:
    return policy if policy is not None else NullPolicy()
