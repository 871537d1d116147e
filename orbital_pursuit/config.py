"""Match configuration.

:class:`GameConfig` bundles the board geometry and rule constants. The
defaults reproduce the standard match: a 12 column board with 5 orbital lanes,
an Evader confined to columns 5-9, a lock held for 2 turns to win and a
20 turn time limit.

Configs are validated on construction so the engine can assume, for example,
that both starting positions are legal for their role.
"""

from dataclasses import dataclass, field, fields
from typing import Any, Mapping, Sequence

from orbital_pursuit.actions import Lane
from orbital_pursuit.components import Position
from orbital_pursuit.observability import VISIBILITY_FN_REGISTRY


@dataclass(frozen=True)
class GameConfig:
    """Board and rule constants for a match.

    Attributes:
        width: Number of columns on the board.
        lanes: Number of orbital lanes; must equal the number of lane choices.
        evader_min_x: Leftmost column the Evader may occupy (inclusive).
        evader_max_x: Rightmost column the Evader may occupy (inclusive).
        win_time: Consecutive locked turns the Pursuer needs to win.
        max_turns: Last playable turn; surviving it wins for the Evader.
        evader_start: Evader starting position.
        pursuer_start: Pursuer starting position.
        visibility: Key into ``VISIBILITY_FN_REGISTRY``.
    """

    width: int = 12
    lanes: int = 5
    evader_min_x: int = 5
    evader_max_x: int = 9
    win_time: int = 2
    max_turns: int = 20
    evader_start: Position = field(default_factory=lambda: Position(7, 2))
    pursuer_start: Position = field(default_factory=lambda: Position(1, 2))
    visibility: str = "cycle"

    def __post_init__(self) -> None:
        if self.width <= 0:
            raise ValueError("Board width must be positive")
        if self.lanes != len(Lane):
            raise ValueError(f"Board must have exactly {len(Lane)} lanes")
        if not (0 <= self.evader_min_x <= self.evader_max_x < self.width):
            raise ValueError("Evader column band must lie inside the board")
        if self.evader_max_x - self.evader_min_x < len(Lane) - 1:
            raise ValueError("Evader column band is narrower than the lane drift span")
        if self.win_time <= 0 or self.max_turns <= 0:
            raise ValueError("win_time and max_turns must be positive")
        if not (
            self.evader_min_x <= self.evader_start.x <= self.evader_max_x
            and 0 <= self.evader_start.y < self.lanes
        ):
            raise ValueError("Evader must start inside its column band")
        if not (
            0 <= self.pursuer_start.x < self.width
            and 0 <= self.pursuer_start.y < self.lanes
        ):
            raise ValueError("Pursuer must start on the board")
        if self.visibility not in VISIBILITY_FN_REGISTRY:
            raise ValueError(f"Unknown visibility mode: {self.visibility!r}")

    @property
    def evader_center_x(self) -> int:
        """Centre column of the Evader band (the heuristic's centring anchor)."""
        return (self.evader_min_x + self.evader_max_x) // 2

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "GameConfig":
        """Build a config from a plain mapping such as parsed JSON.

        Start positions may be given as ``[x, y]`` pairs. Unknown keys raise
        ``ValueError`` rather than being ignored.
        """
        known = {f.name for f in fields(cls)}
        unknown = set(data) - known
        if unknown:
            raise ValueError(f"Unknown config keys: {sorted(unknown)}")
        kwargs = dict(data)
        for key in ("evader_start", "pursuer_start"):
            if key in kwargs and not isinstance(kwargs[key], Position):
                kwargs[key] = _to_position(kwargs[key])
        return cls(**kwargs)


def _to_position(value: Any) -> Position:
    if not isinstance(value, Sequence) or len(value) != 2:
        raise ValueError(f"Expected an [x, y] pair, got {value!r}")
    return Position(int(value[0]), int(value[1]))


DEFAULT_CONFIG = GameConfig()
