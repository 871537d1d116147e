"""Position component.

Immutable integer grid coordinates shared by both roles. A new ``Position`` is
produced by every move computation; nothing mutates one in place.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Position:
    """Grid coordinate.

    Attributes:
        x: Column index (0 at left).
        y: Orbital lane index (0 at top).
    """

    x: int
    y: int
