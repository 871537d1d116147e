"""Value components shared across the engine.

Only :class:`Position` is needed today; role-specific data lives directly on
:class:`orbital_pursuit.state.State`.
"""

from .position import Position

__all__ = ["Position"]
