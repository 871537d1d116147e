"""Orbital Pursuit: a simultaneous-move pursuit-evasion game engine.

The engine is a pure reducer (:func:`orbital_pursuit.step.step`) over an
immutable :class:`orbital_pursuit.state.State`, with a partial-observability
model for the Pursuer and one-ply heuristic AI opponents.
"""
