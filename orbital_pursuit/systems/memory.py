"""Pursuer memory system.

Refreshes ``last_observed_evader_pos`` once a turn's positions are final.
The refresh uses the visibility of the turn *whose moves were just made*
(``state.turn`` before the counter is incremented): if the Pursuer could see
during that turn it now remembers where the Evader ended up, otherwise the
memory stays frozen at the last sighting.
"""

from dataclasses import replace

from orbital_pursuit.state import State


def memory_system(state: State) -> State:
    """Record the Evader's resolved position if the completed turn was visible."""
    if state.is_terminal:
        return state
    if state.visibility_fn(state.turn):
        return replace(state, last_observed_evader_pos=state.evader_pos)
    return state
