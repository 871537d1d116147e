import pytest

from orbital_pursuit.systems.lock import in_lock_range, lock_system
from tests.test_utils import make_state


@pytest.mark.parametrize(
    "evader, pursuer, streak, expected",
    [
        ((7, 2), (7, 2), 0, 1),  # same tile
        ((7, 2), (6, 1), 0, 1),  # diagonal neighbour
        ((7, 2), (8, 2), 1, 2),  # streak keeps growing
        ((7, 2), (5, 2), 1, 0),  # two columns away breaks it
        ((7, 0), (7, 2), 3, 0),  # two lanes away breaks it
    ],
)
def test_lock_system(evader, pursuer, streak: int, expected: int) -> None:
    state = make_state(evader=evader, pursuer=pursuer, lock_streak=streak)
    assert lock_system(state).lock_streak == expected


def test_in_lock_range() -> None:
    assert in_lock_range(make_state(evader=(7, 2), pursuer=(8, 3)))
    assert not in_lock_range(make_state(evader=(7, 2), pursuer=(9, 3)))
