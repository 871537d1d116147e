import numpy as np
import pytest

from orbital_pursuit.actions import Lane
from orbital_pursuit.gym_env import OrbitalPursuitEnv
from orbital_pursuit.types import Role


def test_reset_observation_matches_space() -> None:
    env = OrbitalPursuitEnv(role=Role.EVADER, seed=0)
    obs, info = env.reset(seed=0)
    assert env.observation_space.contains(obs)
    assert obs["self"].tolist() == [7, 2]
    assert obs["opponent"].tolist() == [1, 2]
    assert int(obs["turn"]) == 1
    assert info == {"phase": "playing", "winner": None}


def test_step_plays_a_full_turn() -> None:
    env = OrbitalPursuitEnv(role=Role.EVADER, seed=0)
    obs, reward, terminated, truncated, info = env.step(np.int64(Lane.RIGHT_2))
    assert obs["self"].tolist() == [9, 4]
    assert int(obs["turn"]) == 2
    assert reward == 0.0
    assert not terminated and not truncated
    assert info["illegal_action"] is False
    assert env.observation_space.contains(obs)


@pytest.mark.parametrize("role", [Role.EVADER, Role.PURSUER])
def test_episode_terminates_with_signed_reward(role: Role) -> None:
    env = OrbitalPursuitEnv(role=role, seed=1)
    terminated = False
    reward = 0.0
    steps = 0
    while not terminated:
        obs, reward, terminated, _, info = env.step(np.int64(Lane.STAY))
        assert env.observation_space.contains(obs)
        steps += 1
        assert steps <= 20
    assert reward in (1.0, -1.0)
    expected = 1.0 if info["winner"] == str(role) else -1.0
    assert reward == expected
    # stepping a finished episode is inert
    _, reward, terminated, _, _ = env.step(np.int64(Lane.STAY))
    assert terminated and reward == 0.0


def test_pursuer_observation_hides_evader_on_hidden_turns() -> None:
    env = OrbitalPursuitEnv(role=Role.PURSUER, seed=2)
    env.step(np.int64(Lane.STAY))
    obs, *_ = env.step(np.int64(Lane.STAY))
    assert int(obs["turn"]) == 3
    assert int(obs["visible"]) == 0
    assert obs["opponent"].tolist() == [-1, -1]
    assert env.state is not None
    assert obs["last_observed"].tolist() == [
        env.state.last_observed_evader_pos.x,
        env.state.last_observed_evader_pos.y,
    ]


def test_illegal_action_is_replaced_by_stay() -> None:
    env = OrbitalPursuitEnv(role=Role.PURSUER, seed=3)
    obs, _, _, _, info = env.step(np.int64(Lane.LEFT_2))  # column 1 - 2 < 0
    assert info["illegal_action"] is True
    assert obs["self"].tolist() == [1, 2]


def test_action_masks() -> None:
    assert OrbitalPursuitEnv(role=Role.EVADER).action_masks().tolist() == [
        True,
        True,
        True,
        True,
        True,
    ]
    assert OrbitalPursuitEnv(role=Role.PURSUER).action_masks().tolist() == [
        False,
        True,
        True,
        True,
        True,
    ]


def test_out_of_space_action_raises() -> None:
    env = OrbitalPursuitEnv()
    with pytest.raises(ValueError):
        env.step(np.int64(9))
