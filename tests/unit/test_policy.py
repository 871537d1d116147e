import json
import logging
from pathlib import Path

import pytest

from orbital_pursuit.ai.evader import build_heuristic_table
from orbital_pursuit.ai.policy import (
    NullPolicy,
    TablePolicy,
    load_policy_table,
    make_policy_key,
    parse_policy_table,
    policy_key,
    save_policy_table,
)
from orbital_pursuit.components import Position
from orbital_pursuit.config import GameConfig
from tests.test_utils import make_state


def test_policy_key_format() -> None:
    state = make_state(evader=(8, 3), pursuer=(2, 0), turn=5, lock_streak=1)
    assert policy_key(state) == "8,3,2,0,1,5"
    assert make_policy_key(Position(8, 3), Position(2, 0), 1, 5) == "8,3,2,0,1,5"


def test_null_policy_is_always_absent() -> None:
    policy = NullPolicy()
    assert policy.lookup("7,2,1,2,0,1") is None
    assert len(policy) == 0


def test_table_policy_lookup() -> None:
    policy = TablePolicy({"7,2,1,2,0,1": 3})
    assert policy.lookup("7,2,1,2,0,1") == 3
    assert policy.lookup("7,2,1,2,0,2") is None
    assert len(policy) == 1


def test_table_policy_is_read_only_copy() -> None:
    source = {"7,2,1,2,0,1": 3}
    policy = TablePolicy(source)
    source["7,2,1,2,0,1"] = 0
    assert policy.lookup("7,2,1,2,0,1") == 3
    with pytest.raises(TypeError):
        policy.table["7,2,1,2,0,1"] = 1  # type: ignore[index]


def test_parse_drops_malformed_entries() -> None:
    table = parse_policy_table(
        {"a": 1, "b": 7, "c": True, "d": "2", "e": -1, "f": 4, "g": 2.0}
    )
    assert table == {"a": 1, "f": 4}


def test_parse_rejects_non_object() -> None:
    with pytest.raises(ValueError):
        parse_policy_table([1, 2, 3])


def test_load_policy_table(tmp_path: Path) -> None:
    path = tmp_path / "policy.json"
    path.write_text(json.dumps({"7,2,1,2,0,1": 2, "bad": 9}))
    policy = load_policy_table(path)
    assert isinstance(policy, TablePolicy)
    assert policy.lookup("7,2,1,2,0,1") == 2
    assert policy.lookup("bad") is None


@pytest.mark.parametrize(
    "content",
    [
        "{not json",
        "[1, 2, 3]",
        "",
    ],
)
def test_load_policy_table_degrades_on_bad_content(
    tmp_path: Path, content: str, caplog: pytest.LogCaptureFixture
) -> None:
    path = tmp_path / "policy.json"
    path.write_text(content)
    with caplog.at_level(logging.WARNING, logger="orbital_pursuit.ai.policy"):
        policy = load_policy_table(path)
    assert isinstance(policy, NullPolicy)
    assert "unavailable" in caplog.text


def test_load_policy_table_missing_file(tmp_path: Path) -> None:
    assert isinstance(load_policy_table(tmp_path / "missing.json"), NullPolicy)


def test_save_then_load(tmp_path: Path) -> None:
    path = tmp_path / "policy.json"
    save_policy_table({"7,2,1,2,0,1": 4}, path)
    assert json.loads(path.read_text()) == {"7,2,1,2,0,1": 4}
    assert load_policy_table(path).lookup("7,2,1,2,0,1") == 4


def test_build_heuristic_table() -> None:
    config = GameConfig(max_turns=3)
    table = build_heuristic_table(config)
    # 5 band columns * 5 lanes * 12 columns * 5 lanes * 2 streaks * 3 turns
    assert len(table) == 5 * 5 * 12 * 5 * 2 * 3
    assert table["7,2,1,2,0,1"] == 4
    # tie between lanes 0 and 4 resolves to the lowest lane
    assert table["7,2,7,2,1,3"] == 0
    assert "7,2,1,2,0,4" not in table
