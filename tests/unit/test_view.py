from dataclasses import fields

from orbital_pursuit.components import Position
from orbital_pursuit.observability import visibility_for_turn
from orbital_pursuit.state import initial_state
from orbital_pursuit.step import commit_evader_move
from orbital_pursuit.types import Phase, Role
from orbital_pursuit.view import PursuerView, pursuer_view, snapshot, snapshot_dict
from tests.test_utils import make_state


def test_initial_snapshot() -> None:
    snap = snapshot(initial_state())
    assert snap.evader_pos == Position(7, 2)
    assert snap.pursuer_pos == Position(1, 2)
    assert snap.last_observed_evader_pos == Position(7, 2)
    assert snap.evader_committed is False
    assert snap.turn == 1
    assert snap.lock_streak == 0
    assert snap.phase == Phase.PLAYING
    assert snap.winner is None
    assert snap.to_move == Role.EVADER
    assert snap.visible is True
    assert snap.contact_alert is False


def test_snapshot_hides_pending_destination() -> None:
    state = commit_evader_move(initial_state(), 4)
    snap = snapshot(state)
    assert snap.evader_committed is True
    assert snap.evader_pos == Position(7, 2)
    assert snap.to_move == Role.PURSUER
    assert {"x": 9, "y": 4} not in snapshot_dict(snap).values()


def test_snapshot_contact_alert_on_hidden_turn() -> None:
    state = make_state(
        evader=(7, 2), pursuer=(6, 3), turn=3, visibility_fn=visibility_for_turn
    )
    snap = snapshot(state)
    assert snap.visible is False
    assert snap.contact_alert is True


def test_pursuer_view_visible_turn() -> None:
    state = make_state(evader=(8, 1), pursuer=(3, 3), last_observed=(7, 2), turn=2)
    view = pursuer_view(state)
    assert view.visible is True
    assert view.evader_pos == Position(8, 1)
    assert view.target == Position(8, 1)


def test_pursuer_view_hidden_turn() -> None:
    state = make_state(
        evader=(8, 1),
        pursuer=(3, 3),
        last_observed=(7, 2),
        turn=4,
        visibility_fn=visibility_for_turn,
    )
    view = pursuer_view(state)
    assert view.visible is False
    assert view.evader_pos is None
    assert view.target == Position(7, 2)
    assert view.contact_alert is False


def test_pursuer_view_never_carries_pending_move() -> None:
    names = {f.name for f in fields(PursuerView)}
    assert "pending_evader_move" not in names
    state = commit_evader_move(initial_state(), 4)
    view = pursuer_view(state)
    assert Position(9, 4) not in (
        view.pursuer_pos,
        view.evader_pos,
        view.last_observed_evader_pos,
    )


def test_snapshot_dict() -> None:
    data = snapshot_dict(snapshot(initial_state()))
    assert data == {
        "evader_pos": {"x": 7, "y": 2},
        "pursuer_pos": {"x": 1, "y": 2},
        "last_observed_evader_pos": {"x": 7, "y": 2},
        "evader_committed": False,
        "turn": 1,
        "lock_streak": 0,
        "phase": "playing",
        "winner": None,
        "to_move": "evader",
        "visible": True,
        "contact_alert": False,
    }
