import threading

import pytest

from amida.core.board import AmidaBoard
from amida.core.exceptions import ParseError
from amida.session.session import BoardSnapshot, PuzzleSession, RungState


@pytest.fixture
def session(sample_board):
    return PuzzleSession(sample_board)


def _ok(response):
    assert response["ok"], response
    return response["result"]


class TestSessionOperations:
    def test_step_and_snapshot(self, session):
        assert session.step_forward()
        assert session.seek(7)
        snap = session.snapshot()

        assert isinstance(snap, BoardSnapshot)
        assert snap.query_index == 7
        assert snap.rung_count == 7
        assert snap.landing_columns == [4, 2, 3, 1]
        assert snap.active_rungs[0] == RungState(id=1, height=1, left=1, right=2, enabled=True)
        assert len(snap.active_rungs) == 5

    def test_toggle_is_reflected_in_snapshot(self, session):
        session.seek(7)
        assert session.toggle_rung(4) is False
        states = {rung.id: rung.enabled for rung in session.snapshot().active_rungs}
        assert states[4] is False

    def test_load_text_replaces_board(self, session):
        session.seek(3)
        session.load_text("2 3 1\n1 1 2\n")
        assert session.board.lane_count == 2
        assert session.board.query_index == 0

    def test_failed_load_leaves_board_untouched(self, session):
        session.seek(7)
        session.toggle_rung(2)
        before = session.snapshot()

        with pytest.raises(ParseError):
            session.load_text("2 3\n")

        assert session.snapshot() == before

    def test_reset_and_step_backward(self, session):
        session.seek(4)
        assert session.step_backward()
        session.reset()
        assert session.board.query_index == 0

    def test_uses_supplied_lock(self, sample_board):
        lock = threading.RLock()
        session = PuzzleSession(sample_board, lock=lock)
        with lock:
            # Re-entrant: the owning thread can still drive the session.
            assert session.step_forward()


class TestHandleRequest:
    def test_hello(self, session):
        result = _ok(session.handle_request({"id": 1, "cmd": "hello"}))
        assert result["version"] == 1
        assert result["mode"] in ("eager", "lazy")

    def test_step_back_seek(self, session):
        assert _ok(session.handle_request({"cmd": "step"})) == {"moved": True, "query_index": 1}
        assert _ok(session.handle_request({"cmd": "back"})) == {"moved": True, "query_index": 0}
        assert _ok(session.handle_request({"cmd": "back"})) == {"moved": False, "query_index": 0}
        assert _ok(session.handle_request({"cmd": "seek", "index": "7"}))["query_index"] == 7

    def test_toggle(self, session):
        assert _ok(session.handle_request({"cmd": "toggle", "rung_id": 3})) == {
            "rung_id": 3,
            "enabled": False,
        }

    def test_toggle_unknown_rung_is_error(self, session):
        response = session.handle_request({"id": 9, "cmd": "toggle", "rung_id": 42})
        assert response == {"id": 9, "ok": False, "error": "Unknown rung id 42"}

    def test_state(self, session):
        session.seek(7)
        state = _ok(session.handle_request({"cmd": "state"}))
        assert state["landing_columns"] == [4, 2, 3, 1]
        assert state["active_rungs"][0]["enabled"] is True

    def test_path_and_paths(self, session):
        session.seek(1)
        path = _ok(session.handle_request({"cmd": "path", "lane": 0}))
        assert path == {"lane": 0, "points": [[6, 1], [1, 1], [1, 2], [0, 2]]}

        paths = _ok(session.handle_request({"cmd": "paths"}))["paths"]
        assert len(paths) == 4
        assert paths[0] == path["points"]

    def test_path_out_of_range_is_error(self, session):
        response = session.handle_request({"cmd": "path", "lane": 10})
        assert response["ok"] is False
        assert "out of range" in response["error"]

    def test_load_and_bad_load(self, session):
        assert _ok(session.handle_request({"cmd": "load", "text": "3 2 0"})) == {"status": "ok"}
        assert session.board.lane_count == 3

        response = session.handle_request({"cmd": "load", "text": ""})
        assert response["ok"] is False
        assert session.board.lane_count == 3

    def test_reset_command(self, session):
        session.seek(2)
        assert _ok(session.handle_request({"cmd": "reset"})) == {"status": "ok"}
        assert session.board.query_index == 0

    def test_unknown_and_missing_command(self, session):
        assert "Unknown command" in session.handle_request({"cmd": "jump"})["error"]
        assert session.handle_request({"id": 2})["ok"] is False

    def test_missing_argument(self, session):
        response = session.handle_request({"cmd": "seek"})
        assert response["ok"] is False

    def test_concurrent_steps_report_their_own_index(self):
        session = PuzzleSession(AmidaBoard(3, 50, [(h, 1, 2) for h in range(1, 41)]))
        replies = []
        replies_lock = threading.Lock()

        def client():
            for _ in range(5):
                result = _ok(session.handle_request({"cmd": "step"}))
                with replies_lock:
                    replies.append(result)

        threads = [threading.Thread(target=client) for _ in range(8)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert all(reply["moved"] for reply in replies)
        assert sorted(reply["query_index"] for reply in replies) == list(range(1, 41))
