import io
import threading

import pytest

from oslabs.marker import Marker, MarkerBoard


def _started(marker_id, board, output=None):
    start = threading.Event()
    marker = Marker(marker_id, board, start, output if output is not None else io.StringIO())
    marker.start()
    start.set()
    return marker


def test_marker_marks_array_then_clears():
    board = MarkerBoard(10)
    marker = _started(1, board)
    assert marker.wait_blocked(5)
    assert 1 in board.snapshot()
    marker.terminate()
    marker.join(5)
    assert board.snapshot() == [0] * 10
    assert marker.finished


def test_marker_handles_termination():
    board = MarkerBoard(10)
    marker = _started(1, board)
    marker.terminate()
    marker.join(5)
    assert marker.finished
    assert board.snapshot() == [0] * 10


def test_marker_reports_block():
    board = MarkerBoard(10)
    output = io.StringIO()
    marker = _started(1, board, output)
    assert marker.wait_blocked(5)
    marker.terminate()
    marker.join(5)
    assert output.getvalue().startswith("[Marker 1] can't mark index ")


def test_marked_cells_match_indices_after_resume():
    board = MarkerBoard(10)
    marker = _started(1, board)
    assert marker.wait_blocked(5)
    marker.resume()
    assert marker.wait_blocked(5)
    cells = board.snapshot()
    assert set(cells) <= {0, 1}
    assert cells.count(1) == len(marker.marked_indices)
    assert sorted(set(marker.marked_indices)) == sorted(marker.marked_indices)
    marker.terminate()
    marker.join(5)
    assert board.snapshot() == [0] * 10


def test_same_id_marks_same_cells():
    results = []
    for _ in range(2):
        board = MarkerBoard(12)
        marker = _started(3, board)
        assert marker.wait_blocked(5)
        results.append(board.snapshot())
        marker.terminate()
        marker.join(5)
    assert results[0] == results[1]


def test_two_markers_leave_only_survivor():
    board = MarkerBoard(8)
    start = threading.Event()
    markers = [Marker(i, board, start, io.StringIO()) for i in (1, 2)]
    for m in markers:
        m.start()
    start.set()
    for m in markers:
        assert m.wait_blocked(5)
    assert set(board.snapshot()) <= {0, 1, 2}
    markers[0].terminate()
    markers[0].join(5)
    assert 1 not in board.snapshot()
    assert board.snapshot().count(2) == len(markers[1].marked_indices)
    markers[1].terminate()
    markers[1].join(5)
    assert board.snapshot() == [0] * 8


def test_wait_blocked_times_out_before_start():
    board = MarkerBoard(4)
    marker = Marker(1, board, threading.Event(), io.StringIO())
    assert marker.wait_blocked(0.05) is False


def test_board_snapshot_is_copy():
    board = MarkerBoard(3)
    copy = board.snapshot()
    copy[0] = 9
    assert board.snapshot() == [0, 0, 0]


@pytest.mark.parametrize("size", [0, -2])
def test_board_rejects_bad_size(size):
    with pytest.raises(ValueError):
        MarkerBoard(size)


def test_marker_rejects_bad_id():
    with pytest.raises(ValueError):
        Marker(0, MarkerBoard(2), threading.Event())