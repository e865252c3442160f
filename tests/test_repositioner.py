import pytest
from pydantic import ValidationError

from leaderboard_sort.core.models import Record
from leaderboard_sort.core.repositioner import find_index, update_score
from leaderboard_sort.core.sample import sample_records
from leaderboard_sort.core.sorter import merge_sort, is_sorted_descending


@pytest.fixture
def board():
    return merge_sort(sample_records())


def _names(records):
    return [r.name for r in records]


def test_score_increase_moves_to_front(board):
    result = update_score(board, "Ayesha", 95)
    assert result.found
    assert (result.old_score, result.new_score) == (75, 95)
    assert (result.old_rank, result.new_rank) == (6, 1)
    assert result.moved == 5
    assert _names(board) == ["Ayesha", "Sahan", "Dinesh", "Kamal", "Thilina", "Dilki", "Rashmi", "Nimasha"]
    assert board[0].score == 95


def test_score_drop_moves_to_back(board):
    update_score(board, "Ayesha", 95)
    result = update_score(board, "Sahan", 60)
    assert (result.old_rank, result.new_rank) == (2, 8)
    assert result.moved == -6
    assert _names(board) == ["Ayesha", "Dinesh", "Kamal", "Thilina", "Dilki", "Rashmi", "Nimasha", "Sahan"]
    assert is_sorted_descending(board)


def test_tie_stops_behind_equal_neighbour(board):
    update_score(board, "Ayesha", 95)
    update_score(board, "Sahan", 60)
    update_score(board, "Nimasha", 80)
    assert _names(board) == ["Ayesha", "Dinesh", "Kamal", "Thilina", "Nimasha", "Dilki", "Rashmi", "Sahan"]

    update_score(board, "Rashmi", 82)
    assert _names(board) == ["Ayesha", "Dinesh", "Kamal", "Thilina", "Rashmi", "Nimasha", "Dilki", "Sahan"]
    assert board[3].score == board[4].score == 82
    assert is_sorted_descending(board)


def test_drop_into_tie_stops_before_equal_neighbour():
    board = [Record(name=n, score=s) for n, s in [("a", 9), ("b", 8), ("c", 5), ("d", 5), ("e", 1)]]
    result = update_score(board, "b", 5)
    # b only passes records it now strictly trails, so it lands ahead of c and d
    assert _names(board) == ["a", "b", "c", "d", "e"]
    assert result.moved == 0


def test_unchanged_score_stays(board):
    result = update_score(board, "Kamal", 85)
    assert result.found and result.moved == 0
    assert _names(board) == _names(merge_sort(sample_records()))


def test_unknown_name_is_a_no_op(board):
    before = [(r.name, r.score) for r in board]
    result = update_score(board, "Nobody", 100)
    assert not result
    assert result.found is False
    assert result.old_rank is None and result.moved == 0
    assert [(r.name, r.score) for r in board] == before


def test_duplicate_names_update_first_match():
    board = [Record(name="x", score=10), Record(name="y", score=8), Record(name="x", score=6)]
    update_score(board, "x", 1)
    assert [(r.name, r.score) for r in board] == [("y", 8), ("x", 6), ("x", 1)]


def test_single_and_edges():
    board = [Record(name="only", score=1)]
    assert update_score(board, "only", -50).new_rank == 1

    board = [Record(name="a", score=3), Record(name="b", score=2)]
    update_score(board, "a", 0)
    assert _names(board) == ["b", "a"]
    update_score(board, "a", 99)
    assert _names(board) == ["a", "b"]


def test_update_keeps_board_sorted(board):
    for name, score in [("Dilki", 100), ("Kamal", -3), ("Thilina", 88), ("Sahan", 77), ("Dinesh", 88)]:
        update_score(board, name, score)
        assert is_sorted_descending(board)


def test_find_index(board):
    assert find_index(board, "Sahan") == 0
    assert find_index(board, "Nimasha") == 7
    assert find_index(board, "sahan") == -1
    assert find_index([], "Sahan") == -1


def test_record_name_is_frozen():
    r = Record(name="Kamal", score=85)
    with pytest.raises(ValidationError):
        r.name = "Other"
    r.score = 12
    assert r.score == 12
    with pytest.raises(ValidationError):
        r.score = "not a number"


def test_record_str():
    assert str(Record(name="Kamal", score=85)) == "Kamal           :  85"
