import pytest

from algokit.hanoi import Move, hanoi_moves


def _play(disk_count, moves):
    pegs = {"S": list(range(disk_count, 0, -1)), "A": [], "D": []}
    for move in moves:
        assert pegs[move.source], "move from an empty peg"
        assert pegs[move.source][-1] == move.disk
        if pegs[move.target]:
            assert pegs[move.target][-1] > move.disk
        pegs[move.target].append(pegs[move.source].pop())
    return pegs


def test_single_disk():
    assert hanoi_moves(1) == [Move(1, "S", "D")]


def test_two_disks():
    assert hanoi_moves(2) == [
        Move(1, "S", "A"),
        Move(2, "S", "D"),
        Move(1, "A", "D"),
    ]


def test_no_disks():
    assert hanoi_moves(0) == []


@pytest.mark.parametrize("disk_count", [1, 2, 3, 4, 5, 6])
def test_moves_are_legal_and_finish_on_destination(disk_count):
    moves = hanoi_moves(disk_count)
    assert len(moves) == 2**disk_count - 1
    pegs = _play(disk_count, moves)
    assert pegs["D"] == list(range(disk_count, 0, -1))
    assert pegs["S"] == [] and pegs["A"] == []


def test_move_text():
    assert str(Move(3, "S", "D")) == "Move the disk 3 from S to D"


def test_negative_disk_count_rejected():
    with pytest.raises(ValueError):
        hanoi_moves(-1)