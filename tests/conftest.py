import pytest

from game.board import board_from_values


class SequenceRandom:
    """정해진 순서대로 값을 돌려주는 난수 소스"""
    def __init__(self, values):
        self.values = list(values)

    def random(self):
        if not self.values:
            raise AssertionError("SequenceRandom ran out of values")
        return self.values.pop(0)


@pytest.fixture
def seq_rng():
    return SequenceRandom


@pytest.fixture
def board_of():
    return board_from_values


# 가로/세로 어디에도 합칠 수 있는 타일이 없는 꽉 찬 보드
DEADLOCKED = [
    [2, 4, 2, 4],
    [4, 2, 4, 2],
    [2, 4, 2, 4],
    [4, 2, 4, 2],
]

# 꽉 찼지만 세로로만 합칠 수 있는 보드
VERTICAL_ONLY = [
    [2, 4, 2, 4],
    [2, 4, 2, 4],
    [8, 16, 8, 16],
    [16, 8, 16, 8],
]


@pytest.fixture
def deadlocked(board_of):
    return board_of(DEADLOCKED)


@pytest.fixture
def vertical_only(board_of):
    return board_of(VERTICAL_ONLY)
