import pytest

from game.board import board_from_values
from game.engine import Direction
from game.high_score import HighScore
from game.session import GameSession, MoveOutcome
from game.spawn import init_board


class FakeClock:
    def __init__(self, now=100.0):
        self.now = now

    def __call__(self):
        return self.now


class MemoryStore:
    def __init__(self, record=None):
        self.record = record
        self.saved = []

    def load(self):
        return self.record

    def save(self, high_score):
        self.record = high_score
        self.saved.append(high_score)


@pytest.fixture
def clock():
    return FakeClock()


def make_session(seq_rng, draws, store=None, clock=None):
    return GameSession(store=store, rng=seq_rng(draws), clock=clock or FakeClock())


def test_new_session_starts_from_initial_board(seq_rng):
    session = make_session(seq_rng, [])
    assert session.board == init_board()
    assert not session.over
    assert not session.won
    assert session.high_score is None


def test_moved_updates_board_and_high_score(seq_rng, clock):
    store = MemoryStore()
    session = make_session(seq_rng, [0.0, 0.0], store=store, clock=clock)
    clock.now += 7.6

    assert session.apply(Direction.RIGHT) == MoveOutcome.MOVED
    assert session.board.to_list()[1][3] == 2
    assert session.board.to_list()[0][0] == 2
    # 최고 타일 2는 아직 기록이 없으므로 저장됩니다.
    assert store.saved == [HighScore(2, 7)]


def test_existing_high_score_not_overwritten_by_lower(seq_rng):
    store = MemoryStore(HighScore(64, 10))
    session = make_session(seq_rng, [0.0, 0.0], store=store)
    session.apply(Direction.LEFT)
    assert store.saved == []
    assert session.high_score == HighScore(64, 10)


def test_reaching_2048_wins_once(seq_rng):
    session = make_session(seq_rng, [0.0, 0.0, 0.0, 0.0])
    session.board = board_from_values([
        [1024, 1024, 0, 0],
        [0, 0, 0, 0],
        [0, 0, 0, 0],
        [0, 0, 0, 0],
    ])

    assert session.apply(Direction.LEFT) == MoveOutcome.MOVED
    assert session.won and session.just_won
    assert session.highest_tile() == 2048

    session.apply(Direction.RIGHT)
    assert session.won
    assert not session.just_won


def test_blocked_direction_does_not_end_game(seq_rng, vertical_only):
    session = make_session(seq_rng, [])
    session.board = vertical_only

    assert session.apply(Direction.LEFT) == MoveOutcome.BLOCKED
    assert not session.over
    assert session.board is vertical_only


def test_deadlocked_board_is_game_over(seq_rng, deadlocked):
    store = MemoryStore()
    session = make_session(seq_rng, [], store=store)
    session.board = deadlocked

    assert session.apply(Direction.UP) == MoveOutcome.GAME_OVER
    assert session.over
    assert store.record == HighScore(4, 0)
    assert session.apply(Direction.DOWN) == MoveOutcome.IGNORED


def test_game_ends_when_spawn_leaves_no_move(seq_rng):
    session = make_session(seq_rng, [0.0, 0.0])
    session.board = board_from_values([
        [2, 4, 2, 4],
        [4, 2, 4, 2],
        [2, 4, 2, 4],
        [4, 2, 8, 0],
    ])

    assert session.apply(Direction.LEFT) == MoveOutcome.MOVED
    assert session.board.to_list()[3] == [4, 2, 8, 2]
    assert session.over


def test_restart_resets_round(seq_rng, clock, deadlocked):
    session = make_session(seq_rng, [], clock=clock)
    session.board = deadlocked
    session.apply(Direction.UP)
    clock.now += 30

    session.restart()
    assert not session.over
    assert session.board == init_board()
    assert session.elapsed_seconds() == 0
