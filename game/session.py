import logging
import time
from enum import Enum

import config
from .engine import move
from .high_score import HighScore, is_better
from .spawn import default_rng, highest_tile_value, init_board, is_game_over

logger = logging.getLogger(__name__)


class MoveOutcome(Enum):
    MOVED = "moved"
    BLOCKED = "blocked"      # 이 방향으로는 새 타일을 놓을 수 없지만 다른 방향은 가능
    GAME_OVER = "game_over"
    IGNORED = "ignored"      # 이미 끝난 게임


class GameSession:
    """한 판의 게임 상태(보드, 경과 시간, 승리/종료 여부, 최고 기록)를 관리합니다."""
    def __init__(self, store=None, rng=None, clock=time.monotonic):
        self.store = store
        self.rng = rng if rng is not None else default_rng()
        self.clock = clock
        self.high_score = store.load() if store is not None else None
        self.restart()

    def restart(self):
        """게임을 초기 상태로 리셋합니다."""
        self.board = init_board()
        self.over = False
        self.won = False
        self.just_won = False
        self.start_time = self.clock()

    def elapsed_seconds(self):
        return int(self.clock() - self.start_time)

    def highest_tile(self):
        return highest_tile_value(self.board)

    def apply(self, direction):
        """
        한 방향으로 움직입니다.
        move()가 None을 돌려줘도 다른 방향으로 움직일 수 있으면 게임을 끝내지 않습니다.
        """
        self.just_won = False
        if self.over:
            return MoveOutcome.IGNORED

        new_board = move(direction, self.board, self.rng)
        if new_board is None:
            if not is_game_over(self.board):
                return MoveOutcome.BLOCKED
            self._finish()
            return MoveOutcome.GAME_OVER

        self.board = new_board
        self._update_high_score()

        if not self.won and self.highest_tile() >= config.WINNING_TILE:
            self.won = True
            self.just_won = True
            logger.info("%d 타일 달성! (%d초)", config.WINNING_TILE, self.elapsed_seconds())

        if is_game_over(self.board):
            self._finish()
        return MoveOutcome.MOVED

    def _finish(self):
        self.over = True
        self._update_high_score()
        logger.info("게임 종료 - 최고 타일: %d, 시간: %d초", self.highest_tile(), self.elapsed_seconds())

    def _update_high_score(self):
        highest = self.highest_tile()
        if not is_better(highest, self.high_score):
            return
        self.high_score = HighScore(highest, self.elapsed_seconds())
        if self.store is not None:
            self.store.save(self.high_score)
