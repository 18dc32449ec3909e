import logging

import numpy as np

import config
from .board import empty_board, empty_cells, is_full, set_tile

logger = logging.getLogger(__name__)


def default_rng():
    return np.random.default_rng()


def init_board():
    """(1, 1)에 값 2인 타일 하나만 있는 시작 보드. 타일 id는 1부터 다시 시작합니다."""
    row, col = config.START_POSITION
    return set_tile(row, col, config.START_VALUE, empty_board(next_tile_id=1))


def pick_empty_cell(board, rng):
    """
    빈칸 중 하나를 균등하게 고릅니다.
    빈칸이 없으면 None을 반환합니다 (보드가 가득 참).
    """
    empties = empty_cells(board)
    if not empties:
        return None
    index = int(np.floor(rng.random() * len(empties)))
    return empties[index]


def spawn_tile(board, rng=None):
    """
    빈칸 하나에 새 타일(90% 확률로 2, 10% 확률로 4)을 추가한 새 보드를 반환합니다.
    빈칸이 없으면 None.
    """
    if rng is None:
        rng = default_rng()
    cell = pick_empty_cell(board, rng)
    if cell is None:
        return None
    value = 4 if rng.random() >= config.FOUR_THRESHOLD else 2
    row, col = cell
    logger.debug("새 타일 %d 생성: (%d, %d)", value, row, col)
    return set_tile(row, col, value, board)


def highest_tile_value(board):
    return int(np.max(board.values))


def has_legal_move(board):
    """빈칸이 있거나 가로/세로로 인접한 같은 값의 타일이 있으면 True."""
    if not is_full(board):
        return True
    values = board.values
    if np.any(values[:, :-1] == values[:, 1:]):
        return True
    return bool(np.any(values[:-1, :] == values[1:, :]))


def is_game_over(board):
    return not has_legal_move(board)
