import numpy as np

import config
from .tile import Tile, check_value

SIZE = config.BOARD_SIZE


class Board:
    """
    4x4 게임 보드의 불변 스냅샷입니다.

    values: 타일 값 (0 = 빈칸)
    ids: 타일 id (0 = 빈칸)
    next_tile_id: 다음에 새로 만들어질 타일이 받을 id
    """
    __slots__ = ("values", "ids", "next_tile_id")

    def __init__(self, values, ids, next_tile_id=1):
        values = np.array(values, dtype=int)
        ids = np.array(ids, dtype=int)
        if values.shape != (SIZE, SIZE) or ids.shape != (SIZE, SIZE):
            raise ValueError(f"보드 크기는 {SIZE}x{SIZE}이어야 합니다.")
        _check_tiles(values, ids, int(next_tile_id))
        values.flags.writeable = False
        ids.flags.writeable = False
        self.values = values
        self.ids = ids
        self.next_tile_id = int(next_tile_id)

    def __eq__(self, other):
        if not isinstance(other, Board):
            return NotImplemented
        return (np.array_equal(self.values, other.values)
                and np.array_equal(self.ids, other.ids))

    def __hash__(self):
        return hash((self.values.tobytes(), self.ids.tobytes()))

    def __repr__(self):
        return f"Board({self.to_list()}, next_tile_id={self.next_tile_id})"

    def to_list(self):
        """값만 중첩 리스트로 반환합니다. 빈칸은 0."""
        return self.values.tolist()


def _check_tiles(values, ids, next_tile_id):
    occupied = values != 0
    tile_values = values[occupied]
    if np.any(tile_values < 2) or np.any(tile_values & (tile_values - 1)):
        raise ValueError(f"타일 값은 2 이상의 2의 거듭제곱이어야 합니다: {tile_values.tolist()}")
    if not np.array_equal(ids != 0, occupied):
        raise ValueError("타일이 있는 칸에만 0이 아닌 id가 있어야 합니다.")
    tile_ids = ids[occupied]
    if np.any(tile_ids < 1) or np.any(tile_ids >= next_tile_id):
        raise ValueError(f"타일 id는 1 이상 {next_tile_id} 미만이어야 합니다: {tile_ids.tolist()}")
    if len(np.unique(tile_ids)) != len(tile_ids):
        raise ValueError("같은 id의 타일이 두 칸 이상에 있습니다.")


def empty_board(next_tile_id=1):
    zeros = np.zeros((SIZE, SIZE), dtype=int)
    return Board(zeros, zeros, next_tile_id)


def board_from_values(rows, next_tile_id=1):
    """중첩 리스트(0 또는 None = 빈칸)로 보드를 만듭니다. id는 행 우선 순서로 부여됩니다."""
    board = empty_board(next_tile_id)
    for r, row in enumerate(rows):
        for c, value in enumerate(row):
            if value:
                board = set_tile(r, c, value, board)
    return board


def row_indexes():
    return list(range(SIZE))


def column_indexes():
    return list(range(SIZE))


def _in_range(row, col):
    return 0 <= row < SIZE and 0 <= col < SIZE


def is_empty(row, col, board):
    """범위 밖의 좌표도 빈칸으로 취급하며 예외를 던지지 않습니다."""
    if not _in_range(row, col):
        return True
    return bool(board.values[row, col] == 0)


def get_tile(row, col, board):
    if is_empty(row, col, board):
        return None
    return Tile(int(board.ids[row, col]), int(board.values[row, col]))


def _with_cell(row, col, tile, board, next_tile_id):
    if not _in_range(row, col):
        raise IndexError(f"보드 범위를 벗어난 좌표입니다: ({row}, {col})")
    values = board.values.copy()
    ids = board.ids.copy()
    values[row, col] = tile.value if tile else 0
    ids[row, col] = tile.id if tile else 0
    return Board(values, ids, next_tile_id)


def set_tile(row, col, value, board):
    """
    새 타일을 만들어 (row, col)에 놓은 새 보드를 반환합니다.
    value가 None이면 보드를 그대로 돌려줍니다.
    """
    if value is None:
        return board
    tile = Tile(board.next_tile_id, int(check_value(value)))
    return _with_cell(row, col, tile, board, board.next_tile_id + 1)


def place_tile(row, col, tile, board):
    """기존 타일을 id 그대로 옮겨 놓습니다. tile이 None이면 칸을 비웁니다."""
    return _with_cell(row, col, tile, board, board.next_tile_id)


def enumerate_tiles(board):
    """모든 칸을 행 우선 순서로 (row, col, Tile 또는 None) 리스트로 반환합니다."""
    return [(r, c, get_tile(r, c, board)) for r in row_indexes() for c in column_indexes()]


def empty_cells(board):
    return [(r, c) for r, c, tile in enumerate_tiles(board) if tile is None]


def is_full(board):
    return bool(np.all(board.values != 0))


def total_value(board):
    return int(np.sum(board.values))
