import logging
from enum import IntEnum

import config
from .board import (
    Board, column_indexes, empty_board, enumerate_tiles, get_tile,
    place_tile, row_indexes,
)
from .spawn import spawn_tile
from .tile import Tile

logger = logging.getLogger(__name__)

SIZE = config.BOARD_SIZE


class Direction(IntEnum):
    # 0:상, 1:하, 2:좌, 3:우
    UP = 0
    DOWN = 1
    LEFT = 2
    RIGHT = 3


def to_direction(value):
    """Direction, 정수 값 또는 이름("left" 등)을 Direction으로 바꿉니다."""
    if isinstance(value, Direction):
        return value
    if isinstance(value, str):
        try:
            return Direction[value.strip().upper()]
        except KeyError:
            raise ValueError(f"알 수 없는 방향입니다: {value!r}") from None
    return Direction(value)


def compress_row(row, toward_left=True):
    """빈칸을 없애고 타일을 한쪽 끝으로 모읍니다. 순서는 유지됩니다."""
    tiles = [tile for tile in row if tile is not None]
    padding = [None] * (SIZE - len(tiles))
    return tiles + padding if toward_left else padding + tiles


def merge_row(row, toward_left, next_tile_id):
    """
    미는 방향 쪽에서부터 훑으며 인접한 같은 값의 타일을 합칩니다.
    합쳐진 타일은 먼저 만난 쪽 자리에 새 id로 생기고, 짝이 된 칸은 비워져 건너뜁니다.
    (row, next_tile_id)를 반환합니다.
    """
    merged = list(row)
    order = list(range(SIZE)) if toward_left else list(reversed(range(SIZE)))
    i = 0
    while i < len(order) - 1:
        x, neighbour_x = order[i], order[i + 1]
        tile, neighbour = merged[x], merged[neighbour_x]
        if tile is not None and neighbour is not None and tile.value == neighbour.value:
            merged[x] = Tile(next_tile_id, tile.value * 2)
            merged[neighbour_x] = None
            next_tile_id += 1
            i += 2
        else:
            i += 1
    return merged, next_tile_id


def merge_row_left(row, next_tile_id):
    return merge_row(row, True, next_tile_id)


def merge_row_right(row, next_tile_id):
    return merge_row(row, False, next_tile_id)


def _slide_rows(board, toward_left):
    next_tile_id = board.next_tile_id
    rows = []
    for r in row_indexes():
        row = compress_row([get_tile(r, c, board) for c in column_indexes()], toward_left)
        row, next_tile_id = merge_row(row, toward_left, next_tile_id)
        rows.append(compress_row(row, toward_left))

    values = [[tile.value if tile else 0 for tile in row] for row in rows]
    ids = [[tile.id if tile else 0 for tile in row] for row in rows]
    return Board(values, ids, next_tile_id)


def transpose(board):
    """행과 열을 바꾼 보드. 타일 id와 id 카운터는 그대로 유지됩니다."""
    flipped = empty_board(board.next_tile_id)
    for r, c, tile in enumerate_tiles(board):
        if tile is not None:
            flipped = place_tile(c, r, tile, flipped)
    return flipped


def slide(direction, board):
    """
    새 타일을 추가하지 않고 밀기/합치기만 수행합니다.
    상/하는 전치 후 좌/우로 처리하고 다시 전치합니다.
    """
    direction = to_direction(direction)
    if direction == Direction.LEFT:
        return _slide_rows(board, toward_left=True)
    if direction == Direction.RIGHT:
        return _slide_rows(board, toward_left=False)
    if direction == Direction.UP:
        return transpose(_slide_rows(transpose(board), toward_left=True))
    return transpose(_slide_rows(transpose(board), toward_left=False))


def _move_rows(board, toward_left, rng):
    slid = _slide_rows(board, toward_left)
    return spawn_tile(slid, rng)


def move(direction, board, rng=None):
    """
    주어진 방향으로 보드를 밀고 합친 뒤 새 타일 하나를 추가합니다.
    상/하는 전치한 보드에서 좌/우로 움직이고(새 타일 포함) 다시 전치합니다.
    밀고 난 보드에 빈칸이 없으면 None을 반환합니다 (게임 종료 신호).
    """
    direction = to_direction(direction)
    if direction in (Direction.LEFT, Direction.RIGHT):
        result = _move_rows(board, direction == Direction.LEFT, rng)
    else:
        result = _move_rows(transpose(board), direction == Direction.UP, rng)
        if result is not None:
            result = transpose(result)
    if result is None:
        logger.debug("%s: 빈칸이 없어 새 타일을 놓을 수 없습니다.", direction.name)
    return result


def move_up(board, rng=None):
    return move(Direction.UP, board, rng)


def move_down(board, rng=None):
    return move(Direction.DOWN, board, rng)


def move_left(board, rng=None):
    return move(Direction.LEFT, board, rng)


def move_right(board, rng=None):
    return move(Direction.RIGHT, board, rng)
