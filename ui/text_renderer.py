from game.board import column_indexes, get_tile, row_indexes

BANNER = "========================"


def _cell(tile):
    return f"[  {tile.value} ]" if tile else "[    ]"


def render_text(board):
    """보드를 콘솔용 문자열로 그립니다. 빈칸은 [    ]."""
    lines = [BANNER]
    for r in row_indexes():
        lines.append("".join(_cell(get_tile(r, c, board)) for c in column_indexes()))
    return "\n".join(lines)
