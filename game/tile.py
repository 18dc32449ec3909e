from collections import namedtuple

import numpy as np

# 값(value)과 별개로 id는 미끄러져도 유지되고, 합쳐지면 새 id를 받습니다.
Tile = namedtuple("Tile", ["id", "value"])


def is_valid_value(value):
    """2 이상의 2의 거듭제곱인지 확인합니다."""
    if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
        return False
    return value >= 2 and (value & (value - 1)) == 0


def check_value(value):
    if not is_valid_value(value):
        raise ValueError(f"타일 값은 2 이상의 2의 거듭제곱이어야 합니다: {value!r}")
    return value
