import json
import logging
import os
import tempfile
from collections import namedtuple

import config

logger = logging.getLogger(__name__)

HighScore = namedtuple("HighScore", ["highest_tile", "time_in_seconds"])


def is_better(highest_tile, current):
    """저장된 기록이 없거나 더 큰 타일을 만들었으면 True."""
    return current is None or highest_tile > current.highest_tile


class HighScoreStore:
    """
    최고 기록을 JSON 파일에 저장합니다.
    파일은 {키: {"highestTileValue": int, "elapsedSeconds": int}} 형태이며
    읽기/쓰기 오류는 로그만 남기고 무시합니다.
    """
    def __init__(self, path=config.HIGH_SCORE_PATH, key=config.HIGH_SCORE_KEY):
        self.path = path
        self.key = key

    def _read_all(self):
        if not os.path.exists(self.path):
            return {}
        with open(self.path, "r", encoding="utf-8") as f:
            data = json.load(f)
        return data if isinstance(data, dict) else {}

    def load(self):
        try:
            record = self._read_all().get(self.key)
        except (OSError, ValueError) as e:
            logger.warning("최고 기록을 불러오지 못했습니다 (%s): %s", self.path, e)
            return None
        if not isinstance(record, dict):
            return None
        try:
            return HighScore(int(record["highestTileValue"]), int(record["elapsedSeconds"]))
        except (KeyError, TypeError, ValueError):
            logger.warning("최고 기록 형식이 올바르지 않습니다: %r", record)
            return None

    def save(self, high_score):
        try:
            data = self._read_all()
        except (OSError, ValueError):
            data = {}
        data[self.key] = {
            "highestTileValue": int(high_score.highest_tile),
            "elapsedSeconds": int(high_score.time_in_seconds),
        }
        # 임시 파일에 다 쓴 뒤에만 기존 파일을 교체합니다.
        directory = os.path.dirname(os.path.abspath(self.path))
        tmp_path = None
        try:
            with tempfile.NamedTemporaryFile("w", encoding="utf-8", dir=directory,
                                             prefix=".high_score-", suffix=".tmp",
                                             delete=False) as f:
                tmp_path = f.name
                json.dump(data, f)
            os.replace(tmp_path, self.path)
        except OSError as e:
            logger.warning("최고 기록을 저장하지 못했습니다 (%s): %s", self.path, e)
            if tmp_path is not None and os.path.exists(tmp_path):
                os.remove(tmp_path)
