import json
import logging

from game.high_score import HighScore, HighScoreStore, is_better


def test_load_missing_file(tmp_path):
    assert HighScoreStore(path=str(tmp_path / "scores.json")).load() is None


def test_save_writes_record_under_key(tmp_path):
    path = tmp_path / "scores.json"
    store = HighScoreStore(path=str(path), key="twenty48_high_score")
    store.save(HighScore(256, 95))

    data = json.loads(path.read_text(encoding="utf-8"))
    assert data == {"twenty48_high_score": {"highestTileValue": 256, "elapsedSeconds": 95}}
    assert store.load() == HighScore(256, 95)


def test_save_keeps_other_keys(tmp_path):
    path = tmp_path / "scores.json"
    path.write_text(json.dumps({"other": {"x": 1}}), encoding="utf-8")

    HighScoreStore(path=str(path), key="mine").save(HighScore(8, 3))

    data = json.loads(path.read_text(encoding="utf-8"))
    assert data["other"] == {"x": 1}
    assert data["mine"]["highestTileValue"] == 8


def test_corrupt_file_is_ignored(tmp_path, caplog):
    path = tmp_path / "scores.json"
    path.write_text("{not json", encoding="utf-8")

    with caplog.at_level(logging.WARNING):
        assert HighScoreStore(path=str(path)).load() is None
    assert "최고 기록" in caplog.text


def test_malformed_record_is_ignored(tmp_path):
    path = tmp_path / "scores.json"
    path.write_text(json.dumps({"k": {"highestTileValue": "lots"}}), encoding="utf-8")
    assert HighScoreStore(path=str(path), key="k").load() is None


def test_save_error_is_logged_not_raised(tmp_path, caplog):
    store = HighScoreStore(path=str(tmp_path / "missing-dir" / "scores.json"))
    with caplog.at_level(logging.WARNING):
        store.save(HighScore(2, 0))
    assert "저장하지 못했습니다" in caplog.text


def test_is_better():
    assert is_better(2, None)
    assert is_better(128, HighScore(64, 5))
    assert not is_better(64, HighScore(64, 5))


def test_failed_write_keeps_previous_file(tmp_path, monkeypatch):
    path = tmp_path / "scores.json"
    original = {"other": {"x": 1}, "k": {"highestTileValue": 64, "elapsedSeconds": 9}}
    path.write_text(json.dumps(original), encoding="utf-8")

    def broken_dump(data, f):
        f.write('{"other": ')
        raise OSError("disk full")

    monkeypatch.setattr("game.high_score.json.dump", broken_dump)
    HighScoreStore(path=str(path), key="k").save(HighScore(128, 20))

    assert json.loads(path.read_text(encoding="utf-8")) == original
    assert [p.name for p in tmp_path.iterdir()] == ["scores.json"]
