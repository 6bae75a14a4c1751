import json
import os

from snake_arcade.storage import JsonFileStore, MemoryStore


def test_memory_store_roundtrip():
    store = MemoryStore()
    assert store.get("snakeHighScore") is None
    assert store.set("snakeHighScore", 40) is True
    assert store.get("snakeHighScore") == 40


def test_json_store_missing_file(tmp_path):
    store = JsonFileStore(tmp_path / "highscore.json")
    assert store.get("snakeHighScore") is None


def test_json_store_writes_json_object(tmp_path):
    path = tmp_path / "highscore.json"
    store = JsonFileStore(path)

    assert store.set("snakeHighScore", 70)
    assert store.get("snakeHighScore") == 70
    assert json.loads(path.read_text()) == {"snakeHighScore": 70}
    assert not os.path.exists(str(path) + ".tmp")


def test_json_store_keeps_other_keys(tmp_path):
    path = tmp_path / "highscore.json"
    path.write_text(json.dumps({"other": 3}))

    JsonFileStore(path).set("snakeHighScore", 20)

    assert json.loads(path.read_text()) == {"other": 3, "snakeHighScore": 20}


def test_json_store_accepts_numeric_strings(tmp_path):
    path = tmp_path / "highscore.json"
    path.write_text(json.dumps({"snakeHighScore": "120"}))
    assert JsonFileStore(path).get("snakeHighScore") == 120


def test_json_store_bad_content(tmp_path, caplog):
    path = tmp_path / "highscore.json"
    store = JsonFileStore(path)

    path.write_text("{not json")
    with caplog.at_level("WARNING"):
        assert store.get("snakeHighScore") is None
    assert "Could not read" in caplog.text

    path.write_text(json.dumps([1, 2]))
    assert store.get("snakeHighScore") is None

    path.write_text(json.dumps({"snakeHighScore": "lots"}))
    assert store.get("snakeHighScore") is None

    path.write_text(json.dumps({"snakeHighScore": True}))
    assert store.get("snakeHighScore") is None


def test_json_store_write_failure_returns_false(tmp_path, caplog):
    store = JsonFileStore(tmp_path / "missing-dir" / "highscore.json")

    with caplog.at_level("WARNING"):
        assert store.set("snakeHighScore", 10) is False

    assert "Could not save" in caplog.text


def test_json_store_failed_replace_leaves_no_temp_file(tmp_path, monkeypatch):
    path = tmp_path / "highscore.json"
    store = JsonFileStore(path)

    def failing_replace(src, dst):
        raise OSError("read-only")

    monkeypatch.setattr(os, "replace", failing_replace)

    assert store.set("snakeHighScore", 30) is False
    assert not os.path.exists(str(path) + ".tmp")
    assert not path.exists()
