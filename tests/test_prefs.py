import json
from pathlib import Path

from wordscramble.prefs import BEST_SCORE_KEY, BestScoreStore, default_prefs_path


def test_load_defaults_to_zero(tmp_path: Path):
    assert BestScoreStore(tmp_path / "prefs.json").load() == 0


def test_save_and_load_roundtrip(tmp_path: Path):
    store = BestScoreStore(tmp_path / "sub" / "prefs.json")
    store.save(75)
    assert store.load() == 75
    data = json.loads((tmp_path / "sub" / "prefs.json").read_text(encoding="utf-8"))
    assert data == {BEST_SCORE_KEY: 75}


def test_record_only_increases(tmp_path: Path):
    store = BestScoreStore(tmp_path / "prefs.json")
    assert store.record(50) is True
    assert store.record(25) is False
    assert store.record(50) is False
    assert store.load() == 50


def test_corrupt_file_is_ignored(tmp_path: Path):
    p = tmp_path / "prefs.json"
    p.write_text("{not json", encoding="utf-8")
    assert BestScoreStore(p).load() == 0
    p.write_text(json.dumps({BEST_SCORE_KEY: "lots"}), encoding="utf-8")
    assert BestScoreStore(p).load() == 0


def test_save_keeps_other_keys(tmp_path: Path):
    p = tmp_path / "prefs.json"
    p.write_text(json.dumps({"theme": "dark"}), encoding="utf-8")
    BestScoreStore(p).save(25)
    assert json.loads(p.read_text(encoding="utf-8")) == {"theme": "dark", BEST_SCORE_KEY: 25}


def test_default_path_uses_env(tmp_path: Path, monkeypatch):
    monkeypatch.setenv("WORDSCRAMBLE_HOME", str(tmp_path))
    assert default_prefs_path() == tmp_path / "prefs.json"
    assert BestScoreStore().path == tmp_path / "prefs.json"
