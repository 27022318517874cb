import json

from utils.tracker_config import TrackerConfig, load_config


def test_defaults(tmp_path):
    config = load_config(tmp_path / "missing.json")

    assert config.min_lineup_size == 9
    assert config.recent_windows == [5, 10]
    assert config.hot_cold_window == 5
    assert config.hot_cold_count == 3
    assert config.default_baseline == (0.320, 0.400)
    assert config.admin_password_hash == ""


def test_json_overrides(tmp_path):
    path = tmp_path / "tracker_config.json"
    path.write_text(json.dumps({"min_lineup_size": 10, "recent_windows": [3]}))

    config = load_config(path)

    assert config.min_lineup_size == 10
    assert config.recent_windows == [3]
    assert config.hot_cold_count == 3


def test_bad_json_is_ignored(tmp_path, caplog):
    path = tmp_path / "tracker_config.json"
    path.write_text("{not json")

    with caplog.at_level("WARNING"):
        config = load_config(path)

    assert config.min_lineup_size == 9
    assert "unreadable" in caplog.text


def test_env_overrides(tmp_path, monkeypatch):
    path = tmp_path / "tracker_config.json"
    path.write_text(json.dumps({"hot_cold_count": 4}))
    monkeypatch.delenv("TS_IGNORE_ENV")
    monkeypatch.setenv("TS_HOT_COLD_COUNT", "2")
    monkeypatch.setenv("TS_RECENT_WINDOWS", "3, 7")
    monkeypatch.setenv("TS_DATA_DIR", str(tmp_path / "league"))
    monkeypatch.setenv("TS_MIN_LINEUP_SIZE", "many")

    config = load_config(path)

    assert config.hot_cold_count == 2
    assert config.recent_windows == [3, 7]
    assert config.data_dir == tmp_path / "league"
    assert config.min_lineup_size == 9


def test_ignore_env_flag(tmp_path, monkeypatch):
    monkeypatch.setenv("TS_HOT_COLD_COUNT", "2")

    config = load_config(tmp_path / "missing.json")

    assert config.hot_cold_count == 3


def test_relative_data_dir_is_anchored_at_project_root():
    config = TrackerConfig({"data_dir": "data"})

    assert config.data_dir.is_absolute()
    assert config.data_dir.name == "data"
