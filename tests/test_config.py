"""Tests for config.json loading."""
from quicktrans.config import Config, load_config, save_config


def test_missing_file_gives_defaults(tmp_path):
    config = load_config(tmp_path / "config.json")
    assert config == Config()
    assert config.request.temperature == 0.3
    assert config.defaults.mode == "general"


def test_roundtrip(tmp_path):
    path = tmp_path / "sub" / "config.json"
    config = Config()
    config.defaults.provider = "kimi"
    config.request.timeout = 15.0
    save_config(config, path)
    loaded = load_config(path)
    assert loaded.defaults.provider == "kimi"
    assert loaded.request.timeout == 15.0


def test_invalid_file_gives_defaults(tmp_path):
    path = tmp_path / "config.json"
    path.write_text('{"request": {"temperature": "hot"}}', encoding="utf-8")
    assert load_config(path) == Config()
    path.write_text("not json", encoding="utf-8")
    assert load_config(path) == Config()
