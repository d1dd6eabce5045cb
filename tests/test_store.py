"""Tests for the key-value persistence adapter."""
import json

from quicktrans.store import (
    JSONFileStore,
    MemoryStore,
    get_api_key,
    load_custom_model_configs,
    load_custom_prompts,
    save_custom_prompts,
    set_api_key,
)


def test_api_key_roundtrip_uses_provider_suffix():
    store = MemoryStore()
    assert get_api_key(store, "kimi") == ""
    set_api_key(store, "kimi", "sk-123")
    assert store.get_item("kimi_api_key") == "sk-123"
    assert get_api_key(store, "kimi") == "sk-123"


def test_tables_are_serialized_strings():
    store = MemoryStore()
    save_custom_prompts(store, {"default": {"x": {"name": "X", "template": "t"}}})
    raw = store.get_item("custom_prompts")
    assert isinstance(raw, str)
    assert json.loads(raw)["default"]["x"]["name"] == "X"
    assert load_custom_prompts(store) == json.loads(raw)


def test_corrupt_table_loads_empty():
    store = MemoryStore({"custom_model_configs": "{not json"})
    assert load_custom_model_configs(store) == {}
    store.set_item("custom_model_configs", "[1, 2]")
    assert load_custom_model_configs(store) == {}


def test_json_file_store_persists(tmp_path):
    path = tmp_path / "nested" / "storage.json"
    store = JSONFileStore(path)
    assert store.get_item("a") is None

    store.set_item("a", "1")
    store.set_item("b", "中文")
    assert JSONFileStore(path).get_item("b") == "中文"
    assert "中文" in path.read_text(encoding="utf-8")

    store.remove_item("a")
    store.remove_item("missing")
    assert json.loads(path.read_text(encoding="utf-8")) == {"b": "中文"}


def test_json_file_store_ignores_broken_file(tmp_path):
    path = tmp_path / "storage.json"
    path.write_text("garbage", encoding="utf-8")
    store = JSONFileStore(path)
    assert store.get_item("a") is None
    store.set_item("a", "1")
    assert store.get_item("a") == "1"
