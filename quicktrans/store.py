# -*- coding: utf-8 -*-
"""Key-value persistence for API keys, custom providers and custom prompts.

The host store is an opaque string get/set interface. Structured tables
are serialized to JSON strings before they are written.
"""

from __future__ import annotations

import json
import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Dict, Optional

from .constant import (
    API_KEY_SUFFIX,
    CUSTOM_MODEL_CONFIGS_KEY,
    CUSTOM_PROMPTS_KEY,
    STORAGE_FILE,
    WORKING_DIR,
)

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Stores
# ---------------------------------------------------------------------------


class KeyValueStore(ABC):
    """String-keyed, string-valued storage."""

    @abstractmethod
    def get_item(self, key: str) -> Optional[str]:
        """Return the stored value or ``None``."""

    @abstractmethod
    def set_item(self, key: str, value: str) -> None:
        """Store *value* under *key*, replacing any previous value."""

    @abstractmethod
    def remove_item(self, key: str) -> None:
        """Delete *key*; a missing key is not an error."""


class MemoryStore(KeyValueStore):
    """In-process store, mostly for tests and embedding."""

    def __init__(self, initial: Optional[Dict[str, str]] = None) -> None:
        self._data: Dict[str, str] = dict(initial or {})

    def get_item(self, key: str) -> Optional[str]:
        return self._data.get(key)

    def set_item(self, key: str, value: str) -> None:
        self._data[key] = value

    def remove_item(self, key: str) -> None:
        self._data.pop(key, None)


def get_storage_path() -> Path:
    """Return the default storage.json path."""
    return WORKING_DIR / STORAGE_FILE


class JSONFileStore(KeyValueStore):
    """Whole-file JSON object on disk, rewritten on every mutation."""

    def __init__(self, path: Optional[Path] = None) -> None:
        self.path = Path(path) if path is not None else get_storage_path()

    def _read(self) -> Dict[str, str]:
        if not self.path.is_file():
            return {}
        try:
            with open(self.path, "r", encoding="utf-8") as fh:
                raw = json.load(fh)
        except (json.JSONDecodeError, ValueError):
            logger.warning(f"Ignoring unreadable storage file: {self.path}")
            return {}
        if not isinstance(raw, dict):
            return {}
        return {str(k): str(v) for k, v in raw.items()}

    def _write(self, data: Dict[str, str]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.path, "w", encoding="utf-8") as fh:
            json.dump(data, fh, indent=2, ensure_ascii=False)

    def get_item(self, key: str) -> Optional[str]:
        return self._read().get(key)

    def set_item(self, key: str, value: str) -> None:
        data = self._read()
        data[key] = value
        self._write(data)

    def remove_item(self, key: str) -> None:
        data = self._read()
        if key in data:
            del data[key]
            self._write(data)


# ---------------------------------------------------------------------------
# Typed accessors
# ---------------------------------------------------------------------------


def api_key_storage_key(provider_key: str) -> str:
    return f"{provider_key}{API_KEY_SUFFIX}"


def get_api_key(store: KeyValueStore, provider_key: str) -> str:
    """Return the saved API key for *provider_key*, or ``""``."""
    return store.get_item(api_key_storage_key(provider_key)) or ""


def set_api_key(store: KeyValueStore, provider_key: str, api_key: str) -> None:
    store.set_item(api_key_storage_key(provider_key), api_key)
    logger.debug(f"Saved API key for provider={provider_key}")


def _load_table(store: KeyValueStore, key: str) -> Dict[str, Any]:
    raw = store.get_item(key)
    if not raw:
        return {}
    try:
        table = json.loads(raw)
    except (json.JSONDecodeError, ValueError):
        logger.warning(f"Discarding corrupt table in storage key={key}")
        return {}
    if not isinstance(table, dict):
        logger.warning(f"Discarding non-object table in storage key={key}")
        return {}
    return table


def _save_table(store: KeyValueStore, key: str, table: Dict[str, Any]) -> None:
    store.set_item(key, json.dumps(table, ensure_ascii=False))
    logger.debug(f"Persisted {len(table)} entries to storage key={key}")


def load_custom_model_configs(store: KeyValueStore) -> Dict[str, Any]:
    return _load_table(store, CUSTOM_MODEL_CONFIGS_KEY)


def save_custom_model_configs(
    store: KeyValueStore,
    table: Dict[str, Any],
) -> None:
    _save_table(store, CUSTOM_MODEL_CONFIGS_KEY, table)


def load_custom_prompts(store: KeyValueStore) -> Dict[str, Any]:
    return _load_table(store, CUSTOM_PROMPTS_KEY)


def save_custom_prompts(store: KeyValueStore, table: Dict[str, Any]) -> None:
    _save_table(store, CUSTOM_PROMPTS_KEY, table)
