# -*- coding: utf-8 -*-
"""Built-in provider definitions and the runtime provider registry."""

from __future__ import annotations

import logging
import uuid
from typing import Dict, Iterable, List, Optional, Union

from pydantic import ValidationError

from ..constant import (
    CUSTOM_PROVIDER_PREFIX,
    DEEPSEEK_BASE_URL,
    DOUBAO_BASE_URL,
    KIMI_BASE_URL,
    OPENAI_BASE_URL,
    ZHIPU_BASE_URL,
)
from ..exceptions import (
    DuplicateKeyError,
    MissingParameterError,
    NotFoundError,
    UnknownProviderError,
    UnsupportedOperationError,
)
from ..store import (
    KeyValueStore,
    get_api_key,
    load_custom_model_configs,
    save_custom_model_configs,
)
from .models import (
    CustomProviderRecord,
    ModelInfo,
    ProviderDefinition,
    ProviderSummary,
)

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Built-in model lists
# ---------------------------------------------------------------------------

ZHIPU_MODELS: List[ModelInfo] = [
    ModelInfo(id="glm-4-flash", name="glm-4-flash"),
]

DOUBAO_MODELS: List[ModelInfo] = [
    ModelInfo(id="Doubao-pro-128k", name="Doubao 128K"),
]

DEEPSEEK_MODELS: List[ModelInfo] = [
    ModelInfo(id="deepseek-chat", name="DeepSeek Chat"),
    ModelInfo(id="deepseek-coder", name="DeepSeek Coder"),
]

KIMI_MODELS: List[ModelInfo] = [
    ModelInfo(id="kimi-chat", name="Kimi Chat"),
    ModelInfo(id="kimi-pro", name="Kimi Pro"),
]

OPENAI_MODELS: List[ModelInfo] = [
    ModelInfo(id="gpt-3.5-turbo", name="GPT-3.5 Turbo"),
    ModelInfo(id="gpt-4", name="GPT-4"),
    ModelInfo(id="gpt-4-turbo", name="GPT-4 Turbo"),
]

# ---------------------------------------------------------------------------
# Provider definitions
# ---------------------------------------------------------------------------

PROVIDER_ZHIPU = ProviderDefinition(
    id="zhipu",
    name="Zhipu",
    kind="openai_sdk",
    base_url=ZHIPU_BASE_URL,
    models=ZHIPU_MODELS,
    builtin=True,
)

PROVIDER_DOUBAO = ProviderDefinition(
    id="doubao",
    name="Doubao",
    kind="openai_sdk",
    base_url=DOUBAO_BASE_URL,
    models=DOUBAO_MODELS,
    builtin=True,
)

PROVIDER_DEEPSEEK = ProviderDefinition(
    id="deepseek",
    name="DeepSeek",
    kind="http",
    base_url=DEEPSEEK_BASE_URL,
    models=DEEPSEEK_MODELS,
    builtin=True,
)

PROVIDER_KIMI = ProviderDefinition(
    id="kimi",
    name="Kimi",
    kind="http",
    base_url=KIMI_BASE_URL,
    models=KIMI_MODELS,
    builtin=True,
)

PROVIDER_OPENAI = ProviderDefinition(
    id="openai",
    name="OpenAI",
    kind="openai_sdk",
    base_url=OPENAI_BASE_URL,
    models=OPENAI_MODELS,
    builtin=True,
)

# Registry: provider_id -> ProviderDefinition
PROVIDERS: Dict[str, ProviderDefinition] = {
    PROVIDER_ZHIPU.id: PROVIDER_ZHIPU,
    PROVIDER_DOUBAO.id: PROVIDER_DOUBAO,
    PROVIDER_DEEPSEEK.id: PROVIDER_DEEPSEEK,
    PROVIDER_KIMI.id: PROVIDER_KIMI,
    PROVIDER_OPENAI.id: PROVIDER_OPENAI,
}

ModelLike = Union[ModelInfo, dict]


def is_custom_key(provider_key: str) -> bool:
    return provider_key.startswith(CUSTOM_PROVIDER_PREFIX)


def _new_custom_key() -> str:
    return f"{CUSTOM_PROVIDER_PREFIX}{uuid.uuid4().hex[:12]}"


def _coerce_models(models: Iterable[ModelLike]) -> List[ModelInfo]:
    out: List[ModelInfo] = []
    for index, item in enumerate(models):
        if isinstance(item, ModelInfo):
            model = item.model_copy()
        else:
            try:
                model = ModelInfo.model_validate(item)
            except ValidationError as e:
                fields = sorted(
                    {
                        ".".join(str(part) for part in err["loc"])
                        for err in e.errors()
                    },
                )
                raise MissingParameterError(
                    f"Invalid model entry at index {index}: "
                    f"{', '.join(fields) or 'model'} required",
                    context={"index": index, "fields": fields},
                ) from e
        if not model.id.strip():
            raise MissingParameterError(
                f"Model id is required (index {index})",
                context={"index": index, "fields": ["id"]},
            )
        out.append(model)
    return out


class ProviderRegistry:
    """Built-in providers plus user-defined ones persisted in *store*.

    Custom entries are loaded eagerly on construction and written back
    after every mutation.
    """

    def __init__(self, store: KeyValueStore) -> None:
        self._store = store
        self._custom: Dict[str, ProviderDefinition] = {}
        self._load()

    # ------------------------------------------------------------------
    # Persistence
    # ------------------------------------------------------------------

    def _load(self) -> None:
        for key, raw in load_custom_model_configs(self._store).items():
            if not is_custom_key(key):
                logger.warning(f"Skipping custom provider with bad key: {key}")
                continue
            try:
                record = CustomProviderRecord.model_validate(raw)
            except ValidationError:
                logger.warning(f"Skipping invalid custom provider: {key}")
                continue
            self._custom[key] = self._definition_from_record(key, record)
        logger.debug(f"Loaded {len(self._custom)} custom providers")

    def _save(self) -> None:
        table = {
            key: CustomProviderRecord(
                name=defn.name,
                base_url=defn.base_url,
                models=defn.models,
            ).model_dump(mode="json")
            for key, defn in self._custom.items()
        }
        save_custom_model_configs(self._store, table)

    @staticmethod
    def _definition_from_record(
        key: str,
        record: CustomProviderRecord,
    ) -> ProviderDefinition:
        return ProviderDefinition(
            id=key,
            name=record.name,
            kind="http",
            base_url=record.base_url,
            models=record.models,
            builtin=False,
        )

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def get(self, provider_key: str) -> Optional[ProviderDefinition]:
        """Return a provider definition by key, or None if not found."""
        if provider_key in PROVIDERS:
            return PROVIDERS[provider_key]
        return self._custom.get(provider_key)

    def require(self, provider_key: str) -> ProviderDefinition:
        defn = self.get(provider_key)
        if defn is None:
            raise UnknownProviderError(provider_key)
        return defn

    def list_definitions(self) -> List[ProviderDefinition]:
        """Built-in providers first, then custom ones in creation order."""
        return list(PROVIDERS.values()) + list(self._custom.values())

    def list_providers(self) -> List[ProviderSummary]:
        return [
            ProviderSummary(
                key=defn.id,
                name=defn.name,
                builtin=defn.builtin,
                has_api_key=bool(get_api_key(self._store, defn.id)),
            )
            for defn in self.list_definitions()
        ]

    def list_models(self, provider_key: str) -> List[ModelInfo]:
        defn = self.get(provider_key)
        if defn is None:
            return []
        return [m.model_copy() for m in defn.models]

    # ------------------------------------------------------------------
    # Custom providers
    # ------------------------------------------------------------------

    def add_custom(
        self,
        name: str,
        base_url: str,
        models: Iterable[ModelLike],
    ) -> str:
        """Register a custom provider and return its generated key."""
        if not name or not name.strip():
            raise MissingParameterError("Provider name is required")
        if not base_url or not base_url.strip():
            raise MissingParameterError("Base URL is required")
        model_list = _coerce_models(models or [])
        if not model_list:
            raise MissingParameterError("At least one model is required")

        key = _new_custom_key()
        while key in self._custom:
            key = _new_custom_key()
        record = CustomProviderRecord(
            name=name.strip(),
            base_url=base_url.strip(),
            models=model_list,
        )
        self._custom[key] = self._definition_from_record(key, record)
        self._save()
        logger.info(f"Added custom provider {key} ({record.name})")
        return key

    def remove_custom(self, provider_key: str) -> bool:
        """Delete a custom provider. Returns False if there is none."""
        if provider_key not in self._custom:
            return False
        del self._custom[provider_key]
        self._save()
        logger.info(f"Removed custom provider {provider_key}")
        return True

    # ------------------------------------------------------------------
    # Model list mutation
    # ------------------------------------------------------------------

    def _mutable(self, provider_key: str) -> ProviderDefinition:
        defn = self.require(provider_key)
        if defn.builtin:
            raise UnsupportedOperationError(
                "Operation not permitted on built-in providers",
                context={"provider": provider_key},
            )
        return defn

    def add_model(
        self,
        provider_key: str,
        model_id: str,
        model_name: Optional[str] = None,
    ) -> ModelInfo:
        defn = self._mutable(provider_key)
        if not model_id:
            raise MissingParameterError("Model id is required")
        if any(m.id == model_id for m in defn.models):
            raise DuplicateKeyError(
                f"Model already exists: {model_id}",
                context={"provider": provider_key, "model": model_id},
            )
        model = ModelInfo(id=model_id, name=model_name or model_id)
        defn.models.append(model)
        self._save()
        return model

    def remove_model(self, provider_key: str, model_id: str) -> None:
        defn = self._mutable(provider_key)
        index = next(
            (i for i, m in enumerate(defn.models) if m.id == model_id),
            None,
        )
        if index is None:
            raise NotFoundError(
                f"Model not found: {model_id}",
                context={"provider": provider_key, "model": model_id},
            )
        if len(defn.models) <= 1:
            raise UnsupportedOperationError(
                "A provider must keep at least one model",
                context={"provider": provider_key, "model": model_id},
            )
        del defn.models[index]
        self._save()
