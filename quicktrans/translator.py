# -*- coding: utf-8 -*-
"""Translation dispatch over the provider registry and prompt catalog."""

from __future__ import annotations

import logging
from typing import Dict, Iterable, List, Optional

import httpx

from .config import Config
from .constant import AUTO_DETECT_LANGUAGE, DEFAULT_MODE
from .exceptions import MissingParameterError, TranslationFailedError
from .language import detect_language
from .prompts import SYSTEM_PROMPT, PromptCatalog, PromptTemplate, render_prompt
from .providers import (
    ModelInfo,
    ProviderRegistry,
    ProviderSummary,
    build_backend,
)
from .providers.registry import ModelLike
from .store import KeyValueStore, get_api_key, set_api_key

logger = logging.getLogger(__name__)


class Translator:
    """Owns provider and prompt state for one store.

    Build one at startup and hand it to whatever needs it (CLI, API).
    """

    def __init__(
        self,
        store: KeyValueStore,
        config: Optional[Config] = None,
        *,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self.store = store
        self.config = config or Config()
        self.registry = ProviderRegistry(store)
        self.prompts = PromptCatalog(store)
        self._transport = transport

    # ------------------------------------------------------------------
    # Listings
    # ------------------------------------------------------------------

    def get_translation_modes(
        self,
        scope: Optional[str] = None,
    ) -> List[Dict[str, str]]:
        return self.prompts.list_modes(scope)

    def get_providers(self) -> List[ProviderSummary]:
        return self.registry.list_providers()

    def get_models(self, provider_key: str) -> List[ModelInfo]:
        return self.registry.list_models(provider_key)

    # ------------------------------------------------------------------
    # API keys
    # ------------------------------------------------------------------

    def get_saved_api_key(self, provider_key: str) -> str:
        return get_api_key(self.store, provider_key)

    def save_api_key(self, provider_key: str, api_key: str) -> None:
        set_api_key(self.store, provider_key, api_key)

    # ------------------------------------------------------------------
    # Translation
    # ------------------------------------------------------------------

    @staticmethod
    def detect_language(text: str) -> str:
        return detect_language(text)

    def build_messages(self, prompt: str) -> List[Dict[str, str]]:
        messages: List[Dict[str, str]] = []
        if self.config.request.use_system_prompt and SYSTEM_PROMPT.strip():
            messages.append({"role": "system", "content": SYSTEM_PROMPT})
        messages.append({"role": "user", "content": prompt})
        return messages

    def render(
        self,
        text: str,
        target_language: str,
        provider: str,
        source_language: Optional[str] = None,
        mode: Optional[str] = DEFAULT_MODE,
    ) -> str:
        """Resolve the template for *mode* and fill in the placeholders."""
        template: PromptTemplate = self.prompts.resolve(mode, provider)
        return render_prompt(
            template.template,
            source_language or AUTO_DETECT_LANGUAGE,
            target_language,
            text,
        )

    async def translate(
        self,
        *,
        text: str,
        target_language: str,
        provider: str,
        model: str,
        api_key: str,
        source_language: Optional[str] = None,
        mode: Optional[str] = DEFAULT_MODE,
        save_api_key: bool = False,
    ) -> str:
        """Translate *text* with *provider*/*model* and return the reply.

        Raises MissingParameterError or UnknownProviderError before any
        request is made; every failure of the request itself is raised
        as TranslationFailedError.
        """
        required = {
            "text": text,
            "target_language": target_language,
            "provider": provider,
            "model": model,
            "api_key": api_key,
        }
        missing = [name for name, value in required.items() if not value]
        if missing:
            raise MissingParameterError(
                f"Missing required parameters: {', '.join(missing)}",
                context={"missing": missing},
            )

        definition = self.registry.require(provider)
        prompt = self.render(
            text,
            target_language,
            provider,
            source_language=source_language,
            mode=mode,
        )
        messages = self.build_messages(prompt)

        if save_api_key:
            self.save_api_key(provider, api_key)

        backend = build_backend(
            definition,
            timeout=self.config.request.timeout,
            transport=self._transport,
        )
        logger.debug(f"Translating via provider={provider} model={model}")
        try:
            async with backend.create_client(api_key) as client:
                return await backend.translate(
                    client,
                    model,
                    messages,
                    temperature=self.config.request.temperature,
                )
        except Exception as e:
            logger.exception(
                f"Translation request failed: provider={provider} "
                f"model={model}",
            )
            raise TranslationFailedError(
                e,
                context={"provider": provider, "model": model},
            ) from e

    # ------------------------------------------------------------------
    # Custom providers and models
    # ------------------------------------------------------------------

    def add_custom_model_config(
        self,
        name: str,
        base_url: str,
        models: Iterable[ModelLike],
    ) -> str:
        return self.registry.add_custom(name, base_url, models)

    def remove_custom_model_config(self, provider_key: str) -> bool:
        return self.registry.remove_custom(provider_key)

    def add_model_to_provider(
        self,
        provider_key: str,
        model_id: str,
        model_name: Optional[str] = None,
    ) -> ModelInfo:
        return self.registry.add_model(provider_key, model_id, model_name)

    def remove_model_from_provider(
        self,
        provider_key: str,
        model_id: str,
    ) -> None:
        self.registry.remove_model(provider_key, model_id)

    # ------------------------------------------------------------------
    # Custom prompts
    # ------------------------------------------------------------------

    def add_custom_prompt(
        self,
        key: str,
        name: str,
        template: str,
        scope: Optional[str] = None,
    ) -> PromptTemplate:
        return self.prompts.add(key, name, template, scope)

    def update_custom_prompt(
        self,
        key: str,
        name: str,
        template: str,
        scope: Optional[str] = None,
    ) -> PromptTemplate:
        return self.prompts.update(key, name, template, scope)

    def remove_custom_prompt(
        self,
        key: str,
        scope: Optional[str] = None,
    ) -> None:
        self.prompts.remove(key, scope)
