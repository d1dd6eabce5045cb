# -*- coding: utf-8 -*-
"""User-defined prompt templates, scoped per provider.

Custom templates live in a ``{scope: {key: {name, template}}}`` table.
The ``default`` scope applies to every provider; a provider scope only
applies when translating with that provider.
"""

from __future__ import annotations

import logging
from typing import Dict, List, Optional

from pydantic import ValidationError

from ..constant import DEFAULT_PROMPT_SCOPE
from ..exceptions import DuplicateKeyError, MissingParameterError, NotFoundError
from ..store import KeyValueStore, load_custom_prompts, save_custom_prompts
from .catalog import TRANSLATION_PROMPTS, PromptTemplate, get_system_template

logger = logging.getLogger(__name__)

ScopeTable = Dict[str, PromptTemplate]


def _scope_name(scope: Optional[str]) -> str:
    return scope or DEFAULT_PROMPT_SCOPE


class PromptCatalog:
    """Resolves built-in and custom templates; persists custom ones."""

    def __init__(self, store: KeyValueStore) -> None:
        self._store = store
        self._custom: Dict[str, ScopeTable] = {}
        self._load()

    def _load(self) -> None:
        for scope, entries in load_custom_prompts(self._store).items():
            if not isinstance(entries, dict):
                continue
            table: ScopeTable = {}
            for key, raw in entries.items():
                try:
                    table[key] = PromptTemplate.model_validate(raw)
                except ValidationError:
                    logger.warning(
                        f"Skipping invalid custom prompt {scope}/{key}",
                    )
            if table:
                self._custom[scope] = table

    def _save(self) -> None:
        table = {
            scope: {
                key: prompt.model_dump(mode="json")
                for key, prompt in entries.items()
            }
            for scope, entries in self._custom.items()
        }
        save_custom_prompts(self._store, table)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def custom_prompts(self, scope: Optional[str] = None) -> ScopeTable:
        return dict(self._custom.get(_scope_name(scope), {}))

    def list_modes(self, scope: Optional[str] = None) -> List[Dict[str, str]]:
        """Return ``{key, name}`` for every mode visible from *scope*.

        Order: built-in modes, default-scope custom modes, then modes of
        *scope*. A later entry with an existing key replaces its name in
        place.
        """
        merged: Dict[str, str] = {
            key: prompt.name for key, prompt in TRANSLATION_PROMPTS.items()
        }
        layers = [DEFAULT_PROMPT_SCOPE]
        if scope and scope != DEFAULT_PROMPT_SCOPE:
            layers.append(scope)
        for layer in layers:
            for key, prompt in self._custom.get(layer, {}).items():
                merged[key] = prompt.name
        return [{"key": key, "name": name} for key, name in merged.items()]

    def resolve(self, mode: Optional[str], provider_key: str) -> PromptTemplate:
        """Pick the template for *mode* as seen from *provider_key*.

        Provider scope wins over the default scope, which wins over the
        built-in templates. Unknown modes fall back to ``general``.
        """
        if mode:
            for scope in (provider_key, DEFAULT_PROMPT_SCOPE):
                prompt = self._custom.get(scope, {}).get(mode)
                if prompt is not None:
                    return prompt
        return get_system_template(mode)

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------

    def add(
        self,
        key: str,
        name: str,
        template: str,
        scope: Optional[str] = None,
    ) -> PromptTemplate:
        if not key or not name or not template:
            raise MissingParameterError(
                "Prompt key, name and template are required",
            )
        scope = _scope_name(scope)
        default_custom = self._custom.get(DEFAULT_PROMPT_SCOPE, {})
        if scope == DEFAULT_PROMPT_SCOPE:
            if key in TRANSLATION_PROMPTS:
                raise DuplicateKeyError(
                    f"Prompt key conflicts with a built-in mode: {key}",
                    context={"key": key, "scope": scope},
                )
            if key in default_custom:
                raise DuplicateKeyError(
                    f"Prompt key already exists: {key}",
                    context={"key": key, "scope": scope},
                )
        else:
            if key in default_custom:
                raise DuplicateKeyError(
                    f"Prompt key conflicts with a default custom prompt: {key}",
                    context={"key": key, "scope": scope},
                )
            if key in self._custom.get(scope, {}):
                raise DuplicateKeyError(
                    f"Prompt key already exists in scope {scope}: {key}",
                    context={"key": key, "scope": scope},
                )

        prompt = PromptTemplate(name=name, template=template)
        self._custom.setdefault(scope, {})[key] = prompt
        self._save()
        logger.info(f"Added custom prompt {scope}/{key}")
        return prompt

    def update(
        self,
        key: str,
        name: str,
        template: str,
        scope: Optional[str] = None,
    ) -> PromptTemplate:
        scope = _scope_name(scope)
        entries = self._custom.get(scope, {})
        if key not in entries:
            raise NotFoundError(
                f"Custom prompt not found: {key}",
                context={"key": key, "scope": scope},
            )
        if not name or not template:
            raise MissingParameterError("Prompt name and template are required")
        prompt = PromptTemplate(name=name, template=template)
        entries[key] = prompt
        self._save()
        return prompt

    def remove(self, key: str, scope: Optional[str] = None) -> None:
        scope = _scope_name(scope)
        entries = self._custom.get(scope, {})
        if key not in entries:
            raise NotFoundError(
                f"Custom prompt not found: {key}",
                context={"key": key, "scope": scope},
            )
        del entries[key]
        if not entries:
            del self._custom[scope]
        self._save()
        logger.info(f"Removed custom prompt {scope}/{key}")
