# -*- coding: utf-8 -*-
"""Request styles for chat-completion providers.

Two variants exist: providers reached through the OpenAI SDK and providers
reached with a raw HTTP POST. Both expose ``create_client`` and an async
``translate``; clients are async context managers and are closed by the
caller after one request.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional

import httpx
from openai import AsyncOpenAI

from ..constant import DEFAULT_TEMPERATURE
from .models import ProviderDefinition

Messages = List[Dict[str, str]]

_COMPLETIONS_PATH = "/chat/completions"


def completions_endpoint(base_url: str) -> str:
    """Return the chat-completions URL for *base_url*."""
    url = base_url.rstrip("/")
    if url.endswith(_COMPLETIONS_PATH):
        return url
    return url + _COMPLETIONS_PATH


def extract_content(data: Any) -> str:
    """Read ``choices[0].message.content`` from a response body."""
    try:
        content = data["choices"][0]["message"]["content"]
    except (KeyError, IndexError, TypeError) as e:
        raise ValueError(
            "Malformed response: missing choices[0].message.content",
        ) from e
    if not isinstance(content, str):
        raise ValueError("Malformed response: message content is not text")
    return content


class ProviderBackend(ABC):
    """Common capability contract for every provider variant."""

    def __init__(
        self,
        base_url: str,
        *,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self.base_url = base_url
        self.timeout = timeout
        self.transport = transport

    @abstractmethod
    def create_client(self, api_key: str) -> Any:
        """Return a client bound to *api_key*."""

    @abstractmethod
    async def translate(
        self,
        client: Any,
        model: str,
        messages: Messages,
        temperature: float = DEFAULT_TEMPERATURE,
    ) -> str:
        """Send *messages* to *model* and return the reply text."""


class OpenAISDKBackend(ProviderBackend):
    """OpenAI-compatible endpoint driven by ``openai.AsyncOpenAI``."""

    def create_client(self, api_key: str) -> AsyncOpenAI:
        kwargs: Dict[str, Any] = {"api_key": api_key, "base_url": self.base_url}
        if self.timeout is not None:
            kwargs["timeout"] = self.timeout
        if self.transport is not None:
            kwargs["http_client"] = httpx.AsyncClient(transport=self.transport)
        return AsyncOpenAI(**kwargs)

    async def translate(
        self,
        client: AsyncOpenAI,
        model: str,
        messages: Messages,
        temperature: float = DEFAULT_TEMPERATURE,
    ) -> str:
        response = await client.chat.completions.create(
            model=model,
            messages=messages,
            temperature=temperature,
        )
        if not response.choices:
            raise ValueError("Malformed response: no choices returned")
        content = response.choices[0].message.content
        if content is None:
            raise ValueError("Malformed response: empty message content")
        return content


class HTTPBackend(ProviderBackend):
    """Raw JSON POST to a chat-completions endpoint via ``httpx``."""

    @property
    def endpoint(self) -> str:
        return completions_endpoint(self.base_url)

    def create_client(self, api_key: str) -> httpx.AsyncClient:
        headers = {
            "Content-Type": "application/json",
            "Authorization": f"Bearer {api_key}",
        }
        kwargs: Dict[str, Any] = {"headers": headers}
        if self.timeout is not None:
            kwargs["timeout"] = self.timeout
        if self.transport is not None:
            kwargs["transport"] = self.transport
        return httpx.AsyncClient(**kwargs)

    @staticmethod
    def build_payload(
        model: str,
        messages: Messages,
        temperature: float = DEFAULT_TEMPERATURE,
    ) -> Dict[str, Any]:
        return {
            "model": model,
            "messages": messages,
            "temperature": temperature,
            "stream": False,
        }

    async def translate(
        self,
        client: httpx.AsyncClient,
        model: str,
        messages: Messages,
        temperature: float = DEFAULT_TEMPERATURE,
    ) -> str:
        response = await client.post(
            self.endpoint,
            json=self.build_payload(model, messages, temperature),
        )
        response.raise_for_status()
        return extract_content(response.json())


_BACKENDS = {
    "openai_sdk": OpenAISDKBackend,
    "http": HTTPBackend,
}


def build_backend(
    definition: ProviderDefinition,
    *,
    timeout: Optional[float] = None,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> ProviderBackend:
    """Attach request behaviour to a provider definition."""
    backend_cls = _BACKENDS[definition.kind]
    return backend_cls(
        definition.base_url,
        timeout=timeout,
        transport=transport,
    )
