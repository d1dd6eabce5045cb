# -*- coding: utf-8 -*-
"""Pydantic data models for providers and models."""

from __future__ import annotations

from typing import List, Literal

from pydantic import BaseModel, Field

ProviderKind = Literal["openai_sdk", "http"]


class ModelInfo(BaseModel):
    """A single model offered by a provider."""

    id: str = Field(..., description="Model identifier used in API calls")
    name: str = Field(..., description="Human-readable model name")


class ProviderDefinition(BaseModel):
    """Definition of a provider (built-in or custom).

    Carries only data; the request behaviour is attached by
    :func:`quicktrans.providers.backends.build_backend` from ``kind``.
    """

    id: str = Field(..., description="Provider identifier")
    name: str = Field(..., description="Human-readable provider name")
    kind: ProviderKind = Field(
        default="http",
        description="Request style: OpenAI SDK client or raw HTTP",
    )
    base_url: str = Field(default="", description="API base URL")
    models: List[ModelInfo] = Field(
        default_factory=list,
        description="Models offered by this provider",
    )
    builtin: bool = Field(
        default=False,
        description="Built-in entries are immutable at runtime",
    )


class CustomProviderRecord(BaseModel):
    """Stored form of a custom provider (custom_model_configs)."""

    name: str
    base_url: str
    models: List[ModelInfo] = Field(default_factory=list)


class ProviderSummary(BaseModel):
    """Provider entry returned by listings."""

    key: str
    name: str
    builtin: bool = True
    has_api_key: bool = False

