# -*- coding: utf-8 -*-
"""API routes for LLM providers and their models."""

from __future__ import annotations

from typing import List, Optional

from fastapi import APIRouter, Body, Depends, Path
from pydantic import BaseModel, Field

from ...providers import ModelInfo, ProviderSummary
from ...translator import Translator
from ..deps import get_translator

router = APIRouter(prefix="/providers", tags=["providers"])


# ---------------------------------------------------------------------------
# Request schemas
# ---------------------------------------------------------------------------


class CustomProviderRequest(BaseModel):
    """Request body for registering a custom provider."""

    name: str = Field(..., description="Display name")
    base_url: str = Field(
        ...,
        description="OpenAI-compatible endpoint (base or /chat/completions)",
    )
    models: List[ModelInfo] = Field(
        ...,
        description="At least one model offered by the endpoint",
    )


class CustomProviderCreated(BaseModel):
    key: str


class AddModelRequest(BaseModel):
    id: str = Field(..., description="Model identifier")
    name: Optional[str] = Field(
        default=None,
        description="Display name (defaults to the id)",
    )


class ApiKeyRequest(BaseModel):
    api_key: str = Field(..., description="API key for the provider")


# ---------------------------------------------------------------------------
# Endpoints: listings
# ---------------------------------------------------------------------------


@router.get(
    "",
    response_model=List[ProviderSummary],
    summary="List all providers",
    description="Built-in providers first, then custom providers.",
)
async def list_all_providers(
    translator: Translator = Depends(get_translator),
) -> List[ProviderSummary]:
    return translator.get_providers()


@router.get(
    "/{provider_key}/models",
    response_model=List[ModelInfo],
    summary="List models of a provider",
    description="Returns an empty list for unknown providers.",
)
async def list_provider_models(
    provider_key: str = Path(..., description="Provider identifier"),
    translator: Translator = Depends(get_translator),
) -> List[ModelInfo]:
    return translator.get_models(provider_key)


# ---------------------------------------------------------------------------
# Endpoints: custom provider CRUD
# ---------------------------------------------------------------------------


@router.post(
    "/custom",
    response_model=CustomProviderCreated,
    status_code=201,
    summary="Register a custom provider",
)
async def add_custom_provider(
    body: CustomProviderRequest = Body(...),
    translator: Translator = Depends(get_translator),
) -> CustomProviderCreated:
    key = translator.add_custom_model_config(
        body.name,
        body.base_url,
        body.models,
    )
    return CustomProviderCreated(key=key)


@router.delete(
    "/custom/{provider_key}",
    summary="Remove a custom provider",
    description="Returns removed=false when the key is not a custom provider.",
)
async def remove_custom_provider(
    provider_key: str = Path(..., description="Custom provider key"),
    translator: Translator = Depends(get_translator),
) -> dict:
    return {"removed": translator.remove_custom_model_config(provider_key)}


@router.post(
    "/{provider_key}/models",
    response_model=ModelInfo,
    status_code=201,
    summary="Add a model to a custom provider",
)
async def add_provider_model(
    provider_key: str = Path(..., description="Provider identifier"),
    body: AddModelRequest = Body(...),
    translator: Translator = Depends(get_translator),
) -> ModelInfo:
    return translator.add_model_to_provider(provider_key, body.id, body.name)


@router.delete(
    "/{provider_key}/models/{model_id:path}",
    status_code=204,
    summary="Remove a model from a custom provider",
)
async def remove_provider_model(
    provider_key: str = Path(..., description="Provider identifier"),
    model_id: str = Path(..., description="Model identifier"),
    translator: Translator = Depends(get_translator),
) -> None:
    translator.remove_model_from_provider(provider_key, model_id)


# ---------------------------------------------------------------------------
# Endpoints: API key
# ---------------------------------------------------------------------------


@router.put(
    "/{provider_key}/api-key",
    response_model=ProviderSummary,
    summary="Save a provider's API key",
)
async def save_provider_api_key(
    provider_key: str = Path(..., description="Provider identifier"),
    body: ApiKeyRequest = Body(...),
    translator: Translator = Depends(get_translator),
) -> ProviderSummary:
    defn = translator.registry.require(provider_key)
    translator.save_api_key(provider_key, body.api_key)
    return ProviderSummary(
        key=defn.id,
        name=defn.name,
        builtin=defn.builtin,
        has_api_key=bool(body.api_key),
    )
