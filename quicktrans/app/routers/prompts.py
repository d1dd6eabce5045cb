# -*- coding: utf-8 -*-
"""API routes for translation modes and custom prompt templates."""

from __future__ import annotations

from typing import Dict, List, Optional

from fastapi import APIRouter, Body, Depends, Path, Query
from pydantic import BaseModel, Field

from ...prompts import PromptTemplate
from ...translator import Translator
from ..deps import get_translator

router = APIRouter(prefix="/prompts", tags=["prompts"])


class PromptRequest(BaseModel):
    name: str = Field(..., description="Display name")
    template: str = Field(
        ...,
        description="Template with {sourceLanguage}, {targetLanguage} "
        "and {text} placeholders",
    )
    scope: Optional[str] = Field(
        default=None,
        description="Provider key, or empty for the default scope",
    )


class NewPromptRequest(PromptRequest):
    key: str = Field(..., description="Mode key")


@router.get("", summary="List translation modes visible from a scope")
async def list_modes(
    scope: Optional[str] = Query(default=None),
    translator: Translator = Depends(get_translator),
) -> List[Dict[str, str]]:
    return translator.get_translation_modes(scope)


@router.post("", response_model=PromptTemplate, status_code=201)
async def add_prompt(
    body: NewPromptRequest = Body(...),
    translator: Translator = Depends(get_translator),
) -> PromptTemplate:
    return translator.add_custom_prompt(
        body.key,
        body.name,
        body.template,
        body.scope,
    )


@router.put("/{key}", response_model=PromptTemplate)
async def update_prompt(
    key: str = Path(...),
    body: PromptRequest = Body(...),
    translator: Translator = Depends(get_translator),
) -> PromptTemplate:
    return translator.update_custom_prompt(
        key,
        body.name,
        body.template,
        body.scope,
    )


@router.delete("/{key}", status_code=204)
async def remove_prompt(
    key: str = Path(...),
    scope: Optional[str] = Query(default=None),
    translator: Translator = Depends(get_translator),
) -> None:
    translator.remove_custom_prompt(key, scope)
