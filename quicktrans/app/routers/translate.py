# -*- coding: utf-8 -*-
"""API routes for translating text and sniffing its language."""

from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Body, Depends
from pydantic import BaseModel, Field

from ...constant import DEFAULT_MODE
from ...translator import Translator
from ..deps import get_translator

router = APIRouter(tags=["translate"])


class TranslateRequest(BaseModel):
    text: str = Field(default="", description="Text to translate")
    target_language: str = Field(default="")
    provider: str = Field(default="", description="Provider key")
    model: str = Field(default="", description="Model identifier")
    api_key: Optional[str] = Field(
        default=None,
        description="API key; the saved key is used when omitted",
    )
    source_language: Optional[str] = None
    mode: str = Field(default=DEFAULT_MODE)
    save_api_key: bool = Field(
        default=False,
        description="Persist api_key for the provider before translating",
    )


class TranslateResponse(BaseModel):
    translation: str


class DetectRequest(BaseModel):
    text: str


class DetectResponse(BaseModel):
    language: str


@router.post("/translate", response_model=TranslateResponse)
async def translate_text(
    body: TranslateRequest = Body(...),
    translator: Translator = Depends(get_translator),
) -> TranslateResponse:
    api_key = body.api_key
    if not api_key and body.provider:
        api_key = translator.get_saved_api_key(body.provider)
    translation = await translator.translate(
        text=body.text,
        target_language=body.target_language,
        provider=body.provider,
        model=body.model,
        api_key=api_key or "",
        source_language=body.source_language,
        mode=body.mode,
        save_api_key=body.save_api_key,
    )
    return TranslateResponse(translation=translation)


@router.post("/detect", response_model=DetectResponse)
async def detect(body: DetectRequest = Body(...)) -> DetectResponse:
    return DetectResponse(language=Translator.detect_language(body.text))
