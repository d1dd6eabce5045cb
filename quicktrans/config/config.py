# -*- coding: utf-8 -*-
from typing import Optional

from pydantic import BaseModel, Field

from ..constant import DEFAULT_MODE, DEFAULT_TEMPERATURE


class TranslationDefaults(BaseModel):
    """Defaults used when the CLI or API caller leaves a field out."""

    provider: str = ""
    model: str = ""
    mode: str = DEFAULT_MODE
    target_language: str = "Chinese"


class RequestConfig(BaseModel):
    """Outbound chat-completion request settings."""

    temperature: float = Field(default=DEFAULT_TEMPERATURE, ge=0.0, le=2.0)
    # None keeps the HTTP client's own default.
    timeout: Optional[float] = Field(default=None, gt=0)
    use_system_prompt: bool = True


class ApiConfig(BaseModel):
    host: str = "127.0.0.1"
    port: int = 8090


class Config(BaseModel):
    """Root config (config.json)."""

    defaults: TranslationDefaults = Field(default_factory=TranslationDefaults)
    request: RequestConfig = Field(default_factory=RequestConfig)
    api: ApiConfig = Field(default_factory=ApiConfig)
