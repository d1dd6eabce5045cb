# -*- coding: utf-8 -*-
"""Provider management: models, request backends and registry."""

from .backends import (
    HTTPBackend,
    OpenAISDKBackend,
    ProviderBackend,
    build_backend,
    completions_endpoint,
    extract_content,
)
from .models import (
    CustomProviderRecord,
    ModelInfo,
    ProviderDefinition,
    ProviderSummary,
)
from .registry import (
    PROVIDERS,
    ProviderRegistry,
    is_custom_key,
)

__all__ = [
    # backends
    "HTTPBackend",
    "OpenAISDKBackend",
    "ProviderBackend",
    "build_backend",
    "completions_endpoint",
    "extract_content",
    # models
    "CustomProviderRecord",
    "ModelInfo",
    "ProviderDefinition",
    "ProviderSummary",
    # registry
    "PROVIDERS",
    "ProviderRegistry",
    "is_custom_key",
]
