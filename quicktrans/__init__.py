# -*- coding: utf-8 -*-
"""LLM-backed text translation over pluggable chat-completion providers."""

from .exceptions import (
    DuplicateKeyError,
    MissingParameterError,
    NotFoundError,
    TranslationFailedError,
    TranslatorError,
    UnknownProviderError,
    UnsupportedOperationError,
)
from .language import detect_language
from .store import JSONFileStore, KeyValueStore, MemoryStore
from .translator import Translator

__version__ = "0.1.0"

__all__ = [
    "DuplicateKeyError",
    "JSONFileStore",
    "KeyValueStore",
    "MemoryStore",
    "MissingParameterError",
    "NotFoundError",
    "TranslationFailedError",
    "Translator",
    "TranslatorError",
    "UnknownProviderError",
    "UnsupportedOperationError",
    "detect_language",
]
