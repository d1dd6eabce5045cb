# -*- coding: utf-8 -*-
"""Error taxonomy shared by the registry, prompt catalog and translator."""

from __future__ import annotations

from typing import Any, Dict, Optional


class TranslatorError(Exception):
    """Base class for every error raised by quicktrans."""

    def __init__(
        self,
        message: str,
        context: Optional[Dict[str, Any]] = None,
    ) -> None:
        self.message = message
        self.context = context or {}
        super().__init__(message)

    def to_dict(self) -> Dict[str, Any]:
        """Return a JSON-friendly representation (used by the HTTP API)."""
        return {
            "type": type(self).__name__,
            "message": self.message,
            "context": self.context,
        }


class MissingParameterError(TranslatorError):
    """A required argument is absent or empty."""


class UnknownProviderError(TranslatorError):
    """The provider key resolves to no registry entry."""

    def __init__(self, provider_key: str) -> None:
        super().__init__(
            f"Unsupported provider: {provider_key}",
            context={"provider": provider_key},
        )
        self.provider_key = provider_key


class UnsupportedOperationError(TranslatorError):
    """The operation is not permitted on the target entry."""


class DuplicateKeyError(TranslatorError):
    """A prompt or model key collides with an existing one."""


class NotFoundError(TranslatorError):
    """A custom prompt, provider or model does not exist."""


class TranslationFailedError(TranslatorError):
    """Wraps any network, SDK or response-parsing failure."""

    def __init__(
        self,
        original_error: Exception,
        context: Optional[Dict[str, Any]] = None,
    ) -> None:
        detail = str(original_error) or type(original_error).__name__
        super().__init__(f"Translation failed: {detail}", context=context)
        self.original_error = original_error

    def to_dict(self) -> Dict[str, Any]:
        data = super().to_dict()
        data["original_error"] = type(self.original_error).__name__
        return data
