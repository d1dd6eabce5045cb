# -*- coding: utf-8 -*-
"""FastAPI application factory."""

from __future__ import annotations

import logging
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from .. import __version__
from ..config import load_config
from ..exceptions import (
    DuplicateKeyError,
    MissingParameterError,
    NotFoundError,
    TranslationFailedError,
    TranslatorError,
    UnknownProviderError,
    UnsupportedOperationError,
)
from ..store import JSONFileStore
from ..translator import Translator
from .routers import prompts_router, providers_router, translate_router

logger = logging.getLogger(__name__)

_STATUS_BY_ERROR = (
    (MissingParameterError, 400),
    (UnknownProviderError, 404),
    (UnsupportedOperationError, 403),
    (DuplicateKeyError, 409),
    (NotFoundError, 404),
    (TranslationFailedError, 502),
)


def status_for_error(exc: TranslatorError) -> int:
    for error_cls, status_code in _STATUS_BY_ERROR:
        if isinstance(exc, error_cls):
            return status_code
    return 500


async def _translator_error_handler(
    request: Request,
    exc: TranslatorError,
) -> JSONResponse:
    status_code = status_for_error(exc)
    if status_code >= 500:
        logger.warning(f"{request.method} {request.url.path}: {exc.message}")
    return JSONResponse(
        status_code=status_code,
        content={"detail": exc.message, "error": exc.to_dict()},
    )


def create_app(translator: Optional[Translator] = None) -> FastAPI:
    """Build the API app around *translator* (file-backed by default)."""
    if translator is None:
        translator = Translator(JSONFileStore(), load_config())

    app = FastAPI(title="quicktrans", version=__version__)
    app.state.translator = translator
    app.add_exception_handler(TranslatorError, _translator_error_handler)

    app.include_router(providers_router)
    app.include_router(prompts_router)
    app.include_router(translate_router)
    return app
