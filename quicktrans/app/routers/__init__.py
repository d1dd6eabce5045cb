# -*- coding: utf-8 -*-
from .prompts import router as prompts_router
from .providers import router as providers_router
from .translate import router as translate_router

__all__ = ["prompts_router", "providers_router", "translate_router"]
