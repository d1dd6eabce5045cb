# -*- coding: utf-8 -*-
"""Prompt templates: built-in catalog and scoped custom templates."""

from .catalog import (
    SYSTEM_PROMPT,
    TRANSLATION_PROMPTS,
    PromptTemplate,
    get_system_template,
    render_prompt,
)
from .manager import PromptCatalog

__all__ = [
    "SYSTEM_PROMPT",
    "TRANSLATION_PROMPTS",
    "PromptCatalog",
    "PromptTemplate",
    "get_system_template",
    "render_prompt",
]
