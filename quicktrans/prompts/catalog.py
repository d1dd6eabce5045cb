# -*- coding: utf-8 -*-
# flake8: noqa: E501
"""System prompt and the built-in translation mode templates."""

from __future__ import annotations

from typing import Dict, Optional

from pydantic import BaseModel

SYSTEM_PROMPT = """You are a highly capable and precise multilingual translation engine. Your core function is to translate text accurately from one language into another.
When you receive a translation request, follow these guidelines:
1. **Understand the source**: grasp the meaning, context, tone and any nuance of the source text.
2. **Translate faithfully**: the translation must carry exactly the meaning of the original.
3. **Preserve style**: keep the register of the original (formal, informal, literary, technical and so on) and its emotional tone.
4. **Read naturally**: the translation must follow the grammar and usage of the target language.
5. **Handle special elements**: idioms, cultural references and wordplay that have no direct equivalent get the closest expression natural to the target culture.
6. **Output only the translation**: unless told otherwise, do not add explanations, comments or anything unrelated to the translation itself.
You are ready to receive text with its source and target languages and return a high-quality translation."""

SOURCE_LANGUAGE_PLACEHOLDER = "{sourceLanguage}"
TARGET_LANGUAGE_PLACEHOLDER = "{targetLanguage}"
TEXT_PLACEHOLDER = "{text}"


class PromptTemplate(BaseModel):
    """A named translation template."""

    name: str
    template: str


TRANSLATION_PROMPTS: Dict[str, PromptTemplate] = {
    "general": PromptTemplate(
        name="General",
        template="Translate the following text from {sourceLanguage} to {targetLanguage}, keeping the meaning and tone of the original:\n\n{text}",
    ),
    "academic": PromptTemplate(
        name="Academic",
        template="Translate the following academic text from {sourceLanguage} to {targetLanguage}, keeping terminology accurate and the academic style intact:\n\n{text}",
    ),
    "literary": PromptTemplate(
        name="Literary",
        template="Translate the following literary text from {sourceLanguage} to {targetLanguage}, preserving its style, rhetoric and emotion:\n\n{text}",
    ),
    "technical": PromptTemplate(
        name="Technical",
        template="Translate the following technical document from {sourceLanguage} to {targetLanguage}, keeping technical terms accurate and consistent:\n\n{text}",
    ),
    "simplified": PromptTemplate(
        name="Simplified",
        template="Translate the following text from {sourceLanguage} to {targetLanguage} using plain, easy-to-understand language and avoiding complex expressions:\n\n{text}",
    ),
}

GENERAL_MODE = "general"


def get_system_template(mode: Optional[str]) -> PromptTemplate:
    """Return the built-in template for *mode*, or the general one."""
    if mode and mode in TRANSLATION_PROMPTS:
        return TRANSLATION_PROMPTS[mode]
    return TRANSLATION_PROMPTS[GENERAL_MODE]


def render_prompt(
    template: str,
    source_language: str,
    target_language: str,
    text: str,
) -> str:
    """Substitute the first occurrence of each placeholder literally.

    Placeholders are replaced in order (source, target, text), so a value
    that itself contains a later placeholder can be substituted again.
    """
    return (
        template.replace(SOURCE_LANGUAGE_PLACEHOLDER, source_language, 1)
        .replace(TARGET_LANGUAGE_PLACEHOLDER, target_language, 1)
        .replace(TEXT_PLACEHOLDER, text, 1)
    )
