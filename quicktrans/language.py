# -*- coding: utf-8 -*-
"""Character-range language sniffing.

A single matching character decides the verdict, checked in the order
Chinese, Japanese, Korean. Anything else is reported as English.
"""

from __future__ import annotations

import re

CHINESE = "Chinese"
JAPANESE = "Japanese"
KOREAN = "Korean"
ENGLISH = "English"

_CHINESE_RE = re.compile("[\u4e00-\u9fa5]")
_JAPANESE_RE = re.compile("[\u3040-\u30ff]")
_KOREAN_RE = re.compile("[\uac00-\ud7a3]")

_CHECKS = (
    (_CHINESE_RE, CHINESE),
    (_JAPANESE_RE, JAPANESE),
    (_KOREAN_RE, KOREAN),
)


def detect_language(text: str) -> str:
    """Return the language label for *text*."""
    for pattern, label in _CHECKS:
        if pattern.search(text or ""):
            return label
    return ENGLISH


__all__ = [
    "CHINESE",
    "ENGLISH",
    "JAPANESE",
    "KOREAN",
    "detect_language",
]
