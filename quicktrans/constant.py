# -*- coding: utf-8 -*-
import os
from pathlib import Path

WORKING_DIR = (
    Path(os.environ.get("QUICKTRANS_WORKING_DIR", "~/.quicktrans"))
    .expanduser()
    .resolve()
)

CONFIG_FILE = os.environ.get("QUICKTRANS_CONFIG_FILE", "config.json")

STORAGE_FILE = os.environ.get("QUICKTRANS_STORAGE_FILE", "storage.json")

# Env key for app log level (used by CLI and app load).
LOG_LEVEL_ENV = "QUICKTRANS_LOG_LEVEL"

# ---------------------------------------------------------------------------
# Storage keys
# ---------------------------------------------------------------------------

API_KEY_SUFFIX = "_api_key"
CUSTOM_MODEL_CONFIGS_KEY = "custom_model_configs"
CUSTOM_PROMPTS_KEY = "custom_prompts"

CUSTOM_PROVIDER_PREFIX = "custom_"

# Scope used for custom prompts that are not bound to a provider.
DEFAULT_PROMPT_SCOPE = "default"

DEFAULT_MODE = "general"

# Rendered in place of {sourceLanguage} when the caller gives none.
AUTO_DETECT_LANGUAGE = "auto-detect"

DEFAULT_TEMPERATURE = 0.3

# ---------------------------------------------------------------------------
# Built-in provider endpoints, overridable per deployment.
# ---------------------------------------------------------------------------

ZHIPU_BASE_URL = os.environ.get(
    "QUICKTRANS_ZHIPU_BASE_URL",
    "https://open.bigmodel.cn/api/paas/v4",
)

DOUBAO_BASE_URL = os.environ.get(
    "QUICKTRANS_DOUBAO_BASE_URL",
    "https://ark.cn-beijing.volces.com/api/v3",
)

DEEPSEEK_BASE_URL = os.environ.get(
    "QUICKTRANS_DEEPSEEK_BASE_URL",
    "https://api.deepseek.com/v1",
)

KIMI_BASE_URL = os.environ.get(
    "QUICKTRANS_KIMI_BASE_URL",
    "https://api.moonshot.cn/v1",
)

OPENAI_BASE_URL = os.environ.get(
    "QUICKTRANS_OPENAI_BASE_URL",
    "https://api.openai.com/v1",
)
