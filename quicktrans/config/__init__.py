# -*- coding: utf-8 -*-
from .config import ApiConfig, Config, RequestConfig, TranslationDefaults
from .utils import get_config_path, load_config, save_config

__all__ = [
    "ApiConfig",
    "Config",
    "RequestConfig",
    "TranslationDefaults",
    "get_config_path",
    "load_config",
    "save_config",
]
