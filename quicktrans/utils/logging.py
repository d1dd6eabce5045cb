# -*- coding: utf-8 -*-
"""Logging setup for the quicktrans logger tree."""

from __future__ import annotations

import logging
import os
from typing import Optional

from ..constant import LOG_LEVEL_ENV

_FORMAT = "%(asctime)s %(levelname)s %(name)s:%(lineno)d - %(message)s"
_HANDLER_NAME = "quicktrans-stderr"


def setup_logger(level: Optional[str] = None) -> logging.Logger:
    """Attach a stderr handler to the ``quicktrans`` logger.

    *level* falls back to ``QUICKTRANS_LOG_LEVEL`` and then ``info``.
    The handler is rebuilt on every call so it follows the current
    ``sys.stderr``.
    """
    level_name = (level or os.environ.get(LOG_LEVEL_ENV) or "info").upper()
    logger = logging.getLogger("quicktrans")
    logger.setLevel(getattr(logging, level_name, logging.INFO))
    for handler in list(logger.handlers):
        if handler.get_name() == _HANDLER_NAME:
            logger.removeHandler(handler)

    handler = logging.StreamHandler()
    handler.set_name(_HANDLER_NAME)
    handler.setFormatter(logging.Formatter(_FORMAT))
    logger.addHandler(handler)
    logger.propagate = False
    return logger
