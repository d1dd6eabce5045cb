# -*- coding: utf-8 -*-
from fastapi import Request

from ..translator import Translator


def get_translator(request: Request) -> Translator:
    """Return the Translator created for this app instance."""
    return request.app.state.translator
