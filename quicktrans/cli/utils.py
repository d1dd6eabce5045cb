# -*- coding: utf-8 -*-
from __future__ import annotations

import json
from typing import Any

import click

from ..config import load_config
from ..exceptions import TranslatorError
from ..store import JSONFileStore
from ..translator import Translator


def print_json(data: Any) -> None:
    click.echo(json.dumps(data, ensure_ascii=False, indent=2))


def get_translator(ctx: click.Context) -> Translator:
    """Return the shared Translator, building the file-backed one lazily."""
    obj = ctx.ensure_object(dict)
    if obj.get("translator") is None:
        obj["translator"] = Translator(JSONFileStore(), load_config())
    return obj["translator"]


def fail(exc: TranslatorError) -> None:
    click.echo(click.style(f"Error: {exc.message}", fg="red"), err=True)
    raise SystemExit(1)
