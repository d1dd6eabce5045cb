# -*- coding: utf-8 -*-
from __future__ import annotations

from typing import Optional

import click
import uvicorn

from ..app import create_app
from .utils import get_translator


@click.command("app")
@click.option("--host", default=None, help="Bind host (config: api.host)")
@click.option(
    "--port",
    default=None,
    type=int,
    help="Bind port (config: api.port)",
)
@click.pass_context
def app_cmd(
    ctx: click.Context,
    host: Optional[str],
    port: Optional[int],
) -> None:
    """Serve the HTTP API."""
    translator = get_translator(ctx)
    api = translator.config.api
    uvicorn.run(
        create_app(translator),
        host=host or api.host,
        port=port or api.port,
    )
