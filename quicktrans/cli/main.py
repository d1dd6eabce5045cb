# -*- coding: utf-8 -*-
from __future__ import annotations

import asyncio
import sys
from typing import Optional

import click

from .. import __version__
from ..constant import LOG_LEVEL_ENV
from ..exceptions import TranslatorError
from ..language import detect_language
from ..utils.logging import setup_logger
from .app_cmd import app_cmd
from .prompts_cmd import prompts_group
from .providers_cmd import providers_group
from .utils import fail, get_translator


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(__version__, prog_name="quicktrans")
@click.option(
    "--log-level",
    default=None,
    envvar=LOG_LEVEL_ENV,
    type=click.Choice(
        ["critical", "error", "warning", "info", "debug"],
        case_sensitive=False,
    ),
    help="Log level (default: info)",
)
@click.pass_context
def cli(ctx: click.Context, log_level: Optional[str]) -> None:
    """Translate text with LLM chat-completion providers."""
    ctx.ensure_object(dict)
    setup_logger(log_level)


@cli.command("translate")
@click.argument("text", required=False)
@click.option("-t", "--to", "target", default=None, help="Target language")
@click.option(
    "-f",
    "--from",
    "source",
    default=None,
    help="Source language; 'auto' sniffs it from the text",
)
@click.option("-p", "--provider", default=None, help="Provider key")
@click.option("-m", "--model", default=None, help="Model id")
@click.option("--mode", default=None, help="Translation mode key")
@click.option(
    "--api-key",
    default=None,
    envvar="QUICKTRANS_API_KEY",
    help="API key (defaults to the saved key for the provider)",
)
@click.option(
    "--save-key",
    is_flag=True,
    default=False,
    help="Save --api-key for the provider before translating",
)
@click.pass_context
def translate_cmd(
    ctx: click.Context,
    text: Optional[str],
    target: Optional[str],
    source: Optional[str],
    provider: Optional[str],
    model: Optional[str],
    mode: Optional[str],
    api_key: Optional[str],
    save_key: bool,
) -> None:
    """Translate TEXT (read from stdin when omitted or '-')."""
    translator = get_translator(ctx)
    defaults = translator.config.defaults
    if text is None or text == "-":
        text = sys.stdin.read().strip()

    provider = provider or defaults.provider
    model = model or defaults.model
    if provider and not model:
        models = translator.get_models(provider)
        model = models[0].id if models else ""
    if source and source.lower() == "auto":
        source = translator.detect_language(text)
    if not api_key and provider:
        api_key = translator.get_saved_api_key(provider)

    try:
        result = asyncio.run(
            translator.translate(
                text=text,
                target_language=target or defaults.target_language,
                provider=provider,
                model=model,
                api_key=api_key or "",
                source_language=source,
                mode=mode or defaults.mode,
                save_api_key=save_key,
            ),
        )
    except TranslatorError as e:
        fail(e)
    click.echo(result)


@cli.command("detect")
@click.argument("text")
def detect_cmd(text: str) -> None:
    """Print the language sniffed from TEXT."""
    click.echo(detect_language(text))


cli.add_command(providers_group)
cli.add_command(prompts_group)
cli.add_command(app_cmd)


if __name__ == "__main__":
    cli()  # pylint: disable=no-value-for-parameter
