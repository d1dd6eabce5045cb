# -*- coding: utf-8 -*-
"""CLI commands for translation modes and custom prompt templates."""
from __future__ import annotations

from typing import Optional

import click

from ..exceptions import TranslatorError
from .utils import fail, get_translator, print_json

_SCOPE_HELP = "Provider key the prompt is bound to (default scope if omitted)"


@click.group("prompts")
def prompts_group() -> None:
    """Manage translation modes.

    \b
    Templates may use {sourceLanguage}, {targetLanguage} and {text}.
    Examples:
      quicktrans prompts list --scope deepseek
      quicktrans prompts add legal --name Legal --template "..."
    """


@prompts_group.command("list")
@click.option("--scope", default=None, help=_SCOPE_HELP)
@click.pass_context
def list_cmd(ctx: click.Context, scope: Optional[str]) -> None:
    """List the modes visible from SCOPE."""
    print_json(get_translator(ctx).get_translation_modes(scope))


@prompts_group.command("add")
@click.argument("key")
@click.option("--name", required=True, help="Display name")
@click.option("--template", required=True, help="Prompt template")
@click.option("--scope", default=None, help=_SCOPE_HELP)
@click.pass_context
def add_cmd(
    ctx: click.Context,
    key: str,
    name: str,
    template: str,
    scope: Optional[str],
) -> None:
    """Add a custom prompt KEY."""
    try:
        get_translator(ctx).add_custom_prompt(key, name, template, scope)
    except TranslatorError as e:
        fail(e)
    click.echo(f"✓ Added prompt {key}")


@prompts_group.command("update")
@click.argument("key")
@click.option("--name", required=True, help="Display name")
@click.option("--template", required=True, help="Prompt template")
@click.option("--scope", default=None, help=_SCOPE_HELP)
@click.pass_context
def update_cmd(
    ctx: click.Context,
    key: str,
    name: str,
    template: str,
    scope: Optional[str],
) -> None:
    """Replace the name and template of custom prompt KEY."""
    try:
        get_translator(ctx).update_custom_prompt(key, name, template, scope)
    except TranslatorError as e:
        fail(e)
    click.echo(f"✓ Updated prompt {key}")


@prompts_group.command("remove")
@click.argument("key")
@click.option("--scope", default=None, help=_SCOPE_HELP)
@click.pass_context
def remove_cmd(ctx: click.Context, key: str, scope: Optional[str]) -> None:
    """Remove custom prompt KEY."""
    try:
        get_translator(ctx).remove_custom_prompt(key, scope)
    except TranslatorError as e:
        fail(e)
    click.echo(f"✓ Removed prompt {key}")
