# -*- coding: utf-8 -*-
"""CLI commands for managing LLM providers and their models."""
from __future__ import annotations

from typing import List, Optional, Tuple

import click

from ..exceptions import TranslatorError
from ..providers import ModelInfo
from .utils import fail, get_translator


def mask_api_key(api_key: str, visible_chars: int = 4) -> str:
    """Mask an API key for safe display.

    Example: ``"sk-abcdefghijk"`` → ``"sk-****hijk"``
    """
    if not api_key:
        return ""
    if len(api_key) <= visible_chars:
        return "*" * len(api_key)
    prefix = api_key[:3] if len(api_key) > 3 else ""
    suffix = api_key[-visible_chars:]
    hidden_len = len(api_key) - len(prefix) - visible_chars
    return f"{prefix}{'*' * max(hidden_len, 4)}{suffix}"


def _parse_model_specs(specs: Tuple[str, ...]) -> List[ModelInfo]:
    """Turn ``id`` or ``id=Display Name`` options into ModelInfo."""
    models: List[ModelInfo] = []
    for spec in specs:
        model_id, _, name = spec.partition("=")
        model_id = model_id.strip()
        if not model_id:
            continue
        models.append(ModelInfo(id=model_id, name=name.strip() or model_id))
    return models


# ---------------------------------------------------------------------------
# Group
# ---------------------------------------------------------------------------


@click.group("providers")
def providers_group() -> None:
    """Manage built-in and custom providers."""


# ---------------------------------------------------------------------------
# list / models
# ---------------------------------------------------------------------------


@providers_group.command("list")
@click.pass_context
def list_cmd(ctx: click.Context) -> None:
    """Show all providers and their models."""
    translator = get_translator(ctx)

    click.echo("\n=== Providers ===")
    for defn in translator.registry.list_definitions():
        kind = "built-in" if defn.builtin else "custom"
        key = mask_api_key(translator.get_saved_api_key(defn.id))

        click.echo(f"\n{'─' * 44}")
        click.echo(f"  {defn.name} ({defn.id}) [{kind}]")
        click.echo(f"{'─' * 44}")
        click.echo(f"  {'base_url':16s}: {defn.base_url or '(not set)'}")
        click.echo(f"  {'api_key':16s}: {key or '(not set)'}")
        models = ", ".join(m.id for m in defn.models) or "(none)"
        click.echo(f"  {'models':16s}: {models}")
    click.echo()


@providers_group.command("models")
@click.argument("provider_key")
@click.pass_context
def models_cmd(ctx: click.Context, provider_key: str) -> None:
    """List the models of PROVIDER_KEY."""
    translator = get_translator(ctx)
    for model in translator.get_models(provider_key):
        click.echo(f"{model.id}\t{model.name}")


# ---------------------------------------------------------------------------
# add / remove (custom providers)
# ---------------------------------------------------------------------------


@providers_group.command("add")
@click.option("--name", required=True, help="Display name")
@click.option(
    "--base-url",
    required=True,
    help="OpenAI-compatible endpoint (base or /chat/completions)",
)
@click.option(
    "--model",
    "model_specs",
    multiple=True,
    help="Model as ID or ID=NAME; repeat for several",
)
@click.pass_context
def add_cmd(
    ctx: click.Context,
    name: str,
    base_url: str,
    model_specs: Tuple[str, ...],
) -> None:
    """Register a custom provider and print its key."""
    translator = get_translator(ctx)
    try:
        key = translator.add_custom_model_config(
            name,
            base_url,
            _parse_model_specs(model_specs),
        )
    except TranslatorError as e:
        fail(e)
    click.echo(f"✓ {name}, key: {key}")


@providers_group.command("remove")
@click.argument("provider_key")
@click.pass_context
def remove_cmd(ctx: click.Context, provider_key: str) -> None:
    """Remove the custom provider PROVIDER_KEY."""
    translator = get_translator(ctx)
    if not translator.remove_custom_model_config(provider_key):
        click.echo(
            click.style(f"No custom provider: {provider_key}", fg="red"),
            err=True,
        )
        raise SystemExit(1)
    click.echo(f"✓ Removed {provider_key}")


# ---------------------------------------------------------------------------
# add-model / remove-model
# ---------------------------------------------------------------------------


@providers_group.command("add-model")
@click.argument("provider_key")
@click.argument("model_id")
@click.option("--name", default=None, help="Display name (defaults to id)")
@click.pass_context
def add_model_cmd(
    ctx: click.Context,
    provider_key: str,
    model_id: str,
    name: Optional[str],
) -> None:
    """Add MODEL_ID to the custom provider PROVIDER_KEY."""
    translator = get_translator(ctx)
    try:
        translator.add_model_to_provider(provider_key, model_id, name)
    except TranslatorError as e:
        fail(e)
    click.echo(f"✓ {provider_key}: added {model_id}")


@providers_group.command("remove-model")
@click.argument("provider_key")
@click.argument("model_id")
@click.pass_context
def remove_model_cmd(
    ctx: click.Context,
    provider_key: str,
    model_id: str,
) -> None:
    """Remove MODEL_ID from the custom provider PROVIDER_KEY."""
    translator = get_translator(ctx)
    try:
        translator.remove_model_from_provider(provider_key, model_id)
    except TranslatorError as e:
        fail(e)
    click.echo(f"✓ {provider_key}: removed {model_id}")


# ---------------------------------------------------------------------------
# config-key
# ---------------------------------------------------------------------------


@providers_group.command("config-key")
@click.argument("provider_key")
@click.pass_context
def config_key_cmd(ctx: click.Context, provider_key: str) -> None:
    """Save an API key for PROVIDER_KEY."""
    translator = get_translator(ctx)
    defn = translator.registry.get(provider_key)
    if defn is None:
        click.echo(
            click.style(f"Unknown provider: {provider_key}", fg="red"),
            err=True,
        )
        raise SystemExit(1)

    current_key = translator.get_saved_api_key(provider_key)
    api_key = click.prompt(
        "API key",
        default=current_key or "",
        hide_input=True,
        show_default=False,
        prompt_suffix=f" [{'set' if current_key else 'not set'}]: ",
    )
    translator.save_api_key(provider_key, api_key)
    click.echo(
        f"✓ {defn.name}, API Key: {mask_api_key(api_key) or '(not set)'}",
    )
