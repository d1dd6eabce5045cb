"""Tests for the click command line."""
import logging

import pytest
from click.testing import CliRunner

from quicktrans.cli.main import cli


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture(autouse=True)
def reset_logging():
    """Detach the CLI log handler, which is bound to the runner's stderr."""
    yield
    logger = logging.getLogger("quicktrans")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.propagate = True


def invoke(runner, translator, args, **kwargs):
    return runner.invoke(cli, args, obj={"translator": translator}, **kwargs)


def test_detect(runner, translator):
    result = invoke(runner, translator, ["detect", "こんにちは"])
    assert result.exit_code == 0
    assert result.output.strip() == "Japanese"


def test_translate(runner, translator, transport):
    result = invoke(
        runner,
        translator,
        ["translate", "Hello", "-t", "Chinese", "-p", "deepseek", "--api-key", "sk-1"],
    )
    assert result.exit_code == 0, result.output
    assert result.output.strip() == "你好"
    # first model of the provider is used when --model is omitted
    assert transport.last_json["model"] == "deepseek-chat"
    assert translator.get_saved_api_key("deepseek") == ""


def test_translate_auto_source_and_save_key(runner, translator, transport):
    result = invoke(
        runner,
        translator,
        [
            "translate", "-", "-f", "auto", "-t", "English",
            "-p", "kimi", "--api-key", "sk-1", "--save-key",
        ],
        input="你好世界\n",
    )
    assert result.exit_code == 0, result.output
    assert "from Chinese to English" in transport.last_json["messages"][-1]["content"]
    assert translator.get_saved_api_key("kimi") == "sk-1"


def test_translate_without_key_fails(runner, translator, transport):
    result = invoke(
        runner,
        translator,
        ["translate", "Hello", "-t", "Chinese", "-p", "kimi"],
    )
    assert result.exit_code == 1
    assert transport.requests == []


def test_providers_add_models_remove(runner, translator):
    result = invoke(
        runner,
        translator,
        [
            "providers", "add", "--name", "Local",
            "--base-url", "http://localhost:8000/v1",
            "--model", "llama3=Llama 3", "--model", "qwen2",
        ],
    )
    assert result.exit_code == 0, result.output
    key = result.output.strip().rsplit(" ", 1)[-1]
    assert key.startswith("custom_")

    result = invoke(runner, translator, ["providers", "models", key])
    assert result.output.splitlines() == ["llama3\tLlama 3", "qwen2\tqwen2"]

    result = invoke(runner, translator, ["providers", "remove-model", key, "llama3"])
    assert result.exit_code == 0
    result = invoke(runner, translator, ["providers", "remove-model", key, "qwen2"])
    assert result.exit_code == 1

    result = invoke(runner, translator, ["providers", "remove", key])
    assert result.exit_code == 0
    result = invoke(runner, translator, ["providers", "remove", key])
    assert result.exit_code == 1


def test_providers_add_model_builtin_fails(runner, translator):
    result = invoke(runner, translator, ["providers", "add-model", "openai", "gpt-4o"])
    assert result.exit_code == 1
    assert "built-in" in result.output


def test_providers_list_masks_key(runner, translator):
    translator.save_api_key("openai", "sk-abcdefghijk")
    result = invoke(runner, translator, ["providers", "list"])
    assert result.exit_code == 0
    assert "sk-****hijk" in result.output
    assert "sk-abcdefghijk" not in result.output


def test_config_key(runner, translator):
    result = invoke(runner, translator, ["providers", "config-key", "kimi"], input="sk-new\n")
    assert result.exit_code == 0, result.output
    assert translator.get_saved_api_key("kimi") == "sk-new"


def test_prompts_commands(runner, translator):
    result = invoke(
        runner,
        translator,
        ["prompts", "add", "legal", "--name", "Legal", "--template", "{text}", "--scope", "kimi"],
    )
    assert result.exit_code == 0, result.output

    result = invoke(runner, translator, ["prompts", "list", "--scope", "kimi"])
    assert '"legal"' in result.output

    result = invoke(
        runner,
        translator,
        ["prompts", "update", "legal", "--name", "Law", "--template", "{text}"],
    )
    assert result.exit_code == 1

    result = invoke(runner, translator, ["prompts", "remove", "legal", "--scope", "kimi"])
    assert result.exit_code == 0
