"""Tests for built-in and scoped custom prompt templates."""
import pytest

from quicktrans.exceptions import (
    DuplicateKeyError,
    MissingParameterError,
    NotFoundError,
)
from quicktrans.prompts import (
    TRANSLATION_PROMPTS,
    PromptCatalog,
    get_system_template,
    render_prompt,
)
from quicktrans.store import load_custom_prompts


@pytest.fixture
def catalog(store):
    return PromptCatalog(store)


def test_render_prompt_exact():
    result = render_prompt(
        "Translate {sourceLanguage} to {targetLanguage}: {text}",
        "English",
        "Chinese",
        "Hello",
    )
    assert result == "Translate English to Chinese: Hello"


def test_render_prompt_replaces_first_occurrence_only():
    result = render_prompt("{text} / {text}", "en", "zh", "hi")
    assert result == "hi / {text}"


def test_unknown_mode_falls_back_to_general():
    assert get_system_template("nope") is TRANSLATION_PROMPTS["general"]
    assert get_system_template(None) is TRANSLATION_PROMPTS["general"]


def test_system_modes_listed(catalog):
    keys = [m["key"] for m in catalog.list_modes()]
    assert keys == ["general", "academic", "literary", "technical", "simplified"]


def test_add_default_scope_conflicts_with_system_key(catalog):
    with pytest.raises(DuplicateKeyError):
        catalog.add("general", "Mine", "{text}")


def test_add_default_scope_duplicate(catalog):
    catalog.add("legal", "Legal", "{text}")
    with pytest.raises(DuplicateKeyError):
        catalog.add("legal", "Legal 2", "{text}")


def test_add_provider_scope_conflicts_with_default_custom(catalog):
    catalog.add("legal", "Legal", "{text}")
    with pytest.raises(DuplicateKeyError):
        catalog.add("legal", "Legal", "{text}", scope="kimi")


def test_provider_scope_may_shadow_system_key(catalog):
    catalog.add("general", "Kimi general", "K: {text}", scope="kimi")
    assert catalog.resolve("general", "kimi").template == "K: {text}"
    assert catalog.resolve("general", "openai") is TRANSLATION_PROMPTS["general"]


def test_add_requires_fields(catalog):
    with pytest.raises(MissingParameterError):
        catalog.add("", "Name", "{text}")
    with pytest.raises(MissingParameterError):
        catalog.add("k", "Name", "")


def test_resolution_precedence(catalog):
    catalog.add("legal", "Kimi legal", "provider {text}", scope="kimi")
    catalog.add("legal", "Legal", "default {text}")

    assert catalog.resolve("legal", "kimi").template == "provider {text}"
    assert catalog.resolve("legal", "openai").template == "default {text}"
    assert catalog.resolve("academic", "kimi") is TRANSLATION_PROMPTS["academic"]


def test_list_modes_merges_scopes(catalog):
    catalog.add("legal", "Kimi legal", "{text}", scope="kimi")
    catalog.add("legal", "Legal", "{text}")
    catalog.add("poetry", "Poetry", "{text}", scope="kimi")

    default_modes = catalog.list_modes()
    assert default_modes[-1] == {"key": "legal", "name": "Legal"}

    kimi_modes = catalog.list_modes("kimi")
    assert kimi_modes[-2:] == [
        {"key": "legal", "name": "Kimi legal"},
        {"key": "poetry", "name": "Poetry"},
    ]


def test_update(store, catalog):
    catalog.add("legal", "Legal", "{text}")
    catalog.update("legal", "Law", "Law: {text}")
    assert PromptCatalog(store).resolve("legal", "x").name == "Law"


def test_update_missing_key(catalog):
    with pytest.raises(NotFoundError):
        catalog.update("general", "General", "{text}")
    catalog.add("legal", "Legal", "{text}")
    with pytest.raises(NotFoundError):
        catalog.update("legal", "Legal", "{text}", scope="kimi")


def test_remove(store, catalog):
    catalog.add("legal", "Legal", "{text}", scope="kimi")
    catalog.remove("legal", scope="kimi")
    assert load_custom_prompts(store) == {}
    with pytest.raises(NotFoundError):
        catalog.remove("legal", scope="kimi")


def test_persisted_layout(store, catalog):
    catalog.add("legal", "Legal", "L {text}", scope="deepseek")
    assert load_custom_prompts(store) == {
        "deepseek": {"legal": {"name": "Legal", "template": "L {text}"}},
    }
