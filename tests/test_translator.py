"""Tests for translation dispatch."""
import asyncio

import pytest

from quicktrans import (
    MissingParameterError,
    TranslationFailedError,
    Translator,
    UnknownProviderError,
)
from quicktrans.config import Config, RequestConfig
from quicktrans.prompts import SYSTEM_PROMPT

from .conftest import RecordingTransport, completion_body


def run_translate(translator, **overrides):
    params = {
        "text": "Hello",
        "target_language": "Chinese",
        "provider": "deepseek",
        "model": "deepseek-chat",
        "api_key": "sk-test",
    }
    params.update(overrides)
    return asyncio.run(translator.translate(**params))


@pytest.mark.parametrize(
    "field",
    ["text", "target_language", "provider", "model", "api_key"],
)
def test_missing_parameter_before_request(translator, transport, field):
    with pytest.raises(MissingParameterError) as exc_info:
        run_translate(translator, **{field: ""})
    assert field in exc_info.value.message
    assert transport.requests == []


def test_unknown_provider(translator, transport):
    with pytest.raises(UnknownProviderError):
        run_translate(translator, provider="nope")
    assert transport.requests == []


def test_http_provider_request_shape(translator, transport):
    result = run_translate(translator, source_language="English")

    assert result == "你好"
    request = transport.requests[0]
    assert str(request.url) == "https://api.deepseek.com/v1/chat/completions"
    assert request.headers["Authorization"] == "Bearer sk-test"
    assert request.headers["Content-Type"] == "application/json"

    payload = transport.last_json
    assert payload["model"] == "deepseek-chat"
    assert payload["stream"] is False
    assert payload["temperature"] == 0.3
    assert payload["messages"][0] == {"role": "system", "content": SYSTEM_PROMPT}
    assert payload["messages"][1]["role"] == "user"
    assert "from English to Chinese" in payload["messages"][1]["content"]
    assert payload["messages"][1]["content"].endswith("Hello")


def test_sdk_provider_request(translator, transport):
    result = run_translate(translator, provider="openai", model="gpt-4")

    assert result == "你好"
    request = transport.requests[0]
    assert request.url.path == "/v1/chat/completions"
    assert request.url.host == "api.openai.com"
    assert request.headers["Authorization"] == "Bearer sk-test"
    assert transport.last_json["model"] == "gpt-4"


def test_custom_provider_uses_stored_endpoint(translator, transport):
    key = translator.add_custom_model_config(
        "Local",
        "http://localhost:8000/v1/",
        [{"id": "llama3", "name": "Llama 3"}],
    )
    run_translate(translator, provider=key, model="llama3")
    assert str(transport.requests[0].url) == "http://localhost:8000/v1/chat/completions"


def test_source_language_defaults_to_auto_detect(translator, transport):
    run_translate(translator)
    assert "from auto-detect to Chinese" in transport.last_json["messages"][-1]["content"]


def test_system_prompt_can_be_disabled(store, transport):
    config = Config(request=RequestConfig(use_system_prompt=False, temperature=0.7))
    translator = Translator(store, config, transport=transport)
    run_translate(translator)
    payload = transport.last_json
    assert [m["role"] for m in payload["messages"]] == ["user"]
    assert payload["temperature"] == 0.7


def test_provider_scoped_prompt_wins(translator, transport):
    translator.add_custom_prompt("legal", "Kimi", "K {targetLanguage}: {text}", scope="deepseek")
    translator.add_custom_prompt("legal", "Default", "D {targetLanguage}: {text}")
    run_translate(translator, mode="legal")
    assert transport.last_json["messages"][-1]["content"] == "K Chinese: Hello"


def test_unknown_mode_uses_general(translator):
    general = translator.render("Hi", "French", "kimi", "English", mode="general")
    assert translator.render("Hi", "French", "kimi", "English", mode="nope") == general


def test_api_key_not_saved_by_default(translator):
    run_translate(translator)
    assert translator.get_saved_api_key("deepseek") == ""


def test_api_key_saved_when_requested(translator):
    run_translate(translator, save_api_key=True)
    assert translator.get_saved_api_key("deepseek") == "sk-test"


def test_api_key_saved_even_if_request_fails(store):
    translator = Translator(store, transport=RecordingTransport(status_code=500))
    with pytest.raises(TranslationFailedError):
        run_translate(translator, save_api_key=True)
    assert translator.get_saved_api_key("deepseek") == "sk-test"


def test_non_2xx_wrapped(store):
    transport = RecordingTransport(status_code=401, body={"error": "bad key"})
    translator = Translator(store, transport=transport)
    with pytest.raises(TranslationFailedError) as exc_info:
        run_translate(translator)
    assert exc_info.value.message.startswith("Translation failed: ")
    assert "401" in exc_info.value.message
    assert exc_info.value.context == {"provider": "deepseek", "model": "deepseek-chat"}


def test_sdk_error_wrapped(store):
    transport = RecordingTransport(status_code=401, body={"error": {"message": "bad key"}})
    translator = Translator(store, transport=transport)
    with pytest.raises(TranslationFailedError) as exc_info:
        run_translate(translator, provider="zhipu", model="glm-4-flash")
    assert exc_info.value.original_error is not None


def test_malformed_response_wrapped(store):
    translator = Translator(store, transport=RecordingTransport(body={"choices": []}))
    with pytest.raises(TranslationFailedError) as exc_info:
        run_translate(translator)
    assert "choices[0].message.content" in exc_info.value.message


def test_reply_returned_verbatim(store):
    body = completion_body("  translated text\n")
    translator = Translator(store, transport=RecordingTransport(body=body))
    assert run_translate(translator) == "  translated text\n"


def test_model_management_passthrough(translator):
    key = translator.add_custom_model_config("Local", "http://x/v1", [{"id": "a", "name": "A"}])
    translator.add_model_to_provider(key, "b", "B")
    translator.remove_model_from_provider(key, "a")
    assert [m.id for m in translator.get_models(key)] == ["b"]
    assert translator.remove_custom_model_config(key) is True
    assert translator.get_models(key) == []
