# -*- coding: utf-8 -*-
import json

import httpx
import pytest

from quicktrans import MemoryStore, Translator


def completion_body(content, model="test-model"):
    return {
        "id": "chatcmpl-test",
        "object": "chat.completion",
        "created": 1700000000,
        "model": model,
        "choices": [
            {
                "index": 0,
                "message": {"role": "assistant", "content": content},
                "finish_reason": "stop",
            },
        ],
    }


class RecordingTransport(httpx.MockTransport):
    """MockTransport that keeps every request it served."""

    def __init__(self, status_code=200, body=None):
        self.requests = []
        self.status_code = status_code
        self.body = completion_body("你好") if body is None else body
        super().__init__(self._handle)

    def _handle(self, request):
        self.requests.append(request)
        return httpx.Response(self.status_code, json=self.body)

    @property
    def last_json(self):
        return json.loads(self.requests[-1].content)


@pytest.fixture
def store():
    return MemoryStore()


@pytest.fixture
def transport():
    return RecordingTransport()


@pytest.fixture
def translator(store, transport):
    return Translator(store, transport=transport)
