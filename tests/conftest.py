import json

import httpx
import pytest

from ollama_api import Ollama

BASE_URL = "http://ollama.test"


class Recorder:
    """MockTransport handler that keeps every request it answers."""

    def __init__(self, responder):
        self.responder = responder
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self.responder(request)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]

    def last_json(self) -> dict:
        return json.loads(self.last.content)


@pytest.fixture
def mock_ollama():
    def factory(responder):
        recorder = Recorder(responder)
        return Ollama(BASE_URL, transport=httpx.MockTransport(recorder)), recorder

    return factory
