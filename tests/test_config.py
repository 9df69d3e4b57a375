import hashlib

import httpx

from ollama_api import Ollama, file_digest
from ollama_api import config
from ollama_api.config import OllamaConfig, Settings


def test_default_url(monkeypatch):
    monkeypatch.delenv("OLLAMA_BASE_URL", raising=False)
    assert Settings(_env_file=None).OLLAMA_BASE_URL == "http://127.0.0.1:11434"


def test_url_from_environment(monkeypatch):
    monkeypatch.setenv("OLLAMA_BASE_URL", "http://gpu-box:11434")
    monkeypatch.setenv("OLLAMA_READ_TIMEOUT", "42")
    fresh = Settings(_env_file=None)
    assert fresh.OLLAMA_BASE_URL == "http://gpu-box:11434"
    assert fresh.OLLAMA_READ_TIMEOUT == 42.0


def test_client_without_url_uses_settings(monkeypatch):
    monkeypatch.setattr(config, "settings", Settings(_env_file=None, OLLAMA_BASE_URL="http://gpu-box:11434/"))
    assert Ollama().url == "http://gpu-box:11434"


def test_explicit_url_wins(monkeypatch):
    monkeypatch.setattr(config, "settings", Settings(_env_file=None, OLLAMA_BASE_URL="http://gpu-box:11434"))
    assert Ollama("http://localhost:11434/").url == "http://localhost:11434"


def test_timeout():
    timeout = OllamaConfig(url="http://x", connect_timeout=1.0, read_timeout=2.0, write_timeout=3.0, pool_timeout=4.0).timeout()
    assert timeout == httpx.Timeout(connect=1.0, read=2.0, write=3.0, pool=4.0)


def test_file_digest(tmp_path):
    path = tmp_path / "blob"
    path.write_bytes(b"hello world")
    assert file_digest(path) == "sha256:" + hashlib.sha256(b"hello world").hexdigest()
