"""ollama_api: async typed client for the Ollama HTTP API.

    from ollama_api import Ollama, Message

    async with Ollama("http://localhost:11434") as ollama:
        resp = await ollama.generate("llama3.1:8b", "Tell me a joke about sharks")
"""

from ollama_api.errors import (
    BlobDoesNotExist,
    DecodingError,
    FileError,
    InvalidFormat,
    ModelDoesNotExist,
    OllamaError,
    RequestError,
    ServerError,
    StreamDecodingError,
    UnexpectedDigest,
    UnknownError,
)
from ollama_api.models import Message, Options, Role, file_digest
from ollama_api.ollama import Ollama

__all__ = [
    "Ollama",
    "Message",
    "Role",
    "Options",
    "file_digest",
    "OllamaError",
    "RequestError",
    "DecodingError",
    "StreamDecodingError",
    "InvalidFormat",
    "ServerError",
    "ModelDoesNotExist",
    "BlobDoesNotExist",
    "UnexpectedDigest",
    "FileError",
    "UnknownError",
]

__version__ = "0.1.0"
