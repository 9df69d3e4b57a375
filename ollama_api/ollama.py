from typing import List, Optional, Union

import httpx

from ollama_api.actions import (
    ChatAction,
    CheckBlobExistsAction,
    CopyModelAction,
    CreateModelAction,
    DeleteModelAction,
    EmbedAction,
    EmbeddingAction,
    GenerateAction,
    ListLocalModelsAction,
    ListRunningModelsAction,
    PullModelAction,
    PushBlobAction,
    PushModelAction,
    ShowModelAction,
    VersionAction,
)
from ollama_api.config import OllamaConfig
from ollama_api.models import (
    ChatRequest,
    CheckBlobRequest,
    CopyModelRequest,
    CreateModelRequest,
    DeleteModelRequest,
    EmbeddingRequest,
    EmbedRequest,
    GenerateRequest,
    ListLocalModelsRequest,
    ListRunningModelsRequest,
    PullModelRequest,
    PushBlobRequest,
    PushModelRequest,
    ShowModelRequest,
    VersionRequest,
)
from ollama_api.services.ollama_client import OllamaClient


class Ollama:
    """Entry point. Each method returns an action to configure and then await.

        async with Ollama("http://localhost:11434") as ollama:
            resp = await ollama.generate("llama3.1:8b", "Tell me a joke").temperature(0.2)
            async for chunk in ollama.chat("llama3.1:8b").user_message("hi").stream():
                print(chunk.message.content, end="")
    """

    def __init__(self, url: Optional[str] = None, *, transport: Optional[httpx.AsyncBaseTransport] = None):
        config = OllamaConfig.from_url(url) if url else OllamaConfig.from_settings()
        self.client = OllamaClient(config, transport=transport)

    @property
    def url(self) -> str:
        return self.client.url

    async def aclose(self) -> None:
        await self.client.aclose()

    async def __aenter__(self) -> "Ollama":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.aclose()

    # ── Completion ──

    def generate(self, model: str, prompt: Optional[str] = None) -> GenerateAction:
        return GenerateAction(self.client, GenerateRequest(model=model, prompt=prompt))

    def chat(self, model: str) -> ChatAction:
        return ChatAction(self.client, ChatRequest(model=model))

    # ── Models ──

    def create_model(self, model: str) -> CreateModelAction:
        return CreateModelAction(self.client, CreateModelRequest(model=model))

    def copy_model(self, source: str, destination: str) -> CopyModelAction:
        return CopyModelAction(self.client, CopyModelRequest(source=source, destination=destination))

    def delete_model(self, model: str) -> DeleteModelAction:
        return DeleteModelAction(self.client, DeleteModelRequest(model=model))

    def pull_model(self, model: str) -> PullModelAction:
        return PullModelAction(self.client, PullModelRequest(model=model))

    def push_model(self, model: str) -> PushModelAction:
        return PushModelAction(self.client, PushModelRequest(model=model))

    def list_local_models(self) -> ListLocalModelsAction:
        return ListLocalModelsAction(self.client, ListLocalModelsRequest())

    def list_running_models(self) -> ListRunningModelsAction:
        return ListRunningModelsAction(self.client, ListRunningModelsRequest())

    def show_model_information(self, model: str) -> ShowModelAction:
        return ShowModelAction(self.client, ShowModelRequest(model=model))

    # ── Blobs ──

    def check_blob_exists(self, digest: str) -> CheckBlobExistsAction:
        return CheckBlobExistsAction(self.client, CheckBlobRequest(digest=digest))

    def push_blob(self, file: str, digest: str) -> PushBlobAction:
        return PushBlobAction(self.client, PushBlobRequest(file=str(file), digest=digest))

    # ── Embeddings ──

    def generate_embeddings(self, model: str, input: Union[str, List[str], None] = None) -> EmbedAction:
        if input is None:
            texts = []
        elif isinstance(input, str):
            texts = [input]
        else:
            texts = list(input)
        return EmbedAction(self.client, EmbedRequest(model=model, input=texts))

    def generate_embedding(self, model: str, prompt: str) -> EmbeddingAction:
        return EmbeddingAction(self.client, EmbeddingRequest(model=model, prompt=prompt))

    # ── Server ──

    def version(self) -> VersionAction:
        return VersionAction(self.client, VersionRequest())
