import hashlib
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, Field

from ollama_api.models.base import OllamaRequest
from ollama_api.models.completion import KeepAlive
from ollama_api.models.message import Message
from ollama_api.models.options import Options


# ── Requests ──────────────────────────────────────────────────────


class CreateModelRequest(OllamaRequest):
    model: str
    from_: Optional[str] = Field(default=None, alias="from")
    # file name -> sha256 digest of an uploaded blob
    files: Optional[Dict[str, str]] = None
    adapters: Optional[Dict[str, str]] = None
    template: Optional[str] = None
    license: Optional[Union[str, List[str]]] = None
    system: Optional[str] = None
    parameters: Options = Field(default_factory=Options)
    messages: Optional[List[Message]] = None
    stream: bool = False
    quantize: Optional[str] = None

    model_config = {"populate_by_name": True}


class CopyModelRequest(OllamaRequest):
    source: str
    destination: str


class DeleteModelRequest(OllamaRequest):
    model: str


class PullModelRequest(OllamaRequest):
    model: str
    insecure: Optional[bool] = None
    stream: bool = False


class PushModelRequest(OllamaRequest):
    # <namespace>/<model>:<tag>
    model: str
    insecure: Optional[bool] = None
    stream: bool = False


class ShowModelRequest(OllamaRequest):
    model: str
    verbose: Optional[bool] = None


class EmbedRequest(OllamaRequest):
    model: str
    input: List[str] = Field(default_factory=list)
    truncate: Optional[bool] = None
    options: Options = Field(default_factory=Options)
    keep_alive: Optional[KeepAlive] = None


class EmbeddingRequest(OllamaRequest):
    model: str
    prompt: str
    options: Options = Field(default_factory=Options)
    keep_alive: Optional[KeepAlive] = None


class CheckBlobRequest(OllamaRequest):
    digest: str


class PushBlobRequest(OllamaRequest):
    file: str
    digest: str


class ListLocalModelsRequest(OllamaRequest):
    pass


class ListRunningModelsRequest(OllamaRequest):
    pass


# ── Responses ─────────────────────────────────────────────────────


class ModelDetails(BaseModel):
    parent_model: Optional[str] = None
    format: Optional[str] = None
    family: Optional[str] = None
    families: Optional[List[str]] = None
    parameter_size: Optional[str] = None
    quantization_level: Optional[str] = None


class LocalModel(BaseModel):
    name: str
    model: Optional[str] = None
    modified_at: str
    size: int
    digest: str
    details: ModelDetails = Field(default_factory=ModelDetails)


class ListLocalModelsResponse(BaseModel):
    models: List[LocalModel] = Field(default_factory=list)


class RunningModel(BaseModel):
    name: str
    model: str
    size: int
    digest: str
    details: ModelDetails = Field(default_factory=ModelDetails)
    expires_at: str
    size_vram: int


class ListRunningModelsResponse(BaseModel):
    models: List[RunningModel] = Field(default_factory=list)


class ShowModelResponse(BaseModel):
    license: str = ""
    modelfile: str = ""
    parameters: str = ""
    template: str = ""
    modified_at: Optional[str] = None
    details: ModelDetails = Field(default_factory=ModelDetails)
    model_info: Dict[str, Any] = Field(default_factory=dict)
    capabilities: List[str] = Field(default_factory=list)

    model_config = {"protected_namespaces": ()}


class CreateModelResponse(BaseModel):
    status: str


class PullModelResponse(BaseModel):
    status: str
    # absent on manifest/verify/success lines
    digest: Optional[str] = None
    total: Optional[int] = None
    completed: Optional[int] = None


class PushModelResponse(BaseModel):
    status: str
    digest: Optional[str] = None
    total: Optional[int] = None
    completed: Optional[int] = None


class EmbedResponse(BaseModel):
    model: str
    embeddings: List[List[float]]
    total_duration: Optional[int] = None
    load_duration: Optional[int] = None
    prompt_eval_count: Optional[int] = None


class EmbeddingResponse(BaseModel):
    embedding: List[float]


def file_digest(path: Union[str, Path], chunk_size: int = 1024 * 1024) -> str:
    """SHA-256 digest of a local file in the `sha256:<hex>` form blobs use."""
    h = hashlib.sha256()
    with open(path, "rb") as f:
        for block in iter(lambda: f.read(chunk_size), b""):
            h.update(block)
    return f"sha256:{h.hexdigest()}"
