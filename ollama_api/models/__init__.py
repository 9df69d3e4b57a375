from ollama_api.models.base import OllamaRequest
from ollama_api.models.completion import (
    ChatRequest,
    ChatResponse,
    GenerateRequest,
    GenerateResponse,
    ModelLoadResponse,
    resolve_format,
    resolve_tool,
)
from ollama_api.models.message import Message, Role
from ollama_api.models.model import (
    CheckBlobRequest,
    CopyModelRequest,
    CreateModelRequest,
    CreateModelResponse,
    DeleteModelRequest,
    EmbeddingRequest,
    EmbeddingResponse,
    EmbedRequest,
    EmbedResponse,
    ListLocalModelsRequest,
    ListLocalModelsResponse,
    ListRunningModelsRequest,
    ListRunningModelsResponse,
    LocalModel,
    ModelDetails,
    PullModelRequest,
    PullModelResponse,
    PushBlobRequest,
    PushModelRequest,
    PushModelResponse,
    RunningModel,
    ShowModelRequest,
    ShowModelResponse,
    file_digest,
)
from ollama_api.models.options import Options
from ollama_api.models.version import VersionRequest, VersionResponse
