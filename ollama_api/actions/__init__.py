from ollama_api.actions.base import ROUTES, Action, Endpoint, OptionsMixin, Route, StreamingAction
from ollama_api.actions.completion import ChatAction, ChatLoadAction, GenerateAction, GenerateLoadAction
from ollama_api.actions.model import (
    CheckBlobExistsAction,
    CopyModelAction,
    CreateModelAction,
    DeleteModelAction,
    EmbeddingAction,
    EmbedAction,
    ListLocalModelsAction,
    ListRunningModelsAction,
    PullModelAction,
    PushBlobAction,
    PushModelAction,
    ShowModelAction,
)
from ollama_api.actions.version import VersionAction
