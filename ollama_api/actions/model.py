from typing import Dict, List, Union

from ollama_api.actions.base import Action, Endpoint, OptionsMixin, StreamingAction
from ollama_api.models.completion import KeepAlive
from ollama_api.models.message import Message
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
    PullModelRequest,
    PullModelResponse,
    PushBlobRequest,
    PushModelRequest,
    PushModelResponse,
    ShowModelRequest,
    ShowModelResponse,
)


class CreateModelAction(OptionsMixin, StreamingAction[CreateModelRequest, CreateModelResponse]):
    endpoint = Endpoint.CREATE_MODEL
    response_model = CreateModelResponse
    _options_field = "parameters"

    def from_(self, model: str) -> "CreateModelAction":
        """Existing model to build the new one from."""
        return self._with(from_=model)

    def file(self, name: str, digest: str) -> "CreateModelAction":
        return self.files({name: digest})

    def files(self, files: Dict[str, str]) -> "CreateModelAction":
        """File names mapped to the sha256 digests of uploaded blobs."""
        return self._with(files={**(self._request.files or {}), **files})

    def adapter(self, name: str, digest: str) -> "CreateModelAction":
        return self.adapters({name: digest})

    def adapters(self, adapters: Dict[str, str]) -> "CreateModelAction":
        """LORA adapter file names mapped to blob digests."""
        return self._with(adapters={**(self._request.adapters or {}), **adapters})

    def template(self, template: str) -> "CreateModelAction":
        return self._with(template=template)

    def license(self, license: Union[str, List[str]]) -> "CreateModelAction":
        current = self._request.license
        if current is None:
            current = []
        elif isinstance(current, str):
            current = [current]
        added = [license] if isinstance(license, str) else list(license)
        return self._with(license=[*current, *added])

    def system(self, system: str) -> "CreateModelAction":
        return self._with(system=system)

    def message(self, message: Message) -> "CreateModelAction":
        return self.messages([message])

    def messages(self, messages: List[Message]) -> "CreateModelAction":
        return self._with(messages=[*(self._request.messages or []), *messages])

    def system_message(self, content: str) -> "CreateModelAction":
        return self.message(Message.system(content))

    def user_message(self, content: str) -> "CreateModelAction":
        return self.message(Message.user(content))

    def assistant_message(self, content: str) -> "CreateModelAction":
        return self.message(Message.assistant(content))

    def quantize(self, quantize: str) -> "CreateModelAction":
        """Quantization type for a non-quantized (e.g. float16) source, such as "q4_K_M"."""
        return self._with(quantize=quantize)


class CopyModelAction(Action[CopyModelRequest, None]):
    endpoint = Endpoint.COPY_MODEL


class DeleteModelAction(Action[DeleteModelRequest, None]):
    endpoint = Endpoint.DELETE_MODEL


class PullModelAction(StreamingAction[PullModelRequest, PullModelResponse]):
    endpoint = Endpoint.PULL_MODEL
    response_model = PullModelResponse

    def insecure(self) -> "PullModelAction":
        """Allow insecure connections to the library. Development registries only."""
        return self._with(insecure=True)


class PushModelAction(StreamingAction[PushModelRequest, PushModelResponse]):
    endpoint = Endpoint.PUSH_MODEL
    response_model = PushModelResponse

    def insecure(self) -> "PushModelAction":
        return self._with(insecure=True)


class CheckBlobExistsAction(Action[CheckBlobRequest, None]):
    """Resolves to None when the blob exists, raises BlobDoesNotExist otherwise."""

    endpoint = Endpoint.CHECK_BLOB


class PushBlobAction(Action[PushBlobRequest, None]):
    endpoint = Endpoint.PUSH_BLOB


class ListLocalModelsAction(Action[ListLocalModelsRequest, ListLocalModelsResponse]):
    endpoint = Endpoint.LIST_LOCAL_MODELS
    response_model = ListLocalModelsResponse


class ListRunningModelsAction(Action[ListRunningModelsRequest, ListRunningModelsResponse]):
    endpoint = Endpoint.LIST_RUNNING_MODELS
    response_model = ListRunningModelsResponse


class ShowModelAction(Action[ShowModelRequest, ShowModelResponse]):
    endpoint = Endpoint.SHOW_MODEL
    response_model = ShowModelResponse

    def verbose(self) -> "ShowModelAction":
        """Return full data for verbose response fields."""
        return self._with(verbose=True)


class EmbedAction(OptionsMixin, Action[EmbedRequest, EmbedResponse]):
    endpoint = Endpoint.EMBED
    response_model = EmbedResponse

    def input(self, text: str) -> "EmbedAction":
        return self.inputs([text])

    def inputs(self, texts: List[str]) -> "EmbedAction":
        return self._with(input=[*self._request.input, *texts])

    def truncate(self, truncate: bool = True) -> "EmbedAction":
        """Truncate inputs that exceed the context length instead of failing."""
        return self._with(truncate=truncate)

    def keep_alive(self, keep_alive: KeepAlive) -> "EmbedAction":
        return self._with(keep_alive=keep_alive)


class EmbeddingAction(OptionsMixin, Action[EmbeddingRequest, EmbeddingResponse]):
    endpoint = Endpoint.EMBEDDING
    response_model = EmbeddingResponse

    def keep_alive(self, keep_alive: KeepAlive) -> "EmbeddingAction":
        return self._with(keep_alive=keep_alive)
