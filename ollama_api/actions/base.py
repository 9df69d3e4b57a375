"""
Request builders.

An action pairs a request body with the response type it resolves to. Fluent
methods return a new action around a copied request, so a partially built
action can be shared and branched without either branch seeing the other's
changes. Awaiting an action sends it; streaming actions can instead be
iterated with `stream()`. Either way an action is sent at most once.
"""
import asyncio
from dataclasses import dataclass, field
from enum import Enum
from typing import IO, Any, AsyncIterator, ClassVar, Generator, Generic, Mapping, Optional, Type, TypeVar

import httpx
from pydantic import BaseModel, ValidationError

from ollama_api.errors import (
    BlobDoesNotExist,
    DecodingError,
    FileError,
    ModelDoesNotExist,
    OllamaError,
    ServerError,
    ServerErrorBody,
    UnexpectedDigest,
    UnknownError,
)
from ollama_api.models.base import OllamaRequest
from ollama_api.services.ollama_client import OllamaClient
from ollama_api.services.streaming import iter_ndjson

RequestT = TypeVar("RequestT", bound=OllamaRequest)
ResponseT = TypeVar("ResponseT")
A = TypeVar("A", bound="Action")

UPLOAD_CHUNK_SIZE = 64 * 1024


class Endpoint(str, Enum):
    GENERATE = "generate"
    CHAT = "chat"
    CREATE_MODEL = "create_model"
    COPY_MODEL = "copy_model"
    DELETE_MODEL = "delete_model"
    PULL_MODEL = "pull_model"
    PUSH_MODEL = "push_model"
    CHECK_BLOB = "check_blob"
    PUSH_BLOB = "push_blob"
    LIST_LOCAL_MODELS = "list_local_models"
    LIST_RUNNING_MODELS = "list_running_models"
    SHOW_MODEL = "show_model"
    EMBED = "embed"
    EMBEDDING = "embedding"
    VERSION = "version"


@dataclass(frozen=True)
class Route:
    path: str
    # GET, POST, DELETE, HEAD, or POST_FILE for a raw file body
    method: str
    success: int = 200
    status_errors: Mapping[int, Type[OllamaError]] = field(default_factory=dict)


ROUTES: dict[Endpoint, Route] = {
    Endpoint.GENERATE: Route("/api/generate", "POST"),
    Endpoint.CHAT: Route("/api/chat", "POST"),
    Endpoint.CREATE_MODEL: Route("/api/create", "POST"),
    Endpoint.COPY_MODEL: Route("/api/copy", "POST", status_errors={404: ModelDoesNotExist}),
    Endpoint.DELETE_MODEL: Route("/api/delete", "DELETE", status_errors={404: ModelDoesNotExist}),
    Endpoint.PULL_MODEL: Route("/api/pull", "POST"),
    Endpoint.PUSH_MODEL: Route("/api/push", "POST"),
    Endpoint.CHECK_BLOB: Route("/api/blobs/{digest}", "HEAD", status_errors={404: BlobDoesNotExist}),
    Endpoint.PUSH_BLOB: Route("/api/blobs/{digest}", "POST_FILE", success=201, status_errors={400: UnexpectedDigest}),
    Endpoint.LIST_LOCAL_MODELS: Route("/api/tags", "GET"),
    Endpoint.LIST_RUNNING_MODELS: Route("/api/ps", "GET"),
    Endpoint.SHOW_MODEL: Route("/api/show", "POST"),
    Endpoint.EMBED: Route("/api/embed", "POST"),
    Endpoint.EMBEDDING: Route("/api/embeddings", "POST"),
    Endpoint.VERSION: Route("/api/version", "GET"),
}


def error_for_status(route: Route, path: str, resp: httpx.Response) -> OllamaError:
    """Map a non-success response to the error it stands for.

    The body must already be read.
    """
    error_cls = route.status_errors.get(resp.status_code)
    if error_cls is not None:
        return error_cls()
    try:
        body = ServerErrorBody.model_validate_json(resp.content)
    except ValidationError:
        return UnknownError(f"{path} got unknown status code: {resp.status_code}")
    return ServerError(body.error, resp.status_code)


def decode_response(resp: httpx.Response, model: Type[ResponseT]) -> ResponseT:
    try:
        return model.model_validate_json(resp.content)
    except ValidationError as e:
        raise DecodingError(f"decoding error: {e}") from e


async def _iter_file(handle: IO[bytes]) -> AsyncIterator[bytes]:
    while True:
        try:
            block = await asyncio.to_thread(handle.read, UPLOAD_CHUNK_SIZE)
        except OSError as e:
            raise FileError(f"file error: {e}") from e
        if not block:
            break
        yield block


class Action(Generic[RequestT, ResponseT]):
    endpoint: ClassVar[Endpoint]
    # None when success carries no body worth decoding
    response_model: ClassVar[Optional[Type[BaseModel]]] = None

    def __init__(self, client: OllamaClient, request: RequestT):
        self._client = client
        self._request = request
        self._consumed = False

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._request!r})"

    @property
    def request(self) -> RequestT:
        return self._request

    @property
    def route(self) -> Route:
        return ROUTES[self.endpoint]

    def _with(self: A, **changes: Any) -> A:
        return type(self)(self._client, self._request.model_copy(update=changes))

    def _consume(self) -> RequestT:
        if self._consumed:
            raise RuntimeError(f"{type(self).__name__} has already been sent")
        self._consumed = True
        return self._request

    def _path(self, request: RequestT) -> str:
        return self.route.path.format(**dict(request))

    async def _dispatch(self, route: Route, path: str, request: RequestT) -> httpx.Response:
        if route.method == "GET":
            return await self._client.get(path)
        if route.method == "HEAD":
            return await self._client.head(path)
        if route.method == "DELETE":
            return await self._client.delete(path, request.to_payload())
        if route.method == "POST_FILE":
            try:
                handle = open(request.file, "rb")
            except OSError as e:
                raise FileError(f"file error: {e}") from e
            with handle:
                return await self._client.post_content(path, _iter_file(handle))
        return await self._client.post(path, request.to_payload())

    async def send(self) -> ResponseT:
        request = self._consume()
        route = self.route
        path = self._path(request)
        resp = await self._dispatch(route, path, request)
        if resp.status_code != route.success:
            raise error_for_status(route, path, resp)
        if self.response_model is None:
            return None
        return decode_response(resp, self.response_model)

    def __await__(self) -> Generator[Any, None, ResponseT]:
        return self.send().__await__()


class StreamingAction(Action[RequestT, ResponseT]):
    """Action for endpoints that can answer with a stream of partial responses."""

    def stream(self) -> AsyncIterator[ResponseT]:
        """Send with `stream` forced on and iterate the decoded items.

        Close the iterator (or leave the `async for`) early to drop the
        connection.
        """
        request = self._consume().model_copy(update={"stream": True})
        return self._iter_stream(request)

    async def _iter_stream(self, request: RequestT) -> AsyncIterator[ResponseT]:
        route = self.route
        path = self._path(request)
        payload = request.to_payload()
        async with self._client.stream(route.method, path, payload) as resp:
            if resp.status_code != route.success:
                await resp.aread()
                raise error_for_status(route, path, resp)
            async for item in iter_ndjson(resp.aiter_bytes(), self.response_model):
                yield item


class OptionsMixin:
    """Setters for the model parameters block of a request."""

    _options_field: ClassVar[str] = "options"

    def _with_option(self, name: str, value: Any):
        options = getattr(self._request, self._options_field)
        return self._with(**{self._options_field: options.model_copy(update={name: value})})

    def mirostat(self, mirostat: int):
        """0 = disabled, 1 = Mirostat, 2 = Mirostat 2.0."""
        return self._with_option("mirostat", mirostat)

    def mirostat_eta(self, mirostat_eta: float):
        """Learning rate of Mirostat's feedback loop."""
        return self._with_option("mirostat_eta", mirostat_eta)

    def mirostat_tau(self, mirostat_tau: float):
        """Lower values give more focused, coherent text."""
        return self._with_option("mirostat_tau", mirostat_tau)

    def num_ctx(self, num_ctx: int):
        """Context window size in tokens."""
        return self._with_option("num_ctx", num_ctx)

    def repeat_last_n(self, repeat_last_n: int):
        """How far back to look for repetition. 0 = disabled, -1 = num_ctx."""
        return self._with_option("repeat_last_n", repeat_last_n)

    def repeat_penalty(self, repeat_penalty: float):
        return self._with_option("repeat_penalty", repeat_penalty)

    def temperature(self, temperature: float):
        return self._with_option("temperature", temperature)

    def seed(self, seed: int):
        return self._with_option("seed", seed)

    def stop(self, stop: str):
        """Stop sequence; generation ends when it is produced."""
        return self._with_option("stop", stop)

    def num_predict(self, num_predict: int):
        """Maximum tokens to generate. -1 = unlimited."""
        return self._with_option("num_predict", num_predict)

    def top_k(self, top_k: int):
        return self._with_option("top_k", top_k)

    def top_p(self, top_p: float):
        return self._with_option("top_p", top_p)

    def min_p(self, min_p: float):
        """Minimum token probability relative to the most likely token."""
        return self._with_option("min_p", min_p)
