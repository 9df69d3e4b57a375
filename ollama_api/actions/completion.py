from typing import List

from ollama_api.actions.base import Action, Endpoint, OptionsMixin, StreamingAction
from ollama_api.models.completion import (
    ChatRequest,
    ChatResponse,
    FormatSpec,
    GenerateRequest,
    GenerateResponse,
    KeepAlive,
    ModelLoadResponse,
)
from ollama_api.models.message import Message


class GenerateLoadAction(Action[GenerateRequest, ModelLoadResponse]):
    endpoint = Endpoint.GENERATE
    response_model = ModelLoadResponse


class ChatLoadAction(Action[ChatRequest, ModelLoadResponse]):
    endpoint = Endpoint.CHAT
    response_model = ModelLoadResponse


class GenerateAction(OptionsMixin, StreamingAction[GenerateRequest, GenerateResponse]):
    """Completion for a single prompt. Await it, or iterate `stream()`."""

    endpoint = Endpoint.GENERATE
    response_model = GenerateResponse

    def load(self) -> GenerateLoadAction:
        """Only load the model into memory; everything else set so far is dropped."""
        return GenerateLoadAction(self._client, GenerateRequest(model=self._request.model))

    def unload(self) -> GenerateLoadAction:
        return GenerateLoadAction(self._client, GenerateRequest(model=self._request.model, keep_alive=0))

    def prompt(self, prompt: str) -> "GenerateAction":
        return self._with(prompt=prompt)

    def suffix(self, suffix: str) -> "GenerateAction":
        """Text that comes after the model response."""
        return self._with(suffix=suffix)

    def image(self, image: str) -> "GenerateAction":
        return self.images([image])

    def images(self, images: List[str]) -> "GenerateAction":
        """Base64-encoded images, for multimodal models."""
        return self._with(images=[*(self._request.images or []), *images])

    def format(self, format: FormatSpec) -> "GenerateAction":
        """Either "json" or a JSON schema the response must follow.

        A schema that is not valid JSON fails with InvalidFormat when the
        action is sent.
        """
        return self._with(format=format)

    def json(self) -> "GenerateAction":
        return self._with(format="json")

    def system(self, system: str) -> "GenerateAction":
        return self._with(system=system)

    def template(self, template: str) -> "GenerateAction":
        return self._with(template=template)

    def context(self, context: List[int]) -> "GenerateAction":
        """Context returned by a previous response, for short conversational memory."""
        return self._with(context=list(context))

    def raw(self) -> "GenerateAction":
        """Send the prompt without applying the model's template."""
        return self._with(raw=True)

    def keep_alive(self, keep_alive: KeepAlive) -> "GenerateAction":
        """How long the model stays loaded after this request (seconds or "5m")."""
        return self._with(keep_alive=keep_alive)


class ChatAction(OptionsMixin, StreamingAction[ChatRequest, ChatResponse]):
    endpoint = Endpoint.CHAT
    response_model = ChatResponse

    def load(self) -> ChatLoadAction:
        return ChatLoadAction(self._client, ChatRequest(model=self._request.model))

    def unload(self) -> ChatLoadAction:
        return ChatLoadAction(self._client, ChatRequest(model=self._request.model, keep_alive=0))

    def message(self, message: Message) -> "ChatAction":
        return self.messages([message])

    def messages(self, messages: List[Message]) -> "ChatAction":
        return self._with(messages=[*self._request.messages, *messages])

    def system_message(self, content: str) -> "ChatAction":
        return self.message(Message.system(content))

    def user_message(self, content: str) -> "ChatAction":
        return self.message(Message.user(content))

    def assistant_message(self, content: str) -> "ChatAction":
        return self.message(Message.assistant(content))

    def tool(self, tool: FormatSpec) -> "ChatAction":
        """A tool descriptor in JSON, for models that support tools."""
        return self.tools([tool])

    def tools(self, tools: List[FormatSpec]) -> "ChatAction":
        return self._with(tools=[*(self._request.tools or []), *tools])

    def format(self, format: FormatSpec) -> "ChatAction":
        return self._with(format=format)

    def json(self) -> "ChatAction":
        return self._with(format="json")

    def keep_alive(self, keep_alive: KeepAlive) -> "ChatAction":
        return self._with(keep_alive=keep_alive)
