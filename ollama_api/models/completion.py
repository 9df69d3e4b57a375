import json
from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, Field

from ollama_api.errors import InvalidFormat
from ollama_api.models.base import OllamaRequest
from ollama_api.models.message import Message
from ollama_api.models.options import Options

FormatSpec = Union[str, Dict[str, Any]]
KeepAlive = Union[int, str]


def resolve_format(value: FormatSpec) -> Any:
    """Turn a caller supplied format into its wire value.

    "json" (any case) selects JSON mode, anything else must be a JSON schema
    and is embedded as parsed JSON rather than as a string.
    """
    if isinstance(value, dict):
        return value
    if value.lower() == "json":
        return "json"
    try:
        return json.loads(value)
    except json.JSONDecodeError as e:
        raise InvalidFormat(f"invalid format schema: {e}") from e


def resolve_tool(value: FormatSpec) -> Any:
    if isinstance(value, dict):
        return value
    try:
        return json.loads(value)
    except json.JSONDecodeError as e:
        raise InvalidFormat(f"invalid tool format: {e}") from e


class GenerateRequest(OllamaRequest):
    model: str
    prompt: Optional[str] = None
    suffix: Optional[str] = None
    images: Optional[List[str]] = None
    format: Optional[FormatSpec] = None
    options: Options = Field(default_factory=Options)
    system: Optional[str] = None
    template: Optional[str] = None
    context: Optional[List[int]] = None
    stream: bool = False
    raw: Optional[bool] = None
    keep_alive: Optional[KeepAlive] = None

    def to_payload(self) -> dict[str, Any]:
        data = super().to_payload()
        if self.format is not None:
            data["format"] = resolve_format(self.format)
        return data


class ChatRequest(OllamaRequest):
    model: str
    messages: List[Message] = Field(default_factory=list)
    tools: Optional[List[FormatSpec]] = None
    format: Optional[FormatSpec] = None
    options: Options = Field(default_factory=Options)
    stream: bool = False
    keep_alive: Optional[KeepAlive] = None

    def to_payload(self) -> dict[str, Any]:
        data = super().to_payload()
        if self.tools is not None:
            data["tools"] = [resolve_tool(t) for t in self.tools]
        if self.format is not None:
            data["format"] = resolve_format(self.format)
        return data


class GenerateResponse(BaseModel):
    model: str
    created_at: str
    # empty for streamed chunks except the text delta
    response: str = ""
    done: bool
    done_reason: Optional[str] = None
    context: Optional[List[int]] = None
    total_duration: Optional[int] = None
    load_duration: Optional[int] = None
    prompt_eval_count: Optional[int] = None
    prompt_eval_duration: Optional[int] = None
    eval_count: Optional[int] = None
    eval_duration: Optional[int] = None


class ChatResponse(BaseModel):
    model: str
    created_at: str
    message: Optional[Message] = None
    done: bool
    done_reason: Optional[str] = None
    total_duration: Optional[int] = None
    load_duration: Optional[int] = None
    prompt_eval_count: Optional[int] = None
    prompt_eval_duration: Optional[int] = None
    eval_count: Optional[int] = None
    eval_duration: Optional[int] = None


class ModelLoadResponse(BaseModel):
    """Reply to a generate/chat request that only loads or unloads a model."""

    model: str
    created_at: str
    response: Optional[str] = None
    message: Optional[Message] = None
    done: bool
    done_reason: Optional[str] = None
