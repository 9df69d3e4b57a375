from enum import Enum
from typing import Any, List, Optional

from pydantic import BaseModel


class Role(str, Enum):
    SYSTEM = "system"
    USER = "user"
    ASSISTANT = "assistant"
    TOOL = "tool"


class Message(BaseModel):
    role: Role
    content: str = ""
    # base64-encoded, for multimodal models such as llava
    images: Optional[List[str]] = None
    tool_calls: Optional[List[Any]] = None

    @classmethod
    def system(cls, content: str) -> "Message":
        return cls(role=Role.SYSTEM, content=content)

    @classmethod
    def user(cls, content: str) -> "Message":
        return cls(role=Role.USER, content=content)

    @classmethod
    def assistant(cls, content: str) -> "Message":
        return cls(role=Role.ASSISTANT, content=content)

    @classmethod
    def tool(cls, content: str) -> "Message":
        return cls(role=Role.TOOL, content=content)

    def with_image(self, image: str) -> "Message":
        return self.with_images([image])

    def with_images(self, images: List[str]) -> "Message":
        return self.model_copy(update={"images": [*(self.images or []), *images]})

    def with_tool_call(self, tool_call: Any) -> "Message":
        return self.with_tool_calls([tool_call])

    def with_tool_calls(self, tool_calls: List[Any]) -> "Message":
        return self.model_copy(update={"tool_calls": [*(self.tool_calls or []), *tool_calls]})
