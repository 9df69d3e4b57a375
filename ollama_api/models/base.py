from typing import Any

from pydantic import BaseModel

from ollama_api.models.options import Options


class OllamaRequest(BaseModel):
    """Base for request bodies.

    Unset optional fields never reach the wire, and an Options block that has
    nothing set is dropped as a whole.
    """

    def to_payload(self) -> dict[str, Any]:
        data = self.model_dump(mode="json", exclude_none=True, by_alias=True)
        for name, value in self:
            if isinstance(value, Options) and value.is_default():
                data.pop(name, None)
        return data
