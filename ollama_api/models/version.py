from pydantic import BaseModel

from ollama_api.models.base import OllamaRequest


class VersionRequest(OllamaRequest):
    pass


class VersionResponse(BaseModel):
    version: str
