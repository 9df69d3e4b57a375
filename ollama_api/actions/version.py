from ollama_api.actions.base import Action, Endpoint
from ollama_api.models.version import VersionRequest, VersionResponse


class VersionAction(Action[VersionRequest, VersionResponse]):
    endpoint = Endpoint.VERSION
    response_model = VersionResponse
