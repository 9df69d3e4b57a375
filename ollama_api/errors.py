"""
Error taxonomy shared by every action.

Transport failures, undecodable bodies and server-side refusals all surface
as subclasses of OllamaError so callers can catch one type.
"""
from pydantic import BaseModel


class ServerErrorBody(BaseModel):
    """`{"error": "..."}` envelope returned by the server on failure."""
    error: str


class OllamaError(Exception):
    pass


class RequestError(OllamaError):
    """The HTTP exchange itself failed (connection refused, DNS, TLS, ...)."""


class DecodingError(OllamaError):
    """A successful response body did not match the expected shape."""


class StreamDecodingError(OllamaError):
    """A line of a streamed response could not be decoded. Ends the stream."""


class InvalidFormat(OllamaError):
    """A format schema or tool descriptor was not valid JSON."""


class ServerError(OllamaError):
    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code

    def __str__(self) -> str:
        return f"ollama error: {self.message}"


class ModelDoesNotExist(OllamaError):
    def __init__(self, message: str = "model does not exist"):
        super().__init__(message)


class BlobDoesNotExist(OllamaError):
    def __init__(self, message: str = "blob does not exist"):
        super().__init__(message)


class UnexpectedDigest(OllamaError):
    def __init__(self, message: str = "unexpected digest"):
        super().__init__(message)


class FileError(OllamaError):
    """Local file I/O failed while preparing a blob upload."""


class UnknownError(OllamaError):
    pass
