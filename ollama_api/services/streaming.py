"""
NDJSON decoding for streamed responses.

The server answers streaming requests with one JSON object per line and no
other framing. Lines are decoded one at a time so that everything before a
bad line still reaches the caller.
"""
from typing import AsyncIterable, AsyncIterator, Iterator, Type, TypeVar

from pydantic import BaseModel, ValidationError

from ollama_api.errors import StreamDecodingError

T = TypeVar("T", bound=BaseModel)


def parse_chunk(chunk: bytes, model: Type[T]) -> Iterator[T]:
    """Decode every line of `chunk` as `model`, in order."""
    if not chunk:
        return
    try:
        text = chunk.decode("utf-8")
    except UnicodeDecodeError as e:
        raise StreamDecodingError(f"failed to parse chunk to utf8: {e}") from e

    for line in text.rstrip().split("\n"):
        line = line.strip()
        if not line:
            continue
        try:
            yield model.model_validate_json(line)
        except ValidationError as e:
            raise StreamDecodingError(
                f"failed to deserialize {model.__name__} from {line}: {e}"
            ) from e


async def iter_ndjson(chunks: AsyncIterable[bytes], model: Type[T]) -> AsyncIterator[T]:
    """Re-split transport chunks on newlines and decode whole lines only.

    A chunk may end in the middle of an object; that tail is held back until
    the rest of the line arrives or the body ends.
    """
    pending = b""
    async for chunk in chunks:
        pending += chunk
        complete, newline, pending = pending.rpartition(b"\n")
        if newline:
            for item in parse_chunk(complete, model):
                yield item
    if pending.strip():
        for item in parse_chunk(pending, model):
            yield item
