import logging
import time
from contextlib import asynccontextmanager
from typing import Any, AsyncIterable, AsyncIterator

import httpx

from ollama_api.config import OllamaConfig
from ollama_api.errors import RequestError

logger = logging.getLogger(__name__)


class OllamaClient:
    """Thin HTTP layer over one pooled httpx.AsyncClient.

    Returns raw responses; deciding what a status code means is up to the
    caller. Safe to share between concurrent actions.
    """

    def __init__(self, config: OllamaConfig, transport: httpx.AsyncBaseTransport | None = None):
        self.config = config
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    @property
    def url(self) -> str:
        return self.config.url

    def get_client(self) -> httpx.AsyncClient:
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                base_url=self.config.url,
                timeout=self.config.timeout(),
                transport=self._transport,
            )
        return self._client

    async def aclose(self) -> None:
        if self._client is not None and not self._client.is_closed:
            await self._client.aclose()
        self._client = None

    async def request(self, method: str, path: str, **kwargs: Any) -> httpx.Response:
        client = self.get_client()
        start = time.time()
        try:
            resp = await client.request(method, path, **kwargs)
        except httpx.HTTPError as e:
            raise RequestError(f"request error: {e}") from e
        elapsed = (time.time() - start) * 1000
        logger.debug("%s %s %d %.1fms", method, path, resp.status_code, elapsed)
        return resp

    async def get(self, path: str) -> httpx.Response:
        return await self.request("GET", path)

    async def post(self, path: str, payload: dict) -> httpx.Response:
        return await self.request("POST", path, json=payload)

    async def delete(self, path: str, payload: dict) -> httpx.Response:
        return await self.request("DELETE", path, json=payload)

    async def head(self, path: str) -> httpx.Response:
        return await self.request("HEAD", path)

    async def post_content(self, path: str, content: AsyncIterable[bytes]) -> httpx.Response:
        return await self.request("POST", path, content=content)

    @asynccontextmanager
    async def stream(self, method: str, path: str, payload: dict) -> AsyncIterator[httpx.Response]:
        """Open a streamed response; the body is released when the block exits."""
        client = self.get_client()
        start = time.time()
        try:
            async with client.stream(method, path, json=payload) as resp:
                elapsed = (time.time() - start) * 1000
                logger.debug("%s %s %d %.1fms (stream)", method, path, resp.status_code, elapsed)
                yield resp
        except httpx.HTTPError as e:
            raise RequestError(f"request error: {e}") from e
