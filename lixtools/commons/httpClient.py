import json
from contextlib import asynccontextmanager
from dataclasses import dataclass
from typing import Dict, Optional

import aiohttp
from loguru import logger

from lixtools.commons.requestHeaders import get_request_headers
from lixtools.pipeline.config import TOOLS_API_BASE, FETCH_TIMEOUT_SECONDS


@dataclass(frozen=True)
class ToolResponse:
    status: int
    reason: str = ""
    text: str = ""

    @property
    def ok(self) -> bool:
        return 200 <= self.status < 300


class ToolsClient:
    """Posts JSON bodies to the tools backend over one shared aiohttp session.

    The session is opened by ``async with`` and closed on exit unless it was
    passed in by the caller.
    """

    def __init__(
        self,
        base_url: str = TOOLS_API_BASE,
        headers: Optional[Dict[str, str]] = None,
        timeout: Optional[float] = FETCH_TIMEOUT_SECONDS,
        session: Optional[aiohttp.ClientSession] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.headers = headers if headers is not None else get_request_headers()
        self.timeout = aiohttp.ClientTimeout(total=timeout)
        self.session = session
        self._owns_session = session is None

    async def __aenter__(self) -> "ToolsClient":
        if self.session is None:
            self.session = aiohttp.ClientSession(timeout=self.timeout)
            self._owns_session = True
        return self

    async def __aexit__(self, exc_type, exc, tb):
        await self.close()

    async def close(self):
        if self.session is not None and self._owns_session:
            await self.session.close()
            self.session = None

    async def post(self, endpoint: str, body: dict) -> ToolResponse:
        if self.session is None:
            raise RuntimeError("ToolsClient session is not open; use 'async with ToolsClient()'")

        url = f"{self.base_url}{endpoint}"
        logger.debug(f"[HTTP] POST {url}")
        async with self.session.post(url, data=json.dumps(body), headers=self.headers) as resp:
            # Body is only read for successful responses
            text = await resp.text() if 200 <= resp.status < 300 else ""
            return ToolResponse(status=resp.status, reason=resp.reason or "", text=text)


@asynccontextmanager
async def client_scope(client=None):
    """Yield ``client`` untouched, or open a fresh ToolsClient for the duration of the block."""
    if client is not None:
        yield client
        return
    async with ToolsClient() as fresh:
        yield fresh
