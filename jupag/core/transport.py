#!/usr/bin/env python3
"""
JUPAG - HTTP Transport

The one capability the client needs from HTTP: send a request, get back a
status and a body. Swappable so tests never touch the network.
"""

from dataclasses import dataclass
from typing import Any, Optional, Protocol

import aiohttp


@dataclass
class HttpResponse:
    status: int
    text: str

    @property
    def ok(self) -> bool:
        return 200 <= self.status < 300


class HttpTransport(Protocol):
    async def request(
        self,
        method: str,
        url: str,
        params: Optional[dict[str, str]] = None,
        json_body: Optional[Any] = None,
    ) -> HttpResponse: ...

    async def close(self) -> None: ...


class AiohttpTransport:
    """
    aiohttp-backed transport with JSON default headers.
    The session is created lazily on first use.
    """

    def __init__(self, api_key: str = "", timeout_seconds: float = 10.0):
        self.headers = {
            "Accept": "application/json",
            "Content-Type": "application/json",
        }
        if api_key:
            self.headers["x-api-key"] = api_key
        self.timeout = aiohttp.ClientTimeout(total=timeout_seconds)
        self.session: aiohttp.ClientSession | None = None

    async def _get_session(self) -> aiohttp.ClientSession:
        if self.session is None or self.session.closed:
            self.session = aiohttp.ClientSession(headers=self.headers, timeout=self.timeout)
        return self.session

    async def request(
        self,
        method: str,
        url: str,
        params: Optional[dict[str, str]] = None,
        json_body: Optional[Any] = None,
    ) -> HttpResponse:
        session = await self._get_session()
        async with session.request(method, url, params=params, json=json_body) as response:
            return HttpResponse(status=response.status, text=await response.text())

    async def close(self) -> None:
        if self.session and not self.session.closed:
            await self.session.close()
