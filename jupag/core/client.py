#!/usr/bin/env python3
"""
JUPAG - Jupiter Client

Typed gateway to the Jupiter APIs. One method per endpoint; every failure
is raised to the caller, nothing is retried.
"""

import asyncio
from typing import Any, Optional, TypeVar

import aiohttp
from pydantic import TypeAdapter, ValidationError

from jupag.config import ClientConfig
from jupag.core.transport import AiohttpTransport, HttpResponse, HttpTransport
from jupag.exceptions import ApiError, RequestError, ResponseParseError
from jupag.logger import JupagLogger
from jupag.api.recurring import RecurringApi
from jupag.api.swap import SwapApi
from jupag.api.token import TokenApi
from jupag.api.trigger import TriggerApi
from jupag.api.ultra import UltraApi

T = TypeVar("T")


class JupiterClient(SwapApi, UltraApi, TokenApi, TriggerApi, RecurringApi):
    """
    Client for https://lite-api.jup.ag (or https://api.jup.ag with an API key).

    Usage:
        client = JupiterClient(ClientConfig(), logger)
        quote = await client.get_quote(QuoteRequest(...))
        await client.close()
    """

    def __init__(
        self,
        config: ClientConfig,
        logger: JupagLogger,
        transport: Optional[HttpTransport] = None,
    ):
        self.config = config
        self.logger = logger
        self.base_url = config.base_url
        self.transport = transport or AiohttpTransport(
            api_key=config.api_key,
            timeout_seconds=config.request_timeout_seconds,
        )

    async def __aenter__(self) -> "JupiterClient":
        return self

    async def __aexit__(self, *exc) -> None:
        await self.close()

    async def _send(
        self,
        method: str,
        path: str,
        params: Optional[dict[str, str]] = None,
        json_body: Optional[Any] = None,
    ) -> HttpResponse:
        url = f"{self.base_url}{path}"
        self.logger.request_sent(method, path)
        try:
            response = await self.transport.request(method, url, params=params, json_body=json_body)
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            raise RequestError(f"Request failed: {method} {path}: {e}") from e

        if not response.ok:
            self.logger.request_failed(method, path, response.status, response.text)
            raise ApiError(response.text or "Unable to get error details", response.status)
        return response

    def _parse(self, response: HttpResponse, response_type: type[T]) -> T:
        try:
            return TypeAdapter(response_type).validate_json(response.text)
        except ValidationError as e:
            raise ResponseParseError(f"Failed to deserialize response: {e}") from e

    async def _get(
        self,
        path: str,
        response_type: type[T],
        params: Optional[dict[str, str]] = None,
    ) -> T:
        response = await self._send("GET", path, params=params)
        return self._parse(response, response_type)

    async def _post(self, path: str, response_type: type[T], body: Any) -> T:
        response = await self._send("POST", path, json_body=body)
        return self._parse(response, response_type)

    async def close(self):
        """Release the transport."""
        await self.transport.close()
