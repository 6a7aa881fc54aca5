"""
Async HTTP client wrapper for the TD Ameritrade v1 REST API.

Purpose:
- Same contract as http.py on aiohttp: one awaited request per call,
  no streaming or partial reads.

Logic flow:
1) The caller instantiates TdaAsyncHttpClient (ideally as `async with`).
2) Endpoint methods await request(method, path, ...).
3) Status, body and transport errors map onto the tda_client taxonomy.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any
import asyncio
import json
import logging

import aiohttp

from .errors import MalformedResponseError, TransportError, UnexpectedStatusError
from .http import TDA_API_BASE

logger = logging.getLogger(__name__)


@dataclass
class TdaAsyncHttpClient:
    """
    Minimal async HTTP client that handles base URL, auth header and status checks.
    """

    base_url: str = TDA_API_BASE
    timeout_seconds: float | None = None
    debug_logging: bool = False
    _session: aiohttp.ClientSession | None = None

    async def __aenter__(self) -> "TdaAsyncHttpClient":
        self._ensure_session()
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.close()

    async def close(self) -> None:
        if self._session is not None:
            await self._session.close()
            self._session = None

    def _ensure_session(self) -> None:
        if self._session is None:
            if self.timeout_seconds is None:
                self._session = aiohttp.ClientSession()
            else:
                timeout = aiohttp.ClientTimeout(total=self.timeout_seconds)
                self._session = aiohttp.ClientSession(timeout=timeout)

    async def request(
        self,
        method: str,
        path: str,
        *,
        params: dict[str, str] | None = None,
        form: dict[str, str] | None = None,
        token: str | None = None,
    ) -> Any:
        """
        Send a single HTTP request and return the decoded JSON body.
        """

        self._ensure_session()

        url = f"{self.base_url.rstrip('/')}{path}"
        headers: dict[str, str] = {}
        if token is not None:
            headers["Authorization"] = f"Bearer {token}"

        if self.debug_logging:
            logger.info("HTTP %s %s", method.upper(), url)
        try:
            async with self._session.request(
                method=method.upper(),
                url=url,
                params=params or None,
                data=form,
                headers=headers,
            ) as response:
                status = response.status
                body = await response.text()
        except (aiohttp.ClientError, asyncio.TimeoutError) as exc:
            raise TransportError(f"{method.upper()} {url} failed: {exc}") from exc

        if status != 200:
            raise UnexpectedStatusError(status, body)
        try:
            return json.loads(body)
        except ValueError as exc:
            raise MalformedResponseError(str(exc), body) from exc
