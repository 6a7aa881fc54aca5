"""
HTTP client wrapper for the TD Ameritrade v1 REST API.

Purpose:
- Provide a single place to manage the base URL, bearer header and the
  status/body/transport error taxonomy.
- Keep endpoint modules focused on URL paths, parameters and decoding.

Logic flow:
1) The caller instantiates TdaHttpClient (base_url defaults to TDA_API_BASE).
2) Endpoint methods call request(method, path, ...), passing the bearer
   token for authenticated routes.
3) request() builds the full URL, injects headers and delegates to requests.
4) Any status other than 200 raises UnexpectedStatusError with the raw body.
5) The decoded JSON is returned for the endpoint to map onto models.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any
import logging

import requests

from .errors import MalformedResponseError, TransportError, UnexpectedStatusError

TDA_API_BASE = "https://api.tdameritrade.com/v1"

logger = logging.getLogger(__name__)


@dataclass
class TdaHttpClient:
    """
    Minimal HTTP client that handles base URL, auth header and status checks.
    """

    base_url: str = TDA_API_BASE
    timeout_seconds: float | None = None
    debug_logging: bool = False

    def __post_init__(self) -> None:
        self._session = requests.Session()

    def close(self) -> None:
        self._session.close()

    def request(
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

        Inputs:
        - method: HTTP method (GET, POST).
        - path: endpoint path (e.g., /accounts).
        - params: query string; form: urlencoded body.
        - token: bearer token, omitted for the token endpoint.

        Outputs:
        - Parsed JSON (dict or list).

        Raises:
        - TransportError, UnexpectedStatusError, MalformedResponseError.
        """

        url = f"{self.base_url.rstrip('/')}{path}"
        headers: dict[str, str] = {}
        if token is not None:
            headers["Authorization"] = f"Bearer {token}"

        if self.debug_logging:
            logger.info("HTTP %s %s", method.upper(), url)
        try:
            response = self._session.request(
                method=method.upper(),
                url=url,
                params=params or None,
                data=form,
                headers=headers,
                timeout=self.timeout_seconds,
            )
        except requests.RequestException as exc:
            raise TransportError(f"{method.upper()} {url} failed: {exc}") from exc

        if response.status_code != 200:
            raise UnexpectedStatusError(response.status_code, response.text)
        try:
            return response.json()
        except ValueError as exc:
            raise MalformedResponseError(str(exc), response.text) from exc
