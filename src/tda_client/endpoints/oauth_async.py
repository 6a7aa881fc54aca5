"""
Async OAuth2 token endpoint.

Included routes:
- POST /oauth2/token (grant_type=refresh_token)
"""

from __future__ import annotations

from ..async_http import TdaAsyncHttpClient
from ..models import AccessTokenResponse, decode_response
from .oauth import TOKEN_PATH, refresh_form


class OAuthAsyncAPI:
    """
    Async endpoint grouping for token exchange.
    """

    def __init__(self, client: TdaAsyncHttpClient) -> None:
        self._client = client

    async def refresh_access_token(
        self, client_id: str, refresh_token: str
    ) -> AccessTokenResponse:
        """
        POST /oauth2/token
        """

        payload = await self._client.request(
            "POST", TOKEN_PATH, form=refresh_form(client_id, refresh_token)
        )
        return decode_response(AccessTokenResponse.from_dict, payload)
