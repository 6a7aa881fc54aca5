"""
OAuth2 token endpoint.

Included routes:
- POST /oauth2/token (grant_type=refresh_token)

Logic flow:
1) Send the refresh token and client ID as a urlencoded form, no bearer.
2) Decode the body into AccessTokenResponse.
3) Return it untouched; converting and installing is the caller's job.
"""

from __future__ import annotations

from ..http import TdaHttpClient
from ..models import AccessTokenResponse, decode_response

TOKEN_PATH = "/oauth2/token"


def refresh_form(client_id: str, refresh_token: str) -> dict[str, str]:
    return {
        "grant_type": "refresh_token",
        "refresh_token": refresh_token,
        "client_id": client_id,
    }


class OAuthAPI:
    """
    Endpoint grouping for token exchange.
    """

    def __init__(self, client: TdaHttpClient) -> None:
        self._client = client

    def refresh_access_token(
        self, client_id: str, refresh_token: str
    ) -> AccessTokenResponse:
        """
        POST /oauth2/token

        Inputs:
        - client_id: developer application key.
        - refresh_token: long-lived refresh token.

        Outputs:
        - AccessTokenResponse (access_token, scope, expires_in seconds).
        """

        payload = self._client.request(
            "POST", TOKEN_PATH, form=refresh_form(client_id, refresh_token)
        )
        return decode_response(AccessTokenResponse.from_dict, payload)
