"""
Access token model.

Purpose:
- Convert a raw token-exchange response into a bearer token with an
  absolute expiry (milliseconds since epoch) and a scope tuple.
- Provide the persisted shape ({expires_at, scope, token}) for storage.

Notes:
- Tokens are immutable; a refresh produces a new AccessToken.
- has_expired() is True only once the expiry instant has been reached.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any
import time

from .errors import SchemaError
from .models import AccessTokenResponse


def now_ms() -> int:
    """
    Current wall-clock time in milliseconds since epoch.
    """

    return int(time.time() * 1000)


@dataclass(frozen=True)
class AccessToken:
    """
    Bearer token held by a Client.
    """

    token: str
    expires_at: int
    scope: tuple[str, ...] = ()

    @classmethod
    def from_response(
        cls, response: AccessTokenResponse, *, now: int | None = None
    ) -> "AccessToken":
        """
        Build a token from the /oauth2/token response.

        Inputs:
        - response: decoded AccessTokenResponse.
        - now: override for the current time in ms (tests).

        Outputs:
        - AccessToken expiring expires_in seconds from now.
        """

        issued_at = now_ms() if now is None else now
        return cls(
            token=response.access_token,
            expires_at=issued_at + response.expires_in * 1000,
            # Split on single spaces: "" gives ("",), "a  b" keeps the empty entry.
            scope=tuple(response.scope.split(" ")),
        )

    def has_expired(self, *, now: int | None = None) -> bool:
        """
        Return True if the token's expiry time has been reached.
        """

        current = now_ms() if now is None else now
        return current >= self.expires_at

    def to_dict(self) -> dict[str, Any]:
        return {
            "expires_at": self.expires_at,
            "scope": list(self.scope),
            "token": self.token,
        }

    @classmethod
    def from_dict(cls, data: Any) -> "AccessToken":
        if not isinstance(data, dict):
            raise SchemaError("Stored token must be a JSON object.")
        token = data.get("token")
        expires_at = data.get("expires_at")
        scope = data.get("scope", [])
        if not isinstance(token, str):
            raise SchemaError("Stored token missing string 'token'.")
        if isinstance(expires_at, bool) or not isinstance(expires_at, int):
            raise SchemaError("Stored token missing integer 'expires_at'.")
        if not isinstance(scope, list) or not all(isinstance(s, str) for s in scope):
            raise SchemaError("Stored token 'scope' must be a list of strings.")
        return cls(token=token, expires_at=expires_at, scope=tuple(scope))
