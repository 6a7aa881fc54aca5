"""
Local persistence for access tokens.

Purpose:
- Save and load an AccessToken as JSON ({expires_at, scope, token}).
- Reuse a stored token across runs and refresh it only when expired.

Notes:
- A missing file means "no stored token"; a corrupt file is an error.
"""

from __future__ import annotations

from pathlib import Path
import json
import logging

from .client import Client
from .errors import SchemaError
from .token import AccessToken

DEFAULT_TOKEN_PATH = ".token.json"

logger = logging.getLogger(__name__)


def save_token(path: str | Path, token: AccessToken) -> None:
    target = Path(path)
    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_text(json.dumps(token.to_dict(), indent=2), encoding="utf-8")


def load_token(path: str | Path) -> AccessToken | None:
    source = Path(path)
    if not source.exists():
        return None
    try:
        data = json.loads(source.read_text(encoding="utf-8"))
    except ValueError as exc:
        raise SchemaError(f"Token file '{source}' is not valid JSON: {exc}") from exc
    return AccessToken.from_dict(data)


def ensure_access_token(client: Client, path: str | Path = DEFAULT_TOKEN_PATH) -> AccessToken:
    """
    Install a usable token on client, refreshing and persisting when needed.

    Logic flow:
    1) Load the stored token from path (if any).
    2) If missing or expired, exchange the refresh token and save the result.
    3) Install the token on the client and return it.
    """

    token = load_token(path)
    if token is None or token.has_expired():
        logger.info("Stored token missing or expired; refreshing")
        token = AccessToken.from_response(client.get_access_token())
        save_token(path, token)
    client.set_access_token(token)
    return token
