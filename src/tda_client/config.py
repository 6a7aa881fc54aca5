"""
Configuration loader for client credentials and transport settings.

Purpose:
- Centralize how the client ID, refresh token and tuning knobs are assembled.
- Keep tracing simple: YAML -> environment -> ClientSettings -> Client.

Sources:
- tda.yaml (optional, gitignored): a top-level `tda:` mapping.
- environment variables (.env is recommended, gitignored): secrets and
  overrides. Environment values win over YAML values.

Logic flow (high level):
1) load_settings() reads the YAML file when a path is given.
2) A local .env file is loaded once into os.environ (existing vars win).
3) Each setting is resolved env-first, then YAML, then default.
4) ClientSettings is consumed by app.py -> client.py -> http.py.

Tracing notes:
- Missing credentials raise ValueError naming both sources that were checked.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any
import os

import yaml

from .http import TDA_API_BASE
from .token_store import DEFAULT_TOKEN_PATH

_ENV_LOADED = False


@dataclass(frozen=True)
class ClientSettings:
    """
    Resolved runtime config for one developer application.
    """

    client_id: str
    refresh_token: str
    base_url: str = TDA_API_BASE
    timeout_seconds: float | None = None
    debug_logging: bool = False
    token_path: str = DEFAULT_TOKEN_PATH

    def __repr__(self) -> str:
        # Refresh tokens are long-lived secrets; keep them out of logs.
        return (
            f"ClientSettings(client_id={self.client_id!r}, base_url={self.base_url!r}, "
            f"timeout_seconds={self.timeout_seconds!r}, debug_logging={self.debug_logging!r}, "
            f"token_path={self.token_path!r})"
        )


def _load_env_file(path: str = ".env") -> None:
    # Minimal .env loader to avoid external dependencies.
    global _ENV_LOADED
    if _ENV_LOADED:
        return
    if not os.path.exists(path):
        _ENV_LOADED = True
        return

    with open(path, "r", encoding="utf-8") as handle:
        for raw_line in handle:
            line = raw_line.strip()
            if not line or line.startswith("#") or "=" not in line:
                continue
            key, value = line.split("=", 1)
            key = key.strip()
            value = value.strip().strip("'\"")
            if key and value and key not in os.environ:
                os.environ[key] = value

    _ENV_LOADED = True


def _lookup(env_name: str, yaml_values: dict[str, Any], yaml_key: str) -> str | None:
    value = os.getenv(env_name)
    if value is not None and value != "":
        return value
    raw = yaml_values.get(yaml_key)
    if raw is None or raw == "":
        return None
    return str(raw)


def _read_required(env_name: str, yaml_values: dict[str, Any], yaml_key: str) -> str:
    value = _lookup(env_name, yaml_values, yaml_key)
    if not value:
        raise ValueError(
            f"Missing required setting: environment variable '{env_name}' "
            f"or 'tda.{yaml_key}' in the YAML config."
        )
    return value


def _read_optional_float(env_name: str, yaml_values: dict[str, Any], yaml_key: str) -> float | None:
    value = _lookup(env_name, yaml_values, yaml_key)
    if value is None:
        return None
    return float(value)


def _read_bool(env_name: str, yaml_values: dict[str, Any], yaml_key: str, default: bool) -> bool:
    value = _lookup(env_name, yaml_values, yaml_key)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


def _parse_yaml(raw: Any) -> dict[str, Any]:
    if not raw:
        return {}
    if not isinstance(raw, dict) or "tda" not in raw:
        raise ValueError("Config YAML must contain a top-level 'tda' mapping.")
    section = raw["tda"]
    if not isinstance(section, dict):
        raise ValueError("'tda' must be a mapping of setting names to values.")
    return section


def load_yaml_settings(path: str) -> dict[str, Any]:
    """
    Read the `tda:` section of a YAML config file.
    """

    with open(path, "r", encoding="utf-8") as handle:
        raw = yaml.safe_load(handle)
    return _parse_yaml(raw)


def load_settings(path: str | None = None, *, env_file: str = ".env") -> ClientSettings:
    """
    Resolve ClientSettings from YAML (optional), .env and the environment.

    Inputs:
    - path: optional YAML file with a `tda:` mapping.
    - env_file: .env path loaded once per process.

    Outputs:
    - ClientSettings ready for app.build_client().
    """

    _load_env_file(env_file)
    yaml_values = load_yaml_settings(path) if path else {}

    return ClientSettings(
        client_id=_read_required("TDA_CLIENT_ID", yaml_values, "client_id"),
        refresh_token=_read_required("TDA_REFRESH_TOKEN", yaml_values, "refresh_token"),
        base_url=_lookup("TDA_API_BASE", yaml_values, "base_url") or TDA_API_BASE,
        timeout_seconds=_read_optional_float(
            "TDA_REQUEST_TIMEOUT_SECONDS", yaml_values, "timeout_seconds"
        ),
        debug_logging=_read_bool("TDA_DEBUG_LOGGING", yaml_values, "debug_logging", False),
        token_path=_lookup("TDA_TOKEN_PATH", yaml_values, "token_path") or DEFAULT_TOKEN_PATH,
    )
