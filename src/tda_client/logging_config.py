"""
Logging helpers for tda_client.

Purpose:
- Turn on the transport's `HTTP <METHOD> <URL>` trace for this package
  only, leaving the application's root logger alone.
- Support JSONL output for easy ingestion by downstream tools.

Notes:
- The transport only emits the trace when TdaHttpClient/TdaAsyncHttpClient
  is built with debug_logging=True (TDA_DEBUG_LOGGING in config).
"""

from __future__ import annotations

import json
import logging
import time

PACKAGE_LOGGER = "tda_client"


class JsonFormatter(logging.Formatter):
    """
    JSONL formatter: one object per record.
    """

    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "ts": time.strftime("%Y-%m-%dT%H:%M:%SZ", time.gmtime(record.created)),
            "level": record.levelname,
            "name": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(payload)


class _PackageHandler(logging.StreamHandler):
    # Marker type so repeated setup calls replace our handler instead of stacking.
    pass


def setup_logging(
    level: str = "INFO",
    *,
    json_output: bool = False,
    logger_name: str | None = PACKAGE_LOGGER,
    stream=None,
) -> logging.Logger:
    """
    Attach a stream handler to the tda_client logger (or root if logger_name is None).

    Inputs:
    - level: log level name for the target logger.
    - json_output: emit JSONL instead of "LEVEL name: message".
    - logger_name: target logger; None configures the root logger.
    - stream: output stream (defaults to stderr).

    Outputs:
    - The configured logger.
    """

    target = logging.getLogger(logger_name)
    for existing in [h for h in target.handlers if isinstance(h, _PackageHandler)]:
        target.removeHandler(existing)

    handler = _PackageHandler(stream)
    if json_output:
        handler.setFormatter(JsonFormatter())
    else:
        handler.setFormatter(logging.Formatter("%(levelname)s %(name)s: %(message)s"))
    target.addHandler(handler)
    target.setLevel(level.upper())
    if logger_name is not None:
        # The package handler already writes; don't echo through root as well.
        target.propagate = False
    return target
