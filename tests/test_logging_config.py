import io
import json
import logging

import pytest

from tda_client.logging_config import JsonFormatter, setup_logging


@pytest.fixture
def restore_package_logger():
    logger = logging.getLogger("tda_client")
    handlers, level, propagate = list(logger.handlers), logger.level, logger.propagate
    yield
    logger.handlers = handlers
    logger.setLevel(level)
    logger.propagate = propagate


def test_json_formatter_emits_jsonl() -> None:
    record = logging.LogRecord("tda_client.http", logging.INFO, __file__, 1, "HTTP %s %s", ("GET", "/accounts"), None)
    payload = json.loads(JsonFormatter().format(record))
    assert payload["level"] == "INFO"
    assert payload["name"] == "tda_client.http"
    assert payload["message"] == "HTTP GET /accounts"


def test_setup_logging_targets_package_logger(restore_package_logger) -> None:
    root_handlers = list(logging.getLogger().handlers)
    stream = io.StringIO()
    logger = setup_logging("INFO", stream=stream)
    logging.getLogger("tda_client.http").info("HTTP %s %s", "GET", "https://example.com/v1/accounts")
    assert logger.name == "tda_client"
    assert logger.propagate is False
    assert logging.getLogger().handlers == root_handlers
    assert stream.getvalue() == "INFO tda_client.http: HTTP GET https://example.com/v1/accounts\n"


def test_setup_logging_json_output_and_repeat_calls(restore_package_logger) -> None:
    first = io.StringIO()
    second = io.StringIO()
    setup_logging("DEBUG", stream=first)
    logger = setup_logging("DEBUG", json_output=True, stream=second)
    logging.getLogger("tda_client.token_store").debug("refreshing")
    assert first.getvalue() == ""
    assert sum(1 for h in logger.handlers if isinstance(h, logging.StreamHandler)) == 1
    payload = json.loads(second.getvalue())
    assert payload["name"] == "tda_client.token_store"
    assert payload["message"] == "refreshing"
