import io
import json
import logging

import pytest
from pythonjsonlogger.json import JsonFormatter
from rich.logging import RichHandler

from argmatch import ArgSpecRegistry
from argmatch.utils import disable_logging, enable_logging


@pytest.fixture(autouse=True)
def reset_argmatch_logger():
    yield
    disable_logging()


def test_enable_logging_leaves_root_handlers_alone():
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    enable_logging("json", stream=io.StringIO())
    assert root.handlers == handlers
    assert root.level == level


def test_json_mode_writes_parse_records():
    stream = io.StringIO()
    handler = enable_logging("json", stream=stream)
    assert isinstance(handler.formatter, JsonFormatter)

    ArgSpecRegistry().declare("name").set_long("name", "name").mark_takes_value(
        "name"
    ).parse(["--name", "n"])

    records = [json.loads(line) for line in stream.getvalue().splitlines()]
    messages = [record["message"] for record in records]
    assert "Bound 'name' = 'n' from '--name'" in messages
    assert all(record["name"] == "argmatch" for record in records)


def test_cli_mode_uses_rich_handler():
    stream = io.StringIO()
    handler = enable_logging("cli", stream=stream)
    assert isinstance(handler, RichHandler)
    logging.getLogger("argmatch").debug("hello from argmatch")
    assert "hello from argmatch" in stream.getvalue()


def test_enable_logging_twice_keeps_one_handler():
    enable_logging("json", stream=io.StringIO())
    enable_logging("cli", stream=io.StringIO())
    handlers = logging.getLogger("argmatch").handlers
    assert len(handlers) == 1
    assert isinstance(handlers[0], RichHandler)


def test_disable_logging_restores_propagation():
    enable_logging("json", stream=io.StringIO())
    logger = logging.getLogger("argmatch")
    assert logger.propagate is False
    disable_logging()
    assert logger.handlers == []
    assert logger.propagate is True
    disable_logging()


def test_invalid_mode():
    with pytest.raises(ValueError):
        enable_logging("xml")
    assert logging.getLogger("argmatch").handlers == []
