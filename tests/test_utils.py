import logging

import pytest
from pythonjsonlogger.json import JsonFormatter
from rich.logging import RichHandler

from askpw.utils import is_truthy, setup_logging


@pytest.fixture(autouse=True)
def restore_root_logger():
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.mark.parametrize(
    "value, expected",
    [("1", True), (" TRUE ", True), ("on", True), ("0", False), (None, False)],
)
def test_is_truthy(value, expected):
    assert is_truthy(value) is expected


def test_setup_logging_cli():
    setup_logging(mode="cli", console_log_level=logging.DEBUG)
    handlers = logging.getLogger().handlers
    assert len(handlers) == 1
    assert isinstance(handlers[0], RichHandler)
    assert handlers[0].level == logging.DEBUG


def test_setup_logging_json():
    setup_logging(mode="json")
    (handler,) = logging.getLogger().handlers
    assert isinstance(handler.formatter, JsonFormatter)
    assert handler.level == logging.WARNING


def test_setup_logging_env_mode(monkeypatch):
    monkeypatch.setenv("ASKPW_LOG_MODE", "json")
    setup_logging()
    (handler,) = logging.getLogger().handlers
    assert isinstance(handler.formatter, JsonFormatter)


def test_setup_logging_file(tmp_path):
    log_file = tmp_path / "askpw.log"
    setup_logging(mode="cli", log_filename=str(log_file), json_log_to_file=True)
    handlers = logging.getLogger().handlers
    assert len(handlers) == 2
    file_handler = handlers[1]
    assert isinstance(file_handler, logging.FileHandler)
    assert isinstance(file_handler.formatter, JsonFormatter)
    logging.getLogger("askpw").debug("written")
    file_handler.flush()
    file_handler.close()
    assert "written" in log_file.read_text()


def test_setup_logging_invalid_mode():
    with pytest.raises(ValueError, match="Invalid log mode"):
        setup_logging(mode="xml")


def test_setup_logging_leaves_other_loggers_alone():
    other = logging.getLogger("asyncio")
    level = other.level
    setup_logging(mode="cli")
    assert other.level == level
