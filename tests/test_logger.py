# File: tests/test_logger.py
import logging

import pytest

from robots_forge.logger import LEVEL_ENV, LOGGER_NAME, configure, default_level, get_logger


@pytest.fixture(autouse=True)
def restore_logging():
    yield
    configure()


def test_get_logger_returns_project_child():
    assert get_logger().name == LOGGER_NAME
    assert get_logger("robots_forge.serializer").name == "RobotsForge.serializer"
    assert get_logger("plugins.custom").name == "RobotsForge.plugins.custom"
    assert get_logger("robots_forge.matcher").parent is get_logger()


def test_child_messages_reach_log_file(tmp_path):
    log_file = tmp_path / "forge.log"
    configure(level="DEBUG", log_file=log_file)
    get_logger("robots_forge.validator").debug("checked %d lines", 3)
    for handler in get_logger().handlers:
        handler.flush()
    text = log_file.read_text(encoding="utf-8")
    assert "RobotsForge.validator" in text
    assert "checked 3 lines" in text


def test_configure_replaces_only_its_own_handlers():
    lg = get_logger()
    foreign = logging.NullHandler()
    lg.addHandler(foreign)
    try:
        configure(level="INFO")
        configure(level="ERROR")
        owned = [h for h in lg.handlers if h is not foreign]
        assert len(owned) == 1
        assert foreign in lg.handlers
        assert lg.level == logging.ERROR
    finally:
        lg.removeHandler(foreign)


@pytest.mark.parametrize(
    "value, expected",
    [("debug", "DEBUG"), (" info ", "INFO"), ("loud", "WARNING")],
)
def test_default_level_from_environment(monkeypatch, value, expected):
    monkeypatch.setenv(LEVEL_ENV, value)
    assert default_level() == expected
    assert configure().level == logging.getLevelName(expected)


def test_default_level_without_environment(monkeypatch):
    monkeypatch.delenv(LEVEL_ENV, raising=False)
    assert default_level() == "WARNING"
