from __future__ import annotations

import importlib
import logging

from logger import get_logger


def test_get_logger_returns_named_logger():
    log = get_logger("grid_store")
    assert isinstance(log, logging.Logger)
    assert log.name == "grid_store"


def test_get_logger_configures_root_handler_once():
    get_logger("a")
    handlers = list(logging.getLogger().handlers)
    get_logger("b")
    assert logging.getLogger().handlers == handlers
    assert handlers


def test_log_level_comes_from_environment(monkeypatch):
    import logger

    monkeypatch.setenv("GRIDSHEET_LOG_LEVEL", "debug")
    importlib.reload(logger)
    assert logger.DEFAULT_LEVEL == "DEBUG"

    monkeypatch.delenv("GRIDSHEET_LOG_LEVEL")
    importlib.reload(logger)
    assert logger.DEFAULT_LEVEL == "INFO"
