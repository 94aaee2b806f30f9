import importlib
import logging

import pytest

from rotina.core import config
from rotina.services.logging_service import LOGGER_NAME, configure_logging


@pytest.fixture()
def clean_logger():
    logger = logging.getLogger(LOGGER_NAME)
    saved = list(logger.handlers), logger.level
    logger.handlers = []
    yield logger
    for handler in logger.handlers:
        handler.close()
    logger.handlers, level = saved
    logger.setLevel(level)


def test_configure_logging_writes_engine_log(tmp_path, clean_logger):
    logger = configure_logging(tmp_path / "logs", level="debug")
    assert logger is clean_logger
    assert logger.level == logging.DEBUG

    logging.getLogger("rotina.recurrence").debug("hello from the engine")
    for handler in logger.handlers:
        handler.flush()

    log_file = tmp_path / "logs" / "engine.log"
    assert log_file.exists()
    assert "hello from the engine" in log_file.read_text()


def test_configure_logging_is_idempotent(tmp_path, clean_logger):
    configure_logging(tmp_path)
    count = len(clean_logger.handlers)
    configure_logging(tmp_path)
    assert len(clean_logger.handlers) == count == 2


def test_config_reads_environment(monkeypatch, tmp_path):
    monkeypatch.setenv("ROTINA_LOG_DIR", str(tmp_path))
    monkeypatch.setenv("ROTINA_LOG_LEVEL", "warning")
    monkeypatch.setenv("ROTINA_LOCALE", "pt")
    try:
        importlib.reload(config)
        assert config.LOG_DIR == tmp_path
        assert config.LOG_LEVEL == "WARNING"
        assert config.DEFAULT_LOCALE == "pt"
        assert config.SHARED_PERSON == "juntos"
    finally:
        monkeypatch.undo()
        importlib.reload(config)
