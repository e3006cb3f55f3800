import logging

import pytest

from rc4kit.infra.logger import LOG_FILENAME, setup_logging


@pytest.fixture(autouse=True)
def restore_logger():
    logger = logging.getLogger("rc4kit")
    handlers = list(logger.handlers)
    level = logger.level
    yield
    for h in list(logger.handlers):
        if h not in handlers:
            logger.removeHandler(h)
            h.close()
    logger.setLevel(level)


def test_setup_logging_console_only():
    logger = setup_logging("DEBUG")
    assert logger.name == "rc4kit"
    assert logger.level == logging.DEBUG
    assert any(isinstance(h, logging.StreamHandler) for h in logger.handlers)


def test_setup_logging_is_idempotent():
    setup_logging("INFO")
    count = len(logging.getLogger("rc4kit").handlers)
    setup_logging("WARNING")
    assert len(logging.getLogger("rc4kit").handlers) == count


def test_setup_logging_keeps_foreign_handlers():
    logger = logging.getLogger("rc4kit")
    foreign = logging.NullHandler()
    logger.addHandler(foreign)

    setup_logging("INFO")
    assert foreign in logger.handlers


def test_setup_logging_writes_file(tmp_path):
    logger = setup_logging("INFO", tmp_path / "logs")
    logging.getLogger("rc4kit.api").info("hello from rc4kit")

    for h in logger.handlers:
        h.flush()

    log_file = tmp_path / "logs" / LOG_FILENAME
    assert "hello from rc4kit" in log_file.read_text(encoding="utf-8")


def test_setup_logging_numeric_level():
    assert setup_logging(logging.ERROR).level == logging.ERROR


def test_setup_logging_unknown_level():
    with pytest.raises(ValueError):
        setup_logging("LOUD")
