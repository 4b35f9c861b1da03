import logging

from ghanfoot.logging_config import setup_logging


def test_setup_logging_attaches_handlers(tmp_path, monkeypatch):
    monkeypatch.delenv("GHANFOOT_LOG_FILE", raising=False)
    log_file = tmp_path / "app.log"
    logger = setup_logging(level=logging.DEBUG, log_file=str(log_file))

    assert logger is logging.getLogger("ghanfoot")
    assert logger.level == logging.DEBUG
    assert len(logger.handlers) == 2
    for handler in logger.handlers:
        handler.flush()
    assert "Logging initialized" in log_file.read_text(encoding="utf-8")

    # re-running replaces the handlers instead of stacking them
    setup_logging()
    assert logger.level == logging.INFO
    assert len(logger.handlers) == 1


def test_log_file_from_environment(tmp_path, monkeypatch):
    log_file = tmp_path / "env.log"
    monkeypatch.setenv("GHANFOOT_LOG_FILE", str(log_file))

    logger = setup_logging()
    for handler in logger.handlers:
        handler.flush()

    assert len(logger.handlers) == 2
    assert "level INFO" in log_file.read_text(encoding="utf-8")

    monkeypatch.delenv("GHANFOOT_LOG_FILE")
    setup_logging()
    assert len(logger.handlers) == 1
