import logging

import pytest

from temping.config.config_loader import DEFAULT_NAMESPACE, load_config
from temping.logging.logger import get_logger


def test_load_config_defaults(monkeypatch):
    for name in ("TEMPING_DIR", "TEMPING_NAMESPACE", "TEMPING_LOG_LEVEL", "TEMPING_LOG_FILE"):
        monkeypatch.delenv(name, raising=False)

    config = load_config()

    assert config == {
        "namespace": DEFAULT_NAMESPACE,
        "root": None,
        "log_level": logging.WARNING,
        "log_file": None,
    }


def test_load_config_reads_environment(monkeypatch):
    monkeypatch.setenv("TEMPING_NAMESPACE", "suite-sandbox/")
    monkeypatch.setenv("TEMPING_DIR", "/srv/scratch")
    monkeypatch.setenv("TEMPING_LOG_LEVEL", "debug")

    config = load_config()

    assert config["namespace"] == "suite-sandbox/"
    assert config["root"] == "/srv/scratch"
    assert config["log_level"] == logging.DEBUG


def test_numeric_log_level(monkeypatch):
    monkeypatch.setenv("TEMPING_LOG_LEVEL", "15")

    assert load_config()["log_level"] == 15


def test_unknown_log_level_rejected(monkeypatch):
    monkeypatch.setenv("TEMPING_LOG_LEVEL", "chatty")

    with pytest.raises(ValueError):
        load_config()


def test_logger_uses_namespace_and_configured_level(monkeypatch):
    monkeypatch.setenv("TEMPING_LOG_LEVEL", "DEBUG")
    monkeypatch.delenv("TEMPING_LOG_FILE", raising=False)

    logger = get_logger("tests.level_check")

    assert logger.name == "temping.tests.level_check"
    assert logger.level == logging.DEBUG
    assert get_logger("tests.level_check") is logger
    assert len(logger.handlers) == 1


def test_logger_writes_log_file(monkeypatch, tmp_path):
    log_file = tmp_path / "temping.log"
    monkeypatch.setenv("TEMPING_LOG_FILE", str(log_file))
    monkeypatch.setenv("TEMPING_LOG_LEVEL", "INFO")

    logger = get_logger("tests.file_check")
    try:
        logger.info("sandbox ready")
        for handler in logger.handlers:
            handler.flush()
        assert "sandbox ready" in log_file.read_text(encoding="utf-8")
    finally:
        for handler in list(logger.handlers):
            handler.close()
            logger.removeHandler(handler)
