from __future__ import annotations

import logging

import pytest

from glbridge.config import BridgeConfig, ColorPolicy, get_config, reset_config, resolve_config
from glbridge.log import ROOT_LOGGER_NAME, configure_logging, get_logger
from glbridge.utils.types import Quaternion, Vector2


def test_defaults_without_environment() -> None:
    config = resolve_config()
    assert config == BridgeConfig()
    assert config.log_level == "WARNING"
    assert config.color_policy is ColorPolicy.TRUNCATE
    assert config.tolerance == 1e-6


def test_environment_overrides(monkeypatch) -> None:
    monkeypatch.setenv("GLBRIDGE_LOG_LEVEL", "debug")
    monkeypatch.setenv("GLBRIDGE_COLOR_POLICY", "Clamp")
    monkeypatch.setenv("GLBRIDGE_TOLERANCE", "1e-3")
    config = resolve_config()
    assert config.log_level == "DEBUG"
    assert config.color_policy is ColorPolicy.CLAMP
    assert config.tolerance == 1e-3


def test_color_policy_aliases(monkeypatch) -> None:
    monkeypatch.setenv("GLBRIDGE_COLOR_POLICY", "clip")
    assert resolve_config().color_policy is ColorPolicy.CLAMP
    monkeypatch.setenv("GLBRIDGE_COLOR_POLICY", "trunc")
    assert resolve_config().color_policy is ColorPolicy.TRUNCATE


@pytest.mark.parametrize("name, value", [
    ("GLBRIDGE_LOG_LEVEL", "loud"),
    ("GLBRIDGE_COLOR_POLICY", "round"),
    ("GLBRIDGE_TOLERANCE", "abc"),
    ("GLBRIDGE_TOLERANCE", "-1"),
])
def test_invalid_values_fall_back_with_warning(monkeypatch, caplog, name: str, value: str) -> None:
    monkeypatch.setenv(name, value)
    with caplog.at_level(logging.WARNING, logger="glbridge.config"):
        config = resolve_config()
    assert config == BridgeConfig()
    assert any(name in record.getMessage() for record in caplog.records)


def test_config_is_cached_until_reset(monkeypatch) -> None:
    first = get_config()
    monkeypatch.setenv("GLBRIDGE_TOLERANCE", "0.5")
    assert get_config() is first
    reset_config()
    assert get_config().tolerance == 0.5


def test_configured_tolerance_drives_is_close(monkeypatch) -> None:
    assert not Vector2(0, 0).is_close(Vector2(0.05, 0))
    monkeypatch.setenv("GLBRIDGE_TOLERANCE", "0.1")
    reset_config()
    assert Vector2(0, 0).is_close(Vector2(0.05, 0))
    assert Quaternion(0, 0, 0, 1.05).is_unit()


def test_loggers_are_namespaced() -> None:
    assert get_logger("matrix").name == "glbridge.matrix"


def test_configure_logging_installs_one_handler(monkeypatch) -> None:
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    monkeypatch.setattr(logger, "handlers", list(logger.handlers))
    previous = logger.level
    try:
        configure_logging("DEBUG")
        assert logger.level == logging.DEBUG
        count = len(logger.handlers)
        configure_logging("ERROR")
        assert logger.level == logging.ERROR
        assert len(logger.handlers) == count
    finally:
        logger.setLevel(previous)


def test_configure_logging_reads_environment(monkeypatch) -> None:
    monkeypatch.setenv("GLBRIDGE_LOG_LEVEL", "INFO")
    reset_config()
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    previous = logger.level
    try:
        assert configure_logging() is logger
        assert logger.level == logging.INFO
    finally:
        logger.setLevel(previous)


@pytest.mark.parametrize("name, expected", [
    ("warn", logging.WARNING),
    ("DEBUG", logging.DEBUG),
    (" error ", logging.ERROR),
    ("fatal", logging.CRITICAL),
])
def test_configure_logging_accepts_level_names(monkeypatch, name: str, expected: int) -> None:
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    monkeypatch.setattr(logger, "handlers", list(logger.handlers))
    previous = logger.level
    try:
        configure_logging(name)
        assert logger.level == expected
    finally:
        logger.setLevel(previous)


@pytest.mark.parametrize("name", ["basic_format", "Logger", "NOTSET_", "loud"])
def test_configure_logging_rejects_unknown_level_names(name: str) -> None:
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    previous = logger.level
    with pytest.raises(ValueError):
        configure_logging(name)
    assert logger.level == previous
