"""Tests for environment-driven configuration."""

import logging
import sys

from avro_schema_validator.config import ValidatorConfig
from avro_schema_validator.utils.logging_utils import parse_level


def test_defaults_without_environment(monkeypatch) -> None:
    for name in (
        "AVRO_SCHEMA_VALIDATOR_ROOT_IDENTIFIER",
        "AVRO_SCHEMA_VALIDATOR_FAIL_ON_EXTRA_FIELDS",
        "AVRO_SCHEMA_VALIDATOR_LOG_LEVEL",
        "AVRO_SCHEMA_VALIDATOR_PRINT_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)

    config = ValidatorConfig.from_env()

    assert config == ValidatorConfig()
    assert config.root_identifier == "."
    assert config.fail_on_extra_fields is False


def test_environment_overrides(monkeypatch) -> None:
    monkeypatch.setenv("AVRO_SCHEMA_VALIDATOR_ROOT_IDENTIFIER", "$")
    monkeypatch.setenv("AVRO_SCHEMA_VALIDATOR_FAIL_ON_EXTRA_FIELDS", "TRUE")
    monkeypatch.setenv("AVRO_SCHEMA_VALIDATOR_LOG_LEVEL", "debug")

    config = ValidatorConfig.from_env()

    assert config.root_identifier == "$"
    assert config.fail_on_extra_fields is True
    assert config.log_level == "debug"


def test_set_logging_splits_streams() -> None:
    root = logging.getLogger()
    saved_handlers, saved_level = list(root.handlers), root.level
    try:
        logger = ValidatorConfig(log_level="DEBUG", print_level="WARNING").set_logging()

        assert logger.name == "avro_schema_validator"
        assert root.level == logging.DEBUG
        streams = [h.stream for h in root.handlers]
        assert streams == [sys.stdout, sys.stderr]
        assert root.handlers[1].level == logging.WARNING
    finally:
        root.handlers[:] = saved_handlers
        root.setLevel(saved_level)


def test_parse_level_falls_back_on_unknown_names() -> None:
    assert parse_level("debug", logging.INFO) == logging.DEBUG
    assert parse_level(" Warning ", logging.INFO) == logging.WARNING
    assert parse_level("chatty", logging.ERROR) == logging.ERROR
    assert parse_level(None, logging.INFO) == logging.INFO
