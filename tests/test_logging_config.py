"""Tests for the loguru sinks installed by setup_logging."""

import sys

import pytest
from loguru import logger

from easydict.utils.logging_config import component_logger, setup_logging


@pytest.fixture
def restore_logger():
    yield
    logger.remove()
    logger.add(sys.stderr)


def test_file_sink_keeps_only_package_records(tmp_path, restore_logger):
    log_file = tmp_path / "logs" / "easydict.log"

    setup_logging(log_file=str(log_file))
    logger.info("record from outside the package")
    logger.remove()

    text = log_file.read_text(encoding="utf-8")
    assert "Logging initialized" in text
    assert "| easydict |" in text
    assert "record from outside the package" not in text


def test_file_logging_can_be_disabled(tmp_path, restore_logger):
    setup_logging(log_file=None)

    assert list(tmp_path.iterdir()) == []


def test_component_logger_tags_records(restore_logger):
    setup_logging(log_file=None)
    components = []
    logger.add(lambda message: components.append(message.record["extra"]["component"]))

    component_logger("cli").warning("lookup failed")
    logger.warning("untagged")

    assert components == ["cli", "easydict"]
