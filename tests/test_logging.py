"""Tests for the logging helpers (utils/logging.py)."""

from __future__ import annotations

import logging
from collections.abc import Iterator

import pytest

from collext.cli.app import main
from collext.utils.logging import configure_logging, get_logger


@pytest.fixture(autouse=True)
def _restore_level() -> Iterator[None]:
    level = get_logger().level
    yield
    get_logger().setLevel(level)


class TestGetLogger:
    def test_root_name(self) -> None:
        assert get_logger().name == "collext"

    def test_component_is_child(self) -> None:
        logger = get_logger("arrays")
        assert logger.name == "collext.arrays"
        assert logger.parent is get_logger()

    def test_single_handler(self) -> None:
        get_logger()
        get_logger("dicts")
        assert len(get_logger().handlers) == 1
        assert get_logger("dicts").handlers == []


class TestConfigureLogging:
    def test_verbose_enables_debug(self) -> None:
        assert configure_logging(verbose=True).level == logging.DEBUG

    def test_quiet_is_warning(self) -> None:
        assert configure_logging(verbose=False).level == logging.WARNING

    def test_cli_verbose_flag(self, capsys: pytest.CaptureFixture[str]) -> None:
        main(["--verbose", "reverse", "a"])
        assert get_logger().level == logging.DEBUG
