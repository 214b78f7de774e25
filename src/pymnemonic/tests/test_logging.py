# ---------------------------------------------------------------------------
# File: test_logging.py
# ---------------------------------------------------------------------------
# Description:
#	Unit tests for pymnemonic.core.logging.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/16/2026	pymnemonic dev				Initial tests
# ---------------------------------------------------------------------------

from __future__ import annotations

import logging

import pytest

from pymnemonic.core.logging import (
	_reset_logging_for_tests,
	get_app_logger,
	init_logging,
)


@pytest.fixture(autouse=True)
def _clean_logging():
	_reset_logging_for_tests()
	yield
	_reset_logging_for_tests()
	get_app_logger().setLevel(logging.NOTSET)


def test_get_app_logger_names():
	assert get_app_logger().name == "pymnemonic"
	assert get_app_logger("mnemonics").name == "pymnemonic.mnemonics"


def test_init_logging_sets_level_from_flat_or_dotted_keys():
	init_logging({"log_level": "debug"})
	assert get_app_logger().level == logging.DEBUG

	init_logging({"logging.level": "WARNING", "log_level": "DEBUG"})
	assert get_app_logger().level == logging.WARNING


def test_init_logging_unknown_level_is_info():
	init_logging({"log_level": "chatty"})
	assert get_app_logger().level == logging.INFO


def test_init_logging_is_idempotent():
	logger = get_app_logger()
	before = len(logger.handlers)

	init_logging({"log_level": "INFO"})
	init_logging({"log_level": "INFO"})

	assert len(logger.handlers) == before + 1


def test_init_logging_replaces_its_own_handlers():
	logger = get_app_logger()
	foreign = logging.NullHandler()
	logger.addHandler(foreign)
	try:
		init_logging({"log_level": "INFO"})
		init_logging({"log_level": "DEBUG"})

		assert foreign in logger.handlers
		assert len([h for h in logger.handlers if h is not foreign]) == 1
	finally:
		logger.removeHandler(foreign)


def test_init_logging_file_handler(tmp_path):
	path = tmp_path / "logs" / "pymnemonic.log"
	init_logging({"log_console": False, "log_file": str(path)})

	get_app_logger("tests").info("hello file")
	for h in get_app_logger().handlers:
		h.flush()

	assert path.exists()
	assert "hello file" in path.read_text(encoding="utf-8")
