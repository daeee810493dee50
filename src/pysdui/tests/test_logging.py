# ---------------------------------------------------------------------------
# File: test_logging.py
# ---------------------------------------------------------------------------
# Description:
#	Unit tests for pysdui.core.logging.
#
# Notes:
#	- Every test resets installed handlers afterwards.
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/05/2026	Paul G. LeDuc				Initial tests
# ---------------------------------------------------------------------------

from __future__ import annotations

import logging

import pytest

from pysdui.core import logging as pl


@pytest.fixture(autouse=True)
def _clean_logging():
	pl._reset_logging_for_tests()
	yield
	pl._reset_logging_for_tests()
	logging.getLogger("pysdui").setLevel(logging.NOTSET)


def _installed() -> list[logging.Handler]:
	return list(pl._INSTALLED_HANDLERS)


def test_app_logger_names():
	assert pl.get_app_logger().name == "pysdui.app"
	assert pl.get_app_logger("fetch").name == "pysdui.app.fetch"
	assert pl.get_logger("x.y").name == "x.y"


def test_init_logging_installs_console_handler_on_package_logger():
	pl.init_logging({"log_level": "debug"})

	base = logging.getLogger("pysdui")
	assert base.level == logging.DEBUG
	assert len(_installed()) == 1
	assert _installed()[0] in base.handlers
	assert _installed()[0] not in logging.getLogger().handlers


def test_init_logging_same_config_does_not_stack_handlers():
	pl.init_logging({"log_level": "INFO"})
	first = _installed()

	pl.init_logging({"log_level": "INFO"})

	assert _installed() == first


def test_init_logging_reconfigures_on_change():
	pl.init_logging({"log_level": "INFO"})
	pl.init_logging({"log_level": "WARNING"})

	assert len(_installed()) == 1
	assert logging.getLogger("pysdui").level == logging.WARNING


def test_init_logging_file_handler(tmp_path):
	log_file = tmp_path / "logs" / "pysdui.log"

	pl.init_logging({"logging.console": False, "logging.file": str(log_file), "logging.file_mode": "w"})
	pl.get_app_logger("test").info("hello file")
	for h in _installed():
		h.flush()

	assert len(_installed()) == 1
	assert "hello file" in log_file.read_text(encoding="utf-8")


def test_noisy_libraries_capped_by_default():
	pl.init_logging(None)

	assert logging.getLogger("httpx").level == logging.WARNING
	assert logging.getLogger("PIL").level == logging.WARNING


@pytest.mark.parametrize(
	"value, expected",
	[
		("debug", logging.DEBUG),
		(" Warning ", logging.WARNING),
		("10", 10),
		(logging.ERROR, logging.ERROR),
		("nonsense", logging.INFO),
		(None, logging.INFO),
	],
)
def test_coerce_level(value, expected):
	assert pl._coerce_level(value) == expected


def test_coerce_file_mode():
	assert pl._coerce_file_mode("W") == "w"
	assert pl._coerce_file_mode("x") == "a"
	assert pl._coerce_file_mode(None) == "a"
