# ---------------------------------------------------------------------------
# File: test_config.py
# ---------------------------------------------------------------------------
# Description:
#	Unit tests for AppConfig.
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/05/2026	Paul G. LeDuc				Initial tests
# ---------------------------------------------------------------------------

from __future__ import annotations

from pysdui.core.config import DEFAULT_ENDPOINT, AppConfig


def test_defaults_apply_without_options():
	cfg = AppConfig()

	assert cfg.get("endpoint") == DEFAULT_ENDPOINT
	assert cfg.get("timeout") == 10.0
	assert cfg.get("theme") == "equilux"
	assert cfg.get("missing", "fallback") == "fallback"


def test_options_override_defaults():
	cfg = AppConfig({"timeout": 1.5})

	assert cfg.get("timeout") == 1.5
	assert cfg.get("image_workers") == 4


def test_merged_returns_new_config():
	base = AppConfig({"theme": "arc"})

	merged = base.merged(timeout=3.0)

	assert merged.get("theme") == "arc"
	assert merged.get("timeout") == 3.0
	assert base.get("timeout") == 10.0


def test_from_env_reads_known_variables():
	cfg = AppConfig.from_env(
		{
			"PYSDUI_ENDPOINT": " https://sdui.test/c ",
			"PYSDUI_TIMEOUT": "2.5",
			"PYSDUI_IMAGE_WORKERS": "8",
			"PYSDUI_LOG_LEVEL": "DEBUG",
			"UNRELATED": "x",
		}
	)

	assert cfg.get("endpoint") == "https://sdui.test/c"
	assert cfg.get("timeout") == 2.5
	assert cfg.get("image_workers") == 8
	assert cfg.get("log_level") == "DEBUG"
	assert cfg.get("UNRELATED") is None


def test_from_env_ignores_bad_and_empty_values():
	cfg = AppConfig.from_env(
		{"PYSDUI_TIMEOUT": "soon", "PYSDUI_THEME": "  "},
		base={"theme": "arc"},
	)

	assert cfg.get("timeout") == 10.0
	assert cfg.get("theme") == "arc"
