# ---------------------------------------------------------------------------
# File: conftest.py
# ---------------------------------------------------------------------------
# Description:
#	Shared pytest fixtures for pysdui tests.
#
# Notes:
#	- tk_root skips the test when no display is available (CI).
#	- Telemetry is reset to disabled around every test.
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/13/2026	Paul G. LeDuc				Initial fixtures
# ---------------------------------------------------------------------------

from __future__ import annotations

import tkinter as tk

import pytest

from pysdui.core import telemetry as telemetry_mod


@pytest.fixture(autouse=True)
def _reset_telemetry():
	telemetry_mod._telemetry = None
	yield
	telemetry_mod._telemetry = None


@pytest.fixture
def display_available() -> None:
	try:
		probe = tk.Tk()
	except tk.TclError as ex:
		pytest.skip(f"No display available: {ex}")
	probe.destroy()


@pytest.fixture
def tk_root(display_available):
	root = tk.Tk()
	root.withdraw()
	try:
		from pysdui.ui.theme import apply_theme

		apply_theme(root)
		yield root
	finally:
		root.destroy()
