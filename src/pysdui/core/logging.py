# ---------------------------------------------------------------------------
# File: logging.py
# ---------------------------------------------------------------------------
# Description:
#	Core logging helpers for pysdui (stdlib logging).
#
# Notes:
#	- Uses Python stdlib logging only.
#	- Safe to call before the Tk window exists.
#	- Idempotent initialization (won't duplicate handlers).
#	- Chatty third-party loggers (httpx, httpcore, PIL) are capped at WARNING
#	  unless "logging.quiet_libraries" is False; image loads would otherwise
#	  log one INFO line per request.
#
#	Supported cfg keys (first match wins):
#	- Level:
#		"logging.level", "log_level"	(default: "INFO")
#	- Console handler:
#		"logging.console", "log_console" (default: True)
#	- File handler:
#		"logging.file", "log_file"	(default: None)
#	- File mode:
#		"logging.file_mode", "log_file_mode" (default: "a")
#	- Format:
#		"logging.format", "log_format" (default: standard format)
#	- Date format:
#		"logging.datefmt", "log_datefmt" (default: "%Y-%m-%d %H:%M:%S")
#	- Library noise:
#		"logging.quiet_libraries" (default: True)
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/05/2026	Paul G. LeDuc				Initial coding / release
# 10/09/2026	Paul G. LeDuc				Quiet httpx/PIL loggers by default
# ---------------------------------------------------------------------------

from __future__ import annotations

from typing import Any
import logging
import os


_BASE_LOGGER = "pysdui"
_NOISY_LIBRARIES: tuple[str, ...] = ("httpx", "httpcore", "PIL")
_DEFAULT_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


# ---------------------------------------------------------------------------
# Module-scoped state (idempotent init)
# ---------------------------------------------------------------------------

_INITIALIZED: bool = False
_CONFIG_SIGNATURE: tuple[Any, ...] | None = None
_INSTALLED_HANDLERS: list[logging.Handler] = []


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def get_logger(name: str) -> logging.Logger:
	return logging.getLogger(name)


def get_app_logger(component: str | None = None) -> logging.Logger:
	"""
	Return an application-scoped logger.

	Examples:
		get_app_logger()           -> pysdui.app
		get_app_logger("fetch")    -> pysdui.app.fetch
		get_app_logger("images")   -> pysdui.app.images
	"""
	base = f"{_BASE_LOGGER}.app"
	if component:
		return logging.getLogger(f"{base}.{component}")
	return logging.getLogger(base)


def init_logging(cfg: Any | None = None) -> None:
	"""
	Initialize stdlib logging for pysdui.

	Reconfiguration only happens when the effective configuration changes,
	so repeated calls (App re-creation, tests) don't stack handlers.

	Args:
		cfg:
			Anything with cfg.get(key, default) (AppConfig, dict) or None.
	"""
	global _INITIALIZED, _CONFIG_SIGNATURE

	level = _coerce_level(_first(cfg, ("logging.level", "log_level"), "INFO"))
	console_enabled = bool(_first(cfg, ("logging.console", "log_console"), True))
	log_file = _first(cfg, ("logging.file", "log_file"), None)
	file_mode = _coerce_file_mode(_first(cfg, ("logging.file_mode", "log_file_mode"), "a"))
	fmt = str(_first(cfg, ("logging.format", "log_format"), _DEFAULT_FORMAT))
	datefmt = str(_first(cfg, ("logging.datefmt", "log_datefmt"), "%Y-%m-%d %H:%M:%S"))
	quiet = bool(_first(cfg, ("logging.quiet_libraries",), True))

	signature: tuple[Any, ...] = (
		level,
		console_enabled,
		str(log_file) if log_file else None,
		file_mode,
		fmt,
		datefmt,
		quiet,
	)

	if _INITIALIZED and _CONFIG_SIGNATURE == signature:
		return

	_install_handlers(
		level=level,
		console_enabled=console_enabled,
		log_file=str(log_file) if log_file else None,
		file_mode=file_mode,
		formatter=logging.Formatter(fmt=fmt, datefmt=datefmt),
	)

	for name in _NOISY_LIBRARIES:
		logging.getLogger(name).setLevel(logging.WARNING if quiet else logging.NOTSET)

	_INITIALIZED = True
	_CONFIG_SIGNATURE = signature


# ---------------------------------------------------------------------------
# Internals
# ---------------------------------------------------------------------------

def _first(cfg: Any | None, keys: tuple[str, ...], default: Any) -> Any:
	"""
	Return the first non-None value among keys, else default.
	"""
	if cfg is None:
		return default

	getter = getattr(cfg, "get", None)
	if not callable(getter):
		return default

	for key in keys:
		value = getter(key, None)
		if value is not None:
			return value
	return default


def _coerce_level(level: Any) -> int:
	if isinstance(level, int):
		return level

	if isinstance(level, str):
		val = level.strip().upper()
		if val.isdigit():
			return int(val)
		found = logging.getLevelName(val)
		if isinstance(found, int):
			return found

	return logging.INFO


def _coerce_file_mode(mode: Any) -> str:
	# Only "a" or "w"; anything else appends.
	if isinstance(mode, str) and mode.strip().lower() in ("a", "w"):
		return mode.strip().lower()
	return "a"


def _install_handlers(
	*,
	level: int,
	console_enabled: bool,
	log_file: str | None,
	file_mode: str,
	formatter: logging.Formatter,
) -> None:
	"""
	Attach handlers to the "pysdui" logger (not root), replacing any we
	installed earlier. Host applications keep their own root config.
	"""
	base = logging.getLogger(_BASE_LOGGER)
	base.setLevel(level)

	for h in _INSTALLED_HANDLERS:
		base.removeHandler(h)
		h.close()
	_INSTALLED_HANDLERS.clear()

	if console_enabled:
		ch = logging.StreamHandler()
		ch.setLevel(level)
		ch.setFormatter(formatter)
		base.addHandler(ch)
		_INSTALLED_HANDLERS.append(ch)

	if log_file:
		parent = os.path.dirname(os.path.abspath(log_file))
		if parent:
			os.makedirs(parent, exist_ok=True)
		fh = logging.FileHandler(log_file, mode=file_mode, encoding="utf-8")
		fh.setLevel(level)
		fh.setFormatter(formatter)
		base.addHandler(fh)
		_INSTALLED_HANDLERS.append(fh)


# ---------------------------------------------------------------------------
# Test helper
# ---------------------------------------------------------------------------

def _reset_logging_for_tests() -> None:
	"""
	Remove installed handlers and reset init state (unit tests only).
	"""
	global _INITIALIZED, _CONFIG_SIGNATURE
	base = logging.getLogger(_BASE_LOGGER)
	for h in _INSTALLED_HANDLERS:
		base.removeHandler(h)
		h.close()
	_INSTALLED_HANDLERS.clear()
	_INITIALIZED = False
	_CONFIG_SIGNATURE = None
