# ---------------------------------------------------------------------------
# File: config.py
# ---------------------------------------------------------------------------
# Description:
#	AppConfig: light key/value wrapper for pysdui options.
#
# Notes:
#	Known keys (all optional):
#		endpoint			URL of the components payload
#		timeout				HTTP timeout in seconds (payload + images)
#		image_workers		Thread pool size for image retrieval
#		poll_ms				How often the Tk loop drains image completions
#		theme				ttkthemes theme name
#		scrollable			Vertical scrolling for the main window
#		log_level, logging.*		See core/logging.py
#		telemetry_enabled, telemetry_sink	See core/telemetry.py
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/06/2026	Paul G. LeDuc				Split out of app.py
# 10/08/2026	Paul G. LeDuc				Add defaults + from_env
# ---------------------------------------------------------------------------

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping
import os


DEFAULT_ENDPOINT = "https://oooop.free.beeceptor.com/components"

DEFAULTS: dict[str, Any] = {
	"endpoint": DEFAULT_ENDPOINT,
	"timeout": 10.0,
	"image_workers": 4,
	"poll_ms": 50,
	"theme": "equilux",
	"scrollable": True,
}

# Environment variable -> (config key, converter)
_ENV_KEYS: dict[str, tuple[str, Any]] = {
	"PYSDUI_ENDPOINT": ("endpoint", str),
	"PYSDUI_TIMEOUT": ("timeout", float),
	"PYSDUI_IMAGE_WORKERS": ("image_workers", int),
	"PYSDUI_THEME": ("theme", str),
	"PYSDUI_LOG_LEVEL": ("log_level", str),
}


@dataclass(frozen=True, slots=True)
class AppConfig:
	"""
	Read-only options with built-in defaults.

	get(key) checks explicit options first, then DEFAULTS, then the
	caller's default.
	"""
	options: dict[str, Any] | None = None

	def get(self, key: str, default: Any = None) -> Any:
		if self.options is not None and key in self.options:
			return self.options[key]
		return DEFAULTS.get(key, default)

	def merged(self, **overrides: Any) -> "AppConfig":
		opts = dict(self.options or {})
		opts.update(overrides)
		return AppConfig(opts)

	@classmethod
	def from_env(
		cls,
		environ: Mapping[str, str] | None = None,
		base: dict[str, Any] | None = None,
	) -> "AppConfig":
		"""
		Build a config from PYSDUI_* environment variables on top of base.

		Values that fail conversion are ignored.
		"""
		env = os.environ if environ is None else environ
		opts = dict(base or {})

		for var, (key, conv) in _ENV_KEYS.items():
			raw = env.get(var)
			if raw is None or raw.strip() == "":
				continue
			try:
				opts[key] = conv(raw.strip())
			except ValueError:
				continue

		return cls(opts)
