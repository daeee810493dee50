# ---------------------------------------------------------------------------
# File: errors.py
# ---------------------------------------------------------------------------
# Description:
#	Exception types for pysdui collaborators.
#
# Notes:
#	- The interpreter (pysdui.render) never raises these for bad data;
#	  unknown types and missing properties degrade structurally.
#	- FetchError subclasses are raised by transport/decode and recovered
#	  by ComponentFetcher.fetch() with the embedded fallback payload.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/06/2026	Paul G. LeDuc				Initial coding / release
# ---------------------------------------------------------------------------

from __future__ import annotations


class PysduiError(Exception):
	"""
	Base class for pysdui errors.
	"""


class FetchError(PysduiError):
	"""
	Retrieving a component payload failed.
	"""


class TransportError(FetchError):
	"""
	Network unreachable, timeout, or non-success HTTP status.
	"""

	def __init__(self, message: str, *, status_code: int | None = None) -> None:
		super().__init__(message)
		self.status_code = status_code


class DecodeError(FetchError):
	"""
	Payload is not valid JSON or does not match the component schema.
	"""


class RegistryError(PysduiError, ValueError):
	"""
	Invalid renderer registration (empty or duplicate type tag).
	"""
