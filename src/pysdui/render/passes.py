# ---------------------------------------------------------------------------
# File: passes.py
# ---------------------------------------------------------------------------
# Description:
#	Render pass tokens ("which tree is current?").
#
# Notes:
#	- Every response shown on screen gets a new RenderPass.
#	- Async work (image retrieval) carries the pass that started it and is
#	  only applied while that pass is still current.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/08/2026	Paul G. LeDuc				Initial coding / release
# ---------------------------------------------------------------------------

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True, slots=True)
class RenderPass:
	version: int


class PassTracker:
	"""
	Issues increasing RenderPass tokens and remembers the latest one.
	"""

	def __init__(self) -> None:
		self._version = 0
		self._current: Optional[RenderPass] = None

	@property
	def current(self) -> Optional[RenderPass]:
		return self._current

	def begin(self) -> RenderPass:
		self._version += 1
		self._current = RenderPass(self._version)
		return self._current

	def is_current(self, render_pass: Optional[RenderPass]) -> bool:
		# Work not tied to a pass is never stale.
		if render_pass is None:
			return True
		return render_pass == self._current
