# ---------------------------------------------------------------------------
# File: context.py
# ---------------------------------------------------------------------------
# Description:
#	RenderContext: what a strategy can see besides its own descriptor.
#
# Notes:
#	- Immutable; composites derive a child context with within().
#	- allowed_types=None means "any registered type"; composites narrow it
#	  so unsupported children fall back with a container-specific message.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/08/2026	Paul G. LeDuc				Initial coding / release
# ---------------------------------------------------------------------------

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import TYPE_CHECKING, Optional, Protocol

from pysdui.render.actions import ActionSink, LogActionSink
from pysdui.render.passes import RenderPass
from pysdui.render.renderables import UNKNOWN_COMPONENT, ImageRegion

if TYPE_CHECKING:
	from pysdui.render.registry import RendererRegistry


class ImageRequester(Protocol):
	"""
	Starts a non-blocking retrieval that later resolves or fails region.
	"""

	def request(self, region: ImageRegion, render_pass: Optional[RenderPass] = None) -> None: ...


@dataclass(frozen=True, slots=True)
class RenderContext:
	registry: "RendererRegistry"
	actions: ActionSink = field(default_factory=LogActionSink)
	images: Optional[ImageRequester] = None
	render_pass: Optional[RenderPass] = None

	allowed_types: Optional[frozenset[str]] = None
	unknown_message: str = UNKNOWN_COMPONENT
	depth: int = 0

	def accepts(self, type_tag: str) -> bool:
		if not self.registry.has(type_tag):
			return False
		return self.allowed_types is None or type_tag in self.allowed_types

	def within(self, allowed_types: frozenset[str], unknown_message: str) -> "RenderContext":
		return replace(
			self,
			allowed_types=allowed_types,
			unknown_message=unknown_message,
			depth=self.depth + 1,
		)
