# ---------------------------------------------------------------------------
# File: tree.py
# ---------------------------------------------------------------------------
# Description:
#	TreeRenderer: one render pass over a sequence of root descriptors.
#
# Notes:
#	- Exactly one renderable per root descriptor, in input order.
#	- No state survives between passes; output depends only on input
#	  (plus the collaborators handed to the constructor).
#	- Reports render.pass_ms and render.unknown_components telemetry.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/08/2026	Paul G. LeDuc				Initial coding / release
# 10/11/2026	Paul G. LeDuc				Add telemetry
# ---------------------------------------------------------------------------

from __future__ import annotations

from typing import Iterable, Optional

from pysdui.core.logging import get_app_logger
from pysdui.core.telemetry import Telemetry, get_telemetry
from pysdui.model import ComponentDescriptor, ComponentResponse
from pysdui.render.actions import ActionSink, LogActionSink
from pysdui.render.context import ImageRequester, RenderContext
from pysdui.render.passes import RenderPass
from pysdui.render.registry import RendererRegistry
from pysdui.render.renderables import Renderable, UnknownRenderable, walk
from pysdui.render.strategies import default_registry


log = get_app_logger("render")


class TreeRenderer:
	"""
	TreeRenderer

	Walks root descriptors, dispatches each through the registry and
	collects the results.
	"""

	def __init__(
		self,
		registry: Optional[RendererRegistry] = None,
		*,
		actions: Optional[ActionSink] = None,
		images: Optional[ImageRequester] = None,
		telemetry: Optional[Telemetry] = None,
	) -> None:
		self.registry = registry or default_registry()
		self.actions = actions or LogActionSink()
		self.images = images
		self._telemetry = telemetry

	def context(self, render_pass: Optional[RenderPass] = None) -> RenderContext:
		return RenderContext(
			registry=self.registry,
			actions=self.actions,
			images=self.images,
			render_pass=render_pass,
		)

	def render(
		self,
		descriptors: Iterable[ComponentDescriptor],
		*,
		render_pass: Optional[RenderPass] = None,
	) -> list[Renderable]:
		telemetry = self._telemetry or get_telemetry()
		ctx = self.context(render_pass)

		with telemetry.timer("render.pass_ms"):
			out = [self.registry.dispatch(d, ctx) for d in descriptors]

		unknown = sum(1 for r in walk(out) if isinstance(r, UnknownRenderable))
		if unknown:
			telemetry.counter("render.unknown_components", unknown)

		log.debug(
			"Render pass=%s roots=%d unknown=%d",
			render_pass.version if render_pass else "-",
			len(out),
			unknown,
		)
		return out

	def render_response(
		self,
		response: ComponentResponse,
		*,
		render_pass: Optional[RenderPass] = None,
	) -> list[Renderable]:
		return self.render(response.components, render_pass=render_pass)
