# ---------------------------------------------------------------------------
# File: registry.py
# ---------------------------------------------------------------------------
# Description:
#	RendererRegistry: type tag -> render strategy.
#
# Notes:
#	- resolve() is total: unregistered tags get the fallback strategy.
#	- dispatch() is the single path used by the tree renderer AND by
#	  composite strategies for their children.
#	- A strategy that raises degrades to one fallback renderable; the
#	  rest of the pass continues.
#	- Registration happens once at startup (default_registry()).
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/07/2026	Paul G. LeDuc				Initial coding / release
# 10/08/2026	Paul G. LeDuc				Route child rendering through dispatch()
# 10/10/2026	Paul G. LeDuc				Degrade on strategy exceptions
# ---------------------------------------------------------------------------

from __future__ import annotations

from typing import TYPE_CHECKING, Optional, Protocol, runtime_checkable

from pysdui.core.errors import RegistryError
from pysdui.core.logging import get_app_logger
from pysdui.model import ComponentDescriptor
from pysdui.render.renderables import Renderable, UnknownRenderable

if TYPE_CHECKING:
	from pysdui.render.context import RenderContext


log = get_app_logger("render")

RENDER_FAILED = "Component failed to render"


@runtime_checkable
class RenderStrategy(Protocol):
	"""
	Turns one descriptor into one renderable.
	"""

	def render(self, descriptor: ComponentDescriptor, ctx: "RenderContext") -> Renderable: ...


class RendererRegistry:
	"""
	RendererRegistry

	Stores strategies by type tag; everything else resolves to fallback.
	"""

	def __init__(self, fallback: RenderStrategy) -> None:
		self._strategies: dict[str, RenderStrategy] = {}
		self._fallback = fallback

	@property
	def fallback(self) -> RenderStrategy:
		return self._fallback

	def register(self, type_tag: str, strategy: RenderStrategy) -> None:
		if not type_tag:
			raise RegistryError("Type tag must be a non-empty string")

		if type_tag in self._strategies:
			raise RegistryError(f"Duplicate renderer for type tag: {type_tag!r}")

		self._strategies[type_tag] = strategy

	def has(self, type_tag: str) -> bool:
		return type_tag in self._strategies

	def get(self, type_tag: str) -> Optional[RenderStrategy]:
		return self._strategies.get(type_tag)

	def tags(self) -> list[str]:
		return list(self._strategies.keys())

	def resolve(self, type_tag: str) -> RenderStrategy:
		strategy = self._strategies.get(type_tag)
		if strategy is None:
			return self._fallback
		return strategy

	def dispatch(self, descriptor: ComponentDescriptor, ctx: "RenderContext") -> Renderable:
		"""
		Render one descriptor in ctx.

		Types the context does not accept (unregistered, or not allowed by
		the enclosing container) render through the fallback strategy.
		"""
		if not ctx.accepts(descriptor.type):
			log.debug(
				"Fallback render id=%s type=%r depth=%d",
				descriptor.id,
				descriptor.type,
				ctx.depth,
			)
			return self._fallback.render(descriptor, ctx)

		strategy = self._strategies[descriptor.type]
		try:
			return strategy.render(descriptor, ctx)
		except Exception:
			log.exception(
				"Renderer for type=%r failed on id=%s; using fallback",
				descriptor.type,
				descriptor.id,
			)
			return UnknownRenderable(id=descriptor.id, type_tag=descriptor.type, message=RENDER_FAILED)
