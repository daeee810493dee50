# ---------------------------------------------------------------------------
# File: strategies.py
# ---------------------------------------------------------------------------
# Description:
#	Built-in render strategies + the default registry.
#
# Notes:
#	Leaf strategies (never read children):
#		planetCard		name, description, imageUrl
#		galaxyStats		statName, value
#		exploreButton	title (default "Explore")
#	Composite strategies (children go back through registry.dispatch):
#		carousel		paged, one child per page
#		hscroll			horizontal row of fixed-width slots
#	Missing properties render as "" (or the named default). Unknown
#	property keys are ignored.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/07/2026	Paul G. LeDuc				Initial coding / release
# 10/08/2026	Paul G. LeDuc				Composites narrow allowed child types
# 10/10/2026	Paul G. LeDuc				Per-type hscroll slot widths
# ---------------------------------------------------------------------------

from __future__ import annotations

from typing import Optional

from pysdui.model import ComponentDescriptor
from pysdui.render.context import RenderContext
from pysdui.render.registry import RendererRegistry
from pysdui.render.renderables import (
	ActionRenderable,
	CardRenderable,
	CarouselRenderable,
	HScrollRenderable,
	ImageRegion,
	Renderable,
	Slot,
	StatRenderable,
	UnknownRenderable,
)


# ---------------------------------------------------------------------------
# Type tags
# ---------------------------------------------------------------------------

CARD = "planetCard"
STAT = "galaxyStats"
ACTION = "exploreButton"
CAROUSEL = "carousel"
HSCROLL = "hscroll"

BUILTIN_TAGS: tuple[str, ...] = (CARD, STAT, ACTION, CAROUSEL, HSCROLL)

DEFAULT_ACTION_TITLE = "Explore"

# What containers may hold. Buttons and unknown tags fall back inline.
CONTAINER_CHILD_TYPES: frozenset[str] = frozenset({CARD, STAT, CAROUSEL, HSCROLL})


def clip_line(text: str) -> str:
	"""
	Keep only the first display line of text.
	"""
	if not text:
		return ""
	return text.splitlines()[0]


# ---------------------------------------------------------------------------
# Fallback
# ---------------------------------------------------------------------------

class FallbackStrategy:
	"""
	Renders any node nobody else can: always succeeds, always visible.
	"""

	def render(self, descriptor: ComponentDescriptor, ctx: RenderContext) -> Renderable:
		return UnknownRenderable(
			id=descriptor.id,
			type_tag=descriptor.type,
			message=ctx.unknown_message,
		)


# ---------------------------------------------------------------------------
# Leaf strategies
# ---------------------------------------------------------------------------

class CardStrategy:
	def render(self, descriptor: ComponentDescriptor, ctx: RenderContext) -> Renderable:
		url = descriptor.prop("imageUrl").strip()
		region = ImageRegion(url=url)

		if not url:
			region.fail()
		elif ctx.images is not None:
			ctx.images.request(region, ctx.render_pass)

		return CardRenderable(
			id=descriptor.id,
			title=descriptor.prop("name"),
			body=descriptor.prop("description"),
			image=region,
		)


class StatStrategy:
	def render(self, descriptor: ComponentDescriptor, ctx: RenderContext) -> Renderable:
		return StatRenderable(
			id=descriptor.id,
			label=descriptor.prop("statName"),
			value=clip_line(descriptor.prop("value")),
		)


class ActionStrategy:
	def __init__(self, default_title: str = DEFAULT_ACTION_TITLE) -> None:
		self.default_title = default_title

	def render(self, descriptor: ComponentDescriptor, ctx: RenderContext) -> Renderable:
		return ActionRenderable(
			id=descriptor.id,
			title=descriptor.prop("title", self.default_title),
			sink=ctx.actions,
		)


# ---------------------------------------------------------------------------
# Composite strategies
# ---------------------------------------------------------------------------

class CompositeStrategy:
	"""
	Shared child iteration for containers.

	Children render through ctx.registry.dispatch() in a narrowed context,
	so nesting depth is bounded only by the data.
	"""
	unknown_message: str = "Unknown item"

	def __init__(self, child_types: frozenset[str] = CONTAINER_CHILD_TYPES) -> None:
		self.child_types = child_types

	def render_children(
		self,
		descriptor: ComponentDescriptor,
		ctx: RenderContext,
	) -> list[tuple[ComponentDescriptor, Renderable]]:
		child_ctx = ctx.within(self.child_types, self.unknown_message)
		return [
			(child, ctx.registry.dispatch(child, child_ctx))
			for child in descriptor.child_list()
		]


class CarouselStrategy(CompositeStrategy):
	unknown_message = "Unknown carousel item"

	def __init__(
		self,
		child_types: frozenset[str] = CONTAINER_CHILD_TYPES,
		height: int = 300,
	) -> None:
		super().__init__(child_types)
		self.height = height

	def render(self, descriptor: ComponentDescriptor, ctx: RenderContext) -> Renderable:
		pages = tuple(r for _, r in self.render_children(descriptor, ctx))
		return CarouselRenderable(
			id=descriptor.id,
			title=descriptor.prop("title"),
			pages=pages,
			height=self.height,
		)


class HScrollStrategy(CompositeStrategy):
	unknown_message = "Unknown hscroll item"

	def __init__(
		self,
		child_types: frozenset[str] = CONTAINER_CHILD_TYPES,
		widths: Optional[dict[str, int]] = None,
		default_width: int = 250,
		unknown_width: int = 200,
	) -> None:
		super().__init__(child_types)
		self.widths = dict(widths) if widths is not None else {CARD: 250, STAT: 200}
		self.default_width = default_width
		self.unknown_width = unknown_width

	def slot_width(self, child: ComponentDescriptor, rendered: Renderable) -> int:
		if isinstance(rendered, UnknownRenderable):
			return self.unknown_width
		return self.widths.get(child.type, self.default_width)

	def render(self, descriptor: ComponentDescriptor, ctx: RenderContext) -> Renderable:
		slots = tuple(
			Slot(width=self.slot_width(child, rendered), content=rendered)
			for child, rendered in self.render_children(descriptor, ctx)
		)
		return HScrollRenderable(
			id=descriptor.id,
			title=descriptor.prop("title"),
			slots=slots,
		)


# ---------------------------------------------------------------------------
# Default registry
# ---------------------------------------------------------------------------

def build_default_registry() -> RendererRegistry:
	registry = RendererRegistry(fallback=FallbackStrategy())
	registry.register(CARD, CardStrategy())
	registry.register(STAT, StatStrategy())
	registry.register(ACTION, ActionStrategy())
	registry.register(CAROUSEL, CarouselStrategy())
	registry.register(HSCROLL, HScrollStrategy())
	return registry


_default_registry: Optional[RendererRegistry] = None


def default_registry() -> RendererRegistry:
	"""
	Process-wide registry with the built-in tags (created on first use).
	"""
	global _default_registry

	if _default_registry is None:
		_default_registry = build_default_registry()

	return _default_registry
