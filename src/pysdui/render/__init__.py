# ---------------------------------------------------------------------------
# File: render/__init__.py
# ---------------------------------------------------------------------------
# Description:
#   Public surface of the component-tree interpreter.
#
# Notes:
#   - Uses lazy exports (PEP 562) so importing pysdui.render stays cheap
#     and render modules can import each other directly.
#   - Do NOT import from pysdui.render inside render modules; import
#     specific modules instead.
# ---------------------------------------------------------------------------

from __future__ import annotations

from typing import TYPE_CHECKING, Any

__all__ = [
	# Orchestration
	"TreeRenderer",
	"RendererRegistry",
	"RenderStrategy",
	"RenderContext",
	"default_registry",
	"build_default_registry",

	# Passes + actions
	"RenderPass",
	"PassTracker",
	"ActionSink",
	"LogActionSink",
	"MemoryActionSink",

	# Output
	"Renderable",
	"CardRenderable",
	"StatRenderable",
	"ActionRenderable",
	"CarouselRenderable",
	"HScrollRenderable",
	"UnknownRenderable",
	"ImageRegion",
	"ImageState",
	"walk",
]

# Map public name -> (module, attribute)
_EXPORTS: dict[str, tuple[str, str]] = {
	"TreeRenderer": ("pysdui.render.tree", "TreeRenderer"),
	"RendererRegistry": ("pysdui.render.registry", "RendererRegistry"),
	"RenderStrategy": ("pysdui.render.registry", "RenderStrategy"),
	"RenderContext": ("pysdui.render.context", "RenderContext"),
	"default_registry": ("pysdui.render.strategies", "default_registry"),
	"build_default_registry": ("pysdui.render.strategies", "build_default_registry"),

	"RenderPass": ("pysdui.render.passes", "RenderPass"),
	"PassTracker": ("pysdui.render.passes", "PassTracker"),
	"ActionSink": ("pysdui.render.actions", "ActionSink"),
	"LogActionSink": ("pysdui.render.actions", "LogActionSink"),
	"MemoryActionSink": ("pysdui.render.actions", "MemoryActionSink"),

	"Renderable": ("pysdui.render.renderables", "Renderable"),
	"CardRenderable": ("pysdui.render.renderables", "CardRenderable"),
	"StatRenderable": ("pysdui.render.renderables", "StatRenderable"),
	"ActionRenderable": ("pysdui.render.renderables", "ActionRenderable"),
	"CarouselRenderable": ("pysdui.render.renderables", "CarouselRenderable"),
	"HScrollRenderable": ("pysdui.render.renderables", "HScrollRenderable"),
	"UnknownRenderable": ("pysdui.render.renderables", "UnknownRenderable"),
	"ImageRegion": ("pysdui.render.renderables", "ImageRegion"),
	"ImageState": ("pysdui.render.renderables", "ImageState"),
	"walk": ("pysdui.render.renderables", "walk"),
}

def __getattr__(name: str) -> Any:
	try:
		mod_name, attr_name = _EXPORTS[name]
	except KeyError as ex:
		raise AttributeError(f"module {__name__!r} has no attribute {name!r}") from ex

	import importlib
	mod = importlib.import_module(mod_name)
	return getattr(mod, attr_name)

def __dir__() -> list[str]:
	return sorted(set(list(globals().keys()) + list(__all__)))

if TYPE_CHECKING:
	from pysdui.render.actions import ActionSink, LogActionSink, MemoryActionSink
	from pysdui.render.context import RenderContext
	from pysdui.render.passes import PassTracker, RenderPass
	from pysdui.render.registry import RendererRegistry, RenderStrategy
	from pysdui.render.renderables import (
		ActionRenderable,
		CardRenderable,
		CarouselRenderable,
		HScrollRenderable,
		ImageRegion,
		ImageState,
		Renderable,
		StatRenderable,
		UnknownRenderable,
		walk,
	)
	from pysdui.render.strategies import build_default_registry, default_registry
	from pysdui.render.tree import TreeRenderer
