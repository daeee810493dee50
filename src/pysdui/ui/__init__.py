# ---------------------------------------------------------------------------
# File: ui/__init__.py
# ---------------------------------------------------------------------------
# Description:
#   Public UI package surface for pysdui.
#
# Notes:
#   - Uses lazy exports to avoid importing Tk/Pillow until needed (PEP 562).
#   - Do NOT import from pysdui.ui inside ui modules; import specific modules instead.
# ---------------------------------------------------------------------------

from __future__ import annotations

from typing import TYPE_CHECKING, Any

__all__ = [
	"Component",
	"ServerDrivenScreen",
	"build_view",
	"apply_theme",

	# Views
	"CardView",
	"StatView",
	"ActionView",
	"UnknownView",
	"CarouselView",
	"HScrollView",
]

# Map public name -> (module, attribute)
_EXPORTS: dict[str, tuple[str, str]] = {
	"Component": ("pysdui.ui.component", "Component"),
	"ServerDrivenScreen": ("pysdui.ui.screen", "ServerDrivenScreen"),
	"build_view": ("pysdui.ui.views", "build_view"),
	"apply_theme": ("pysdui.ui.theme", "apply_theme"),

	"CardView": ("pysdui.ui.views", "CardView"),
	"StatView": ("pysdui.ui.views", "StatView"),
	"ActionView": ("pysdui.ui.views", "ActionView"),
	"UnknownView": ("pysdui.ui.views", "UnknownView"),
	"CarouselView": ("pysdui.ui.views", "CarouselView"),
	"HScrollView": ("pysdui.ui.views", "HScrollView"),
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
	from pysdui.ui.component import Component
	from pysdui.ui.screen import ServerDrivenScreen
	from pysdui.ui.theme import apply_theme
	from pysdui.ui.views import (
		ActionView,
		CardView,
		CarouselView,
		HScrollView,
		StatView,
		UnknownView,
		build_view,
	)
