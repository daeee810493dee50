# ---------------------------------------------------------------------------
# File: test_screen.py
# ---------------------------------------------------------------------------
# Description:
#	Tk tests for ServerDrivenScreen.
#
# Notes:
#	- Requires a display; skipped otherwise.
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/15/2026	Paul G. LeDuc				Initial tests
# ---------------------------------------------------------------------------

from __future__ import annotations

from pysdui.model import ComponentDescriptor, ComponentResponse
from pysdui.render.passes import PassTracker
from pysdui.render.renderables import ImageRegion, ImageState
from pysdui.render.tree import TreeRenderer
from pysdui.services.fallback import load_fallback_response
from pysdui.services.images import ImageLoader
from pysdui.ui.screen import ServerDrivenScreen
from pysdui.ui.views import StatView


def _screen(tk_root, **kwargs) -> ServerDrivenScreen:
	screen = ServerDrivenScreen(id="screen", **kwargs)
	screen.mount(tk_root)
	screen.layout()
	return screen


def test_show_response_builds_one_view_per_root(tk_root):
	screen = _screen(tk_root, renderer=TreeRenderer())

	rendered = screen.show_response(load_fallback_response())

	assert len(rendered) == 5
	assert [v.id for v in screen.components] == ["1", "2", "3", "4", "5"]
	assert screen.current.is_fallback is True
	assert screen.current_pass.version == 1


def test_show_response_replaces_previous_views(tk_root):
	screen = _screen(tk_root, renderer=TreeRenderer())
	screen.show_response(load_fallback_response())
	old_roots = [v.root for v in screen.components]

	stat = ComponentDescriptor(id="s", type="galaxyStats", properties={"statName": "Moons", "value": "95"})
	screen.show_response(ComponentResponse(components=(stat,)))

	assert len(screen.components) == 1
	assert isinstance(screen.components[0], StatView)
	assert screen.current_pass.version == 2
	for widget in old_roots:
		assert widget.winfo_exists() == 0


def test_images_from_previous_pass_are_not_applied(tk_root):
	tracker = PassTracker()
	loader = ImageLoader(lambda url: "img", is_current=tracker.is_current)
	screen = _screen(tk_root, renderer=TreeRenderer(images=loader), tracker=tracker, loader=loader)
	card = ComponentDescriptor(id="c", type="planetCard", properties={"imageUrl": "https://x/a.png"})

	try:
		first = screen.show_response(ComponentResponse(components=(card,)))
		loader.wait(timeout=5)
		screen.show_response(ComponentResponse(components=()))

		assert screen.drain_images() == 0
		region: ImageRegion = first[0].image
		assert region.state is ImageState.LOADING
	finally:
		screen.destroy()
		loader.shutdown()


def test_drain_without_loader_is_zero(tk_root):
	screen = _screen(tk_root)

	assert screen.drain_images() == 0
