# ---------------------------------------------------------------------------
# File: test_views.py
# ---------------------------------------------------------------------------
# Description:
#	Tk tests for the renderable views.
#
# Notes:
#	- Requires a display; skipped otherwise (see conftest.tk_root).
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/14/2026	Paul G. LeDuc				Initial tests
# ---------------------------------------------------------------------------

from __future__ import annotations

from PIL import Image

from pysdui.model import ComponentDescriptor
from pysdui.render.actions import MemoryActionSink
from pysdui.render.renderables import CardRenderable, ImageRegion, ImageState, Renderable
from pysdui.render.tree import TreeRenderer
from pysdui.ui import theme
from pysdui.ui.views import (
	ActionView,
	CardView,
	CarouselView,
	HScrollView,
	StatView,
	UnknownView,
	build_view,
)


def _render_one(descriptor: ComponentDescriptor, **kwargs) -> Renderable:
	return TreeRenderer(**kwargs).render([descriptor])[0]


def _mount(view, root):
	view.mount(root)
	view.layout()
	root.update_idletasks()
	return view


def _d(id: str, type: str, children=None, **props) -> ComponentDescriptor:
	return ComponentDescriptor(id=id, type=type, properties=props, children=children)


def test_build_view_maps_renderable_kinds():
	expected = {
		"planetCard": CardView,
		"galaxyStats": StatView,
		"exploreButton": ActionView,
		"mystery": UnknownView,
		"carousel": CarouselView,
		"hscroll": HScrollView,
	}

	for tag, view_cls in expected.items():
		view = build_view(_render_one(_d("x", tag)))
		assert type(view) is view_cls
		assert view.id == "x"


def test_stat_view_shows_label_and_value(tk_root):
	view = _mount(build_view(_render_one(_d("2", "galaxyStats", statName="Known Exoplanets", value="4,395"))), tk_root)

	assert str(view.value_label.cget("text")) == "4,395"


def test_card_view_follows_image_region(tk_root):
	region = ImageRegion(url="https://x/mars.png")
	view = CardView(id="4", renderable=CardRenderable(id="4", title="Mars", image=region))
	_mount(view, tk_root)

	assert str(view.image_label.cget("text")) == theme.LOADING_TEXT

	region.resolve(Image.new("RGBA", (10, 10)))

	assert region.state is ImageState.LOADED
	assert str(view.image_label.cget("image")) != ""

	view.destroy()
	assert region._listeners == []


def test_card_view_failed_image_shows_placeholder(tk_root):
	view = _mount(build_view(_render_one(_d("4", "planetCard", name="Nowhere"))), tk_root)

	assert str(view.image_label.cget("text")) == theme.PLACEHOLDER_GLYPH


def test_action_view_invokes_sink(tk_root):
	sink = MemoryActionSink()
	view = _mount(build_view(_render_one(_d("5", "exploreButton"), actions=sink)), tk_root)

	assert str(view.root.cget("text")) == "Explore"
	view.root.invoke()

	assert sink.activations == ["5"]


def test_unknown_view_shows_message(tk_root):
	view = _mount(build_view(_render_one(_d("9", "mystery"))), tk_root)

	assert str(view.root.cget("text")) == "Unknown component"


def test_carousel_view_pages(tk_root):
	carousel = _render_one(
		_d(
			"1",
			"carousel",
			children=(
				_d("1a", "planetCard", name="Mars"),
				_d("1b", "planetCard", name="Jupiter"),
				_d("1c", "mystery"),
			),
		)
	)
	view = _mount(build_view(carousel), tk_root)

	assert str(view.position_label.cget("text")) == "1 / 3"
	assert [c.id for c in view.components] == ["1a"]

	view.next()
	assert view.index == 1
	assert str(view.position_label.cget("text")) == "2 / 3"
	assert [c.id for c in view.components] == ["1b"]

	view.next()
	view.next()
	assert view.index == 2
	assert isinstance(view.components[0], UnknownView)

	view.previous()
	assert str(view.position_label.cget("text")) == "2 / 3"


def test_empty_carousel_view(tk_root):
	view = _mount(build_view(_render_one(_d("1", "carousel"))), tk_root)

	assert view.components == []
	assert str(view.position_label.cget("text")) == "0 / 0"
	view.next()
	assert view.index == 0


def test_hscroll_view_slot_windows(tk_root):
	hscroll = _render_one(
		_d(
			"3",
			"hscroll",
			children=(
				_d("3a", "galaxyStats", statName="Age"),
				_d("3b", "planetCard", name="Venus"),
				_d("3c", "mystery"),
			),
		)
	)
	view = _mount(build_view(hscroll), tk_root)

	assert len(view.slot_windows) == 3
	widths = [int(float(view.canvas.itemcget(w, "width"))) for w in view.slot_windows]
	assert widths == [200, 250, 200]
	assert [c.id for c in view.components] == ["3a", "3b", "3c"]
