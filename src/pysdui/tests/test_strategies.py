# ---------------------------------------------------------------------------
# File: test_strategies.py
# ---------------------------------------------------------------------------
# Description:
#	Unit tests for the built-in render strategies.
#
# Notes:
#	- Pure unit tests; no Tkinter dependency.
#	- Images are recorded by a fake requester; nothing hits the network.
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/08/2026	Paul G. LeDuc				Initial tests
# 10/10/2026	Paul G. LeDuc				hscroll slot widths
# ---------------------------------------------------------------------------

from __future__ import annotations

from pysdui.model import ComponentDescriptor
from pysdui.render.actions import MemoryActionSink
from pysdui.render.context import RenderContext
from pysdui.render.passes import RenderPass
from pysdui.render.renderables import (
	ActionRenderable,
	CardRenderable,
	CarouselRenderable,
	HScrollRenderable,
	ImageState,
	StatRenderable,
	UnknownRenderable,
)
from pysdui.render.strategies import build_default_registry, clip_line


class _RecordingImages:
	def __init__(self) -> None:
		self.requests = []

	def request(self, region, render_pass=None) -> None:
		self.requests.append((region, render_pass))


def _ctx(**kwargs) -> RenderContext:
	return RenderContext(registry=build_default_registry(), **kwargs)


def _render(descriptor: ComponentDescriptor, ctx: RenderContext | None = None):
	ctx = ctx or _ctx()
	return ctx.registry.dispatch(descriptor, ctx)


def _d(id: str, type: str, children=None, **props) -> ComponentDescriptor:
	return ComponentDescriptor(id=id, type=type, properties=props, children=children)


# ---------------------------------------------------------------------------
# planetCard
# ---------------------------------------------------------------------------

def test_card_reads_properties_and_requests_image():
	images = _RecordingImages()
	render_pass = RenderPass(3)

	out = _render(
		_d("4", "planetCard", name="Earth", description="Home", imageUrl="https://x/earth.png"),
		_ctx(images=images, render_pass=render_pass),
	)

	assert isinstance(out, CardRenderable)
	assert out.id == "4"
	assert out.title == "Earth"
	assert out.body == "Home"
	assert out.image.url == "https://x/earth.png"
	assert out.image.state is ImageState.LOADING
	assert images.requests == [(out.image, render_pass)]


def test_card_missing_properties_render_empty():
	out = _render(_d("c", "planetCard"))

	assert isinstance(out, CardRenderable)
	assert out.title == ""
	assert out.body == ""


def test_card_empty_image_url_fails_without_request():
	images = _RecordingImages()

	out = _render(_d("c", "planetCard", name="Nowhere", imageUrl="   "), _ctx(images=images))

	assert out.image.state is ImageState.FAILED
	assert images.requests == []


def test_card_ignores_unknown_property_keys():
	out = _render(_d("c", "planetCard", name="Mars", colour="red"))

	assert out == _render(_d("c", "planetCard", name="Mars"))


# ---------------------------------------------------------------------------
# galaxyStats
# ---------------------------------------------------------------------------

def test_stat_keeps_value_verbatim():
	out = _render(_d("2", "galaxyStats", statName="Known Exoplanets", value="4,395"))

	assert isinstance(out, StatRenderable)
	assert out.label == "Known Exoplanets"
	assert out.value == "4,395"
	assert out.max_lines == 1


def test_stat_value_clipped_to_first_line():
	out = _render(_d("2", "galaxyStats", statName="Moons", value="95\nand counting"))

	assert out.value == "95"


def test_clip_line_edge_cases():
	assert clip_line("") == ""
	assert clip_line("one") == "one"
	assert clip_line("a\r\nb") == "a"


# ---------------------------------------------------------------------------
# exploreButton
# ---------------------------------------------------------------------------

def test_action_default_title_and_activation_signal():
	sink = MemoryActionSink()

	out = _render(_d("5", "exploreButton"), _ctx(actions=sink))

	assert isinstance(out, ActionRenderable)
	assert out.title == "Explore"

	out.activate()
	out.activate()

	assert sink.activations == ["5", "5"]


def test_action_uses_title_property():
	out = _render(_d("5", "exploreButton", title="Explore the Cosmos"))

	assert out.title == "Explore the Cosmos"


# ---------------------------------------------------------------------------
# carousel
# ---------------------------------------------------------------------------

def test_carousel_renders_each_child_as_page():
	carousel = _d(
		"1",
		"carousel",
		children=(
			_d("1a", "planetCard", name="Mars"),
			_d("1b", "planetCard", name="Jupiter"),
			_d("1c", "galaxyStats", statName="Moons", value="95"),
		),
		title="Featured Planets",
	)

	out = _render(carousel)

	assert isinstance(out, CarouselRenderable)
	assert out.title == "Featured Planets"
	assert [p.id for p in out.pages] == ["1a", "1b", "1c"]
	assert isinstance(out.pages[2], StatRenderable)
	assert out.page_label(0) == "1 / 3"
	assert out.page_label(99) == "3 / 3"


def test_carousel_without_children_is_empty():
	for children in (None, ()):
		out = _render(_d("1", "carousel", children=children))

		assert isinstance(out, CarouselRenderable)
		assert out.pages == ()
		assert out.page_label(0) == "0 / 0"


def test_carousel_unsupported_children_fall_back_inline():
	out = _render(
		_d(
			"1",
			"carousel",
			children=(
				_d("x", "mystery"),
				_d("b", "exploreButton"),
				_d("ok", "planetCard"),
			),
		)
	)

	assert len(out.pages) == 3
	for page in out.pages[:2]:
		assert isinstance(page, UnknownRenderable)
		assert page.message == "Unknown carousel item"
	assert out.pages[0].type_tag == "mystery"
	assert out.pages[1].type_tag == "exploreButton"
	assert isinstance(out.pages[2], CardRenderable)


# ---------------------------------------------------------------------------
# hscroll
# ---------------------------------------------------------------------------

def test_hscroll_slot_widths_by_child_type():
	out = _render(
		_d(
			"3",
			"hscroll",
			children=(
				_d("3a", "galaxyStats", statName="Age", value="13.6B"),
				_d("3b", "planetCard", name="Venus"),
				_d("3c", "carousel"),
				_d("3d", "mystery"),
			),
		)
	)

	assert isinstance(out, HScrollRenderable)
	assert [s.width for s in out.slots] == [200, 250, 250, 200]
	assert isinstance(out.slots[3].content, UnknownRenderable)
	assert out.slots[3].content.message == "Unknown hscroll item"
	assert out.content_width == 200 + 250 + 250 + 200 + 3 * out.spacing


def test_hscroll_without_children_is_empty():
	out = _render(_d("3", "hscroll"))

	assert out.slots == ()
	assert out.children() == ()


def test_nested_containers_render_recursively():
	inner = _d("in", "carousel", children=(_d("deep", "planetCard", name="Pluto"),))
	outer = _d("out", "hscroll", children=(inner,))

	out = _render(outer)

	nested = out.slots[0].content
	assert isinstance(nested, CarouselRenderable)
	assert nested.pages[0].title == "Pluto"


def test_unknown_root_type_renders_unknown_component():
	out = _render(_d("9", "mystery"))

	assert isinstance(out, UnknownRenderable)
	assert out.message == "Unknown component"
	assert out.type_tag == "mystery"
