# ---------------------------------------------------------------------------
# File: renderables.py
# ---------------------------------------------------------------------------
# Description:
#	Renderable output tree produced by render strategies.
#
# Notes:
#	- Toolkit-agnostic: the Tk view layer (pysdui.ui.views) mounts these,
#	  tests assert on them directly.
#	- Renderables are frozen; equality is structural so two passes over
#	  the same response compare equal.
#	- ImageRegion is the one mutable piece: it moves LOADING -> LOADED or
#	  LOADING -> FAILED exactly once, and only its listeners are notified.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/07/2026	Paul G. LeDuc				Initial coding / release
# 10/10/2026	Paul G. LeDuc				Add Slot widths + walk()
# ---------------------------------------------------------------------------

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Any, Callable, ClassVar, Iterable, Iterator, Optional

from pysdui.render.actions import ActionSink


UNKNOWN_COMPONENT = "Unknown component"


# ---------------------------------------------------------------------------
# Image region
# ---------------------------------------------------------------------------

class ImageState(enum.Enum):
	LOADING = "loading"
	LOADED = "loaded"
	FAILED = "failed"


ImageListener = Callable[["ImageRegion"], None]


@dataclass(slots=True)
class ImageRegion:
	"""
	Async image slot of a card.

	- LOADING:	show a progress indicator
	- LOADED:	show image
	- FAILED:	show the placeholder glyph

	Both end states are terminal; later resolve()/fail() calls are ignored.
	"""
	url: str
	state: ImageState = ImageState.LOADING

	image: Any = field(default=None, compare=False, repr=False)
	_listeners: list[ImageListener] = field(default_factory=list, compare=False, repr=False)

	@property
	def is_terminal(self) -> bool:
		return self.state is not ImageState.LOADING

	def subscribe(self, listener: ImageListener) -> None:
		self._listeners.append(listener)

	def unsubscribe(self, listener: ImageListener) -> None:
		if listener in self._listeners:
			self._listeners.remove(listener)

	def resolve(self, image: Any) -> bool:
		if self.is_terminal:
			return False
		self.image = image
		self.state = ImageState.LOADED
		self._notify()
		return True

	def fail(self) -> bool:
		if self.is_terminal:
			return False
		self.state = ImageState.FAILED
		self._notify()
		return True

	def _notify(self) -> None:
		for listener in list(self._listeners):
			listener(self)


# ---------------------------------------------------------------------------
# Renderables
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Renderable:
	"""
	Base renderable. id mirrors the source descriptor id.
	"""
	kind: ClassVar[str] = "renderable"

	id: str

	def children(self) -> tuple["Renderable", ...]:
		return ()


@dataclass(frozen=True, slots=True)
class CardRenderable(Renderable):
	kind: ClassVar[str] = "card"

	title: str = ""
	body: str = ""
	image: ImageRegion = field(default_factory=lambda: ImageRegion(url=""))


@dataclass(frozen=True, slots=True)
class StatRenderable(Renderable):
	kind: ClassVar[str] = "stat"

	label: str = ""
	value: str = ""
	max_lines: int = 1


@dataclass(frozen=True, slots=True)
class ActionRenderable(Renderable):
	"""
	Tappable control. activate() is fire-and-forget.
	"""
	kind: ClassVar[str] = "action"

	title: str = ""
	sink: Optional[ActionSink] = field(default=None, compare=False, repr=False)

	def activate(self) -> None:
		if self.sink is not None:
			self.sink.activated(self.id)


@dataclass(frozen=True, slots=True)
class UnknownRenderable(Renderable):
	"""
	Visible placeholder for a node that could not be rendered.
	"""
	kind: ClassVar[str] = "unknown"

	type_tag: str = ""
	message: str = UNKNOWN_COMPONENT


@dataclass(frozen=True, slots=True)
class CarouselRenderable(Renderable):
	"""
	Paged container: one page visible at a time.
	"""
	kind: ClassVar[str] = "carousel"

	title: str = ""
	pages: tuple[Renderable, ...] = ()
	height: int = 300

	def children(self) -> tuple[Renderable, ...]:
		return self.pages

	@property
	def page_count(self) -> int:
		return len(self.pages)

	def page_label(self, index: int) -> str:
		if not self.pages:
			return "0 / 0"
		index = max(0, min(index, len(self.pages) - 1))
		return f"{index + 1} / {len(self.pages)}"


@dataclass(frozen=True, slots=True)
class Slot:
	width: int
	content: Renderable


@dataclass(frozen=True, slots=True)
class HScrollRenderable(Renderable):
	"""
	Horizontally scrolling row of fixed-width slots.
	"""
	kind: ClassVar[str] = "hscroll"

	title: str = ""
	slots: tuple[Slot, ...] = ()
	spacing: int = 15

	def children(self) -> tuple[Renderable, ...]:
		return tuple(s.content for s in self.slots)

	@property
	def content_width(self) -> int:
		if not self.slots:
			return 0
		return sum(s.width for s in self.slots) + self.spacing * (len(self.slots) - 1)


# ---------------------------------------------------------------------------
# Traversal
# ---------------------------------------------------------------------------

def walk(renderables: Iterable[Renderable]) -> Iterator[Renderable]:
	"""
	Depth-first, pre-order iteration over a renderable forest.
	"""
	for r in renderables:
		yield r
		yield from walk(r.children())
