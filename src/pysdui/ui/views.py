# ---------------------------------------------------------------------------
# File: views.py
# ---------------------------------------------------------------------------
# Description:
#	Tk views for renderables (one view class per renderable class).
#
# Notes:
#	- Views only read renderables; activation goes through
#	  ActionRenderable.activate().
#	- CardView follows its ImageRegion: progress text while loading,
#	  the image when loaded, a placeholder glyph on failure.
#	- CarouselView hosts one page at a time (get_child_parent() is the
#	  page host, so add_component() swaps pages).
#	- HScrollView puts every child in a fixed-width canvas window and
#	  scrolls horizontally.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/13/2026	Paul G. LeDuc				Initial coding / release
# 10/14/2026	Paul G. LeDuc				Canvas windows for hscroll slots
# ---------------------------------------------------------------------------

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional

import tkinter as tk
from tkinter import ttk

from PIL import ImageTk

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
)
from pysdui.ui.component import Component
from pysdui.ui import theme


# ---------------------------------------------------------------------------
# Leaf views
# ---------------------------------------------------------------------------

@dataclass
class CardView(Component):
	renderable: Optional[CardRenderable] = None

	image_label: Optional[ttk.Label] = field(default=None, init=False, repr=False)
	_photo: Any = field(default=None, init=False, repr=False)

	def build(self, parent: tk.Misc) -> tk.Widget:
		r = self.renderable or CardRenderable(id=self.id or "")
		frame = ttk.Frame(parent, style="Card.TFrame", padding=5)

		self.image_label = ttk.Label(frame, style="CardImage.TLabel")
		self.image_label.pack(pady=5)

		ttk.Label(frame, text=r.title, style="CardTitle.TLabel").pack()
		ttk.Label(
			frame,
			text=r.body,
			style="CardBody.TLabel",
			justify="center",
			wraplength=320,
		).pack(pady=(0, 28))

		self.show_image(r.image)
		r.image.subscribe(self.show_image)
		return frame

	def show_image(self, region: ImageRegion) -> None:
		lbl = self.image_label
		if lbl is None:
			return

		if region.state is ImageState.LOADED and region.image is not None:
			self._photo = ImageTk.PhotoImage(region.image, master=lbl)
			lbl.configure(image=self._photo, text="")
		elif region.state is ImageState.FAILED:
			self._photo = None
			lbl.configure(image="", text=theme.PLACEHOLDER_GLYPH, font=("TkDefaultFont", 64))
		else:
			lbl.configure(image="", text=theme.LOADING_TEXT)

	def destroy(self) -> None:
		if self.renderable is not None:
			self.renderable.image.unsubscribe(self.show_image)
		self.image_label = None
		self._photo = None
		super().destroy()


@dataclass
class StatView(Component):
	renderable: Optional[StatRenderable] = None

	value_label: Optional[ttk.Label] = field(default=None, init=False, repr=False)

	def build(self, parent: tk.Misc) -> tk.Widget:
		r = self.renderable or StatRenderable(id=self.id or "")
		frame = ttk.Frame(parent, style="Stat.TFrame", padding=15)

		ttk.Label(frame, text=r.label, style="StatName.TLabel").pack()

		# No wraplength: the value stays on one line and clips.
		self.value_label = ttk.Label(frame, text=r.value, style="StatValue.TLabel")
		self.value_label.pack()
		return frame


@dataclass
class ActionView(Component):
	renderable: Optional[ActionRenderable] = None

	def build(self, parent: tk.Misc) -> tk.Widget:
		r = self.renderable or ActionRenderable(id=self.id or "")
		return ttk.Button(parent, text=r.title, style="Action.TButton", command=r.activate)


@dataclass
class UnknownView(Component):
	renderable: Optional[UnknownRenderable] = None

	def build(self, parent: tk.Misc) -> tk.Widget:
		r = self.renderable or UnknownRenderable(id=self.id or "")
		return ttk.Label(parent, text=r.message, style="Unknown.TLabel", anchor="center")


# ---------------------------------------------------------------------------
# Containers
# ---------------------------------------------------------------------------

@dataclass
class CarouselView(Component):
	"""
	One page visible at a time with prev/next and an "i / n" indicator.
	"""
	renderable: Optional[CarouselRenderable] = None
	index: int = field(default=0, init=False)

	position_label: Optional[ttk.Label] = field(default=None, init=False, repr=False)
	_page_host: Optional[ttk.Frame] = field(default=None, init=False, repr=False)
	_prev_button: Optional[ttk.Button] = field(default=None, init=False, repr=False)
	_next_button: Optional[ttk.Button] = field(default=None, init=False, repr=False)

	def build(self, parent: tk.Misc) -> tk.Widget:
		r = self._carousel()
		frame = ttk.Frame(parent, style="Screen.TFrame")

		if r.title:
			ttk.Label(frame, text=r.title, style="Section.TLabel").pack(anchor="w")

		host = ttk.Frame(frame, style="Screen.TFrame", height=r.height)
		host.pack(fill="both", expand=True)
		host.pack_propagate(False)
		self._page_host = host

		nav = ttk.Frame(frame, style="Screen.TFrame")
		nav.pack(pady=(4, 0))
		self._prev_button = ttk.Button(nav, text="‹", width=3, command=self.previous)
		self._prev_button.pack(side="left")
		self.position_label = ttk.Label(nav, style="Section.TLabel")
		self.position_label.pack(side="left", padx=8)
		self._next_button = ttk.Button(nav, text="›", width=3, command=self.next)
		self._next_button.pack(side="left")

		# First page is mounted by Component.mount() into the page host.
		self.components.clear()
		if r.pages:
			self.components.append(self._page_view(0))
		self._sync_nav()
		return frame

	def get_child_parent(self) -> tk.Misc:
		if self._page_host is None:
			return super().get_child_parent()
		return self._page_host

	def show_page(self, index: int) -> None:
		r = self._carousel()
		if not r.pages:
			return

		self.index = max(0, min(index, r.page_count - 1))
		self.clear_components()
		self.add_component(self._page_view(self.index))
		self._sync_nav()

	def next(self) -> None:
		self.show_page(self.index + 1)

	def previous(self) -> None:
		self.show_page(self.index - 1)

	def destroy(self) -> None:
		self._page_host = None
		self.position_label = None
		self._prev_button = None
		self._next_button = None
		super().destroy()

	def _carousel(self) -> CarouselRenderable:
		return self.renderable or CarouselRenderable(id=self.id or "")

	def _page_view(self, index: int) -> Component:
		view = build_view(self._carousel().pages[index])
		view.pack_options = {"fill": "both", "expand": True}
		return view

	def _sync_nav(self) -> None:
		r = self._carousel()
		if self.position_label is not None:
			self.position_label.configure(text=r.page_label(self.index))
		if self._prev_button is not None:
			self._prev_button.state(["!disabled"] if self.index > 0 else ["disabled"])
		if self._next_button is not None:
			self._next_button.state(["!disabled"] if self.index < r.page_count - 1 else ["disabled"])


@dataclass
class HScrollView(Component):
	"""
	Horizontal row of fixed-width slots inside a scrollable canvas.
	"""
	renderable: Optional[HScrollRenderable] = None

	canvas: Optional[tk.Canvas] = field(default=None, init=False, repr=False)
	slot_windows: list[int] = field(default_factory=list, init=False, repr=False)
	_slot_frames: list[ttk.Frame] = field(default_factory=list, init=False, repr=False)

	def build(self, parent: tk.Misc) -> tk.Widget:
		r = self.renderable or HScrollRenderable(id=self.id or "")
		frame = ttk.Frame(parent, style="Screen.TFrame")

		if r.title:
			ttk.Label(frame, text=r.title, style="Section.TLabel").pack(anchor="w")

		self.canvas = tk.Canvas(frame, background=theme.BACKGROUND, highlightthickness=0, height=1)
		hbar = ttk.Scrollbar(frame, orient="horizontal", command=self.canvas.xview)
		self.canvas.configure(xscrollcommand=hbar.set)
		self.canvas.pack(side="top", fill="x", expand=True)
		hbar.pack(side="top", fill="x")

		self.components.clear()
		self.slot_windows.clear()
		self._slot_frames.clear()

		x = 0
		for slot in r.slots:
			holder = ttk.Frame(self.canvas, style="Screen.TFrame")
			view = build_view(slot.content)
			view.pack_options = {"fill": "both", "expand": True}
			view.mount(holder)
			self.components.append(view)
			self._slot_frames.append(holder)

			win = self.canvas.create_window(x, 0, window=holder, anchor="nw", width=slot.width)
			self.slot_windows.append(win)
			x += slot.width + r.spacing

		return frame

	def layout(self) -> None:
		if self.root is None:
			return

		self.root.pack(**self.pack_options)
		for child in self.components:
			child.layout()

		self.root.after_idle(self._sync_scrollregion)

	def destroy(self) -> None:
		self.canvas = None
		self.slot_windows.clear()
		self._slot_frames.clear()
		super().destroy()

	def _sync_scrollregion(self) -> None:
		if self.canvas is None or self.renderable is None:
			return

		height = max((f.winfo_reqheight() for f in self._slot_frames), default=0)
		self.canvas.configure(
			height=max(height, 1),
			scrollregion=(0, 0, self.renderable.content_width, height),
		)


# ---------------------------------------------------------------------------
# Factory
# ---------------------------------------------------------------------------

_VIEW_TYPES: dict[type, type] = {
	CardRenderable: CardView,
	StatRenderable: StatView,
	ActionRenderable: ActionView,
	UnknownRenderable: UnknownView,
	CarouselRenderable: CarouselView,
	HScrollRenderable: HScrollView,
}


def build_view(renderable: Renderable) -> Component:
	"""
	Create the (unmounted) view for a renderable.
	"""
	for cls in type(renderable).__mro__:
		view_cls = _VIEW_TYPES.get(cls)
		if view_cls is not None:
			return view_cls(id=renderable.id, renderable=renderable)

	return UnknownView(
		id=renderable.id,
		renderable=UnknownRenderable(id=renderable.id, type_tag=renderable.kind),
	)
