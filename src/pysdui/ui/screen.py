# ---------------------------------------------------------------------------
# File: screen.py
# ---------------------------------------------------------------------------
# Description:
#	ServerDrivenScreen: vertical stack of views for the current response.
#
# Notes:
#	- show_response() starts a new RenderPass, renders the response and
#	  replaces every view. Older image retrievals become stale.
#	- While mounted, the screen polls ImageLoader.drain() on the Tk loop so
#	  image completions are applied on the UI thread.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/14/2026	Paul G. LeDuc				Initial coding / release
# 10/15/2026	Paul G. LeDuc				Poll image completions
# ---------------------------------------------------------------------------

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

import tkinter as tk
from tkinter import ttk

from pysdui.core.logging import get_app_logger
from pysdui.model import ComponentResponse
from pysdui.render.passes import PassTracker, RenderPass
from pysdui.render.renderables import Renderable
from pysdui.render.tree import TreeRenderer
from pysdui.services.images import ImageLoader
from pysdui.ui.component import Component
from pysdui.ui import theme
from pysdui.ui.views import build_view


log = get_app_logger("screen")


@dataclass
class ServerDrivenScreen(Component):
	"""
	ServerDrivenScreen

	Owns the current response and the views built from it.
	"""
	renderer: Optional[TreeRenderer] = None
	tracker: PassTracker = field(default_factory=PassTracker)
	loader: Optional[ImageLoader] = None
	poll_ms: int = 50

	current: Optional[ComponentResponse] = field(default=None, init=False)
	current_pass: Optional[RenderPass] = field(default=None, init=False)
	rendered: list[Renderable] = field(default_factory=list, init=False)

	_poll_id: Optional[str] = field(default=None, init=False, repr=False)

	def __post_init__(self) -> None:
		super().__post_init__()
		self.pack_options = {"fill": "both", "expand": True}
		if self.renderer is None:
			self.renderer = TreeRenderer(images=self.loader)

	def build(self, parent: tk.Misc) -> tk.Widget:
		frame = ttk.Frame(parent, style="Screen.TFrame", padding=theme.SCREEN_PADDING)
		self._schedule_poll(frame)
		return frame

	# -----------------------------------------------------------------------
	# Public API
	# -----------------------------------------------------------------------

	def show_response(self, response: ComponentResponse) -> list[Renderable]:
		"""
		Render response and replace the on-screen views with the result.
		"""
		if self.loader is not None:
			cancelled = self.loader.cancel_pending()
			if cancelled:
				log.debug("Cancelled %d queued image loads", cancelled)

		self.current_pass = self.tracker.begin()
		renderer = self.renderer or TreeRenderer(images=self.loader)
		self.rendered = renderer.render_response(response, render_pass=self.current_pass)
		self.current = response

		self.clear_components()
		for renderable in self.rendered:
			view = build_view(renderable)
			view.pack_options = {"fill": "x", "pady": (0, theme.STACK_SPACING)}
			self.add_component(view)

		log.info(
			"Showing %d components (source=%s, pass=%d)",
			len(self.rendered),
			response.source,
			self.current_pass.version,
		)
		return self.rendered

	def drain_images(self) -> int:
		if self.loader is None:
			return 0
		return self.loader.drain()

	def destroy(self) -> None:
		if self._poll_id is not None and self.root is not None:
			self.root.after_cancel(self._poll_id)
		self._poll_id = None
		super().destroy()

	# -----------------------------------------------------------------------
	# Internals
	# -----------------------------------------------------------------------

	def _schedule_poll(self, widget: tk.Misc) -> None:
		if self.loader is None:
			return
		self._poll_id = widget.after(self.poll_ms, self._poll)

	def _poll(self) -> None:
		self._poll_id = None
		if self.root is None:
			return
		self.drain_images()
		self._schedule_poll(self.root)
