# ---------------------------------------------------------------------------
# File: app.py
# ---------------------------------------------------------------------------
# Description:
#   App: main window for pysdui.
#
# Notes:
#   - Wires fetcher, image loader, pass tracker, renderer and screen.
#   - The fetch runs on a worker thread; its FetchResult is handed back to
#     the Tk thread through a queue polled with after().
#   - F5 reloads. Closing the window shuts down the image pool.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/15/2026	Paul G. LeDuc				Initial coding / release
# 10/16/2026	Paul G. LeDuc				Background fetch + reload binding
# 10/17/2026	Paul G. LeDuc				Verify fallback payload at startup
# ---------------------------------------------------------------------------

from __future__ import annotations

import queue
import threading
from typing import Any, Optional

import tkinter as tk
from tkinter import ttk

from pysdui.core.config import AppConfig
from pysdui.core.logging import get_app_logger
from pysdui.core.telemetry import get_telemetry
from pysdui.render.actions import FanoutActionSink, LogActionSink, TelemetryActionSink
from pysdui.render.passes import PassTracker
from pysdui.render.tree import TreeRenderer
from pysdui.services.fallback import load_fallback_response
from pysdui.services.fetch import ComponentFetcher, FetchResult
from pysdui.services.images import ImageLoader
from pysdui.ui.screen import ServerDrivenScreen
from pysdui.ui.theme import BACKGROUND, apply_theme


log = get_app_logger()


class App(tk.Tk):
	"""
	App

	Root window: fetches the component payload and shows it.
	"""

	def __init__(
		self,
		width: int | None = 420,
		height: int | None = 860,
		title: str | None = None,
		cfg: AppConfig | dict[str, Any] | None = None,
		fetcher: Optional[ComponentFetcher] = None,
		loader: Optional[ImageLoader] = None,
	) -> None:
		super().__init__()

		self.cfg = cfg if isinstance(cfg, AppConfig) else AppConfig(cfg)
		self.title_text = title or "Server Driven UI"
		self.title(self.title_text)

		# A broken embedded payload is a packaging defect: fail here, loudly.
		load_fallback_response()

		self.style = apply_theme(self, self.cfg.get("theme"))
		self.configure(background=BACKGROUND)

		self.update_idletasks()
		self._apply_geometry(width, height)

		if bool(self.cfg.get("scrollable", True)):
			self._build_scrollable_root()
			self._bind_mousewheel()
		else:
			self.root_frame = ttk.Frame(self, style="Screen.TFrame")
			self.root_frame.pack(fill="both", expand=True)

		# -------------------------------------------------------------------
		# Services + interpreter
		# -------------------------------------------------------------------

		self.tracker = PassTracker()
		self.loader = loader or ImageLoader.from_config(self.cfg, is_current=self.tracker.is_current)
		self.fetcher = fetcher or ComponentFetcher.from_config(self.cfg)

		self.renderer = TreeRenderer(
			actions=FanoutActionSink(LogActionSink(), TelemetryActionSink()),
			images=self.loader,
		)
		self.screen = ServerDrivenScreen(
			id="screen",
			renderer=self.renderer,
			tracker=self.tracker,
			loader=self.loader,
			poll_ms=int(self.cfg.get("poll_ms", 50)),
		)
		self.screen.mount(self.root_frame)
		self.screen.layout()

		self._results: "queue.Queue[FetchResult]" = queue.Queue()
		self._loading = False
		self.last_result: Optional[FetchResult] = None

		self.bind("<F5>", lambda _e: self.reload())
		self.protocol("WM_DELETE_WINDOW", self.close)

	# -----------------------------------------------------------------------
	# Loading
	# -----------------------------------------------------------------------

	def reload(self) -> None:
		"""
		Fetch the payload in the background, then show it.
		"""
		if self._loading:
			return
		self._loading = True
		get_telemetry().event("app.reload")

		threading.Thread(target=self._fetch_worker, name="pysdui-fetch", daemon=True).start()
		self.after(50, self._poll_results)

	def apply_result(self, result: FetchResult) -> None:
		self.last_result = result
		if not result.ok:
			log.info("Showing fallback components: %s", result.error)
		self.screen.show_response(result.response)

	def _fetch_worker(self) -> None:
		self._results.put(self.fetcher.fetch())

	def _poll_results(self) -> None:
		try:
			result = self._results.get_nowait()
		except queue.Empty:
			self.after(50, self._poll_results)
			return

		self._loading = False
		self.apply_result(result)

	# -----------------------------------------------------------------------
	# Window & root setup
	# -----------------------------------------------------------------------

	def _apply_geometry(self, width: int | None, height: int | None) -> None:
		screen_w = self.winfo_screenwidth()
		screen_h = self.winfo_screenheight()

		win_w = max(1, min(width if width is not None else screen_w, screen_w))
		win_h = max(1, min(height if height is not None else screen_h, screen_h))

		x = max(0, (screen_w - win_w) // 2)
		y = max(0, (screen_h - win_h) // 2)

		self.geometry(f"{win_w}x{win_h}+{x}+{y}")

	def _build_scrollable_root(self) -> None:
		"""
		Canvas + inner Frame + vertical Scrollbar.
		"""
		container = ttk.Frame(self, style="Screen.TFrame")
		container.pack(fill="both", expand=True)

		self.canvas = tk.Canvas(container, highlightthickness=0, background=BACKGROUND)
		self.v_scroll = ttk.Scrollbar(container, orient="vertical", command=self.canvas.yview)

		self.root_frame = ttk.Frame(self.canvas, style="Screen.TFrame")
		self.root_frame.bind("<Configure>", self._on_root_configure)

		self._root_window = self.canvas.create_window((0, 0), window=self.root_frame, anchor="nw")
		self.canvas.bind("<Configure>", self._on_canvas_configure)
		self.canvas.configure(yscrollcommand=self.v_scroll.set)

		self.canvas.pack(side="left", fill="both", expand=True)
		self.v_scroll.pack(side="right", fill="y")

	def _on_root_configure(self, _event: tk.Event) -> None:
		self.canvas.configure(scrollregion=self.canvas.bbox("all"))

	def _on_canvas_configure(self, event: tk.Event) -> None:
		# Keep the stack as wide as the window.
		self.canvas.itemconfigure(self._root_window, width=event.width)

	def _bind_mousewheel(self) -> None:
		def _on_mousewheel(event: tk.Event) -> None:
			delta = getattr(event, "delta", 0)
			if delta:
				self.canvas.yview_scroll(int(-1 * (delta / 120)), "units")

		self.bind_all("<MouseWheel>", _on_mousewheel)
		self.bind_all("<Button-4>", lambda _e: self.canvas.yview_scroll(-1, "units"))
		self.bind_all("<Button-5>", lambda _e: self.canvas.yview_scroll(1, "units"))

	# -----------------------------------------------------------------------
	# Runtime
	# -----------------------------------------------------------------------

	def run(self) -> None:
		self.reload()
		self.mainloop()

	def close(self) -> None:
		self.loader.shutdown()
		self.fetcher.close()
		self.destroy()

	def __repr__(self) -> str:
		return f"<{self.__class__.__name__} title={self.title_text!r}>"
