# ---------------------------------------------------------------------------
# File: images.py
# ---------------------------------------------------------------------------
# Description:
#	ImageLoader: concurrent card image retrieval for pysdui.
#
# Notes:
#	- request() never blocks: work goes to a ThreadPoolExecutor.
#	- Completions are queued and applied by drain() on the caller's thread
#	  (the Tk loop polls it), so ImageRegion listeners run on the UI thread.
#	- A completion whose RenderPass is no longer current is dropped.
#	- cancel_pending() abandons queued retrievals when the tree is replaced;
#	  ones already running finish and are dropped by drain().
#	- Failures (HTTP, decode, bad URL) just mark the region FAILED.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/09/2026	Paul G. LeDuc				Initial coding / release
# 10/12/2026	Paul G. LeDuc				Queue completions for UI-thread drain
# ---------------------------------------------------------------------------

from __future__ import annotations

import io
import queue
import threading
from concurrent.futures import Future, ThreadPoolExecutor, wait
from dataclasses import dataclass
from typing import Any, Callable, Optional

import httpx
from PIL import Image

from pysdui.core.logging import get_app_logger
from pysdui.render.passes import RenderPass
from pysdui.render.renderables import ImageRegion


log = get_app_logger("images")

# Card image box (px); images are thumbnailed to fit.
IMAGE_SIZE = 200

ImageFetcher = Callable[[str], Any]
CurrentCheck = Callable[[Optional[RenderPass]], bool]


def fetch_image(url: str, *, client: httpx.Client, size: int = IMAGE_SIZE) -> Image.Image:
	"""
	Download url and decode it with Pillow, scaled to fit size x size.

	Raises on HTTP errors and undecodable bodies.
	"""
	resp = client.get(url)
	resp.raise_for_status()

	img = Image.open(io.BytesIO(resp.content))
	img.load()
	img = img.convert("RGBA")
	img.thumbnail((size, size))
	return img


def make_image_fetcher(client: httpx.Client, size: int = IMAGE_SIZE) -> ImageFetcher:
	def _fetch(url: str) -> Image.Image:
		return fetch_image(url, client=client, size=size)
	return _fetch


@dataclass(frozen=True, slots=True)
class _Completion:
	region: ImageRegion
	render_pass: Optional[RenderPass]
	image: Any = None
	error: Optional[BaseException] = None


class ImageLoader:
	"""
	ImageLoader

	Implements the ImageRequester contract used by the card strategy.
	"""

	def __init__(
		self,
		fetch: ImageFetcher,
		*,
		is_current: Optional[CurrentCheck] = None,
		max_workers: int = 4,
	) -> None:
		self._fetch = fetch
		self._is_current = is_current or (lambda _p: True)
		self._executor = ThreadPoolExecutor(max_workers=max_workers, thread_name_prefix="pysdui-img")
		self._completed: "queue.Queue[_Completion]" = queue.Queue()
		self._pending: set[Future] = set()
		self._lock = threading.Lock()
		self._closed = False

	@classmethod
	def from_config(
		cls,
		cfg: Any,
		*,
		is_current: Optional[CurrentCheck] = None,
		client: Optional[httpx.Client] = None,
	) -> "ImageLoader":
		client = client or httpx.Client(timeout=float(cfg.get("timeout", 10.0)), follow_redirects=True)
		return cls(
			make_image_fetcher(client),
			is_current=is_current,
			max_workers=int(cfg.get("image_workers", 4)),
		)

	# -----------------------------------------------------------------------
	# ImageRequester
	# -----------------------------------------------------------------------

	def request(self, region: ImageRegion, render_pass: Optional[RenderPass] = None) -> None:
		if self._closed:
			region.fail()
			return

		future = self._executor.submit(self._run, region, render_pass)
		with self._lock:
			self._pending.add(future)
		future.add_done_callback(self._forget)

	# -----------------------------------------------------------------------
	# Worker side
	# -----------------------------------------------------------------------

	def _run(self, region: ImageRegion, render_pass: Optional[RenderPass]) -> None:
		# Queue before the future completes so wait() + drain() sees it.
		try:
			image = self._fetch(region.url)
		except Exception as ex:
			self._completed.put(_Completion(region, render_pass, error=ex))
			return
		self._completed.put(_Completion(region, render_pass, image=image))

	def _forget(self, future: Future) -> None:
		with self._lock:
			self._pending.discard(future)

	# -----------------------------------------------------------------------
	# UI-thread side
	# -----------------------------------------------------------------------

	def drain(self) -> int:
		"""
		Apply finished retrievals. Returns how many regions were updated.
		"""
		applied = 0
		while True:
			try:
				done = self._completed.get_nowait()
			except queue.Empty:
				return applied

			if not self._is_current(done.render_pass):
				log.debug("Discarding stale image url=%s pass=%s", done.region.url, done.render_pass)
				continue

			if done.error is not None:
				log.info("Image load failed url=%s: %s", done.region.url, done.error)
				done.region.fail()
			else:
				done.region.resolve(done.image)
			applied += 1

	def wait(self, timeout: Optional[float] = None) -> bool:
		"""
		Block until in-flight retrievals finish (tests, shutdown).
		Returns True when nothing is left running.
		"""
		with self._lock:
			pending = list(self._pending)
		if not pending:
			return True
		_, not_done = wait(pending, timeout=timeout)
		return not not_done

	def cancel_pending(self) -> int:
		"""
		Cancel retrievals that have not started yet.
		"""
		with self._lock:
			pending = list(self._pending)
		return sum(1 for f in pending if f.cancel())

	@property
	def pending_count(self) -> int:
		with self._lock:
			return len(self._pending)

	def shutdown(self) -> None:
		self._closed = True
		self._executor.shutdown(wait=False, cancel_futures=True)
