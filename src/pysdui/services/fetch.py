# ---------------------------------------------------------------------------
# File: fetch.py
# ---------------------------------------------------------------------------
# Description:
#	ComponentFetcher: GET the components payload, fall back when it fails.
#
# Notes:
#	- fetch_remote() raises TransportError / DecodeError.
#	- fetch() never raises for transport/decode problems: it logs, records
#	  the reason on the FetchResult and returns the embedded fallback.
#	- Blocking (httpx.Client). The App runs it on a worker thread.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/06/2026	Paul G. LeDuc				Initial coding / release
# 10/09/2026	Paul G. LeDuc				Add FetchResult + telemetry
# ---------------------------------------------------------------------------

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Optional

import httpx

from pysdui.core.errors import FetchError, TransportError
from pysdui.core.logging import get_app_logger
from pysdui.core.telemetry import Telemetry, get_telemetry
from pysdui.model import ComponentResponse
from pysdui.services.decode import decode_response
from pysdui.services.fallback import load_fallback_response


log = get_app_logger("fetch")


@dataclass(frozen=True, slots=True)
class FetchResult:
	"""
	Outcome of one fetch.

	- response:	always set (remote or fallback)
	- error:	why the fallback was used, else None
	"""
	response: ComponentResponse
	error: Optional[str] = None

	@property
	def ok(self) -> bool:
		return self.error is None


class ComponentFetcher:
	"""
	ComponentFetcher

	Retrieves and decodes the payload from one endpoint.
	"""

	def __init__(
		self,
		endpoint: str,
		*,
		timeout: float = 10.0,
		client: Optional[httpx.Client] = None,
		fallback: Callable[[], ComponentResponse] = load_fallback_response,
		telemetry: Optional[Telemetry] = None,
	) -> None:
		self.endpoint = endpoint
		self._owns_client = client is None
		self._client = client or httpx.Client(timeout=timeout, follow_redirects=True)
		self._fallback = fallback
		self._telemetry = telemetry

	@classmethod
	def from_config(cls, cfg: Any, client: Optional[httpx.Client] = None) -> "ComponentFetcher":
		return cls(
			str(cfg.get("endpoint")),
			timeout=float(cfg.get("timeout", 10.0)),
			client=client,
		)

	def fetch_remote(self) -> ComponentResponse:
		"""
		GET + decode. No fallback.

		Raises:
			TransportError: network failure or non-2xx status.
			DecodeError: body is not a valid components payload.
		"""
		try:
			resp = self._client.get(self.endpoint)
			resp.raise_for_status()
		except httpx.HTTPStatusError as ex:
			raise TransportError(
				f"HTTP {ex.response.status_code} from {self.endpoint}",
				status_code=ex.response.status_code,
			) from ex
		except (httpx.HTTPError, httpx.InvalidURL) as ex:
			raise TransportError(f"Request to {self.endpoint} failed: {ex}") from ex

		return decode_response(resp.content)

	def fetch(self) -> FetchResult:
		telemetry = self._telemetry or get_telemetry()

		try:
			with telemetry.timer("fetch.duration_ms"):
				response = self.fetch_remote()
		except FetchError as ex:
			log.warning("Fetch failed (%s); using fallback components", ex)
			telemetry.event("fetch.fallback", {"reason": type(ex).__name__})
			return FetchResult(response=self._fallback(), error=str(ex))

		log.info("Fetched %d components from %s", len(response), self.endpoint)
		return FetchResult(response=response)

	def close(self) -> None:
		if self._owns_client:
			self._client.close()

	def __enter__(self) -> "ComponentFetcher":
		return self

	def __exit__(self, exc_type, exc, tb) -> None:
		self.close()
