# ---------------------------------------------------------------------------
# File: __init__.py
# Description:
#	Public service exports for pysdui.
#
#	Services are the collaborators around the interpreter: payload fetch,
#	decode, the embedded fallback, and image retrieval. None of them
#	depend on Tk widgets.
#
# Notes:
#	- App is responsible for constructing and wiring service instances.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/06/2026	Paul G. LeDuc				Initial coding / release
# 10/09/2026	Paul G. LeDuc				Export ImageLoader
# ---------------------------------------------------------------------------

from .decode import decode_document, decode_response
from .fallback import load_fallback_response
from .fetch import ComponentFetcher, FetchResult
from .images import ImageLoader, fetch_image

__all__ = [
	"ComponentFetcher",
	"FetchResult",
	"ImageLoader",
	"decode_document",
	"decode_response",
	"fetch_image",
	"load_fallback_response",
]
