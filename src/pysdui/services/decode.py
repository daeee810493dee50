# ---------------------------------------------------------------------------
# File: decode.py
# ---------------------------------------------------------------------------
# Description:
#	Decode a components payload (JSON) into the descriptor model.
#
# Notes:
#	Wire shape:
#		{"components": [
#			{"id": str, "type": str, "properties": {str: str},
#			 "children": [<descriptor>] | null (optional)}
#		]}
#	- Validation is all-or-nothing: any mismatch raises DecodeError, no
#	  partial trees.
#	- Property values must be JSON strings (4395 is rejected, "4,395" is fine).
#	- Unknown JSON keys are ignored.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/06/2026	Paul G. LeDuc				Initial coding / release
# ---------------------------------------------------------------------------

from __future__ import annotations

from typing import Any, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from pysdui.core.errors import DecodeError
from pysdui.model import SOURCE_REMOTE, ComponentDescriptor, ComponentResponse


class DescriptorPayload(BaseModel):
	"""
	One descriptor as it appears on the wire.
	"""
	model_config = ConfigDict(extra="ignore", frozen=True)

	id: str
	type: str
	properties: dict[str, str]
	children: Optional[list["DescriptorPayload"]] = Field(default=None)

	def to_descriptor(self) -> ComponentDescriptor:
		children = None
		if self.children is not None:
			children = tuple(c.to_descriptor() for c in self.children)

		return ComponentDescriptor(
			id=self.id,
			type=self.type,
			properties=dict(self.properties),
			children=children,
		)


DescriptorPayload.model_rebuild()


class ResponsePayload(BaseModel):
	model_config = ConfigDict(extra="ignore", frozen=True)

	components: list[DescriptorPayload]

	def to_response(self, source: str = SOURCE_REMOTE) -> ComponentResponse:
		return ComponentResponse(
			components=tuple(c.to_descriptor() for c in self.components),
			source=source,
		)


def decode_response(raw: Union[str, bytes], *, source: str = SOURCE_REMOTE) -> ComponentResponse:
	"""
	Parse and validate a JSON document into a ComponentResponse.

	Raises:
		DecodeError: invalid JSON or schema mismatch.
	"""
	try:
		payload = ResponsePayload.model_validate_json(raw)
	except ValidationError as ex:
		raise DecodeError(f"Invalid components payload: {_summarize(ex)}") from ex

	return payload.to_response(source)


def decode_document(doc: Any, *, source: str = SOURCE_REMOTE) -> ComponentResponse:
	"""
	Same as decode_response() for an already-parsed JSON value.
	"""
	try:
		payload = ResponsePayload.model_validate(doc)
	except ValidationError as ex:
		raise DecodeError(f"Invalid components payload: {_summarize(ex)}") from ex

	return payload.to_response(source)


def _summarize(ex: ValidationError, limit: int = 3) -> str:
	parts: list[str] = []
	for err in ex.errors()[:limit]:
		loc = ".".join(str(p) for p in err.get("loc", ()))
		parts.append(f"{loc or '<root>'}: {err.get('msg', 'invalid')}")

	more = ex.error_count() - limit
	if more > 0:
		parts.append(f"(+{more} more)")
	return "; ".join(parts)
