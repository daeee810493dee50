# ---------------------------------------------------------------------------
# File: model.py
# ---------------------------------------------------------------------------
# Description:
#	Component descriptor model (the decoded server-driven UI tree).
#
# Notes:
#	- Pure data. No rendering logic lives here.
#	- Property values are display strings; "4,395" is never parsed.
#	- Ids are advisory; duplicates are allowed.
#	- Trees are built fresh per payload and never mutated.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/06/2026	Paul G. LeDuc				Initial coding / release
# 10/08/2026	Paul G. LeDuc				Add ComponentResponse.source
# ---------------------------------------------------------------------------

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional


SOURCE_REMOTE = "remote"
SOURCE_FALLBACK = "fallback"


@dataclass(frozen=True, slots=True)
class ComponentDescriptor:
	"""
	One node of the server-defined UI tree.

	- id:			Stable identity for rendering only.
	- type:			Tag that selects the render strategy (open-ended).
	- properties:	Type-dependent string map; unknown keys are ignored.
	- children:		Only meaningful for composite types; None == empty.
	"""
	id: str
	type: str
	properties: dict[str, str] = field(default_factory=dict)
	children: Optional[tuple["ComponentDescriptor", ...]] = None

	def prop(self, key: str, default: str = "") -> str:
		value = self.properties.get(key)
		return default if value is None else value

	def child_list(self) -> tuple["ComponentDescriptor", ...]:
		return self.children or ()


@dataclass(frozen=True, slots=True)
class ComponentResponse:
	"""
	Top-level envelope: ordered root descriptors of one payload.
	"""
	components: tuple[ComponentDescriptor, ...] = ()
	source: str = SOURCE_REMOTE

	def __len__(self) -> int:
		return len(self.components)

	@property
	def is_fallback(self) -> bool:
		return self.source == SOURCE_FALLBACK
