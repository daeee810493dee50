# ---------------------------------------------------------------------------
# File: component.py
# ---------------------------------------------------------------------------
# Description:
#   Base Tk component for pysdui views.
#
# Notes:
#   Composite pattern: a component owns child components.
#   Containers that place children themselves (carousel pages, hscroll
#   slots) override layout() and keep those children out of pack().
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/12/2026	Paul G. LeDuc				Initial coding / release
# 10/13/2026	Paul G. LeDuc				pack_options per component
# ---------------------------------------------------------------------------

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional
from uuid import uuid4

import tkinter as tk
from tkinter import ttk


@dataclass
class Component:
	"""
	Base UI component.

	- id:	Stable identifier; views reuse the descriptor id.
	- name:	Friendly label (defaults to class name).

	- mount() builds self.root, then mounts any children not yet mounted.
	- layout() packs root with pack_options, then lays out children.
	- destroy() destroys children then root.
	"""
	id: Optional[str] = None
	name: Optional[str] = None

	components: list["Component"] = field(default_factory=list)
	pack_options: dict[str, Any] = field(default_factory=lambda: {"fill": "x"})

	# tk.Misc is the common base for Tk, Toplevel, and all widgets.
	parent: Optional[tk.Misc] = field(default=None, init=False)
	root: Optional[tk.Widget] = field(default=None, init=False)

	def __post_init__(self) -> None:
		if not self.id:
			self.id = str(uuid4())
		if not self.name:
			self.name = self.__class__.__name__

	def __repr__(self) -> str:
		return f"<{self.__class__.__name__} id={self.id!r} name={self.name!r}>"

	@property
	def is_mounted(self) -> bool:
		return self.root is not None

	def mount(self, parent: tk.Misc) -> None:
		self.parent = parent
		self.root = self.build(parent)

		for child in self.components:
			if not child.is_mounted:
				child.mount(self.get_child_parent())

	def build(self, parent: tk.Misc) -> tk.Widget:
		"""
		Create this component's root widget (a Frame by default).
		"""
		return ttk.Frame(parent)

	def get_child_parent(self) -> tk.Misc:
		if self.root is None:
			raise RuntimeError(f"Component not mounted: id={self.id!r} name={self.name!r}")
		return self.root

	def add_component(self, child: "Component") -> None:
		self.components.append(child)

		if self.root is not None:
			child.mount(self.get_child_parent())
			child.layout()

	def clear_components(self) -> None:
		for child in list(self.components):
			child.destroy()
		self.components.clear()

	def layout(self) -> None:
		if self.root is None:
			return

		self.root.pack(**self.pack_options)

		for child in self.components:
			child.layout()

	def destroy(self) -> None:
		for child in list(self.components):
			child.destroy()
		self.components.clear()

		if self.root is not None:
			self.root.destroy()
			self.root = None
