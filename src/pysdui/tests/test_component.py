# ---------------------------------------------------------------------------
# File: test_component.py
# ---------------------------------------------------------------------------
# Description:
#   Unit tests for the base Component class.
#
# Notes:
#   - Validates component identity (id/name).
#   - Validates mount / layout / destroy lifecycle.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/13/2026	Paul G. LeDuc				Initial Component tests
# ---------------------------------------------------------------------------

import tkinter as tk
from tkinter import ttk

import pytest

from pysdui.ui.component import Component


class _TestComponent(Component):
	"""
	Minimal concrete Component used for testing.
	"""
	def build(self, parent: tk.Misc) -> tk.Widget:
		return ttk.Frame(parent)


def test_component_auto_generates_id_and_name():
	component = _TestComponent()

	assert isinstance(component.id, str)
	assert component.name == "_TestComponent"
	assert component.is_mounted is False


def test_component_keeps_explicit_id():
	assert _TestComponent(id="4").id == "4"


def test_get_child_parent_requires_mount():
	with pytest.raises(RuntimeError):
		_TestComponent().get_child_parent()


def test_component_mount_sets_parent_and_root(tk_root):
	component = _TestComponent()
	component.mount(tk_root)

	assert component.parent is tk_root
	assert isinstance(component.root, tk.Widget)
	assert component.is_mounted is True


def test_mount_mounts_pending_children(tk_root):
	parent = _TestComponent()
	child = _TestComponent()
	parent.components.append(child)

	parent.mount(tk_root)

	assert child.parent is parent.root
	assert child.is_mounted is True


def test_add_child_mounts_when_parent_is_mounted(tk_root):
	parent = _TestComponent()
	child = _TestComponent()

	parent.mount(tk_root)
	parent.layout()
	parent.add_component(child)

	assert child in parent.components
	assert child.root.winfo_manager() == "pack"


def test_clear_components_destroys_all_children(tk_root):
	parent = _TestComponent()
	parent.mount(tk_root)
	children = [_TestComponent(), _TestComponent()]
	for child in children:
		parent.add_component(child)

	child_roots = [c.root for c in children]
	parent.clear_components()

	assert parent.components == []
	for widget in child_roots:
		assert widget.winfo_exists() == 0


def test_destroy_cleans_up_root(tk_root):
	component = _TestComponent()
	component.mount(tk_root)
	widget = component.root

	component.destroy()

	assert component.root is None
	assert widget.winfo_exists() == 0
