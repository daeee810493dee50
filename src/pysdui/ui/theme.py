# ---------------------------------------------------------------------------
# File: theme.py
# ---------------------------------------------------------------------------
# Description:
#	Visual constants + ttk styles for pysdui views.
#
# Notes:
#	- Base theme comes from ttkthemes (default "equilux", a dark theme).
#	- Named styles ("Card.TFrame", "StatValue.TLabel", ...) are layered on
#	  top so views only reference style names.
#	- Unknown theme names fall back to the Tk default theme.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/13/2026	Paul G. LeDuc				Initial coding / release
# ---------------------------------------------------------------------------

from __future__ import annotations

import tkinter as tk

import ttkthemes as ttk_themes

from pysdui.core.logging import get_app_logger


log = get_app_logger("theme")

DEFAULT_THEME = "equilux"

# Colors
BACKGROUND = "#0b0b14"
CARD_BG = "#000000"
STAT_BG = "#2e1f45"
TEXT = "#ffffff"
MUTED = "#9a9a9a"
ACCENT = "#6a4cff"
WARNING = "#f0a030"

# Fonts
TITLE_FONT = ("TkDefaultFont", 20, "bold")
BODY_FONT = ("TkDefaultFont", 11)
HEADLINE_FONT = ("TkDefaultFont", 12, "bold")
VALUE_FONT = ("TkDefaultFont", 20, "bold")

# Glyphs for image states
LOADING_TEXT = "Loading…"
PLACEHOLDER_GLYPH = "\U0001F5BC"

# Spacing
STACK_SPACING = 20
SCREEN_PADDING = 15


def apply_theme(root: tk.Misc, theme: str | None = None) -> ttk_themes.ThemedStyle:
	"""
	Install the ttkthemes base theme and the pysdui named styles on root.
	"""
	style = ttk_themes.ThemedStyle(root)
	name = theme or DEFAULT_THEME

	if name in style.get_themes():
		style.set_theme(name)
	else:
		log.warning("Unknown theme %r; keeping %r", name, style.theme_use())

	style.configure("Screen.TFrame", background=BACKGROUND)
	style.configure("Section.TLabel", background=BACKGROUND, foreground=MUTED, font=HEADLINE_FONT)

	style.configure("Card.TFrame", background=CARD_BG)
	style.configure("CardImage.TLabel", background=CARD_BG, foreground=MUTED, anchor="center")
	style.configure("CardTitle.TLabel", background=CARD_BG, foreground=TEXT, font=TITLE_FONT)
	style.configure("CardBody.TLabel", background=CARD_BG, foreground=MUTED, font=BODY_FONT)

	style.configure("Stat.TFrame", background=STAT_BG)
	style.configure("StatName.TLabel", background=STAT_BG, foreground=MUTED, font=HEADLINE_FONT)
	style.configure("StatValue.TLabel", background=STAT_BG, foreground=TEXT, font=VALUE_FONT)

	style.configure("Action.TButton", foreground=TEXT, background=ACCENT, font=HEADLINE_FONT, padding=12)
	style.map("Action.TButton", background=[("active", ACCENT)])

	style.configure("Unknown.TLabel", background=BACKGROUND, foreground=WARNING, font=BODY_FONT)

	return style
