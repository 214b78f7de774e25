# ---------------------------------------------------------------------------
# File: demo_menus.py
# ---------------------------------------------------------------------------
# Description:
#	Demo menu model shown by the preview app.
#
# Notes:
#	- Labels exercise every allocation stage: KDE defaults (File, Open Recent),
#	  word initials, underscore bans, breadcrumb entries, digits-only labels.
#	- Accelerator hints are platform-aware (⌘ on macOS, Ctrl elsewhere).
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/17/2026	pymnemonic dev				Initial coding / release
# ---------------------------------------------------------------------------

from __future__ import annotations

import sys
from typing import Any, Optional

from tkinter import messagebox

from pymnemonic.mnemonics.allocator import BREADCRUMB_PREFIX
from pymnemonic.ui.menu_defs import SEP, MenuCommand, MenuDef, MenuSubmenu


def _is_mac() -> bool:
	return sys.platform == "darwin"


def shortcut(key: str) -> str:
	"""
	Display accelerator for key ("S" -> "Ctrl+S", or "⌘S" on macOS).
	"""
	return f"⌘{key}" if _is_mac() else f"Ctrl+{key}"


def build_demo_menus(app: Optional[Any] = None) -> tuple[MenuDef, ...]:
	"""
	Return the preview menus. app (a Tk root) enables Quit/About handlers.
	"""

	def _quit() -> None:
		if app is not None:
			app.destroy()

	def _about() -> None:
		messagebox.showinfo(
			title="About pymnemonic",
			message="pymnemonic\n\nAutomatic menu mnemonics for Tk.\n",
			parent=app,
		)

	recent = tuple(
		MenuCommand(f"{BREADCRUMB_PREFIX}{name}")
		for name in ("My Sketch", "sketch_220301a", "Sketch Copy", "2024")
	)

	return (
		MenuDef("File", items=(
			MenuCommand("New", accelerator=shortcut("N")),
			MenuCommand("Open...", accelerator=shortcut("O")),
			MenuSubmenu("Open Recent", items=recent),
			MenuCommand("Sketchbook..."),
			MenuCommand("Examples..."),
			SEP,
			MenuCommand("Close", accelerator=shortcut("W")),
			MenuCommand("Save", accelerator=shortcut("S")),
			MenuCommand("Save As...", accelerator=shortcut("Shift+S")),
			SEP,
			MenuCommand("Page Setup"),
			MenuCommand("Print", accelerator=shortcut("P")),
			SEP,
			MenuCommand("Quit", command=_quit, accelerator=shortcut("Q")),
		)),
		MenuDef("Edit", items=(
			MenuCommand("Undo", accelerator=shortcut("Z")),
			MenuCommand("Redo", accelerator=shortcut("Y")),
			SEP,
			MenuCommand("Cut", accelerator=shortcut("X")),
			MenuCommand("Copy", accelerator=shortcut("C")),
			MenuCommand("Copy as HTML"),
			MenuCommand("Paste", accelerator=shortcut("V")),
			MenuCommand("Select All", accelerator=shortcut("A")),
			SEP,
			MenuCommand("Auto Format", accelerator=shortcut("T")),
			MenuCommand("Comment/Uncomment", accelerator=shortcut("/")),
			MenuCommand("Increase Indent"),
			MenuCommand("Decrease Indent"),
			SEP,
			MenuCommand("Find...", accelerator=shortcut("F")),
			MenuCommand("Find Next", accelerator=shortcut("G")),
			MenuCommand("Find Previous"),
			MenuCommand("Use Selection For Find"),
		)),
		MenuDef("Sketch", items=(
			MenuCommand("Run", accelerator=shortcut("R")),
			MenuCommand("Present"),
			MenuCommand("Tweak"),
			MenuCommand("Stop"),
			SEP,
			MenuSubmenu("Import Library...", items=(
				"Add Library...",
				SEP,
				"Sound",
				"Video",
				"PDF Export",
				"Serial",
			)),
			MenuCommand("Show Sketch Folder"),
			MenuCommand("Add File..."),
		)),
		MenuDef("Tools", items=(
			"Create Font...",
			"Color Selector...",
			"Archive Sketch",
			"Fix Encoding & Reload",
			"Movie Maker",
			"3D",
			"123",
		)),
		MenuDef("Help", items=(
			"Getting Started",
			"Environment",
			"Reference",
			"Find in Reference",
			SEP,
			"Frequently Asked Questions",
			"Visit pymnemonic Handbook",
			SEP,
			MenuCommand("About pymnemonic", command=_about),
		)),
	)
