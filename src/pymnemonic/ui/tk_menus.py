# ---------------------------------------------------------------------------
# File: tk_menus.py
# ---------------------------------------------------------------------------
# Description:
#	Allocate mnemonics for tk.Menu widgets built elsewhere.
#
# Notes:
#	- Works for a menubar, a popup menu, or the inside of a single menu: in
#	  Tk all three are a tk.Menu whose entries are the sibling list.
#	- Reads entry labels/fonts, writes the underline= option in place and
#	  recurses into cascades.
#	- Separators and tearoff entries take no part (None entities).
#	- No-op on macOS.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/17/2026	pymnemonic dev				Initial coding / release
# ---------------------------------------------------------------------------

from __future__ import annotations

from typing import Any, Optional

from pymnemonic.core.logging import get_app_logger
from pymnemonic.mnemonics.allocator import MnemonicAllocator
from pymnemonic.mnemonics.measure import TkFontMeasurer
from pymnemonic.mnemonics.model import AllocationReport, MenuItemEntity
from pymnemonic.ui.entities import underline_index
from pymnemonic.ui.menubar import mnemonics_supported


log = get_app_logger("ui.tk_menus")

# Entry types that show a label.
LABELED_ENTRY_TYPES = ("command", "cascade", "checkbutton", "radiobutton")


def set_menu_mnemonics(
	menu: Any,
	*,
	allocator: MnemonicAllocator | None = None,
	platform: str | None = None,
) -> list[AllocationReport]:
	"""
	Allocate mnemonics over menu's entries, then over each cascade's entries.

	menu is a tk.Menu (or anything with index/type/entrycget/entryconfigure/
	cget/nametowidget). Returns one report per sibling list.
	"""
	if not mnemonics_supported(platform):
		return []

	if allocator is None:
		allocator = MnemonicAllocator(measurer=TkFontMeasurer(root=menu))

	return _apply(menu, allocator)


def _apply(menu: Any, allocator: MnemonicAllocator) -> list[AllocationReport]:
	entities, indices, submenus = _read_entries(menu)

	report = allocator.allocate(entities)
	reports = [report]

	if not report.skipped:
		for ent, idx in zip(entities, indices):
			if ent is None:
				continue
			menu.entryconfigure(idx, underline=underline_index(ent.label, ent.mnemonic))

	for sub in submenus:
		reports.extend(_apply(sub, allocator))

	return reports


def _read_entries(menu: Any) -> tuple[list[Optional[MenuItemEntity]], list[int], list[Any]]:
	entities: list[Optional[MenuItemEntity]] = []
	indices: list[int] = []
	submenus: list[Any] = []

	last = menu.index("end")
	if last is None:
		return entities, indices, submenus

	menu_font = menu.cget("font") or None

	for i in range(int(last) + 1):
		kind = menu.type(i)
		if kind not in LABELED_ENTRY_TYPES:
			entities.append(None)
			indices.append(i)
			continue

		entry_font = menu.entrycget(i, "font") or menu_font
		entities.append(
			MenuItemEntity(
				label=menu.entrycget(i, "label"),
				is_submenu=(kind == "cascade"),
				font=entry_font,
			)
		)
		indices.append(i)

		if kind == "cascade":
			name = menu.entrycget(i, "menu")
			if name:
				submenus.append(menu.nametowidget(str(name)))

	log.debug("Read %d entries from %s", len(entities), menu)
	return entities, indices, submenus
