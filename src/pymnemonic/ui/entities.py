# ---------------------------------------------------------------------------
# File: entities.py
# ---------------------------------------------------------------------------
# Description:
#	Bridges between menu models / Tk menus and MenuItemEntity trees.
#
# Notes:
#	- build_entities() keeps item order and maps separators to None, so the
#	  result can be zipped back against the source items.
#	- underline_index() turns an allocated mnemonic into Tk's underline= value.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/15/2026	pymnemonic dev				Initial coding / release
# 10/17/2026	pymnemonic dev				Prefer the breadcrumb-free part of the label for underline
# ---------------------------------------------------------------------------

from __future__ import annotations

from typing import Any, Iterable, Optional, Sequence

from pymnemonic.mnemonics.allocator import BREADCRUMB_PREFIX
from pymnemonic.mnemonics.model import MenuItemEntity
from pymnemonic.ui.menu_defs import MenuDef, MenuItemLike, MenuSeparator, MenuSubmenu, normalize_items


def build_entities(menus: Sequence[MenuDef], font: Any = None) -> list[Optional[MenuItemEntity]]:
	"""
	Convert top-level menus into sub-menu entities (one per MenuDef).
	"""
	return [
		MenuItemEntity(
			label=m.label,
			children=build_item_entities(m.items, font=font),
			is_submenu=True,
			font=font,
		)
		for m in menus
	]


def build_item_entities(items: Iterable[MenuItemLike], font: Any = None) -> list[Optional[MenuItemEntity]]:
	out: list[Optional[MenuItemEntity]] = []
	for it in normalize_items(items):
		if isinstance(it, MenuSeparator):
			out.append(None)
		elif isinstance(it, MenuSubmenu):
			out.append(
				MenuItemEntity(
					label=it.label,
					children=build_item_entities(it.items, font=font),
					is_submenu=True,
					font=font,
				)
			)
		else:
			out.append(MenuItemEntity(label=it.label, font=font))
	return out


def underline_index(label: str | None, mnemonic: str | None) -> int:
	"""
	Index of the character Tk should underline, or -1.

	Searches after any breadcrumb prefix first (that is where the mnemonic was
	chosen from), exact case before case-insensitive.
	"""
	if not label or not mnemonic:
		return -1

	start = len(BREADCRUMB_PREFIX) if label.startswith(BREADCRUMB_PREFIX) else 0

	for offset in (start, 0):
		idx = label.find(mnemonic, offset)
		if idx >= 0:
			return idx

	idx = label.lower().find(mnemonic.lower(), start)
	if idx >= 0:
		return idx
	return label.lower().find(mnemonic.lower())
