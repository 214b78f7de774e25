# ---------------------------------------------------------------------------
# File: menu_defs.py
# ---------------------------------------------------------------------------
# Description:
#	Menu definition types for pymnemonic.
#
# Notes:
#	- Mnemonics are never written here; MenuBar allocates them at render time.
#	- Back-compat: MenuItemLike accepts a plain str (label-only command)
#	  and None (separator).
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/15/2026	pymnemonic dev				Initial coding / release
# 10/16/2026	pymnemonic dev				Add normalize_items (shared by MenuBar and entity builder)
# ---------------------------------------------------------------------------

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Iterable, Optional, Union, TypeAlias


# Convenience alias for legacy separators in menu item tuples (optional).
SEP: None = None


@dataclass(frozen=True, slots=True)
class MenuSeparator:
	"""
	Explicit separator token for menu items.
	"""
	pass


@dataclass(frozen=True, slots=True)
class MenuCommand:
	"""
	MenuCommand

	label:			Text shown in the menu (mnemonic is picked from it)
	command:		Optional callable run when the item is selected
	accelerator:	Optional shortcut hint shown on the right (e.g., "Ctrl+S")
	"""
	label: str
	command: Optional[Callable[[], Any]] = None
	accelerator: Optional[str] = None


@dataclass(frozen=True, slots=True)
class MenuSubmenu:
	"""
	MenuSubmenu

	label:	Submenu label
	items:	Submenu items (typed items plus legacy str/None).
	"""
	label: str
	items: tuple["MenuItemLike", ...] = field(default_factory=tuple)


MenuItem: TypeAlias = Union[MenuCommand, MenuSeparator, MenuSubmenu]
MenuItemLike: TypeAlias = Union[MenuItem, Optional[str]]	# Back-compat: str=label, None=separator


@dataclass(frozen=True, slots=True)
class MenuDef:
	"""
	MenuDef

	label:	Top-level menu label (e.g., "File")
	items:	Tuple of MenuItemLike.
	"""
	label: str
	items: tuple[MenuItemLike, ...] = field(default_factory=tuple)


def normalize_items(items: Iterable[MenuItemLike]) -> tuple[MenuItem, ...]:
	"""
	Normalize legacy item representations into typed MenuItem objects.

	Legacy:
		- "Label" -> MenuCommand("Label")
		- None -> MenuSeparator()
	"""
	out: list[MenuItem] = []
	for it in items:
		if it is None:
			out.append(MenuSeparator())
		elif isinstance(it, str):
			out.append(MenuCommand(it))
		else:
			out.append(it)
	return tuple(out)
