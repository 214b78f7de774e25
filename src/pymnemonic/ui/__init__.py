# ---------------------------------------------------------------------------
# File: ui/__init__.py
# ---------------------------------------------------------------------------
# Description:
#   Public UI package surface for pymnemonic.
#
# Notes:
#   - Uses lazy exports to avoid circular imports (PEP 562).
#   - Do NOT import from pymnemonic.ui inside ui modules; import specific modules instead.
# ---------------------------------------------------------------------------

from __future__ import annotations

from typing import TYPE_CHECKING, Any

__all__ = [
	# Menu model
	"MenuDef", "MenuCommand", "MenuSubmenu", "MenuSeparator", "SEP",

	# Tk rendering
	"MenuBar",
	"mnemonics_supported",
	"set_menu_mnemonics",

	# Entity bridge
	"build_entities",
	"underline_index",
]

# Map public name -> (module, attribute)
_EXPORTS: dict[str, tuple[str, str]] = {
	"MenuDef": ("pymnemonic.ui.menu_defs", "MenuDef"),
	"MenuCommand": ("pymnemonic.ui.menu_defs", "MenuCommand"),
	"MenuSubmenu": ("pymnemonic.ui.menu_defs", "MenuSubmenu"),
	"MenuSeparator": ("pymnemonic.ui.menu_defs", "MenuSeparator"),
	"SEP": ("pymnemonic.ui.menu_defs", "SEP"),

	"MenuBar": ("pymnemonic.ui.menubar", "MenuBar"),
	"mnemonics_supported": ("pymnemonic.ui.menubar", "mnemonics_supported"),
	"set_menu_mnemonics": ("pymnemonic.ui.tk_menus", "set_menu_mnemonics"),

	"build_entities": ("pymnemonic.ui.entities", "build_entities"),
	"underline_index": ("pymnemonic.ui.entities", "underline_index"),
}

def __getattr__(name: str) -> Any:
	"""
	Lazy attribute resolver for pymnemonic.ui exports.
	"""
	try:
		mod_name, attr_name = _EXPORTS[name]
	except KeyError as ex:
		raise AttributeError(f"module {__name__!r} has no attribute {name!r}") from ex

	import importlib
	mod = importlib.import_module(mod_name)
	return getattr(mod, attr_name)

def __dir__() -> list[str]:
	return sorted(set(list(globals().keys()) + list(__all__)))

if TYPE_CHECKING:
	from pymnemonic.ui.menu_defs import MenuDef, MenuCommand, MenuSubmenu, MenuSeparator, SEP
	from pymnemonic.ui.menubar import MenuBar, mnemonics_supported
	from pymnemonic.ui.tk_menus import set_menu_mnemonics
	from pymnemonic.ui.entities import build_entities, underline_index
