# ---------------------------------------------------------------------------
# File: app/__init__.py
# ---------------------------------------------------------------------------
# Description:
#   Public app package surface for pymnemonic.
#
# Notes:
#   - Lazy exports so importing pymnemonic.app does not pull in ttkthemes/Tk.
# ---------------------------------------------------------------------------

from __future__ import annotations

from typing import TYPE_CHECKING, Any

__all__ = [
	"App",
	"AppConfig",
	"build_demo_menus",
]

_EXPORTS: dict[str, tuple[str, str]] = {
	"App": ("pymnemonic.app.app", "App"),
	"AppConfig": ("pymnemonic.app.app", "AppConfig"),
	"build_demo_menus": ("pymnemonic.app.demo_menus", "build_demo_menus"),
}

def __getattr__(name: str) -> Any:
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
	from pymnemonic.app.app import App, AppConfig
	from pymnemonic.app.demo_menus import build_demo_menus
