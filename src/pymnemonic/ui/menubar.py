# ---------------------------------------------------------------------------
# File: menubar.py
# ---------------------------------------------------------------------------
# Description:
#	MenuBar component for pymnemonic (Tk Menu renderer with allocated mnemonics).
#
# Notes:
#	- Mnemonics are allocated from labels on every rebuild; MenuDefs carry none.
#	- On macOS menus never show mnemonics (Apple HIG), so underline stays -1.
#	- _populate_dropdown() works with any object exposing add_command /
#	  add_cascade / add_separator, which keeps tests headless (FakeMenu).
#	- Measuring uses TkFontMeasurer once mounted; before that (and in tests)
#	  an injected measurer or UniformMeasurer.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/15/2026	pymnemonic dev				Initial coding / release
# 10/16/2026	pymnemonic dev				Allocate mnemonics per sibling list via TreeWalker
# 10/17/2026	pymnemonic dev				Skip mnemonics on macOS
# 10/17/2026	pymnemonic dev				Add menu.select telemetry
# 10/19/2026	pymnemonic dev				Keep rendered entities; re-measure on redraw
# ---------------------------------------------------------------------------

from __future__ import annotations

from typing import Any, Optional, Sequence

import sys
import tkinter as tk

from pymnemonic.core.logging import get_app_logger
from pymnemonic.core.telemetry import Telemetry, get_telemetry
from pymnemonic.mnemonics.allocator import MnemonicAllocator
from pymnemonic.mnemonics.measure import TextMeasurer, TkFontMeasurer, UniformMeasurer
from pymnemonic.mnemonics.model import MenuItemEntity
from pymnemonic.mnemonics.patterns import DEFAULT_TABLE, PredefinedPatternTable
from pymnemonic.mnemonics.walker import TreeWalker
from pymnemonic.ui.entities import build_entities, underline_index
from pymnemonic.ui.menu_defs import (
	MenuCommand,
	MenuDef,
	MenuItemLike,
	MenuSeparator,
	MenuSubmenu,
	normalize_items,
)


log = get_app_logger("ui.menubar")

# Named Tk font used for menu entries.
MENU_FONT = "TkMenuFont"


def mnemonics_supported(platform: str | None = None) -> bool:
	"""
	False where native menus do not use mnemonics (macOS).
	"""
	plat = platform if platform is not None else sys.platform
	return plat != "darwin"


class MenuBar:
	"""
	MenuBar

	Tk menubar that renders dropdown menus from MenuDefs and underlines an
	allocated mnemonic on every entry.

	Declarative inputs:
		- menus: Menu model to render
		- table: Predefined pattern table (KDE defaults unless overridden)
		- measurer: Optional TextMeasurer (default: TkFontMeasurer once mounted)
		- font: Font context handed to the measurer for every entry
		- platform: Override sys.platform (tests)
		- telemetry: Optional Telemetry (default: global instance)
	"""

	def __init__(
		self,
		*,
		menus: tuple[MenuDef, ...] = (),
		table: PredefinedPatternTable = DEFAULT_TABLE,
		measurer: TextMeasurer | None = None,
		font: Any = MENU_FONT,
		platform: str | None = None,
		telemetry: Telemetry | None = None,
	) -> None:
		self._menus = menus
		self._table = table
		self._measurer = measurer
		self._font = font
		self._platform = platform
		self._telemetry = telemetry

		self._app: tk.Misc | None = None
		self._menubar: tk.Menu | None = None
		self._entities: list[Optional[MenuItemEntity]] = []

	# -----------------------------------------------------------------------
	# Lifecycle
	# -----------------------------------------------------------------------

	def mount(self, parent: tk.Misc) -> None:
		"""
		Attach a tk.Menu to the toplevel window.
		"""
		app = parent.winfo_toplevel()
		self._app = app

		if self._measurer is None:
			self._measurer = TkFontMeasurer(root=app)

		menubar = tk.Menu(app, tearoff=0)
		self._menubar = menubar
		app.configure(menu=menubar)

		self._rebuild()

	def redraw(self) -> None:
		"""
		Rebuild and re-measure (fonts may have changed since the last build).
		"""
		if isinstance(self._measurer, TkFontMeasurer):
			self._measurer.clear()
		self._rebuild()

	def set_menus(self, menus: tuple[MenuDef, ...]) -> None:
		self._menus = menus
		self._rebuild()

	def destroy(self) -> None:
		app = self._app
		if app is not None and isinstance(app, (tk.Tk, tk.Toplevel)):
			app.configure(menu=tk.Menu(app, tearoff=0))

		self._menubar = None
		self._app = None
		self._entities = []

	# -----------------------------------------------------------------------
	# Declarative surface
	# -----------------------------------------------------------------------

	@property
	def menus(self) -> tuple[MenuDef, ...]:
		return self._menus

	@property
	def entities(self) -> list[Optional[MenuItemEntity]]:
		"""
		Entities behind the menus currently rendered (empty until mounted).
		"""
		return self._entities

	def allocate(self) -> list[Optional[MenuItemEntity]]:
		"""
		Build entities for the current menus and allocate mnemonics.

		Test-friendly: no Tk required when a headless measurer is injected.
		On platforms without mnemonics, entities come back unassigned.
		"""
		entities = build_entities(self._menus, font=self._font)
		if not mnemonics_supported(self._platform):
			return entities

		allocator = MnemonicAllocator(
			table=self._table,
			measurer=self._measurer if self._measurer is not None else UniformMeasurer(),
			telemetry=self._telemetry,
		)
		TreeWalker(allocator).apply(entities)
		return entities

	# -----------------------------------------------------------------------
	# Internals
	# -----------------------------------------------------------------------

	def _rebuild(self) -> None:
		if self._app is None or self._menubar is None:
			return

		self._menubar.delete(0, "end")

		entities = self.allocate()
		self._entities = entities
		for m, ent in zip(self._menus, entities):
			dropdown = tk.Menu(self._menubar, tearoff=0)
			children = ent.children if ent is not None else []
			self._populate_dropdown(dropdown, m.items, children, parent_path=(m.label,))
			self._menubar.add_cascade(
				label=m.label,
				menu=dropdown,
				underline=underline_index(m.label, ent.mnemonic if ent else None),
			)

	def _populate_dropdown(
		self,
		dropdown: Any,
		items: tuple[MenuItemLike, ...],
		entities: Sequence[Optional[MenuItemEntity]],
		*,
		parent_path: tuple[str, ...] = (),
	) -> None:
		typed_items = normalize_items(items)
		if len(typed_items) != len(entities):
			raise ValueError(
				f"Menu {' > '.join(parent_path)!r}: {len(typed_items)} items but {len(entities)} entities"
			)

		for item, ent in zip(typed_items, entities):
			if isinstance(item, MenuSeparator):
				dropdown.add_separator()
				continue

			mnemonic = ent.mnemonic if ent is not None else None
			underline = underline_index(item.label, mnemonic)

			if isinstance(item, MenuSubmenu):
				# Runtime: use real tk.Menu
				# Tests: use FakeMenu.__class__ so we remain headless
				if isinstance(dropdown, tk.Menu):
					submenu = tk.Menu(dropdown, tearoff=0)
				else:
					submenu = dropdown.__class__()

				self._populate_dropdown(
					submenu,
					item.items,
					ent.children if ent is not None else [],
					parent_path=parent_path + (item.label,),
				)
				dropdown.add_cascade(label=item.label, menu=submenu, underline=underline)
				continue

			menu_path = " > ".join(parent_path + (item.label,))
			dropdown.add_command(
				label=item.label,
				accelerator=item.accelerator or "",
				underline=underline,
				command=lambda it=item, mp=menu_path: self._invoke(it, menu_path=mp),
			)

	def _invoke(self, item: MenuCommand, *, menu_path: str | None = None) -> None:
		telemetry = self._telemetry if self._telemetry is not None else get_telemetry()
		attrs: dict[str, Any] = {"label": item.label}
		if menu_path:
			attrs["menu_path"] = menu_path
		telemetry.event("menu.select", attrs)

		if item.command is None:
			log.debug("Menu item %r has no command", menu_path or item.label)
			return
		item.command()
