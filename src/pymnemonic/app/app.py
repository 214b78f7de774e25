# ---------------------------------------------------------------------------
# File: app.py
# ---------------------------------------------------------------------------
# Description:
#	Preview window for pymnemonic: a themed Tk app whose menubar gets its
#	mnemonics allocated at startup, plus a table of the chosen mnemonics.
#
# Notes:
#	- ttkthemes.ThemedTk supplies the window theme ("theme" cfg key).
#	- Logging/telemetry are initialized from the same cfg.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/17/2026	pymnemonic dev				Initial coding / release
# 10/18/2026	pymnemonic dev				Add assignment table (menu path / mnemonic)
# 10/19/2026	pymnemonic dev				Table reads the rendered entities (no second pass)
# ---------------------------------------------------------------------------

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional, Sequence

import tkinter as tk
from tkinter import ttk

from ttkthemes import ThemedTk

from pymnemonic.core.logging import get_app_logger, init_logging
from pymnemonic.core.telemetry import init_telemetry
from pymnemonic.mnemonics.model import MenuItemEntity
from pymnemonic.ui.menu_defs import MenuDef
from pymnemonic.ui.menubar import MenuBar


log = get_app_logger("app")

DEFAULT_THEME = "arc"


@dataclass(frozen=True, slots=True)
class AppConfig:
	"""
	Light wrapper for config options (plain dict underneath).
	"""
	options: dict[str, Any] | None = None

	def get(self, key: str, default: Any = None) -> Any:
		if self.options is None:
			return default
		return self.options.get(key, default)


def flatten_assignments(
	entities: Sequence[Optional[MenuItemEntity]],
	parent_path: tuple[str, ...] = (),
) -> list[tuple[str, str]]:
	"""
	Return (menu path, mnemonic) rows in menu order; separators are skipped.
	"""
	rows: list[tuple[str, str]] = []
	for ent in entities:
		if ent is None:
			continue
		path = parent_path + (ent.label or "",)
		rows.append((" > ".join(path), ent.mnemonic or ""))
		if ent.is_submenu:
			rows.extend(flatten_assignments(ent.children, path))
	return rows


class App(ThemedTk):
	"""
	App

	Themed root window hosting a MenuBar and a table of its assignments.
	"""

	def __init__(
		self,
		menus: tuple[MenuDef, ...] = (),
		width: int | None = None,
		height: int | None = None,
		title: str | None = None,
		cfg: dict[str, Any] | None = None,
	) -> None:
		self.cfg = AppConfig(cfg)
		init_logging(self.cfg)
		init_telemetry(self.cfg)

		super().__init__(theme=str(self.cfg.get("theme", DEFAULT_THEME)))

		self.title_text = title or "pymnemonic"
		self.title(self.title_text)

		self.update_idletasks()
		self._apply_geometry(width, height)

		self.root_frame = ttk.Frame(self, padding=8)
		self.root_frame.pack(fill="both", expand=True)

		self.menubar = MenuBar(menus=menus)
		self.menubar.mount(self)

		self.table = self._build_table(self.root_frame)
		self.refresh_table()

	# -----------------------------------------------------------------------
	# Assignment table
	# -----------------------------------------------------------------------

	def refresh_table(self) -> None:
		"""
		Show every menu path with the mnemonic the menubar rendered.
		"""
		self.table.delete(*self.table.get_children())
		rows = flatten_assignments(self.menubar.entities)
		for path, mnemonic in rows:
			self.table.insert("", "end", values=(path, mnemonic))
		log.info("Previewing %d menu entries", len(rows))

	def _build_table(self, parent: tk.Misc) -> ttk.Treeview:
		table = ttk.Treeview(parent, columns=("path", "mnemonic"), show="headings")
		table.heading("path", text="Menu entry")
		table.heading("mnemonic", text="Mnemonic")
		table.column("path", width=360, anchor="w")
		table.column("mnemonic", width=90, anchor="center")

		scroll = ttk.Scrollbar(parent, orient="vertical", command=table.yview)
		table.configure(yscrollcommand=scroll.set)

		table.pack(side="left", fill="both", expand=True)
		scroll.pack(side="right", fill="y")
		return table

	# -----------------------------------------------------------------------
	# Window setup
	# -----------------------------------------------------------------------

	def _apply_geometry(self, width: int | None, height: int | None) -> None:
		screen_w = self.winfo_screenwidth()
		screen_h = self.winfo_screenheight()

		win_w = max(1, min(width if width is not None else 520, screen_w))
		win_h = max(1, min(height if height is not None else 420, screen_h))

		x = max(0, (screen_w - win_w) // 2)
		y = max(0, (screen_h - win_h) // 2)

		self.geometry(f"{win_w}x{win_h}+{x}+{y}")

	# -----------------------------------------------------------------------
	# Runtime
	# -----------------------------------------------------------------------

	def run(self) -> None:
		"""
		Run the Tk event loop.
		"""
		self.mainloop()

	def __repr__(self) -> str:
		return f"<{self.__class__.__name__} title={self.title_text!r}>"
