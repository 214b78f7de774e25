# ---------------------------------------------------------------------------
# File: measure.py
# ---------------------------------------------------------------------------
# Description:
#	Glyph width measurement used to break ties between candidate mnemonics.
#
# Notes:
#	- The allocator never builds fonts. It receives a TextMeasurer and the
#	  font context attached to each item.
#	- UniformMeasurer / TableMeasurer are headless (tests, non-Tk callers).
#	- TkFontMeasurer wraps tkinter.font.Font.measure with a per-font cache.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/12/2026	pymnemonic dev				Initial coding / release
# 10/13/2026	pymnemonic dev				Add TkFontMeasurer with width cache
# 10/15/2026	pymnemonic dev				Add accepts() so a list with no usable font becomes a no-op
# 10/19/2026	pymnemonic dev				Report deleted fonts as MeasureError; clear() on redraw
# ---------------------------------------------------------------------------

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping, Protocol, runtime_checkable

import tkinter as tk
import tkinter.font as tkfont


class MeasureError(RuntimeError):
	"""
	Raised by a measurer that cannot use the font context it was given.
	"""


@runtime_checkable
class TextMeasurer(Protocol):
	"""
	Reports the rendered advance width of a single character.
	"""

	def accepts(self, font: Any) -> bool: ...
	def width(self, ch: str, font: Any) -> float: ...


@dataclass(frozen=True, slots=True)
class UniformMeasurer:
	"""
	Every character has the same width.

	require_font:	When True, items without a font context are unusable.
	"""
	char_width: float = 1.0
	require_font: bool = False

	def accepts(self, font: Any) -> bool:
		return font is not None or not self.require_font

	def width(self, ch: str, font: Any) -> float:
		return self.char_width


@dataclass(frozen=True, slots=True)
class TableMeasurer:
	"""
	Widths looked up from a mapping; unknown characters get default.
	"""
	widths: Mapping[str, float] = field(default_factory=dict)
	default: float = 1.0
	require_font: bool = False

	def accepts(self, font: Any) -> bool:
		return font is not None or not self.require_font

	def width(self, ch: str, font: Any) -> float:
		return float(self.widths.get(ch, self.default))


class TkFontMeasurer:
	"""
	TkFontMeasurer

	Measures characters with tkinter.font.Font.measure().

	font may be a tkinter.font.Font or anything tkinter.font.Font accepts as
	font= (a named font such as "TkMenuFont", or a tuple description).
	Results are cached per (font key, character).
	"""

	def __init__(self, root: tk.Misc | None = None) -> None:
		self._root = root
		self._fonts: dict[Any, tkfont.Font] = {}
		self._cache: dict[tuple[Any, str], float] = {}

	def accepts(self, font: Any) -> bool:
		if font is None:
			return False
		self._font_key(self._resolve(font))
		return True

	def width(self, ch: str, font: Any) -> float:
		resolved = self._resolve(font)
		key = (self._font_key(resolved), ch)

		cached = self._cache.get(key)
		if cached is not None:
			return cached

		try:
			w = float(resolved.measure(ch))
		except tk.TclError as ex:
			raise MeasureError(f"Cannot measure {ch!r}: {ex}") from ex

		self._cache[key] = w
		return w

	def clear(self) -> None:
		self._fonts.clear()
		self._cache.clear()

	# -----------------------------------------------------------------------
	# Internals
	# -----------------------------------------------------------------------

	def _resolve(self, font: Any) -> tkfont.Font:
		if isinstance(font, tkfont.Font):
			return font

		try:
			lookup_key = font if isinstance(font, (str, tuple)) else repr(font)
			existing = self._fonts.get(lookup_key)
			if existing is not None:
				return existing

			if isinstance(font, str):
				try:
					resolved = tkfont.nametofont(font, root=self._root)
				except tk.TclError:
					resolved = tkfont.Font(root=self._root, font=font)
			else:
				resolved = tkfont.Font(root=self._root, font=font)
		except (tk.TclError, RuntimeError, TypeError) as ex:
			raise MeasureError(f"Unusable font {font!r}: {ex}") from ex

		self._fonts[lookup_key] = resolved
		return resolved

	def _font_key(self, font: tkfont.Font) -> tuple[Any, ...]:
		"""
		Cache key from the font attributes; fails for a deleted font.
		"""
		try:
			return (
				font.cget("family"),
				font.cget("size"),
				font.cget("weight"),
				font.cget("slant"),
			)
		except tk.TclError as ex:
			raise MeasureError(f"Font no longer exists: {ex}") from ex


@dataclass(frozen=True, slots=True)
class BoundMeasurer:
	"""
	A measurer bound to one font context: callable as width(ch).
	"""
	measurer: TextMeasurer
	font: Any

	def __call__(self, ch: str) -> float:
		return self.measurer.width(ch, self.font)
