# ---------------------------------------------------------------------------
# File: test_measure.py
# ---------------------------------------------------------------------------
# Description:
#	Unit tests for text measurers.
#
# Notes:
#	- TkFontMeasurer tests need a Tk interpreter and skip without a display.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/13/2026	pymnemonic dev				Initial tests
# 10/15/2026	pymnemonic dev				Add accepts() coverage
# 10/19/2026	pymnemonic dev				Cover deleted fonts and clear()
# ---------------------------------------------------------------------------

from __future__ import annotations

import tkinter as tk
import tkinter.font as tkfont

import pytest

from pymnemonic.mnemonics.allocator import MnemonicAllocator
from pymnemonic.mnemonics.measure import (
	BoundMeasurer,
	MeasureError,
	TableMeasurer,
	TextMeasurer,
	TkFontMeasurer,
	UniformMeasurer,
)
from pymnemonic.mnemonics.model import MenuItemEntity
from pymnemonic.mnemonics.patterns import EMPTY_TABLE


@pytest.fixture
def tk_root():
	try:
		root = tk.Tk()
	except tk.TclError as ex:
		pytest.skip(f"Tk not available: {ex}")
	root.withdraw()
	try:
		yield root
	finally:
		root.destroy()


def test_uniform_measurer():
	m = UniformMeasurer(char_width=7.0)
	assert m.width("W", None) == 7.0
	assert m.accepts(None)
	assert not UniformMeasurer(require_font=True).accepts(None)
	assert UniformMeasurer(require_font=True).accepts("any")


def test_table_measurer_defaults():
	m = TableMeasurer({"i": 2}, default=5.0)
	assert m.width("i", None) == 2.0
	assert m.width("m", None) == 5.0


def test_measurers_satisfy_protocol():
	assert isinstance(UniformMeasurer(), TextMeasurer)
	assert isinstance(TableMeasurer(), TextMeasurer)
	assert isinstance(TkFontMeasurer(), TextMeasurer)


def test_bound_measurer_passes_font():
	calls: list[tuple[str, object]] = []

	class _Spy:
		def accepts(self, font):
			return True

		def width(self, ch, font):
			calls.append((ch, font))
			return 3.0

	width = BoundMeasurer(_Spy(), "menu-font")
	assert width("x") == 3.0
	assert calls == [("x", "menu-font")]


def test_tk_measurer_rejects_missing_font():
	assert not TkFontMeasurer().accepts(None)


def test_tk_measurer_measures_and_caches(tk_root):
	font = tkfont.Font(root=tk_root, family="Courier", size=12)
	m = TkFontMeasurer(root=tk_root)

	assert m.accepts(font)
	w = m.width("M", font)
	assert w > 0
	assert m.width("M", font) == w


def test_tk_measurer_resolves_named_fonts(tk_root):
	m = TkFontMeasurer(root=tk_root)
	assert m.accepts("TkMenuFont")
	assert m.width("A", "TkMenuFont") > 0
	assert m.width("A", ("Courier", 10)) > 0


def test_tk_measurer_clear_drops_cached_widths(tk_root):
	m = TkFontMeasurer(root=tk_root)
	m.width("M", "TkMenuFont")
	assert m._cache

	m.clear()

	assert m._cache == {}
	assert m._fonts == {}


class _UnmeasurableFont(tkfont.Font):
	"""
	Font stand-in that needs no Tk interpreter: attributes read fine but
	measuring fails.
	"""
	def __init__(self) -> None:
		pass

	def cget(self, option):
		return {"family": "Broken", "size": 9, "weight": "normal", "slant": "roman"}[option]

	def measure(self, text, displayof=None):
		raise tk.TclError("cannot measure")


class _DeletedFont(tkfont.Font):
	"""
	Font stand-in for a named font that was deleted: every Tk call fails.
	"""
	def __init__(self) -> None:
		pass

	def cget(self, option):
		raise tk.TclError('named font "font1" does not exist')

	def measure(self, text, displayof=None):
		raise tk.TclError('named font "font1" does not exist')


def test_tk_measurer_wraps_measure_errors():
	m = TkFontMeasurer()
	font = _UnmeasurableFont()

	assert m.accepts(font)
	with pytest.raises(MeasureError):
		m.width("A", font)


def test_tk_measurer_reports_deleted_font_as_measure_error():
	m = TkFontMeasurer()
	font = _DeletedFont()

	with pytest.raises(MeasureError):
		m.accepts(font)
	with pytest.raises(MeasureError):
		m.width("A", font)


def test_allocator_skips_list_whose_font_was_deleted():
	items = [MenuItemEntity("File", font=_DeletedFont())]

	report = MnemonicAllocator(table=EMPTY_TABLE, measurer=TkFontMeasurer()).allocate(items)

	assert report.skipped
	assert items[0].mnemonic is None


def test_allocator_degrades_when_measuring_fails():
	items = [MenuItemEntity("File", font=_UnmeasurableFont()), MenuItemEntity("Fig", font=_UnmeasurableFont())]

	report = MnemonicAllocator(table=EMPTY_TABLE, measurer=TkFontMeasurer()).allocate(items)

	# second-letter and ranked stages need widths; "Fig" has nothing else left
	assert not report.skipped
	assert [it.mnemonic for it in items] == ["F", None]
