# ---------------------------------------------------------------------------
# File: mnemonics/__init__.py
# ---------------------------------------------------------------------------
# Description:
#	Mnemonic allocation core (no Tk widgets required).
#
# Notes:
#	Re-export the stable public surface.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/14/2026	pymnemonic dev				Initial coding / release
# ---------------------------------------------------------------------------

from __future__ import annotations

from .allocator import BREADCRUMB_PREFIX, STAGES, MnemonicAllocator
from .measure import BoundMeasurer, MeasureError, TableMeasurer, TextMeasurer, TkFontMeasurer, UniformMeasurer
from .model import AllocationReport, AllocationState, Assignment, MenuItemEntity
from .patterns import DEFAULT_TABLE, EMPTY_TABLE, PatternError, PredefinedPatternTable
from .ranker import PENALIZED, rank_characters
from .walker import TreeWalker, apply_mnemonics

__all__ = [
	"BREADCRUMB_PREFIX",
	"STAGES",
	"MnemonicAllocator",
	"BoundMeasurer",
	"MeasureError",
	"TableMeasurer",
	"TextMeasurer",
	"TkFontMeasurer",
	"UniformMeasurer",
	"AllocationReport",
	"AllocationState",
	"Assignment",
	"MenuItemEntity",
	"DEFAULT_TABLE",
	"EMPTY_TABLE",
	"PatternError",
	"PredefinedPatternTable",
	"PENALIZED",
	"rank_characters",
	"TreeWalker",
	"apply_mnemonics",
]
