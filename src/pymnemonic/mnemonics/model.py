# ---------------------------------------------------------------------------
# File: model.py
# ---------------------------------------------------------------------------
# Description:
#	Data model for mnemonic allocation (menu items, per-list state, reports).
#
# Notes:
#	- MenuItemEntity is mutable: the allocator writes .mnemonic in place.
#	- AllocationState lives for exactly one sibling list.
#	- Nothing here depends on Tk.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/12/2026	pymnemonic dev				Initial coding / release
# 10/14/2026	pymnemonic dev				Add AllocationReport + stage names
# 10/15/2026	pymnemonic dev				Add optional font context per item
# ---------------------------------------------------------------------------

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional


# Stage names, in the order the allocator tries them.
STAGE_PREDEFINED = "predefined"
STAGE_UPPER_INITIAL = "upper_initial"
STAGE_LOWER_INITIAL = "lower_initial"
STAGE_SECOND_LETTER = "second_letter"
STAGE_RANKED = "ranked"
STAGE_DIGIT = "digit"


@dataclass(eq=False)
class MenuItemEntity:
	"""
	MenuItemEntity

	label:		Display text (may be None or empty).
	mnemonic:	Assigned accelerator character (written by the allocator).
	children:	Sub-items (empty for a leaf).
	is_submenu:	True when children should get their own allocation pass.
	font:		Font context the item renders with (opaque; handed to the measurer).
	"""
	label: Optional[str] = None
	mnemonic: Optional[str] = None
	children: list[Optional["MenuItemEntity"]] = field(default_factory=list)
	is_submenu: bool = False
	font: Any = None

	def __repr__(self) -> str:
		return f"<{self.__class__.__name__} label={self.label!r} mnemonic={self.mnemonic!r}>"


@dataclass(slots=True)
class AllocationState:
	"""
	Characters committed among the current sibling list.

	Holds only lowercase ASCII letters and digits, so "Save" and "Save As"
	cannot both end up with 'a'/'A'.
	"""
	taken: set[str] = field(default_factory=set)

	def is_free(self, ch: str, banned: frozenset[str]) -> bool:
		low = ch.lower()
		return low not in self.taken and low not in banned

	def commit(self, ch: str) -> None:
		self.taken.add(ch.lower())


@dataclass(frozen=True, slots=True)
class Assignment:
	"""
	Outcome for a single item of one allocation pass.

	stage is None when the item was left without a mnemonic.
	"""
	label: Optional[str]
	mnemonic: Optional[str]
	stage: Optional[str]


@dataclass(slots=True)
class AllocationReport:
	"""
	Result of one allocator call over one sibling list.

	skipped:	True when the pass was a no-op (empty list or no usable font).
	"""
	assignments: list[Assignment] = field(default_factory=list)
	skipped: bool = False

	def mnemonics(self) -> list[Optional[str]]:
		return [a.mnemonic for a in self.assignments]

	def unassigned(self) -> list[Assignment]:
		return [a for a in self.assignments if a.mnemonic is None]
