# ---------------------------------------------------------------------------
# File: allocator.py
# ---------------------------------------------------------------------------
# Description:
#	Assigns a unique mnemonic to each item of one sibling list.
#
# Notes:
#	Each item tries these stages in order; the first hit wins:
#		1) Predefined (KDE) table match on the letters-only label.
#		2) First letter of a word, uppercase ASCII only.
#		3) First letter of a word, lowercase ASCII only.
#		4) Second ASCII letter, if at least half as wide as 'A'.
#		5) Any ASCII letter, widest first (see ranker.py).
#		6) Any digit, left to right.
#	If every stage fails the item keeps no mnemonic.
#
#	- Mnemonics are unique case-insensitively within the list.
#	- A letter next to an underscore is never chosen for that item.
#	- Labels starting with "sketchbook → " are matched on the text after it
#	  (the underscore scan still sees the whole label).
#	- A list where no item has a usable font is left untouched.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/13/2026	pymnemonic dev				Initial coding / release
# 10/14/2026	pymnemonic dev				Split stages into plain functions + AllocationReport
# 10/15/2026	pymnemonic dev				Fall back to the last usable font in the list
# 10/16/2026	pymnemonic dev				Add telemetry counters for assigned/unassigned items
# ---------------------------------------------------------------------------

from __future__ import annotations

import re
from dataclasses import dataclass
from itertools import groupby
from typing import Any, Callable, Optional, Sequence

from pymnemonic.core.logging import get_app_logger
from pymnemonic.core.telemetry import Telemetry, get_telemetry
from pymnemonic.mnemonics.measure import BoundMeasurer, MeasureError, TextMeasurer, UniformMeasurer
from pymnemonic.mnemonics.model import (
	STAGE_DIGIT,
	STAGE_LOWER_INITIAL,
	STAGE_PREDEFINED,
	STAGE_RANKED,
	STAGE_SECOND_LETTER,
	STAGE_UPPER_INITIAL,
	AllocationReport,
	AllocationState,
	Assignment,
	MenuItemEntity,
)
from pymnemonic.mnemonics.patterns import DEFAULT_TABLE, PredefinedPatternTable, ascii_letters
from pymnemonic.mnemonics.ranker import WidthFn, rank_characters


log = get_app_logger("mnemonics")

BREADCRUMB_PREFIX = "sketchbook → "

# Reference glyph for the second-letter width gate.
WIDE_REFERENCE = "A"

_NON_DIGIT = re.compile(r"[^0-9]")

# Marker for an item whose own font the measurer cannot use.
_UNUSABLE = object()


# ---------------------------------------------------------------------------
# Label helpers
# ---------------------------------------------------------------------------

def strip_breadcrumb(label: str) -> str:
	if label.startswith(BREADCRUMB_PREFIX):
		return label[len(BREADCRUMB_PREFIX):]
	return label


def banned_chars(label: str) -> frozenset[str]:
	"""
	Lowercased characters directly before/after each underscore.
	"""
	banned: set[str] = set()
	for i, ch in enumerate(label):
		if ch != "_":
			continue
		if i > 0:
			banned.add(label[i - 1].lower())
		if i + 1 < len(label):
			banned.add(label[i + 1].lower())
	return frozenset(banned)


def words(text: str) -> list[str]:
	"""
	Split on anything that is not alphabetic (Unicode-aware).
	"""
	return ["".join(run) for is_alpha, run in groupby(text, key=str.isalpha) if is_alpha]


def digits(text: str) -> str:
	return _NON_DIGIT.sub("", text)


def _is_upper_ascii(ch: str) -> bool:
	return "A" <= ch <= "Z"


def _is_lower_ascii(ch: str) -> bool:
	return "a" <= ch <= "z"


# ---------------------------------------------------------------------------
# Stages
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Candidate:
	"""
	What the stages see of one item.

	text:	Label with any breadcrumb prefix removed.
	banned:	Characters this item may not use.
	width:	Width function bound to the item's font.
	table:	Predefined pattern table.
	"""
	text: str
	banned: frozenset[str]
	width: WidthFn
	table: PredefinedPatternTable


Stage = Callable[[Candidate, AllocationState], Optional[str]]


def stage_predefined(candidate: Candidate, state: AllocationState) -> Optional[str]:
	mnem = candidate.table.lookup(candidate.text)
	if mnem is None or not state.is_free(mnem, candidate.banned):
		return None
	return mnem


def _word_initial(candidate: Candidate, state: AllocationState, accept: Callable[[str], bool]) -> Optional[str]:
	for word in words(candidate.text):
		first = word[0]
		if not state.is_free(first, candidate.banned):
			continue
		if accept(first):
			return first
	return None


def stage_upper_initial(candidate: Candidate, state: AllocationState) -> Optional[str]:
	return _word_initial(candidate, state, _is_upper_ascii)


def stage_lower_initial(candidate: Candidate, state: AllocationState) -> Optional[str]:
	return _word_initial(candidate, state, _is_lower_ascii)


def stage_second_letter(candidate: Candidate, state: AllocationState) -> Optional[str]:
	letters = ascii_letters(candidate.text)
	if len(letters) < 2:
		return None

	second = letters[1]
	if not state.is_free(second, candidate.banned):
		return None
	if 2 * candidate.width(second) < candidate.width(WIDE_REFERENCE):
		return None
	return second


def stage_ranked(candidate: Candidate, state: AllocationState) -> Optional[str]:
	for ch in rank_characters(ascii_letters(candidate.text), candidate.width):
		if state.is_free(ch, candidate.banned):
			return ch
	return None


def stage_digit(candidate: Candidate, state: AllocationState) -> Optional[str]:
	for ch in digits(candidate.text):
		if state.is_free(ch, candidate.banned):
			return ch
	return None


STAGES: tuple[tuple[str, Stage], ...] = (
	(STAGE_PREDEFINED, stage_predefined),
	(STAGE_UPPER_INITIAL, stage_upper_initial),
	(STAGE_LOWER_INITIAL, stage_lower_initial),
	(STAGE_SECOND_LETTER, stage_second_letter),
	(STAGE_RANKED, stage_ranked),
	(STAGE_DIGIT, stage_digit),
)


# ---------------------------------------------------------------------------
# Allocator
# ---------------------------------------------------------------------------

class MnemonicAllocator:
	"""
	MnemonicAllocator

	Runs the stage chain over one sibling list, writing item.mnemonic in place.

	Inputs:
		- table:		Predefined pattern table (DEFAULT_TABLE = KDE defaults)
		- measurer:		TextMeasurer used for stages 4 and 5
		- telemetry:	Optional Telemetry (defaults to the global instance)
	"""

	def __init__(
		self,
		*,
		table: PredefinedPatternTable = DEFAULT_TABLE,
		measurer: TextMeasurer | None = None,
		telemetry: Telemetry | None = None,
	) -> None:
		self.table = table
		self.measurer: TextMeasurer = measurer if measurer is not None else UniformMeasurer()
		self._telemetry = telemetry

	@property
	def telemetry(self) -> Telemetry:
		return self._telemetry if self._telemetry is not None else get_telemetry()

	def allocate(self, items: Sequence[Optional[MenuItemEntity]]) -> AllocationReport:
		"""
		Assign mnemonics to items (None entries are skipped).
		"""
		present = [it for it in items if it is not None]
		if not present:
			return AllocationReport(skipped=True)

		fonts = self._usable_fonts(present)
		fallback = next((f for f in reversed(fonts) if f is not _UNUSABLE), _UNUSABLE)
		if fallback is _UNUSABLE:
			log.warning("No usable font for %d menu item(s); skipping mnemonic pass", len(present))
			return AllocationReport(skipped=True)

		report = AllocationReport()
		state = AllocationState()

		with self.telemetry.timer("mnemonics.pass_ms", {"items": len(present)}):
			for item in present:
				item.mnemonic = None

			for item, font in zip(present, fonts):
				bound = BoundMeasurer(self.measurer, font if font is not _UNUSABLE else fallback)
				report.assignments.append(self._assign(item, state, bound))

		return report

	# -----------------------------------------------------------------------
	# Internals
	# -----------------------------------------------------------------------

	def _usable_fonts(self, items: list[MenuItemEntity]) -> list[Any]:
		out: list[Any] = []
		for item in items:
			try:
				ok = self.measurer.accepts(item.font)
			except MeasureError as ex:
				log.debug("Font rejected for %r: %s", item.label, ex)
				ok = False
			out.append(item.font if ok else _UNUSABLE)
		return out

	def _assign(self, item: MenuItemEntity, state: AllocationState, width: WidthFn) -> Assignment:
		label = item.label
		text = strip_breadcrumb(label) if label else ""
		if not text:
			return Assignment(label=label, mnemonic=None, stage=None)

		candidate = Candidate(
			text=text,
			banned=banned_chars(label or ""),
			width=width,
			table=self.table,
		)

		for stage_name, stage in STAGES:
			try:
				mnem = stage(candidate, state)
			except MeasureError as ex:
				log.warning("Measuring failed for %r during %s: %s", label, stage_name, ex)
				continue
			if mnem is None:
				continue

			state.commit(mnem)
			item.mnemonic = mnem
			log.debug("Mnemonic %r -> %r (%s)", mnem, label, stage_name)
			self.telemetry.counter("mnemonics.assigned", 1, {"stage": stage_name})
			return Assignment(label=label, mnemonic=mnem, stage=stage_name)

		log.debug("No mnemonic available for %r", label)
		self.telemetry.counter("mnemonics.unassigned", 1, {})
		return Assignment(label=label, mnemonic=None, stage=None)
