# ---------------------------------------------------------------------------
# File: patterns.py
# ---------------------------------------------------------------------------
# Description:
#	Predefined mnemonic table (KDE keyboard-accelerator defaults).
#
# Notes:
#	- Templates are lowercase, letters only, with '&' before the mnemonic letter.
#	- A template is a regular expression once '&' is removed, so ".+&handbook"
#	  matches "Pymnemonic Handbook" and "&configure.*" matches "Configure Editor".
#	- Order matters: the first matching template wins.
#	- Source list: https://techbase.kde.org/Projects/Usability/HIG/Keyboard_Accelerators
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/12/2026	pymnemonic dev				Initial coding / release
# 10/13/2026	pymnemonic dev				Compile templates once; validate '&' markers
# 10/16/2026	pymnemonic dev				Return the mnemonic cased as it appears in the label
# ---------------------------------------------------------------------------

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Iterable, Iterator, Optional


_NON_ASCII_ALPHA = re.compile(r"[^A-Za-z]")


class PatternError(ValueError):
	"""
	Raised when a predefined template cannot be compiled.
	"""


KDE_TEMPLATES: tuple[str, ...] = (
	"&file", "&new", "&open", "open&recent", "&save",
	"save&as", "saveacop&y", "saveas&template", "savea&ll", "reloa&d", "&print",
	"printpre&view", "&import", "e&xport", "&closefile", "clos&eallfiles", "&quit",
	"&edit", "&undo", "re&do", "cu&t", "&copy", "&paste", "&delete", "select&all",
	"dese&lect", "&find", "find&next", "findpre&vious", "&replace", "&gotoline",
	"&view", "&newview", "close&allviews", "&splitview", "&removeview",
	"splitter&orientation", "&horizontal", "&vertical", "view&mode", "&fullscreenmode",
	"&zoom", "zoom&in", "zoom&out", "zoomtopage&width", "zoomwhole&page", "zoom&factor",
	"&insert", "&format", "&go", "&up", "&back", "&forward", "&home", "&previouspage",
	"&nextpage", "&firstpage", "&lastpage", "read&updocument", "read&downdocument",
	"&gotopage", "&bookmarks", "&addbookmark", "bookmark&tabsasfolder",
	"&editbookmarks", "&newbookmarksfolder", "&tools", "&settings", "&toolbars",
	"configure&shortcuts", "configuretool&bars", "&configure.*", "&help", ".+&handbook",
	"&whatsthis", "report&bug", "&aboutprocessing", "about&kde", "&beenden",
)


def ascii_letters(label: str | None) -> str:
	"""
	Keep ASCII letters only, case preserved ("Save As..." -> "SaveAs").
	"""
	if not label:
		return ""
	return _NON_ASCII_ALPHA.sub("", label)


def normalize(label: str | None) -> str:
	"""
	Reduce a label to lowercase ASCII letters only ("Save As..." -> "saveas").
	"""
	return ascii_letters(label).lower()


@dataclass(frozen=True, slots=True)
class PredefinedPattern:
	"""
	One compiled table entry.

	template:	Source text (e.g., "open&recent").
	pattern:	Compiled regex; group 1 captures the mnemonic letter.
	mnemonic:	Lowercase accelerator letter.
	"""
	template: str
	pattern: re.Pattern[str]
	mnemonic: str

	@classmethod
	def compile(cls, template: str) -> "PredefinedPattern":
		idx = template.find("&")
		if idx < 0 or idx + 1 >= len(template):
			raise PatternError(f"Template {template!r} has no '&' mnemonic marker")

		mnemonic = template[idx + 1]
		if not ("a" <= mnemonic <= "z"):
			raise PatternError(
				f"Template {template!r}: '&' must precede a lowercase ASCII letter, got {mnemonic!r}"
			)

		head = template[:idx].replace("&", "")
		tail = template[idx + 2:].replace("&", "")
		try:
			pattern = re.compile(f"{head}({mnemonic}){tail}")
		except re.error as ex:
			raise PatternError(f"Template {template!r} is not a valid pattern: {ex}") from ex

		return cls(template=template, pattern=pattern, mnemonic=mnemonic)

	def match(self, letters: str) -> Optional[str]:
		"""
		Return the mnemonic letter as cased in letters, or None.

		letters:	ASCII letters of the label, case preserved.
		"""
		m = self.pattern.fullmatch(letters.lower())
		if m is None:
			return None
		return letters[m.start(1)]


class PredefinedPatternTable:
	"""
	PredefinedPatternTable

	Ordered list of (pattern, mnemonic) pairs. lookup() returns the mnemonic of
	the first pattern that matches the whole normalized label, re-cased to the
	matching letter of the label ("Open Recent" -> "R").
	"""

	def __init__(self, entries: Iterable[PredefinedPattern] = ()) -> None:
		self._entries: tuple[PredefinedPattern, ...] = tuple(entries)

	@classmethod
	def from_templates(cls, templates: Iterable[str]) -> "PredefinedPatternTable":
		return cls(PredefinedPattern.compile(t) for t in templates)

	def __len__(self) -> int:
		return len(self._entries)

	def __iter__(self) -> Iterator[PredefinedPattern]:
		return iter(self._entries)

	def lookup(self, label: str | None) -> Optional[str]:
		letters = ascii_letters(label)
		if not letters:
			return None

		for entry in self._entries:
			found = entry.match(letters)
			if found is not None:
				return found
		return None


# Compiled once at import.
DEFAULT_TABLE = PredefinedPatternTable.from_templates(KDE_TEMPLATES)

# For callers and tests that want the algorithmic stages only.
EMPTY_TABLE = PredefinedPatternTable()
