# ---------------------------------------------------------------------------
# File: ranker.py
# ---------------------------------------------------------------------------
# Description:
#	Orders candidate characters by how clearly an underline reads on them.
#
# Notes:
#	- Descenders (qypgj) and vowels count as 2/3 of their real width
#	  (MS and GNOME HIG: avoid descenders and vowels).
#	- Widest first; equal widths keep label order (sorted() is stable).
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/13/2026	pymnemonic dev				Initial coding / release
# ---------------------------------------------------------------------------

from __future__ import annotations

from typing import Callable, Iterable


PENALIZED: frozenset[str] = frozenset("qypgjaeiou")
PENALTY_FACTOR: float = 0.66

WidthFn = Callable[[str], float]


def adjusted_width(ch: str, width: WidthFn) -> float:
	w = float(width(ch))
	if ch.lower() in PENALIZED:
		w *= PENALTY_FACTOR
	return w


def rank_characters(chars: Iterable[str], width: WidthFn) -> list[str]:
	"""
	Return chars from most to least preferred.
	"""
	return sorted(chars, key=lambda ch: -adjusted_width(ch, width))
