# ---------------------------------------------------------------------------
# File: walker.py
# ---------------------------------------------------------------------------
# Description:
#	Applies the allocator to a menu tree, one sibling list at a time.
#
# Notes:
#	- Uniqueness is per sibling list: a sub-menu's children only compete
#	  with each other.
#	- Children are processed after the whole parent list is done.
#	- A parent list that was skipped (no usable font) still descends;
#	  each child list resolves its own fonts.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/14/2026	pymnemonic dev				Initial coding / release
# 10/16/2026	pymnemonic dev				Add apply_mnemonics convenience wrapper
# ---------------------------------------------------------------------------

from __future__ import annotations

from typing import Any, Optional, Sequence

from pymnemonic.mnemonics.allocator import MnemonicAllocator
from pymnemonic.mnemonics.model import AllocationReport, MenuItemEntity


class TreeWalker:
	"""
	TreeWalker

	apply(items) allocates over items, then recurses into each sub-menu's
	children with a fresh allocation state.
	"""

	def __init__(self, allocator: MnemonicAllocator | None = None) -> None:
		self.allocator = allocator if allocator is not None else MnemonicAllocator()

	def apply(self, items: Sequence[Optional[MenuItemEntity]]) -> list[AllocationReport]:
		"""
		Return one AllocationReport per sibling list, in traversal order.
		"""
		reports: list[AllocationReport] = [self.allocator.allocate(items)]

		for item in items:
			if item is None or not item.is_submenu:
				continue
			reports.extend(self.apply(item.children))

		return reports

	def apply_inside(self, submenu: MenuItemEntity) -> list[AllocationReport]:
		"""
		Allocate over a single sub-menu's children only (the sub-menu keeps its mnemonic).
		"""
		return self.apply(submenu.children)


def apply_mnemonics(items: Sequence[Optional[MenuItemEntity]], **kwargs: Any) -> list[AllocationReport]:
	"""
	One-shot helper: TreeWalker(MnemonicAllocator(**kwargs)).apply(items).
	"""
	return TreeWalker(MnemonicAllocator(**kwargs)).apply(items)
