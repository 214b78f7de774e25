# ---------------------------------------------------------------------------
# File: test_walker.py
# ---------------------------------------------------------------------------
# Description:
#	Unit tests for TreeWalker (recursive, sibling-scoped allocation).
#
# Notes:
#	- Pure unit tests; no Tkinter dependency.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/14/2026	pymnemonic dev				Initial tests
# 10/16/2026	pymnemonic dev				Cover apply_mnemonics + uniqueness across a larger tree
# ---------------------------------------------------------------------------

from __future__ import annotations

from typing import Optional

from pymnemonic.mnemonics.allocator import MnemonicAllocator, strip_breadcrumb
from pymnemonic.mnemonics.measure import UniformMeasurer
from pymnemonic.mnemonics.model import MenuItemEntity
from pymnemonic.mnemonics.patterns import DEFAULT_TABLE, EMPTY_TABLE
from pymnemonic.mnemonics.walker import TreeWalker, apply_mnemonics
from pymnemonic.app.demo_menus import build_demo_menus
from pymnemonic.ui.entities import build_entities


def _menu(label: str, *children: str | None) -> MenuItemEntity:
	return MenuItemEntity(
		label=label,
		children=[MenuItemEntity(c) if c is not None else None for c in children],
		is_submenu=True,
	)


def _walk(entities: list[Optional[MenuItemEntity]]):
	for ent in entities:
		if ent is None:
			continue
		yield ent
		yield from _walk(ent.children)


def test_children_compete_only_with_their_siblings():
	file_menu = _menu("File", "Fold", "Find")
	top: list[Optional[MenuItemEntity]] = [file_menu, MenuItemEntity("Format")]

	reports = TreeWalker(MnemonicAllocator(table=EMPTY_TABLE)).apply(top)

	assert [r.mnemonics() for r in reports] == [["F", "o"], ["F", "i"]]
	assert [c.mnemonic for c in file_menu.children if c] == ["F", "i"]


def test_recursion_is_depth_first_in_list_order():
	inner = _menu("Inner", "Alpha")
	outer = _menu("Outer", None, "Beta")
	outer.children.append(inner)
	other = _menu("Other", "Gamma")

	reports = TreeWalker(MnemonicAllocator(table=EMPTY_TABLE)).apply([outer, other])

	assert [r.mnemonics() for r in reports] == [["O", "t"], ["B", "I"], ["A"], ["G"]]


def test_leaf_children_are_not_visited():
	leaf = MenuItemEntity("Leaf", children=[MenuItemEntity("Hidden")], is_submenu=False)
	reports = TreeWalker(MnemonicAllocator(table=EMPTY_TABLE)).apply([leaf])

	assert len(reports) == 1
	assert leaf.children[0] is not None
	assert leaf.children[0].mnemonic is None


def test_apply_inside_keeps_the_submenu_mnemonic():
	sub = _menu("Recent", "One", "Two")
	sub.mnemonic = "R"

	TreeWalker(MnemonicAllocator(table=EMPTY_TABLE)).apply_inside(sub)

	assert sub.mnemonic == "R"
	assert [c.mnemonic for c in sub.children if c] == ["O", "T"]


def test_skipped_parent_still_descends():
	parent = _menu("File", "Open")
	parent.font = None
	assert parent.children[0] is not None
	parent.children[0].font = "child-font"

	reports = apply_mnemonics([parent], measurer=UniformMeasurer(require_font=True))

	assert reports[0].skipped
	assert parent.mnemonic is None
	assert parent.children[0].mnemonic == "O"


def test_demo_menus_unique_and_taken_from_labels():
	entities = build_entities(build_demo_menus(), font="menu")
	apply_mnemonics(entities, table=DEFAULT_TABLE, measurer=UniformMeasurer())

	def check(siblings: list[Optional[MenuItemEntity]]) -> None:
		assigned = [e.mnemonic for e in siblings if e is not None and e.mnemonic]
		assert len({m.lower() for m in assigned}) == len(assigned)
		for e in siblings:
			if e is None:
				continue
			if e.mnemonic:
				assert e.mnemonic in strip_breadcrumb(e.label or "")
			check(e.children)

	check(entities)
	assert all(e.mnemonic for e in entities if e is not None)


def test_walk_is_repeatable():
	first_entities = build_entities(build_demo_menus(), font="menu")
	second_entities = build_entities(build_demo_menus(), font="menu")

	apply_mnemonics(first_entities)
	apply_mnemonics(second_entities)
	apply_mnemonics(second_entities)

	assert [e.mnemonic for e in _walk(first_entities)] == [e.mnemonic for e in _walk(second_entities)]
