"""
pymnemonic

Automatic keyboard mnemonics for menu hierarchies.
"""

from pymnemonic.mnemonics import (
	DEFAULT_TABLE,
	MenuItemEntity,
	MnemonicAllocator,
	TreeWalker,
	apply_mnemonics,
)

__all__ = [
	"DEFAULT_TABLE",
	"MenuItemEntity",
	"MnemonicAllocator",
	"TreeWalker",
	"apply_mnemonics",
]

__version__ = "0.1.0"
