"""Exceptions raised while parsing markdown tables."""
from __future__ import annotations


class TableFormatError(ValueError):
    """Base class for structural problems in a markdown table."""


class InconsistentColumnsError(TableFormatError):
    """A row does not have the same number of cells as the header row."""

    def __init__(self, expected: int, found: int, row_index: int) -> None:
        self.expected = expected
        self.found = found
        self.row_index = row_index
        super().__init__(
            f"inconsistent column counts: row {row_index} has {found} "
            f"cell(s), header has {expected}"
        )
