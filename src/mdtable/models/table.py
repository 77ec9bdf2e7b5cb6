"""Parsed markdown table model."""
from __future__ import annotations

import re
from enum import Enum

from pydantic import BaseModel, Field

from mdtable.errors import InconsistentColumnsError
from mdtable.utils.markdown import split_row


class Alignment(str, Enum):
    """Column alignment encoded in the separator row."""
    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"


# Checked in order; the first match wins.
ALIGNMENT_PATTERNS: tuple[tuple[Alignment, re.Pattern[str]], ...] = (
    (Alignment.CENTER, re.compile(r":-+:")),
    (Alignment.LEFT, re.compile(r":-+")),
    (Alignment.RIGHT, re.compile(r"-+:")),
)


def classify_alignment(cell: str) -> Alignment:
    """Infer a column alignment from its separator cell."""
    for alignment, pattern in ALIGNMENT_PATTERNS:
        if pattern.fullmatch(cell):
            return alignment
    return Alignment.LEFT


class Table(BaseModel):
    """A markdown table as a grid of trimmed cells.

    Row 0 is the header, row 1 the separator, the remaining rows are data.
    """

    rows: list[list[str]] = Field(default_factory=list)

    @classmethod
    def parse(cls, text: str) -> "Table":
        """Parse pipe-delimited lines into a table.

        Raises:
            InconsistentColumnsError: If a row's cell count differs from
                the header's.
        """
        rows = [split_row(line) for line in text.strip().split('\n')]
        expected = len(rows[0])
        for index, row in enumerate(rows):
            if len(row) != expected:
                raise InconsistentColumnsError(expected, len(row), index)
        return cls(rows=rows)

    @property
    def header(self) -> list[str]:
        return self.rows[0] if self.rows else []

    @property
    def separator(self) -> list[str]:
        return self.rows[1] if len(self.rows) > 1 else []

    @property
    def body(self) -> list[list[str]]:
        return self.rows[2:]

    @property
    def column_count(self) -> int:
        return len(self.header)

    def alignments(self) -> list[Alignment]:
        """Per-column alignment read from the separator row."""
        if not self.separator:
            return [Alignment.LEFT] * self.column_count
        return [classify_alignment(cell) for cell in self.separator]

    def column_widths(self) -> list[int]:
        """Widest cell per column, separator text included.

        A column whose cells are all empty still gets width 1 so its
        separator marker fits.
        """
        return [
            max(1, max(len(row[col]) for row in self.rows))
            for col in range(self.column_count)
        ]
