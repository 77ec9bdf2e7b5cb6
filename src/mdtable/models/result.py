"""Formatting result model."""
from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

from mdtable.models.table import Alignment


class FormatResult(BaseModel):
    """Outcome of formatting one markdown table.

    On failure ``content`` is the untouched input and ``error`` says why.
    """

    success: bool
    content: str
    original: str

    error: str | None = None

    # Table shape, when parsing got that far
    row_count: int = 0
    column_count: int = 0
    alignments: list[Alignment] = Field(default_factory=list)

    @property
    def changed(self) -> bool:
        """Whether formatting altered the text."""
        return self.content != self.original

    def to_dict(self) -> dict[str, Any]:
        """Return the result as a plain dictionary."""
        return self.model_dump(mode="json")
