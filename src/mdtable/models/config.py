"""Generator and formatter configuration."""
from __future__ import annotations

import math
import re
from typing import Any

from pydantic import BaseModel, Field, ValidationInfo, field_validator

from mdtable.models.table import Alignment

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


class TableConfig(BaseModel):
    """Defaults shared by the generator, the formatter and the CLI."""

    # Generator fallbacks
    default_rows: int = Field(default=2, ge=1)
    default_cols: int = Field(default=2, ge=1)
    default_alignment: Alignment = Alignment.CENTER

    # Batch formatting
    max_workers: int = Field(default=4, ge=1)


def parse_count(value: Any, default: int) -> int:
    """Read a row or column count from a loosely typed value.

    Strings are read up to the first non-digit (``"3 rows"`` is 3). Missing,
    non-numeric and non-positive values give ``default``.
    """
    count = None
    if isinstance(value, bool) or value is None:
        count = None
    elif isinstance(value, int):
        count = value
    elif isinstance(value, float):
        count = int(value) if math.isfinite(value) else None
    elif isinstance(value, str):
        match = _LEADING_INT.match(value)
        count = int(match.group(1)) if match else None

    if count is None or count <= 0:
        count = default
    return max(1, count)


def parse_alignment(value: Any, default: Alignment = Alignment.CENTER) -> Alignment:
    """Match an alignment keyword case-insensitively, else ``default``."""
    if isinstance(value, Alignment):
        return value
    if isinstance(value, str):
        try:
            return Alignment(value.lower())
        except ValueError:
            pass
    return default


def _context_config(info: ValidationInfo) -> TableConfig:
    config = (info.context or {}).get("config")
    return config if isinstance(config, TableConfig) else TableConfig()


class GenerateOptions(BaseModel):
    """Normalized parameters for a generated table.

    Build with ``model_validate`` and pass ``context={"config": ...}`` to
    take the fallbacks from a :class:`TableConfig`.
    """

    rows: int = Field(default=2, ge=1)
    cols: int = Field(default=2, ge=1)
    alignment: Alignment = Alignment.CENTER

    @field_validator("rows", mode="before")
    @classmethod
    def _normalize_rows(cls, value: Any, info: ValidationInfo) -> int:
        return parse_count(value, _context_config(info).default_rows)

    @field_validator("cols", mode="before")
    @classmethod
    def _normalize_cols(cls, value: Any, info: ValidationInfo) -> int:
        return parse_count(value, _context_config(info).default_cols)

    @field_validator("alignment", mode="before")
    @classmethod
    def _normalize_alignment(cls, value: Any, info: ValidationInfo) -> Alignment:
        return parse_alignment(value, _context_config(info).default_alignment)
