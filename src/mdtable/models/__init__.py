"""mdtable data models."""
from mdtable.models.config import GenerateOptions, TableConfig
from mdtable.models.result import FormatResult
from mdtable.models.table import Alignment, Table, classify_alignment

__all__ = [
    "Alignment",
    "FormatResult",
    "GenerateOptions",
    "Table",
    "TableConfig",
    "classify_alignment",
]
