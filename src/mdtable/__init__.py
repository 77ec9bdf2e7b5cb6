"""mdtable - generate and align markdown tables."""
from mdtable.core.formatter import TableFormatter, format_table
from mdtable.core.generator import TableGenerator, generate_table
from mdtable.errors import InconsistentColumnsError, TableFormatError
from mdtable.models.config import GenerateOptions, TableConfig
from mdtable.models.result import FormatResult
from mdtable.models.table import Alignment, Table

try:
    from mdtable._version import __version__
except ImportError:
    __version__ = "0.0.0-dev"

__all__ = [
    "__version__",
    "format_table",
    "generate_table",
    "TableFormatter",
    "TableGenerator",
    "TableConfig",
    "GenerateOptions",
    "FormatResult",
    "Alignment",
    "Table",
    "TableFormatError",
    "InconsistentColumnsError",
]
