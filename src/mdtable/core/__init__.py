"""mdtable core: table generation, formatting and document editing."""
from mdtable.core.document import LineRange, insert_at_line, replace_lines, select_lines
from mdtable.core.formatter import TableFormatter, format_table
from mdtable.core.generator import TableGenerator, generate_table

__all__ = [
    "LineRange",
    "TableFormatter",
    "TableGenerator",
    "format_table",
    "generate_table",
    "insert_at_line",
    "replace_lines",
    "select_lines",
]
