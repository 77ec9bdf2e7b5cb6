"""mdtable utility functions."""
from mdtable.utils.markdown import (
    pad_center,
    render_row,
    separator_cell,
    split_row,
)
from mdtable.utils.parallel import process_batch

__all__ = [
    "pad_center",
    "process_batch",
    "render_row",
    "separator_cell",
    "split_row",
]
