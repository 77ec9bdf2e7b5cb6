"""Markdown table primitives shared by the generator and the formatter."""
from __future__ import annotations

from typing import Sequence

# Fixed markers written by the table generator.
GENERATOR_MARKERS = {'left': ':---', 'right': '---:', 'center': ':---:'}


def split_row(line: str) -> list[str]:
    """Split one table line into trimmed cells.

    The empty cells produced by an outer leading or trailing pipe are
    dropped, so ``|a|b|`` and ``a|b`` give the same result.
    """
    cells = [cell.strip() for cell in line.strip().split('|')]
    if cells and cells[0] == '':
        cells.pop(0)
    if cells and cells[-1] == '':
        cells.pop()
    return cells


def separator_cell(alignment: str, width: int) -> str:
    """Build a separator cell exactly ``width`` characters wide.

    Left puts a colon on the left edge, right on the right edge, and center
    on both, with dashes filling the rest.
    """
    if width <= 1:
        return ':'

    left_edge = ':' if alignment in ('left', 'center') else '-'
    right_edge = ':' if alignment in ('right', 'center') else '-'
    return left_edge + '-' * (width - 2) + right_edge


def pad_center(text: str, width: int) -> str:
    """Pad text with spaces to ``width``; the extra space goes right."""
    space = width - len(text)
    left = space // 2
    return ' ' * left + text + ' ' * (space - left)


def render_row(cells: Sequence[str]) -> str:
    """Join cells into a ``| a | b |`` table line."""
    return '| ' + ' | '.join(cells) + ' |'


def blank_row(cols: int) -> str:
    """An empty generator row with ``cols`` cells and a trailing newline."""
    return '|' + ' |' * cols + '\n'
