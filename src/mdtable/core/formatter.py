"""Markdown table re-formatting."""
from __future__ import annotations

from typing import Iterable, Iterator

from mdtable.errors import TableFormatError
from mdtable.models.config import TableConfig
from mdtable.models.result import FormatResult
from mdtable.models.table import Table
from mdtable.utils.logging import get_logger
from mdtable.utils.markdown import pad_center, render_row, separator_cell
from mdtable.utils.parallel import process_batch

logger = get_logger("formatter")


class TableFormatter:
    """Align every column of a markdown table to a uniform width."""

    def __init__(self, config: TableConfig | None = None) -> None:
        self.config = config or TableConfig()

    def format(self, markdown: str) -> str:
        """Format a table, or return it unchanged if it is not valid."""
        return self.format_result(markdown).content

    def format_result(self, markdown: str) -> FormatResult:
        """Format a table and report what happened."""
        lines = markdown.strip().split('\n')
        if len(lines) < 2:
            return FormatResult(
                success=True,
                content=markdown,
                original=markdown,
                row_count=len(lines) if markdown.strip() else 0,
            )

        try:
            table = Table.parse(markdown)
        except TableFormatError as e:
            logger.warning("Please only select a markdown table: %s", e)
            return FormatResult(
                success=False,
                content=markdown,
                original=markdown,
                error=str(e),
            )

        alignments = table.alignments()
        return FormatResult(
            success=True,
            content=self.render(table),
            original=markdown,
            row_count=len(table.rows),
            column_count=table.column_count,
            alignments=alignments,
        )

    def render(self, table: Table) -> str:
        """Render a parsed table with padded cells and a rebuilt separator."""
        alignments = table.alignments()
        widths = table.column_widths()

        lines = []
        for index, row in enumerate(table.rows):
            if index == 1:
                cells = [
                    separator_cell(align, width)
                    for align, width in zip(alignments, widths)
                ]
            else:
                cells = [pad_center(cell, width) for cell, width in zip(row, widths)]
            lines.append(render_row(cells))

        return '\n'.join(lines)

    def format_batch(
        self,
        documents: Iterable[str],
    ) -> Iterator[FormatResult]:
        """Format several tables concurrently, yielding results in input order."""
        for _, result in process_batch(
            list(documents),
            self.format_result,
            max_workers=self.config.max_workers,
        ):
            if isinstance(result, Exception):
                raise result
            yield result


def format_table(markdown: str) -> str:
    """Format a markdown table so each column has a uniform width.

    This is the main entry point for formatting. It never raises: input
    with inconsistent column counts comes back unchanged and a warning is
    logged.

    Args:
        markdown: Text of a pipe-delimited markdown table

    Returns:
        The aligned table without a trailing newline, or the original input
    """
    return TableFormatter().format(markdown)
