"""Blank markdown table generation."""
from __future__ import annotations

from typing import Any

from mdtable.models.config import GenerateOptions, TableConfig
from mdtable.utils.logging import get_logger
from mdtable.utils.markdown import GENERATOR_MARKERS, blank_row

logger = get_logger("generator")


class TableGenerator:
    """Build empty markdown tables ready to be filled in."""

    def __init__(self, config: TableConfig | None = None) -> None:
        self.config = config or TableConfig()

    def options(
        self,
        rows: Any = None,
        cols: Any = None,
        alignment: Any = None,
    ) -> GenerateOptions:
        """Normalize raw generator inputs against this generator's defaults."""
        return GenerateOptions.model_validate(
            {"rows": rows, "cols": cols, "alignment": alignment},
            context={"config": self.config},
        )

    def generate(
        self,
        rows: Any = None,
        cols: Any = None,
        alignment: Any = None,
    ) -> str:
        """Generate a blank table.

        ``rows`` counts the header, so ``rows=1`` yields only the header and
        separator lines. Every line, the last included, ends with a newline.
        """
        opts = self.options(rows, cols, alignment)
        logger.debug(
            "Generating %dx%d table aligned %s",
            opts.rows, opts.cols, opts.alignment.value,
        )

        marker = GENERATOR_MARKERS[opts.alignment.value]
        table = blank_row(opts.cols)
        table += '|' + f' {marker} |' * opts.cols + '\n'
        for _ in range(1, opts.rows):
            table += blank_row(opts.cols)
        return table


def generate_table(
    rows: Any = None,
    cols: Any = None,
    alignment: Any = None,
    config: TableConfig | None = None,
) -> str:
    """Generate a blank markdown table.

    Args:
        rows: Row count including the header (default 2)
        cols: Column count (default 2)
        alignment: 'left', 'right' or 'center' (default 'center')
        config: Optional defaults for missing or invalid values

    Returns:
        The table text, newline terminated
    """
    return TableGenerator(config).generate(rows, cols, alignment)
