"""Command-line interface for mdtable."""
from __future__ import annotations

import sys
from pathlib import Path
from typing import Optional

import click
from rich.console import Console

from mdtable import __version__
from mdtable.core.document import LineRange, insert_at_line, replace_lines, select_lines
from mdtable.core.formatter import TableFormatter
from mdtable.core.generator import TableGenerator
from mdtable.models.config import TableConfig
from mdtable.models.result import FormatResult
from mdtable.utils.logging import set_log_level
from mdtable.utils.parallel import process_batch

console = Console(stderr=True)


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="mdtable")
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    default=None,
    help="Library log level",
)
@click.pass_context
def cli(ctx: click.Context, log_level: Optional[str]) -> None:
    """mdtable - generate and align markdown tables."""
    if log_level:
        set_log_level(log_level)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


def _parse_line_range(
    ctx: click.Context, param: click.Parameter, value: Optional[str]
) -> Optional[LineRange]:
    if value is None:
        return None
    try:
        return LineRange.parse(value)
    except ValueError as e:
        raise click.BadParameter(str(e), ctx=ctx, param=param)


@cli.command()
@click.option("-r", "--rows", default=None, help="Row count including the header [2]")
@click.option("-c", "--cols", default=None, help="Column count [2]")
@click.option("-a", "--align", "alignment", default=None, help="left, right or center [center]")
@click.option("--interactive", is_flag=True, help="Prompt for any value not given")
@click.option("-o", "--output", type=click.Path(), help="Write the table to this file")
@click.option(
    "--insert",
    "insert_into",
    type=click.Path(exists=True, dir_okay=False),
    help="Insert the table into this existing file",
)
@click.option("--line", type=int, default=1, show_default=True, help="Line to insert before")
def generate(
    rows: Optional[str],
    cols: Optional[str],
    alignment: Optional[str],
    interactive: bool,
    output: Optional[str],
    insert_into: Optional[str],
    line: int,
) -> None:
    """Generate a blank markdown table.

    Invalid or missing values fall back to the defaults.

    Examples:

        mdtable generate -r 3 -c 4 -a left

        mdtable generate --interactive --insert README.md --line 10
    """
    if insert_into and output:
        raise click.UsageError("--insert and --output cannot be used together")

    if interactive:
        if rows is None:
            rows = click.prompt("row number", default="", show_default=False)
        if cols is None:
            cols = click.prompt("column number", default="", show_default=False)
        if alignment is None:
            alignment = click.prompt(
                "alignment (left, right, center)", default="", show_default=False
            )

    table = TableGenerator().generate(rows, cols, alignment)

    if insert_into:
        _write(insert_into, insert_at_line(_read(insert_into), line, table))
        console.print(f"[green]Table inserted into {insert_into}[/green]")
    elif output:
        _write(output, table)
        console.print(f"[green]Output written to {output}[/green]")
    else:
        click.echo(table, nl=False)


@cli.command(name="format")
@click.argument("files", nargs=-1, type=click.Path(exists=True, dir_okay=False))
@click.option(
    "--lines",
    "line_range",
    callback=_parse_line_range,
    help="Only format lines START:END (1-based, inclusive)",
)
@click.option("-i", "--in-place", is_flag=True, help="Rewrite the files in place")
@click.option("-o", "--output", type=click.Path(), help="Output file path")
@click.option("-q", "--quiet", is_flag=True, help="Suppress status output")
def format_cmd(
    files: tuple[str, ...],
    line_range: Optional[LineRange],
    in_place: bool,
    output: Optional[str],
    quiet: bool,
) -> None:
    """Align the columns of markdown tables.

    Reads standard input when no files are given. Tables with inconsistent
    column counts are left unchanged and reported as failed.

    Examples:

        mdtable format table.md

        mdtable format README.md --lines 12:20 --in-place

        cat table.md | mdtable format
    """
    if in_place and not files:
        raise click.UsageError("--in-place needs at least one file")

    sources = list(files) or ["-"]
    selection = line_range or LineRange(start=1)
    config = TableConfig()
    formatter = TableFormatter(config)

    def run(source: str) -> tuple[str, FormatResult | None]:
        text = sys.stdin.read() if source == "-" else _read(source)
        return text, _format_text(formatter, text, selection)

    failed = False
    outputs = []
    for source, outcome in process_batch(sources, run, max_workers=config.max_workers):
        if isinstance(outcome, Exception):
            console.print(f"[red]FAIL[/red] {source}: {outcome}")
            failed = True
            continue

        text, result = outcome
        label = "<stdin>" if source == "-" else source
        if result is None:
            console.print(f"[yellow]No selected text[/yellow] {label}")
            failed = True
            new_text = text
        else:
            if result.success:
                if not quiet:
                    console.print(f"[green]Formatted.[/green] {label}")
            else:
                console.print(f"[red]Format failed[/red] {label}: {result.error}")
                failed = True
            new_text = replace_lines(text, selection, result.content)

        if in_place:
            if new_text != text:
                _write(source, new_text)
        else:
            outputs.append(new_text)

    if not in_place:
        output_content = "\n\n".join(outputs)
        if output:
            _write(output, output_content)
            if not quiet:
                console.print(f"[green]Output written to {output}[/green]")
        else:
            click.echo(output_content, nl=not output_content.endswith("\n"))

    if failed:
        sys.exit(1)


def _read(path: str) -> str:
    """Read a file keeping its line endings as they are."""
    with open(path, encoding="utf-8", newline="") as f:
        return f.read()


def _write(path: str, text: str) -> None:
    Path(path).write_text(text, encoding="utf-8", newline="")


def _format_text(
    formatter: TableFormatter,
    text: str,
    selection: LineRange,
) -> FormatResult | None:
    """Format the selected lines, or return None when they are blank."""
    selected = select_lines(text, selection)
    if not selected.strip():
        return None
    return formatter.format_result(selected)


if __name__ == "__main__":
    cli()
