"""Tests for core modules in src/mdtable/core/."""
from __future__ import annotations

import logging

import pytest

from mdtable.core.document import LineRange, insert_at_line, replace_lines, select_lines
from mdtable.core.formatter import TableFormatter, format_table
from mdtable.core.generator import TableGenerator, generate_table
from mdtable.models.config import TableConfig
from mdtable.models.table import Alignment


def _segments(line: str) -> list[str]:
    """Pipe-delimited segments of a rendered line, outer pipes removed."""
    return line.split("|")[1:-1]


# ===========================================================================
# TableGenerator
# ===========================================================================


class TestGenerateTable:
    """Tests for generate_table and TableGenerator."""

    def test_defaults(self):
        assert generate_table() == "| | |\n| :---: | :---: |\n| | |\n"

    def test_left_alignment(self):
        lines = generate_table(2, 2, "left").splitlines()
        assert lines[1] == "| :--- | :--- |"

    def test_right_alignment(self):
        lines = generate_table(2, 3, "right").splitlines()
        assert lines[1] == "| ---: | ---: | ---: |"

    def test_center_alignment(self):
        lines = generate_table(2, 1, "center").splitlines()
        assert lines[1] == "| :---: |"

    def test_alignment_is_case_insensitive(self):
        assert generate_table(2, 2, "LeFt") == generate_table(2, 2, "left")

    @pytest.mark.parametrize("alignment", ["", None, "l", "middle", " left"])
    def test_unknown_alignment_is_center(self, alignment):
        assert ":---:" in generate_table(2, 2, alignment).splitlines()[1]

    def test_single_row_is_header_and_separator(self):
        assert generate_table(1, 1, "center") == "| |\n| :---: |\n"

    @pytest.mark.parametrize("rows", [1, 2, 3, 6])
    @pytest.mark.parametrize("cols", [1, 2, 5])
    @pytest.mark.parametrize("alignment", ["left", "right", "center"])
    def test_line_and_cell_counts(self, rows, cols, alignment):
        table = generate_table(rows, cols, alignment)
        lines = table.splitlines()
        assert len(lines) == rows + 1
        for line in lines:
            assert len(_segments(line)) == cols

    def test_data_rows_match_header(self):
        lines = generate_table(4, 3).splitlines()
        assert lines[0] == "| | | |"
        assert lines[2:] == ["| | | |"] * 3

    def test_ends_with_newline(self):
        assert generate_table(3, 3, "left").endswith("|\n")

    @pytest.mark.parametrize("value", [None, "", "abc", 0, "0", -4, "-4"])
    def test_invalid_counts_fall_back_to_two(self, value):
        assert generate_table(value, value) == generate_table(2, 2)

    def test_string_counts(self):
        assert generate_table("3", "1", "left") == generate_table(3, 1, "left")

    def test_config_defaults(self):
        config = TableConfig(default_rows=3, default_cols=1, default_alignment=Alignment.LEFT)
        generator = TableGenerator(config)
        assert generator.generate() == "| |\n| :--- |\n| |\n| |\n"

    def test_options(self):
        opts = TableGenerator().options("5", None, "RIGHT")
        assert (opts.rows, opts.cols, opts.alignment) == (5, 2, Alignment.RIGHT)


# ===========================================================================
# TableFormatter
# ===========================================================================


class TestFormatTable:
    """Tests for format_table and TableFormatter."""

    def test_concrete_example(self):
        result = format_table("|a|bb|\n|---|---|\n|1|22|")
        assert result == "|  a  | bb  |\n| :-- | :-- |\n|  1  | 22  |"

    def test_mixed_alignments(self):
        markdown = "| x | y |\n|:---:|---:|\n| 1 | 2 |"
        assert format_table(markdown) == (
            "|   x   |  y   |\n"
            "| :---: | ---: |\n"
            "|   1   |  2   |"
        )

    def test_data_cells_centered_regardless_of_alignment(self):
        markdown = "| name | n |\n|:----|---:|\n| a | 100 |"
        lines = format_table(markdown).splitlines()
        assert lines[0] == "| name  |  n   |"
        assert lines[1] == "| :---- | ---: |"
        assert lines[2] == "|   a   | 100  |"

    def test_without_outer_pipes(self):
        assert format_table("a|b\n--|--:\n1|2") == format_table("|a|b|\n|--|--:|\n|1|2|")
        assert format_table("a|b\n--|--:\n1|2") == (
            "| a  |  b  |\n"
            "| :- | --: |\n"
            "| 1  |  2  |"
        )

    def test_header_and_separator_only(self):
        assert format_table("|h|\n|-|") == "| h |\n| : |"

    def test_no_trailing_newline(self):
        assert not format_table("|a|b|\n|---|---|\n").endswith("\n")

    def test_crlf_line_endings(self):
        result = format_table("|a|b|\r\n|---|---|\r\n|1|2|\r\n")
        assert result == "|  a  |  b  |\n| :-- | :-- |\n|  1  |  2  |"

    def test_generated_table_round_trip(self):
        lines = format_table(generate_table(2, 2).strip()).splitlines()
        assert lines == [
            "|       |       |",
            "| :---: | :---: |",
            "|       |       |",
        ]

    def test_empty_cells(self):
        result = format_table("|a||\n|-|-|\n||b|")
        assert result == "| a |   |\n| : | : |\n|   | b |"

    def test_inconsistent_columns_returns_original(self):
        markdown = "| a | b |\n|---|\n| 1 | 2 | 3 |"
        assert format_table(markdown) == markdown

    def test_inconsistent_columns_logs_warning(self, caplog):
        with caplog.at_level(logging.WARNING, logger="mdtable"):
            format_table("| a | b |\n|---|---|\n| 1 | 2 | 3 |")
        assert "inconsistent column counts" in caplog.text

    def test_blank_line_inside_table_is_invalid(self):
        markdown = "|a|b|\n\n|-|-|"
        assert format_table(markdown) == markdown

    @pytest.mark.parametrize("markdown", ["", "   ", "| a | b |", "  |a|  \n"])
    def test_fewer_than_two_lines_unchanged(self, markdown):
        assert format_table(markdown) == markdown

    @pytest.mark.parametrize(
        "markdown",
        [
            "|a|bb|\n|---|---|\n|1|22|",
            "| x | y |\n|:---:|---:|\n| 1 | 2 |",
            "a|b\n-|-:\n1|2",
            "| Name | Age | City |\n|:--|:-:|--:|\n| Alice | 30 | New York |\n| Bob | 5 | LA |",
        ],
    )
    def test_idempotent(self, markdown):
        once = format_table(markdown)
        assert format_table(once) == once

    def test_uniform_column_widths(self):
        markdown = (
            "| Name | Age | City |\n"
            "|:--|:-:|--:|\n"
            "| Alice | 30 | New York |\n"
            "| Bob | 5 | LA |"
        )
        lines = format_table(markdown).splitlines()
        widths = [[len(seg) for seg in _segments(line)] for line in lines]
        assert all(w == widths[0] for w in widths)

    def test_reformat_keeps_cell_content(self):
        markdown = "|Name|Age|\n|---|--:|\n|Alice|30|"
        once = format_table(markdown)
        cells = [[c.strip() for c in _segments(line)] for line in once.splitlines()]
        assert cells[0] == ["Name", "Age"]
        assert cells[2] == ["Alice", "30"]


class TestTableFormatterResult:
    """Tests for TableFormatter.format_result and format_batch."""

    def test_success_result(self):
        result = TableFormatter().format_result("|a|b|\n|:-:|--:|\n|1|2|")
        assert result.success is True
        assert result.changed is True
        assert result.error is None
        assert result.row_count == 3
        assert result.column_count == 2
        assert result.alignments == [Alignment.CENTER, Alignment.RIGHT]

    def test_failure_result(self):
        markdown = "|a|b|\n|-|"
        result = TableFormatter().format_result(markdown)
        assert result.success is False
        assert result.content == markdown
        assert result.changed is False
        assert "inconsistent column counts" in result.error

    def test_single_line_is_successful_no_op(self):
        result = TableFormatter().format_result("|a|")
        assert result.success is True
        assert result.changed is False
        assert result.row_count == 1

    def test_empty_input(self):
        result = TableFormatter().format_result("")
        assert result.success is True
        assert result.row_count == 0

    def test_format_method_matches_function(self):
        markdown = "|a|bb|\n|---|---|\n|1|22|"
        assert TableFormatter().format(markdown) == format_table(markdown)

    def test_format_batch_keeps_order(self):
        docs = ["|a|\n|-|", "|a|b|\n|-|", "|xyz|\n|:-:|"]
        results = list(TableFormatter(TableConfig(max_workers=2)).format_batch(docs))
        assert [r.original for r in results] == docs
        assert [r.success for r in results] == [True, False, True]


# ===========================================================================
# document.py
# ===========================================================================


class TestLineRange:
    """Tests for LineRange."""

    def test_parse_range(self):
        line_range = LineRange.parse("3:7")
        assert (line_range.start, line_range.end) == (3, 7)

    def test_parse_single_line(self):
        line_range = LineRange.parse("5")
        assert (line_range.start, line_range.end) == (5, 5)

    def test_parse_open_ended(self):
        line_range = LineRange.parse("3:")
        assert (line_range.start, line_range.end) == (3, None)

    @pytest.mark.parametrize("spec", ["", "abc", "0:2", "7:3", "1:2:3", ":4"])
    def test_parse_invalid(self, spec):
        with pytest.raises(ValueError):
            LineRange.parse(spec)

    def test_as_slice_clamps_to_length(self):
        assert LineRange(start=2, end=10).as_slice(4) == slice(1, 4)
        assert LineRange(start=9).as_slice(4) == slice(4, 4)


class TestDocumentEditing:
    """Tests for select_lines, replace_lines and insert_at_line."""

    def test_select_lines(self):
        assert select_lines("a\nb\nc\n", LineRange(start=2, end=3)) == "b\nc\n"

    def test_select_whole_text(self):
        assert select_lines("a\nb", LineRange(start=1)) == "a\nb"

    def test_replace_keeps_trailing_line_break(self):
        text = "a\nb\nc\n"
        assert replace_lines(text, LineRange(start=2, end=2), "X") == "a\nX\nc\n"

    def test_replace_last_line_without_break(self):
        assert replace_lines("a\nb", LineRange(start=2), "X") == "a\nX"

    def test_replace_keeps_crlf(self):
        text = "a\r\nb\r\nc\r\n"
        assert replace_lines(text, LineRange(start=2, end=2), "X") == "a\r\nX\r\nc\r\n"

    def test_replace_with_formatted_table(self):
        text = "# Title\n\n|a|bb|\n|---|---|\n|1|22|\n\nafter\n"
        selection = LineRange.parse("3:5")
        formatted = format_table(select_lines(text, selection))
        assert replace_lines(text, selection, formatted) == (
            "# Title\n\n"
            "|  a  | bb  |\n"
            "| :-- | :-- |\n"
            "|  1  | 22  |\n"
            "\nafter\n"
        )

    def test_replace_converts_replacement_to_crlf(self):
        text = "# T\r\n|a|\r\n|-|\r\nafter\r\n"
        result = replace_lines(text, LineRange(start=2, end=3), "| a |\n| : |")
        assert result == "# T\r\n| a |\r\n| : |\r\nafter\r\n"

    def test_replace_keeps_trailing_blank_lines(self):
        text = "|a|\n|-|\n\n\n"
        assert replace_lines(text, LineRange(start=1), "| a |\n| : |") == "| a |\n| : |\n\n\n"

    def test_replace_drops_trailing_spaces_but_keeps_breaks(self):
        text = "|a|  \n  \nnext\n"
        assert replace_lines(text, LineRange(start=1, end=2), "| a |") == "| a |\n  \nnext\n"

    def test_insert_uses_document_line_endings(self):
        assert insert_at_line("a\r\nb\r\n", 2, "T\nU\n") == "a\r\nT\r\nU\r\nb\r\n"

    def test_insert_after_unterminated_crlf_document(self):
        assert insert_at_line("a\r\nb", 5, "T\n") == "a\r\nb\r\nT\r\n"

    def test_insert_before_line(self):
        assert insert_at_line("a\nb\n", 2, "T\n") == "a\nT\nb\n"

    def test_insert_at_start(self):
        assert insert_at_line("a\n", 1, "T\n") == "T\na\n"
        assert insert_at_line("a\n", 0, "T\n") == "T\na\n"

    def test_insert_past_end_appends(self):
        assert insert_at_line("a\nb\n", 10, "T\n") == "a\nb\nT\n"

    def test_insert_after_unterminated_last_line(self):
        assert insert_at_line("a", 5, "T\n") == "a\nT\n"

    def test_insert_into_empty_text(self):
        assert insert_at_line("", 3, "T\n") == "T\n"
