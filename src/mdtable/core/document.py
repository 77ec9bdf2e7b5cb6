"""Line-range editing of larger documents.

The formatter and generator work on bare table text; these helpers let the
CLI apply them to part of a file, the way an editor applies them to the
current selection or cursor position.
"""
from __future__ import annotations

import re

from pydantic import BaseModel, Field, model_validator

_RANGE = re.compile(r"^\s*(\d+)\s*(?::\s*(\d*)\s*)?$")
# Final line break plus any blank lines after it.
_TRAILING_BREAKS = re.compile(r"\r?\n(?:[ \t]*\r?\n)*\Z")


class LineRange(BaseModel):
    """A 1-based, inclusive range of lines. ``end=None`` runs to the end."""

    start: int = Field(ge=1)
    end: int | None = None

    @model_validator(mode="after")
    def _check_order(self) -> "LineRange":
        if self.end is not None and self.end < self.start:
            raise ValueError(f"end line {self.end} is before start line {self.start}")
        return self

    @classmethod
    def parse(cls, spec: str) -> "LineRange":
        """Parse ``"START:END"``, ``"START:"`` or a single line number."""
        match = _RANGE.match(spec)
        if not match:
            raise ValueError(f"invalid line range: {spec!r} (expected START:END)")
        start, end = match.groups()
        if end is None:
            end = start
        return cls(start=int(start), end=int(end) if end else None)

    def as_slice(self, line_count: int) -> slice:
        """Python slice over a list of ``line_count`` lines."""
        start = min(self.start - 1, line_count)
        end = line_count if self.end is None else min(self.end, line_count)
        return slice(start, end)


def _line_ending(text: str) -> str:
    if text.endswith('\r\n'):
        return '\r\n'
    if text.endswith('\n'):
        return '\n'
    return ''


def _newline_of(text: str) -> str:
    """The line break style used by ``text``, LF when it has none."""
    return '\r\n' if '\r\n' in text else '\n'


def _match_newlines(snippet: str, newline: str) -> str:
    if newline == '\r\n' and '\r' not in snippet:
        return snippet.replace('\n', '\r\n')
    return snippet


def select_lines(text: str, line_range: LineRange) -> str:
    """Return the text of the selected lines, line breaks included."""
    lines = text.splitlines(keepends=True)
    return ''.join(lines[line_range.as_slice(len(lines))])


def replace_lines(text: str, line_range: LineRange, replacement: str) -> str:
    """Replace the selected lines with ``replacement``.

    The replacement takes the selection's line break style. If the
    selection ended in line breaks (blank lines included) and the
    replacement does not, they are kept so the following text stays
    where it was.
    """
    lines = text.splitlines(keepends=True)
    span = line_range.as_slice(len(lines))
    selected = ''.join(lines[span])

    replacement = _match_newlines(replacement, _newline_of(selected or text))
    trailing = _TRAILING_BREAKS.search(selected)
    if trailing and not replacement.endswith(('\n', '\r')):
        replacement += trailing.group(0)

    return ''.join(lines[:span.start]) + replacement + ''.join(lines[span.stop:])


def insert_at_line(text: str, line: int, snippet: str) -> str:
    """Insert ``snippet`` before 1-based ``line``; past the end appends.

    The snippet takes the line break style of ``text``.
    """
    newline = _newline_of(text)
    lines = text.splitlines(keepends=True)
    index = min(max(line, 1) - 1, len(lines))
    before = ''.join(lines[:index])
    if before and not _line_ending(before):
        before += newline
    return before + _match_newlines(snippet, newline) + ''.join(lines[index:])
