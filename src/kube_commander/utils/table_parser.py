"""Reinterpret kubectl's column-aligned text as a resource table."""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable

from kube_commander.models.table import Cell, RawOutput, ResourceTable
from kube_commander.utils.duration import parse_duration

logger = logging.getLogger(__name__)

# kubectl pads columns with at least three spaces; a single space may sit
# inside a header ("NOMINATED NODE", "READINESS GATES").
_HEADER_CELL_RE = re.compile(r"\S+(?: \S+)*")
_HEADER_NAME_RE = re.compile(r"[A-Z][A-Z0-9_()/.\-]*(?: [A-Z][A-Z0-9_()/.\-]*)*")


class TableParseError(ValueError):
    pass


def _header_columns(line: str) -> list[tuple[str, int]]:
    columns: list[tuple[str, int]] = []
    for match in _HEADER_CELL_RE.finditer(line):
        name = match.group(0)
        if not _HEADER_NAME_RE.fullmatch(name):
            raise TableParseError(f"not a header cell: {name!r}")
        columns.append((name, match.start()))
    if not columns:
        raise TableParseError("empty header")
    if columns[0][1] != 0:
        raise TableParseError("header does not start at column 0")
    return columns


def _split_row(line: str, offsets: list[int]) -> list[str]:
    cells: list[str] = []
    for i, start in enumerate(offsets):
        if i > 0 and start < len(line) and start > 0 and line[start - 1] != " ":
            raise TableParseError(f"cell straddles column boundary at {start}")
        end = offsets[i + 1] if i + 1 < len(offsets) else len(line)
        cells.append(line[start:end].strip() if start < len(line) else "")
    return cells


def _parse(text: str, duration_columns: Iterable[str]) -> ResourceTable:
    lines = [line.rstrip() for line in text.splitlines()]
    while lines and not lines[0]:
        lines.pop(0)
    while lines and not lines[-1]:
        lines.pop()
    if not lines:
        raise TableParseError("no output")
    if any(not line for line in lines):
        # "kubectl get pods,svc" prints one table per kind separated by blank lines
        raise TableParseError("more than one table block")

    header = _header_columns(lines[0])
    names = [name for name, _ in header]
    offsets = [offset for _, offset in header]
    durations = {name for name in names if name in set(duration_columns)}

    rows: list[dict[str, Cell]] = []
    for line in lines[1:]:
        cells = _split_row(line, offsets)
        row: dict[str, Cell] = {}
        for name, cell in zip(names, cells):
            row[name] = parse_duration(cell) if name in durations else cell
        rows.append(row)
    return ResourceTable(columns=names, rows=rows)


def parse_table(
    text: str, duration_columns: Iterable[str] = ("AGE",),
) -> ResourceTable | RawOutput:
    """Parse *text* into a ResourceTable, or hand it back as RawOutput.

    Never raises: any text that does not look like a single kubectl table
    comes back unchanged.
    """
    try:
        return _parse(text, tuple(duration_columns))
    except Exception:
        logger.debug("Output is not a resource table, keeping raw text", exc_info=True)
        return RawOutput(text=text)
