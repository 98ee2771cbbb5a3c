"""Query result types and plain-text rendering."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

MAX_CELL_WIDTH = 80
NULL_TEXT = "NULL"
PLACEHOLDER_TEXT = "Query results will go here..."


@dataclass
class QueryResult:
    """Rows returned by a query, with their column names."""

    columns: list[str] = field(default_factory=list)
    rows: list[tuple[Any, ...]] = field(default_factory=list)
    truncated: bool = False

    @property
    def row_count(self) -> int:
        return len(self.rows)


def _format_cell(value: Any) -> str:
    if value is None:
        return NULL_TEXT
    if isinstance(value, (bytes, bytearray, memoryview)):
        text = "0x" + bytes(value).hex()
    else:
        text = str(value)
    text = text.replace("\r", " ").replace("\n", " ").replace("\t", " ")
    if len(text) > MAX_CELL_WIDTH:
        text = text[: MAX_CELL_WIDTH - 3] + "..."
    return text


def format_result(result: QueryResult) -> str:
    """Render a QueryResult as an aligned plain-text table."""
    if not result.columns:
        return f"({result.row_count} rows)" if result.rows else ""

    header = [_format_cell(col) for col in result.columns]
    body = [
        [_format_cell(row[i] if i < len(row) else None) for i in range(len(header))]
        for row in result.rows
    ]

    widths = [len(col) for col in header]
    for row in body:
        for i, cell in enumerate(row):
            widths[i] = max(widths[i], len(cell))

    def render(cells: list[str]) -> str:
        return " | ".join(cell.ljust(widths[i]) for i, cell in enumerate(cells)).rstrip()

    lines = [render(header), "-+-".join("-" * w for w in widths)]
    if body:
        lines.extend(render(row) for row in body)
    else:
        lines.append("(0 rows)")

    if result.truncated:
        lines.append(f"... truncated at {result.row_count} rows")
    return "\n".join(lines)
