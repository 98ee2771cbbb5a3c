"""Tests for plain-text result rendering."""

from __future__ import annotations

from dbvi.db.results import MAX_CELL_WIDTH, QueryResult, format_result


def test_aligned_table():
    result = QueryResult(columns=["id", "name"], rows=[(1, "Alice"), (22, "Bob")])

    assert format_result(result) == "\n".join(
        [
            "id | name",
            "---+------",
            "1  | Alice",
            "22 | Bob",
        ]
    )


def test_null_and_bytes_cells():
    result = QueryResult(columns=["a", "b"], rows=[(None, b"\x01\xff")])

    assert format_result(result).splitlines()[-1] == "NULL | 0x01ff"


def test_newlines_are_flattened():
    result = QueryResult(columns=["note"], rows=[("line one\nline two",)])

    assert format_result(result).splitlines()[-1] == "line one line two"


def test_long_cells_are_capped():
    result = QueryResult(columns=["body"], rows=[("x" * 500,)])

    last_line = format_result(result).splitlines()[-1]
    assert len(last_line) == MAX_CELL_WIDTH
    assert last_line.endswith("...")


def test_no_rows():
    result = QueryResult(columns=["id"], rows=[])

    assert format_result(result).splitlines() == ["id", "--", "(0 rows)"]


def test_truncated_result_is_marked():
    result = QueryResult(columns=["n"], rows=[(1,), (2,)], truncated=True)

    assert format_result(result).splitlines()[-1] == "... truncated at 2 rows"


def test_no_columns():
    assert format_result(QueryResult()) == ""
