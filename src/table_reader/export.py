"""Converting extracted rows to text, records and DataFrames."""

from collections.abc import Iterable

import pandas as pd
from bs4.element import Tag

from table_reader.models import cell_text
from table_reader.session import ExtractionSession

__all__ = ["cell_text", "row_texts", "data_rows", "column_names", "to_records", "to_dataframe"]


def row_texts(rows: Iterable[list[Tag]]) -> list[list[str]]:
    """Convert rows of cells to rows of text."""
    return [[cell_text(cell) for cell in row] for row in rows]


def data_rows(session: ExtractionSession) -> list[list[str]]:
    """Return the table's rows as text, minus the header row.

    The header row is only dropped when the headings came from the table's
    own header cells; synthesized headings mean every row is data.
    """
    rows = row_texts(session.iterate())
    if rows and not session.get_headings().synthesized:
        rows = rows[1:]
    return rows


def column_names(names: list[str], prefix: str = "col") -> list[str]:
    """Make heading names usable as unique column keys.

    Empty names become ``{prefix}{position}``; repeats get a ``_1``, ``_2``
    suffix in order of appearance.
    """
    seen: dict[str, int] = {}
    unique = []
    for position, name in enumerate(names):
        name = name or f"{prefix}{position}"
        candidate = name
        while candidate in seen:
            seen[name] += 1
            candidate = f"{name}_{seen[name]}"
        seen.setdefault(name, 0)
        seen[candidate] = 0
        unique.append(candidate)
    return unique


def _aligned_rows(session: ExtractionSession) -> tuple[list[str], list[list[str]]]:
    prefix = session.settings.reader.placeholder_prefix
    columns = column_names(session.get_headings().names, prefix)
    width = len(columns)
    rows = [(row + [""] * width)[:width] for row in data_rows(session)]
    return columns, rows


def to_records(session: ExtractionSession) -> list[dict[str, str]]:
    """Return data rows as dicts keyed by unique column name.

    Rows shorter than the heading row are padded with empty strings; cells
    beyond the last heading are dropped.
    """
    columns, rows = _aligned_rows(session)
    return [dict(zip(columns, row)) for row in rows]


def to_dataframe(session: ExtractionSession) -> pd.DataFrame:
    """Return data rows as a DataFrame of strings with unique heading columns."""
    columns, rows = _aligned_rows(session)
    return pd.DataFrame(rows, columns=columns, dtype=str)
