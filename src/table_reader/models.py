"""Data models for located tables and their headings."""

from collections.abc import Iterator, Sequence
from dataclasses import dataclass, field

from bs4.element import Tag

from table_reader.rows import RowIterator


def cell_text(cell: Tag) -> str:
    """Return a cell's text, pieces joined by single spaces."""
    return cell.get_text(" ", strip=True)


@dataclass(frozen=True)
class SelectorSpec:
    """Optional selector narrowing the table choice.

    An empty or missing selector means the best table is picked heuristically.
    """

    selector: str | None = None
    index: int | None = None

    @property
    def is_explicit(self) -> bool:
        return bool(self.selector)


@dataclass
class TableHandle:
    """A located table element with its rows resolved once.

    Cursors created from the handle are views over ``rows``; the document is
    never queried again for the same handle.
    """

    element: Tag
    rows: list[Tag] = field(default_factory=list)

    @classmethod
    def resolve(cls, element: Tag, row_selector: str = "tr") -> "TableHandle":
        """Build a handle, resolving the table's rows in document order."""
        return cls(element=element, rows=list(element.select(row_selector)))

    @property
    def row_count(self) -> int:
        return len(self.rows)

    def cursor(self, default_cells: str = "th,td") -> RowIterator:
        """Create a fresh cursor positioned at the first row."""
        return RowIterator(self.rows, default_cells=default_cells)


class HeadingSet(Sequence):
    """Ordered heading cells for a table.

    Cells are either the table's own header cells or synthesized
    placeholders named by position (``col0``, ``col1``, ...).
    """

    def __init__(self, cells: list[Tag] | None = None, synthesized: bool = False):
        self._cells = list(cells or [])
        self.synthesized = synthesized

    def __getitem__(self, index):
        return self._cells[index]

    def __len__(self) -> int:
        return len(self._cells)

    def __iter__(self) -> Iterator[Tag]:
        return iter(self._cells)

    @property
    def names(self) -> list[str]:
        """Heading names as cell text."""
        return [cell_text(cell) for cell in self._cells]

    def __repr__(self) -> str:
        return f"HeadingSet({self.names!r}, synthesized={self.synthesized})"
