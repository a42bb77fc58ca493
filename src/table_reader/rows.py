"""Lazy row cursor over a located table."""

from collections.abc import Sequence

import structlog
from bs4.element import Tag

from table_reader.exceptions import EndOfSequenceError, UnsupportedOperationError

logger = structlog.get_logger(__name__)


class RowIterator:
    """Iterates over table rows, returning the selected cells of each row.

    The iterator is a view over an already-resolved list of row elements, so
    creating a new one is cheap and never touches the document again.
    """

    def __init__(self, rows: Sequence[Tag], default_cells: str = "th,td"):
        """Initialize the iterator.

        Args:
            rows: Row elements in document order.
            default_cells: Cell selector used when ``next`` gets none.
        """
        self._rows = rows
        self._position = 0
        self.default_cells = default_cells

    @property
    def position(self) -> int:
        """Number of rows consumed so far."""
        return self._position

    def has_next(self) -> bool:
        """Return True if another row is available. Never advances."""
        return self._position < len(self._rows)

    def next(self, cell_selector: str | None = None) -> list[Tag]:
        """Advance one row and return its cells.

        Args:
            cell_selector: Selector for the cells to return. Defaults to
                header and data cells.

        Returns:
            The matching cells of the row, in document order.

        Raises:
            EndOfSequenceError: If no rows remain.
        """
        if not self.has_next():
            raise EndOfSequenceError("no more rows")

        row = self._rows[self._position]
        self._position += 1
        return list(row.select(cell_selector or self.default_cells))

    def remove(self) -> None:
        raise UnsupportedOperationError("rows cannot be removed through the iterator")

    def __iter__(self) -> "RowIterator":
        return self

    def __next__(self) -> list[Tag]:
        return self.next()

    def __repr__(self) -> str:
        return f"RowIterator(position={self._position}, rows={len(self._rows)})"
