"""Table location: explicit selection or best-table heuristic."""

import structlog
from bs4.element import Tag
from soupsieve import SelectorSyntaxError

from table_reader.config.settings import ReaderSettings
from table_reader.exceptions import (
    AmbiguousSelectionError,
    IndexOutOfRangeError,
    InvalidSelectorError,
    NoTableFoundError,
    NotATableError,
)
from table_reader.models import SelectorSpec, TableHandle

logger = structlog.get_logger(__name__)


class TableLocator:
    """Finds exactly one table element in a parsed document.

    Without a selector, every table is scored as ``rows * cols`` where
    ``cols`` is the number of cells in its first row, and the highest score
    wins. With a selector, the matching element (optionally picked by
    position) must itself be a table.
    """

    def __init__(self, settings: ReaderSettings | None = None):
        """Initialize locator.

        Args:
            settings: Selectors for tables, rows and cells.
        """
        self.settings = settings or ReaderSettings()

    def locate(
        self,
        document: Tag,
        selector: str | None = None,
        index: int | None = None,
    ) -> TableHandle:
        """Locate a table and resolve its rows.

        Args:
            document: Parsed document or any subtree of it.
            selector: Optional CSS selector. Empty means heuristic selection.
            index: Optional position within the selector's matches.

        Returns:
            Handle for the chosen table.
        """
        selection = SelectorSpec(selector=selector, index=index)
        if selection.is_explicit:
            element = self.select_table(document, selection.selector, selection.index)
        else:
            element = self.best_table(document)

        return TableHandle.resolve(element, self.settings.row_selector)

    def select_table(self, document: Tag, selector: str, index: int | None = None) -> Tag:
        """Pick the table matched by an explicit selector."""
        matches = self._select(document, selector)

        if index is None:
            if len(matches) != 1:
                raise AmbiguousSelectionError(selector, len(matches))
            element = matches[0]
        else:
            if not 0 <= index < len(matches):
                raise IndexOutOfRangeError(selector, index, len(matches))
            element = matches[index]

        if element.name != self.settings.table_tag:
            raise NotATableError(selector, element.name)

        logger.debug(
            "Selected table by selector",
            selector=selector,
            index=index,
            matches=len(matches),
        )
        return element

    def best_table(self, document: Tag) -> Tag:
        """Pick the table with the highest rows * first-row-cells score.

        Later tables replace the current best only with a strictly greater
        score, so ties go to the first table in document order.
        """
        best_table = None
        best_score = -1

        for position, table in enumerate(document.select(self.settings.table_tag)):
            score = self.score(table)
            logger.debug("Scored table", position=position, score=score)
            if score > best_score:
                best_table = table
                best_score = score

        if best_table is None:
            raise NoTableFoundError("no tables found")

        logger.debug("Selected best table", score=best_score)
        return best_table

    def score(self, table: Tag) -> int:
        """Score a table; a table without rows scores 0."""
        rows = table.select(self.settings.row_selector)
        if not rows:
            return 0

        cols = len(rows[0].select(self.settings.any_cell_selector))
        return len(rows) * cols

    @staticmethod
    def _select(document: Tag, selector: str) -> list[Tag]:
        try:
            return list(document.select(selector))
        except SelectorSyntaxError as e:
            raise InvalidSelectorError(f"invalid selector {selector!r}: {e}") from e
