"""Heading inference for located tables."""

import copy

import structlog
from bs4.element import Tag

from table_reader.config.settings import ReaderSettings
from table_reader.models import HeadingSet, TableHandle

logger = structlog.get_logger(__name__)


class HeadingInferrer:
    """Determines column headings for a table.

    The first row's header cells are used when present. Otherwise one
    placeholder heading is synthesized per data cell of the first row,
    named by position and keeping the data cell's attributes.
    """

    def __init__(self, settings: ReaderSettings | None = None):
        self.settings = settings or ReaderSettings()

    def infer(self, table: TableHandle) -> HeadingSet:
        """Infer headings without disturbing later iteration.

        Every read goes through a fresh cursor, so the caller's own cursor
        still starts at the first row.
        """
        cursor = table.cursor(self.settings.any_cell_selector)
        if not cursor.has_next():
            logger.debug("Table has no rows, no headings")
            return HeadingSet([], synthesized=True)

        headers = cursor.next(self.settings.header_cell_selector)
        if headers:
            logger.debug("Using header row", columns=len(headers))
            return HeadingSet(headers)

        # rewind and peek at the first row of data
        cursor = table.cursor(self.settings.any_cell_selector)
        first_row = cursor.next(self.settings.data_cell_selector)
        placeholders = [self._placeholder(cell, i) for i, cell in enumerate(first_row)]

        logger.debug("Synthesized headings", columns=len(placeholders))
        return HeadingSet(placeholders, synthesized=True)

    def _placeholder(self, cell: Tag, position: int) -> Tag:
        heading = copy.copy(cell)
        heading.name = self._header_tag_name()
        heading.string = f"{self.settings.placeholder_prefix}{position}"
        return heading

    def _header_tag_name(self) -> str:
        # a bare tag name is expected here; fall back to th for compound selectors
        name = self.settings.header_cell_selector
        return name if name.isalnum() else "th"
