"""Extraction session: cached table location and heading inference."""

from pathlib import Path
from typing import IO

import structlog
from bs4.element import Tag

from table_reader.config.settings import Settings, get_settings
from table_reader.exceptions import TableReaderError
from table_reader.headings import HeadingInferrer
from table_reader.locator import TableLocator
from table_reader.models import HeadingSet, SelectorSpec, TableHandle
from table_reader.rows import RowIterator
from table_reader.sources import load_document

logger = structlog.get_logger(__name__)


class ExtractionSession:
    """Exposes one table of a parsed document as a sequence of rows.

    The table is located on the first iteration request and cached together
    with its headings until ``refresh()`` is called. Each call to
    ``iterate()`` returns a fresh iterator starting at the first row; the
    header row is not skipped.

    Example:
        >>> session = ExtractionSession(soup, selector="table.prices")
        >>> for row in session:
        ...     print([cell.get_text(strip=True) for cell in row])
    """

    def __init__(
        self,
        document: Tag,
        selector: str | None = None,
        index: int | None = None,
        *,
        settings: Settings | None = None,
    ):
        """Initialize session.

        Args:
            document: Parsed document (a BeautifulSoup tree).
            selector: Optional CSS selector narrowing the table choice.
            index: Optional position among the selector's matches.
            settings: Settings override. Defaults to the cached settings.
        """
        self.document = document
        self.selection = SelectorSpec(selector=selector, index=index)
        self.settings = settings or get_settings()

        self._locator = TableLocator(self.settings.reader)
        self._inferrer = HeadingInferrer(self.settings.reader)
        self._table: TableHandle | None = None
        self._headings: HeadingSet | None = None

    @classmethod
    def from_source(
        cls,
        source: str | Path | IO,
        selector: str | None = None,
        index: int | None = None,
        *,
        settings: Settings | None = None,
    ) -> "ExtractionSession":
        """Load a document from a file, URL, stream or HTML text.

        Raises:
            SourceReadError: If the source cannot be read.
        """
        settings = settings or get_settings()
        document = load_document(source, settings=settings.source)
        return cls(document, selector, index, settings=settings)

    @property
    def table(self) -> TableHandle:
        """The located table, locating it if necessary."""
        if self._table is None:
            self._table = self._locate()
        return self._table

    def iterate(self) -> RowIterator:
        """Return a fresh row iterator positioned at the first row.

        Locates the table and infers headings on first use. Nothing is
        cached if either step fails.
        """
        table = self._table if self._table is not None else self._locate()

        if self._headings is None:
            try:
                headings = self._inferrer.infer(table)
            except Exception as e:
                raise TableReaderError(f"Cannot infer headings: {e}") from e
            self._headings = headings

        self._table = table
        return table.cursor(self.settings.reader.any_cell_selector)

    def get_headings(self) -> HeadingSet:
        """Return the table's headings, computing them if necessary."""
        if self._headings is None:
            self.iterate()
        return self._headings

    def refresh(self) -> None:
        """Discard the cached table and headings."""
        logger.debug("Refreshing extraction session")
        self._table = None
        self._headings = None

    def close(self) -> None:
        """Release the cached table and headings."""
        self.refresh()

    def _locate(self) -> TableHandle:
        try:
            table = self._locator.locate(
                self.document, self.selection.selector, self.selection.index
            )
        except TableReaderError:
            raise
        except Exception as e:
            raise TableReaderError(f"Cannot locate table: {e}") from e

        logger.info(
            "Located table",
            selector=self.selection.selector,
            index=self.selection.index,
            rows=table.row_count,
        )
        return table

    def __iter__(self) -> RowIterator:
        return self.iterate()

    def __enter__(self) -> "ExtractionSession":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()
