"""Table Reader: locate and iterate HTML tables in parsed documents."""

from table_reader.exceptions import (
    AmbiguousSelectionError,
    EndOfSequenceError,
    IndexOutOfRangeError,
    InvalidSelectorError,
    NoTableFoundError,
    NotATableError,
    SourceReadError,
    TableReaderError,
    UnsupportedOperationError,
)
from table_reader.headings import HeadingInferrer
from table_reader.locator import TableLocator
from table_reader.models import HeadingSet, SelectorSpec, TableHandle
from table_reader.rows import RowIterator
from table_reader.session import ExtractionSession

__version__ = "0.1.0"

__all__ = [
    "ExtractionSession",
    "TableLocator",
    "HeadingInferrer",
    "RowIterator",
    "TableHandle",
    "HeadingSet",
    "SelectorSpec",
    "TableReaderError",
    "NoTableFoundError",
    "AmbiguousSelectionError",
    "IndexOutOfRangeError",
    "NotATableError",
    "InvalidSelectorError",
    "EndOfSequenceError",
    "UnsupportedOperationError",
    "SourceReadError",
]
