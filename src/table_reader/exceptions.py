"""Exception hierarchy for table extraction.

Every error raised by this package derives from ``TableReaderError`` so that
callers can handle location, parsing and iteration failures uniformly.
"""


class TableReaderError(Exception):
    """Base class for all table extraction errors."""


class NoTableFoundError(TableReaderError):
    """The document contains no table element."""


class AmbiguousSelectionError(TableReaderError):
    """A selector without an index did not match exactly one element."""

    def __init__(self, selector: str, count: int):
        self.selector = selector
        self.count = count
        super().__init__(f"{count} HTML element(s) selected by {selector!r}")


class IndexOutOfRangeError(TableReaderError, IndexError):
    """A selector index falls outside the list of matched elements."""

    def __init__(self, selector: str, index: int, count: int):
        self.selector = selector
        self.index = index
        self.count = count
        super().__init__(
            f"index {index} out of range for {count} element(s) selected by {selector!r}"
        )


class NotATableError(TableReaderError):
    """The explicitly selected element is not a table."""

    def __init__(self, selector: str, tag: str):
        self.selector = selector
        self.tag = tag
        super().__init__(f"selected ({selector}) element is a {tag}, not a table")


class InvalidSelectorError(TableReaderError, ValueError):
    """The selector string could not be compiled."""


class EndOfSequenceError(TableReaderError, StopIteration):
    """``next()`` was called on an exhausted row iterator."""


class UnsupportedOperationError(TableReaderError):
    """The row iterator does not support mutating the row sequence."""


class SourceReadError(TableReaderError):
    """The document source could not be read or parsed."""
