"""Iterator adapter that yields only elements of a given type."""

from collections.abc import Iterable, Iterator
from typing import Generic, TypeVar

T = TypeVar("T")

_MISSING = object()


class TypeFilterIterator(Generic[T]):
    """Lazily yields the elements of ``source`` that are instances of ``target_type``.

    Elements of other types, including ``None``, are skipped. ``has_next``
    looks ahead and keeps the next qualifying element, so calling it
    repeatedly has no further effect.
    """

    def __init__(self, source: Iterable, target_type: type[T]):
        self._source = iter(source)
        self.target_type = target_type
        self._pending = _MISSING

    def has_next(self) -> bool:
        if self._pending is not _MISSING:
            return True
        for item in self._source:
            if isinstance(item, self.target_type):
                self._pending = item
                return True
        return False

    def __iter__(self) -> Iterator[T]:
        return self

    def __next__(self) -> T:
        if not self.has_next():
            raise StopIteration
        item, self._pending = self._pending, _MISSING
        return item
