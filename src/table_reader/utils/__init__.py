"""Utility helpers."""

from table_reader.utils.filtering import TypeFilterIterator

__all__ = ["TypeFilterIterator"]
