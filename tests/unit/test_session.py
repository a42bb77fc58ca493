"""Unit tests for the extraction session."""

from unittest.mock import patch

import pytest

from table_reader.exceptions import NoTableFoundError, NotATableError, TableReaderError
from table_reader.session import ExtractionSession


def texts(cells):
    return [cell.get_text(strip=True) for cell in cells]


class TestIterate:
    """Tests for lazy location and iteration."""

    def test_header_row_is_still_iterated(self, header_soup, settings):
        """Headings are inferred, yet iteration starts at the header row."""
        session = ExtractionSession(header_soup, settings=settings)

        rows = session.iterate()

        assert session.get_headings().names == ["a", "b", "c"]
        assert texts(rows.next()) == ["a", "b", "c"]
        assert texts(rows.next()) == ["1", "2", "3"]

    def test_synthesized_headings(self, headerless_soup, settings):
        """A headerless table gets positional headings and keeps all rows."""
        session = ExtractionSession(headerless_soup, settings=settings)

        assert session.get_headings().names == ["col0", "col1", "col2", "col3"]
        assert [texts(row) for row in session] == [
            ["10", "20", "30", "40"],
            ["11", "21", "31", "41"],
        ]

    def test_each_iterate_returns_fresh_iterator(self, header_soup, settings):
        """Every call starts again at the first row."""
        session = ExtractionSession(header_soup, settings=settings)

        first = session.iterate()
        first.next()
        second = session.iterate()

        assert second is not first
        assert second.position == 0

    def test_table_is_located_once(self, header_soup, settings):
        """The cached table is reused across iterations."""
        session = ExtractionSession(header_soup, settings=settings)

        with patch.object(session._locator, "locate", wraps=session._locator.locate) as locate:
            session.iterate()
            session.iterate()
            session.get_headings()

        assert locate.call_count == 1

    def test_get_headings_triggers_location(self, header_soup, settings):
        """Headings are available without calling iterate first."""
        session = ExtractionSession(header_soup, "table.data", settings=settings)

        assert session.get_headings().names == ["a", "b", "c"]
        assert session.table.row_count == 3

    def test_empty_table_yields_no_rows(self, soup_factory, settings):
        """A lone empty table iterates to nothing."""
        session = ExtractionSession(soup_factory("<table></table>"), settings=settings)

        rows = session.iterate()

        assert not rows.has_next()
        assert len(session.get_headings()) == 0

    def test_session_is_iterable(self, header_soup, settings):
        """Iterating the session walks every row."""
        session = ExtractionSession(header_soup, settings=settings)

        assert len(list(session)) == 3


class TestRefresh:
    """Tests for cache invalidation."""

    def test_cached_table_survives_document_change(self, header_soup, settings):
        """Without refresh, the cached table is still used."""
        session = ExtractionSession(header_soup, settings=settings)
        session.iterate()

        header_soup.select_one("table").extract()

        assert texts(session.iterate().next()) == ["a", "b", "c"]

    def test_refresh_relocates(self, header_soup, settings):
        """After refresh, a removed table is no longer found."""
        session = ExtractionSession(header_soup, settings=settings)
        session.iterate()

        header_soup.select_one("table").extract()
        session.refresh()

        with pytest.raises(NoTableFoundError):
            session.iterate()

    def test_refresh_picks_up_new_best_table(self, header_soup, soup_factory, settings):
        """A larger table added to the document wins after refresh."""
        session = ExtractionSession(header_soup, settings=settings)
        assert session.get_headings().names == ["a", "b", "c"]

        bigger = soup_factory(
            "<table><tr><th>w</th><th>x</th><th>y</th><th>z</th></tr>"
            "<tr><td>1</td><td>2</td><td>3</td><td>4</td></tr>"
            "<tr><td>5</td><td>6</td><td>7</td><td>8</td></tr></table>"
        ).select_one("table")
        header_soup.body.append(bigger)
        session.refresh()

        assert session.get_headings().names == ["w", "x", "y", "z"]


class TestErrors:
    """Tests for failure propagation."""

    def test_failure_is_not_cached(self, soup_factory, settings):
        """A failed location can be retried once the document changes."""
        soup = soup_factory("<html><body><p>no table yet</p></body></html>")
        session = ExtractionSession(soup, settings=settings)

        with pytest.raises(NoTableFoundError):
            session.iterate()

        soup.body.append(soup_factory("<table><tr><td>1</td></tr></table>").select_one("table"))

        assert session.get_headings().names == ["col0"]

    def test_not_a_table_propagates(self, header_soup, settings):
        """Selection errors reach the caller unchanged."""
        session = ExtractionSession(header_soup, "p", settings=settings)

        with pytest.raises(NotATableError):
            session.get_headings()

    def test_unexpected_errors_are_wrapped(self, header_soup, settings):
        """Failures outside the error family are wrapped in TableReaderError."""
        session = ExtractionSession(header_soup, settings=settings)

        with patch.object(session._locator, "locate", side_effect=RuntimeError("boom")):
            with pytest.raises(TableReaderError, match="boom"):
                session.iterate()

        assert session._table is None
        assert session._headings is None

    def test_inference_failure_caches_nothing(self, header_soup, settings):
        """A failing heading inference leaves the session empty."""
        session = ExtractionSession(header_soup, settings=settings)

        with patch.object(session._inferrer, "infer", side_effect=RuntimeError("bad row")):
            with pytest.raises(TableReaderError):
                session.iterate()

        assert session._table is None
        assert session.get_headings().names == ["a", "b", "c"]


class TestClose:
    """Tests for resource release."""

    def test_context_manager_closes(self, header_soup, settings):
        """Leaving the with block drops cached state."""
        with ExtractionSession(header_soup, settings=settings) as session:
            session.iterate()
            assert session._table is not None

        assert session._table is None
        assert session._headings is None

    def test_close_is_idempotent(self, header_soup, settings):
        session = ExtractionSession(header_soup, settings=settings)
        session.close()
        session.close()
