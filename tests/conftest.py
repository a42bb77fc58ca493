"""Pytest configuration and fixtures."""

import pytest
import structlog
from bs4 import BeautifulSoup

from table_reader.config.settings import Settings


def make_soup(html: str) -> BeautifulSoup:
    """Parse HTML the way the library does by default."""
    return BeautifulSoup(html, "lxml")


@pytest.fixture
def settings():
    """Settings with defaults, independent of the environment cache."""
    return Settings()


@pytest.fixture
def scored_tables_html():
    """Three tables scoring 6, 0 and 4 (rows x first-row cells)."""
    return """
    <html><body>
      <table id="six">
        <tr><th>name</th><th>price</th></tr>
        <tr><td>apple</td><td>1.20</td></tr>
        <tr><td>pear</td><td>0.95</td></tr>
      </table>
      <table id="zero"></table>
      <table id="four">
        <tr><td>x</td><td>1</td></tr>
        <tr><td>y</td><td>2</td></tr>
      </table>
    </body></html>
    """


@pytest.fixture
def header_table_html():
    """Single table whose first row holds header cells a, b, c."""
    return """
    <html><body>
      <p>Quarterly figures</p>
      <table class="data">
        <tr><th>a</th><th>b</th><th>c</th></tr>
        <tr><td>1</td><td>2</td><td>3</td></tr>
        <tr><td>4</td><td>5</td><td>6</td></tr>
      </table>
    </body></html>
    """


@pytest.fixture
def headerless_table_html():
    """Single table without header cells, four columns wide."""
    return """
    <html><body>
      <table>
        <tr><td class="num">10</td><td>20</td><td>30</td><td>40</td></tr>
        <tr><td class="num">11</td><td>21</td><td>31</td><td>41</td></tr>
      </table>
    </body></html>
    """


@pytest.fixture
def header_soup(header_table_html):
    return make_soup(header_table_html)


@pytest.fixture
def headerless_soup(headerless_table_html):
    return make_soup(headerless_table_html)


@pytest.fixture
def soup_factory():
    """Factory parsing HTML snippets into documents."""
    return make_soup


@pytest.fixture(autouse=True)
def reset_logging():
    """Undo logging configuration done by the CLI between tests."""
    yield
    structlog.reset_defaults()
