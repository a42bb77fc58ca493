"""Command-line interface for extracting a table from a document."""

import argparse
import json
import sys

import structlog

from table_reader import __version__
from table_reader.config.settings import get_settings
from table_reader.exceptions import TableReaderError
from table_reader.export import row_texts, to_dataframe, to_records
from table_reader.log_config import configure_logging
from table_reader.session import ExtractionSession

logger = structlog.get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="table-reader",
        description="Extract a table from an HTML document",
    )
    parser.add_argument("source", help="File path, URL, or '-' for standard input")
    parser.add_argument("--selector", "-s", help="CSS selector for the table")
    parser.add_argument("--index", "-i", type=int, help="Position among the selector's matches")
    parser.add_argument(
        "--format",
        "-f",
        choices=["csv", "json", "text"],
        default="csv",
        help="Output format (default: csv)",
    )
    parser.add_argument("--output", "-o", help="Write to this file instead of standard output")
    parser.add_argument(
        "--headings-only",
        action="store_true",
        help="Print only the inferred headings",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def render(session: ExtractionSession, output_format: str, headings_only: bool = False) -> str:
    """Render the session's table in the requested format."""
    if headings_only:
        names = session.get_headings().names
        return json.dumps(names) if output_format == "json" else "\t".join(names)

    if output_format == "json":
        return json.dumps(to_records(session), indent=2, ensure_ascii=False)
    if output_format == "text":
        return "\n".join("\t".join(row) for row in row_texts(session.iterate()))
    return to_dataframe(session).to_csv(index=False)


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    settings = get_settings()
    configure_logging(settings.logging)

    source = sys.stdin if args.source == "-" else args.source

    try:
        with ExtractionSession.from_source(
            source, args.selector, args.index, settings=settings
        ) as session:
            output = render(session, args.format, args.headings_only)
    except TableReaderError as e:
        logger.error("Table extraction failed", source=args.source, error=str(e))
        print(f"table-reader: {e}", file=sys.stderr)
        return 1

    if args.output:
        with open(args.output, "w", encoding="utf-8") as f:
            f.write(output)
    else:
        sys.stdout.write(output)
        if not output.endswith("\n"):
            sys.stdout.write("\n")
    return 0
