"""Command line interface for docxscan.

Usage:
    docxscan search report.docx budget revenue       # keyword<TAB>paragraph per match
    docxscan search report.docx budget --missing     # keywords with no match
    docxscan paragraphs report.docx --format json    # all paragraphs as JSON
    docxscan tables report.docx --output-dir out/    # tables to a timestamped CSV
"""

import argparse
import csv
import json
import logging
import sys
from dataclasses import asdict
from datetime import datetime
from pathlib import Path
from typing import TextIO

from docxscan.config import settings
from docxscan.enums import OutputFormat
from docxscan.exceptions import DocxScanError
from docxscan.services.extraction import KeywordMatches, ParagraphFinder, ScanService, Table

logger = logging.getLogger(__name__)


def timestamped_filename(extension: str, now: datetime | None = None) -> str:
    """Build a file name like 20240102030405.csv from the current time."""
    now = now or datetime.now()
    return f"{now.strftime(settings.timestamp_format)}.{extension}"


def write_tables_csv(tables: list[Table], out: TextIO) -> None:
    """Write tables as CSV, separated by an empty record."""
    writer = csv.writer(out, delimiter=settings.csv_delimiter, lineterminator="\n")
    for index, table in enumerate(tables):
        if index:
            writer.writerow([])
        writer.writerows(table)


def render_matches(matches: list[KeywordMatches], fmt: OutputFormat, out: TextIO) -> None:
    if fmt == OutputFormat.JSON:
        json.dump([asdict(m) for m in matches], out, ensure_ascii=False, indent=2)
        out.write("\n")
        return
    for match in matches:
        for paragraph in match.results:
            out.write(f"{match.keyword}\t{paragraph}\n")


def render_lines(lines: list[str], fmt: OutputFormat, out: TextIO) -> None:
    if fmt == OutputFormat.JSON:
        json.dump(lines, out, ensure_ascii=False, indent=2)
        out.write("\n")
        return
    for line in lines:
        out.write(f"{line}\n")


def cmd_search(service: ScanService, args, out: TextIO) -> int:
    finder = ParagraphFinder(service.extract_paragraphs(args.path))
    if args.missing:
        render_lines(finder.find_missing_keywords(args.keywords), args.format, out)
    else:
        render_matches(finder.find_paragraphs_with_keywords(args.keywords), args.format, out)
    return 0


def cmd_paragraphs(service: ScanService, args, out: TextIO) -> int:
    render_lines(service.extract_paragraphs(args.path), args.format, out)
    return 0


def cmd_tables(service: ScanService, args, out: TextIO) -> int:
    tables = service.extract_tables(args.path)

    if args.output_dir is None:
        write_tables_csv(tables, out)
        return 0

    output_dir = Path(args.output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)
    target = output_dir / timestamped_filename("csv")
    with open(target, "w", encoding="utf-8", newline="") as f:
        write_tables_csv(tables, f)

    logger.info(f"Wrote {len(tables)} table(s) to {target}")
    out.write(f"{target}\n")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="docxscan",
        description="Extract tables and paragraphs from .docx files and search them",
    )
    parser.add_argument(
        "--log-level",
        default=settings.log_level,
        type=str.upper,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Logging level (default from DOCXSCAN_LOG_LEVEL)",
    )
    formats = [f.value for f in OutputFormat]
    subparsers = parser.add_subparsers(dest="command", required=True)

    search = subparsers.add_parser("search", help="Find paragraphs containing keywords")
    search.add_argument("path", help="Path to the .docx file")
    search.add_argument("keywords", nargs="+", help="Keywords to search for")
    search.add_argument(
        "--missing", action="store_true", help="List keywords with no matching paragraph"
    )
    search.add_argument("--format", type=OutputFormat, choices=formats, default=OutputFormat.TEXT)
    search.set_defaults(handler=cmd_search)

    paragraphs = subparsers.add_parser("paragraphs", help="Print every non-empty paragraph")
    paragraphs.add_argument("path", help="Path to the .docx file")
    paragraphs.add_argument(
        "--format", type=OutputFormat, choices=formats, default=OutputFormat.TEXT
    )
    paragraphs.set_defaults(handler=cmd_paragraphs)

    tables = subparsers.add_parser("tables", help="Export tables as CSV")
    tables.add_argument("path", help="Path to the .docx file")
    tables.add_argument(
        "--output-dir", help="Write a timestamped CSV file here instead of stdout"
    )
    tables.set_defaults(handler=cmd_tables)

    return parser


def main(argv=None, out: TextIO | None = None) -> int:
    args = build_parser().parse_args(argv)
    out = out or sys.stdout

    logging.basicConfig(
        level=args.log_level,
        format=settings.log_format,
        stream=sys.stderr,
    )

    try:
        return args.handler(ScanService(), args, out)
    except DocxScanError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
