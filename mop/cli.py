#!/usr/bin/env python3
"""
Command-line entry point for mop.

Usage: mop data.csv > cleaned_data.csv
       cat data.csv | mop - > cleaned_data.csv
"""

import argparse
import logging
import sys
from typing import List, Optional, TextIO

import pandas as pd

from . import __version__
from .csvio import DEFAULT_FORMAT, CsvFormat, open_input, read_csv, render_csv, to_frame, write_output
from .errors import MopError
from .normalize import clean_headers
from .reconcile import reconcile

DESCRIPTION = """\
mop reads a CSV file, cleans and standardizes the column names, and writes
the modified CSV to stdout.

It removes special characters, transliterates Unicode characters to ASCII,
replaces spaces with underscores, and makes every column name unique."""

EXAMPLES = """\
examples:

  mop data.csv > cleaned_data.csv

  mop data.csv | some_other_command

  cat data.csv | mop - > cleaned_data.csv"""


def parse_args(argv: Optional[List[str]] = None):
    ap = argparse.ArgumentParser(
        prog="mop",
        description=DESCRIPTION,
        epilog=EXAMPLES,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    ap.add_argument("file", nargs="?", default=None,
                    help="CSV file to process (reads from stdin if not provided or '-')")
    ap.add_argument("-V", "--version", action="version", version=f"%(prog)s {__version__}")
    return ap.parse_args(argv)


def run(path: Optional[str], stdout: TextIO, fmt: CsvFormat = DEFAULT_FORMAT) -> pd.DataFrame:
    """Clean one CSV end to end. Nothing reaches `stdout` unless every row parsed."""
    with open_input(path) as stream:
        raw_headers, records = read_csv(stream, fmt)

    headers, records = reconcile(clean_headers(raw_headers), records)
    logging.debug("Columns: %s", ", ".join(headers))

    df = to_frame(headers, records)
    write_output(render_csv(df, fmt), stdout)
    return df


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(level=logging.WARNING, format="%(asctime)s %(levelname)s %(message)s")

    try:
        run(args.file, sys.stdout)
    except MopError as exc:
        logging.error("%s", exc)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
