# csvio.py
from contextlib import contextmanager
from dataclasses import dataclass
from typing import BinaryIO, Iterator, List, Optional, Sequence, TextIO, Tuple, Union
import csv
import io
import logging
import sys

import pandas as pd

from .errors import HeaderParseError, InputOpenError, OutputWriteError, RecordParseError

STDIN_MARKER = "-"
LINE_TERMINATOR = "\n"


@dataclass(frozen=True)
class CsvFormat:
    delimiter: str = ","
    encoding: str = "utf-8-sig"   # drops a leading BOM


DEFAULT_FORMAT = CsvFormat()


# ---------- Input ----------
@contextmanager
def open_input(path: Optional[str]) -> Iterator[Union[BinaryIO, TextIO]]:
    """Yield a byte stream for `path`; None or "-" means stdin (left open afterwards)."""
    if path is None or path == STDIN_MARKER:
        yield getattr(sys.stdin, "buffer", sys.stdin)
        return

    try:
        fh = open(path, "rb")
    except OSError as e:
        raise InputOpenError(path, e.strerror or str(e)) from e
    with fh:
        yield fh


def read_csv(stream: Union[BinaryIO, TextIO], fmt: CsvFormat = DEFAULT_FORMAT) -> Tuple[List[str], List[List[str]]]:
    """
    Read a header row and every record, tolerating ragged rows and stray quotes.
    Blank lines are skipped; no rows at all gives ([], []).
    """
    data = stream.read()
    if isinstance(data, bytes):
        text = _decode(data, fmt)
    else:
        text = data

    reader = csv.reader(io.StringIO(text, newline=""), delimiter=fmt.delimiter)
    rows = _iter_rows(reader)

    try:
        headers = next(rows, [])
    except csv.Error as e:
        raise HeaderParseError(str(e)) from e

    records: List[List[str]] = []
    try:
        for row in rows:
            records.append(row)
    except csv.Error as e:
        raise RecordParseError(reader.line_num, str(e)) from e

    logging.debug("Read %d header(s) and %d record(s)", len(headers), len(records))
    return headers, records


def _decode(data: bytes, fmt: CsvFormat) -> str:
    """Decode the whole input; a bad byte is blamed on the row it falls in."""
    try:
        return data.decode(fmt.encoding)
    except UnicodeDecodeError as e:
        row, line = _locate(e.object[:e.start].decode(fmt.encoding), fmt)
        if row <= 1:
            raise HeaderParseError(str(e)) from e
        raise RecordParseError(line, str(e)) from e


def _locate(prefix: str, fmt: CsvFormat) -> Tuple[int, int]:
    # A marker in place of the bad byte lands in the row that holds it.
    reader = csv.reader(io.StringIO(prefix + "x", newline=""), delimiter=fmt.delimiter)
    row = sum(1 for _ in _iter_rows(reader))
    return row, reader.line_num


def _iter_rows(reader) -> Iterator[List[str]]:
    for row in reader:
        if row:
            yield row


# ---------- Output ----------
def to_frame(headers: Sequence[str], records: Sequence[Sequence[str]]) -> pd.DataFrame:
    """Records must already be padded to len(headers)."""
    return pd.DataFrame([list(r) for r in records], columns=list(headers), dtype=object)


def render_csv(df: pd.DataFrame, fmt: CsvFormat = DEFAULT_FORMAT) -> str:
    if len(df.columns) == 0:
        return ""
    return df.to_csv(
        index=False,
        sep=fmt.delimiter,
        quoting=csv.QUOTE_MINIMAL,
        lineterminator=LINE_TERMINATOR,
    )


def write_output(text: str, stream: TextIO) -> None:
    try:
        stream.write(text)
        stream.flush()
    except OSError as e:
        raise OutputWriteError(e.strerror or str(e)) from e
