# reconcile.py
import logging
from typing import List, Sequence, Tuple

from .normalize import PLACEHOLDER_PREFIX

Record = List[str]


def max_width(headers: Sequence[str], records: Sequence[Sequence[str]]) -> int:
    width = len(headers)
    for rec in records:
        if len(rec) > width:
            width = len(rec)
    return width


def extend_headers(headers: Sequence[str], width: int) -> List[str]:
    """Append x_1, x_2, ... until there are `width` names, skipping names already taken."""
    out = list(headers)
    counter = 1
    while len(out) < width:
        extra = f"{PLACEHOLDER_PREFIX}{counter}"
        while extra in out:
            counter += 1
            extra = f"{PLACEHOLDER_PREFIX}{counter}"
        out.append(extra)
        counter += 1
    return out


def pad_records(records: Sequence[Sequence[str]], width: int) -> List[Record]:
    """Right-pad every record with "" up to `width`. Longer records are left as they are."""
    return [list(rec) + [""] * (width - len(rec)) for rec in records]


def reconcile(headers: Sequence[str], records: Sequence[Sequence[str]]) -> Tuple[List[str], List[Record]]:
    """
    Make header and records agree on a single width.
    Returns (extended headers, padded records); inputs are not modified.
    """
    width = max_width(headers, records)
    if width > len(headers):
        logging.debug("Rows wider than header: extending %d -> %d columns", len(headers), width)
    short = sum(1 for rec in records if len(rec) < width)
    if short:
        logging.debug("Padding %d short record(s) to %d fields", short, width)
    return extend_headers(headers, width), pad_records(records, width)
