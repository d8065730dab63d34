# normalize.py
from typing import Iterable, List, Set
import re
import unicodedata

from unidecode import unidecode

# ---------- Regex ----------
NON_ALNUM_PAT = re.compile(r"[^a-z0-9]+")

EMPTY_NAME = "x"
PLACEHOLDER_PREFIX = "x_"


# ---------- Text ----------
def to_ascii(text: str) -> str:
    """Nearest plain-ASCII spelling of `text`.

    NFKC first so composed and combining-accent forms of a letter are the
    same code point before transliteration.
    """
    return unidecode(unicodedata.normalize("NFKC", text))


def clean_name(name: str) -> str:
    """Transliterate, lowercase, collapse non-alphanumerics to `_`, strip `_`."""
    cleaned = to_ascii(name).lower()
    cleaned = NON_ALNUM_PAT.sub("_", cleaned)
    cleaned = cleaned.strip("_")
    return cleaned or EMPTY_NAME


# ---------- Columns / headers ----------
def clean_headers(headers: Iterable[str]) -> List[str]:
    """
    Clean a raw header row into unique identifiers matching [a-z0-9_]+.
    - Blank headers become x_1, x_2, ... (own counter).
    - Repeats get _2, _3, ... appended to the first cleaned candidate.
    """
    seen: Set[str] = set()
    result: List[str] = []
    empty_counter = 1

    for header in headers:
        name = header.strip()
        if not name:
            name = f"{PLACEHOLDER_PREFIX}{empty_counter}"
            empty_counter += 1

        base = clean_name(name)
        cleaned = base
        suffix = 1
        while cleaned in seen:
            suffix += 1
            cleaned = f"{base}_{suffix}"
        seen.add(cleaned)
        result.append(cleaned)

    return result
