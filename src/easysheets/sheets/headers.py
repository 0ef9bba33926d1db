"""
Turning a block of sheet values with a header row into a list of dicts
keyed by the header.
"""
import re
from typing import Any

# apostrophes are dropped so "Don't" stays one word
_APOSTROPHE_RE = re.compile(r"['’]")
# anything that is not a letter or digit separates words
_SEPARATOR_RE = re.compile(r"[\W_]+")
_ORDINALS = {"1": "st", "2": "nd", "3": "rd"}

RAW = "raw"

def _is_ordinal(number: str, suffix: str) -> bool:
    """1st, 2nd, 3rd, 4th ... the suffix has to agree with the last digit"""
    return suffix.lower() == _ORDINALS.get(number[-1], "th")

def _split_case(chunk: str) -> list[str]:
    """
    Split a run of letters and digits on lower to upper case changes,
    before the last capital of an acronym followed by lower case
    ("HTTPServer" -> HTTP, Server) and between letters and digits.
    """
    parts = []
    cur = ""
    for i, c in enumerate(chunk):
        if cur:
            p = cur[-1]
            nxt = chunk[i + 1] if i + 1 < len(chunk) else ""
            if (p.isdigit() != c.isdigit()
                    or (c.isupper() and not p.isupper())
                    or (c.isupper() and p.isupper() and nxt.islower())):
                parts.append(cur)
                cur = ""
        cur += c
    if cur:
        parts.append(cur)
    # glue ordinal suffixes back on to their number
    merged = []
    for part in parts:
        if merged and merged[-1].isdigit() and not part.isdigit() and _is_ordinal(merged[-1], part):
            merged[-1] += part
        else:
            merged.append(part)
    return merged

def words(text: str) -> list[str]:
    text = _APOSTROPHE_RE.sub("", str(text))
    return [w for chunk in _SEPARATOR_RE.split(text) if chunk for w in _split_case(chunk)]

def camel_case(text: str) -> str:
    """
    "First Name" -> "firstName", "user_id" -> "userId", "HTTPServer" -> "httpServer",
    "Prénom" -> "prénom", "1st Place" -> "1stPlace"
    """
    w = words(text)
    if not w:
        return ""
    return w[0].lower() + "".join(p[:1].upper() + p[1:].lower() for p in w[1:])

def header_keys(header: list[Any], header_row: bool|str = True) -> list[Any]:
    if header_row == RAW:
        return list(header)
    return [camel_case(h) for h in header]

def map_rows(values: list[list[Any]]|None,
             header_row: bool|str = False) -> list[dict[Any,Any]]|list[list[Any]]|None:
    """
    If header_row is set the first row names the columns and every following
    row comes back as a dict.  True camel cases the header text, "raw" uses it
    as-is.  The service drops trailing empty cells so short rows fill with None.
    Without a header row (or without values) the values come back unchanged.
    """
    if not header_row or not values:
        return values
    keys = header_keys(values[0], header_row)
    rows = []
    for row in values[1:]:
        rows.append({k: (row[i] if i < len(row) else None) for i, k in enumerate(keys)})
    return rows
