from __future__ import annotations

import re
import sys
from collections.abc import Mapping, Sequence

from .models import CafeQuery, ParseResult, QueryError

# ASCII digits only: int() would also accept signs, whitespace, underscores
# and non-ASCII digits.
_COUNT_RE = re.compile(r"[0-9]+")

# Larger counts are clamped; int() refuses very long digit strings.
MAX_COUNT = sys.maxsize


def _parse_count(raw: str) -> int | None:
    """Return the count as an int, or ``None`` if it is not a valid one."""
    if not _COUNT_RE.fullmatch(raw):
        return None
    digits = raw.lstrip("0") or "0"
    if len(digits) > len(str(MAX_COUNT)):
        return MAX_COUNT
    return min(int(digits), MAX_COUNT)


def parse_query(
    city: str | None,
    count: str | None,
    search: str | None,
    directory: Mapping[str, Sequence[str]],
) -> ParseResult:
    """
    Validate raw ``/cafe`` parameters against the directory.

    The city is checked before the count, so a request with both an unknown
    city and a malformed count reports the city. An empty ``count`` is the
    same as an absent one. Never raises for string input.
    """
    if not city or city not in directory:
        return ParseResult(error=QueryError.invalid_city)

    parsed_count: int | None = None
    if count:
        parsed_count = _parse_count(count)
        if parsed_count is None:
            return ParseResult(error=QueryError.invalid_count)

    return ParseResult(
        query=CafeQuery(city=city, count=parsed_count, search=search or ""),
    )
