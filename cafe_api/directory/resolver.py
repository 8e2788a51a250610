from __future__ import annotations

from collections.abc import Mapping, Sequence

from .models import CafeQuery


def filter_by_name(names: Sequence[str], search: str) -> list[str]:
    """Keep names containing ``search``, ignoring case. Empty search keeps all."""
    if not search:
        return list(names)
    needle = search.casefold()
    return [name for name in names if needle in name.casefold()]


def cap(names: Sequence[str], count: int | None) -> list[str]:
    """Return at most ``count`` leading names; ``None`` means no cap."""
    if count is None:
        return list(names)
    return list(names[:count])


def resolve(query: CafeQuery, directory: Mapping[str, Sequence[str]]) -> list[str]:
    """
    Run the lookup -> filter -> cap pipeline for a validated query.

    Filtering happens before capping, and neither step reorders names, so the
    result is always a subsequence of the city's directory order.
    """
    names = directory[query.city]
    matched = filter_by_name(names, query.search)
    return cap(matched, query.count)
