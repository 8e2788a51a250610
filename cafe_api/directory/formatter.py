from __future__ import annotations

from collections.abc import Iterable

SEPARATOR = ","


def format_cafes(names: Iterable[str]) -> str:
    # Embedded separators are not escaped.
    return SEPARATOR.join(names)
