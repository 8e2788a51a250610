from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator, Mapping
from types import MappingProxyType

import pandas as pd

from .config import DEFAULT_DIRECTORY_CONFIG, DirectoryConfig

logger = logging.getLogger(__name__)

_directory: Directory | None = None


class Directory(Mapping[str, tuple[str, ...]]):
    """Read-only mapping of city -> café names in canonical order."""

    def __init__(self, cafes: Mapping[str, Iterable[str]]) -> None:
        table: dict[str, tuple[str, ...]] = {}
        for city, names in cafes.items():
            if not city:
                raise ValueError("City name must not be empty")
            names = tuple(names)
            if not names:
                raise ValueError(f"City {city!r} has no cafés")
            if any(not name for name in names):
                raise ValueError(f"City {city!r} has a café with an empty name")
            table[city] = names
        self._cafes = MappingProxyType(table)

    def __getitem__(self, city: str) -> tuple[str, ...]:
        return self._cafes[city]

    def __iter__(self) -> Iterator[str]:
        return iter(self._cafes)

    def __len__(self) -> int:
        return len(self._cafes)

    def __repr__(self) -> str:
        return f"Directory(cities={len(self)}, cafes={self.total_cafes})"

    @property
    def total_cafes(self) -> int:
        return sum(len(names) for names in self._cafes.values())


def load_directory(config: DirectoryConfig = DEFAULT_DIRECTORY_CONFIG) -> Directory:
    """
    Build a Directory from the configured CSV file.

    Row order defines each city's café order. Raises ``ValueError`` when the
    file lacks the expected columns or contains blank cells.
    """
    df = pd.read_csv(config.data_path, dtype=str, keep_default_na=False)

    missing = [c for c in (config.city_column, config.name_column) if c not in df.columns]
    if missing:
        raise ValueError(f"{config.data_path} is missing columns: {', '.join(missing)}")

    cities = df[config.city_column].str.strip()
    names = df[config.name_column].str.strip()
    if (cities == "").any() or (names == "").any():
        raise ValueError(f"{config.data_path} contains blank city or café names")

    cafes: dict[str, list[str]] = {}
    for city, name in zip(cities, names):
        cafes.setdefault(city, []).append(name)

    directory = Directory(cafes)
    logger.info(
        "Loaded %d cafés across %d cities from %s",
        directory.total_cafes, len(directory), config.data_path,
    )
    return directory


def get_directory() -> Directory:
    """Return the process-wide Directory, loading it on first call."""
    global _directory
    if _directory is None:
        _directory = load_directory()
    return _directory
