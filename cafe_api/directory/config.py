from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

from dotenv import load_dotenv

_PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent

# Load .env from project root
load_dotenv(_PROJECT_ROOT / ".env")

_DEFAULT_DATA_PATH = Path(__file__).resolve().parent.parent / "data" / "cafes.csv"


def _data_path_from_env() -> Path:
    """``CAFE_DATA_PATH`` if set, relative paths taken from the project root."""
    raw = os.getenv("CAFE_DATA_PATH")
    if not raw:
        return _DEFAULT_DATA_PATH
    path = Path(raw).expanduser()
    if not path.is_absolute():
        path = _PROJECT_ROOT / path
    return path


@dataclass(frozen=True)
class DirectoryConfig:
    """
    Where the café directory is loaded from.

    The source is a CSV file with a ``city,name`` header and one café per row.
    """

    data_path: Path = field(default_factory=_data_path_from_env)
    city_column: str = "city"
    name_column: str = "name"


DEFAULT_DIRECTORY_CONFIG = DirectoryConfig()
