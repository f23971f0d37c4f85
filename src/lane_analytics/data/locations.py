"""ZIP3 location name lookup used for route labels and view locations."""

from __future__ import annotations

import csv
import functools
import logging
from pathlib import Path
from typing import Mapping, Optional, Protocol

from ..config import settings

BUILTIN_LOCATIONS_FILE = Path(__file__).with_name("zip3_locations.csv")

logger = logging.getLogger(__name__)


class LocationLookup(Protocol):
    def resolve(self, code: str) -> str:
        ...


def _load_names(path: Path) -> dict[str, str]:
    names: dict[str, str] = {}
    with path.open(mode="r", encoding="utf-8-sig", newline="") as handle:
        reader = csv.DictReader(handle)
        if not reader.fieldnames:
            raise ValueError(f"Location file '{path}' is missing a header row.")
        for row in reader:
            code = (row.get("code") or "").strip()
            name = (row.get("name") or "").strip()
            if not code or not name:
                logger.warning(f"Skipping location row without code/name in {path}: {row}")
                continue
            names[code] = name
    return names


@functools.lru_cache(maxsize=1)
def load_builtin_names() -> Mapping[str, str]:
    return _load_names(BUILTIN_LOCATIONS_FILE)


class LocationDirectory:
    """Resolve ZIP3 codes (``750`` or ``750xx``) to short terminal names."""

    def __init__(self, names: Optional[Mapping[str, str]] = None) -> None:
        self._names = dict(load_builtin_names() if names is None else names)

    @classmethod
    def from_settings(cls) -> "LocationDirectory":
        names = dict(load_builtin_names())
        if settings.location_names_file is not None:
            if settings.location_names_file.exists():
                names.update(_load_names(settings.location_names_file))
            else:
                logger.warning(f"Location names file not found: {settings.location_names_file}")
        return cls(names)

    def resolve(self, code: str) -> str:
        stripped = _strip_code(code)
        return self._names.get(stripped, stripped)

    def __len__(self) -> int:
        return len(self._names)


def _strip_code(code: str) -> str:
    value = code.strip()
    if value.lower().endswith("xx"):
        value = value[:-2]
    return value


def format_route(origin: str, dest: str, lookup: LocationLookup) -> str:
    """Short route label, e.g. ``DFW→AUS``."""

    return f"{lookup.resolve(origin)}→{lookup.resolve(dest)}"
