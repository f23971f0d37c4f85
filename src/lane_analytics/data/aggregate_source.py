"""Aggregate store access: one row of shipment counts per origin/destination pair."""

from __future__ import annotations

import csv
import logging
from pathlib import Path
from typing import Any, Callable, Iterable, Mapping, Optional, Protocol

from ..config import Settings, settings as default_settings
from ..db.supabase import get_supabase_client
from ..models.domain import LaneAggregate

logger = logging.getLogger(__name__)


class StoreFailure(RuntimeError):
    """The aggregate store could not be reached or returned unusable data."""


class AggregateSource(Protocol):
    def fetch_lane_aggregates(self) -> list[LaneAggregate]:
        ...


def _coerce_int(value: Any, field_name: str) -> int:
    if value is None or value == "":
        return 0
    try:
        return int(float(str(value).replace(",", "")))
    except ValueError as exc:
        raise ValueError(f"Unable to parse integer '{field_name}' from value '{value}'") from exc


def _coerce_float(value: Any, field_name: str) -> float:
    if value is None or value == "":
        return 0.0
    try:
        return float(str(value).replace(",", ""))
    except ValueError as exc:
        raise ValueError(f"Unable to parse float '{field_name}' from value '{value}'") from exc


def row_to_aggregate(row: Mapping[str, Any]) -> LaneAggregate:
    """Map a store row onto a LaneAggregate, tolerating null statistics."""

    origin = str(row.get("origin_zip") or "").strip()
    dest = str(row.get("dest_zip") or "").strip()
    if not origin or not dest:
        raise ValueError(f"Aggregate row is missing origin/destination: {dict(row)}")
    return LaneAggregate(
        origin_zip=origin,
        dest_zip=dest,
        volume=_coerce_int(row.get("volume"), "volume"),
        avg_delay=_coerce_float(row.get("avg_delay"), "avg_delay"),
        transit_variance=_coerce_float(row.get("transit_variance"), "transit_variance"),
        early_count=_coerce_int(row.get("early_count"), "early_count"),
        ontime_count=_coerce_int(row.get("ontime_count"), "ontime_count"),
        late_count=_coerce_int(row.get("late_count"), "late_count"),
    )


class SupabaseAggregateSource:
    """Pull lane aggregates from a Postgres function exposed through Supabase."""

    def __init__(
        self,
        rpc_name: str | None = None,
        client_factory: Callable[[], Any] = get_supabase_client,
    ) -> None:
        self.rpc_name = rpc_name or default_settings.lane_aggregates_rpc
        self._client_factory = client_factory

    def fetch_lane_aggregates(self) -> list[LaneAggregate]:
        client = self._client_factory()
        if client is None:
            raise StoreFailure("Supabase not configured. Set LANES_SUPABASE_URL and LANES_SUPABASE_KEY.")

        try:
            response = client.rpc(self.rpc_name, {}).execute()
        except Exception as exc:
            logger.error(f"Aggregate query '{self.rpc_name}' failed: {exc}")
            raise StoreFailure(f"Aggregate query '{self.rpc_name}' failed: {exc}") from exc

        return _rows_to_aggregates(response.data or [], source=f"rpc:{self.rpc_name}")


class CsvAggregateSource:
    """Read pre-aggregated lane rows from a CSV file."""

    def __init__(self, path: Path | None = None) -> None:
        self.path = path or default_settings.aggregates_file

    def fetch_lane_aggregates(self) -> list[LaneAggregate]:
        if not self.path.exists():
            raise StoreFailure(f"Aggregates file not found: {self.path}")

        try:
            with self.path.open(mode="r", encoding="utf-8-sig", newline="") as handle:
                reader = csv.DictReader(handle)
                if not reader.fieldnames:
                    raise StoreFailure(f"Aggregates file '{self.path}' is missing a header row.")
                rows = list(reader)
        except OSError as exc:
            raise StoreFailure(f"Unable to read aggregates file '{self.path}': {exc}") from exc

        return _rows_to_aggregates(rows, source=str(self.path))


def _rows_to_aggregates(rows: Iterable[Mapping[str, Any]], *, source: str) -> list[LaneAggregate]:
    try:
        return [row_to_aggregate(row) for row in rows]
    except ValueError as exc:
        logger.error(f"Malformed aggregate row from {source}: {exc}")
        raise StoreFailure(f"Malformed aggregate row from {source}: {exc}") from exc


def build_aggregate_source(config: Optional[Settings] = None) -> AggregateSource:
    config = config or default_settings
    match config.aggregate_backend:
        case "supabase":
            return SupabaseAggregateSource(rpc_name=config.lane_aggregates_rpc)
        case "csv":
            return CsvAggregateSource(path=config.aggregates_file)
        case _:
            raise ValueError(f"Unknown aggregate backend '{config.aggregate_backend}'.")
