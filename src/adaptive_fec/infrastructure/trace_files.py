"""Load recorded network-stats traces from CSV, JSON or JSON Lines files."""

from __future__ import annotations

import csv
import json
import math
from collections.abc import Mapping
from datetime import datetime, timezone
from enum import Enum
from pathlib import Path
from typing import Any

from adaptive_fec.domain.models import NetworkStats

REQUIRED_COLUMNS = frozenset({"rtt_ms", "loss_rate"})


class TraceFormatError(ValueError):
    """Raised when a stats trace cannot be parsed."""


class TraceFormat(str, Enum):
    CSV = "csv"
    JSON = "json"
    JSONL = "jsonl"


def _trace_format(path: Path) -> TraceFormat:
    suffix = path.suffix.lower().lstrip(".")
    try:
        return TraceFormat(suffix)
    except ValueError as exc:
        raise TraceFormatError(
            f"Trace '{path}' must end in .csv, .json or .jsonl."
        ) from exc


def _read_rows(path: Path, trace_format: TraceFormat) -> list[Mapping[str, Any]]:
    if trace_format == TraceFormat.CSV:
        with path.open("r", newline="", encoding="utf-8") as csv_handle:
            reader = csv.DictReader(csv_handle)
            if reader.fieldnames is None or not REQUIRED_COLUMNS.issubset(reader.fieldnames):
                raise TraceFormatError(
                    f"Trace '{path}' is missing required columns {sorted(REQUIRED_COLUMNS)}; "
                    f"found {reader.fieldnames}."
                )
            return [dict(row) for row in reader]

    text = path.read_text(encoding="utf-8")
    try:
        if trace_format == TraceFormat.JSONL:
            payload = [json.loads(line) for line in text.splitlines() if line.strip()]
        else:
            payload = json.loads(text)
    except json.JSONDecodeError as exc:
        raise TraceFormatError(f"Trace '{path}' is not valid JSON: {exc}") from exc

    if not isinstance(payload, list) or not all(isinstance(item, dict) for item in payload):
        raise TraceFormatError(f"Trace '{path}' must contain an array of sample objects.")
    return payload


def _optional(row: Mapping[str, Any], key: str) -> Any:
    value = row.get(key)
    if value is None or (isinstance(value, str) and not value.strip()):
        return None
    return value


def parse_timestamp(raw: Any) -> datetime | None:
    """Parse ISO-8601 text or epoch seconds; empty values and zero mean unset."""

    if raw is None:
        return None
    if isinstance(raw, (int, float)):
        seconds = float(raw)
    else:
        text = str(raw).strip()
        try:
            seconds = float(text)
        except ValueError:
            parsed = datetime.fromisoformat(text)
            return parsed if parsed.tzinfo else parsed.replace(tzinfo=timezone.utc)
    if not math.isfinite(seconds):
        raise ValueError(f"timestamp must be finite, got {raw!r}")
    if seconds == 0:
        return None
    return datetime.fromtimestamp(seconds, tz=timezone.utc)


def stats_from_row(row: Mapping[str, Any]) -> NetworkStats:
    missing = REQUIRED_COLUMNS - {key for key in row if _optional(row, key) is not None}
    if missing:
        raise ValueError(f"missing required values {sorted(missing)}")

    raw_rtt_ms = float(row["rtt_ms"])
    if not math.isfinite(raw_rtt_ms):
        raise ValueError(f"rtt_ms must be finite, got {row['rtt_ms']!r}")
    rtt_ms = int(raw_rtt_ms)
    loss_rate = float(row["loss_rate"])
    if rtt_ms < 0:
        raise ValueError(f"rtt_ms must be >= 0, got {rtt_ms}")
    if not 0.0 <= loss_rate <= 1.0:
        raise ValueError(f"loss_rate must be within [0, 1], got {loss_rate}")

    jitter = _optional(row, "jitter_ms")
    current = _optional(row, "current_bitrate")
    target = _optional(row, "target_bitrate")
    return NetworkStats(
        rtt_ms=rtt_ms,
        loss_rate=loss_rate,
        jitter_ms=int(float(jitter)) if jitter is not None else 0,
        current_bitrate=float(current) if current is not None else 0.0,
        target_bitrate=float(target) if target is not None else 0.0,
        timestamp=parse_timestamp(_optional(row, "timestamp")),
    )


def load_stats_trace(path: Path) -> list[NetworkStats]:
    """Load samples in file order from a ``.csv``, ``.json`` or ``.jsonl`` trace."""

    rows = _read_rows(path, _trace_format(path))
    samples: list[NetworkStats] = []
    for index, row in enumerate(rows, start=1):
        try:
            samples.append(stats_from_row(row))
        except (ValueError, OverflowError, OSError) as exc:
            raise TraceFormatError(f"Trace '{path}' sample #{index}: {exc}") from exc

    if not samples:
        raise TraceFormatError(f"Trace '{path}' does not contain any samples.")
    return samples
