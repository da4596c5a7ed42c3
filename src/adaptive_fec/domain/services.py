"""Domain services shared by the controllers."""

from __future__ import annotations

from datetime import datetime, timezone

import numpy as np

from adaptive_fec.domain.models import NetworkStats

REASON_SEPARATOR = " | "


def event_time(stats: NetworkStats) -> datetime:
    """Return the sample timestamp, or the current UTC time when it is unset."""

    if stats.timestamp is not None:
        return stats.timestamp
    return datetime.now(tz=timezone.utc)


def clamp(value: float, low: float, high: float) -> float:
    return float(np.clip(value, low, high))


def join_reasons(first: str, second: str) -> str:
    if not first:
        return second
    if not second:
        return first
    return f"{first}{REASON_SEPARATOR}{second}"
