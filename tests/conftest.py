from __future__ import annotations

from datetime import datetime, timezone

import pytest

from adaptive_fec.domain.models import NetworkStats
from adaptive_fec.utils.config import FECConfig


class RecordingSink:
    def __init__(self) -> None:
        self.decisions = []

    def publish(self, decision) -> None:
        self.decisions.append(decision)


@pytest.fixture
def config() -> FECConfig:
    return FECConfig(scheme="flexfec03")


@pytest.fixture
def sink() -> RecordingSink:
    return RecordingSink()


@pytest.fixture
def make_stats():
    def _make(
        rtt_ms: int,
        loss_rate: float,
        current_bitrate: float = 0.0,
        target_bitrate: float = 0.0,
        timestamp: datetime | None = datetime.fromtimestamp(123, tz=timezone.utc),
    ) -> NetworkStats:
        return NetworkStats(
            rtt_ms=rtt_ms,
            loss_rate=loss_rate,
            current_bitrate=current_bitrate,
            target_bitrate=target_bitrate,
            timestamp=timestamp,
        )

    return _make
