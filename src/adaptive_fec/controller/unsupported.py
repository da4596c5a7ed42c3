from __future__ import annotations

from adaptive_fec.domain.models import FECPolicy, FECScheme, NetworkStats, PolicyDecision
from adaptive_fec.domain.services import event_time
from adaptive_fec.utils.config import FECConfig

from .base import FECController


class UnsupportedFECController(FECController):
    """Fallback for schemes without an implementation.

    Always reports FEC disabled and never signals a change.
    """

    scheme = FECScheme.NONE

    def __init__(self, config: FECConfig | None = None) -> None:
        self.config = config

    def decide(self, stats: NetworkStats) -> tuple[PolicyDecision, bool]:
        decision = PolicyDecision(
            fec=FECPolicy(
                enabled=False,
                scheme=self.scheme,
                target_overhead=0.0,
                reason="",
                at=event_time(stats),
            )
        )
        return decision, False
