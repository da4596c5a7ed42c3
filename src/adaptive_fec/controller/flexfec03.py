from __future__ import annotations

from adaptive_fec.domain.models import ControllerState, FECPolicy, FECScheme, NetworkStats, PolicyDecision
from adaptive_fec.domain.services import clamp, event_time, join_reasons
from adaptive_fec.protection_table import lookup_overhead
from adaptive_fec.utils.config import FECConfig

from .base import FECController

REASON_BWE_CAP = "BWE cap: reduced FEC to fit bandwidth"
REASON_ENABLED = "FEC enabled: network protection required"
REASON_DISABLED = "FEC disabled: stable network"
REASON_ADJUSTED = "adjusted protection factor"


class FlexFEC03Controller(FECController):
    """Loss/RTT driven policy for FlexFEC-03 with hysteresis and a deadband.

    Per sample the table overhead is clamped to the configured bounds, capped
    so media plus redundancy fits the target bitrate, and then gated by two
    loss thresholds: FEC turns on at ``fec_enable_loss_rate`` and off at
    ``fec_disable_loss_rate``. Loss strictly between the two keeps the current
    state. While enabled, the published overhead only moves when the new
    target differs by more than ``overhead_deadband``.
    """

    scheme = FECScheme.FLEXFEC03

    def __init__(self, config: FECConfig) -> None:
        self.config = config
        self._state = ControllerState()

    @property
    def enabled(self) -> bool:
        return self._state.enabled

    @property
    def overhead(self) -> float:
        return self._state.overhead

    def target_overhead(self, stats: NetworkStats) -> tuple[float, str]:
        """Return the clamped, bandwidth-capped overhead and the reason for any cap."""

        cfg = self.config
        overhead = clamp(lookup_overhead(stats.rtt_ms, stats.loss_rate), cfg.min_overhead, cfg.max_overhead)

        if stats.current_bitrate <= 0 or stats.target_bitrate <= 0:
            return overhead, ""

        projected_total = stats.current_bitrate * (1.0 + overhead)
        if projected_total <= stats.target_bitrate:
            return overhead, ""

        max_allowed = max(0.0, stats.target_bitrate / stats.current_bitrate - 1.0)
        max_allowed = clamp(max_allowed, cfg.min_overhead, cfg.max_overhead)
        if overhead > max_allowed:
            return max_allowed, REASON_BWE_CAP
        return overhead, ""

    def decide(self, stats: NetworkStats) -> tuple[PolicyDecision, bool]:
        cfg = self.config
        state = self._state
        changed = False

        target, reason = self.target_overhead(stats)

        if state.enabled:
            next_enabled = not (stats.loss_rate <= cfg.fec_disable_loss_rate or target <= 0)
        else:
            next_enabled = stats.loss_rate >= cfg.fec_enable_loss_rate and target > 0

        if next_enabled != state.enabled:
            state.enabled = next_enabled
            changed = True
            reason = join_reasons(reason, REASON_ENABLED if next_enabled else REASON_DISABLED)

        if state.enabled:
            if abs(state.overhead - target) > cfg.overhead_deadband:
                state.overhead = target
                changed = True
                reason = join_reasons(reason, REASON_ADJUSTED)
        elif state.overhead != 0:
            state.overhead = 0.0
            changed = True

        decision = PolicyDecision(
            fec=FECPolicy(
                enabled=state.enabled,
                scheme=self.scheme,
                target_overhead=state.overhead,
                reason=reason,
                at=event_time(stats),
            )
        )
        return decision, changed
