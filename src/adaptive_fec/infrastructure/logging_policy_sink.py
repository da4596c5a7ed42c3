"""Simple logging-backed implementation of the policy sink."""

from __future__ import annotations

import logging

from adaptive_fec.domain.models import PolicyDecision

LOGGER = logging.getLogger("adaptive_fec.decisions")


class LoggingPolicySink:
    """Emit published decisions to structured logs."""

    def publish(self, decision: PolicyDecision) -> None:
        LOGGER.info(
            "policy_decision_published",
            extra={
                "fec_enabled": decision.fec.enabled,
                "fec_scheme": decision.fec.scheme.value,
                "target_overhead": decision.fec.target_overhead,
                "reason": decision.fec.reason,
                "decided_at": decision.fec.at.isoformat(),
            },
        )
