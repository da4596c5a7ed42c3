"""Application-level contracts for the stats producer and policy consumer."""

from __future__ import annotations

from collections.abc import AsyncIterator
from typing import Protocol

from adaptive_fec.domain.models import NetworkStats, PolicyDecision


class StatsSource(Protocol):
    """Port for a stream of network samples delivered in observation order.

    Exhausting the iterator signals end-of-stream.
    """

    def stats(self) -> AsyncIterator[NetworkStats]:
        """Return the sample stream."""


class PolicySink(Protocol):
    """Port for publishing policy decisions."""

    def publish(self, decision: PolicyDecision) -> None:
        """Publish a single decision."""


class NullPolicySink:
    """No-op sink used when nobody consumes decisions."""

    def publish(self, decision: PolicyDecision) -> None:  # noqa: ARG002
        return
