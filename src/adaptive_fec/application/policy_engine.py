"""Stream orchestration from network samples to published policy decisions."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import AsyncIterator, Iterable

from adaptive_fec.application.ports import PolicySink, StatsSource
from adaptive_fec.controller import FECController, create_controller
from adaptive_fec.domain.models import NetworkStats, PolicyDecision
from adaptive_fec.utils.config import FECConfig

logger = logging.getLogger(__name__)


class PolicyEngine:
    """Feed samples to one controller and forward changed decisions to a sink.

    The controller is chosen once from ``config.scheme``; the loops below are
    scheme-agnostic. Unchanged decisions are dropped.
    """

    def __init__(self, config: FECConfig, source: StatsSource | None, sink: PolicySink) -> None:
        self.config = config
        self.source = source
        self.sink = sink
        self.controller: FECController = create_controller(config)

    def process(self, stats: NetworkStats) -> PolicyDecision | None:
        """Decide on one sample and publish the decision if it changed."""

        decision, changed = self.controller.decide(stats)
        if not changed:
            return None

        logger.debug(
            "policy_decision_changed",
            extra={
                "scheme": decision.fec.scheme.value,
                "enabled": decision.fec.enabled,
                "target_overhead": decision.fec.target_overhead,
                "reason": decision.fec.reason,
            },
        )
        self.sink.publish(decision)
        return decision

    def replay(self, samples: Iterable[NetworkStats]) -> list[PolicyDecision]:
        """Process samples synchronously and return the published decisions in order."""

        published: list[PolicyDecision] = []
        for stats in samples:
            decision = self.process(stats)
            if decision is not None:
                published.append(decision)
        return published

    async def run(self, stop: asyncio.Event | None = None) -> None:
        """Consume the source until it is exhausted or ``stop`` is set.

        Awaiting the next sample is the only suspension point, so each sample
        is fully processed and published before the next one is read.
        """

        if self.source is None:
            raise ValueError("PolicyEngine.run requires a stats source.")

        stream = self.source.stats()
        processed = 0
        pending: set[asyncio.Future] = set()
        if stop is not None:
            pending.add(asyncio.ensure_future(stop.wait()))
        try:
            while stop is None or not stop.is_set():
                next_sample = asyncio.ensure_future(_next_sample(stream))
                pending.add(next_sample)
                await asyncio.wait(pending, return_when=asyncio.FIRST_COMPLETED)
                if not next_sample.done():
                    break
                pending.discard(next_sample)

                stats = next_sample.result()
                if stats is None:
                    logger.info("policy_engine_stopped", extra={"cause": "exhausted", "processed": processed})
                    return

                self.process(stats)
                processed += 1

            logger.info("policy_engine_stopped", extra={"cause": "stop", "processed": processed})
        finally:
            for future in pending:
                future.cancel()


async def _next_sample(stream: AsyncIterator[NetworkStats]) -> NetworkStats | None:
    try:
        return await anext(stream)
    except StopAsyncIteration:
        return None
