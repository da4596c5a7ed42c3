"""In-process stats sources and policy sinks for wiring and tests."""

from __future__ import annotations

import asyncio
from collections.abc import AsyncIterator, Iterable

from adaptive_fec.domain.models import NetworkStats, PolicyDecision

_DEFAULT_SINK_BUFFER = 16
_CLOSED = object()


class QueueStatsSource:
    """Feed samples through an ``asyncio.Queue``; ``close()`` ends the stream."""

    def __init__(self, maxsize: int = 0) -> None:
        self._queue: asyncio.Queue = asyncio.Queue(maxsize=maxsize)

    async def put(self, stats: NetworkStats) -> None:
        await self._queue.put(stats)

    def put_nowait(self, stats: NetworkStats) -> None:
        self._queue.put_nowait(stats)

    def close(self) -> None:
        self._queue.put_nowait(_CLOSED)

    async def stats(self) -> AsyncIterator[NetworkStats]:
        while True:
            item = await self._queue.get()
            if item is _CLOSED:
                return
            yield item


class IterableStatsSource:
    """Expose an already collected sequence of samples as a stats stream."""

    def __init__(self, samples: Iterable[NetworkStats]) -> None:
        self._samples = samples

    async def stats(self) -> AsyncIterator[NetworkStats]:
        for sample in self._samples:
            yield sample
            await asyncio.sleep(0)


class QueuePolicySink:
    """Collect published decisions into a bounded ``asyncio.Queue``.

    ``publish`` never blocks; it raises ``asyncio.QueueFull`` when the consumer
    falls ``maxsize`` decisions behind.
    """

    def __init__(self, maxsize: int = _DEFAULT_SINK_BUFFER) -> None:
        if maxsize <= 0:
            maxsize = _DEFAULT_SINK_BUFFER
        self.decisions: asyncio.Queue[PolicyDecision] = asyncio.Queue(maxsize=maxsize)

    def publish(self, decision: PolicyDecision) -> None:
        self.decisions.put_nowait(decision)

    def drain(self) -> list[PolicyDecision]:
        drained = []
        while not self.decisions.empty():
            drained.append(self.decisions.get_nowait())
        return drained
