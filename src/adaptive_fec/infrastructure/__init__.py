"""Adapters wiring the engine to concrete producers and consumers."""

from .logging_policy_sink import LoggingPolicySink
from .queue_adapters import IterableStatsSource, QueuePolicySink, QueueStatsSource
from .trace_files import TraceFormatError, load_stats_trace

__all__ = [
    "IterableStatsSource",
    "LoggingPolicySink",
    "QueuePolicySink",
    "QueueStatsSource",
    "TraceFormatError",
    "load_stats_trace",
]
