"""Application layer orchestrating the policy loop."""

from .policy_engine import PolicyEngine
from .ports import NullPolicySink, PolicySink, StatsSource

__all__ = [
    "NullPolicySink",
    "PolicyEngine",
    "PolicySink",
    "StatsSource",
]
