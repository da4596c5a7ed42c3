"""Domain layer: samples, policies and pure helpers."""

from .models import ControllerState, FECPolicy, FECScheme, NACKPolicy, NetworkStats, PolicyDecision
from .services import clamp, event_time, join_reasons

__all__ = [
    "ControllerState",
    "FECPolicy",
    "FECScheme",
    "NACKPolicy",
    "NetworkStats",
    "PolicyDecision",
    "clamp",
    "event_time",
    "join_reasons",
]
