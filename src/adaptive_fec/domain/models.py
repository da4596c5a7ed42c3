"""Domain models for network samples and redundancy policy decisions."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum


class FECScheme(str, Enum):
    """Redundancy schemes a policy decision can apply to."""

    NONE = "none"
    FLEXFEC03 = "flexfec03"


@dataclass(frozen=True, slots=True)
class NetworkStats:
    """Point-in-time network quality sample produced by a stats adapter.

    ``loss_rate`` is a fraction (``0.02`` means 2%). Bitrates share whatever
    unit the producer uses; only their ratio matters. A ``timestamp`` of
    ``None`` means the producer did not stamp the observation.
    """

    rtt_ms: int
    loss_rate: float
    jitter_ms: int = 0
    current_bitrate: float = 0.0
    target_bitrate: float = 0.0
    timestamp: datetime | None = None


@dataclass(frozen=True, slots=True)
class FECPolicy:
    """Redundancy settings for the packetizer.

    ``target_overhead`` is the scheme-agnostic knob: redundant bitrate as a
    fraction of the media bitrate budget (``0.20`` is roughly 20% overhead).
    """

    enabled: bool
    scheme: FECScheme
    target_overhead: float
    reason: str
    at: datetime


@dataclass(frozen=True, slots=True)
class NACKPolicy:
    """Retransmission settings for the NACK responder."""

    enabled: bool
    reason: str
    at: datetime


@dataclass(frozen=True, slots=True)
class PolicyDecision:
    """Envelope for every policy the engine publishes in one step."""

    fec: FECPolicy
    nack: NACKPolicy | None = None


@dataclass(slots=True)
class ControllerState:
    """Mutable memory a controller keeps between samples."""

    enabled: bool = False
    overhead: float = 0.0
