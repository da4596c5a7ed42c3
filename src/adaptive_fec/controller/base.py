from abc import ABC, abstractmethod

from adaptive_fec.domain.models import FECScheme, NetworkStats, PolicyDecision


class FECController(ABC):
    """Base class for per-scheme FEC policy controllers.

    A controller may keep state between samples (hysteresis, deadbands).
    Each instance is owned by a single engine and is not thread-safe.
    """

    scheme: FECScheme

    @abstractmethod
    def decide(self, stats: NetworkStats) -> tuple[PolicyDecision, bool]:
        """Return the current decision and whether it differs from the last one."""
        raise NotImplementedError
