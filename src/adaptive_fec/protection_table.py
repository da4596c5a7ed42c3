"""Loss/RTT protection table used as the baseline FEC overhead."""

from __future__ import annotations

from collections.abc import Sequence

import numpy as np

RTT_COORDS_MS = np.array([60.0, 150.0, 400.0])
LOSS_COORDS = np.array([0.00, 0.05, 0.10, 0.20, 0.50])

# Rows follow RTT_COORDS_MS (NACK preferred, hybrid, FEC dominant),
# columns follow LOSS_COORDS.
PROTECTION_MATRIX = np.array(
    [
        [0.00, 0.05, 0.10, 0.20, 0.40],
        [0.05, 0.15, 0.25, 0.40, 0.60],
        [0.10, 0.25, 0.40, 0.60, 0.80],
    ]
)

for _array in (RTT_COORDS_MS, LOSS_COORDS, PROTECTION_MATRIX):
    _array.setflags(write=False)
del _array


def interpolation_params(value: float, coords: Sequence[float]) -> tuple[int, int, float]:
    """Return the bracketing indices of ``value`` and its weight toward the upper one.

    Values outside the axis snap to the nearest edge with a zero weight.
    Values with no bracket at all (NaN) snap to the first coordinate.
    """

    last = len(coords) - 1
    if value <= coords[0]:
        return 0, 0, 0.0
    if value >= coords[last]:
        return last, last, 0.0

    upper = int(np.searchsorted(coords, value, side="left"))
    if not 0 < upper <= last:
        return 0, 0, 0.0
    lower = upper - 1
    weight = (value - coords[lower]) / (coords[upper] - coords[lower])
    return lower, upper, float(weight)


def _interpolate_loss(loss_rate: float, row: np.ndarray) -> float:
    lower, upper, weight = interpolation_params(loss_rate, LOSS_COORDS)
    return float(row[lower] * (1.0 - weight) + row[upper] * weight)


def lookup_overhead(rtt_ms: int, loss_rate: float) -> float:
    """Interpolate the recommended protection overhead for an RTT and loss rate.

    Each bracketing RTT row is interpolated along the loss axis first, then the
    two row values are blended by the RTT weight.
    """

    lower, upper, rtt_weight = interpolation_params(float(rtt_ms), RTT_COORDS_MS)
    low_zone = _interpolate_loss(loss_rate, PROTECTION_MATRIX[lower])
    high_zone = _interpolate_loss(loss_rate, PROTECTION_MATRIX[upper])
    return low_zone * (1.0 - rtt_weight) + high_zone * rtt_weight
