"""Fixed logarithmic bucket scheme shared by every histogram record.

Boundaries are symmetric about zero and grow geometrically in magnitude, so
values clustered near zero keep fine resolution while outliers still land in
a (coarse) bucket. The scheme never changes, which keeps histograms
comparable across steps.
"""

from __future__ import annotations

from typing import Sequence

import numpy as np

NUM_BUCKETS = 1549
CENTER = NUM_BUCKETS // 2
GROWTH_SEED = 1e-12
GROWTH_FACTOR = 1.1


def make_histogram_buckets() -> np.ndarray:
    """Build the 1549 ordered bucket right edges (exact 0.0 at the center)."""
    buckets = np.zeros(NUM_BUCKETS, dtype=np.float64)
    v = GROWTH_SEED
    for i in range(1, CENTER + 1):
        buckets[CENTER + i] = v
        buckets[CENTER - i] = -v
        v *= GROWTH_FACTOR
    return buckets


HISTOGRAM_LIMITS = make_histogram_buckets()
HISTOGRAM_LIMITS.flags.writeable = False


def bisect_left(a: Sequence[float], x: float, lo: int = 0, hi: int | None = None) -> int:
    """Smallest index i in [lo, hi] such that a[i] >= x.

    Scalar reference for `bucket_indices`, which is checked against it.
    """
    if lo < 0:
        raise ValueError("lo must be non-negative")
    high = len(a) if hi is None else hi
    low = lo
    while low < high:
        mid = (low + high) // 2
        if a[mid] < x:
            low = mid + 1
        else:
            high = mid
    return low


def bucket_indices(values: np.ndarray, limits: np.ndarray = HISTOGRAM_LIMITS) -> np.ndarray:
    """Vectorized left bisection of `values` into `limits`.

    A value equal to a boundary maps to that boundary's own index. Values
    beyond the largest boundary are clamped into the last bucket.
    """
    idx = np.searchsorted(limits, values, side="left")
    return np.minimum(idx, len(limits) - 1)
