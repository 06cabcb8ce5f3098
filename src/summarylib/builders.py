from __future__ import annotations

import logging
from typing import Any

import numpy as np

from .buckets import HISTOGRAM_LIMITS, bucket_indices
from .errors import InvalidInputError
from .records import HistogramBucket, HistogramRecord, ScalarRecord

logger = logging.getLogger(__name__)


def as_float64_array(values: Any) -> np.ndarray:
    """Flatten a torch tensor, numpy array, sequence or scalar to float64."""
    if hasattr(values, "detach"):
        values = values.detach().cpu().numpy()
    elif hasattr(values, "numpy") and not isinstance(values, np.ndarray):
        values = values.numpy()
    try:
        return np.asarray(values, dtype=np.float64).ravel()
    except (TypeError, ValueError) as e:
        raise InvalidInputError(f"cannot convert {type(values).__name__} to a numeric array") from e


def scalar(tag: str, value: Any) -> ScalarRecord:
    """Scalar record; NaN and infinities pass through unchanged."""
    return ScalarRecord(tag=tag, value=value)


def histogram(tag: str, values: Any, limits: np.ndarray = HISTOGRAM_LIMITS) -> HistogramRecord:
    """Bucket `values` into the shared logarithmic scheme.

    Raises:
        InvalidInputError: if the sample set is empty or contains NaN.
    """
    arr = as_float64_array(values)
    if arr.size == 0:
        raise InvalidInputError(f"histogram {tag!r}: empty sample set")
    if np.isnan(arr).any():
        raise InvalidInputError(f"histogram {tag!r}: sample set contains NaN")

    counts = np.bincount(bucket_indices(arr, limits), minlength=len(limits))
    with np.errstate(over="ignore"):
        sum_squares = float(np.square(arr).sum())
    nonzero = np.flatnonzero(counts)
    buckets = tuple(HistogramBucket(limit=float(limits[i]), count=int(counts[i])) for i in nonzero)
    record = HistogramRecord(
        tag=tag,
        min=float(arr.min()),
        max=float(arr.max()),
        num=int(arr.size),
        sum=float(arr.sum()),
        sum_squares=sum_squares,
        buckets=buckets,
    )
    logger.debug("histogram %s: %d values in %d buckets", tag, record.num, len(buckets))
    return record
