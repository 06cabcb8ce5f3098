import numpy as np

from summarylib.buckets import (
    CENTER,
    HISTOGRAM_LIMITS,
    NUM_BUCKETS,
    bisect_left,
    bucket_indices,
    make_histogram_buckets,
)


def test_bucket_scheme_shape_and_symmetry():
    limits = make_histogram_buckets()
    assert len(limits) == NUM_BUCKETS == 1549
    assert limits[CENTER] == 0.0
    assert np.all(np.diff(limits) > 0)
    for i in range(1, CENTER + 1):
        assert limits[CENTER + i] == -limits[CENTER - i]
    assert limits[CENTER + 1] == 1e-12


def test_shared_limits_are_deterministic_and_read_only():
    assert np.array_equal(HISTOGRAM_LIMITS, make_histogram_buckets())
    assert not HISTOGRAM_LIMITS.flags.writeable


def test_bisect_left_ties_resolve_to_boundary_index():
    a = [1.0, 2.0, 3.0]
    assert bisect_left(a, 2.0) == 1
    assert bisect_left(a, 2.5) == 2
    assert bisect_left(a, 0.0) == 0
    assert bisect_left(a, 4.0) == 3
    assert bucket_indices(np.array([HISTOGRAM_LIMITS[800]]))[0] == 800
    assert bucket_indices(np.array([0.0]))[0] == CENTER


def test_vectorized_matches_scalar_bisect():
    rng = np.random.default_rng(0)
    values = rng.standard_normal(200) * 10.0
    expected = [bisect_left(HISTOGRAM_LIMITS, v) for v in values]
    assert bucket_indices(values).tolist() == expected


def test_bucket_assignment_is_monotone():
    values = np.sort(np.random.default_rng(1).standard_cauchy(500))
    idx = bucket_indices(values)
    assert np.all(np.diff(idx) >= 0)


def test_out_of_range_values_clamp_to_extreme_buckets():
    big = HISTOGRAM_LIMITS[-1] * 10.0
    idx = bucket_indices(np.array([big, np.inf, -big, -np.inf]))
    assert idx.tolist() == [NUM_BUCKETS - 1, NUM_BUCKETS - 1, 0, 0]
