"""Shared assertion helpers for the raycore test suite."""


def assert_tuple_close(actual, expected, tol=1e-5):
    """Assert that two Point/Vector values have the same type and coordinates."""
    assert type(actual) is type(expected), f"{type(actual).__name__} != {type(expected).__name__}"
    for a, e in zip(actual, expected):
        assert abs(a - e) < tol, f"{actual} != {expected}"


def assert_ts_close(actual, expected, tol=1e-4):
    """Assert that two sequences of t values match element-wise."""
    assert len(actual) == len(expected), f"{actual} != {expected}"
    for a, e in zip(actual, expected):
        assert abs(a - e) < tol, f"{actual} != {expected}"
