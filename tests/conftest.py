"""Pytest configuration for raycore tests.

This module provides shared fixtures for all test modules, including
Taichi initialization which must happen once per session.
"""

import pytest
import taichi as ti


@pytest.fixture(scope="session", autouse=True)
def init_taichi_session():
    """Initialize Taichi once for the entire test session.

    Using session scope prevents multiple ti.init() calls, which would
    invalidate the fields and compiled kernels of the previous runtime.
    The runtime is double precision so cap-boundary tests are meaningful.
    """
    from src.raycore.core.runtime import init

    init(arch=ti.cpu, random_seed=42)
    yield
