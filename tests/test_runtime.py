"""Unit tests for the runtime module.

Tests cover:
- init() options forwarded to ti.init
- The finite MISS sentinel
- Intersection queries refused before init()
"""

import math

import pytest


class TestRuntimeInit:
    """Tests for Taichi initialisation."""

    def test_init_disables_fast_math_and_uses_f64(self, monkeypatch):
        import taichi as ti

        from src.raycore.core import runtime

        captured = {}

        def fake_init(**kwargs):
            captured.update(kwargs)

        monkeypatch.setattr(ti, "init", fake_init)
        runtime.init()
        assert captured["arch"] == ti.cpu
        assert captured["default_fp"] == ti.f64
        assert captured["fast_math"] is False

    def test_init_keeps_caller_options(self, monkeypatch):
        import taichi as ti

        from src.raycore.core import runtime

        captured = {}

        def fake_init(**kwargs):
            captured.update(kwargs)

        monkeypatch.setattr(ti, "init", fake_init)
        runtime.init(random_seed=7)
        assert captured["random_seed"] == 7
        assert captured["fast_math"] is False

    def test_is_initialised_after_session_setup(self):
        from src.raycore.core.runtime import is_initialised

        assert is_initialised()


class TestMissSentinel:
    """Tests for the empty-slot sentinel."""

    def test_miss_is_finite(self):
        from src.raycore.core.runtime import MISS

        assert math.isfinite(MISS)
        assert MISS > 1e20


class TestUninitialisedRuntime:
    """Tests for queries made before init()."""

    def test_query_before_init_raises(self, monkeypatch):
        from src.raycore.core import runtime
        from src.raycore.core.ray import make_ray
        from src.raycore.geometry import base
        from src.raycore.geometry.cylinder import Cylinder

        monkeypatch.setattr(runtime, "_initialised", False)
        monkeypatch.setattr(base, "_roots_field", None)
        with pytest.raises(RuntimeError):
            Cylinder().local_intersect(make_ray((0, 0, -5), (0, 0, 1)))
