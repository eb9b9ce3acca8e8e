"""Process-wide numeric constants and Taichi runtime setup.

Every tolerance comparison in the package (cap boundaries, discriminant sign,
parallel-ray detection) uses the single EPSILON defined here.

Intersection routines are Taichi functions compiled in double precision, so
Taichi must be initialised through init() before the first intersection query.
init() also turns off fast math: kernels compare against the MISS sentinel
and reject roots outside the truncation bounds, and those comparisons must
not be reordered or folded by the compiler.

Example:
    >>> from src.raycore.core.runtime import init
    >>> init()  # CPU backend, f64 arithmetic
"""

import logging

import taichi as ti

logger = logging.getLogger(__name__)

# Tolerance for floating-point comparisons
EPSILON = 1e-5

# Sentinel stored in unused root slots of a Roots vector. Finite so kernels
# never see an infinity; unbounded heights are clamped to +-MISS as well.
MISS = 1.0e30

# Largest number of roots any primitive reports (body pair + two caps)
MAX_ROOTS = 4

_initialised = False


def init(arch=None, **kwargs) -> None:
    """Initialise Taichi for double-precision intersection kernels.

    Args:
        arch: Taichi backend (defaults to ti.cpu).
        **kwargs: Extra keyword arguments forwarded to ti.init().
    """
    global _initialised
    if arch is None:
        arch = ti.cpu
    kwargs.setdefault("default_fp", ti.f64)
    kwargs.setdefault("fast_math", False)
    logger.info(
        f"Initialising Taichi (arch={arch}, default_fp={kwargs['default_fp']}, fast_math={kwargs['fast_math']})"
    )
    ti.init(arch=arch, **kwargs)
    _initialised = True

    # Fields from a previous runtime are invalid after ti.init()
    from src.raycore.geometry.base import reset_roots_field

    reset_roots_field()


def almost_equal(a: float, b: float, epsilon: float = EPSILON) -> bool:
    """Compare two floats within an absolute tolerance.

    Infinities compare equal only to themselves.
    """
    if a == b:
        return True
    return abs(a - b) < epsilon


def is_initialised() -> bool:
    """Whether init() has set up the Taichi runtime for this process."""
    return _initialised
