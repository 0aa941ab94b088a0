"""
Math Extensions (:mod:`pymohr.math_ext`)
========================================

.. currentmodule:: pymohr.math_ext

Small numeric helpers for tolerance based comparison and for cleaning
up values that are not finite.  These are used throughout the state
transformation code.
"""
from __future__ import annotations

import math
import warnings

# Written by Eric J. Whitney, October 2026.


# ======================================================================

class NonFiniteWarning(RuntimeWarning):
    """
    Warning issued when a NaN or infinite value is replaced by zero (only
    if option `warn_nonfinite` is set).
    """
    pass


# ----------------------------------------------------------------------

def approx(a: float, b: float, tol: float = 1e-12) -> bool:
    """
    Returns ``True`` if ``|a - b| <= tol``.
    """
    return abs(a - b) <= tol


def approx_zero(x: float, tol: float = 1e-12) -> bool:
    """
    Returns ``True`` if ``|x| <= tol``.
    """
    return abs(x) <= tol


def as_finite(x: float, name: str = None) -> float:
    """
    Returns `x` as a ``float``, or ``0.0`` if `x` is NaN or infinite.

    Parameters
    ----------
    x : float
        Value to check.
    name : str, default = None
        If given, this is used to identify the value in the warning
        issued when option `warn_nonfinite` is set.

    Returns
    -------
    float
        `x` or ``0.0``.
    """
    x = float(x)
    if math.isfinite(x):
        return x

    from pymohr._opts import get_options
    if get_options().warn_nonfinite:
        warnings.warn(f"Non-finite value {'' if name is None else name + ' '}"
                      f"= {x} replaced by zero.", NonFiniteWarning,
                      stacklevel=3)
    return 0.0


def coerce_zero(x: float, tol: float) -> float:
    """
    Returns exactly ``0.0`` if ``|x| < tol``, otherwise `x`.

    Examples
    --------
    >>> coerce_zero(6.123233995736766e-17, 1e-6)
    0.0
    >>> coerce_zero(-0.5, 1e-6)
    -0.5
    """
    return 0.0 if abs(x) < tol else x


def on_angle(θ: float, targets: [float], tol: float) -> bool:
    """
    Returns ``True`` if angle `θ` (radians) matches any angle in
    `targets` within `tol`, after both are reduced to the range
    [0, 2π).  The wrap-around point is checked so that e.g. ``-1e-9``
    matches ``0``.

    Examples
    --------
    >>> on_angle(-0.5 * math.pi, [1.5 * math.pi], 1e-6)
    True
    >>> on_angle(2 * math.pi, [0.0], 1e-6)
    True
    """
    two_pi = 2 * math.pi
    θ = θ % two_pi
    for target in targets:
        diff = abs(θ - target % two_pi)
        if diff <= tol or two_pi - diff <= tol:
            return True
    return False
