"""
Mohr's Circle Relations (:mod:`pymohr.relations`)
=================================================

.. currentmodule:: pymohr.relations

Fundamental functions for transforming plane stress (or strain) states,
operating on plain floats.  All functions here use the *tensor* form of
the shear component; for engineering shear strain the shear must be
halved before and doubled after use (``StrainState`` does this
automatically).

Sign conventions:

- Normal components are positive for tension.
- Shear is positive if acting upwards on the right face of the element.
- Angles are in **radians**, positive counterclockwise.

.. autosummary::
    :toctree: _gen_pymohr_relations/

    Components
    calculate_principal
    calculate_principal_angles
    direction_cosines
    from_principal
    transform
    transformation_matrix
"""
from __future__ import annotations

import math
from typing import NamedTuple

import numpy as np

from pymohr._opts import get_options
from pymohr.math_ext import approx, approx_zero, coerce_zero

# Written by Eric J. Whitney, October 2026.

__all__ = ['Components', 'calculate_principal', 'calculate_principal_angles',
           'direction_cosines', 'from_principal', 'transform',
           'transformation_matrix']


# ======================================================================

class Components(NamedTuple):
    """
    Plane state components in a single orientation.
    """
    x: float
    """Normal component parallel to local x-x axis."""
    y: float
    """Normal component parallel to local y-y axis."""
    xy: float
    """Shear component in local x-y directions (tensor form)."""


# ----------------------------------------------------------------------

def calculate_principal(x: float, y: float, xy: float,
                        tol: float = 1e-12) -> (float, float):
    r"""
    Calculate principal values using the centre and radius of Mohr's
    circle.

    Parameters
    ----------
    x, y : float
        Normal components.
    xy : float
        Shear component (tensor form).
    tol : float, default = 1e-12
        Values with a magnitude below this are treated as zero.

    Returns
    -------
    s1, s2 : float
        Maximum and minimum principal values (:math:`s_1 \geq s_2`).

    Notes
    -----
    If all components are zero ``(0, 0)`` is returned.  If the shear
    component is zero the normal components are already principal and
    are returned directly in order.

    Examples
    --------
    >>> calculate_principal(0, 0, 10)
    (10.0, -10.0)
    >>> calculate_principal(3, 5, 0)
    (5, 3)
    """
    if (approx_zero(x, tol) and approx_zero(y, tol) and
            approx_zero(xy, tol)):
        return 0.0, 0.0

    if approx_zero(xy, tol):
        return max(x, y), min(x, y)

    cen = 0.5 * (x + y)
    rad = math.hypot(0.5 * (y - x), xy)
    return cen + rad, cen - rad


def calculate_principal_angles(x: float, y: float, xy: float,
                               s2: float = None,
                               tol: float = 1e-12) -> (float, float):
    r"""
    Calculate principal angles, i.e. the angles between the horizontal
    axis of the given components and the principal directions.

    Parameters
    ----------
    x, y : float
        Normal components.
    xy : float
        Shear component (tensor form).
    s2 : float, default = None
        Minimum principal value, if known.
    tol : float, default = 1e-12
        Values with a magnitude below this are treated as zero.

    Returns
    -------
    θ1, θ2 : float
        Angle of the maximum and minimum principal directions.  Always
        :math:`θ_2 = θ_1 + π/2`.

    Notes
    -----
    The cases are resolved in order:

    - All components zero: :math:`θ_1 = π/4` is returned as a
      conventional value (any direction is principal).
    - Zero shear: :math:`θ_1 = 0` if :math:`x \geq y` otherwise
      :math:`π/2`.
    - Equal normal components with negative shear:
      :math:`θ_1 = -π/4`.
    - `s2` known: :math:`θ_1 = π/2 - \arctan((x - s_2) / xy)`.
    - Otherwise :math:`θ_1 = π/2 - ½\arctan(2xy / (y - x))`, less
      :math:`π/2` if :math:`x > y` so that :math:`θ_1` points to the
      maximum principal value.

    If the result can't be computed (degenerate division),
    :math:`θ_1 = π/4` is returned.
    """
    θ1 = 0.25 * math.pi

    if not (approx_zero(x, tol) and approx_zero(y, tol) and
            approx_zero(xy, tol)):

        if approx_zero(xy, tol):
            θ1 = 0.0 if x >= y else 0.5 * math.pi

        elif approx(x, y, tol) and xy < 0:
            θ1 = -0.25 * math.pi

        elif s2 is not None:
            θ1 = 0.5 * math.pi - math.atan((x - s2) / xy)

        elif not approx(x, y, tol):
            θ1 = 0.5 * math.pi - 0.5 * math.atan(2 * xy / (y - x))
            if x > y:
                θ1 -= 0.5 * math.pi

        # Remaining case (x == y, xy > 0) keeps π/4.

        if math.isnan(θ1):
            θ1 = 0.25 * math.pi

    return θ1, θ1 + 0.5 * math.pi


def direction_cosines(θ: float, abs_value: bool = False) -> (float, float):
    """
    Returns the direction cosines (cos θ, sin θ) of an angle.  Values
    with a magnitude below option `trig_zero_tol` (default = 1e-6) are
    returned as exactly zero.  This prevents spurious non-zero components
    at axis-aligned angles (0, π/2, π, 3π/2).

    Parameters
    ----------
    θ : float
        Angle (radians).
    abs_value : bool, default = False
        If `True`, return absolute values.

    Returns
    -------
    cos θ, sin θ : float

    Examples
    --------
    >>> direction_cosines(0.5 * math.pi)
    (0.0, 1.0)
    """
    tol = get_options().trig_zero_tol
    cos_θ, sin_θ = (coerce_zero(math.cos(θ), tol),
                    coerce_zero(math.sin(θ), tol))
    if abs_value:
        return abs(cos_θ), abs(sin_θ)
    return cos_θ, sin_θ


def from_principal(s1: float, s2: float, θ1: float) -> Components:
    """
    Calculate the components in the horizontal orientation from the
    principal values.

    Parameters
    ----------
    s1, s2 : float
        Maximum and minimum principal values.
    θ1 : float
        Angle of the maximum principal direction (radians).

    Returns
    -------
    Components
        Components with shear in tensor form.
    """
    if approx_zero(θ1, get_options().angle_tol):
        return Components(s1, s2, 0.0)

    θ2 = 0.5 * math.pi - θ1
    cos_2θ, sin_2θ = direction_cosines(2 * θ2)

    cen, rad = 0.5 * (s1 + s2), 0.5 * (s1 - s2)
    return Components(cen - rad * cos_2θ, cen + rad * cos_2θ, rad * sin_2θ)


def transform(x: float, y: float, xy: float, θ: float) -> Components:
    r"""
    Mohr's circle transformation of components in any orientation to
    another orientation rotated by `θ`.

    Parameters
    ----------
    x, y : float
        Normal components.
    xy : float
        Shear component (tensor form).
    θ : float
        Rotation angle (radians, positive counterclockwise).  If
        :math:`θ ≈ 0` the components are returned unchanged.

    Returns
    -------
    Components
        Rotated components.

    Examples
    --------
    >>> transform(1000, 2000, 3000, -0.5 * math.pi)
    Components(x=2000.0, y=1000.0, xy=-3000.0)
    """
    if approx_zero(θ, get_options().angle_tol):
        return Components(x, y, xy)

    cos_2θ, sin_2θ = direction_cosines(2 * θ)

    a = 0.5 * (x + y)
    b = 0.5 * (x - y) * cos_2θ
    c = xy * sin_2θ
    d = 0.5 * (x - y) * sin_2θ
    e = xy * cos_2θ

    return Components(a + b + c, a - b - c, e - d)


def transformation_matrix(θ: float) -> np.ndarray:
    """
    Returns the 3x3 transformation matrix `T` for rotation `θ`, such
    that ``T @ [x, y, xy]`` gives the same result as ``transform(x, y,
    xy, θ)``.

    Parameters
    ----------
    θ : float
        Rotation angle (radians, positive counterclockwise).

    Returns
    -------
    T : ndarray, shape (3, 3)
    """
    # Laid out per:
    # https://web.mit.edu/course/3/3.11/www/modules/trans.pdf
    cos_θ, sin_θ = direction_cosines(θ)
    cos_θ2, sin_θ2, sincos_θ = cos_θ ** 2, sin_θ ** 2, sin_θ * cos_θ

    return np.array([[cos_θ2, sin_θ2, 2 * sincos_θ],
                     [sin_θ2, cos_θ2, -2 * sincos_θ],
                     [-sincos_θ, sincos_θ, cos_θ2 - sin_θ2]])
