"""
Plane Stress (:mod:`pymohr.stress`)
===================================

.. currentmodule:: pymohr.stress

Plane stress states.  Components are pressures returned as ``Dim``
objects; plain numbers given to constructors are taken to be in `units`
(default = MPa).

Examples
--------
Textbook Mohr's circle problem:

>>> from pymohr import StressState
>>> σ = StressState(80, 40, 30)
>>> σ_pr = σ.to_principal()
>>> print(f"{σ_pr.sigma_1:.2f}, {σ_pr.sigma_2:.2f}")
96.06 MPa, 23.94 MPa
>>> round(math.degrees(σ_pr.theta_1), 2)
28.15
"""
from __future__ import annotations

import math

import numpy as np

from pymohr.state import PrincipalState, State
from pymohr.units import dim, DimScalar

# Written by Eric J. Whitney, October 2026.

__all__ = ['PrincipalStressState', 'StressState']


# ======================================================================

class StressState(State):
    """
    Plane stress state.

    Parameters
    ----------
    sigma_x, sigma_y : Dim or float
        Normal stresses (positive for tension).
    tau_xy : Dim or float
        Shear stress (positive if acting upwards on the right face).
    theta_x : float, default = 0
        Angle of the `x` direction to the horizontal (radians).
    units : str, default = None
        Pressure units used for the components.  If ``None``, the units
        of the first ``Dim`` component are used, or ``'MPa'`` if all are
        plain numbers.

    Raises
    ------
    ValueError
        If `units` is not a known pressure unit.
    """
    __slots__ = ()

    tolerance = dim(1e-3, 'Pa')
    default_units = 'MPa'
    _kind = 'pressure'
    _shear_scale = 1.0
    _labels = {'x': ('σx', 'sigma_x'), 'y': ('σy', 'sigma_y'),
               'xy': ('τxy', 'tau_xy'), 'theta': ('θx', 'theta_x')}

    def __init__(self, sigma_x: DimScalar, sigma_y: DimScalar,
                 tau_xy: DimScalar, theta_x: float = 0.0, units: str = None):
        super().__init__(sigma_x, sigma_y, tau_xy, theta_x, units)

    sigma_x = State.x
    sigma_y = State.y
    tau_xy = State.xy

    @classmethod
    def from_strains(cls, strain, stiffness,
                     units: str = 'MPa') -> StressState:
        """
        Returns the stress state given by a linear stiffness relation
        ``σ = C @ ε``.  The result has the same orientation as `strain`.

        Parameters
        ----------
        strain : StrainState
            Strain state (engineering shear strain).
        stiffness : array-like, shape (3, 3)
            Stiffness matrix `C` relating ``[εx, εy, γxy]`` to ``[σx,
            σy, τxy]``, with values in `units`.
        units : str, default = 'MPa'
            Units of `stiffness` and of the resulting stresses.

        Raises
        ------
        ValueError
            If `stiffness` is not 3x3.
        """
        from pymohr.strain import StrainState

        if not isinstance(strain, StrainState):
            raise TypeError(f"Expected StrainState, got "
                            f"{type(strain).__name__}.")

        stiffness = _check_stiffness(stiffness)
        if strain.is_zero:
            return cls._new(0.0, 0.0, 0.0, strain.theta_x, units)

        return cls._new(*(stiffness @ strain.as_array()), strain.theta_x,
                        units)


# ----------------------------------------------------------------------

class PrincipalStressState(PrincipalState):
    """
    Principal plane stress state.

    Parameters
    ----------
    sigma_1, sigma_2 : Dim or float
        Maximum and minimum principal stresses.
    theta_1 : float, default = π/4
        Angle of the `sigma_1` direction to the horizontal (radians).
    units : str, default = None
        Pressure units, as for ``StressState``.
    """
    __slots__ = ()

    tolerance = dim(1e-3, 'Pa')
    default_units = 'MPa'
    _kind = 'pressure'
    _shear_scale = 1.0
    _labels = {'1': ('σ1', 'sigma_1'), '2': ('σ2', 'sigma_2'),
               'theta_1': ('θ1', 'theta_1')}

    def __init__(self, sigma_1: DimScalar, sigma_2: DimScalar,
                 theta_1: float = 0.25 * math.pi, units: str = None):
        super().__init__(sigma_1, sigma_2, theta_1, units)

    sigma_1 = PrincipalState.s1
    sigma_2 = PrincipalState.s2


for _cls in (StressState, PrincipalStressState):
    _cls._state_type = StressState
    _cls._principal_type = PrincipalStressState


# ----------------------------------------------------------------------

def _check_stiffness(stiffness) -> np.ndarray:
    stiffness = np.asarray(stiffness, dtype=float)
    if stiffness.shape != (3, 3):
        raise ValueError(f"Stiffness matrix must be 3x3, got shape "
                         f"{stiffness.shape}.")
    return stiffness
