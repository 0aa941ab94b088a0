"""
Plane Strain (:mod:`pymohr.strain`)
===================================

.. currentmodule:: pymohr.strain

Plane strain states.  Components are dimensionless plain floats and the
shear component is the *engineering* shear strain
:math:`γ_{xy} = 2ε_{xy}`.  Transformations account for this
automatically.

Examples
--------
>>> from pymohr import StrainState
>>> ε = StrainState(0.0, 0.0, 0.002)
>>> ε_pr = ε.to_principal()
>>> round(ε_pr.epsilon_1, 9), round(ε_pr.epsilon_2, 9)
(0.001, -0.001)
>>> round(math.degrees(ε_pr.theta_1), 6)
45.0
"""
from __future__ import annotations

import math

import numpy as np

from pymohr.state import PrincipalState, State
from pymohr.stress import StressState, _check_stiffness

# Written by Eric J. Whitney, October 2026.

__all__ = ['PrincipalStrainState', 'StrainState']


# ======================================================================

class StrainState(State):
    """
    Plane strain state.

    Parameters
    ----------
    epsilon_x, epsilon_y : float
        Normal strains (positive for elongation).
    gamma_xy : float
        Engineering shear strain.
    theta_x : float, default = 0
        Angle of the `x` direction to the horizontal (radians).
    """
    __slots__ = ()

    tolerance = 1e-12
    default_units = ''
    _kind = ''
    _shear_scale = 0.5
    _labels = {'x': ('εx', 'epsilon_x'), 'y': ('εy', 'epsilon_y'),
               'xy': ('γxy', 'gamma_xy'), 'theta': ('θx', 'theta_x')}

    def __init__(self, epsilon_x: float, epsilon_y: float, gamma_xy: float,
                 theta_x: float = 0.0):
        super().__init__(epsilon_x, epsilon_y, gamma_xy, theta_x, '')

    epsilon_x = State.x
    epsilon_y = State.y
    gamma_xy = State.xy

    @classmethod
    def from_stresses(cls, stress: StressState, stiffness,
                      units: str = 'MPa') -> StrainState:
        """
        Returns the strain state given by a linear stiffness relation,
        i.e. solving ``C @ ε = σ``.  The result has the same orientation
        as `stress`.

        Parameters
        ----------
        stress : StressState
            Stress state.
        stiffness : array-like, shape (3, 3)
            Stiffness matrix `C` relating ``[εx, εy, γxy]`` to ``[σx,
            σy, τxy]``, with values in `units`.
        units : str, default = 'MPa'
            Units of `stiffness`.  `stress` is converted to these units.

        Raises
        ------
        ValueError
            If `stiffness` is not 3x3.
        numpy.linalg.LinAlgError
            If `stiffness` is singular.
        """
        if not isinstance(stress, StressState):
            raise TypeError(f"Expected StressState, got "
                            f"{type(stress).__name__}.")

        stiffness = _check_stiffness(stiffness)
        if stress.is_zero:
            return cls._new(0.0, 0.0, 0.0, stress.theta_x, '')

        ε = np.linalg.solve(stiffness, stress.as_array(units))
        return cls._new(*ε, stress.theta_x, '')


# ----------------------------------------------------------------------

class PrincipalStrainState(PrincipalState):
    """
    Principal plane strain state.

    Parameters
    ----------
    epsilon_1, epsilon_2 : float
        Maximum and minimum principal strains.
    theta_1 : float, default = π/4
        Angle of the `epsilon_1` direction to the horizontal (radians).
    """
    __slots__ = ()

    tolerance = 1e-12
    default_units = ''
    _kind = ''
    _shear_scale = 0.5
    _labels = {'1': ('ε1', 'epsilon_1'), '2': ('ε2', 'epsilon_2'),
               'theta_1': ('θ1', 'theta_1')}

    def __init__(self, epsilon_1: float, epsilon_2: float,
                 theta_1: float = 0.25 * math.pi):
        super().__init__(epsilon_1, epsilon_2, theta_1, '')

    epsilon_1 = PrincipalState.s1
    epsilon_2 = PrincipalState.s2


for _cls in (StrainState, PrincipalStrainState):
    _cls._state_type = StrainState
    _cls._principal_type = PrincipalStrainState
