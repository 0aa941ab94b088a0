"""
.. module:: pymohr

Plane stress and strain states with Mohr's circle transformations.

The main types are:

- ``StressState`` / ``PrincipalStressState``: Pressure valued states
  (components are ``Dim`` objects, default units MPa).
- ``StrainState`` / ``PrincipalStrainState``: Dimensionless states using
  engineering shear strain.

Lower level relations operating on plain floats are in
``pymohr.relations`` and physical quantity handling is in
``pymohr.units``.
"""

__version__ = "0.1.0"

# Written by Eric J. Whitney, October 2026.

from ._opts import StateOptions, get_options, option_context, set_options
from .math_ext import NonFiniteWarning
from .state import PrincipalCase, PrincipalState, State
from .strain import PrincipalStrainState, StrainState
from .stress import PrincipalStressState, StressState
from .units import dim, Dim
