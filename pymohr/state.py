"""
Plane States (:mod:`pymohr.state`)
==================================

.. currentmodule:: pymohr.state

Generic plane state types.  A ``State`` holds normal components `x`,
`y` and shear component `xy` in an orientation given by `theta_x`,
and a ``PrincipalState`` holds the same quantity as maximum / minimum
principal values `s1`, `s2` with the direction of `s1` given by
`theta_1`.  The two are interchangeable representations of the same
physical quantity.

These classes are not used directly; stress and strain bindings are
provided by ``pymohr.stress`` and ``pymohr.strain``.  Each binding sets
the following class attributes:

- `tolerance`: Components smaller than this are considered zero.  This
  is either a plain float or a ``Dim`` (converted to the units of the
  state when used).
- `default_units`: Units assumed for plain numeric components.
- `_kind`: Kind of quantity allowed for `units` (see ``Dim.kind``).
- `_shear_scale`: Factor converting the shear component stored to
  tensor form (engineering shear strain is twice the tensor shear).
- `_state_type`, `_principal_type`: Paired classes for the quantity.
- `_labels`: Symbols used by ``__str__`` (unicode / plain).

All states are immutable.  Every operation returns a new object (or the
same object if no change is needed).
"""
from __future__ import annotations

import math
from enum import Enum
from numbers import Real

import numpy as np

from pymohr import relations
from pymohr._opts import get_options
from pymohr.math_ext import approx, approx_zero, as_finite, on_angle
from pymohr.relations import Components
from pymohr.units import convert, dim, Dim, DimScalar

# Written by Eric J. Whitney, October 2026.

__all__ = ['PrincipalCase', 'PrincipalState', 'State']

_PI_4, _PI_2 = 0.25 * math.pi, 0.5 * math.pi


# ======================================================================

class PrincipalCase(Enum):
    """
    Classification of a ``PrincipalState`` by the signs of the
    principal values.
    """
    ZERO = 'zero'
    """Both principal values are zero."""
    PURE_TENSION = 'pure tension'
    """Tension in both directions."""
    PURE_COMPRESSION = 'pure compression'
    """Compression in both directions."""
    TENSION_COMPRESSION = 'tension-compression'
    """Tension in one direction and compression in the other."""
    UNIAXIAL_TENSION = 'uniaxial tension'
    """Tension in one direction only."""
    UNIAXIAL_COMPRESSION = 'uniaxial compression'
    """Compression in one direction only."""


# ----------------------------------------------------------------------

class _PlaneValue:
    """
    Common machinery for immutable plane values carrying units.
    """
    __slots__ = ()

    tolerance: DimScalar = 1e-12
    default_units: str = ''
    _kind: str = ''
    _shear_scale: float = 1.0
    _state_type: type[State] = None
    _principal_type: type[PrincipalState] = None
    _labels: dict[str, tuple[str, str]] = {}

    # -- Magic Methods -------------------------------------------------

    def __setattr__(self, name, value):
        raise AttributeError(f"'{type(self).__name__}' object is immutable.")

    def __delattr__(self, name):
        raise AttributeError(f"'{type(self).__name__}' object is immutable.")

    # -- Public Methods ------------------------------------------------

    @property
    def units(self) -> str:
        """Units of all components (empty string if dimensionless)."""
        return self._units

    # -- Private Methods -----------------------------------------------

    def _init_values(self, names: [str], values: [DimScalar],
                     units: str | None):
        """
        Convert `values` to plain floats in common units and store them
        under `names`, along with the units.  If `units` is not given,
        the units of the first ``Dim`` value are used, otherwise
        `default_units`.  Non-finite values are replaced by zero.
        """
        if units is None:
            units = next((v.units for v in values if isinstance(v, Dim)),
                         self.default_units)

        if dim(1, units).kind() != self._kind:
            raise ValueError(f"Units '{units}' not allowed for "
                             f"{type(self).__name__}.")

        for name, v in zip(names, values):
            if isinstance(v, Dim):
                v = v.to_real(units)
            object.__setattr__(self, name, as_finite(v, name.lstrip('_')))

        object.__setattr__(self, '_units', units)

    def _label(self, key: str) -> str:
        return self._labels[key][0 if get_options().unicode_str else 1]

    def _quantity(self, value: float) -> DimScalar:
        """Returns `value` as a ``Dim`` if this state has units."""
        return Dim(value, self._units) if self._units else value

    def _tol(self, tol: DimScalar = None) -> float:
        """Returns `tol` (or `tolerance`) as a float in our units."""
        if tol is None:
            tol = self.tolerance
        if isinstance(tol, Dim):
            return tol.to_real(self._units)
        return tol

    def _transformation_matrix(self, θ: float) -> np.ndarray:
        # Adapt tensor form matrix to the stored shear component.
        t = relations.transformation_matrix(θ)
        t[:2, 2] *= self._shear_scale
        t[2, :2] /= self._shear_scale
        return t


# ======================================================================

class State(_PlaneValue):
    """
    Generic plane state given by normal components `x` and `y` and
    shear component `xy`, with the `x` direction at angle `theta_x` to
    the horizontal axis.

    Parameters
    ----------
    x, y : Dim or float
        Normal components (positive for tension).
    xy : Dim or float
        Shear component (positive if acting upwards on the right face of
        the element).
    theta_x : float, default = 0
        Angle of the `x` direction relative to the horizontal axis
        (radians, positive counterclockwise).
    units : str, default = None
        Units for the components.  If ``None`` the units of the first
        ``Dim`` component are used, or `default_units` if there are none.
        ``Dim`` components are converted to these units and plain values
        are assumed to be in these units.

    Notes
    -----
    - NaN or infinite components / angle are replaced by zero.
    - Two states compare equal (``==``) if they have the same
      orientation and components within `tolerance`.  A ``State`` can
      also be compared with a ``PrincipalState`` of the same quantity.
    - Addition, subtraction, negation and scalar multiplication /
      division first transform the operands to the horizontal
      orientation.  The result is always horizontal and uses the units
      of the LHS.
    """
    __slots__ = ('_x', '_y', '_xy', '_theta_x', '_units')

    def __init__(self, x: DimScalar, y: DimScalar, xy: DimScalar,
                 theta_x: float = 0.0, units: str = None):
        self._init_values(('_x', '_y', '_xy'), (x, y, xy), units)
        object.__setattr__(self, '_theta_x', as_finite(theta_x, 'theta_x'))

    # -- Magic Methods -------------------------------------------------

    def __add__(self, rhs: State | PrincipalState) -> State:
        rhs = self._horizontal_operand(rhs)
        if rhs is None:
            return NotImplemented
        return self._combine(self.to_horizontal().as_array() +
                             rhs.as_array(self._units))

    def __radd__(self, lhs) -> State:
        # Allows sum() to start from zero.
        if isinstance(lhs, Real) and lhs == 0:
            return self.to_horizontal()
        return NotImplemented

    def __sub__(self, rhs: State | PrincipalState) -> State:
        rhs = self._horizontal_operand(rhs)
        if rhs is None:
            return NotImplemented
        return self._combine(self.to_horizontal().as_array() -
                             rhs.as_array(self._units))

    def __neg__(self) -> State:
        return self._combine(-self.to_horizontal().as_array())

    def __mul__(self, k: Real) -> State:
        if not isinstance(k, Real):
            return NotImplemented
        return self._combine(self.to_horizontal().as_array() * k)

    __rmul__ = __mul__

    def __truediv__(self, k: Real) -> State:
        if not isinstance(k, Real):
            return NotImplemented
        with np.errstate(divide='ignore', invalid='ignore'):
            return self._combine(self.to_horizontal().as_array() / k)

    def __eq__(self, other) -> bool:
        if isinstance(other, (self._state_type, self._principal_type)):
            return self.approaches(other)
        return NotImplemented

    def __reduce__(self):
        return self._new, (self._x, self._y, self._xy, self._theta_x,
                           self._units)

    def __repr__(self):
        units_str = f", units='{self._units}'" if self._units else ''
        return (f"{type(self).__name__}({self._x!r}, {self._y!r}, "
                f"{self._xy!r}, theta_x={self._theta_x!r}{units_str})")

    def __str__(self):
        return (f"{self._label('x')} = {self.x}\n"
                f"{self._label('y')} = {self.y}\n"
                f"{self._label('xy')} = {self.xy}\n"
                f"{self._label('theta')} = {self._theta_x:.2f} rad")

    # -- Public Methods ------------------------------------------------

    def approaches(self, other: State | PrincipalState,
                   tol: DimScalar = None) -> bool:
        """
        Returns ``True`` if `other` has the same orientation (within
        option `angle_eq_tol`) and components within `tol` of this
        state.  If `other` is a ``PrincipalState`` the principal form of
        this state is compared instead.  Unrelated types give ``False``.

        Parameters
        ----------
        other : State or PrincipalState
            Value to compare.
        tol : Dim or float, default = None
            Tolerance for components.  If ``None``, `tolerance` is used.
        """
        if isinstance(other, self._principal_type):
            return self.to_principal().approaches(other, tol)
        if not isinstance(other, self._state_type):
            return False

        tol = self._tol(tol)
        return (approx(self._theta_x, other.theta_x,
                       get_options().angle_eq_tol) and
                all(approx(a, b, tol) for a, b in
                    zip(self.as_array(), other.as_array(self._units))))

    def as_array(self, units: str = None) -> np.ndarray:
        """
        Returns the components ``[x, y, xy]`` as a numpy array of plain
        values, optionally converted to `units`.
        """
        arr = np.array([self._x, self._y, self._xy])
        if units is not None:
            arr = convert(arr, from_units=self._units, to_units=units)
        return arr

    def convert(self, units: str) -> State:
        """
        Returns a new state with components converted to `units` (or
        this state if the units already match).
        """
        if units == self._units:
            return self
        return self._new(*self.as_array(units), self._theta_x, units)

    @classmethod
    def from_principal(cls, principal: PrincipalState) -> State:
        """
        Returns a state in the horizontal orientation (`theta_x` = 0)
        equivalent to the given ``PrincipalState``.
        """
        if not isinstance(principal, cls._principal_type):
            raise TypeError(f"Expected {cls._principal_type.__name__}, got "
                            f"{type(principal).__name__}.")

        c = relations.from_principal(principal._s1, principal._s2,
                                     principal._theta_1)
        return cls._from_tensor(c, 0.0, principal.units)

    @classmethod
    def from_vector(cls, vector, theta_x: float = 0.0,
                    units: str = None) -> State:
        """
        Returns a state from an array-like of three plain values ``[x,
        y, xy]``.

        Raises
        ------
        ValueError
            If `vector` does not have three elements.
        """
        vector = np.asarray(vector, dtype=float).ravel()
        if vector.shape != (3,):
            raise ValueError(f"Expected three components, got "
                             f"{vector.size}.")
        return cls._new(*vector, theta_x, units)

    @property
    def is_horizontal(self) -> bool:
        """``True`` if the `x` direction is horizontal (0 or π)."""
        return on_angle(self._theta_x, [0.0, math.pi],
                        get_options().angle_tol)

    @property
    def is_principal(self) -> bool:
        """``True`` if `x`, `y` are nonzero and `xy` is zero."""
        return not self.is_x_zero and not self.is_y_zero and self.is_xy_zero

    @property
    def is_pure_shear(self) -> bool:
        """``True`` if `x`, `y` are zero and `xy` is nonzero."""
        return self.is_x_zero and self.is_y_zero and not self.is_xy_zero

    @property
    def is_vertical(self) -> bool:
        """``True`` if the `x` direction is vertical (π/2 or 3π/2)."""
        return on_angle(self._theta_x, [_PI_2, 3 * _PI_2],
                        get_options().angle_tol)

    @property
    def is_x_zero(self) -> bool:
        return approx_zero(self._x, self._tol())

    @property
    def is_xy_zero(self) -> bool:
        return approx_zero(self._xy, self._tol())

    @property
    def is_y_zero(self) -> bool:
        return approx_zero(self._y, self._tol())

    @property
    def is_zero(self) -> bool:
        """``True`` if all components are zero."""
        return self.is_x_zero and self.is_y_zero and self.is_xy_zero

    @property
    def theta_x(self) -> float:
        """Angle of the `x` direction relative to horizontal (radians)."""
        return self._theta_x

    @property
    def theta_y(self) -> float:
        """Angle of the `y` direction relative to horizontal (radians)."""
        return self._theta_x + _PI_2

    def to_horizontal(self) -> State:
        """
        Returns this state transformed to the horizontal orientation
        (`theta_x` = 0).
        """
        if approx_zero(self._theta_x, get_options().angle_tol):
            return self
        return self._rotated(-self._theta_x, 0.0)

    def to_principal(self) -> PrincipalState:
        """
        Returns the ``PrincipalState`` equivalent to this state.  The
        principal angle is measured from the horizontal, i.e. it
        includes `theta_x`.
        """
        c, tol = self._tensor(), self._tol()
        s1, s2 = relations.calculate_principal(*c, tol=tol)
        θ1, _ = relations.calculate_principal_angles(*c, s2=s2, tol=tol)
        return self._principal_type._new(s1, s2, self._theta_x + θ1,
                                         self._units)

    def transform(self, θ: float) -> State:
        """
        Returns this state transformed by rotation angle `θ` (radians,
        positive counterclockwise).  The result has `theta_x` increased
        by `θ`.  If `θ` is zero this state is returned.
        """
        if approx_zero(θ, get_options().angle_tol):
            return self
        return self._rotated(θ, self._theta_x + θ)

    @property
    def transformation_matrix(self) -> np.ndarray:
        """
        3x3 matrix transforming components from the horizontal
        orientation to this orientation, i.e. ``T @ h.as_array()`` equals
        ``self.as_array()`` where ``h = self.to_horizontal()``.
        """
        return self._transformation_matrix(self._theta_x)

    @property
    def x(self) -> DimScalar:
        """Normal component in the `x` direction."""
        return self._quantity(self._x)

    @property
    def xy(self) -> DimScalar:
        """Shear component."""
        return self._quantity(self._xy)

    @property
    def y(self) -> DimScalar:
        """Normal component in the `y` direction."""
        return self._quantity(self._y)

    @classmethod
    def zero(cls, units: str = None) -> State:
        """Returns a horizontal state with all components zero."""
        return cls._new(0.0, 0.0, 0.0, 0.0, units)

    # -- Private Methods -----------------------------------------------

    def _combine(self, values: np.ndarray) -> State:
        """Horizontal state of the same type and units as `self`."""
        return self._new(*values, 0.0, self._units)

    @classmethod
    def _from_tensor(cls, c: Components, theta_x: float,
                     units: str) -> State:
        return cls._new(c.x, c.y, c.xy / cls._shear_scale, theta_x, units)

    def _horizontal_operand(self, rhs) -> State | None:
        """Returns `rhs` as a horizontal state, or ``None`` if it is not
        a state of the same quantity."""
        if isinstance(rhs, self._state_type):
            return rhs.to_horizontal()
        if isinstance(rhs, self._principal_type):
            return self._state_type.from_principal(rhs)
        return None

    @classmethod
    def _new(cls, x: float, y: float, xy: float, theta_x: float,
             units: str | None) -> State:
        """Construct without the argument conventions of a subclass
        ``__init__``."""
        obj = cls.__new__(cls)
        State.__init__(obj, x, y, xy, theta_x, units)
        return obj

    def _rotated(self, θ: float, theta_x: float) -> State:
        c = relations.transform(*self._tensor(), θ)
        return self._from_tensor(c, theta_x, self._units)

    def _tensor(self) -> Components:
        """Components with the shear in tensor form."""
        return Components(self._x, self._y, self._xy * self._shear_scale)


# ======================================================================

class PrincipalState(_PlaneValue):
    """
    Generic principal state given by the maximum and minimum principal
    values `s1` and `s2`, with the direction of `s1` at angle `theta_1`
    to the horizontal axis.  The shear component is zero in this
    orientation.

    Parameters
    ----------
    s1, s2 : Dim or float
        Maximum and minimum principal values (positive for tension).
    theta_1 : float, default = π/4
        Angle of the `s1` direction relative to the horizontal axis
        (radians, positive counterclockwise).
    units : str, default = None
        Units for the principal values, as for ``State``.

    Notes
    -----
    - Values are normally obtained from ``State.to_principal()``, which
      ensures `s1` >= `s2`.
    - NaN or infinite values / angle are replaced by zero.
    - Addition and subtraction with a ``State`` or ``PrincipalState``
      gives a horizontal ``State``.  Scalar multiplication / division
      gives a ``PrincipalState``; negative factors swap the principal
      values and rotate `theta_1` by π/2 so that `s1` >= `s2` is kept.
    """
    __slots__ = ('_s1', '_s2', '_theta_1', '_units')

    def __init__(self, s1: DimScalar, s2: DimScalar, theta_1: float = _PI_4,
                 units: str = None):
        self._init_values(('_s1', '_s2'), (s1, s2), units)
        object.__setattr__(self, '_theta_1', as_finite(theta_1, 'theta_1'))

    # -- Magic Methods -------------------------------------------------

    def __add__(self, rhs: State | PrincipalState) -> State:
        if not isinstance(rhs, (self._state_type, self._principal_type)):
            return NotImplemented
        return self.to_horizontal() + rhs

    def __radd__(self, lhs) -> State:
        # Allows sum() to start from zero.
        if isinstance(lhs, Real) and lhs == 0:
            return self.to_horizontal()
        return NotImplemented

    def __sub__(self, rhs: State | PrincipalState) -> State:
        if not isinstance(rhs, (self._state_type, self._principal_type)):
            return NotImplemented
        return self.to_horizontal() - rhs

    def __neg__(self) -> PrincipalState:
        return self * -1

    def __mul__(self, k: Real) -> PrincipalState:
        if not isinstance(k, Real):
            return NotImplemented
        return self._scaled(k * self._s1, k * self._s2, k < 0)

    __rmul__ = __mul__

    def __truediv__(self, k: Real) -> PrincipalState:
        if not isinstance(k, Real):
            return NotImplemented
        with np.errstate(divide='ignore', invalid='ignore'):
            s1, s2 = np.array([self._s1, self._s2]) / k
        return self._scaled(s1, s2, k < 0)

    def __eq__(self, other) -> bool:
        if isinstance(other, (self._state_type, self._principal_type)):
            return self.approaches(other)
        return NotImplemented

    def __reduce__(self):
        return self._new, (self._s1, self._s2, self._theta_1, self._units)

    def __repr__(self):
        units_str = f", units='{self._units}'" if self._units else ''
        return (f"{type(self).__name__}({self._s1!r}, {self._s2!r}, "
                f"theta_1={self._theta_1!r}{units_str})")

    def __str__(self):
        return (f"{self._label('1')} = {self.s1}\n"
                f"{self._label('2')} = {self.s2}\n"
                f"{self._label('theta_1')} = {self._theta_1:.2f} rad")

    # -- Public Methods ------------------------------------------------

    def approaches(self, other: State | PrincipalState,
                   tol: DimScalar = None) -> bool:
        """
        Returns ``True`` if `other` has principal values within `tol`
        and `theta_1` within option `angle_eq_tol` of this state.  A
        ``State`` is first converted to principal form.  Unrelated types
        give ``False``.

        Parameters
        ----------
        other : State or PrincipalState
            Value to compare.
        tol : Dim or float, default = None
            Tolerance for principal values.  If ``None``, `tolerance` is
            used.
        """
        if isinstance(other, self._state_type):
            other = other.to_principal()
        elif not isinstance(other, self._principal_type):
            return False

        tol = self._tol(tol)
        s1, s2, _ = other.as_array(self._units)
        return (approx(self._theta_1, other.theta_1,
                       get_options().angle_eq_tol) and
                approx(self._s1, s1, tol) and approx(self._s2, s2, tol))

    def as_array(self, units: str = None) -> np.ndarray:
        """
        Returns ``[s1, s2, 0]`` as a numpy array of plain values,
        optionally converted to `units`.
        """
        arr = np.array([self._s1, self._s2, 0.0])
        if units is not None:
            arr = convert(arr, from_units=self._units, to_units=units)
        return arr

    def as_state(self) -> State:
        """
        Returns this as a ``State`` in the principal orientation, i.e.
        ``x = s1``, ``y = s2``, ``xy = 0``, ``theta_x = theta_1``.
        """
        return self._state_type._new(self._s1, self._s2, 0.0, self._theta_1,
                                     self._units)

    @property
    def case(self) -> PrincipalCase:
        """
        Classification of this state by the signs of `s1` and `s2`.
        """
        if self.is_1_zero:
            if self.is_2_zero:
                return PrincipalCase.ZERO
            return PrincipalCase.UNIAXIAL_COMPRESSION

        if self.is_2_zero:
            return PrincipalCase.UNIAXIAL_TENSION
        if self._s2 > 0:
            return PrincipalCase.PURE_TENSION
        if self._s1 < 0:
            return PrincipalCase.PURE_COMPRESSION
        return PrincipalCase.TENSION_COMPRESSION

    def convert(self, units: str) -> PrincipalState:
        """
        Returns a new principal state with values converted to `units`
        (or this state if the units already match).
        """
        if units == self._units:
            return self
        s1, s2, _ = self.as_array(units)
        return self._new(s1, s2, self._theta_1, units)

    @classmethod
    def from_state(cls, state: State) -> PrincipalState:
        """Returns the principal form of `state`."""
        if not isinstance(state, cls._state_type):
            raise TypeError(f"Expected {cls._state_type.__name__}, got "
                            f"{type(state).__name__}.")
        return state.to_principal()

    @property
    def is_1_zero(self) -> bool:
        return approx_zero(self._s1, self._tol())

    @property
    def is_2_zero(self) -> bool:
        return approx_zero(self._s2, self._tol())

    @property
    def is_at_45_degrees(self) -> bool:
        """``True`` if the principal directions are at ±45° to the
        horizontal."""
        return on_angle(self._theta_1, [_PI_4, 3 * _PI_4, 5 * _PI_4,
                                        7 * _PI_4], get_options().angle_tol)

    @property
    def is_horizontal(self) -> bool:
        """``True`` if the `s1` direction is horizontal (0 or π)."""
        return on_angle(self._theta_1, [0.0, math.pi],
                        get_options().angle_tol)

    @property
    def is_vertical(self) -> bool:
        """``True`` if the `s1` direction is vertical (π/2 or 3π/2)."""
        return on_angle(self._theta_1, [_PI_2, 3 * _PI_2],
                        get_options().angle_tol)

    @property
    def is_zero(self) -> bool:
        return self.is_1_zero and self.is_2_zero

    @property
    def s1(self) -> DimScalar:
        """Maximum principal value."""
        return self._quantity(self._s1)

    @property
    def s2(self) -> DimScalar:
        """Minimum principal value."""
        return self._quantity(self._s2)

    @property
    def theta_1(self) -> float:
        """Angle of the `s1` direction relative to horizontal (radians)."""
        return self._theta_1

    @property
    def theta_2(self) -> float:
        """Angle of the `s2` direction relative to horizontal (radians)."""
        return self._theta_1 + _PI_2

    def to_horizontal(self) -> State:
        """Returns the equivalent ``State`` in the horizontal
        orientation."""
        return self._state_type.from_principal(self)

    def to_principal(self) -> PrincipalState:
        return self

    def transform(self, θ: float) -> State:
        """
        Returns the ``State`` obtained by rotating the principal
        orientation by `θ` (radians, positive counterclockwise).
        """
        return self.as_state().transform(θ)

    @property
    def transformation_matrix(self) -> np.ndarray:
        """
        3x3 matrix transforming components from the horizontal
        orientation to the principal orientation.
        """
        return self._transformation_matrix(self._theta_1)

    @classmethod
    def zero(cls, units: str = None) -> PrincipalState:
        """Returns a principal state with zero values (`theta_1` = π/4)."""
        return cls._new(0.0, 0.0, _PI_4, units)

    # -- Private Methods -----------------------------------------------

    @classmethod
    def _new(cls, s1: float, s2: float, theta_1: float,
             units: str | None) -> PrincipalState:
        """Construct without the argument conventions of a subclass
        ``__init__``."""
        obj = cls.__new__(cls)
        PrincipalState.__init__(obj, s1, s2, theta_1, units)
        return obj

    def _scaled(self, s1: float, s2: float, flip: bool) -> PrincipalState:
        if flip:
            return self._new(s2, s1, self._theta_1 + _PI_2, self._units)
        return self._new(s1, s2, self._theta_1, self._units)

