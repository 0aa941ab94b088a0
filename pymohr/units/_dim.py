from __future__ import annotations

import operator
import warnings
from numbers import Number
from typing import Callable, NamedTuple, Union

import numpy as np

# Written by Eric J. Whitney, October 2026.


# ======================================================================

class _UnitDef(NamedTuple):
    """Unit `kind` (e.g. 'pressure') and factor to the base unit of the
    kind."""
    kind: str
    factor: float


_KNOWN_UNITS: dict[str, _UnitDef] = {'': _UnitDef('', 1.0)}


# ----------------------------------------------------------------------

class Dim(NamedTuple):
    """
    ``Dim`` represents a dimensioned quantity, consisting of a value and
    a string giving the associated units.  A ``Dim`` object can be used
    in mathematical expressions with other ``Dim`` objects of the same
    kind and with plain scalars.  Unit conversions are done
    automatically, with the result taking the units of the LHS.

    ``Dim`` objects are implemented as a namedtuple and are thus
    immutable.

    .. note:: ``Dim`` objects are not normally created by the user.
       Refer to factory function ``dim()`` for normal construction
       methods.
    """
    value: float
    units: str

    # -- Unary Operators -----------------------------------------------

    def __abs__(self) -> Dim:
        return Dim(abs(self.value), self.units)

    def __float__(self) -> float:
        """
        Returns float(self.value).

        .. note:: Units are removed and checking ability is lost.
        """
        return float(self.value)

    def __neg__(self) -> Dim:
        return Dim(-self.value, self.units)

    def __pos__(self) -> Dim:
        return self

    def __round__(self, n: int = None) -> Dim:
        return Dim(round(self.value, n), self.units)

    # -- Binary Operators ----------------------------------------------

    def __add__(self, rhs: DimScalar) -> Dim:
        """
        Add two dimensioned values.  `rhs` is converted to the units of
        `self` prior to addition.  If `rhs` is an ordinary value, it is
        promoted to a dimensionless ``Dim`` which is only valid if `self`
        is also dimensionless.
        """
        rhs = _promote(rhs)
        return Dim(self.value + rhs.to_real(self.units), self.units)

    def __sub__(self, rhs: DimScalar) -> Dim:
        """
        Subtract two dimensioned values.  Follows the same rules as
        ``__add__``.
        """
        rhs = _promote(rhs)
        return Dim(self.value - rhs.to_real(self.units), self.units)

    def __mul__(self, rhs: Number) -> Dim:
        """
        Multiply by a plain scalar, retaining the units of `self`.
        Multiplication of two ``Dim`` objects is not supported as no
        compound units are defined.
        """
        if isinstance(rhs, (Dim, str)):
            return NotImplemented
        return Dim(self.value * rhs, self.units)

    def __truediv__(self, rhs: DimScalar) -> DimScalar:
        """
        Divide by a plain scalar (retaining units) or by another ``Dim``
        of the same kind, in which case the units cancel and a plain
        value is returned.
        """
        if isinstance(rhs, Dim):
            return self.value / rhs.to_real(self.units)
        if isinstance(rhs, str):
            return NotImplemented
        return Dim(self.value / rhs, self.units)

    def __radd__(self, lhs: DimScalar) -> Dim:
        """See ``__add__`` for addition rules."""
        return Dim(lhs, '') + self

    def __rsub__(self, lhs: DimScalar) -> Dim:
        """See ``__sub__`` for subtraction rules."""
        return Dim(lhs, '') - self

    def __rmul__(self, lhs: Number) -> Dim:
        """See ``__mul__`` for multiplication rules."""
        return self * lhs

    # -- Comparison Operators ------------------------------------------

    def __lt__(self, rhs):
        return _common_cmp(self, rhs, operator.lt)

    def __le__(self, rhs):
        return _common_cmp(self, rhs, operator.le)

    def __eq__(self, rhs):
        return _common_cmp(self, rhs, operator.eq)

    def __ne__(self, rhs):
        res = self.__eq__(rhs)
        return res if res is NotImplemented else not res

    def __ge__(self, rhs):
        return _common_cmp(self, rhs, operator.ge)

    def __gt__(self, rhs):
        return _common_cmp(self, rhs, operator.gt)

    # Equal values can have different units.
    __hash__ = None

    # -- String Magic Methods ------------------------------------------

    def __format__(self, format_spec: str):
        return format(self.value, format_spec) + f" {self.units}"

    def __repr__(self):
        return f"dim({self.value}, '{self.units}')"

    def __str__(self):
        return self.__format__('')

    # -- Normal Methods ------------------------------------------------

    def convert(self, to_units: str) -> Dim:
        """
        Generate new ``Dim`` object converted to requested units.
        """
        return Dim(convert(self.value, from_units=self.units,
                           to_units=to_units), to_units)

    def is_dimless(self) -> bool:
        """Return True if the value has no units."""
        return self.units == ''

    def kind(self) -> str:
        """
        Returns the kind of quantity represented (e.g. ``'pressure'``),
        or an empty string if dimensionless.
        """
        return _unit_def(self.units).kind

    def to_real(self, to_units: str = None) -> float:
        """
        Remove dimensions and return a plain real number.  This is a
        convenience method equivalent to ``self.convert(to_units).value``

        .. note:: Unit information is lost. See operator ``__float__``.

        Parameters
        ----------
        to_units : str (optional)
            Convert to these units prior to returning numeric value
            (default = `self.units`).

        Returns
        -------
        result : Number
            Plain numeric value using units `to_units`.
        """
        if to_units is not None:
            return self.convert(to_units).value
        else:
            return self.value


DimScalar = Union[Dim, int, float]
"""A `DimScalar` is a shorthand defined for type checking purposes as
``Union[Dim, int, float]`` and represents a value that is expected to
be either a plain number or dimensioned equivalent."""


# -- Public Functions --------------------------------------------------

def add_unit(unit: str, kind: str, factor: float):
    """
    Register a new unit.

    Parameters
    ----------
    unit : str
        Case-sensitive string to use as a label for the unit.
    kind : str
        Kind of quantity, e.g. ``'pressure'``.  Only units of the same
        kind can be converted between each other.
    factor : float
        Multiplying factor giving the value in the base unit of the kind
        when applied to a value in `unit`.

    Raises
    ------
    ValueError
        If `unit` is already defined or `factor` is not positive.
    """
    if unit in _KNOWN_UNITS:
        raise ValueError(f"Unit '{unit}' is already defined.")
    if not factor > 0:
        raise ValueError(f"Unit '{unit}' requires factor > 0, got {factor}.")
    _KNOWN_UNITS[unit] = _UnitDef(kind, factor)


def convert(value, from_units: str, to_units: str):
    """
    Convert ``value`` currently in ``from_units`` to requested
    ``to_units``.  This is used for doing conversions without using
    ``Dim`` objects.

    Examples
    --------
    >>> convert(2.5, from_units='MPa', to_units='kPa')
    2500.0

    Parameters
    ----------
    value : scalar or array-like
        Value (not ``Dim`` object) for conversion.
    from_units : str
        Units of ``value``.
    to_units : str
        Target units.

    Returns
    -------
    result : scalar or array-like
        Converted value using new units.

    Raises
    ------
    ValueError
        If either unit is unknown or the units are of different kinds.
    """
    if to_units == from_units:
        return value  # Shortcut for identical units.

    from_def, to_def = _unit_def(from_units), _unit_def(to_units)
    if from_def.kind != to_def.kind:
        raise ValueError(f"Can't convert '{from_units}' ({from_def.kind}) "
                         f"to '{to_units}' ({to_def.kind}).")

    if isinstance(value, (list, tuple)):
        value = np.asarray(value, dtype=float)
    return value * (from_def.factor / to_def.factor)


# noinspection PyIncorrectDocstring
def dim(value: DimScalar | str = 1, units: str = None) -> Dim:
    """
    This factory function is the standard means for constructing a
    dimensioned quantity.  The following argument combinations are
    possible:

        - dim(value, units): Normal construction.
        - dim(): Assumes value = 1 and dimensionless.
        - dim(units): If a string is passed as the first argument, this
          is transferred to the ``units`` argument and value = 1 is
          assumed.
        - dim(value): Assumes dimensionless.
        - dim(Dim): Returns ``Dim`` object argument directly (no effect).
        - dim(Dim, units): Returns a ``Dim`` object after converting the
          `value` ``Dim`` object to the given `units`.

    Parameters
    ----------
    value : Number
        Non-dimensional value.
    units : str (Optional)
        String giving the units associated with this value.  These must
        already be defined (see ``add_unit``).

    Raises
    ------
    ValueError
        If `units` is not a known unit.

    Examples
    --------
    >>> dim(3, 'MPa').convert('kPa')
    dim(3000.0, 'kPa')
    """
    if units is None:
        # Called with no arguments or one argument.
        if isinstance(value, Dim):
            return value

        elif isinstance(value, str):
            value, units = 1, value
            _unit_def(units)
            return Dim(value, units)

        else:
            return Dim(value, '')

    else:
        # Called with two arguments.
        if isinstance(value, str):
            # Warn if both value and units were strings.  This is
            # normally unintentional.
            warnings.warn("Warning: dim() received string where a "
                          "numeric value was expected.")

        if isinstance(value, Dim):
            return value.convert(units)

        _unit_def(units)
        return Dim(value, units)


def is_unit(units: str) -> bool:
    """Returns ``True`` if `units` is a known unit string."""
    return units in _KNOWN_UNITS


# ----------------------------------------------------------------------

def _common_cmp(lhs: Dim, rhs, op: Callable[..., bool]):
    """Compare `lhs` and `rhs` after converting `rhs` to the units of
    `lhs`."""
    if not isinstance(rhs, (Dim, Number)):
        return NotImplemented
    rhs = _promote(rhs)
    return op(lhs.value, rhs.to_real(lhs.units))


def _promote(x) -> Dim:
    """Promote a plain value to a dimensionless ``Dim``."""
    return x if isinstance(x, Dim) else Dim(x, '')


def _unit_def(units: str) -> _UnitDef:
    try:
        return _KNOWN_UNITS[units]
    except KeyError:
        raise ValueError(f"Unknown unit '{units}'.") from None
