"""
Units (:mod:`pymohr.units`)
===========================

.. currentmodule:: pymohr.units

Minimal units-aware values used to give stresses their pressure units.
Only pressure units (and dimensionless values) are defined, as this is
all that stress / strain states require.

Examples
--------

Creation of dimensioned values is done using the factory function
``dim()`` and gives a ``Dim`` object as a result:

>>> σ = dim(250, 'MPa')
>>> σ.convert('kPa')
dim(250000.0, 'kPa')

Values of the same kind can be added or compared, with the result
taking the units of the LHS:

>>> dim(1, 'MPa') + dim(500, 'kPa')
dim(1.5, 'MPa')
>>> dim(1, 'GPa') > dim(999, 'MPa')
True

Multiplying or dividing by a plain number keeps the units, whereas
dividing two values of the same kind gives a plain number:

>>> dim(10, 'MPa') / 4
dim(2.5, 'MPa')
>>> dim(10, 'MPa') / dim(5, 'MPa')
2.0

Quantities of different kinds can't be combined:

>>> dim(1, 'MPa') + 3  # doctest: +IGNORE_EXCEPTION_DETAIL
Traceback (most recent call last):
...
ValueError: Can't convert '' () to 'MPa' (pressure).

Additional units can be registered using ``add_unit()``.
"""

from ._dim import add_unit, convert, dim, is_unit, Dim, DimScalar
from . import _defs  # Sets up standard units.
