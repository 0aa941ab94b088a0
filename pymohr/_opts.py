from __future__ import annotations

from dataclasses import dataclass, replace

# Written by Eric J. Whitney, October 2026.

# ======================================================================


@dataclass(frozen=True, kw_only=True)
class StateOptions:
    """
    Dataclass that holds option flags and tolerances used when handling
    stress / strain states.  See `get_options` and `set_options` for
    full details.
    """
    trig_zero_tol: float
    angle_tol: float
    angle_eq_tol: float
    warn_nonfinite: bool
    unicode_str: bool

    def __post_init__(self):
        """Check certain values"""
        for name in ('trig_zero_tol', 'angle_tol', 'angle_eq_tol'):
            if not getattr(self, name) > 0:
                raise ValueError(f"Require '{name}' > 0.")


# Create single instance and set defaults.
_options = StateOptions(
    trig_zero_tol=1e-6,
    angle_tol=1e-6,
    angle_eq_tol=1e-3,
    warn_nonfinite=False,
    unicode_str=True
)


# ----------------------------------------------------------------------

def get_options() -> StateOptions:
    """
    Returns
    -------
    options : StateOptions
        Returns a copy of the current options.  For a full description
        of each option, see `set_options`.
    """
    return replace(_options)


# noinspection PyIncorrectDocstring
def set_options(**kwargs):
    """
    Set the current options.

    Parameters
    ----------
    trig_zero_tol : float, default = 1e-6
        Sine / cosine values with a magnitude below this value are
        returned as exactly zero by `direction_cosines`.  This removes
        floating point noise at axis-aligned angles (0, π/2, π, 3π/2).

    angle_tol : float, default = 1e-6
        Tolerance used when deciding if an angle is zero or lies on an
        axis, e.g. for `State.is_horizontal` or to skip a rotation.

    angle_eq_tol : float, default = 1e-3
        Tolerance applied to orientation angles when two states are
        compared using `approaches` or ``==``.

    warn_nonfinite : bool, default = False
        If `True`, a `NonFiniteWarning` is issued whenever a NaN or
        infinite component or angle is replaced by zero.

    unicode_str : bool, default = True
        Use Greek characters (σ, τ, ε, γ, θ) when the `__str__` method is
        called on states.

    See Also
    --------
    get_options, option_context

    Examples
    --------
    >>> from pymohr import StressState, set_options
    >>> set_options(unicode_str=False)
    >>> print(StressState(10, 5, 0))
    sigma_x = 10.0 MPa
    sigma_y = 5.0 MPa
    tau_xy = 0.0 MPa
    theta_x = 0.00 rad
    >>> set_options(unicode_str=True)
    """
    global _options
    _options = replace(_options, **kwargs)


# ----------------------------------------------------------------------

class option_context:
    """
    Context manager that applies options given as keyword arguments
    (see `set_options`) and restores the previous options on exit.

    Examples
    --------
    >>> from pymohr import option_context, get_options
    >>> with option_context(angle_eq_tol=1e-6):
    ...     get_options().angle_eq_tol
    1e-06
    >>> get_options().angle_eq_tol
    0.001
    """
    def __init__(self, **kwargs):
        self.kwargs = kwargs

    def __enter__(self) -> StateOptions:
        self.restore_point = get_options()
        set_options(**self.kwargs)
        return get_options()

    def __exit__(self, exc_type, exc_value, exc_traceback):
        global _options
        _options = self.restore_point
