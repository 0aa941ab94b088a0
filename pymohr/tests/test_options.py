import warnings

import pytest

from pymohr import (get_options, option_context, set_options, StateOptions,
                    StressState)
from pymohr.relations import direction_cosines


# ======================================================================

def test_defaults():
    opts = get_options()
    assert isinstance(opts, StateOptions)
    assert opts.trig_zero_tol == 1e-6
    assert opts.angle_tol == 1e-6
    assert opts.angle_eq_tol == 1e-3
    assert opts.warn_nonfinite is False
    assert opts.unicode_str is True

    with pytest.raises(AttributeError):
        opts.angle_tol = 1.0  # Frozen.


def test_set_options():
    try:
        set_options(unicode_str=False)
        assert not get_options().unicode_str
        assert str(StressState(10, 5, 0)) == ("sigma_x = 10.0 MPa\n"
                                              "sigma_y = 5.0 MPa\n"
                                              "tau_xy = 0.0 MPa\n"
                                              "theta_x = 0.00 rad")
    finally:
        set_options(unicode_str=True)

    # Invalid values are rejected and leave the options unchanged.
    with pytest.raises(ValueError):
        set_options(angle_tol=0.0)
    with pytest.raises(ValueError):
        set_options(trig_zero_tol=-1e-6)
    assert get_options().angle_tol == 1e-6

    with pytest.raises(TypeError):
        set_options(not_an_option=True)


def test_option_context():
    with option_context(angle_eq_tol=1e-6) as opts:
        assert opts.angle_eq_tol == 1e-6
        assert get_options().angle_eq_tol == 1e-6
    assert get_options().angle_eq_tol == 1e-3

    # Restored if an exception occurs.
    with pytest.raises(RuntimeError):
        with option_context(warn_nonfinite=True):
            raise RuntimeError
    assert get_options().warn_nonfinite is False


def test_angle_eq_tol():
    σ_a, σ_b = StressState(10, 5, 0), StressState(10, 5, 0, 1e-4)
    assert σ_a == σ_b
    with option_context(angle_eq_tol=1e-6):
        assert σ_a != σ_b


def test_trig_zero_tol():
    assert direction_cosines(1e-7)[1] == 0.0
    with option_context(trig_zero_tol=1e-9):
        assert direction_cosines(1e-7)[1] == pytest.approx(1e-7)


def test_warn_nonfinite():
    with warnings.catch_warnings():
        warnings.simplefilter('error')
        StressState(float('nan'), 0, 0)  # Silent by default.

    with option_context(warn_nonfinite=True):
        with pytest.warns(RuntimeWarning, match='x = nan'):
            StressState(float('nan'), 0, 0)
