import math

import numpy as np
import pytest
from pytest import approx

from pymohr import (PrincipalCase, PrincipalStrainState, PrincipalStressState,
                    StrainState, StressState)

d2r = np.deg2rad


# ======================================================================

@pytest.mark.parametrize('s1, s2, case', [
    (0, 0, PrincipalCase.ZERO),
    (1e-10, -1e-10, PrincipalCase.ZERO),
    (0, -10, PrincipalCase.UNIAXIAL_COMPRESSION),
    (10, 0, PrincipalCase.UNIAXIAL_TENSION),
    (10, 5, PrincipalCase.PURE_TENSION),
    (-5, -10, PrincipalCase.PURE_COMPRESSION),
    (10, -5, PrincipalCase.TENSION_COMPRESSION)
])
def test_case(s1, s2, case):
    assert PrincipalStressState(s1, s2).case == case
    assert PrincipalStrainState(s1 * 1e-3, s2 * 1e-3).case == case


def test_classification():
    σ_pr = PrincipalStressState(10, 5)
    assert σ_pr.theta_1 == approx(0.25 * math.pi)
    assert σ_pr.theta_2 == approx(0.75 * math.pi)
    assert σ_pr.is_at_45_degrees
    assert not σ_pr.is_horizontal
    assert not σ_pr.is_vertical
    assert not σ_pr.is_zero

    assert PrincipalStressState(10, 5, math.pi).is_horizontal
    assert PrincipalStressState(10, 5, -0.5 * math.pi).is_vertical
    assert PrincipalStressState(10, 5, -0.25 * math.pi).is_at_45_degrees
    assert not PrincipalStressState(10, 5, 0.3).is_at_45_degrees

    σ_pr = PrincipalStressState(0, -10)
    assert σ_pr.is_1_zero
    assert not σ_pr.is_2_zero
    assert PrincipalStressState.zero().is_zero


def test_theta_2_convention():
    # Minor direction is always θ1 + π/2 for both stress and strain.
    for θ1 in d2r([0, 30, 45, 100]):
        assert PrincipalStressState(10, 5, θ1).theta_2 == approx(
            θ1 + 0.5 * math.pi)
        assert PrincipalStrainState(1e-3, 5e-4, θ1).theta_2 == approx(
            θ1 + 0.5 * math.pi)

    ε_pr = StrainState(0.001, 0.0, 0.0).to_principal()
    assert ε_pr.theta_1 == 0.0
    assert ε_pr.theta_2 == approx(0.5 * math.pi)


# ----------------------------------------------------------------------

def test_as_state():
    σ_pr = PrincipalStressState(10, 5, 0.3)
    σ = σ_pr.as_state()
    assert isinstance(σ, StressState)
    assert σ.as_array() == approx([10, 5, 0])
    assert σ.theta_x == 0.3
    assert σ == σ_pr

    # Horizontal form is equivalent but has a different orientation.
    σ_h = σ_pr.to_horizontal()
    assert σ_h.is_horizontal
    assert σ_h.to_principal() == σ_pr
    assert σ_pr.to_principal() is σ_pr
    assert PrincipalStressState.from_state(σ_h) == σ_pr

    with pytest.raises(TypeError):
        PrincipalStressState.from_state(σ_pr)


def test_transform():
    σ_pr = PrincipalStressState(10, -10, 0.25 * math.pi)
    σ = σ_pr.transform(-0.25 * math.pi)
    assert σ.theta_x == 0.0
    assert σ.as_array() == approx([0, 0, 10])
    assert σ == StressState(0, 0, 10)

    t = σ_pr.transformation_matrix
    assert t @ σ_pr.to_horizontal().as_array() == approx([10, -10, 0])


# ----------------------------------------------------------------------

def test_arithmetic():
    σ_pr = PrincipalStressState(10, -5, 0.2)

    σ = σ_pr * 2
    assert isinstance(σ, PrincipalStressState)
    assert σ.as_array() == approx([20, -10, 0])
    assert σ.theta_1 == 0.2
    assert (2 * σ_pr) == σ
    assert (σ_pr / 2).as_array() == approx([5, -2.5, 0])

    # Negative factors keep s1 >= s2 by rotating 90°.
    σ = σ_pr * -2
    assert σ.as_array() == approx([10, -20, 0])
    assert σ.theta_1 == approx(0.2 + 0.5 * math.pi)
    assert σ == σ_pr.to_horizontal() * -2

    σ = -σ_pr
    assert σ.as_array() == approx([5, -10, 0])
    assert σ.theta_1 == approx(0.2 + 0.5 * math.pi)

    σ = σ_pr / -5
    assert σ.as_array() == approx([1, -2, 0])

    # Addition / subtraction give horizontal states.
    σ = PrincipalStressState(10, 5, 0) + StressState(1, 1, 0)
    assert isinstance(σ, StressState)
    assert σ == StressState(11, 6, 0)
    σ = PrincipalStressState(10, 5, 0) - PrincipalStressState(1, 1, 0)
    assert σ == StressState(9, 4, 0)

    with pytest.raises(TypeError):
        _ = σ_pr + PrincipalStrainState(1e-3, 0)
    with pytest.raises(TypeError):
        _ = σ_pr * σ_pr


def test_equality_and_units():
    σ_pr = PrincipalStressState(10, 5, 0)
    assert σ_pr == StressState(10, 5, 0)
    assert σ_pr == PrincipalStressState(10000, 5000, 0, units='kPa')
    assert σ_pr != PrincipalStressState(10, 5, 0.1)
    assert σ_pr != 'abc'

    σ_kpa = σ_pr.convert('kPa')
    assert σ_kpa.units == 'kPa'
    assert σ_kpa.sigma_1.value == approx(10000)
    assert σ_pr.convert('MPa') is σ_pr
    assert σ_pr.as_array('kPa') == approx([10000, 5000, 0])

    with pytest.raises(AttributeError):
        σ_pr.theta_1 = 0.5

    assert repr(σ_pr) == ("PrincipalStressState(10.0, 5.0, theta_1=0.0, "
                          "units='MPa')")


def test_sum():
    σ_prs = [PrincipalStressState(10, 5, 0), PrincipalStressState(1, 1, 0)]
    σ = sum(σ_prs)
    assert isinstance(σ, StressState)
    assert σ == StressState(11, 6, 0)
    assert sum([PrincipalStressState(10, -10)]) == StressState(0, 0, 10)
