#!/usr/bin/env python3

# Examples of plane stress / strain states.
# Written by Eric J. Whitney, October 2026.

import numpy as np

from pymohr import StrainState, StressState, dim

d2r, r2d = np.deg2rad, np.rad2deg


# ----------------------------------------------------------------------------

def main():
    # Textbook Mohr's circle example.
    σ = StressState(80, 40, 30)
    print(f"Applied stress:\n{σ}\n")

    σ_pr = σ.to_principal()
    print(f"Principal stresses: σ1 = {σ_pr.sigma_1:.2f}, "
          f"σ2 = {σ_pr.sigma_2:.2f} at θ1 = {r2d(σ_pr.theta_1):.2f}° "
          f"({σ_pr.case.value})")

    σ_max_shear = σ.transform(σ_pr.theta_1 - d2r(45))
    print(f"Maximum shear stress τ = {σ_max_shear.tau_xy:.2f}\n")

    # Mixed units are converted to the units of the first value.
    σ_psi = StressState(dim(10, 'ksi'), dim(-5, 'ksi'), dim(2, 'ksi'))
    print(f"Imperial stress state:\n{σ_psi}")
    print(f"... in MPa:\n{σ_psi.convert('MPa')}\n")

    # Strain in aluminium plate from applied stress.
    E, ν = 70e3, 0.33  # MPa.
    stiffness = E / (1 - ν ** 2) * np.array([[1, ν, 0],
                                              [ν, 1, 0],
                                              [0, 0, 0.5 * (1 - ν)]])
    ε = StrainState.from_stresses(σ, stiffness)
    ε_pr = ε.to_principal()
    print(f"Strain state:\n{ε}")
    print(f"Principal strains: ε1 = {ε_pr.epsilon_1:.4e}, "
          f"ε2 = {ε_pr.epsilon_2:.4e} at θ1 = {r2d(ε_pr.theta_1):.2f}°")


# -----------------------------------------------------------------------------

if __name__ == "__main__":
    main()
