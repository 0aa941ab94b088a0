from ._dim import add_unit

# == Unit Definitions ==================================================

# -- Pressure / Stress -------------------------------------------------

# Base unit is Pa.
add_unit('Pa', 'pressure', 1.0)
add_unit('kPa', 'pressure', 1e3)
add_unit('MPa', 'pressure', 1e6)
add_unit('GPa', 'pressure', 1e9)
add_unit('N/m^2', 'pressure', 1.0)
add_unit('N/mm^2', 'pressure', 1e6)  # Same as MPa.
add_unit('kN/m^2', 'pressure', 1e3)
add_unit('kN/cm^2', 'pressure', 1e7)
add_unit('bar', 'pressure', 1e5)

# Imperial units use the international pound-force (4.4482216152605 N)
# and inch (0.0254 m).
add_unit('psi', 'pressure', 4.4482216152605 / 0.0254 ** 2)
add_unit('ksi', 'pressure', 1e3 * 4.4482216152605 / 0.0254 ** 2)
add_unit('psf', 'pressure', 4.4482216152605 / 0.3048 ** 2)
