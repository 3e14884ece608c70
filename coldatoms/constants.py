"""Mathematical and physical constants in SI units."""

import math

HBAR = 1.0545718e-34
"""Reduced Planck constant, J s."""

GC = 9.80665
"""Gravitational acceleration, m/s^2."""

EXP = math.e
"""Euler's number."""

PI = math.pi
"""The circle constant pi."""

BOHRMAG = 9.274e-24
"""Bohr magneton, J/T."""

BOLTZCONST = 1.38e-23
"""Boltzmann constant, J/K."""

AMU = 1.6605e-27
"""One atomic mass unit, kg."""

C = 299792458.0
"""Speed of light, m/s."""

SQRT2 = math.sqrt(2.0)
"""Square root of two."""