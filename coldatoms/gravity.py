"""The force of gravity, acting along -z."""

from __future__ import annotations

from typing import Iterable

import numpy as np

from coldatoms import constants
from coldatoms.atom import Atom


def gravitational_force(mass: float) -> np.ndarray:
    """Gravitational force in N on a mass given in atomic mass units."""
    return np.array([0.0, 0.0, -float(mass) * constants.AMU * constants.GC])


def apply_gravity(atoms: Iterable[Atom]) -> None:
    """Add the gravitational force to every atom."""
    for atom in atoms:
        atom.force = atom.force + gravitational_force(atom.mass)