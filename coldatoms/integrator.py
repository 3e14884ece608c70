"""Time integration of the classical equations of motion."""

from __future__ import annotations

from typing import Iterable

import numpy as np

from coldatoms import constants
from coldatoms.atom import Atom


def euler_update(atom: Atom, dt: float) -> None:
    """Advance one atom by ``dt`` seconds with the Euler method.

    The position is advanced with the velocity from before the step.
    """
    atom.position = atom.position + atom.velocity * dt
    atom.velocity = atom.velocity + atom.force * dt / (constants.AMU * atom.mass)


def add_old_force_to_new_atoms(atoms: Iterable[Atom]) -> int:
    """Give newly created atoms without a stored previous force a zero one.

    Returns the number of atoms that received one.
    """
    count = 0
    for atom in atoms:
        if atom.newly_created and atom.old_force is None:
            atom.old_force = np.zeros(3)
            count += 1
    return count


class Integrator:
    """Integrates atom trajectories with a fixed timestep in seconds.

    ``step`` counts the integration steps performed so far.
    """

    def __init__(self, timestep: float) -> None:
        self.timestep = float(timestep)
        self.step = 0

    def euler_step(self, atoms: Iterable[Atom]) -> None:
        """Advance every atom by one timestep using the Euler method."""
        self.step += 1
        for atom in atoms:
            euler_update(atom, self.timestep)

    def integrate_position(self, atoms: Iterable[Atom]) -> None:
        """Velocity-Verlet position update.

        Stores the current force of each atom as its previous force. Atoms
        that have no stored previous force are left untouched.
        """
        self.step += 1
        dt = self.timestep
        for atom in atoms:
            if atom.old_force is None:
                continue
            acceleration = atom.force / (constants.AMU * atom.mass)
            atom.position = atom.position + atom.velocity * dt + acceleration / 2.0 * dt * dt
            atom.old_force = atom.force.copy()

    def integrate_velocity(self, atoms: Iterable[Atom]) -> None:
        """Velocity-Verlet velocity update from the mean of this and the last force."""
        dt = self.timestep
        for atom in atoms:
            if atom.old_force is None:
                continue
            mean_force = (atom.force + atom.old_force) / 2.0
            atom.velocity = atom.velocity + mean_force / (constants.AMU * atom.mass) * dt