"""Atoms, their kinematic state, and the cloud that holds them."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Iterable, Iterator, List, Optional

import numpy as np


def _vector(value, name: str) -> np.ndarray:
    array = np.array(value, dtype=float)
    if array.shape != (3,):
        raise ValueError(f"{name} must be a 3-vector, got shape {array.shape}")
    return array


def _zeros() -> np.ndarray:
    return np.zeros(3)


def _format_float(value: float) -> str:
    value = float(value)
    if math.isnan(value):
        return "NaN"
    text = repr(value)
    if "e" in text:
        mantissa, exponent = text.split("e")
        return f"{mantissa}e{int(exponent)}"
    return text


def format_vector(vector) -> str:
    """Format a 3-vector as ``(x,y,z)`` with shortest round-trip floats."""
    x, y, z = (_format_float(v) for v in _vector(vector, "vector"))
    return f"({x},{y},{z})"


@dataclass
class Atom:
    """A simulated atom.

    Position in m, velocity in m/s, force in N and mass in atomic mass units.
    """

    position: np.ndarray = field(default_factory=_zeros)
    velocity: np.ndarray = field(default_factory=_zeros)
    mass: float = 0.0
    force: np.ndarray = field(default_factory=_zeros)
    initial_velocity: Optional[np.ndarray] = None
    old_force: Optional[np.ndarray] = None
    newly_created: bool = True
    to_be_destroyed: bool = False

    def __post_init__(self) -> None:
        self.position = _vector(self.position, "position")
        self.velocity = _vector(self.velocity, "velocity")
        self.force = _vector(self.force, "force")
        self.mass = float(self.mass)
        if self.initial_velocity is not None:
            self.initial_velocity = _vector(self.initial_velocity, "initial_velocity")
        if self.old_force is not None:
            self.old_force = _vector(self.old_force, "old_force")

    def clear_force(self) -> None:
        """Reset the force acting on the atom to zero."""
        self.force = np.zeros(3)


class AtomCloud:
    """An ordered collection of atoms in a simulation."""

    def __init__(self, atoms: Iterable[Atom] = ()) -> None:
        self._atoms: List[Atom] = list(atoms)

    def add(self, atom: Atom) -> Atom:
        """Add an atom to the cloud and return it."""
        self._atoms.append(atom)
        return atom

    def __iter__(self) -> Iterator[Atom]:
        return iter(self._atoms)

    def __len__(self) -> int:
        return len(self._atoms)

    def clear_forces(self) -> None:
        """Set the force on every atom to zero, as done at the start of a step."""
        for atom in self._atoms:
            atom.clear_force()

    def deflag_new_atoms(self) -> int:
        """Clear the newly-created flag on all atoms; return how many were flagged."""
        count = 0
        for atom in self._atoms:
            if atom.newly_created:
                atom.newly_created = False
                count += 1
        return count

    def destroy_marked(self) -> List[Atom]:
        """Remove atoms marked for destruction and return them."""
        removed = [atom for atom in self._atoms if atom.to_be_destroyed]
        self._atoms = [atom for atom in self._atoms if not atom.to_be_destroyed]
        return removed