"""S-wave collisions between atoms by Direct Simulation Monte Carlo.

Space is divided into a cubic grid of collision boxes. From the density
and mean speed of the atoms in each box, simple kinetic theory gives the
number of collisions expected in one timestep. That many random pairs of
atoms in the box are then collided.

The model assumes the atoms in a box are roughly thermal, so that the mean
relative speed is sqrt(2) times the mean speed. It also assumes a single
species with a constant cross-section.
"""

from __future__ import annotations

import math
import random
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional, Tuple

import numpy as np

from coldatoms.atom import Atom
from coldatoms.constants import PI, SQRT2


class CollisionLimitError(RuntimeError):
    """Raised when a box would need more collisions in one frame than allowed."""


@dataclass(frozen=True)
class CollisionParameters:
    """Settings for the collision model.

    ``macroparticle`` is the number of real atoms one simulated atom
    stands for, ``box_number`` the number of boxes along each side of the
    grid, ``box_width`` the width of one box in m, ``sigma`` the collisional
    cross-section in m^2, and ``collision_limit`` the largest number of
    collisions allowed in one box in one frame.
    """

    macroparticle: float
    box_number: int
    box_width: float
    sigma: float
    collision_limit: float


@dataclass
class CollisionsTracker:
    """Per-box statistics of the last collision step."""

    num_collisions: List[int] = field(default_factory=list)
    num_particles: List[int] = field(default_factory=list)
    num_atoms: List[float] = field(default_factory=list)


@dataclass
class CollisionBox:
    """A region of space within which the atoms it holds can collide."""

    atoms: List[Atom] = field(default_factory=list)
    expected_collision_number: float = 0.0
    collision_number: int = 0
    density: float = 0.0
    atom_number: float = 0.0
    particle_number: int = 0

    def do_collisions(
        self,
        params: CollisionParameters,
        dt: float,
        rng: Optional[random.Random] = None,
    ) -> None:
        """Collide random pairs of atoms in the box for one timestep of ``dt`` s."""
        rng = rng or random.Random()
        self.particle_number = len(self.atoms)
        self.atom_number = self.particle_number * params.macroparticle

        if self.particle_number <= 1:
            return

        # Mean speed, not mean velocity.
        vbar = sum(float(np.linalg.norm(atom.velocity)) for atom in self.atoms) / len(
            self.atoms
        )

        # Each collision is counted once: N * n * sigma * vrel * dt / 2 with
        # vrel = sqrt(2) * vbar.
        self.density = self.atom_number / params.box_width**3
        self.expected_collision_number = (
            self.particle_number * self.density * params.sigma * vbar * dt / SQRT2
        )

        remaining = self.expected_collision_number
        if remaining > params.collision_limit:
            raise CollisionLimitError(
                "Number of collisions in a box in a single frame exceeds limit. "
                f"Number of collisions={remaining}, limit={params.collision_limit}, "
                f"particles={self.particle_number}."
            )

        count = len(self.atoms)
        while remaining > 0.0:
            collide = remaining > 1.0 or rng.random() < remaining
            if collide:
                first = rng.randrange(count)
                second = first
                while second == first:
                    second = rng.randrange(count)
                atom1 = self.atoms[first]
                atom2 = self.atoms[second]
                atom1.velocity, atom2.velocity = do_collision(
                    atom1.velocity, atom2.velocity, rng
                )
                self.collision_number += 1
            remaining -= 1.0


def do_collision(
    v1, v2, rng: Optional[random.Random] = None
) -> Tuple[np.ndarray, np.ndarray]:
    """Scatter two velocities isotropically in their centre-of-mass frame.

    Momentum and kinetic energy are conserved. Returns the new velocities.
    """
    rng = rng or random.Random()
    v1 = np.asarray(v1, dtype=float)
    v2 = np.asarray(v2, dtype=float)

    vcm = 0.5 * (v1 + v2)
    energy = 0.5 * (
        float(np.linalg.norm(v1 - vcm)) ** 2 + float(np.linalg.norm(v2 - vcm)) ** 2
    )

    cos_theta = rng.uniform(-1.0, 1.0)
    sin_theta = math.sqrt(1.0 - cos_theta**2)
    phi = rng.uniform(0.0, 2.0 * PI)

    speed = math.sqrt(energy)
    v_prime = np.array(
        [
            speed * sin_theta * math.cos(phi),
            speed * sin_theta * math.sin(phi),
            speed * cos_theta,
        ]
    )
    return vcm + v_prime, vcm - v_prime


def pos_to_id(pos, n: int, width: float) -> Optional[int]:
    """Index of the grid box containing ``pos``, or None outside the grid.

    The grid has ``n`` boxes of ``width`` m along each side and is centred
    on the origin: for even ``n`` a box vertex lies on the origin, for odd
    ``n`` a box centre does. Each box includes its lower bound and excludes
    its upper one.
    """
    x, y, z = (float(v) for v in pos)
    bound = n / 2.0 * width
    if abs(x) > bound or abs(y) > bound or abs(z) > bound:
        return None

    half = 0.5 * n
    xp = math.floor(x / width + half)
    yp = math.floor(y / width + half)
    zp = math.floor(z / width + half)
    return xp + n * yp + n**2 * zp


def apply_collisions(
    atoms: Iterable[Atom],
    params: CollisionParameters,
    dt: float,
    rng: Optional[random.Random] = None,
) -> CollisionsTracker:
    """Collide the atoms for one timestep and return per-box statistics.

    Atoms outside the grid are taken to be too sparse to collide and are
    left alone.
    """
    rng = rng or random.Random()
    boxes: Dict[int, CollisionBox] = {}
    for atom in atoms:
        box_id = pos_to_id(atom.position, params.box_number, params.box_width)
        if box_id is None:
            continue
        boxes.setdefault(box_id, CollisionBox()).atoms.append(atom)

    for collision_box in boxes.values():
        collision_box.do_collisions(params, dt, rng)

    return CollisionsTracker(
        num_collisions=[b.collision_number for b in boxes.values()],
        num_particles=[b.particle_number for b in boxes.values()],
        num_atoms=[b.atom_number for b in boxes.values()],
    )