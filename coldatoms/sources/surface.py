"""Surface sources: atoms desorbed from a hot surface with a Lambert profile."""

from __future__ import annotations

import math
import random
from dataclasses import dataclass
from typing import Iterable, List, Optional, Tuple

import numpy as np

from coldatoms.atom import Atom
from coldatoms.sources.precalc import PrecalculatedSpeciesInformation


def lambert_emission_direction(normal, rng: Optional[random.Random] = None) -> np.ndarray:
    """Draw an emission direction for a surface with outward ``normal``.

    Atoms leave along ``-normal`` with a Lambert cosine angular profile.
    """
    rng = rng or random
    direction = -np.array(normal, dtype=float)
    direction = direction / np.linalg.norm(direction)
    random_dir = np.array([rng.uniform(-1.0, 1.0) for _ in range(3)])
    random_dir = random_dir / np.linalg.norm(random_dir)
    perp_a = np.cross(direction, random_dir)
    perp_b = np.cross(direction, perp_a)

    domain = rng.random() < 0.5
    var = rng.uniform(0.0, 1.0)
    phi = rng.uniform(0.0, 2.0 * math.pi)
    if domain:
        theta = math.acos(var) / 2.0
    else:
        theta = math.asin(var) / 2.0 + math.pi / 4.0
    return math.cos(theta) * direction + math.sin(theta) * (
        perp_a * math.cos(phi) + perp_b * math.sin(phi)
    )


@dataclass
class SurfaceSource:
    """A hot surface at ``temperature`` K that releases atoms."""

    temperature: float

    v_dist_power = 2.0
    """Power of the normalised speed in the emitted speed distribution."""

    def create_atoms(
        self,
        surface_points: Iterable[Tuple[object, object]],
        precalculated: PrecalculatedSpeciesInformation,
        rng: Optional[random.Random] = None,
        max_speed: Optional[float] = None,
    ) -> List[Atom]:
        """Attempt to emit one atom from each ``(position, normal)`` surface point.

        Atoms faster than ``max_speed`` (m/s) are skipped.
        """
        rng = rng or random
        limit = math.inf if max_speed is None else max_speed
        atoms = []
        for position, normal in surface_points:
            mass, speed = precalculated.generate_random_mass_v(rng)
            if speed > limit:
                continue
            velocity = speed * lambert_emission_direction(normal, rng)
            atoms.append(
                Atom(
                    position=np.array(position, dtype=float),
                    velocity=velocity,
                    mass=mass,
                    initial_velocity=velocity.copy(),
                    newly_created=True,
                )
            )
        return atoms