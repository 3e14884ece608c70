"""Atom sources with Gaussian velocity distributions."""

from __future__ import annotations

import math
import random
from typing import List, Optional

import numpy as np

from coldatoms.atom import Atom
from coldatoms.sources.distribution import WeightedProbabilityDistribution


def create_gaussian_velocity_distribution(
    mean: float, std: float
) -> WeightedProbabilityDistribution:
    """Discretised Gaussian over ``mean ± 5 std`` for sampling a velocity in m/s."""
    n = 1000
    velocities = []
    weights = []
    for i in range(-n, n):
        v = i / n * 5.0 * std
        with np.errstate(invalid="ignore", divide="ignore"):
            ratio = float(np.divide(v, std))
        weights.append(math.exp(-(ratio**2) / 2.0) if math.isfinite(ratio) else math.nan)
        velocities.append(v + mean)
    return WeightedProbabilityDistribution(velocities, weights)


class GaussianVelocitySource:
    """Emits atoms whose velocity components are independent Gaussians.

    ``mean`` and ``std`` are 3-vectors in m/s.
    """

    def __init__(self, mean, std) -> None:
        self.mean = np.array(mean, dtype=float)
        self.std = np.array(std, dtype=float)
        if self.mean.shape != (3,) or self.std.shape != (3,):
            raise ValueError("mean and std must be 3-vectors")
        self._distributions = [
            create_gaussian_velocity_distribution(m, s)
            for m, s in zip(self.mean, self.std)
        ]

    def random_velocity(self, rng: Optional[random.Random] = None) -> np.ndarray:
        """Draw a random velocity vector, in m/s."""
        rng = rng or random
        return np.array([dist.sample(rng) for dist in self._distributions])

    def create_atoms(
        self,
        position,
        mass: float,
        number: int,
        rng: Optional[random.Random] = None,
    ) -> List[Atom]:
        """Create ``number`` new atoms at ``position`` with ``mass`` in amu."""
        rng = rng or random
        atoms = []
        for _ in range(number):
            velocity = self.random_velocity(rng)
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