"""Precalculated mass and speed distributions for thermal atom sources."""

from __future__ import annotations

import math
import random
from dataclasses import dataclass
from typing import List, Optional, Tuple

from coldatoms.constants import AMU, BOLTZCONST
from coldatoms.sources.distribution import WeightedProbabilityDistribution
from coldatoms.sources.mass import MassDistribution


def probability_v(temperature: float, mass: float, v: float, power: float) -> float:
    """Relative probability that a particle has speed ``v``.

    ``p(v)`` is proportional to ``u**power * exp(-u**2)`` with
    ``u = v / sqrt(2 k T / m)``. Temperature in K, mass in kg, speed in m/s.
    """
    norm_v = v / math.sqrt(2.0 * BOLTZCONST * temperature / mass)
    return 2.0 * norm_v**power * math.exp(-(norm_v**2))


def create_v_distribution(
    temperature: float, mass: float, power: float
) -> WeightedProbabilityDistribution:
    """Discretised speed distribution for a gas at ``temperature`` K of particles of ``mass`` kg."""
    max_velocity = 7.0 * math.sqrt(2.0 * BOLTZCONST * temperature / mass)
    n = 2000
    velocities = [(i + 0.5) / (n + 1.0) * max_velocity for i in range(n)]
    weights = [probability_v(temperature, mass, v, power) for v in velocities]
    return WeightedProbabilityDistribution(velocities, weights)


@dataclass
class _Species:
    mass: float
    v_distribution: WeightedProbabilityDistribution


class PrecalculatedSpeciesInformation:
    """Precalculated distributions for drawing the mass and speed of new atoms."""

    def __init__(
        self, temperature: float, mass_distribution: MassDistribution, power: float
    ) -> None:
        self.species: List[_Species] = [
            _Species(
                mass=entry.mass,
                v_distribution=create_v_distribution(
                    temperature, entry.mass * AMU, power
                ),
            )
            for entry in mass_distribution.distribution
        ]
        self._choice = WeightedProbabilityDistribution(
            range(len(self.species)),
            [entry.ratio for entry in mass_distribution.distribution],
        )

    def generate_random_mass_v(
        self, rng: Optional[random.Random] = None
    ) -> Tuple[float, float]:
        """Draw ``(mass, speed)``: mass in atomic mass units, speed in m/s."""
        rng = rng or random
        species = self.species[self._choice.sample(rng)]
        return species.mass, species.v_distribution.sample(rng)