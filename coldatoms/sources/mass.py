"""Masses and isotope abundances of emitted atoms."""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Iterable, List, Optional


@dataclass
class MassRatio:
    """Abundance of one isotope: mass in atomic mass units and relative ratio."""

    mass: float
    ratio: float


class MassDistribution:
    """Relative abundance of each mass; atoms draw their mass from it."""

    def __init__(self, distribution: Iterable[MassRatio]) -> None:
        self.distribution: List[MassRatio] = [
            MassRatio(entry.mass, entry.ratio) for entry in distribution
        ]
        self.normalised = False
        self.normalise()

    def normalise(self) -> None:
        """Scale the ratios so that they add to one."""
        total = sum(entry.ratio for entry in self.distribution)
        if self.distribution and total == 0:
            raise ValueError("mass ratios sum to zero")
        for entry in self.distribution:
            entry.ratio /= total
        self.normalised = True

    def draw_random_mass(self, rng: Optional[random.Random] = None) -> float:
        """Draw a random mass, in atomic mass units, from the distribution."""
        if not self.normalised:
            raise RuntimeError("mass distribution is not normalised")
        rng = rng or random
        luck = rng.random()
        level = 0.0
        final_mass = 0.0
        for entry in self.distribution:
            level += entry.ratio
            if level > luck:
                return entry.mass
            final_mass = entry.mass
        return final_mass