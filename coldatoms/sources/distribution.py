"""Discrete weighted distributions used to sample emitted atoms."""

from __future__ import annotations

import bisect
import itertools
import math
import random
from typing import Any, Iterable, Optional, Tuple


class WeightedProbabilityDistribution:
    """A discrete distribution that draws each value with a probability
    proportional to its weight.

    Weights must be finite and non-negative, with a positive sum.
    """

    def __init__(self, values: Iterable[Any], weights: Iterable[float]) -> None:
        self.values: Tuple[Any, ...] = tuple(values)
        weight_list = [float(w) for w in weights]
        if len(weight_list) != len(self.values):
            raise ValueError(
                f"got {len(self.values)} values but {len(weight_list)} weights"
            )
        if not weight_list:
            raise ValueError("a weighted distribution needs at least one weight")
        for weight in weight_list:
            if not math.isfinite(weight) or weight < 0.0:
                raise ValueError(f"invalid weight {weight}")
        self._cumulative = list(itertools.accumulate(weight_list))
        self._total = self._cumulative[-1]
        if self._total <= 0.0:
            raise ValueError("all weights are zero")

    def sample(self, rng: Optional[random.Random] = None) -> Any:
        """Draw one value from the distribution."""
        rng = rng or random
        target = rng.random() * self._total
        index = bisect.bisect_right(self._cumulative, target)
        # Guard against rounding placing the target at the very end.
        index = min(index, len(self.values) - 1)
        return self.values[index]