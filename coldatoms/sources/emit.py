"""Rules deciding how many atoms a source emits each frame."""

from __future__ import annotations

import math
import random
from dataclasses import dataclass
from typing import Optional, Union


@dataclass
class EmitNumberPerFrame:
    """Emit the same number of atoms every frame."""

    number: int

    def number_to_emit(self, timestep: float, rng: Optional[random.Random] = None) -> int:
        """Number of atoms to emit this frame."""
        return self.number


@dataclass
class EmitFixedRate:
    """Emit atoms at a fixed average rate, in atoms per second.

    When rate times timestep is not whole, the count fluctuates between
    neighbouring integers so that the average rate is correct.
    """

    rate: float

    def number_to_emit(self, timestep: float, rng: Optional[random.Random] = None) -> int:
        """Number of atoms to emit in a frame of ``timestep`` seconds."""
        rng = rng or random
        average = self.rate * timestep
        guaranteed = math.floor(average)
        if rng.random() < average - guaranteed:
            return int(guaranteed) + 1
        return int(guaranteed)


Rule = Union[EmitNumberPerFrame, EmitFixedRate]


class Emission:
    """The number of atoms a source emits in the current frame.

    ``rule`` is an emission rule, or a plain integer giving the number to
    emit without any rule. With ``once`` set, the number is reset to zero
    after each frame's emission.
    """

    def __init__(self, rule: Union[Rule, int, None] = None, once: bool = False) -> None:
        if isinstance(rule, int) and not isinstance(rule, bool):
            self.rule: Optional[Rule] = None
            self.number = rule
        else:
            self.rule = rule
            self.number = 0
        self.once = once

    def update(self, timestep: float, rng: Optional[random.Random] = None) -> int:
        """Return the number of atoms to emit this frame."""
        if self.rule is not None:
            self.number = self.rule.number_to_emit(timestep, rng)
        emitted = self.number
        if self.once:
            self.number = 0
        return emitted