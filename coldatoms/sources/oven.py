"""Ovens: sources that release hot atoms through an aperture into a beam."""

from __future__ import annotations

import math
import random
from dataclasses import dataclass
from typing import List, Optional, Tuple, Union

import numpy as np

from coldatoms.atom import Atom
from coldatoms.constants import PI
from coldatoms.sources.distribution import WeightedProbabilityDistribution
from coldatoms.sources.precalc import PrecalculatedSpeciesInformation

_REFERENCE_AXIS = np.array([2.0, 1.0, 0.5])


@dataclass(frozen=True)
class CubicAperture:
    """A box-shaped aperture with full side lengths ``size`` in m."""

    size: Tuple[float, float, float]


@dataclass(frozen=True)
class CircularAperture:
    """A disc-shaped aperture of ``radius`` and ``thickness`` in m."""

    radius: float
    thickness: float


Aperture = Union[CubicAperture, CircularAperture]


def _normalize(vector: np.ndarray) -> np.ndarray:
    return vector / np.linalg.norm(vector)


def _unit_direction(direction) -> np.ndarray:
    array = np.array(direction, dtype=float)
    if array.shape != (3,):
        raise ValueError(f"direction must be a 3-vector, got shape {array.shape}")
    norm = float(np.linalg.norm(array))
    if norm == 0.0 or not math.isfinite(norm):
        raise ValueError("direction must be a finite, non-zero vector")
    return array / norm


def _transverse_basis(direction: np.ndarray) -> Tuple[np.ndarray, np.ndarray]:
    dir_1 = _normalize(np.cross(direction, _REFERENCE_AXIS))
    dir_2 = _normalize(np.cross(direction, dir_1))
    return dir_1, dir_2


def _sqrt_or_nan(value: float) -> float:
    return math.sqrt(value) if value >= 0.0 else math.nan


def _acos_or_nan(value: float) -> float:
    return math.acos(value) if -1.0 <= value <= 1.0 else math.nan


def jtheta(theta: float, channel_radius: float, channel_length: float) -> float:
    """Angular emission profile j(theta) of collision-free flow through a channel.

    ``theta`` is the angle from the oven axis in radians; the channel radius
    and length are in m. The profile is per unit solid angle and equals one
    on the axis.
    """
    beta = 2.0 * channel_radius / channel_length
    q = math.tan(theta) / beta
    beta2 = beta**2
    root = math.sqrt(1.0 + beta2)
    alpha = 0.5 - 1.0 / (3.0 * beta2) * (
        1.0 - 2.0 * beta**3 + (2.0 * beta2 - 1.0) * root
    ) / (root - beta2 * math.asinh(1.0 / beta))

    cos_theta = math.cos(theta)
    if q <= 1.0:
        remainder = 1.0 - q**2
        sqrt_remainder = _sqrt_or_nan(remainder)
        r_q = _acos_or_nan(q) - q * sqrt_remainder
        inverse_q = 2.0 / (3.0 * q) if q != 0.0 else math.inf
        return alpha * cos_theta + (2.0 / PI) * cos_theta * (
            (1.0 - alpha) * r_q
            + inverse_q * (1.0 - 2.0 * alpha) * (1.0 - remainder * sqrt_remainder)
        )
    return alpha * cos_theta + 4.0 / (3.0 * PI * q) * (1.0 - 2.0 * alpha) * cos_theta


def create_jtheta_distribution(
    channel_radius: float, channel_length: float
) -> WeightedProbabilityDistribution:
    """Discretised distribution of polar angle, ``p(theta) ~ j(theta) sin(theta)``."""
    n = 1000
    thetas = [(i + 0.5) / (n + 1.0) * PI / 2.0 for i in range(n)]
    weights = [
        jtheta(theta, channel_radius, channel_length) * math.sin(theta)
        for theta in thetas
    ]
    return WeightedProbabilityDistribution(thetas, weights)


def velocity_generate(
    speed: float,
    direction,
    theta_distribution: WeightedProbabilityDistribution,
    rng: Optional[random.Random] = None,
) -> Tuple[np.ndarray, float]:
    """Draw a velocity of magnitude ``speed`` about ``direction``.

    Returns the velocity and its polar angle from ``direction``.
    """
    rng = rng or random
    axis = _unit_direction(direction)
    dir_1, dir_2 = _transverse_basis(axis)
    theta = theta_distribution.sample(rng)
    phi = rng.uniform(0.0, 2.0 * PI)
    divergence = math.sin(theta) * (dir_1 * math.cos(phi) + dir_2 * math.sin(phi))
    return (axis * math.cos(theta) + divergence) * speed, theta


@dataclass
class Oven:
    """A source of hot atoms.

    Atoms spawn within the ``aperture`` and leave along ``direction`` with
    a polar angle drawn from ``theta_distribution``. Atoms drawn at angles
    above ``max_theta`` are discarded. ``temperature`` is in K.
    """

    temperature: float
    aperture: Aperture
    direction: np.ndarray
    theta_distribution: WeightedProbabilityDistribution
    max_theta: float

    v_dist_power = 3.0
    """Power of the normalised speed in the emitted speed distribution."""

    def random_spawn_position(self, rng: Optional[random.Random] = None) -> np.ndarray:
        """Random spawn offset within the aperture, relative to the oven, in m."""
        rng = rng or random
        aperture = self.aperture
        if isinstance(aperture, CubicAperture):
            return np.array(
                [rng.uniform(-0.5 * side, 0.5 * side) for side in aperture.size]
            )
        axis = _unit_direction(self.direction)
        dir_1, dir_2 = _transverse_basis(axis)
        theta = rng.uniform(0.0, 2.0 * PI)
        r = rng.uniform(0.0, aperture.radius)
        h = rng.uniform(-0.5 * aperture.thickness, 0.5 * aperture.thickness)
        return axis * h + r * dir_1 * math.sin(theta) + r * dir_2 * math.cos(theta)

    def create_atoms(
        self,
        position,
        precalculated: PrecalculatedSpeciesInformation,
        number: int,
        rng: Optional[random.Random] = None,
        max_speed: Optional[float] = None,
    ) -> List[Atom]:
        """Attempt to emit ``number`` atoms from an oven at ``position``.

        Atoms faster than ``max_speed`` (m/s) or outside ``max_theta`` are
        skipped, so fewer atoms than ``number`` may be returned.
        """
        rng = rng or random
        limit = math.inf if max_speed is None else max_speed
        origin = np.array(position, dtype=float)
        atoms = []
        for _ in range(number):
            mass, speed = precalculated.generate_random_mass_v(rng)
            if speed > limit:
                continue
            velocity, theta = velocity_generate(
                speed, self.direction, self.theta_distribution, rng
            )
            if theta > self.max_theta:
                continue
            atoms.append(
                Atom(
                    position=origin + self.random_spawn_position(rng),
                    velocity=velocity,
                    mass=mass,
                    initial_velocity=velocity.copy(),
                    newly_created=True,
                )
            )
        return atoms


class OvenBuilder:
    """Configures and builds an :class:`Oven`.

    ``temperature`` is in K; ``direction`` is the oven axis and is normalised.
    """

    def __init__(self, temperature: float, direction) -> None:
        self.temperature = float(temperature)
        self.direction = _unit_direction(direction)
        self.aperture: Aperture = CircularAperture(radius=3.0e-3, thickness=1.0e-3)
        self.microchannel_length = 4e-3
        self.microchannel_radius = 0.2e-3
        self.max_theta = PI / 2.0

    def with_microchannels(
        self, microchannel_length: float, microchannel_radius: float
    ) -> "OvenBuilder":
        """Set the length and radius, in m, of the nozzle's microchannels."""
        self.microchannel_length = microchannel_length
        self.microchannel_radius = microchannel_radius
        return self

    def with_lip(self, lip_length: float, lip_radius: float) -> "OvenBuilder":
        """Limit the emission angle with a lip of given length and radius, in m."""
        self.max_theta = math.atan(lip_radius / lip_length)
        return self

    def with_aperture(self, aperture: Aperture) -> "OvenBuilder":
        """Set the shape of the oven aperture."""
        self.aperture = aperture
        return self

    def build(self) -> Oven:
        """Create the oven, precalculating its angular distribution."""
        return Oven(
            temperature=self.temperature,
            aperture=self.aperture,
            direction=self.direction.copy(),
            theta_distribution=create_jtheta_distribution(
                self.microchannel_radius, self.microchannel_length
            ),
            max_theta=self.max_theta,
        )