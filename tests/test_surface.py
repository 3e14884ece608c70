import random

import numpy as np
import pytest

from coldatoms.sources.mass import MassDistribution, MassRatio
from coldatoms.sources.precalc import PrecalculatedSpeciesInformation
from coldatoms.sources.surface import SurfaceSource, lambert_emission_direction


@pytest.fixture(scope="module")
def source():
    return SurfaceSource(temperature=450.0)


@pytest.fixture(scope="module")
def precalculated(source):
    return PrecalculatedSpeciesInformation(
        source.temperature,
        MassDistribution([MassRatio(mass=87.0, ratio=1.0)]),
        source.v_dist_power,
    )


def test_lambert_direction_points_away_from_normal():
    rng = random.Random(1)
    normal = np.array([0.0, 0.0, 2.0])
    inward = np.array([0.0, 0.0, -1.0])
    for _ in range(500):
        direction = lambert_emission_direction(normal, rng)
        assert np.dot(direction, inward) >= -1e-12
        assert np.linalg.norm(direction) <= 1.0 + 1e-12


def test_lambert_direction_covers_both_angle_domains():
    rng = random.Random(2)
    inward = np.array([-1.0, 0.0, 0.0])
    cosines = []
    for _ in range(500):
        direction = lambert_emission_direction([1.0, 0.0, 0.0], rng)
        cosines.append(np.dot(direction, inward))
    assert max(cosines) > 0.9
    assert min(cosines) < 0.6


def test_surface_power(source):
    assert source.v_dist_power == 2.0
    assert source.temperature == 450.0


def test_create_atoms_one_per_point(source, precalculated):
    rng = random.Random(3)
    points = [
        ([0.01, 0.0, z], [1.0, 0.0, 0.0]) for z in np.linspace(-0.01, 0.01, 20)
    ]
    atoms = source.create_atoms(points, precalculated, rng)
    assert len(atoms) == len(points)
    for atom, (position, normal) in zip(atoms, points):
        np.testing.assert_array_equal(atom.position, position)
        assert np.dot(atom.velocity, normal) <= 1e-9
        assert atom.mass == 87.0
        assert atom.newly_created
        np.testing.assert_array_equal(atom.initial_velocity, atom.velocity)


def test_create_atoms_respects_speed_cap(source, precalculated):
    rng = random.Random(4)
    points = [([0.0, 0.0, 0.0], [0.0, 1.0, 0.0])] * 50
    assert source.create_atoms(points, precalculated, rng, max_speed=0.0) == []
    capped = source.create_atoms(points, precalculated, rng, max_speed=200.0)
    assert len(capped) <= 50
    assert all(np.linalg.norm(a.velocity) <= 200.0 + 1e-9 for a in capped)


def test_create_atoms_empty_surface(source, precalculated):
    assert source.create_atoms([], precalculated, random.Random(5)) == []