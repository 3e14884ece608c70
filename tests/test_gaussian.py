import random
import statistics

import numpy as np
import pytest

from coldatoms.sources.gaussian import (
    GaussianVelocitySource,
    create_gaussian_velocity_distribution,
)


def test_distribution_spans_five_standard_deviations():
    mean, std = 10.0, 2.0
    dist = create_gaussian_velocity_distribution(mean, std)
    assert len(dist.values) == 2000
    assert min(dist.values) == pytest.approx(mean - 5.0 * std)
    assert max(dist.values) < mean + 5.0 * std
    assert dist.values[1000] == pytest.approx(mean)


def test_distribution_moments():
    mean, std = 10.0, 2.0
    dist = create_gaussian_velocity_distribution(mean, std)
    rng = random.Random(9)
    samples = [dist.sample(rng) for _ in range(10000)]
    assert statistics.mean(samples) == pytest.approx(mean, abs=0.1 * std)
    assert statistics.pstdev(samples) == pytest.approx(std, rel=0.1)


def test_zero_std_raises():
    with pytest.raises(ValueError):
        create_gaussian_velocity_distribution(1.0, 0.0)


def test_random_velocity_components_follow_means():
    source = GaussianVelocitySource([1.0, -2.0, 3.0], [0.1, 0.1, 0.1])
    rng = random.Random(10)
    velocities = np.array([source.random_velocity(rng) for _ in range(2000)])
    assert velocities.shape == (2000, 3)
    np.testing.assert_allclose(velocities.mean(axis=0), [1.0, -2.0, 3.0], atol=0.02)


def test_create_atoms():
    source = GaussianVelocitySource([0.0, 0.0, 5.0], [1.0, 1.0, 1.0])
    position = np.array([0.1, 0.2, 0.3])
    atoms = source.create_atoms(position, 87.0, 5, random.Random(11))
    assert len(atoms) == 5
    for atom in atoms:
        np.testing.assert_array_equal(atom.position, position)
        np.testing.assert_array_equal(atom.initial_velocity, atom.velocity)
        np.testing.assert_array_equal(atom.force, np.zeros(3))
        assert atom.mass == 87.0
        assert atom.newly_created is True


def test_created_atoms_have_independent_positions():
    source = GaussianVelocitySource([0.0, 0.0, 0.0], [1.0, 1.0, 1.0])
    atoms = source.create_atoms([0.0, 0.0, 0.0], 87.0, 2, random.Random(12))
    atoms[0].position[0] = 1.0
    assert atoms[1].position[0] == 0.0


def test_create_zero_atoms():
    source = GaussianVelocitySource([0.0, 0.0, 0.0], [1.0, 1.0, 1.0])
    assert source.create_atoms([0.0, 0.0, 0.0], 87.0, 0, random.Random(13)) == []


def test_bad_shape_raises():
    with pytest.raises(ValueError):
        GaussianVelocitySource([0.0, 0.0], [1.0, 1.0, 1.0])