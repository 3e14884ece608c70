import random

import pytest

from coldatoms.sources.mass import MassDistribution, MassRatio


def test_mass_distribution_normalised():
    distribution = MassDistribution([MassRatio(mass=1.0, ratio=10.0), MassRatio(mass=2.0, ratio=1.0)])
    total = sum(entry.ratio for entry in distribution.distribution)
    assert total == pytest.approx(1.0, abs=0.0001)
    assert distribution.normalised is True


def test_normalise_keeps_proportions():
    distribution = MassDistribution([MassRatio(85.0, 3.0), MassRatio(87.0, 1.0)])
    assert distribution.distribution[0].ratio == pytest.approx(0.75)
    assert distribution.distribution[1].ratio == pytest.approx(0.25)


def test_caller_ratios_untouched():
    ratios = [MassRatio(88.0, 4.0)]
    MassDistribution(ratios)
    assert ratios[0].ratio == 4.0


def test_single_mass_always_drawn():
    distribution = MassDistribution([MassRatio(mass=88.0, ratio=1.0)])
    rng = random.Random(1)
    assert {distribution.draw_random_mass(rng) for _ in range(50)} == {88.0}


def test_draw_frequencies_follow_ratios():
    distribution = MassDistribution([MassRatio(85.0, 3.0), MassRatio(87.0, 1.0)])
    rng = random.Random(42)
    draws = [distribution.draw_random_mass(rng) for _ in range(4000)]
    fraction = draws.count(85.0) / len(draws)
    assert 0.7 < fraction < 0.8
    assert set(draws) == {85.0, 87.0}


def test_empty_distribution_gives_zero():
    distribution = MassDistribution([])
    assert distribution.draw_random_mass(random.Random(0)) == 0.0


def test_unnormalised_draw_raises():
    distribution = MassDistribution([MassRatio(88.0, 1.0)])
    distribution.normalised = False
    with pytest.raises(RuntimeError):
        distribution.draw_random_mass(random.Random(0))


def test_zero_total_raises():
    with pytest.raises(ValueError):
        MassDistribution([MassRatio(88.0, 0.0)])