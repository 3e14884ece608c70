import random

from coldatoms.sources.emit import Emission, EmitFixedRate, EmitNumberPerFrame


def test_fixed_rate_emitter():
    rate = 3.3
    emission = Emission(EmitFixedRate(rate))
    rng = random.Random(7)
    n = 1000
    total = 0
    for _ in range(1, n):
        number = emission.update(1.0, rng)
        assert number in (3, 4)
        assert emission.number == number
        total += number
    assert total > int(n * 0.9 * rate)
    assert total < int(n * 1.1 * rate)


def test_fixed_number_emitter():
    emission = Emission(EmitNumberPerFrame(10))
    assert emission.update(1.0e-6, random.Random(0)) == 10
    assert emission.number == 10


def test_whole_rate_is_exact():
    rule = EmitFixedRate(2.0)
    rng = random.Random(3)
    assert [rule.number_to_emit(1.0, rng) for _ in range(20)] == [2] * 20


def test_fixed_rate_scales_with_timestep():
    rule = EmitFixedRate(1.0e6)
    assert rule.number_to_emit(1.0e-5, random.Random(0)) == 10


def test_plain_number_emitted_once():
    emission = Emission(400, once=True)
    assert emission.update(1.0e-6) == 400
    assert emission.update(1.0e-6) == 0
    assert emission.number == 0


def test_plain_number_repeats_without_once():
    emission = Emission(5)
    assert [emission.update(1.0e-6) for _ in range(3)] == [5, 5, 5]


def test_per_frame_rule_recomputed_even_with_once():
    emission = Emission(EmitNumberPerFrame(7), once=True)
    assert emission.update(1.0) == 7
    assert emission.number == 0
    assert emission.update(1.0) == 7


def test_no_rule_emits_nothing():
    assert Emission().update(1.0) == 0