# tests/sim/test_rng_registry.py
import numpy as np

from minride_data.sim.rng import RNGKey, RNGRegistry, round1, uniform_float, uniform_int


def test_named_streams_are_deterministic():
    reg1 = RNGRegistry(123)
    reg2 = RNGRegistry(123)
    a1 = reg1.stream("drivers").random(5)
    a2 = reg2.stream("drivers").random(5)
    assert np.allclose(a1, a2)


def test_streams_are_independent():
    reg = RNGRegistry(123)
    a = reg.stream("drivers").random(5)
    b = reg.stream("rides").random(5)
    assert not np.allclose(a, b)


def test_stream_is_cached_per_registry():
    reg = RNGRegistry(7)
    assert reg.stream("customers") is reg.stream("customers")


def test_different_seeds_differ():
    a = RNGRegistry(1).stream("drivers").random(10)
    b = RNGRegistry(2).stream("drivers").random(10)
    assert not np.allclose(a, b)


def test_wall_clock_sized_seed_is_accepted():
    reg = RNGRegistry(1_760_000_000_123_456_789)
    assert 0.0 <= reg.stream("drivers").random() < 1.0


def test_uniform_int_is_inclusive_on_both_ends():
    rng = RNGRegistry(5).stream("ints")
    draws = {uniform_int(rng, 1, 3) for _ in range(500)}
    assert draws == {1, 2, 3}
    assert all(isinstance(x, int) for x in draws)


def test_uniform_int_degenerate_range():
    rng = RNGRegistry(5).stream("ints")
    assert uniform_int(rng, 4, 4) == 4


def test_uniform_float_is_half_open():
    rng = RNGRegistry(5).stream("floats")
    draws = [uniform_float(rng, 2.0, 12.0) for _ in range(1000)]
    assert all(2.0 <= x < 12.0 for x in draws)
    assert all(isinstance(x, float) for x in draws)


def test_round1_rounds_halves_away_from_zero():
    assert round1(0.25) == 0.3  # built-in round() gives 0.2
    assert round1(4.45) == 4.5
    assert round1(-0.25) == -0.3
    assert round1(3.14) == 3.1
    assert round1(9.96) == 10.0
    assert round1(0.0) == 0.0


def test_stream_key_is_the_name_alone():
    assert RNGKey("rides") == RNGKey("rides")
    assert RNGKey("rides").entropy == RNGKey("rides").entropy
    assert RNGKey("rides").entropy != RNGKey("drivers").entropy
    reg = RNGRegistry(11)
    assert reg.generator(RNGKey("rides")) is reg.stream("rides")
