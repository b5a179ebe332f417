import pytest

from sneronoi.core.rng import SeededRandom, seed_to_int


def test_same_seed_same_sequence():
    a = SeededRandom(42)
    b = SeededRandom(42)
    assert [a.r_norm(0, 1) for _ in range(5)] == [b.r_norm(0, 1) for _ in range(5)]
    assert [a.r_unif(2, 3) for _ in range(5)] == [b.r_unif(2, 3) for _ in range(5)]


def test_string_seeds():
    assert seed_to_int('ooabc') == seed_to_int('ooabc')
    assert seed_to_int('ooabc') != seed_to_int('ooabd')
    assert SeededRandom('ooabc').r_unif() == SeededRandom('ooabc').r_unif()


def test_random_seed_is_reported(capsys):
    rnd = SeededRandom(quiet=False)
    assert isinstance(rnd.seed, str)
    assert rnd.seed in capsys.readouterr().out


def test_ranges():
    rnd = SeededRandom(1)
    for _ in range(200):
        assert 5 <= rnd.r_unif(5, 6) < 6
    assert rnd.r_norm(3.0, 0) == 3.0


def test_zero_sd_still_consumes_a_draw():
    a = SeededRandom(4)
    b = SeededRandom(4)
    assert a.r_norm(1.5, 0) == 1.5
    b.r_norm(1.5, 0.3)
    assert a.r_unif() == b.r_unif()


def test_choose_one():
    rnd = SeededRandom(2)
    seq = ['a', 'b', 'c']
    picks = {rnd.choose_one(seq) for _ in range(100)}
    assert picks == set(seq)
    with pytest.raises(ValueError):
        rnd.choose_one([])


def test_choose_one_weighted():
    rnd = SeededRandom(3)
    picks = [rnd.choose_one_weighted(['x', 'y'], [1, 0]) for _ in range(50)]
    assert set(picks) == {'x'}
    with pytest.raises(ValueError):
        rnd.choose_one_weighted(['x', 'y'], [0, 0])
    with pytest.raises(ValueError):
        rnd.choose_one_weighted(['x', 'y'], [1])
