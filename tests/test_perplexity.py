import math

import numpy as np
from scipy.stats import entropy

from sneronoi.core.nearest_neighbors import NearestNeighbors, NeighborEntry
from sneronoi.core.perplexity import calibrate, hbeta, p_j_given_i
from sneronoi.core.point import Point


def test_probabilities_sum_to_one_and_match_target_entropy():
    rng = np.random.default_rng(5)
    points = [Point(float(x), float(y)) for x, y in rng.normal(size=(120, 2))]
    perplexity = 10
    h_target = math.log(perplexity)
    neighbors = NearestNeighbors(points, 30).get_neighbors()
    for i, row in enumerate(neighbors):
        result = calibrate(row, h_target)
        values = np.array([cp.value for cp in result.probabilities])
        assert abs(values.sum() - 1.0) < 1e-4
        assert all(cp.j != i for cp in result.probabilities)
        if result.converged:
            assert abs(entropy(values) - h_target) < 1e-3
        else:
            assert result.tries == 50


def test_order_preserved():
    row = [NeighborEntry(7, 0.5), NeighborEntry(2, 1.0), NeighborEntry(9, 4.0)]
    probabilities = p_j_given_i(row, math.log(2))
    assert [cp.j for cp in probabilities] == [7, 2, 9]
    values = [cp.value for cp in probabilities]
    assert values == sorted(values, reverse=True)


def test_square_scenario():
    points = [Point(0, 0), Point(1, 0), Point(0, 1), Point(1, 1)]
    neighbors = NearestNeighbors(points, 2).get_neighbors()
    for row in neighbors:
        result = calibrate(row, math.log(2))
        assert result.converged
        assert result.tries <= 50
        values = [cp.value for cp in result.probabilities]
        np.testing.assert_allclose(values, [0.5, 0.5], atol=1e-3)
        assert max(values) < 1.0


def test_unreachable_target_stops_at_cap():
    # two neighbors cannot reach the entropy of perplexity 10
    row = [NeighborEntry(1, 1.0), NeighborEntry(2, 2.0)]
    result = calibrate(row, math.log(10))
    assert not result.converged
    assert result.tries == 50
    assert abs(sum(cp.value for cp in result.probabilities) - 1.0) < 1e-9


def test_empty_neighbor_list():
    result = calibrate([], math.log(5))
    assert result.probabilities == []


def test_hbeta_floor_and_underflow():
    H, P = hbeta(np.array([0.0, 1000.0]), 1.0)
    assert H == 0.0
    np.testing.assert_allclose(P, [1.0, 0.0])
    H, P = hbeta(np.array([1e6, 2e6]), 1.0)
    assert H == 0.0
    np.testing.assert_array_equal(P, [0.0, 0.0])
