import math

import pytest

from sneronoi.core.point import Point
from sneronoi.core.rng import SeededRandom
from sneronoi.data.point_clouds import (gaussian_clusters, setup_points_spiral,
                                        setup_points_stripes)
from sneronoi.data.scene import choose_scene, point_density
from sneronoi.visualization import color_system


def test_stripes_without_noise():
    points = setup_points_stripes(SeededRandom(0), groups=3, n=4, sd=0.0)
    assert len(points) == 12
    assert points[0] == Point(0.0, 0.0)
    assert points[3] == Point(7.5, 0.0)
    assert points[4] == Point(0.0, 1.0)
    assert points[11] == Point(7.5, 2.0)


def test_spiral_without_noise():
    points = setup_points_spiral(SeededRandom(0), groups=4, n=20, sd=0.0)
    assert len(points) == 80
    # the last point of every arm lies on the unit circle
    for arm in range(4):
        last = points[arm * 20 + 19]
        assert math.hypot(last.x, last.y) == pytest.approx(1.0)
    first = points[0]
    assert math.hypot(first.x, first.y) == pytest.approx((3 / 5) ** 2.5)
    with pytest.raises(ValueError):
        setup_points_spiral(SeededRandom(0), groups=2, n=1)


def test_generators_are_seeded():
    a = setup_points_spiral(SeededRandom('s'), groups=3, n=10, sd=0.01)
    b = setup_points_spiral(SeededRandom('s'), groups=3, n=10, sd=0.01)
    assert a == b


def test_gaussian_clusters():
    points = gaussian_clusters(SeededRandom(1), [(-5, 0), (5, 0)], 30, 0.01)
    assert len(points) == 60
    assert all(abs(p.x + 5) < 0.1 for p in points[:30])
    assert all(abs(p.x - 5) < 0.1 for p in points[30:])


def test_point_density():
    assert point_density(699) == 'low'
    assert point_density(700) == 'medium'
    assert point_density(1499) == 'medium'
    assert point_density(1500) == 'high'
    assert point_density(2200) == 'high'


def test_random_scene_is_within_presets():
    for seed in range(10):
        scene = choose_scene(SeededRandom(seed))
        assert scene.type in ('spirals', 'stripes')
        assert 50 <= scene.groups <= 100
        assert len(scene.points) == scene.npoints == scene.groups * scene.n
        assert scene.palette in color_system.PALETTES
        assert 0.5 <= scene.distortion <= 2.0
        if scene.type == 'spirals':
            assert scene.perplexity in (5, 10, 20, 30)
            assert scene.npoints <= 2200
        else:
            assert scene.perplexity in (3, 5, 10, 20)
            assert 5 <= scene.n <= 15


def test_scene_overrides_and_config():
    scene = choose_scene(SeededRandom(5), type='stripes', groups=4, n=6, perplexity=3, sd=0.0,
                         palette='glacier')
    assert (scene.type, scene.groups, scene.n, scene.perplexity, scene.sd) == ('stripes', 4, 6, 3, 0.0)
    assert scene.points[7] == Point(10 / 6, 1.0)
    cfg = scene.tsne_config(max_iter=300)
    assert cfg == {'learning_rate': 10, 'theta': 0.8, 'barnes_hut_cutoff': 4500,
                   'perplexity': 3, 'max_iter': 300}
    features = scene.features()
    assert features["Color palette"] == 'Glacier'
    assert features["Point density"] == 'low'


def test_scene_rejects_unknown_values():
    with pytest.raises(ValueError):
        choose_scene(SeededRandom(0), type='circles')
    with pytest.raises(ValueError):
        choose_scene(SeededRandom(0), palette='neon')


@pytest.mark.parametrize('override', [{'groups': 0}, {'n': 0}, {'perplexity': 0}, {'groups': -3}])
def test_scene_rejects_non_positive_overrides(override):
    with pytest.raises(ValueError):
        choose_scene(SeededRandom(0), type='stripes', **override)


def test_noise_override_keeps_the_random_sequence():
    quiet = choose_scene(SeededRandom(7), type='stripes', groups=50, n=10, sd=0.0)
    noisy = choose_scene(SeededRandom(7), type='stripes', groups=50, n=10, sd=0.1)
    assert quiet.palette == noisy.palette
    assert quiet.distortion == noisy.distortion


def test_scene_report(capsys):
    choose_scene(SeededRandom(1), type='spirals', groups=50, n=4).report()
    out = capsys.readouterr().out
    assert "Input data: spirals" in out
    assert "Number of points / group: 4" in out
