import matplotlib.pyplot as plt
import numpy as np
import pytest
from matplotlib.path import Path

from sneronoi import config
from sneronoi.core.point import Point
from sneronoi.visualization import color_system, voronoi_render


def test_scale_coords_range():
    solution = np.array([[2.0, -1.0], [4.0, 3.0], [3.0, 1.0]])
    scaled = voronoi_render.scale_coords(solution)
    np.testing.assert_allclose(scaled, [[-1.0, -1.0], [1.0, 1.0], [0.0, 0.0]])


def test_scale_coords_points_and_flat_axis():
    scaled = voronoi_render.scale_coords([Point(0.0, 5.0), Point(2.0, 5.0)])
    np.testing.assert_allclose(scaled, [[-1.0, 0.0], [1.0, 0.0]])
    assert voronoi_render.scale_coords([]).shape == (0, 2)


def test_each_cell_contains_its_point():
    coords = np.random.default_rng(0).uniform(-1, 1, size=(40, 2))
    cells = voronoi_render.voronoi_cells(coords)
    assert len(cells) == 40
    for point, cell in zip(coords, cells):
        assert len(cell) >= 3
        assert Path(cell).contains_point(point)


def test_duplicate_points_keep_alignment():
    coords = np.array([[0.0, 0.0], [0.5, 0.5], [0.5, 0.5], [-0.5, 0.2]])
    cells = voronoi_render.voronoi_cells(coords)
    assert len(cells) == 4
    assert Path(cells[0]).contains_point(coords[0])
    np.testing.assert_array_equal(cells[1], cells[2])
    assert Path(cells[1]).contains_point(coords[1])


def test_available_palettes():
    palettes = color_system.available_palettes()
    assert len(palettes) == 11
    assert palettes == sorted(palettes)
    assert color_system.get_palette_name('slot_canyon2') == 'Slot Canyon 2'


def test_colormap_endpoints_and_distortion():
    f = color_system.get_colormap('monochrome')
    assert f(0.0) == '#ffffff'
    assert f(1.0) == '#ffffff'
    # the middle stop is black
    assert int(f(0.5)[1:3], 16) < 8
    assert f(-0.2) == '#ffffff'
    g = color_system.get_colormap('monochrome', b=2.0)
    # 0.5 ** 2 lands a quarter of the way along the palette
    assert g(0.5) == f(0.25)


def test_point_colors():
    colors = color_system.point_colors(color_system.get_colormap('sunset'), 10)
    assert len(colors) == 10
    assert all(c.startswith('#') and len(c) == 7 for c in colors)
    assert colors[0] == color_system.get_colormap('sunset')(0.0)


def test_render_and_save(tmp_path):
    coords = np.random.default_rng(1).normal(size=(30, 2))
    colors = color_system.point_colors(color_system.get_colormap('forest'), 30)
    fig, ax, cells = voronoi_render.draw_solution(coords, colors)
    assert len(cells.get_paths()) == 30
    assert ax.get_xlim() == (-1.0, 1.0)

    voronoi_render.update_voronoi(cells, voronoi_render.scale_coords(coords[::-1]))
    assert len(cells.get_paths()) == 30

    svg = tmp_path / "out.svg"
    png = tmp_path / "out.png"
    voronoi_render.save_svg(fig, svg)
    voronoi_render.save_png(fig, png, size_px=120)
    assert svg.read_text().lstrip().startswith('<?xml')
    assert png.read_bytes()[:8] == b'\x89PNG\r\n\x1a\n'
    plt.close(fig)
    image = plt.imread(png)
    assert image.shape[:2] == (120, 120)


@pytest.mark.parametrize('palette', color_system.available_palettes())
def test_every_palette_builds(palette):
    assert color_system.get_colormap(palette)(0.3).startswith('#')


def test_figure_uses_configured_dpi():
    fig, ax = voronoi_render.make_figure()
    assert fig.get_dpi() == config.DPI
    assert tuple(fig.get_size_inches()) == (config.CANVAS_SIZE, config.CANVAS_SIZE)
    plt.close(fig)
