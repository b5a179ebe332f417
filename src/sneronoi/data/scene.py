"""
Scene selection: which point cloud to embed and with which presets.

Keep n * groups at or below ~2000 for reasonable performance and results.
"""

import math

from .point_clouds import setup_points_spiral, setup_points_stripes
from .. import config
from ..visualization import color_system

SCENE_TYPES = ['spirals', 'stripes']


class Scene:
    """
    A generated input together with everything needed to embed and draw it.

    Attributes:
        type (str): 'spirals' or 'stripes'
        groups (int): number of arms/stripes
        n (int): points per group
        perplexity (float)
        sd (float): input noise
        palette (str): palette key
        distortion (float): palette distortion exponent b
        points (list): generated Point objects
    """

    def __init__(self, type, groups, n, perplexity, sd, palette, distortion, points):
        self.type = type
        self.groups = groups
        self.n = n
        self.perplexity = perplexity
        self.sd = sd
        self.palette = palette
        self.distortion = distortion
        self.points = points

    @property
    def npoints(self):
        return self.groups * self.n

    @property
    def resolution(self):
        return point_density(self.npoints)

    def tsne_config(self, **overrides):
        """Optimizer config for this scene."""
        cfg = dict(config.SCENE_TSNE_CONFIG)
        cfg['perplexity'] = self.perplexity
        cfg.update(overrides)
        return cfg

    def features(self):
        return {
            "Color palette": color_system.get_palette_name(self.palette),
            "Input data": self.type,
            "Perplexity": self.perplexity,
            "Noise": self.sd,
            "Point density": self.resolution,
        }

    def report(self):
        """Print the scene parameters."""
        print("Color palette:", color_system.get_palette_name(self.palette))
        print("Palette distortion:", self.distortion)
        print("Input data:", self.type)
        print("Number of groups:", self.groups)
        print("Number of points / group:", self.n)
        print("Point density:", self.resolution)
        print("Perplexity:", self.perplexity)
        print("Noise:", self.sd)


def point_density(npoints):
    """'low' below 700 points, 'medium' below 1500, 'high' otherwise."""
    if npoints < 700:
        return 'low'
    if npoints < 1500:
        return 'medium'
    return 'high'


def choose_scene(rnd, type=None, groups=None, n=None, perplexity=None, sd=None, palette=None):
    """
    Draw a scene from the presets. Any argument given explicitly overrides
    the random choice; the random draws happen regardless so a seed always
    consumes the same sequence.
    """
    drawn_type = rnd.choose_one_weighted(SCENE_TYPES, [config.SPIRAL_WEIGHT, config.STRIPE_WEIGHT])
    type = drawn_type if type is None else type
    if type not in SCENE_TYPES:
        raise ValueError(f"Unknown scene type: {type!r}")

    drawn_groups = int(math.floor(rnd.r_unif(*config.GROUPS_RANGE)))
    groups = drawn_groups if groups is None else groups
    if groups < 1:
        raise ValueError("groups must be at least 1")
    if type == 'spirals':
        drawn_total = rnd.choose_one(config.SPIRAL_TOTALS)
        drawn_n = drawn_total // groups
        drawn_perplexity = rnd.choose_one(config.SPIRAL_PERPLEXITIES)
        drawn_sd = rnd.choose_one(config.SPIRAL_NOISE)
    else:
        drawn_n = int(math.floor(rnd.r_unif(*config.STRIPE_N_RANGE)))
        drawn_perplexity = rnd.choose_one(config.STRIPE_PERPLEXITIES)
        drawn_sd = rnd.choose_one(config.STRIPE_NOISE)

    n = drawn_n if n is None else n
    if n < 1:
        raise ValueError("n must be at least 1")
    perplexity = drawn_perplexity if perplexity is None else perplexity
    if perplexity <= 0:
        raise ValueError("perplexity must be positive")
    sd = drawn_sd if sd is None else sd

    if type == 'spirals':
        points = setup_points_spiral(rnd, groups, n, sd)
    else:
        points = setup_points_stripes(rnd, groups, n, sd)

    drawn_palette = rnd.choose_one(color_system.available_palettes())
    palette = drawn_palette if palette is None else palette
    if palette not in color_system.PALETTES:
        raise ValueError(f"Unknown palette: {palette!r}")
    distortion = math.floor(100 * math.pow(2, rnd.r_unif(-1, 1)) + .5) / 100

    return Scene(type, groups, n, perplexity, sd, palette, distortion, points)
