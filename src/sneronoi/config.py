"""
Configuration module for sneronoi.

This module contains global constants, default parameters, and configuration
settings used throughout the t-SNE optimizer, the scene generators and the
Voronoi renderer.
"""

import math

# t-SNE optimizer defaults (overridable per TSNE instance)
DEFAULT_PERPLEXITY = 10.0
DEFAULT_EARLY_EXAGGERATION = 4.0
DEFAULT_LEARNING_RATE = 10.0
DEFAULT_MAX_ITER = 1000  # advisory only, the caller owns the step loop
DEFAULT_NEIGHBORHOOD_MULTIPLIER = 3
DEFAULT_THETA = 0.5  # Barnes-Hut opening angle
# Number of points above which Barnes-Hut beats the quadratic method.
# Depends on theta (larger theta: faster, less accurate)
DEFAULT_BARNES_HUT_CUTOFF = 2000

# Optimization schedule
EXAGGERATION_ITERS = 100      # early exaggeration is applied while current_iter < this
MOMENTUM_SWITCH_ITER = 250
INITIAL_MOMENTUM = 0.5
FINAL_MOMENTUM = 0.8
# Gain update: shrink when gradient and previous step agree in sign, grow otherwise
GAIN_DECAY = 0.8
GAIN_INCREMENT = 0.2
MIN_GAIN = 0.01
GRADIENT_SCALE = 4.0          # from the derivative of the KL cost
INITIAL_SOLUTION_SD = 1e-4

# Perplexity calibration
PERPLEXITY_TOLERANCE = 1e-4
PERPLEXITY_MAX_TRIES = 50
PROBABILITY_FLOOR = 1e-7      # probabilities at or below this add nothing to the entropy

# Quadtree root is sized to this multiple of the largest absolute coordinate
ENCLOSING_MARGIN = 1.1

# Progress reporting
CALIBRATION_LOG_EVERY = 500   # points
LOG_EVERY = 50                # iterations

# Driver defaults
WARMUP_STEPS = 30             # steps taken before the first frame is drawn
DEFAULT_STEPS = 500
MIN_STEPS = 200
FRAME_INTERVAL = 0            # milliseconds between animation frames

# Rendering
CANVAS_SIZE = 6               # inches, square
DPI = 100
PNG_SIZE_PX = 4000
CELL_LINEWIDTH = 1.0
# Guard points placed this far outside [-1, 1] keep every Voronoi cell finite
VORONOI_GUARD_DISTANCE = 10.0

# Scene presets
SPIRAL_WEIGHT = 5
STRIPE_WEIGHT = 3
GROUPS_RANGE = (50, 101)      # half-open, as drawn by r_unif
SPIRAL_TOTALS = [1400, 1600, 1800, 2000, 2200]
SPIRAL_PERPLEXITIES = [5, 10, 20, 30]
SPIRAL_NOISE = [0, 0.001, 0.002, 0.003, 0.004, 0.01, 0.02]
STRIPE_N_RANGE = (5, 16)
STRIPE_PERPLEXITIES = [3, 5, 10, 20]
STRIPE_NOISE = [0.02, 0.1, 0.2, 0.4]
SCENE_TSNE_CONFIG = {
    'learning_rate': 10,
    'theta': 0.8,
    'barnes_hut_cutoff': 4500,
}


def target_entropy(perplexity):
    """Entropy (natural log) a calibrated neighbor distribution should reach."""
    return math.log(perplexity)
